#!/usr/bin/env python3

# Copyright (c) 2026 vitality contributors
# SPDX-License-Identifier: ISC

"""
Generates a Vim script that sets up focus events and cursor shapes for the
terminal this runs in.

Sample usage:

  $ vitality-vimrc > ~/.vim/plugin/vitality.vim

  $ vitality-vimrc --insert-cursor 2 --no-fix-focus

The terminal is detected from the environment when the script is generated
(ITERM_PROFILE, TERM_PROGRAM, MINTTY_SHORTCUT and TMUX), so generate it in the
terminal (and tmux session, if any) Vim will run in. The --assume-* options
override detection.

On an unsupported terminal, a warning is printed and no script is generated.
The exit status is 0 in that case too.

--dump prints the composed escape sequences instead of a script.
"""

import argparse
import sys

import vitality

# Focus handling for each mode, as {mode: (prefix, suffix)} keystrokes around
# the :doautocmd command. Mirrors the handlers in vitality.FocusBridge.
_MAP_KEYS = {
    vitality.NORMAL_MODE: ("", ""),
    vitality.OPERATOR_MODE: ("<esc>", ""),
    vitality.VISUAL_MODE: ("<esc>", "gv"),
    vitality.INSERT_MODE: ("<c-\\><c-o>", ""),
}

_CMD_FUNCTION = "VitalityCmdFocus"

# Command-line mode can't run a command without losing the edit, so the
# autocommand fires from an expression that also returns the command line
_CMD_FUNCTION_DEF = """\
function! s:{name}(event) abort
  let cmd = getcmdline()
  let pos = getcmdpos()
  try
    execute 'silent doautocmd <nomodeline> ' . a:event . ' %'
  finally
    call setcmdpos(pos)
  endtry
  return cmd
endfunction"""


def vim_string(s):
    """
    Returns 's' as a double-quoted Vim string literal. ESC becomes \\e, other
    control characters become \\x.. escapes.
    """
    res = []
    for ch in s:
        if ch == "\x1b":
            res.append("\\e")
        elif ch == "\\":
            res.append("\\\\")
        elif ch == '"':
            res.append('\\"')
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            res.append(f"\\x{ord(ch):02x}")
        else:
            res.append(ch)
    return '"' + "".join(res) + '"'


class ScriptEditor(vitality.Editor):
    """
    Editor that records what vitality.activate() does as Vim script lines.

    Only the setup side of the Editor interface is available. The focus
    handlers run inside Vim, as the mappings generated by map().
    """

    def __init__(self, vars=None):
        # 'vars' holds g: variables as seen by Config.from_editor()
        self._vars = dict(vars or {})
        self._lines = []
        self._cmd_function_defined = False

    def has_gui(self):
        # Checked by the generated script itself
        return False

    def get_var(self, name):
        return self._vars.get(name)

    def set_var(self, name, value):
        self._vars[name] = value
        if isinstance(value, str):
            value = vim_string(value)
        self._lines.append(f"let g:{name} = {value}")

    def get_option(self, name):
        # Unknown until Vim runs the script
        return ""

    def set_option(self, name, value):
        self._lines.append(f"let &{name} = {vim_string(value)}")

    def prepend_option(self, name, value):
        lit = vim_string(value)
        self._lines.append(f"if stridx(&{name}, {lit}) != 0")
        self._lines.append(f"  let &{name} = {lit} . &{name}")
        self._lines.append("endif")

    def set_keycode(self, key, seq):
        # :set <key>=... needs the raw bytes, hence :execute with a string
        # literal
        self._lines.append(f"execute {vim_string(f'set {key}=' + seq)}")

    def map(self, binding):
        if binding.expr:
            self._define_cmd_function()
            self._lines.append(
                f"{binding.mode}noremap <silent> {binding.lhs} "
                f"<c-\\>e<SID>{_CMD_FUNCTION}('{binding.event}')<cr>"
            )
            return

        prefix, suffix = _MAP_KEYS[binding.mode]
        self._lines.append(
            f"{binding.mode}noremap <silent> {binding.lhs} "
            f"{prefix}:silent doautocmd <nomodeline> {binding.event} %<cr>{suffix}"
        )

    def _define_cmd_function(self):
        if not self._cmd_function_defined:
            self._lines.append(_CMD_FUNCTION_DEF.format(name=_CMD_FUNCTION))
            self._cmd_function_defined = True

    @property
    def lines(self):
        return list(self._lines)

    def render(self, header=None):
        """
        Returns the complete script: optional comment 'header', a guard
        against loading twice or in the GUI, and the recorded lines.
        """
        res = []
        if header:
            res.extend('" ' + line for line in header.splitlines())
        res.append(f"if exists('g:{vitality.LOADED_VAR}') || has('gui_running')")
        res.append("  finish")
        res.append("endif")
        res.extend(self._lines)
        return "\n".join(res) + "\n"


_KIND_NAMES = {
    vitality.TerminalKind.ITERM: "iTerm2",
    vitality.TerminalKind.MINTTY: "mintty",
    vitality.TerminalKind.TERMINAL_APP: "Terminal.app",
    vitality.TerminalKind.UNSUPPORTED: "unsupported terminal",
}


def describe(detection):
    """Returns a human-readable name for a Detection."""
    name = _KIND_NAMES[detection.kind]
    if detection.multiplexer:
        name += " (inside tmux)"
    return name


def generate(config=vitality.DEFAULT_CONFIG, environ=None):
    """
    Returns the Vim script for 'config' and the detected terminal, or None if
    the terminal is unsupported.
    """
    detection = vitality.detect(config, environ)
    editor = ScriptEditor()
    if not vitality.activate(editor, config, environ):
        return None
    return editor.render(f"Generated by vitality-vimrc for {describe(detection)}")


def dump(config=vitality.DEFAULT_CONFIG, environ=None):
    """
    Returns the composed sequences as "slot: repr" lines, or None if the
    terminal is unsupported.
    """
    detection, sequences = vitality.compose(config, environ)
    if detection.kind is vitality.TerminalKind.UNSUPPORTED:
        return None

    res = [f"terminal: {describe(detection)}"]
    for slot, seq in zip(sequences._fields, sequences):
        res.append(f"{slot}: {seq!r}")
    return "\n".join(res) + "\n"


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter, description=__doc__
    )

    vitality.add_config_arguments(parser)

    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the composed escape sequences instead of a Vim script",
    )

    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write to FILE instead of stdout",
    )

    args = parser.parse_args()

    config = vitality.config_from_args(args)
    if args.dump:
        res = dump(config)
    else:
        res = generate(config)

    if res is None:
        vitality._warn(
            "no supported terminal detected (use --assume-iterm, "
            "--assume-mintty or --assume-terminal-app to force one)",
            prog="vitality-vimrc",
        )
        return

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(res)
        except OSError as e:
            sys.exit(f"error: couldn't write '{args.output}': {e.strerror}")
    else:
        sys.stdout.write(res)


if __name__ == "__main__":
    main()
