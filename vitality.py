# Copyright (c) 2026 vitality contributors
# SPDX-License-Identifier: ISC

"""
vitality -- focus events and cursor shapes for terminal Vim

Makes a terminal editor cooperate with iTerm2, mintty and Terminal.app (with or
without tmux in between) on two things the editor does not do by itself:

  - FocusLost/FocusGained autocommands, driven by the terminal's focus
    reporting mode (DEC private mode 1004)

  - a different cursor shape in insert mode than in normal mode

The library never talks to an editor directly. Everything goes through an
Editor object (see the Editor class), which a host implements on top of its
variables, options, mappings and autocommands. vimscript.py renders the same
actions as a Vim script.

Typical use:

  import vitality

  if vitality.activate(editor):
      print("vitality active")

activate() is a no-op in a GUI, on an unsupported terminal, and on an editor
where vitality is already active.
"""

import collections
import contextlib
import enum
import os
import re
import sys

# ---------------------------------------------------------------------------
# Public constants
# ---------------------------------------------------------------------------

ESC = "\x1b"
BEL = "\x07"

# Names of the editor options holding the terminal start/exit and insert
# enter/leave strings
START_OPTION = "t_ti"
EXIT_OPTION = "t_te"
INSERT_ENTER_OPTION = "t_SI"
INSERT_LEAVE_OPTION = "t_EI"

# Set on the editor once activate() has installed everything
LOADED_VAR = "loaded_vitality"

FOCUS_LOST = "FocusLost"
FOCUS_GAINED = "FocusGained"

# Modes the focus bridge binds in, as used by :map commands
NORMAL_MODE = "n"
OPERATOR_MODE = "o"
VISUAL_MODE = "v"
INSERT_MODE = "i"
CMDLINE_MODE = "c"

BRIDGE_MODES = (NORMAL_MODE, OPERATOR_MODE, VISUAL_MODE, INSERT_MODE, CMDLINE_MODE)

# tmux DCS pass-through envelope
TMUX_START = ESC + "Ptmux;"
TMUX_END = ESC + "\\"


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


class TerminalKind(enum.Enum):
    """Terminal emulators vitality knows how to talk to."""

    ITERM = "iterm"
    MINTTY = "mintty"
    TERMINAL_APP = "terminal_app"
    UNSUPPORTED = "unsupported"


class CursorShape(enum.IntEnum):
    """Cursor shapes. The values are the g:vitality_*_cursor selectors."""

    BLOCK = 0
    BAR = 1
    UNDERLINE = 2


class ScreenBuffer(enum.Enum):
    SAVE = "save"
    RESTORE = "restore"


_CONFIG_FIELDS = (
    "fix_cursor",
    "fix_focus",
    "normal_cursor",
    "insert_cursor",
    "assume_iterm",
    "assume_mintty",
    "assume_terminal_app",
    "focus_lost_key",
    "focus_gained_key",
)


class Config(collections.namedtuple("Config", _CONFIG_FIELDS)):
    """
    Immutable vitality settings. Build one at start-up and pass it to
    activate() (or let activate() read it from the editor's variables).

    fix_cursor:
      Switch the cursor shape on insert mode enter/leave.

    fix_focus:
      Enable focus reporting and fire FocusLost/FocusGained.

    normal_cursor, insert_cursor:
      CursorShape used outside and inside insert mode.

    assume_iterm, assume_mintty, assume_terminal_app:
      Treat the terminal as the given emulator even if the environment says
      otherwise.

    focus_lost_key, focus_gained_key:
      Spare editor keycodes that the focus byte sequences are assigned to.
      Vim has unused function keys up to <f37>.
    """

    __slots__ = ()

    def __new__(
        cls,
        fix_cursor=True,
        fix_focus=True,
        normal_cursor=CursorShape.BLOCK,
        insert_cursor=CursorShape.BAR,
        assume_iterm=False,
        assume_mintty=False,
        assume_terminal_app=False,
        focus_lost_key="<f24>",
        focus_gained_key="<f25>",
    ):
        return super().__new__(
            cls,
            bool(fix_cursor),
            bool(fix_focus),
            CursorShape(normal_cursor),
            CursorShape(insert_cursor),
            bool(assume_iterm),
            bool(assume_mintty),
            bool(assume_terminal_app),
            focus_lost_key,
            focus_gained_key,
        )

    @classmethod
    def from_editor(cls, editor, warn=True):
        """
        Reads the g:vitality_* variables from 'editor'. Unset variables get
        their defaults. A cursor selector outside 0..2 is warned about and
        ignored.
        """

        def flag(name, default):
            val = editor.get_var("vitality_" + name)
            if val is None:
                return default
            return _truthy(val)

        return cls(
            fix_cursor=flag("fix_cursor", True),
            fix_focus=flag("fix_focus", True),
            normal_cursor=_parse_shape(
                editor.get_var("vitality_normal_cursor"),
                CursorShape.BLOCK,
                "g:vitality_normal_cursor",
                warn,
            ),
            insert_cursor=_parse_shape(
                editor.get_var("vitality_insert_cursor"),
                CursorShape.BAR,
                "g:vitality_insert_cursor",
                warn,
            ),
            assume_iterm=flag("always_assume_iterm", False),
            assume_mintty=flag("always_assume_mintty", False),
            assume_terminal_app=flag("always_assume_terminal_app", False),
            focus_lost_key=editor.get_var("vitality_focus_lost_key") or "<f24>",
            focus_gained_key=editor.get_var("vitality_focus_gained_key") or "<f25>",
        )


DEFAULT_CONFIG = Config()

# Leading number of a string, as Vim reads it ("0x1f" is hex)
_NUMBER_PREFIX_RE = re.compile(r"-?(?:0[xX]([0-9a-fA-F]+)|(\d+))")


def _truthy(val):
    # Vim's string-to-number rule: the leading number counts, a string
    # without one is 0 ("no" and "" are false, "1abc" is true)

    if isinstance(val, str):
        match = _NUMBER_PREFIX_RE.match(val)
        if not match:
            return False
        hex_digits, digits = match.groups()
        if hex_digits is not None:
            return int(hex_digits, 16) != 0
        return int(digits) != 0
    return bool(val)


def _parse_shape(val, default, name, warn):
    # Returns the CursorShape for the selector 'val', or 'default' if it is
    # unset or invalid

    if val is None:
        return default

    try:
        n = int(val)
    except (TypeError, ValueError):
        if warn:
            _warn(f"Ignoring {name} value '{val}' that isn't a number")
        return default

    if not 0 <= n <= 2:
        if warn:
            _warn(f"Ignoring cursor shape {n} for {name} outside range 0..2")
        return default

    return CursorShape(n)


def _warn(*args, prog="vitality"):
    # Warnings go to stderr, prefixed with the program name. They are never
    # fatal.

    print(f"{prog} warning: ", end="", file=sys.stderr)
    print(*args, file=sys.stderr)


# ---------------------------------------------------------------------------
# Terminal identification
# ---------------------------------------------------------------------------


Detection = collections.namedtuple("Detection", ("kind", "multiplexer"))

# Detections of os.environ, keyed by the assume_* overrides
_detection_cache = {}


def identify(config=DEFAULT_CONFIG, environ=None):
    """
    Classifies the terminal vitality runs in from the environment, honoring
    the config's assume_* overrides. Returns a TerminalKind, UNSUPPORTED if
    nothing matches.
    """
    if environ is None:
        environ = os.environ

    if config.assume_iterm or "ITERM_PROFILE" in environ:
        return TerminalKind.ITERM

    term_program = environ.get("TERM_PROGRAM", "")

    # mintty sets TERM_PROGRAM since 2.7; MINTTY_SHORTCUT covers older
    # versions started from a Windows shortcut
    if (
        config.assume_mintty
        or "MINTTY_SHORTCUT" in environ
        or term_program == "mintty"
    ):
        return TerminalKind.MINTTY

    if config.assume_terminal_app or term_program == "Apple_Terminal":
        return TerminalKind.TERMINAL_APP

    return TerminalKind.UNSUPPORTED


def has_multiplexer(environ=None):
    """True if running inside tmux."""
    if environ is None:
        environ = os.environ
    return "TMUX" in environ


def detect(config=DEFAULT_CONFIG, environ=None):
    """
    Returns a Detection(kind, multiplexer) for the terminal.

    Detection of the process environment (environ=None) happens once per
    combination of assume_* overrides and is cached for the lifetime of the
    process. Pass an explicit 'environ' mapping to bypass the cache.
    """
    if environ is not None:
        return Detection(identify(config, environ), has_multiplexer(environ))

    key = (config.assume_iterm, config.assume_mintty, config.assume_terminal_app)
    if key not in _detection_cache:
        _detection_cache[key] = Detection(
            identify(config, os.environ), has_multiplexer(os.environ)
        )
    return _detection_cache[key]


def clear_detection_cache():
    """Forgets cached detections, e.g. after changing os.environ."""
    _detection_cache.clear()


# ---------------------------------------------------------------------------
# Escape-sequence catalog
# ---------------------------------------------------------------------------

# OSC 50 ; CursorShape=n BEL
_ITERM_SHAPES = {
    CursorShape.BLOCK: 0,
    CursorShape.BAR: 1,
    CursorShape.UNDERLINE: 2,
}

# DECSCUSR, CSI n SP q. Only the steady (non-blinking) variants.
_DECSCUSR_SHAPES = {
    CursorShape.BLOCK: 2,
    CursorShape.UNDERLINE: 4,
    CursorShape.BAR: 6,
}


def _iterm_shape(shape):
    return f"{ESC}]50;CursorShape={_ITERM_SHAPES[shape]}{BEL}"


def _decscusr_shape(shape):
    return f"{ESC}[{_DECSCUSR_SHAPES[shape]} q"


def _no_shape(shape):
    return ""


# Every TerminalKind must appear in these tables. _check_tables() enforces it
# at import time.
_CURSOR_SHAPE_FAMILY = {
    TerminalKind.ITERM: _iterm_shape,
    TerminalKind.MINTTY: _decscusr_shape,
    TerminalKind.TERMINAL_APP: _decscusr_shape,
    TerminalKind.UNSUPPORTED: _no_shape,
}

_SCREEN_BUFFER = {
    TerminalKind.ITERM: {
        ScreenBuffer.SAVE: f"{ESC}[?1049h",
        ScreenBuffer.RESTORE: f"{ESC}[?1049l",
    },
    TerminalKind.MINTTY: {},
    TerminalKind.TERMINAL_APP: {},
    TerminalKind.UNSUPPORTED: {},
}

_FOCUS_REPORTING = {
    TerminalKind.ITERM: True,
    TerminalKind.MINTTY: True,
    TerminalKind.TERMINAL_APP: False,
    TerminalKind.UNSUPPORTED: False,
}


def _check_tables():
    for table in _CURSOR_SHAPE_FAMILY, _SCREEN_BUFFER, _FOCUS_REPORTING:
        missing = set(TerminalKind) - set(table)
        if missing:
            raise AssertionError(f"no catalog entry for {sorted(k.name for k in missing)}")


_check_tables()


def screen_buffer_sequence(direction, kind):
    """
    Returns the sequence that saves (ScreenBuffer.SAVE) or restores
    (ScreenBuffer.RESTORE) the screen via the alternate screen buffer, or ""
    if the terminal has no confirmed support for it.
    """
    return _SCREEN_BUFFER[kind].get(direction, "")


def cursor_shape_sequence(shape, kind):
    """
    Returns the sequence that sets the cursor to 'shape' (a CursorShape) on a
    'kind' terminal, or "" for UNSUPPORTED.

    iTerm2 uses its own OSC 50 sequence. mintty and Terminal.app use DECSCUSR,
    whose numbering differs (bar is 1 on iTerm2 but 6 with DECSCUSR).
    """
    return _CURSOR_SHAPE_FAMILY[kind](CursorShape(shape))


def focus_reporting_sequence(enable, kind):
    """
    Returns the sequence turning focus reporting on (enable=True) or off, or
    "" if the terminal doesn't report focus.
    """
    if not _FOCUS_REPORTING[kind]:
        return ""
    return f"{ESC}[?1004h" if enable else f"{ESC}[?1004l"


def focus_input_sequence(gained, kind):
    """
    Returns the bytes the terminal sends when its window gains (gained=True)
    or loses focus, or "" if it doesn't report focus.
    """
    if not _FOCUS_REPORTING[kind]:
        return ""
    return f"{ESC}[I" if gained else f"{ESC}[O"


# ---------------------------------------------------------------------------
# Multiplexer transport
# ---------------------------------------------------------------------------


def wrap_for_multiplexer(seq):
    """
    Wraps 'seq' in a tmux pass-through envelope, so that tmux forwards it to
    the outer terminal instead of interpreting (or eating) it. ESC bytes
    inside the payload are doubled, which tmux undoes when forwarding.

    Not idempotent: wrapping twice produces a sequence tmux forwards as a
    wrapped sequence.
    """
    if not seq:
        return ""
    return TMUX_START + seq.replace(ESC, ESC + ESC) + TMUX_END


# ---------------------------------------------------------------------------
# Composed sequences
# ---------------------------------------------------------------------------


ComposedSequences = collections.namedtuple(
    "ComposedSequences",
    (
        "on_start",
        "on_exit",
        "insert_enter",
        "insert_leave",
        "focus_lost",
        "focus_gained",
    ),
)


class SequenceBuilder:
    """
    Builds the ComposedSequences for a terminal. This is the only place
    catalog sequences get concatenated and wrapped, so the ordering rules
    live here:

      - on start-up, the cursor reset and focus reporting enable come
        before the screen save

      - on exit, focus reporting disable comes before the screen restore

    Other orders leave iTerm2 with a garbled screen or focus reporting still
    switched on after the editor exits.
    """

    def __init__(self, kind, multiplexer, config=DEFAULT_CONFIG):
        self.kind = kind
        self.multiplexer = multiplexer
        self.config = config

    def build(self):
        """Returns the ComposedSequences. Slots that don't apply are ""."""
        kind = self.kind
        config = self.config

        cursor_to_normal = self._through_multiplexer(
            cursor_shape_sequence(config.normal_cursor, kind)
        )
        cursor_to_insert = self._through_multiplexer(
            cursor_shape_sequence(config.insert_cursor, kind)
        )

        on_start = on_exit = focus_lost = focus_gained = ""
        if config.fix_focus:
            enable_focus = focus_reporting_sequence(True, kind)
            if self.multiplexer:
                # Armed once for tmux itself and once for the outer terminal
                enable_focus = wrap_for_multiplexer(enable_focus) + enable_focus

            # tmux manages its own screen buffer. Forwarding the save/restore
            # pair through it restores the screen twice.
            on_start = (
                cursor_to_normal
                + enable_focus
                + screen_buffer_sequence(ScreenBuffer.SAVE, kind)
            )
            on_exit = focus_reporting_sequence(False, kind) + screen_buffer_sequence(
                ScreenBuffer.RESTORE, kind
            )

            focus_lost = focus_input_sequence(False, kind)
            focus_gained = focus_input_sequence(True, kind)

        insert_enter = insert_leave = ""
        if config.fix_cursor:
            insert_enter = cursor_to_insert
            insert_leave = cursor_to_normal

        return ComposedSequences(
            on_start=on_start,
            on_exit=on_exit,
            insert_enter=insert_enter,
            insert_leave=insert_leave,
            focus_lost=focus_lost,
            focus_gained=focus_gained,
        )

    def _through_multiplexer(self, seq):
        if self.multiplexer:
            return wrap_for_multiplexer(seq)
        return seq


def compose(config=DEFAULT_CONFIG, environ=None):
    """
    Convenience: detects the terminal and returns (Detection,
    ComposedSequences).
    """
    detection = detect(config, environ)
    builder = SequenceBuilder(detection.kind, detection.multiplexer, config)
    return detection, builder.build()


# ---------------------------------------------------------------------------
# Editor host interface
# ---------------------------------------------------------------------------


class Editor:
    """
    The editor vitality plugs into. Hosts subclass this and implement the
    methods they need; activate() uses the variable, option, keycode and
    mapping methods, and the focus bridge handlers use the rest at the time a
    focus event arrives.

    Positions and selections are opaque to vitality. They're only handed back
    to the editor that produced them.
    """

    def has_gui(self):
        """True if running in a graphical front end."""
        raise NotImplementedError

    # Variables and options

    def get_var(self, name):
        """Returns global variable 'name' (without "g:"), or None if unset."""
        raise NotImplementedError

    def set_var(self, name, value):
        raise NotImplementedError

    def get_option(self, name):
        raise NotImplementedError

    def set_option(self, name, value):
        raise NotImplementedError

    def prepend_option(self, name, value):
        """
        Puts 'value' in front of the current value of option 'name', unless
        the option already starts with it.
        """
        current = self.get_option(name) or ""
        if not current.startswith(value):
            self.set_option(name, value + current)

    # Keycodes and mappings

    def set_keycode(self, key, seq):
        """Makes the terminal input 'seq' arrive as keycode 'key'."""
        raise NotImplementedError

    def map(self, binding):
        """
        Installs 'binding' (a Binding) as a silent, non-recursive mapping.
        For expr bindings the handler's return value replaces the command
        line.
        """
        raise NotImplementedError

    # Autocommands

    def current_buffer(self):
        raise NotImplementedError

    def doautocmd(self, event, buffer):
        """
        Fires autocommand 'event' for 'buffer'. Errors from the autocommands
        propagate.
        """
        raise NotImplementedError

    # Mode state

    def cancel_operator(self):
        raise NotImplementedError

    def visual_selection(self):
        raise NotImplementedError

    def exit_visual(self):
        raise NotImplementedError

    def select_visual(self, selection):
        raise NotImplementedError

    def cursor(self):
        raise NotImplementedError

    def set_cursor(self, pos):
        raise NotImplementedError

    def suspend_insert(self):
        """Leaves insert mode for the duration of one command (i_CTRL-O)."""
        raise NotImplementedError

    def resume_insert(self):
        raise NotImplementedError

    # Command line

    def getcmdline(self):
        raise NotImplementedError

    def getcmdpos(self):
        raise NotImplementedError

    def setcmdpos(self, pos):
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Focus event bridge
# ---------------------------------------------------------------------------


Binding = collections.namedtuple(
    "Binding", ("mode", "lhs", "event", "handler", "expr")
)


def _dispatch(editor, event):
    editor.doautocmd(event, editor.current_buffer())


@contextlib.contextmanager
def _operator_cancelled(editor):
    # A pending operator can't be resumed. It's dropped, like <Esc> would.
    editor.cancel_operator()
    yield


@contextlib.contextmanager
def _visual_preserved(editor):
    selection = editor.visual_selection()
    editor.exit_visual()
    try:
        yield
    finally:
        editor.select_visual(selection)


@contextlib.contextmanager
def _insert_preserved(editor):
    pos = editor.cursor()
    editor.suspend_insert()
    try:
        yield
    finally:
        editor.set_cursor(pos)
        editor.resume_insert()


@contextlib.contextmanager
def _cmdline_preserved(editor):
    # Yields the command line text. The handler returns it, and the editor
    # puts it back in place of the command line (c_CTRL-\_e), which keeps
    # an in-progress edit intact.
    text = editor.getcmdline()
    pos = editor.getcmdpos()
    try:
        yield text
    finally:
        editor.setcmdpos(pos)


def _normal_handler(event):
    def handler(editor):
        _dispatch(editor, event)

    return handler


def _operator_handler(event):
    def handler(editor):
        with _operator_cancelled(editor):
            _dispatch(editor, event)

    return handler


def _visual_handler(event):
    def handler(editor):
        with _visual_preserved(editor):
            _dispatch(editor, event)

    return handler


def _insert_handler(event):
    def handler(editor):
        with _insert_preserved(editor):
            _dispatch(editor, event)

    return handler


def _cmdline_handler(event):
    def handler(editor):
        with _cmdline_preserved(editor) as text:
            _dispatch(editor, event)
        return text

    return handler


_HANDLER_FACTORIES = {
    NORMAL_MODE: _normal_handler,
    OPERATOR_MODE: _operator_handler,
    VISUAL_MODE: _visual_handler,
    INSERT_MODE: _insert_handler,
    CMDLINE_MODE: _cmdline_handler,
}


class FocusBridge:
    """
    Turns the terminal's focus reports into FocusLost/FocusGained
    autocommands.

    The focus byte sequences are assigned to two spare keycodes instead of
    being mapped directly. A mapping on the raw bytes would make the editor
    wait after every bare <Esc> for the rest of the sequence.

    Each mode gets its own handler, which fires the autocommand and puts the
    mode state back as well as the mode allows.
    """

    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config

    def bindings(self):
        """Returns the Bindings, focus lost first, in BRIDGE_MODES order."""
        res = []
        for lhs, event in (
            (self.config.focus_lost_key, FOCUS_LOST),
            (self.config.focus_gained_key, FOCUS_GAINED),
        ):
            for mode in BRIDGE_MODES:
                res.append(
                    Binding(
                        mode=mode,
                        lhs=lhs,
                        event=event,
                        handler=_HANDLER_FACTORIES[mode](event),
                        expr=mode == CMDLINE_MODE,
                    )
                )
        return res

    def install(self, editor, sequences):
        """
        Assigns the focus keycodes from 'sequences' (ComposedSequences) and
        maps the bindings. Does nothing if the terminal doesn't report focus.
        """
        if not (sequences.focus_lost and sequences.focus_gained):
            return False

        editor.set_keycode(self.config.focus_lost_key, sequences.focus_lost)
        editor.set_keycode(self.config.focus_gained_key, sequences.focus_gained)
        for binding in self.bindings():
            editor.map(binding)
        return True


# ---------------------------------------------------------------------------
# Lifecycle installer
# ---------------------------------------------------------------------------


def activate(editor, config=None, environ=None, warn=True):
    """
    Installs vitality into 'editor' (an Editor). Returns True if it was
    installed, and False if it stays inert: in a GUI, on an unsupported
    terminal, or if it is already active in 'editor'.

    config:
      A Config. Read from the editor's g:vitality_* variables if None.

    environ:
      Environment mapping to detect the terminal from. os.environ (cached)
      if None.

    warn:
      False suppresses warnings about invalid settings.
    """
    if editor.has_gui():
        return False

    if config is None:
        config = Config.from_editor(editor, warn)

    detection = detect(config, environ)
    if detection.kind is TerminalKind.UNSUPPORTED:
        return False

    if editor.get_var(LOADED_VAR):
        return False

    sequences = SequenceBuilder(detection.kind, detection.multiplexer, config).build()
    install_hooks(editor, sequences)
    FocusBridge(config).install(editor, sequences)

    editor.set_var(LOADED_VAR, 1)
    return True


def install_hooks(editor, sequences):
    """
    Writes 'sequences' into the editor's terminal options. Start and insert
    enter/leave sequences go in front of what is already there, the exit
    sequence replaces the exit option. Empty sequences leave their option
    alone.
    """
    if sequences.on_start:
        editor.prepend_option(START_OPTION, sequences.on_start)

    # Replaced, not prepended to
    if sequences.on_exit:
        editor.set_option(EXIT_OPTION, sequences.on_exit)

    if sequences.insert_enter:
        editor.prepend_option(INSERT_ENTER_OPTION, sequences.insert_enter)
    if sequences.insert_leave:
        editor.prepend_option(INSERT_LEAVE_OPTION, sequences.insert_leave)


# ---------------------------------------------------------------------------
# Command-line helpers
# ---------------------------------------------------------------------------


def add_config_arguments(parser):
    """Adds the Config options to an argparse parser."""
    parser.add_argument(
        "--no-fix-cursor",
        dest="fix_cursor",
        action="store_false",
        help="Don't change the cursor shape in insert mode",
    )
    parser.add_argument(
        "--no-fix-focus",
        dest="fix_focus",
        action="store_false",
        help="Don't enable focus reporting or fire FocusLost/FocusGained",
    )
    parser.add_argument(
        "--normal-cursor",
        type=int,
        choices=(0, 1, 2),
        default=int(CursorShape.BLOCK),
        help="Cursor shape outside insert mode: 0 block, 1 bar, 2 underline "
        "(default: 0)",
    )
    parser.add_argument(
        "--insert-cursor",
        type=int,
        choices=(0, 1, 2),
        default=int(CursorShape.BAR),
        help="Cursor shape in insert mode (default: 1)",
    )
    parser.add_argument(
        "--assume-iterm", action="store_true", help="Assume the terminal is iTerm2"
    )
    parser.add_argument(
        "--assume-mintty", action="store_true", help="Assume the terminal is mintty"
    )
    parser.add_argument(
        "--assume-terminal-app",
        action="store_true",
        help="Assume the terminal is Terminal.app",
    )
    parser.add_argument(
        "--focus-lost-key",
        default="<f24>",
        metavar="KEY",
        help="Keycode for focus lost (default: <f24>)",
    )
    parser.add_argument(
        "--focus-gained-key",
        default="<f25>",
        metavar="KEY",
        help="Keycode for focus gained (default: <f25>)",
    )


def config_from_args(args):
    """Returns the Config for arguments parsed with add_config_arguments()."""
    return Config(
        fix_cursor=args.fix_cursor,
        fix_focus=args.fix_focus,
        normal_cursor=args.normal_cursor,
        insert_cursor=args.insert_cursor,
        assume_iterm=args.assume_iterm,
        assume_mintty=args.assume_mintty,
        assume_terminal_app=args.assume_terminal_app,
        focus_lost_key=args.focus_lost_key,
        focus_gained_key=args.focus_gained_key,
    )
