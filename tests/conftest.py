# Copyright (c) 2026 vitality contributors
# SPDX-License-Identifier: ISC
#
# Shared fixtures and the in-memory editor host for the vitality pytest suite.

import os
import sys

import pytest

# Ensure vitality is importable from the project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import vitality  # noqa: E402

# Variables the terminal detection looks at
_DETECTION_VARS = ("ITERM_PROFILE", "MINTTY_SHORTCUT", "TERM_PROGRAM", "TMUX")

# Pre-existing option content, as Vim would have it for xterm-like terminals
DEFAULT_OPTIONS = {
    vitality.START_OPTION: "\x1b[22;0;0t",
    vitality.EXIT_OPTION: "\x1b[23;0;0t",
    vitality.INSERT_ENTER_OPTION: "",
    vitality.INSERT_LEAVE_OPTION: "",
}

ITERM_ENV = {"ITERM_PROFILE": "Default"}
ITERM_TMUX_ENV = {"ITERM_PROFILE": "Default", "TMUX": "/tmp/tmux-501/default,123,0"}
MINTTY_ENV = {"TERM_PROGRAM": "mintty"}
TERMINAL_APP_ENV = {"TERM_PROGRAM": "Apple_Terminal"}

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Removes the terminal detection variables and forgets cached
    detections, so the environment pytest runs in doesn't leak in."""
    for name in _DETECTION_VARS:
        monkeypatch.delenv(name, raising=False)
    vitality.clear_detection_cache()
    yield
    vitality.clear_detection_cache()


@pytest.fixture
def editor():
    return FakeEditor()


# ---------------------------------------------------------------------------
# In-memory editor
#
# Implements the vitality.Editor interface on plain attributes, with Vim's
# semantics for the parts the focus handlers depend on.
# ---------------------------------------------------------------------------


class FakeEditor(vitality.Editor):
    def __init__(self, gui=False, vars=None, options=None):
        self.gui = gui
        self.vars = dict(vars or {})
        self.options = dict(DEFAULT_OPTIONS)
        self.options.update(options or {})
        self.keycodes = {}
        self.mappings = {}

        # (event, buffer, mode at the time) for every autocommand fired
        self.events = []
        # Callables run by doautocmd(), like autocommands
        self.listeners = []

        self.buffer = 1
        self.mode = vitality.NORMAL_MODE
        self.pos = (1, 0)
        self.operator = None
        self.selection = None
        self.last_selection = None
        self.cmdline = ""
        self.cmdpos = 1
        self._cmdpos_set = False

    # Input

    def press(self, raw):
        """Feeds terminal input 'raw' and runs the mapping it triggers in the
        current mode. Returns what the handler returned."""
        key = raw
        for name, seq in self.keycodes.items():
            if seq == raw:
                key = name
                break

        binding = self.mappings[(self.mode, key)]
        if not binding.expr:
            return binding.handler(self)

        # c_CTRL-\_e: the result replaces the command line, and the cursor
        # goes to the end unless setcmdpos() was called
        self._cmdpos_set = False
        res = binding.handler(self)
        self.cmdline = res
        if not self._cmdpos_set:
            self.cmdpos = len(res) + 1
        return res

    # vitality.Editor

    def has_gui(self):
        return self.gui

    def get_var(self, name):
        return self.vars.get(name)

    def set_var(self, name, value):
        self.vars[name] = value

    def get_option(self, name):
        return self.options.get(name, "")

    def set_option(self, name, value):
        self.options[name] = value

    def set_keycode(self, key, seq):
        self.keycodes[key] = seq

    def map(self, binding):
        self.mappings[(binding.mode, binding.lhs)] = binding

    def current_buffer(self):
        return self.buffer

    def doautocmd(self, event, buffer):
        self.events.append((event, buffer, self.mode))
        for listener in self.listeners:
            listener(event, buffer)

    def cancel_operator(self):
        self.operator = None
        self.mode = vitality.NORMAL_MODE

    def visual_selection(self):
        return self.selection

    def exit_visual(self):
        self.last_selection = self.selection
        self.selection = None
        self.mode = vitality.NORMAL_MODE

    def select_visual(self, selection):
        self.selection = selection
        self.mode = vitality.VISUAL_MODE

    def cursor(self):
        return self.pos

    def set_cursor(self, pos):
        self.pos = pos

    def suspend_insert(self):
        self.mode = vitality.NORMAL_MODE

    def resume_insert(self):
        self.mode = vitality.INSERT_MODE

    def getcmdline(self):
        return self.cmdline

    def getcmdpos(self):
        return self.cmdpos

    def setcmdpos(self, pos):
        self.cmdpos = pos
        self._cmdpos_set = True


# ---------------------------------------------------------------------------
# Assertion helpers
# ---------------------------------------------------------------------------


def activated(env, config=None, **kwargs):
    """Returns a FakeEditor that vitality was activated in for 'env'."""
    e = FakeEditor(**kwargs)
    assert vitality.activate(e, config, env), f"activation failed for {env}"
    return e


def verify_in_order(s, *parts):
    """Verify that 'parts' all occur in 's', in the given order."""
    pos = 0
    for part in parts:
        i = s.find(part, pos)
        assert i != -1, f"{part!r} not found in {s!r} after index {pos}"
        pos = i + len(part)
