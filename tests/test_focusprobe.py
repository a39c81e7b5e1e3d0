# Copyright (c) 2026 vitality contributors
# SPDX-License-Identifier: ISC
#
# Focus probe tests: incremental decoding of focus reports mixed with other
# input, and the terminal checks done before touching termios.

import sys

import pytest

import focusprobe
from focusprobe import FocusDecoder, FocusProbe
from vitality import FOCUS_GAINED, FOCUS_LOST, SequenceBuilder, TerminalKind


def decoder():
    return FocusDecoder.for_sequences(SequenceBuilder(TerminalKind.ITERM, True).build())


def decode(dec, s):
    """Feeds 's' and returns everything that came out, including characters
    handed back through pop()."""
    res = []
    for ch in s:
        val = dec.feed(ch)
        if val is not None:
            res.append(val)
        while True:
            ch = dec.pop()
            if ch is None:
                break
            res.append(ch)
    return res


# -- decoding ---------------------------------------------------------------------


def test_decode_focus_events():
    dec = decoder()
    assert decode(dec, "\x1b[O") == [FOCUS_LOST]
    assert decode(dec, "\x1b[I") == [FOCUS_GAINED]
    assert not dec.partial


def test_decode_mixed_input():
    dec = decoder()
    assert decode(dec, "a\x1b[Ib\x1b[Oq") == ["a", FOCUS_GAINED, "b", FOCUS_LOST, "q"]


def test_decode_one_char_at_a_time():
    dec = decoder()
    assert dec.feed("\x1b") is None
    assert dec.partial
    assert dec.feed("[") is None
    assert dec.feed("O") == FOCUS_LOST
    assert not dec.partial


def test_decode_dead_end():
    # An arrow key isn't a focus report. Its characters come back as-is.
    dec = decoder()
    assert decode(dec, "\x1b[A") == ["\x1b", "[", "A"]
    assert not dec.partial


def test_decode_escape_restarts_sequence():
    dec = decoder()
    assert decode(dec, "\x1b\x1b[I") == ["\x1b", FOCUS_GAINED]


def test_flush_bare_escape():
    dec = decoder()
    assert decode(dec, "\x1b") == []
    assert dec.flush() == "\x1b"
    assert dec.pop() is None
    assert dec.flush() is None


def test_flush_partial_sequence():
    dec = decoder()
    decode(dec, "\x1b[")
    assert dec.flush() == "\x1b"
    assert dec.pop() == "["
    assert dec.pop() is None
    assert decode(dec, "\x1b[O") == [FOCUS_LOST]


def test_decoder_without_focus_reporting():
    seqs = SequenceBuilder(TerminalKind.TERMINAL_APP, False).build()
    dec = FocusDecoder.for_sequences(seqs)
    assert decode(dec, "\x1b[O") == ["\x1b", "[", "O"]


def test_decoder_custom_table():
    dec = FocusDecoder({"\x1b[O": "lost", "\x1b[I": "gained", "\x1bOP": "f1"})
    assert decode(dec, "\x1bOP\x1b[I") == ["f1", "gained"]


# -- terminal checks ------------------------------------------------------------------


class _Stream:
    def __init__(self, fd):
        self._fd = fd

    def fileno(self):
        return self._fd

    def write(self, s):
        pass

    def flush(self):
        pass


def test_probe_needs_a_terminal(monkeypatch):
    monkeypatch.setattr(focusprobe, "_IS_WINDOWS", False)
    monkeypatch.setattr(sys, "stdin", _Stream(0))
    monkeypatch.setattr(sys, "stdout", _Stream(1))
    monkeypatch.setattr(focusprobe.os, "isatty", lambda fd: False)

    seqs = SequenceBuilder(TerminalKind.ITERM, False).build()
    with pytest.raises(RuntimeError, match="stdin is not a terminal"):
        FocusProbe(seqs)

    monkeypatch.setattr(focusprobe.os, "isatty", lambda fd: fd == 0)
    with pytest.raises(RuntimeError, match="stdout is not a terminal"):
        FocusProbe(seqs)


def test_main_unsupported(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["vitality-probe"])
    with pytest.raises(SystemExit) as e:
        focusprobe.main()
    assert "no supported terminal detected" in str(e.value.code)


def test_main_not_a_terminal(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["vitality-probe", "--assume-terminal-app"])
    monkeypatch.setattr(focusprobe, "_IS_WINDOWS", False)
    monkeypatch.setattr(sys, "stdin", _Stream(0))
    monkeypatch.setattr(focusprobe.os, "isatty", lambda fd: False)

    with pytest.raises(SystemExit) as e:
        focusprobe.main()
    assert str(e.value.code) == "error: stdin is not a terminal"
    # Terminal.app has no focus reporting
    assert "vitality-probe warning" in capsys.readouterr().err
