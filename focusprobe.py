#!/usr/bin/env python3

# Copyright (c) 2026 vitality contributors
# SPDX-License-Identifier: ISC

"""
Checks that focus reporting and cursor shapes work in this terminal.

Arms the same escape sequences Vim would get from vitality on start-up (focus
reporting, normal-mode cursor, screen save), then prints a line for each focus
event the terminal sends. Switch to another window and back to see them.
Press 'i' to toggle between the normal-mode and insert-mode cursor, and 'q' or
Ctrl-C to quit. The exit sequences are sent on the way out.

Useful for finding out whether tmux forwards the sequences. If no events show
up inside tmux, check that tmux has 'focus-events' turned on.

Unix only. Takes the same options as vitality-vimrc.
"""

import argparse
import atexit
import codecs
import collections
import os
import sys

import vitality

_IS_WINDOWS = os.name == "nt"

if not _IS_WINDOWS:
    import select
    import termios


# ---------------------------------------------------------------------------
# Focus report decoding
# ---------------------------------------------------------------------------


def _build_trie(sequences):
    """Build a trie (nested dict) from an escape sequence table."""
    root = {}
    for seq, event in sequences.items():
        node = root
        for ch in seq[:-1]:
            node = node.setdefault(ch, {})
        node[seq[-1]] = event
    return root


class FocusDecoder:
    """
    Incremental decoder for terminal input. Recognizes the focus report
    sequences and passes everything else through a character at a time.

    table:
      {sequence: event} dict, e.g. {"\\x1b[O": "FocusLost"}
    """

    def __init__(self, table):
        self._trie = _build_trie(table)
        self._buf = []
        self._node = None
        self._pending = []

    @classmethod
    def for_sequences(cls, sequences):
        """Returns a decoder for a vitality.ComposedSequences."""
        table = {}
        if sequences.focus_lost:
            table[sequences.focus_lost] = vitality.FOCUS_LOST
        if sequences.focus_gained:
            table[sequences.focus_gained] = vitality.FOCUS_GAINED
        return cls(table)

    @property
    def partial(self):
        """True while a prefix of a sequence is buffered."""
        return bool(self._buf)

    def feed(self, ch):
        """
        Feeds one character. Returns an event name, a plain character, or
        None if more input is needed.

        Characters that turn out not to continue a sequence are returned one
        per call, via pop().
        """
        if self._node is not None:
            if ch not in self._node:
                # Dead end. Everything buffered is plain input, and 'ch'
                # might start a new sequence.
                self._pending.extend(self._buf)
                self._buf = []
                self._node = None
                result = self.feed(ch)
                if result is not None:
                    self._pending.append(result)
                return self._pending.pop(0)

            val = self._node[ch]
            if isinstance(val, dict):
                self._buf.append(ch)
                self._node = val
                return None

            self._buf = []
            self._node = None
            return val

        if ch in self._trie:
            val = self._trie[ch]
            if not isinstance(val, dict):
                return val
            self._buf = [ch]
            self._node = val
            return None

        return ch

    def pop(self):
        """Returns the next plain character left over by feed(), or None."""
        if self._pending:
            return self._pending.pop(0)
        return None

    def flush(self):
        """
        Gives up on a buffered prefix (e.g. a bare <Esc>). Returns its first
        character, with the rest available from pop().
        """
        if not self._buf:
            return None
        self._pending.extend(self._buf[1:])
        first = self._buf[0]
        self._buf = []
        self._node = None
        return first


# ---------------------------------------------------------------------------
# Terminal session
# ---------------------------------------------------------------------------


class FocusProbe:
    """
    Puts the terminal in cbreak mode, writes the start-up sequences, and reads
    focus events. close() writes the exit sequences and restores the terminal.
    """

    def __init__(self, sequences, out=None):
        if _IS_WINDOWS:
            raise RuntimeError("focus probing needs a Unix terminal")
        if not os.isatty(sys.stdin.fileno()):
            raise RuntimeError("stdin is not a terminal")
        if not os.isatty(sys.stdout.fileno()):
            raise RuntimeError("stdout is not a terminal")

        self.sequences = sequences
        self._out = out or sys.stdout
        self._decoder = FocusDecoder.for_sequences(sequences)
        self._utf8 = codecs.getincrementaldecoder("utf-8")("replace")
        self._queue = collections.deque()
        self._insert = False
        self._closed = False

        self._fd = sys.stdin.fileno()
        self._old_termios = termios.tcgetattr(self._fd)
        self._set_cbreak()

        self._poller = select.poll()
        self._poller.register(self._fd, select.POLLIN)

        self._write_raw(sequences.on_start + sequences.insert_leave)

    def _set_cbreak(self):
        """Apply cbreak terminal settings: no echo, no canonical mode."""
        new = termios.tcgetattr(self._fd)
        # LFLAG: clear ICANON, ECHO, IEXTEN; keep ISIG for Ctrl-C
        new[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN)
        new[6][termios.VMIN] = 1
        new[6][termios.VTIME] = 0
        termios.tcsetattr(self._fd, termios.TCSANOW, new)

    def close(self):
        """Restore terminal state."""
        if self._closed:
            return
        self._closed = True

        if self._insert:
            self._write_raw(self.sequences.insert_leave)
        self._write_raw(self.sequences.on_exit)
        termios.tcsetattr(self._fd, termios.TCSANOW, self._old_termios)

    def toggle_insert(self):
        """Switches between the insert-mode and normal-mode cursor."""
        self._insert = not self._insert
        if self._insert:
            self._write_raw(self.sequences.insert_enter)
        else:
            self._write_raw(self.sequences.insert_leave)
        return self._insert

    def read(self):
        """
        Block and return the next input: vitality.FOCUS_LOST,
        vitality.FOCUS_GAINED, or a str character.
        """
        while not self._queue:
            try:
                data = os.read(self._fd, 1024)
            except InterruptedError:
                continue

            if not data:
                continue

            for ch in self._utf8.decode(data):
                self._take(self._decoder.feed(ch))

            # Partial sequence: wait briefly for the rest, like Vim's
            # 'ttimeoutlen'
            if self._decoder.partial and not self._poller.poll(25):
                self._take(self._decoder.flush())

        return self._queue.popleft()

    def _take(self, result):
        # Queues 'result' and any characters the decoder gave back
        if result is not None:
            self._queue.append(result)
        while True:
            ch = self._decoder.pop()
            if ch is None:
                return
            self._queue.append(ch)

    def _write_raw(self, s):
        if not s:
            return
        try:
            self._out.write(s)
            self._out.flush()
        except OSError:
            pass


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter, description=__doc__
    )

    vitality.add_config_arguments(parser)

    args = parser.parse_args()

    config = vitality.config_from_args(args)
    detection, sequences = vitality.compose(config)

    if detection.kind is vitality.TerminalKind.UNSUPPORTED:
        sys.exit(
            "error: no supported terminal detected (use --assume-iterm, "
            "--assume-mintty or --assume-terminal-app to force one)"
        )

    if not sequences.focus_lost:
        vitality._warn(
            "focus reporting is off or not supported by this terminal, only "
            "cursor shapes will change",
            prog="vitality-probe",
        )

    try:
        probe = FocusProbe(sequences)
    except RuntimeError as e:
        sys.exit(f"error: {e}")

    atexit.register(probe.close)
    try:
        print("Waiting for focus events. 'i' toggles the cursor, 'q' quits.\r")
        while True:
            key = probe.read()
            if key == "q":
                break
            if key == "i":
                mode = "insert" if probe.toggle_insert() else "normal"
                print(f"{mode} cursor\r")
            elif key in (vitality.FOCUS_LOST, vitality.FOCUS_GAINED):
                print(f"{key}\r")
    except KeyboardInterrupt:
        pass
    finally:
        probe.close()


if __name__ == "__main__":
    main()
