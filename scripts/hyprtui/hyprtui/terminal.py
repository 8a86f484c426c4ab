"""Terminal input mode handling and raw key/mouse decoding.

Uses termios non-canonical mode (ICANON/ECHO off, VMIN=0/VTIME=0) rather than
full raw mode so Rich Live keeps managing the alternate screen and Ctrl+C
still raises KeyboardInterrupt.
"""

from __future__ import annotations

import logging
import os
import re
import select
import sys
import termios
from dataclasses import dataclass
from typing import TextIO

logger = logging.getLogger(__name__)

# X10 press/release, any-motion tracking, SGR extended coordinates
MOUSE_ON = "\x1b[?1000h\x1b[?1003h\x1b[?1006h"
MOUSE_OFF = "\x1b[?1006l\x1b[?1003l\x1b[?1000l"

READ_CHUNK = 4096

_SGR_MOUSE_RE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])")
_CSI_RE = re.compile(r"\x1b\[([0-9;]*)([A-Za-z~])")
_SS3_RE = re.compile(r"\x1bO([A-Za-z])")
# CSI or SS3 introducer whose final byte has not arrived yet
_PARTIAL_RE = re.compile(r"\x1b(?:\[<?[0-9;]*|O)\Z")

_CSI_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_TILDE_KEYS = {
    "1": "home",
    "3": "delete",
    "4": "end",
    "5": "pageup",
    "6": "pagedown",
}

_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
}


class TerminalError(RuntimeError):
    """Entering or leaving interactive terminal mode failed."""


@dataclass(frozen=True)
class KeyEvent:
    name: str


@dataclass(frozen=True)
class MouseEvent:
    kind: str
    x: int
    y: int


InputEvent = KeyEvent | MouseEvent


def _mouse_kind(code: int, final: str) -> str:
    button = code & 3
    if code & 64:
        return "scroll_up" if button == 0 else "scroll_down"
    if code & 32:
        return "move"
    if final == "m":
        return "release"
    return {0: "left", 1: "middle", 2: "right"}.get(button, "other")


def _csi_key(params: str, final: str) -> str | None:
    if final == "~":
        return _TILDE_KEYS.get(params.split(";")[0])
    return _CSI_KEYS.get(final)


def decode_input(text: str) -> list[InputEvent]:
    events: list[InputEvent] = []
    i = 0
    while i < len(text):
        ch = text[i]

        if ch == "\x1b":
            match = _SGR_MOUSE_RE.match(text, i)
            if match:
                code, col, row, final = match.groups()
                events.append(MouseEvent(_mouse_kind(int(code), final), int(col) - 1, int(row) - 1))
                i = match.end()
                continue

            match = _CSI_RE.match(text, i) or _SS3_RE.match(text, i)
            if match:
                if match.re is _CSI_RE:
                    name = _csi_key(match.group(1), match.group(2))
                else:
                    name = _CSI_KEYS.get(match.group(1))
                if name:
                    events.append(KeyEvent(name))
                else:
                    logger.debug("ignoring escape sequence %r", match.group(0))
                i = match.end()
                continue

            events.append(KeyEvent("esc"))
            i += 1
            continue

        if ch in _CONTROL_KEYS:
            events.append(KeyEvent(_CONTROL_KEYS[ch]))
        elif ch.isprintable():
            events.append(KeyEvent(ch))
        i += 1
    return events


def read_available(fd: int, timeout: float) -> str:
    """Wait up to ``timeout`` seconds for input, then drain what is pending."""
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout))
    if not ready:
        return ""

    chunks: list[bytes] = []
    while ready:
        try:
            data = os.read(fd, READ_CHUNK)
        except OSError:
            break
        if not data:
            break
        chunks.append(data)
        ready, _, _ = select.select([fd], [], [], 0)
    return b"".join(chunks).decode("utf-8", errors="ignore")


def split_pending(text: str) -> tuple[str, str]:
    """Separate a trailing unfinished escape sequence from complete input."""
    start = text.rfind("\x1b")
    if start != -1 and _PARTIAL_RE.match(text, start):
        return text[:start], text[start:]
    return text, ""


class TerminalSession:
    """Context manager owning the tty mode (and mouse reporting) of a run."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None, mouse: bool = False):
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self.mouse = mouse
        self.fd = -1
        self._saved: list | None = None
        self._pending = ""

    def __enter__(self) -> TerminalSession:
        try:
            self.fd = self._stdin.fileno()
            self._saved = termios.tcgetattr(self.fd)
            mode = termios.tcgetattr(self.fd)
            # Disable canonical mode and echo, leave everything else intact
            mode[3] &= ~(termios.ICANON | termios.ECHO)
            mode[6][termios.VMIN] = 0
            mode[6][termios.VTIME] = 0
            termios.tcsetattr(self.fd, termios.TCSADRAIN, mode)
        except (OSError, ValueError, termios.error) as exc:
            raise TerminalError(f"cannot enter interactive mode: {exc}") from exc

        if self.mouse:
            self._write(MOUSE_ON)
        logger.debug("terminal session started (fd=%d, mouse=%s)", self.fd, self.mouse)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self.mouse:
                self._write(MOUSE_OFF)
            if self._saved is not None:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
        except (OSError, termios.error) as err:
            # only report teardown failure when the body itself succeeded
            if exc_type is None:
                raise TerminalError(f"cannot restore terminal: {err}") from err
            logger.error("cannot restore terminal: %s", err)
        finally:
            self._saved = None

    def _write(self, sequence: str) -> None:
        self._stdout.write(sequence)
        self._stdout.flush()

    def feed(self, text: str) -> list[InputEvent]:
        complete, self._pending = split_pending(self._pending + text)
        return decode_input(complete)

    def poll(self, timeout: float) -> list[InputEvent]:
        return self.feed(read_available(self.fd, timeout))
