"""Keyboard input read from a POSIX terminal in cbreak mode."""

from codecs import getincrementaldecoder
from dataclasses import dataclass
from logging import getLogger
from os import read as os_read
from select import select
from sys import stdin
from typing import Self, TextIO

from ..exceptions import TermdeckError
from .protocols import KeyReaderProtocol

_logger = getLogger(__name__)

_ESCAPE = "\x1b"

_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[5~": "page_up",
    "\x1b[6~": "page_down",
    _ESCAPE: "escape",
}

_CONTROLS = {
    " ": "space",
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl_c",
    "\x0c": "ctrl_l",
    "\x18": "ctrl_x",
}


@dataclass(frozen=True)
class KeyEvent:
    """A single keypress."""

    value: str
    """Characters produced by the key, escape sequences included."""

    name: str | None = None
    """Name of special keys such as `left` or `ctrl_l`, None for plain characters."""

    @classmethod
    def from_value(cls, value: str) -> Self:
        return cls(value, _SEQUENCES.get(value) or _CONTROLS.get(value))


class TerminalKeyReader(KeyReaderProtocol):
    """Read keypresses one at a time.

    When used as a context manager on a terminal, the terminal is switched to \
    cbreak mode (no echo, no line buffering) and restored on exit.
    """

    def __init__(self, input_stream: TextIO = stdin, escape_delay: float = 0.05):
        self._input = input_stream
        self._escape_delay = escape_delay
        self._decoder = getincrementaldecoder("utf8")(errors="replace")
        self._saved_attributes: list | None = None
        self.closed = False

    def __enter__(self) -> Self:
        if not self._input.isatty():
            return self
        try:
            from termios import tcgetattr
            from tty import setcbreak
        except ImportError as e:
            msg = "reading keys is only supported on POSIX terminals"
            raise TermdeckError(msg) from e
        fd = self._input.fileno()
        self._saved_attributes = tcgetattr(fd)
        setcbreak(fd)
        _logger.debug("Switched terminal to cbreak mode")
        return self

    def __exit__(self, *args: object) -> None:
        if self._saved_attributes is None:
            return
        from termios import TCSADRAIN, tcsetattr

        tcsetattr(self._input.fileno(), TCSADRAIN, self._saved_attributes)
        self._saved_attributes = None
        _logger.debug("Restored terminal mode")

    def read_key(self, timeout: float | None = None) -> KeyEvent | None:
        char = self._read_char(timeout)
        if char is None:
            return None
        if char != _ESCAPE:
            return KeyEvent.from_value(char)
        sequence = char
        while (following := self._read_char(self._escape_delay)) is not None:
            sequence += following
            if len(sequence) > 2 and (following.isalpha() or following == "~"):
                break
        return KeyEvent.from_value(sequence)

    def _read_char(self, timeout: float | None) -> str | None:
        if self.closed:
            return None
        fd = self._input.fileno()
        while True:
            ready, _, _ = select([fd], [], [], timeout)
            if not ready:
                return None
            data = os_read(fd, 1)
            if not data:
                self.closed = True
                return None
            if char := self._decoder.decode(data):
                return char
