from collections.abc import Iterator
from contextlib import suppress
from io import StringIO
from os import close, fdopen, pipe, write
from typing import TextIO

from pytest import fixture

from termdeck.components.cursor import AnsiCursor
from termdeck.components.factory import ComponentsFactory
from termdeck.components.keys import KeyEvent, TerminalKeyReader
from termdeck.configuring.settings import Settings


@fixture
def key_pipe() -> Iterator[tuple[TextIO, int]]:
    read_fd, write_fd = pipe()
    with fdopen(read_fd) as input_stream:
        yield input_stream, write_fd
    with suppress(OSError):
        close(write_fd)


def test_cursor() -> None:
    cursor = AnsiCursor()
    assert cursor.move_to(0, 0) == "\x1b[1;1H"
    assert cursor.move_to(6, 7) == "\x1b[8;7H"
    assert cursor.clear_screen() == "\x1b[2J"
    assert cursor.hide() == "\x1b[?25l"
    assert cursor.show() == "\x1b[?25h"


def test_key_event_names() -> None:
    assert KeyEvent.from_value("n") == KeyEvent("n")
    assert KeyEvent.from_value("\x1b[C").name == "right"
    assert KeyEvent.from_value("\x1bOD").name == "left"
    assert KeyEvent.from_value("\x1b[5~").name == "page_up"
    assert KeyEvent.from_value("\x7f").name == "backspace"
    assert KeyEvent.from_value("\x18").name == "ctrl_x"


def test_read_keys(key_pipe: tuple[TextIO, int]) -> None:
    input_stream, write_fd = key_pipe
    write(write_fd, "n\x1b[C\x1b[6~é".encode())
    with TerminalKeyReader(input_stream) as reader:
        assert reader.read_key(timeout=1) == KeyEvent("n")
        assert reader.read_key(timeout=1) == KeyEvent("\x1b[C", "right")
        assert reader.read_key(timeout=1) == KeyEvent("\x1b[6~", "page_down")
        assert reader.read_key(timeout=1) == KeyEvent("é")
        assert reader.read_key(timeout=0.01) is None
        assert not reader.closed


def test_read_lone_escape(key_pipe: tuple[TextIO, int]) -> None:
    input_stream, write_fd = key_pipe
    write(write_fd, b"\x1b")
    reader = TerminalKeyReader(input_stream, escape_delay=0.01)
    assert reader.read_key(timeout=1) == KeyEvent("\x1b", "escape")


def test_read_closed_input(key_pipe: tuple[TextIO, int]) -> None:
    input_stream, write_fd = key_pipe
    write(write_fd, b"q")
    close(write_fd)
    reader = TerminalKeyReader(input_stream)
    assert reader.read_key(timeout=1) == KeyEvent("q")
    assert reader.read_key(timeout=1) is None
    assert reader.closed


def test_factory_color() -> None:
    output = StringIO()
    assert ComponentsFactory(Settings(color="always"), output=output).color_enabled()
    assert not ComponentsFactory(Settings(color="never"), output=output).color_enabled()
    assert not ComponentsFactory(Settings(), output=output).color_enabled()
