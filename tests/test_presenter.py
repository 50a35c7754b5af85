from collections.abc import Iterable
from io import StringIO
from os import getpid, kill
from signal import SIGWINCH, getsignal
from threading import Event
from typing import Self

from pytest import fixture, raises

from termdeck.components.keys import KeyEvent
from termdeck.configuring.metadata import wrap
from termdeck.models.deck import Deck, ParsedDeck, ParsedSlide
from termdeck.presenting import Presenter
from termdeck.rendering import Renderer
from termdeck.tracking import Tracker


class ScriptedKeyReader:
    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._keys = [KeyEvent.from_value(key) for key in keys]
        self.closed = False
        self.entered = False

    def __enter__(self) -> Self:
        self.entered = True
        return self

    def __exit__(self, *args: object) -> None:
        self.entered = False

    def read_key(self, timeout: float | None = None) -> KeyEvent | None:
        if not self._keys:
            self.closed = True
            return None
        return self._keys.pop(0)


class FakeScreen:
    def __init__(self, width: int = 20, height: int = 8) -> None:
        self._width = width
        self._height = height

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def is_windows(self) -> bool:
        return True


class DeckReader:
    """Return a deck of `counts[i]` slides on the i-th read."""

    def __init__(self, *counts: int) -> None:
        self._counts = list(counts)
        self.reads = 0

    def __call__(self) -> Deck:
        count = self._counts[min(self.reads, len(self._counts) - 1)]
        self.reads += 1
        return wrap(
            ParsedDeck(
                slides=[ParsedSlide(content=f"slide {i + 1}") for i in range(count)]
            )
        )


@fixture
def output() -> StringIO:
    return StringIO()


def _presenter(
    renderer: Renderer,
    output: StringIO,
    reader: DeckReader,
    keys: Iterable[str] = (),
    screen: FakeScreen | None = None,
) -> Presenter:
    return Presenter(
        reader, ScriptedKeyReader(keys), renderer, screen or FakeScreen(), output
    )


def _press(presenter: Presenter, *keys: str) -> None:
    for key in keys:
        presenter.keypress(KeyEvent.from_value(key))


def test_navigation(renderer: Renderer, output: StringIO) -> None:
    presenter = _presenter(renderer, output, DeckReader(5)).reload()
    _press(presenter, "n", "l", " ", "\x1b[C", "\x1b[6~")
    assert presenter.tracker == Tracker(4, 5)
    _press(presenter, "p", "h")
    assert presenter.tracker == Tracker(2, 5)
    _press(presenter, "\x7f", "\x1b[D", "\x1b[5~")
    assert presenter.tracker == Tracker(0, 5)
    _press(presenter, "$")
    assert presenter.tracker == Tracker(4, 5)
    _press(presenter, "^")
    assert presenter.tracker == Tracker(0, 5)


def test_go_to_slide(renderer: Renderer, output: StringIO) -> None:
    presenter = _presenter(renderer, output, DeckReader(15)).reload()
    _press(presenter, "1", "2", "g")
    assert presenter.tracker == Tracker(11, 15)
    _press(presenter, "9", "9", "g")
    assert presenter.tracker == Tracker(11, 15)
    _press(presenter, "3", "g")
    assert presenter.tracker == Tracker(2, 15)


def test_go_to_without_number_is_ignored(renderer: Renderer, output: StringIO) -> None:
    presenter = _presenter(renderer, output, DeckReader(3)).reload()
    _press(presenter, "n", "g")
    assert presenter.tracker == Tracker(1, 3)


def test_unmatched_keys_are_ignored(renderer: Renderer, output: StringIO) -> None:
    presenter = _presenter(renderer, output, DeckReader(3)).reload()
    _press(presenter, "x", "\x1b[A", "\t")
    assert presenter.tracker == Tracker(0, 3)


def test_reload_resizes_tracker(renderer: Renderer, output: StringIO) -> None:
    reader = DeckReader(5, 2)
    presenter = _presenter(renderer, output, reader).reload()
    _press(presenter, "$", "r")
    assert reader.reads == 2
    assert presenter.tracker == Tracker(1, 2)
    assert len(presenter.deck) == 2


def test_number_buffer_is_kept_across_reloads(
    renderer: Renderer, output: StringIO
) -> None:
    presenter = _presenter(renderer, output, DeckReader(5)).reload()
    _press(presenter, "4", "\x0c", "g")
    assert presenter.tracker == Tracker(3, 5)


def test_quit_clears_screen(renderer: Renderer, output: StringIO) -> None:
    presenter = _presenter(renderer, output, DeckReader(2)).reload()
    _press(presenter, "q")
    assert output.getvalue() == "\x1b[2J\x1b[1;1H"


def test_render_writes_current_slide(renderer: Renderer, output: StringIO) -> None:
    presenter = _presenter(renderer, output, DeckReader(2)).reload()
    _press(presenter, "n")
    presenter.render()
    assert output.getvalue() == (
        "\x1b[2J\x1b[1;1H\x1b[1;1Hslide 2\n\x1b[8;16H2 / 2"
    )


def test_start_runs_until_quit(renderer: Renderer, output: StringIO) -> None:
    key_reader = ScriptedKeyReader(["n", "n", "q", "p"])
    presenter = Presenter(DeckReader(3), key_reader, renderer, FakeScreen(), output)
    presenter.start()
    assert presenter.tracker == Tracker(2, 3)
    written = output.getvalue()
    assert written.startswith("\x1b[?25l")
    assert written.endswith("\x1b[2J\x1b[1;1H\x1b[?25h")
    assert "slide 3" in written
    assert not key_reader.entered


def test_start_stops_when_input_is_closed(
    renderer: Renderer, output: StringIO
) -> None:
    presenter = _presenter(renderer, output, DeckReader(3), keys=["n"])
    presenter.start()
    assert presenter.tracker == Tracker(1, 3)
    assert output.getvalue().endswith("\x1b[?25h")


def test_interrupt_shows_cursor(renderer: Renderer, output: StringIO) -> None:
    presenter = _presenter(renderer, output, DeckReader(3), keys=["n", "\x03"])
    with raises(KeyboardInterrupt):
        presenter.start()
    assert output.getvalue().endswith("\x1b[?25h")


def test_queued_change_and_resize(renderer: Renderer, output: StringIO) -> None:
    reader = DeckReader(1, 4)
    presenter = _presenter(
        renderer.resize(10, 4), output, reader, screen=FakeScreen(20, 8)
    )
    presenter.notify_change()
    presenter.notify_resize()
    presenter.start()
    assert reader.reads == 2
    assert presenter.tracker == Tracker(0, 4)
    written = output.getvalue()
    assert "\x1b[4;6H1 / 1" in written
    assert "\x1b[4;6H1 / 4" in written
    assert written.endswith("\x1b[8;16H1 / 4\x1b[?25h")


class FailingKeyReader(ScriptedKeyReader):
    def read_key(self, timeout: float | None = None) -> KeyEvent | None:
        raise OSError("bad file descriptor")


def test_key_reader_errors_stop_presentation(
    renderer: Renderer, output: StringIO
) -> None:
    key_reader = FailingKeyReader()
    presenter = Presenter(DeckReader(2), key_reader, renderer, FakeScreen(), output)
    with raises(OSError, match="bad file descriptor"):
        presenter.start()
    assert output.getvalue().endswith("\x1b[?25h")
    assert not key_reader.entered


class ResizeAwareScreen(FakeScreen):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.resized = Event()

    def width(self) -> int:
        self.resized.set()
        return super().width()

    def is_windows(self) -> bool:
        return False


class ResizingKeyReader(ScriptedKeyReader):
    """Send a resize signal, then quit once the screen size was read."""

    def __init__(self, screen: ResizeAwareScreen) -> None:
        super().__init__()
        self._screen = screen
        self._signaled = False

    def read_key(self, timeout: float | None = None) -> KeyEvent | None:
        if not self._signaled:
            self._signaled = True
            kill(getpid(), SIGWINCH)
            return None
        self._screen.resized.wait(5)
        return KeyEvent("q")


def test_resize_signal(renderer: Renderer, output: StringIO) -> None:
    previous_handler = getsignal(SIGWINCH)
    screen = ResizeAwareScreen(40, 10)
    presenter = Presenter(
        DeckReader(1), ResizingKeyReader(screen), renderer, screen, output
    )
    presenter.start()
    assert "\x1b[8;16H1 / 1" in output.getvalue()
    assert "\x1b[10;36H1 / 1" in output.getvalue()
    assert getsignal(SIGWINCH) == previous_handler
