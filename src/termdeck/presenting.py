"""Interactive presentation loop.

Keypresses, terminal resizes and source file changes are all turned into events \
pushed onto a single queue. Only the presentation loop consumes that queue, so the \
tracker, the deck and the renderer are never modified concurrently.
"""

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from queue import SimpleQueue
from string import digits
from threading import Event, Thread
from typing import Any, Self, TextIO

from .components.keys import KeyEvent
from .components.protocols import KeyReaderProtocol, ScreenProtocol
from .models.configuration import default_configuration
from .models.deck import Deck
from .rendering import Renderer
from .tracking import Tracker

_logger = getLogger(__name__)

_POLL_INTERVAL = 0.1


@dataclass(frozen=True)
class KeyPressed:
    key: KeyEvent


@dataclass(frozen=True)
class Resized:
    pass


@dataclass(frozen=True)
class SourceChanged:
    pass


@dataclass(frozen=True)
class InputClosed:
    pass


@dataclass(frozen=True)
class InputFailed:
    error: Exception


PresenterEvent = KeyPressed | Resized | SourceChanged | InputClosed | InputFailed


class Presenter:
    """Show a deck one slide at a time and navigate it with the keyboard.

    Controls:

    - next slide: `n`, `l`, right arrow, space, page down
    - previous slide: `p`, `h`, left arrow, backspace, page up
    - first and last slides: `^` and `$`
    - go to slide: its number followed by `g`
    - reload: `r`, Ctrl+L
    - quit: `q`, escape, Ctrl+X
    """

    def __init__(
        self,
        reader: Callable[[], Deck],
        key_reader: KeyReaderProtocol,
        renderer: Renderer,
        screen: ScreenProtocol,
        output: TextIO,
        tracker: Tracker | None = None,
    ) -> None:
        """Initialize a presenter.

        Args:
            reader: Called on every reload to read the deck again
            key_reader: Source of keypresses
            renderer: Renderer sized for the current screen
            screen: Used to get the screen size after a resize
            output: Stream the slides are written to
            tracker: Initial position, an empty deck is assumed if not given
        """
        self._reader = reader
        self._key_reader = key_reader
        self._renderer = renderer
        self._screen = screen
        self._output = output
        self._tracker = tracker or Tracker.for_total(0)
        self._deck = Deck(config=default_configuration())
        self._events: SimpleQueue[PresenterEvent] = SimpleQueue()
        self._buffer: list[str] = []
        self._stopped = False

    @property
    def tracker(self) -> Tracker:
        return self._tracker

    @property
    def deck(self) -> Deck:
        return self._deck

    def start(self) -> None:
        """Present the deck until asked to quit.

        The cursor is hidden during the presentation and shown again whatever the \
        way the presentation ends.
        """
        self.reload()
        self._write(self._renderer.cursor.hide())
        previous_handler = self._subscribe_resize()
        try:
            with self._key_reader:
                stop_reading = Event()
                reading = Thread(
                    target=self._read_keys, args=(stop_reading,), daemon=True
                )
                reading.start()
                try:
                    while not self._stopped:
                        self.render()
                        self._handle(self._events.get())
                finally:
                    stop_reading.set()
                    reading.join()
        finally:
            self._unsubscribe_resize(previous_handler)
            self._write(self._renderer.cursor.show())

    def stop(self) -> Self:
        self._stopped = True
        return self

    def reload(self) -> Self:
        self._deck = self._reader()
        self._tracker = self._tracker.resize(len(self._deck))
        _logger.debug(
            "Reloaded %d slide(s), now on slide %d",
            len(self._deck),
            self._tracker.current + 1,
        )
        return self

    def render(self) -> None:
        """Clear the screen and render the current slide in a single write."""
        self._write(
            self._renderer.clear()
            + self._renderer.render(
                self._deck.config,
                self._deck.slide_at(self._tracker.current),
                self._tracker.current + 1,
                self._tracker.total,
            )
        )

    def notify_change(self) -> None:
        """Ask for a reload. Safe to call from any thread."""
        self._events.put(SourceChanged())

    def notify_resize(self, *_args: Any) -> None:
        """Ask for a resize. Safe to call from any thread or a signal handler."""
        self._events.put(Resized())

    def keypress(self, event: KeyEvent) -> None:
        match event.name or event.value:
            case "n" | "l" | "right" | "space" | "page_down":
                self._tracker = self._tracker.next()
            case "p" | "h" | "left" | "backspace" | "page_up":
                self._tracker = self._tracker.previous()
            case "^":
                self._tracker = self._tracker.first()
            case "$":
                self._tracker = self._tracker.last()
            case "g":
                self._go_to_slide()
            case "r" | "ctrl_l":
                self.reload()
            case "q" | "escape" | "ctrl_x":
                self._write(self._renderer.clear())
                self.stop()
            case "ctrl_c":
                raise KeyboardInterrupt
            case key if len(key) == 1 and key in digits:
                self._buffer.append(key)

    def _go_to_slide(self) -> None:
        number = int("".join(self._buffer) or "0")
        self._buffer.clear()
        self._tracker = self._tracker.go_to(number - 1)

    def _handle(self, event: PresenterEvent) -> None:
        match event:
            case KeyPressed(key=key):
                _logger.debug("Key pressed: %r", key.name or key.value)
                self.keypress(key)
            case Resized():
                self._renderer = self._renderer.resize(
                    self._screen.width(), self._screen.height()
                )
                _logger.debug(
                    "Resized to %dx%d", self._renderer.width, self._renderer.height
                )
            case SourceChanged():
                self.reload()
            case InputClosed():
                self.stop()
            case InputFailed(error=error):
                raise error

    def _read_keys(self, stop_reading: Event) -> None:
        while not stop_reading.is_set():
            try:
                key = self._key_reader.read_key(timeout=_POLL_INTERVAL)
            except Exception as e:
                self._events.put(InputFailed(e))
                return
            if key is not None:
                self._events.put(KeyPressed(key))
            elif getattr(self._key_reader, "closed", False):
                self._events.put(InputClosed())
                return

    def _subscribe_resize(self) -> Any:
        if self._screen.is_windows():
            return None
        from signal import SIGWINCH, signal

        return signal(SIGWINCH, self.notify_resize)

    def _unsubscribe_resize(self, previous_handler: Any) -> None:
        if self._screen.is_windows():
            return
        from signal import SIG_DFL, SIGWINCH, signal

        signal(SIGWINCH, SIG_DFL if previous_handler is None else previous_handler)

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()
