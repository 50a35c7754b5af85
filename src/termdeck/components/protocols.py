from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .keys import KeyEvent


class ConverterProtocol(Protocol):
    """Turn Markdown into lines of terminal output."""

    def convert(
        self,
        content: str,
        *,
        width: int,
        symbols: str | dict[str, Any] | None = None,
        theme: dict[str, Any] | None = None,
    ) -> str:
        """Convert Markdown content into (optionally styled) terminal output.

        Args:
            content: Markdown to convert
            width: Maximum width of the output lines
            symbols: Symbol set used for bullets, rules and borders
            theme: Styles of the Markdown elements

        Returns:
            The converted content, one terminal line per text line.
        """


class CursorProtocol(Protocol):
    def move_to(self, column: int, row: int) -> str: ...

    def clear_screen(self) -> str: ...

    def hide(self) -> str: ...

    def show(self) -> str: ...


class KeyReaderProtocol(Protocol):
    def read_key(self, timeout: float | None = None) -> "KeyEvent | None":
        """Block until a key is pressed or `timeout` seconds elapsed.

        Returns:
            The key event, or None on timeout.
        """

    def __enter__(self) -> "KeyReaderProtocol": ...

    def __exit__(self, *args: object) -> None: ...


class ScreenProtocol(Protocol):
    def width(self) -> int: ...

    def height(self) -> int: ...

    def is_windows(self) -> bool: ...


class FileWatcherProtocol(Protocol):
    def watch(self, path: Path, on_change: Callable[[], Any]) -> None: ...

    def stop(self) -> None: ...
