from sys import stdin, stdout
from typing import TextIO

from ..configuring.settings import Settings
from .protocols import (
    ConverterProtocol,
    CursorProtocol,
    FileWatcherProtocol,
    KeyReaderProtocol,
    ScreenProtocol,
)


class ComponentsFactory:
    """Build the terminal collaborators of a presentation from the settings."""

    def __init__(
        self, settings: Settings, input_stream: TextIO = stdin, output: TextIO = stdout
    ) -> None:
        self._settings = settings
        self._input = input_stream
        self._output = output

    def color_enabled(self) -> bool:
        match self._settings.color:
            case "always":
                return True
            case "never":
                return False
            case _:
                return self._output.isatty()

    def converter(self) -> ConverterProtocol:
        from .converter import RichConverter

        return RichConverter(color=self.color_enabled())

    def cursor(self) -> CursorProtocol:
        from .cursor import AnsiCursor

        return AnsiCursor()

    def key_reader(self) -> KeyReaderProtocol:
        from .keys import TerminalKeyReader

        return TerminalKeyReader(input_stream=self._input)

    def screen(self) -> ScreenProtocol:
        from .screen import TerminalScreen

        return TerminalScreen()

    def file_watcher(self) -> FileWatcherProtocol:
        from .watcher import WatchdogFileWatcher

        return WatchdogFileWatcher(minimum_delay=self._settings.watch_delay)
