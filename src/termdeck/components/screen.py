from shutil import get_terminal_size
from sys import platform

from .protocols import ScreenProtocol


class TerminalScreen(ScreenProtocol):
    def width(self) -> int:
        return get_terminal_size().columns

    def height(self) -> int:
        return get_terminal_size().lines

    def is_windows(self) -> bool:
        return platform in ("win32", "cygwin")
