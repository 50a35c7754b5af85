from .protocols import CursorProtocol

_CSI = "\x1b["


class AnsiCursor(CursorProtocol):
    """Produce ANSI escape sequences for cursor movements.

    Columns and rows are 0-based, the escape sequences themselves are 1-based.
    """

    def move_to(self, column: int, row: int) -> str:
        return f"{_CSI}{row + 1};{column + 1}H"

    def clear_screen(self) -> str:
        return f"{_CSI}2J"

    def hide(self) -> str:
        return f"{_CSI}?25l"

    def show(self) -> str:
        return f"{_CSI}?25h"
