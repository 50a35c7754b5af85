from typing import Any

from pytest import fixture

from termdeck.components.cursor import AnsiCursor
from termdeck.rendering import Renderer


class EchoConverter:
    """Return the content unchanged, recording the conversion arguments."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def convert(
        self,
        content: str,
        *,
        width: int,
        symbols: Any = None,
        theme: Any = None,
    ) -> str:
        self.calls.append(
            {"content": content, "width": width, "symbols": symbols, "theme": theme}
        )
        return content + "\n"


@fixture
def converter() -> EchoConverter:
    return EchoConverter()


@fixture
def renderer(converter: EchoConverter) -> Renderer:
    return Renderer(converter=converter, cursor=AnsiCursor(), width=20, height=8)
