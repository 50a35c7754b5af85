"""Model classes for parsed and resolved decks."""

from dataclasses import dataclass, field
from typing import Any

from .configuration import Configuration


@dataclass(frozen=True)
class ParsedSlide:
    """Slide as found in the document, before its configuration is resolved."""

    content: str
    """Raw Markdown content of the slide."""

    config: dict[str, Any] = field(default_factory=dict)
    """Raw configuration read from the opening separator line."""


@dataclass(frozen=True)
class ParsedDeck:
    """Output of the parser: raw global configuration and raw slides."""

    config: dict[str, Any] = field(default_factory=dict)
    slides: list[ParsedSlide] = field(default_factory=list)


@dataclass(frozen=True)
class Slide:
    content: str
    config: Configuration


@dataclass(frozen=True)
class Deck:
    """Top of the hierarchy: what the presenter shows.

    Built once per load or reload of the source document and never modified \
    afterwards.
    """

    config: Configuration
    """Global configuration, with every field resolved."""

    slides: tuple[Slide, ...] = ()
    """Slides in presentation order."""

    def __len__(self) -> int:
        return len(self.slides)

    def slide_at(self, index: int) -> Slide | None:
        if 0 <= index < len(self.slides):
            return self.slides[index]
        return None
