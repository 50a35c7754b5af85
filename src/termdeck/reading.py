from logging import getLogger
from pathlib import Path

from .configuring.metadata import wrap
from .models.deck import Deck
from .parsing.parser import Parser
from .utils import read_text

_logger = getLogger(__name__)


def read_deck(path: Path | str | None, parser: Parser | None = None) -> Deck:
    """Load, parse and resolve the deck stored at `path`.

    Args:
        path: Path of the Markdown document
        parser: Parser to use, a default one is created if not given

    Returns:
        The resolved deck.
    """
    deck = wrap((parser or Parser()).parse(read_text(path)))
    _logger.debug("Read %d slide(s) from %s", len(deck), path)
    return deck
