from logging import getLogger
from pathlib import Path
from sys import stdout
from typing import TextIO

from .components.factory import ComponentsFactory
from .components.protocols import FileWatcherProtocol
from .configuring.settings import Settings
from .exceptions import ReadError
from .parsing.parser import Parser
from .presenting import Presenter
from .reading import read_deck
from .rendering import Renderer

_logger = getLogger(__name__)


def build_presenter(
    path: Path, factory: ComponentsFactory, output: TextIO = stdout
) -> Presenter:
    screen = factory.screen()
    renderer = Renderer(
        converter=factory.converter(),
        cursor=factory.cursor(),
        width=screen.width(),
        height=screen.height(),
    )
    parser = Parser()
    return Presenter(
        lambda: read_deck(path, parser),
        factory.key_reader(),
        renderer,
        screen,
        output,
    )


def run(
    path: Path,
    settings: Settings,
    factory: ComponentsFactory | None = None,
    output: TextIO = stdout,
) -> None:
    """Present the slides stored in `path` until the user quits.

    Args:
        path: Markdown document holding the slides
        settings: Application settings, with the command line overrides applied
        factory: Builds the terminal collaborators, a default one is used if not \
            given
        output: Stream to write the slides to

    Raises:
        ReadError: Raised if the document cannot be read.
    """
    if not path.is_file():
        msg = f"cannot read {path}: no such file"
        raise ReadError(msg)
    factory = factory or ComponentsFactory(settings, output=output)
    presenter = build_presenter(path, factory, output)
    watcher: FileWatcherProtocol | None = None
    try:
        if settings.watch:
            watcher = factory.file_watcher()
            watcher.watch(path, presenter.notify_change)
            _logger.debug("Watching %s for changes", path)
        presenter.start()
    finally:
        if watcher is not None:
            watcher.stop()
