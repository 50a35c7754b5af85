from logging import INFO, basicConfig

from cyclopts import App
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__

app = App(
    name="termdeck",
    help="Present Markdown-powered slide decks in the terminal.",
    version=__version__,
    version_flags=["--version", "-v"],
)


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                tracebacks_show_locals=False,
            )
        ],
    )
    from . import present  # noqa: F401

    app()
