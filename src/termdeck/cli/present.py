from logging import getLogger
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from ..configuring.settings import ColorMode
from . import app

_logger = getLogger(__name__)


@app.default
def present(
    file: Path,
    /,
    *,
    color: ColorMode | None = None,
    no_color: Annotated[bool, Parameter(negative="")] = False,
    watch: Annotated[bool | None, Parameter(name=["--watch", "-w"])] = None,
    debug: Annotated[bool, Parameter(name=["--debug", "-d"], negative="")] = False,
) -> None:
    """Present the slides of FILE.

    Controls: first ^, go to 1..n+g, last $, next n l Right Space, previous p h \
    Left Backspace, reload r Ctrl+L, quit q Esc.

    Args:
        file: Markdown document holding the slides
        color: When to color output
        no_color: Do not color output. Identical to --color=never
        watch: Watch for changes in the file with slides
        debug: Run in debug mode: log debug messages and show error tracebacks

    """
    from logging import DEBUG
    from os import environ
    from sys import exit as sys_exit

    from ..configuring.settings import Settings
    from ..exceptions import TermdeckError
    from ..running import run

    if debug:
        getLogger().setLevel(DEBUG)

    if no_color or (color is None and environ.get("NO_COLOR")):
        color = "never"
    try:
        settings = Settings.from_yaml().with_overrides(color=color, watch=watch)
        _logger.debug("Running with settings %s", settings)
        run(file, settings)
    except TermdeckError as e:
        if debug:
            raise
        _logger.error("Error: %s", e)
        sys_exit(1)
