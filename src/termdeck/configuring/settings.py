from pathlib import Path
from typing import Annotated, Any, Literal, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .. import app_name
from ..exceptions import SettingsError
from ..utils import load_yaml

ColorMode = Literal["always", "auto", "never"]

_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


class Settings(BaseModel):
    """Application settings, read from the user configuration directory.

    Command line options take precedence over the values of the settings file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    color: ColorMode = "auto"
    """When to color output."""

    watch: bool = False
    """Whether to reload the slides when their file changes."""

    watch_delay: Annotated[float, Field(ge=0)] = 0.1
    """Minimum delay in seconds between two reloads triggered by file changes."""

    @classmethod
    def from_yaml(cls, directory: Path | None = None) -> Self:
        path = (directory or _user_config_dir) / f"{app_name}.yml"
        if not path.is_file():
            return cls()
        content = load_yaml(path)
        if content is None:
            return cls()
        try:
            return cls.model_validate(content)
        except ValidationError as e:
            msg = f"invalid settings in {path}:\n{e}"
            raise SettingsError(msg) from e

    def with_overrides(self, **overrides: Any) -> Self:
        """Return a copy with the overrides that are not None applied."""
        return self.model_copy(
            update={key: value for key, value in overrides.items() if value is not None}
        )
