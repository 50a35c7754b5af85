"""Resolve raw configuration mappings into typed configurations.

The global configuration of a deck is merged over the defaults, while slide \
configurations only hold what the slide set: falling back on the global value for \
the other fields happens at render time.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..exceptions import ConfigurationError, UnknownConfigurationKeyError
from ..models.configuration import Configuration, default_configuration
from ..models.deck import Deck, ParsedDeck, Slide


def resolve(raw: Mapping[str, Any], is_global: bool) -> Configuration:
    """Build a configuration from a raw mapping.

    Args:
        raw: Configuration as parsed from the document
        is_global: Whether to merge the result over the defaults

    Raises:
        UnknownConfigurationKeyError: Raised if `raw` has keys that are not \
            configuration keys. All unknown keys are reported at once.
        ConfigurationError: Raised if a value cannot be converted.

    Returns:
        The resolved configuration.
    """
    validate_keys(raw)
    try:
        config = Configuration.model_validate(dict(raw))
    except ValidationError as e:
        msg = f"invalid configuration: {_describe(e)}"
        raise ConfigurationError(msg) from e
    if is_global:
        return config.merged_over(default_configuration())
    return config


def validate_keys(raw: Mapping[str, Any]) -> None:
    unknown = [str(key) for key in raw if key not in Configuration.keys]
    if unknown:
        raise UnknownConfigurationKeyError(Configuration.keys, unknown)


def wrap(parsed: ParsedDeck) -> Deck:
    """Resolve the global and slide configurations of a parsed deck."""
    return Deck(
        config=resolve(parsed.config, is_global=True),
        slides=tuple(
            Slide(content=slide.content, config=resolve(slide.config, is_global=False))
            for slide in parsed.slides
        ),
    )


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(map(str, details['loc'])) or 'value'}: {details['msg']}"
        for details in error.errors()
    )
