"""Modules containing model classes for different parts of termdeck.

The intent is that the classes defined in this package should not end up containing \
too much logic besides validation.

- [`layout`][termdeck.models.layout] contains the alignment and margin value types
- [`configuration`][termdeck.models.configuration] contains the six-field \
    configuration shared by decks and slides, and its defaults
- [`deck`][termdeck.models.deck] contains models that represent parsed and resolved \
    decks
"""
