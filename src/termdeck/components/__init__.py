"""Terminal collaborators of the presentation.

Each collaborator is described by a protocol in \
[`protocols`][termdeck.components.protocols] and implemented in its own module. \
[`ComponentsFactory`][termdeck.components.factory.ComponentsFactory] builds them from \
the application settings.
"""
