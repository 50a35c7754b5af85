"""Present Markdown-powered slide decks in the terminal."""

app_name = "termdeck"
__version__ = "0.3.0"
