"""Turn document text into a [`ParsedDeck`][termdeck.models.deck.ParsedDeck].

- [`scanner`][termdeck.parsing.scanner] tokenizes the document line by line
- [`parser`][termdeck.parsing.parser] groups tokens into the global block and slides
- [`metadata`][termdeck.parsing.metadata] loads YAML configuration blocks
"""
