"""Chinese phrase dictionaries, prefix matching, a binary lexicon format and phrase extraction."""

__version__ = "1.1.3"

__all__ = [
    "binarydict",
    "dictgroup",
    "dictionary",
    "entry",
    "errors",
    "lexicon",
    "phrase_extract",
]