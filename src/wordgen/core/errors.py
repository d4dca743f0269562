"""Exception hierarchy for puzzle generation."""


class WordGenError(Exception):
    """Base exception for wordgen failures."""


class ConfigurationError(WordGenError):
    """Raised for invalid grid sizes, alphabets, difficulties or page counts."""


class WordListError(WordGenError):
    """Raised when a word file cannot be read or has the wrong shape."""
