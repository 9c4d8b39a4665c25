"""Defines the exception hierarchy for KANJIDIC parsing."""


class KanjidicError(Exception):
    """Base class for all KANJIDIC parsing errors."""


class NotADataLine(KanjidicError):
    """Raised for lines which carry no kanji entry (comments, headers)."""


class UnrecognizedToken(KanjidicError):
    """Raised when a token matches none of the known field tags.

    Args:
        token: The offending token.
    """

    def __init__(self, token: str):
        super().__init__(f'unrecognized token {token!r}')
        self.token = token


class MalformedMorohashi(KanjidicError):
    """Raised when a Morohashi volume/page value cannot be decomposed.

    Args:
        value: The offending ``MP`` value.
    """

    def __init__(self, value: str):
        super().__init__(f'malformed Morohashi volume/page {value!r}')
        self.value = value


class InvalidFieldValue(KanjidicError):
    """Raised when a field value cannot be coerced to its declared type."""


class ParseError(KanjidicError):
    """Raised when a data line of a dictionary cannot be parsed.

    Args:
        line_number: The 1-based number of the failing line.
        reason: Description of the failure.
    """

    def __init__(self, line_number: int, reason: str):
        super().__init__(f'line {line_number}: {reason}')
        self.line_number = line_number
        self.reason = reason
