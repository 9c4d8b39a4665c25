"""Parses the KANJIDIC kanji dictionary and loads it into Neo4j."""

from .errors import (
    InvalidFieldValue,
    KanjidicError,
    MalformedMorohashi,
    NotADataLine,
    ParseError,
    UnrecognizedToken,
)
from .models import Dictionary, Entry, Morohashi
from .ordering import by_grade, compare, ordering
from .parsers.kanjidic import parse_dictionary, parse_entry, read_kanjidic

__version__ = '0.1.0'
