"""Defines parser functions for the KANJIDIC dictionary file.

See `<http://www.edrdg.org/wiki/index.php/KANJIDIC_Project>`_
for more information.
"""

import logging
import re

from typing import Iterable, Optional

from pydantic import ValidationError

from .. import fields
from ..errors import (
    InvalidFieldValue,
    KanjidicError,
    MalformedMorohashi,
    NotADataLine,
    ParseError,
    UnrecognizedToken,
)
from ..models import Dictionary, Entry

logger = logging.getLogger('neo4kanjidic')

HIRAGANA = ('\u3040', '\u309f')
KATAKANA = ('\u30a0', '\u30ff')
KATAKANA_PHONETIC_EXT = ('\u31f0', '\u31ff')

CJK_IDEOGRAPHS = (
    ('\u3400', '\u4dbf'),
    ('\u4e00', '\u9fff'),
    ('\uf900', '\ufaff'),
    ('\U00020000', '\U0003134f'),
)

COMMENT_PREFIXES = ('#', '\uff03')

# English meanings are enclosed in braces and may contain spaces
MEANING_PATTERN = re.compile(r'\{([^}]*)\}')

HEX_PATTERN = re.compile(r'^[0-9A-Fa-f]+$')


def in_ranges(c: str, ranges) -> bool:
    """Returns ``True`` iff character `c` lies in one of `ranges`."""

    return any(lo <= c <= hi for lo, hi in ranges)


def is_kanji(string: str) -> bool:
    """Returns ``True`` iff `string` is exactly one CJK ideograph."""

    return len(string) == 1 and in_ranges(string, CJK_IDEOGRAPHS)


def is_katakana(string: str) -> bool:
    """Returns ``True`` iff `string` contains a katakana character."""

    return any(in_ranges(c, (KATAKANA, KATAKANA_PHONETIC_EXT)) for c in string)


def is_hiragana(string: str) -> bool:
    """Returns ``True`` iff `string` contains a hiragana character."""

    return any(in_ranges(c, (HIRAGANA,)) for c in string)


def get_meanings(line: str):
    """Splits the braced English meanings out of `line`.

    Args:
        line: The dictionary line.

    Returns:
        A tuple of the line with the meanings removed, the list of meanings,
        and whether the kokuji marker was among them.
    """

    meanings = []
    kokuji = False
    for meaning in MEANING_PATTERN.findall(line):
        if meaning == fields.KOKUJI_MARKER:
            kokuji = True
        else:
            meanings.append(meaning)

    return MEANING_PATTERN.sub(' ', line), meanings, kokuji


def parse_entry(line: str, strict: bool = False) -> Entry:
    """Returns :class:`~neo4kanjidic.models.Entry` for `line`.

    Args:
        line: One decoded line of the KANJIDIC file.
        strict: Raise on unrecognized tokens instead of skipping them.

    Returns:
        The entry object.

    Raises:
        NotADataLine: If `line` is a comment or header line.
        UnrecognizedToken: If `strict` is set and a token matches no tag.
        InvalidFieldValue: If a field value has the wrong form.
    """

    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIXES):
        raise NotADataLine(line)

    rest, english, kokuji = get_meanings(line)
    tokens = rest.split()
    if len(tokens) < 2 or not is_kanji(tokens[0]):
        raise NotADataLine(line)

    kanji, jiscode, *tokens = tokens
    if not HEX_PATTERN.match(jiscode):
        raise InvalidFieldValue(f'{kanji}: bad JIS code {jiscode!r}')

    values = dict(kanji=kanji, jiscode=jiscode, kokuji=kokuji)
    if english:
        values['english'] = english

    # Hiragana readings go to kunyomi until a T1 or T2 marker is seen
    hiragana_field = 'kunyomi'
    for token in tokens:
        if token == fields.NANORI_MARKER:
            hiragana_field = 'nanori'
        elif token == fields.RADICAL_NAME_MARKER:
            hiragana_field = 'radical_name'
        elif is_katakana(token):
            values.setdefault('onyomi', []).append(token)
        elif is_hiragana(token):
            values.setdefault(hiragana_field, []).append(token)
        else:
            try:
                spec, value = fields.classify(token)
            except UnrecognizedToken:
                if strict:
                    raise
                logger.warning('%s: skipping unrecognized token %r',
                               kanji, token)
                continue
            fields.store(values, spec, value)

    volume_page = values.get('morohashi_volume_page')
    if volume_page is not None:
        try:
            values['morohashi'] = fields.parse_morohashi(
                volume_page,
                values.get('morohashi_index'),
            )
        except MalformedMorohashi as exc:
            logger.warning('%s: %s', kanji, exc)

    values['radical'] = get_radical(values)

    try:
        return Entry(**values)
    except ValidationError as exc:
        raise InvalidFieldValue(f'{kanji}: {exc}') from exc


def get_radical(values: dict) -> Optional[str]:
    """Returns the effective radical: the classical one, else the bushu."""

    classical = values.get('classical_radical')
    return classical if classical is not None else values.get('bushu')


def parse_dictionary(lines: Iterable[str], strict: bool = False) -> Dictionary:
    """Returns the kanji to entry mapping for the lines of a KANJIDIC file.

    Comment and header lines are skipped. Should a kanji occur twice, its
    last line wins.

    Args:
        lines: The decoded lines of the file.
        strict: Passed to :func:`parse_entry`.

    Returns:
        A dictionary mapping each kanji to its entry.

    Raises:
        ParseError: If a data line cannot be parsed.
    """

    dictionary = {}
    for line_number, line in enumerate(lines, start=1):
        try:
            entry = parse_entry(line, strict=strict)
        except NotADataLine:
            logger.debug('Skipping line %s', line_number)
            continue
        except KanjidicError as exc:
            raise ParseError(line_number, str(exc)) from exc

        if entry.kanji in dictionary:
            logger.debug('Line %s: duplicate kanji %s replaces earlier entry',
                         line_number, entry.kanji)
        dictionary[entry.kanji] = entry

    logger.debug('Parsed %s entries', len(dictionary))
    return dictionary


def read_kanjidic(
    path: str,
    encoding: str = 'euc-jp',
    strict: bool = False,
) -> Dictionary:
    """Reads and parses the KANJIDIC file at `path`.

    Args:
        path: Path to the file.
        encoding: The file's encoding; KANJIDIC is distributed in EUC-JP.
        strict: Passed to :func:`parse_entry`.

    Returns:
        A dictionary mapping each kanji to its entry.
    """

    with open(path, encoding=encoding) as kdf:
        return parse_dictionary(kdf, strict=strict)
