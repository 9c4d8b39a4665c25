"""Defines the dictionary display order and grade grouping of kanji.

Kanji are ordered as in the index of a printed kanji dictionary: by stroke
count, then by radical, then by JIS code.
"""

import logging

from typing import Dict, List, Tuple

from .models import Dictionary, Entry

logger = logging.getLogger('neo4kanjidic')

# Meaning of each value of the grade (G) field
GRADES: Dict[int, str] = {
    1: 'Kyouiku kanji, grade 1',
    2: 'Kyouiku kanji, grade 2',
    3: 'Kyouiku kanji, grade 3',
    4: 'Kyouiku kanji, grade 4',
    5: 'Kyouiku kanji, grade 5',
    6: 'Kyouiku kanji, grade 6',
    8: 'Joyo kanji taught in secondary school',
    9: 'Jinmeiyo kanji',
    10: 'Jinmeiyo kanji, variant of a Joyo kanji',
}

JOYO_GRADES = frozenset(range(1, 9))
JINMEIYO_GRADES = frozenset((9, 10))


def sort_key(entry: Entry) -> Tuple[bool, int, bool, int, int]:
    """Returns the stroke/radical/JIS sort key of `entry`.

    The first listed stroke count is used. Entries missing a stroke count
    or radical sort after those that have one.
    """

    strokes = int(entry.strokes[0]) if entry.strokes else 0
    radical = entry.radical if entry.radical is not None else 0
    return (
        not entry.strokes,
        strokes,
        entry.radical is None,
        radical,
        int(entry.jiscode, 16),
    )


def compare(dictionary: Dictionary, a: str, b: str) -> int:
    """Compares kanji `a` and `b` of `dictionary` in display order.

    Args:
        dictionary: The dictionary holding both kanji.
        a: The first kanji.
        b: The second kanji.

    Returns:
        ``-1`` if `a` sorts first, ``1`` if `b` does, ``0`` if they tie.

    Raises:
        KeyError: If either kanji is not in `dictionary`.
    """

    key_a = sort_key(dictionary[a])
    key_b = sort_key(dictionary[b])
    return (key_a > key_b) - (key_a < key_b)


def ordering(dictionary: Dictionary) -> List[str]:
    """Returns the kanji of `dictionary` in display order.

    As a side effect, sets ``kanji_id`` of every entry to its 0-based
    position in the order.

    Args:
        dictionary: The dictionary to order.

    Returns:
        List of all kanji of `dictionary`.
    """

    order = sorted(dictionary, key=lambda kanji: sort_key(dictionary[kanji]))
    for kanji_id, kanji in enumerate(order):
        dictionary[kanji].kanji_id = kanji_id

    logger.debug('Ordered %s kanji', len(order))
    return order


def by_grade(dictionary: Dictionary, grade: int) -> List[str]:
    """Returns the kanji of `dictionary` taught in `grade`, in display order.

    Raises:
        ValueError: If `grade` is not a grade of :data:`GRADES`.
    """

    if grade not in GRADES:
        raise ValueError(f'unknown grade {grade}')

    kanji = [k for k, entry in dictionary.items() if entry.grade == grade]
    return sorted(kanji, key=lambda k: sort_key(dictionary[k]))


def grade_description(grade: int) -> str:
    """Returns the description of `grade`, see :data:`GRADES`."""

    return GRADES[grade]


def is_joyo(entry: Entry) -> bool:
    """Returns ``True`` iff `entry` is a Joyo kanji (grades 1 to 8)."""

    return entry.grade in JOYO_GRADES


def is_jinmeiyo(entry: Entry) -> bool:
    """Returns ``True`` iff `entry` is a Jinmeiyo kanji (grades 9 and 10)."""

    return entry.grade in JINMEIYO_GRADES
