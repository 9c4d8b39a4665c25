"""Defines the KANJIDIC field tags and the token classifier.

Each coded token of a KANJIDIC line is an upper-case tag immediately followed
by its value, e.g. ``S11`` (stroke count 11) or ``XJ13D21`` (JIS
cross-reference ``13D21``). See
`<http://www.edrdg.org/wiki/index.php/KANJIDIC_Project>`_ for the format.
"""

import re

from typing import Any, Dict, NamedTuple, Optional, Tuple

from .errors import MalformedMorohashi, UnrecognizedToken
from .models import Morohashi

# Leading tag letters of a coded token
TAG_PATTERN = re.compile(r'^[A-Z]+')


class FieldSpec(NamedTuple):
    """Describes one KANJIDIC field tag."""
    tag: str
    name: str
    multi: bool
    description: str


_FIELDS = (
    FieldSpec('U', 'unicode', False, 'Unicode code point as a hexadecimal number'),
    FieldSpec('B', 'bushu', False,
              'Bushu (radical as defined by the Nelson kanji dictionary)'),
    FieldSpec('C', 'classical_radical', False,
              'Classical radical, where this differs from the Nelson radical'),
    FieldSpec('G', 'grade', False,
              'Year of elementary school this kanji is taught'),
    FieldSpec('F', 'frequency', False, 'Frequency of kanji'),
    FieldSpec('J', 'jlpt', False, 'Japanese proficiency test level'),
    FieldSpec('N', 'nelson', False, 'Index in the Nelson kanji dictionary'),
    FieldSpec('V', 'new_nelson', True,
              'Index in the New Nelson kanji dictionary'),
    FieldSpec('H', 'halpern', False,
              "Index in Halpern's New Japanese-English Character Dictionary"),
    FieldSpec('P', 'skip', False, 'SKIP code'),
    FieldSpec('S', 'strokes', True,
              'Stroke count; further values are common miscounts'),
    FieldSpec('Q', 'four_corner', True, 'Four-corner code'),
    FieldSpec('K', 'gakken', False, 'Gakken Kanji Dictionary index'),
    FieldSpec('L', 'heisig', False, 'Heisig "Remembering The Kanji" index'),
    FieldSpec('O', 'oneill_names', True, "O'Neill Japanese Names index"),
    FieldSpec('E', 'henshall', False, 'Henshall index'),
    FieldSpec('I', 'spahn_hadamitzky', False,
              'Spahn and Hadamitzky kanji dictionary descriptor'),
    FieldSpec('IN', 'kanji_and_kana', False,
              'Spahn and Hadamitzky "Kanji & Kana" index'),
    FieldSpec('MN', 'morohashi_index', False, 'Morohashi index number'),
    FieldSpec('MP', 'morohashi_volume_page', False, 'Morohashi volume/page'),
    FieldSpec('W', 'korean', True, 'Korean pronunciation'),
    FieldSpec('Y', 'pinyin', True, 'Pinyin pronunciation'),
    FieldSpec('DA', 'kanji_and_kana_2011', True,
              'Index in the 2011 edition of "Kanji & Kana"'),
    FieldSpec('DB', 'busy_people', False,
              '"Japanese for Busy People" textbook number'),
    FieldSpec('DC', 'crowley', False,
              'Index in "The Kanji Way to Japanese Language Power"'),
    FieldSpec('DF', 'hodges_okazaki', False,
              'Index in "Japanese Kanji Flashcards" by Hodges and Okazaki'),
    FieldSpec('DG', 'kodansha_compact', False,
              'Index in the "Kodansha Compact Kanji Guide"'),
    FieldSpec('DH', 'hensall_guide', False,
              'Index in "A Guide To Reading and Writing Japanese", 3rd ed.'),
    FieldSpec('DJ', 'kanji_in_context', False,
              'Index in "Kanji in Context" by Nishiguchi and Kono'),
    FieldSpec('DK', 'halpern_kld', False,
              "Index in Halpern's Kanji Learners Dictionary"),
    FieldSpec('DL', 'halpern_kld_2013', False,
              "Index in Halpern's Kanji Learners Dictionary, 2013 ed."),
    FieldSpec('DM', 'heisig_french', False,
              'Index in the French "Remembering the Kanji"'),
    FieldSpec('DN', 'heisig_6th', False,
              'Index in "Remembering The Kanji", 6th ed.'),
    FieldSpec('DO', 'oneill_essential', False,
              "Index in O'Neill's Essential Kanji"),
    FieldSpec('DP', 'halpern_kkd_2013', False,
              "Index in Halpern's Kodansha Kanji Dictionary, 2013 ed."),
    FieldSpec('DR', 'de_roo', False, 'De Roo "2001 Kanji" code'),
    FieldSpec('DS', 'sakade', False,
              'Index in "A Guide To Reading and Writing Japanese", early eds.'),
    FieldSpec('DT', 'tuttle_cards', False, 'Index in the Tuttle Kanji Cards'),
    FieldSpec('XJ', 'xref_jis', True, 'JIS code cross-reference'),
    FieldSpec('XH', 'xref_halpern', True, 'Halpern cross-reference'),
    FieldSpec('XI', 'xref_spahn_hadamitzky', True,
              'Spahn and Hadamitzky cross-reference'),
    FieldSpec('XN', 'xref_nelson', True, 'Nelson cross-reference'),
    FieldSpec('XO', 'xref_oneill', True, "O'Neill cross-reference"),
    FieldSpec('XDR', 'xref_de_roo', True, 'De Roo cross-reference'),
    FieldSpec('ZPP', 'skip_misclass_position', True,
              'SKIP misclassification by position'),
    FieldSpec('ZRP', 'skip_misclass_rad_phon', True,
              'SKIP misclassification by radical/phonetic'),
    FieldSpec('ZSP', 'skip_misclass_strokes', True,
              'SKIP misclassification by stroke count'),
    FieldSpec('ZBP', 'skip_misclass_both', True,
              'SKIP misclassification by stroke count and position'),
)

FIELDS: Dict[str, FieldSpec] = {spec.tag: spec for spec in _FIELDS}

MULTI_VALUED = frozenset(spec.tag for spec in _FIELDS if spec.multi)

# Reading-mode switches: readings after these go to nanori/radical names
NANORI_MARKER = 'T1'
RADICAL_NAME_MARKER = 'T2'

KOKUJI_MARKER = '(kokuji)'


def classify(token: str) -> Tuple[FieldSpec, str]:
    """Classifies a coded token by its field tag.

    Args:
        token: A whitespace-delimited token such as ``S11`` or ``XDR1234``.

    Returns:
        The matching field spec and the token's value (the text after the
        tag).

    Raises:
        UnrecognizedToken: If the leading capitals of `token` are not
            exactly a known tag.
    """

    match = TAG_PATTERN.match(token)
    if match is None or match.group() not in FIELDS:
        raise UnrecognizedToken(token)

    tag = match.group()
    return FIELDS[tag], token[len(tag):]


def store(values: Dict[str, Any], spec: FieldSpec, value: str):
    """Stores `value` for `spec` into the running field mapping `values`.

    Multi-valued fields are appended to, single-valued fields overwritten.
    """

    if spec.multi:
        values.setdefault(spec.name, []).append(value)
    else:
        values[spec.name] = value


def parse_morohashi(volume_page: str, index: Optional[str] = None) -> Morohashi:
    """Decomposes a Morohashi ``MP`` value into a reference.

    Args:
        volume_page: The ``MP`` value, e.g. ``1.0525``.
        index: The ``MN`` value, if present on the same line.

    Returns:
        The Morohashi reference.

    Raises:
        MalformedMorohashi: If the value is not ``<volume>.<page>``.
    """

    parts = volume_page.split('.')
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise MalformedMorohashi(volume_page)

    volume, page = parts
    return Morohashi(volume=int(volume), page=int(page), index=index)


def field_description(tag: str) -> str:
    """Returns the human-readable description of field `tag`.

    Raises:
        KeyError: If `tag` is not a known field tag.
    """

    return FIELDS[tag].description
