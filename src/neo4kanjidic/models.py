"""Defines entry models for the KANJIDIC dictionary."""

from typing import Dict, List, Optional

from pydantic import BaseModel, field_validator


class Morohashi(BaseModel):
    """Model for a Morohashi Dai Kan-Wa Jiten reference."""
    volume: int
    page: int
    index: Optional[str] = None


class Entry(BaseModel):
    """Model for one kanji line of KANJIDIC.

    Every known field tag has exactly one attribute (see
    :data:`neo4kanjidic.fields.FIELDS`). Tags absent from the line leave
    their attribute as ``None``; list attributes are never empty.
    """
    kanji: str
    jiscode: str

    # Single-valued codes
    unicode: Optional[str] = None
    bushu: Optional[int] = None
    classical_radical: Optional[int] = None
    grade: Optional[int] = None
    frequency: Optional[int] = None
    jlpt: Optional[int] = None
    nelson: Optional[str] = None
    halpern: Optional[str] = None
    skip: Optional[str] = None
    gakken: Optional[str] = None
    heisig: Optional[str] = None
    henshall: Optional[str] = None
    spahn_hadamitzky: Optional[str] = None
    kanji_and_kana: Optional[str] = None
    morohashi_index: Optional[str] = None
    morohashi_volume_page: Optional[str] = None
    busy_people: Optional[str] = None
    crowley: Optional[str] = None
    hodges_okazaki: Optional[str] = None
    kodansha_compact: Optional[str] = None
    hensall_guide: Optional[str] = None
    kanji_in_context: Optional[str] = None
    halpern_kld: Optional[str] = None
    halpern_kld_2013: Optional[str] = None
    heisig_french: Optional[str] = None
    heisig_6th: Optional[str] = None
    oneill_essential: Optional[str] = None
    halpern_kkd_2013: Optional[str] = None
    de_roo: Optional[str] = None
    sakade: Optional[str] = None
    tuttle_cards: Optional[str] = None

    # Multi-valued codes
    strokes: Optional[List[str]] = None
    four_corner: Optional[List[str]] = None
    oneill_names: Optional[List[str]] = None
    new_nelson: Optional[List[str]] = None
    korean: Optional[List[str]] = None
    pinyin: Optional[List[str]] = None
    kanji_and_kana_2011: Optional[List[str]] = None
    xref_jis: Optional[List[str]] = None
    xref_halpern: Optional[List[str]] = None
    xref_spahn_hadamitzky: Optional[List[str]] = None
    xref_nelson: Optional[List[str]] = None
    xref_oneill: Optional[List[str]] = None
    xref_de_roo: Optional[List[str]] = None
    skip_misclass_position: Optional[List[str]] = None
    skip_misclass_rad_phon: Optional[List[str]] = None
    skip_misclass_strokes: Optional[List[str]] = None
    skip_misclass_both: Optional[List[str]] = None

    # Readings and meanings
    onyomi: Optional[List[str]] = None
    kunyomi: Optional[List[str]] = None
    nanori: Optional[List[str]] = None
    radical_name: Optional[List[str]] = None
    english: Optional[List[str]] = None

    # Derived
    radical: Optional[int] = None
    kokuji: bool = False
    morohashi: Optional[Morohashi] = None
    kanji_id: Optional[int] = None

    @field_validator('strokes')
    @classmethod
    def check_strokes(cls, strokes: Optional[List[str]]):
        """Rejects stroke counts which are not whole numbers."""
        for count in strokes or ():
            if not count.isdigit():
                raise ValueError(f'stroke count {count!r} is not a number')
        return strokes


Dictionary = Dict[str, Entry]
