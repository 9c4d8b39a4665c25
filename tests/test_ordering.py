"""Tests for the display order, comparator and grade grouping."""

import functools
import itertools

import pytest

from neo4kanjidic.models import Entry
from neo4kanjidic.ordering import (
    GRADES,
    by_grade,
    compare,
    grade_description,
    is_jinmeiyo,
    is_joyo,
    ordering,
    sort_key,
)
from neo4kanjidic.parsers.kanjidic import parse_dictionary

from .conftest import DISPLAY_ORDER


class TestOrdering:
    def test_display_order(self, dictionary):
        assert ordering(dictionary) == DISPLAY_ORDER

    def test_is_permutation(self, dictionary):
        order = ordering(dictionary)
        assert len(order) == len(dictionary)
        assert sorted(order) == sorted(dictionary)

    def test_kanji_ids_assigned_from_zero(self, dictionary):
        order = ordering(dictionary)
        ids = [dictionary[kanji].kanji_id for kanji in order]
        assert ids == list(range(len(order)))

    def test_reordering_is_stable(self, dictionary):
        assert ordering(dictionary) == ordering(dictionary)

    def test_first_stroke_count_used(self):
        dictionary = parse_dictionary([
            '猫 472D B94 S12 S11',
            '猟 4E6D B94 S11',
        ])
        assert ordering(dictionary) == ['猟', '猫']

    def test_jiscode_breaks_ties_numerically(self):
        dictionary = parse_dictionary([
            '犯 4848 B94 S5',
            '犮 4B00 B94 S5',
            '犰 4a0f B94 S5',
        ])
        assert ordering(dictionary) == ['犯', '犰', '犮']

    def test_empty(self):
        assert ordering({}) == []


class TestCompare:
    def test_same_strokes_sorted_by_radical(self, dictionary):
        assert compare(dictionary, '丑', '犬') == -1
        assert compare(dictionary, '犬', '五') == 1

    def test_strokes_before_radical(self, dictionary):
        assert compare(dictionary, '一', '丑') == -1
        assert compare(dictionary, '猫', '犬') == 1

    def test_equal(self, dictionary):
        assert compare(dictionary, '猫', '猫') == 0

    def test_consistent_with_ordering(self, dictionary):
        order = ordering(dictionary)
        for a, b in itertools.combinations(order, 2):
            assert compare(dictionary, a, b) == -1
            assert compare(dictionary, b, a) == 1

    def test_sorting_subset_matches_ordering(self, dictionary):
        order = ordering(dictionary)
        subset = ['働', '五', '一', '猫']
        key = functools.cmp_to_key(
            lambda a, b: compare(dictionary, a, b)
        )
        assert sorted(subset, key=key) == [k for k in order if k in subset]

    def test_unknown_kanji(self, dictionary):
        with pytest.raises(KeyError):
            compare(dictionary, '猫', '鳥')


def test_missing_strokes_sort_last():
    with_strokes = Entry(kanji='猫', jiscode='472D', strokes=['30'], radical=1)
    without = Entry(kanji='猟', jiscode='4E6D', radical=1)
    assert sort_key(with_strokes) < sort_key(without)


class TestGrades:
    def test_by_grade(self, dictionary):
        assert by_grade(dictionary, 1) == ['一', '五', '犬']
        assert by_grade(dictionary, 4) == ['働']
        assert by_grade(dictionary, 8) == ['亜', '猫']
        assert by_grade(dictionary, 9) == ['丑']
        assert by_grade(dictionary, 2) == []

    def test_grade_8_is_joyo(self, dictionary):
        cat = dictionary['猫']
        assert '猫' not in by_grade(dictionary, 2)
        assert is_joyo(cat)
        assert not is_jinmeiyo(cat)

    def test_jinmeiyo_excluded_from_school_grades(self, dictionary):
        for grade in range(1, 7):
            assert '丑' not in by_grade(dictionary, grade)
        assert is_jinmeiyo(dictionary['丑'])
        assert not is_joyo(dictionary['丑'])

    def test_ungraded(self):
        entry = Entry(kanji='猟', jiscode='4E6D')
        assert not is_joyo(entry)
        assert not is_jinmeiyo(entry)

    @pytest.mark.parametrize('grade', [0, 7, 11])
    def test_unknown_grade(self, dictionary, grade):
        with pytest.raises(ValueError):
            by_grade(dictionary, grade)

    def test_grade_table(self):
        assert sorted(GRADES) == [1, 2, 3, 4, 5, 6, 8, 9, 10]
        assert grade_description(9) == 'Jinmeiyo kanji'
