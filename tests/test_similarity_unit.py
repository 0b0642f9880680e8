"""
Unit tests for bigram extraction and the Dice coefficient.
"""

import math

import pytest

from licenser.config_parsers.settings import EMPTY_PAIR_COEFFICIENT
from licenser.scoring.similarity import bigrams, dice_coefficient, dice_from_sets


def test_bigrams_adjacent_pairs():
    assert bigrams("abc") == {("a", "b"), ("b", "c")}


def test_bigrams_repeated_pair_counts_once():
    # "aaaa" has three ("a", "a") pairs but only one set member
    assert bigrams("aaaa") == {("a", "a")}
    assert len(bigrams("abab")) == 2


def test_bigrams_short_strings_are_empty():
    assert bigrams("") == frozenset()
    assert bigrams("x") == frozenset()


def test_bigrams_multibyte_characters_are_single_units():
    s = "héé😀"
    assert bigrams(s) == {("h", "é"), ("é", "é"), ("é", "😀")}


def test_dice_known_value():
    # night: ni ig gh ht / nacht: na ac ch ht -> 1 shared pair
    assert dice_coefficient("night", "nacht") == pytest.approx(2 * 1 / (4 + 4))


@pytest.mark.parametrize("a,b", [
    ("MIT License", "MIT Licence"),
    ("Permission is hereby granted", "permission granted"),
    ("", "abc"),
    ("x", "xy"),
    ("日本語テキスト", "日本語のテキスト"),
])
def test_dice_is_symmetric(a, b):
    assert dice_coefficient(a, b) == dice_coefficient(b, a)


@pytest.mark.parametrize("s", ["ab", "MIT License", "aaaa", "Copyright (c) [year] [fullname]\n"])
def test_self_similarity_is_one(s):
    assert dice_coefficient(s, s) == 1.0


@pytest.mark.parametrize("a,b", [
    ("abc", "xyz"),
    ("abcdef", "abc"),
    ("the quick brown fox", "the lazy dog"),
    ("", "nonempty"),
])
def test_dice_bounds(a, b):
    c = dice_coefficient(a, b)
    assert 0.0 <= c <= 1.0


def test_no_overlap_is_zero():
    assert dice_coefficient("abc", "xyz") == 0.0


@pytest.mark.parametrize("a,b", [("", ""), ("a", ""), ("a", "a"), ("a", "b")])
def test_both_empty_bigram_sets_use_fallback(a, b):
    # 0/0 case: neither string has two characters
    c = dice_coefficient(a, b)
    assert c == EMPTY_PAIR_COEFFICIENT == 0.0
    assert math.isfinite(c)


def test_dice_from_sets_matches_string_version():
    a, b = "licensed under", "license undone"
    assert dice_from_sets(bigrams(a), bigrams(b)) == dice_coefficient(a, b)
