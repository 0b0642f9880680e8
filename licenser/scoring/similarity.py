# licenser/scoring/similarity.py
from __future__ import annotations
from typing import FrozenSet

from licenser.config_parsers.settings import EMPTY_PAIR_COEFFICIENT
from licenser.models.types import Bigram


def bigrams(s: str) -> FrozenSet[Bigram]:
    """
    Set of adjacent character pairs in s.
    Pairs are taken per code point; a pair repeated in s counts once.
    """
    return frozenset(zip(s, s[1:]))


def dice_from_sets(ba: FrozenSet[Bigram], bb: FrozenSet[Bigram]) -> float:
    total = len(ba) + len(bb)
    if total == 0:
        return EMPTY_PAIR_COEFFICIENT
    return 2.0 * len(ba & bb) / total


def dice_coefficient(a: str, b: str) -> float:
    """
    Dice coefficient of the bigram sets of a and b: 2*|A & B| / (|A| + |B|).
    Returns EMPTY_PAIR_COEFFICIENT when neither string has a bigram.
    """
    return dice_from_sets(bigrams(a), bigrams(b))
