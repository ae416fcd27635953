"""
Pytest configuration and shared fixtures for rlfm tests.

Provides immutable text fixtures and a brute-force cyclic counter used as
the oracle for backward search.
"""

import random
from dataclasses import dataclass
from typing import Sequence, Tuple

import pytest


@dataclass(frozen=True)
class TransformCase:
    """
    Known transform of a text, with the tables it must produce.
    """

    text: str
    bwt: str
    last_rotation_index: int
    c_table: Tuple[Tuple[str, int], ...] = ()
    amount_of: Tuple[Tuple[str, int], ...] = ()


def cyclic_count(text: Sequence[str], pattern: Sequence[str]) -> int:
    """
    Counts start positions i with text[i], text[i+1], ... (wrapping around)
    equal to pattern. A pattern longer than text never fits and counts 0.
    """
    n = len(text)
    m = len(pattern)
    if m == 0:
        return n + 1
    doubled = list(text) + list(text)
    return sum(1 for i in range(n) if doubled[i:i + m] == list(pattern))


@pytest.fixture
def transform_cases() -> list[TransformCase]:
    """
    Hand-checked transforms, including periodic inputs whose rotations tie.
    """
    return [
        TransformCase(
            "banana",
            "nnbaaa",
            3,
            (("a", 0), ("b", 3), ("n", 4)),
            (("a", 3), ("b", 1), ("n", 2)),
        ),
        TransformCase("mississippi", "pssmipissii", 4),
        TransformCase("abab", "bbaa", 0, (("a", 0), ("b", 2)), (("a", 2), ("b", 2))),
        TransformCase("aaaa", "aaaa", 0, (("a", 0),), (("a", 4),)),
        TransformCase("x", "x", 0, (("x", 0),), (("x", 1),)),
    ]


@pytest.fixture
def corpus() -> list[str]:
    """
    Small texts over narrow alphabets, so that repeats and ties are common.
    """
    rng = random.Random(1234)
    texts = [
        "banana",
        "mississippi",
        "simple test with some words",
        "abracadabra",
        "aaaaaaa",
        "abababab",
        "GATTACAGATTACA",
    ]
    for alphabet, length in (("ab", 9), ("ab", 16), ("acgt", 20), ("xyz ", 33)):
        for _ in range(3):
            texts.append("".join(rng.choice(alphabet) for _ in range(length)))
    return texts


@pytest.fixture
def brute_count():
    return cyclic_count
