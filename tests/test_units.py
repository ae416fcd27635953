"""
Character unit tests: scalar and grapheme segmentation must agree between
build and search.
"""

import pytest

import rlfm
from rlfm import Segmentation, split_units

# "e" followed by a combining acute accent, written twice
ACCENTED = "e\u0301a e\u0301"


def test_scalar_split() -> None:
    assert split_units("e\u0301a", Segmentation.SCALAR) == ("e", "\u0301", "a")


def test_grapheme_split() -> None:
    assert split_units(ACCENTED, Segmentation.GRAPHEME) == ("e\u0301", "a", " ", "e\u0301")


def test_sequence_is_kept_as_is() -> None:
    assert split_units(["e\u0301", "a"], Segmentation.SCALAR) == ("e\u0301", "a")


def test_grapheme_index() -> None:
    """
    Validates counts when a user-perceived character spans two code points.
    """
    index = rlfm.build(ACCENTED, rlfm.BuildOptions(segmentation=Segmentation.GRAPHEME))
    assert len(index) == 4
    assert index.segmentation is Segmentation.GRAPHEME
    assert index.search("e\u0301") == 2
    assert index.search("e\u0301a") == 1
    # a bare "e" is not a unit of this index
    assert index.search("e") == 0
    assert index.search("") == 5


def test_scalar_index_of_same_text() -> None:
    index = rlfm.build(ACCENTED)
    assert len(index) == 6
    assert index.search("e") == 2
    assert index.search("\u0301") == 2
    assert index.search("e\u0301") == 2


@pytest.mark.parametrize("segmentation", list(Segmentation))
def test_emoji_sequences(segmentation: Segmentation) -> None:
    family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
    text = family + "x" + family
    index = rlfm.build(text, rlfm.BuildOptions(segmentation=segmentation))
    assert index.search(family) == 2
    assert index.search("x" + family) == 1
