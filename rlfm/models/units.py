from enum import Enum
from typing import Sequence, Tuple, Union

import regex

# one extended grapheme cluster per match
_GRAPHEME = regex.compile(r"\X")

Units = Tuple[str, ...]


class Segmentation(Enum):
    """
    How a string is cut into character units.

    SCALAR splits into Unicode scalar values (one code point per unit).
    GRAPHEME splits into extended grapheme clusters, so that e.g. "e" followed
    by a combining accent is a single unit.
    """
    SCALAR = "scalar"
    GRAPHEME = "grapheme"


def split_units(text: Union[str, Sequence[str]], segmentation: Segmentation) -> Units:
    """
    Decompose text into character units.

    Args:
    text: a string, or an already segmented sequence of units (kept as is)
    segmentation: unit definition applied to strings

    Returns:
    Tuple of units
    """
    if not isinstance(text, str):
        return tuple(text)
    if segmentation is Segmentation.GRAPHEME:
        return tuple(_GRAPHEME.findall(text))
    return tuple(text)
