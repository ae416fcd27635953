from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Sequence, Union

import numpy as np

from ..constants.constants import CHECKPOINT_STRIDE
from ..index.rank import RankTable
from .units import Segmentation, Units, split_units


class CharTable(Mapping):
    """
    Read-only mapping from character unit to an integer.
    Compares equal to any mapping with the same items, e.g. a plain dict.
    """
    __slots__ = ("_data",)

    def __init__(self, data: Dict[str, int]):
        self._data = dict(data)

    def __getitem__(self, ch: str) -> int:
        return self._data[ch]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"CharTable({self._data!r})"

    def __getstate__(self):
        return self._data

    def __setstate__(self, state):
        self._data = state


@dataclass(frozen=True)
class SearchState:
    lo:     int     # first matching sorted-rotation position
    hi:     int     # one past the last matching position

    @property
    def width(self) -> int:
        return self.hi - self.lo

    def is_empty(self) -> bool:
        return self.lo >= self.hi


@dataclass(frozen=True)
class Index:
    """
    Burrows-Wheeler transform of one input plus the tables backward search needs.

    Built once by rlfm.build() and never mutated afterwards, so a single Index
    can serve any number of concurrent searches.
    """
    transform:              Units                   # last column of the sorted rotation matrix
    c_table:                CharTable               # unit -> number of strictly smaller units
    amount_of:              CharTable               # unit -> occurrences in transform
    last_rotation_index:    int                     # sorted position of the unrotated input
    segmentation:           Segmentation = Segmentation.SCALAR
    alphabet:               Units = ()
    codes:                  CharTable = field(default_factory=lambda: CharTable({}), repr=False, compare=False)
    ranks:                  Optional[RankTable] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        # derive the search tables when the index was assembled by hand
        if (
            self.ranks is not None
            and len(self.ranks) == len(self.transform)
            and len(self.codes) == len(self.alphabet) == len(set(self.transform))
        ):
            return
        alphabet = tuple(sorted(set(self.transform)))
        code_of = {ch: i for i, ch in enumerate(alphabet)}
        codes = np.fromiter((code_of[ch] for ch in self.transform), dtype=np.int64, count=len(self.transform))
        step = self.ranks.step if self.ranks is not None else CHECKPOINT_STRIDE
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "codes", CharTable(code_of))
        object.__setattr__(self, "ranks", RankTable(codes, len(alphabet), step))

    def __len__(self) -> int:
        return len(self.transform)

    @property
    def bwt(self) -> str:
        return "".join(self.transform)

    def units(self, pattern: Union[str, Sequence[str]]) -> Units:
        return split_units(pattern, self.segmentation)

    def rank(self, ch: str, i: int) -> int:
        """Occurrences of ch in transform[0:i]."""
        code = self.codes.get(ch)
        if code is None:
            return 0
        return self.ranks.rank(code, i)

    def interval(self, pattern: Union[str, Sequence[str]]) -> Optional[SearchState]:
        from ..query.backward_search import backward_search
        return backward_search(self, self.units(pattern))

    def search(self, pattern: Union[str, Sequence[str]]) -> int:
        from ..query.backward_search import count
        return count(self, self.units(pattern))
