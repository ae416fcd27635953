# index/bwt_builder.py
from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import EmptyInputError
from ..models.index import CharTable, Index
from ..models.options import BuildOptions, EmptyInputPolicy
from ..models.units import Units, split_units
from .rank import RankTable


class ARotationSorter(ABC):
    @abstractmethod
    def sort(self, codes: np.ndarray) -> np.ndarray:
        """
        Order the cyclic rotations of codes.
        Returns the rotation offsets in sorted order; equal rotations keep
        ascending offset order.
        """
        pass


class DoublingRotationSorter(ARotationSorter):
    """
    Prefix doubling over cyclic rotations.
    Each round sorts by (rank of first k units, rank of next k units, offset)
    until every rank is distinct or the compared prefix covers the whole input.
    """
    def sort(self, codes: np.ndarray) -> np.ndarray:
        n = codes.size
        offsets = np.arange(n, dtype=np.int64)
        if n == 0:
            return offsets
        rank = codes.astype(np.int64)
        k = 1
        while True:
            second = rank[(offsets + k) % n]
            sa = np.lexsort((offsets, second, rank))

            r1, r2 = rank[sa], second[sa]
            diff = np.zeros(n, dtype=np.int64)
            diff[1:] = (r1[1:] != r1[:-1]) | (r2[1:] != r2[:-1])
            tmp = np.empty(n, dtype=np.int64)
            tmp[sa] = np.cumsum(diff)
            rank = tmp

            if rank[sa[-1]] == n - 1 or 2 * k >= n:
                return sa
            k <<= 1


class NaiveRotationSorter(ARotationSorter):
    """Materialises every rotation and sorts them. Quadratic memory, reference only."""
    def sort(self, codes: np.ndarray) -> np.ndarray:
        seq = codes.tolist()
        n = len(seq)
        order = sorted(range(n), key=lambda i: (seq[i:] + seq[:i], i))
        return np.asarray(order, dtype=np.int64)


SORTERS = {
    "doubling": DoublingRotationSorter,
    "naive": NaiveRotationSorter,
}


class TransformBuilder:
    """
    Builds the Burrows-Wheeler transform of an input and the tables needed to
    search it (C table, per-unit amounts, rank checkpoints).
    """

    def __init__(self, options: Optional[BuildOptions] = None):
        self.options = options if options is not None else BuildOptions()
        self.sorter: ARotationSorter = SORTERS[self.options.construction]()

    def build(self, text: Union[str, Sequence[str]]) -> Index:
        units : Units = split_units(text, self.options.segmentation)

        if not units:
            return self._build_empty()

        alphabet : Units = tuple(sorted(set(units)))
        code_of : Dict[str, int] = {ch: i for i, ch in enumerate(alphabet)}
        codes = np.fromiter((code_of[ch] for ch in units), dtype=np.int64, count=len(units))

        order = self.sorter.sort(codes)
        # last unit of the rotation starting at p is the unit just before p
        bwt_codes = codes[(order - 1) % codes.size]
        transform : Units = tuple(alphabet[c] for c in bwt_codes.tolist())
        last_rotation_index = int(np.flatnonzero(order == 0)[0])

        c_table, amount_of = self._build_tables(transform)

        return Index(
            transform=transform,
            c_table=CharTable(c_table),
            amount_of=CharTable(amount_of),
            last_rotation_index=last_rotation_index,
            segmentation=self.options.segmentation,
            alphabet=alphabet,
            codes=CharTable(code_of),
            ranks=RankTable(bwt_codes, len(alphabet), self.options.checkpointStride),
        )

    def _build_empty(self) -> Index:
        if self.options.emptyInput is EmptyInputPolicy.REJECT:
            raise EmptyInputError("cannot build an index over empty input")
        return Index(
            transform=(),
            c_table=CharTable({}),
            amount_of=CharTable({}),
            last_rotation_index=0,
            segmentation=self.options.segmentation,
            ranks=RankTable(np.zeros(0, dtype=np.int32), 0, self.options.checkpointStride),
        )

    @staticmethod
    def _build_tables(transform: Units) -> Tuple[Dict[str, int], Dict[str, int]]:
        # C[ch] is the first index of ch once transform is sorted
        counts = Counter(transform)
        total = 0
        c_table = {}
        amount_of = {}
        for ch in sorted(counts):
            c_table[ch] = total
            amount_of[ch] = counts[ch]
            total += counts[ch]
        return c_table, amount_of


def build(text: Union[str, Sequence[str]], options: Optional[BuildOptions] = None) -> Index:
    """
    Build an Index over text.

    Args:
    text: input string, or a sequence of character units
    options: segmentation, checkpoint stride, construction and empty-input policy

    Returns:
    Immutable Index
    """
    return TransformBuilder(options).build(text)
