# query/backward_search.py
from typing import Optional, Sequence, Union

from ..models.index import Index, SearchState


def _step(index: Index, state: SearchState, ch: str) -> Optional[SearchState]:
    """
    Extend the matched suffix by one unit on the left (LF-mapping of [lo, hi)).
    Returns None when ch is not in the text or the interval becomes empty.
    """
    if ch not in index.amount_of:
        return None

    occ_lo = index.rank(ch, state.lo)
    occ_hi = index.rank(ch, state.hi)

    nxt = SearchState(lo=index.c_table[ch] + occ_lo, hi=index.c_table[ch] + occ_hi)
    if nxt.is_empty():
        return None
    return nxt


def backward_search(index: Index, pattern: Sequence[str]) -> Optional[SearchState]:
    """
    Narrow the sorted-rotation interval one pattern unit at a time, right to left.

    Args:
    index: a built Index
    pattern: pattern already split into units with the index's segmentation

    Returns:
    The interval of rotations prefixed by pattern, or None when there is none.
    The empty pattern yields [0, N), which is empty (but not None) on an empty
    index; count() still reports N + 1 for it. A pattern longer than the text
    fits in no rotation and yields None.
    """
    if not pattern:
        return SearchState(lo=0, hi=len(index))
    if len(pattern) > len(index):
        return None

    c = pattern[-1]
    if c not in index.amount_of:
        return None
    state = SearchState(lo=index.c_table[c], hi=index.c_table[c] + index.amount_of[c])

    for ch in reversed(pattern[:-1]):
        state = _step(index, state, ch)
        if state is None:
            return None
    return state


def count(index: Index, pattern: Sequence[str]) -> int:
    # the empty pattern matches every gap, before the first and after the last unit
    if not pattern:
        return len(index) + 1
    if len(pattern) > len(index):
        return 0
    state = backward_search(index, pattern)
    return state.width if state is not None else 0


def search(index: Index, pattern: Union[str, Sequence[str]]) -> int:
    """Number of (cyclic) occurrences of pattern in the text behind index."""
    return count(index, index.units(pattern))
