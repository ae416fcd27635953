from multiprocessing import Pool
from typing import List, Optional, Sequence, Tuple, Union

from ..constants.constants import NUM_PROCESSES
from ..models.index import Index
from ..query.backward_search import search

Pattern = Union[str, Sequence[str]]

_INDEX : Index


def _init_worker(index : Index):
    global _INDEX

    _INDEX = index


def process_pattern_batch(batch: List[Tuple[int, Pattern]]) -> List[Tuple[int, int]]:
    """
    Count every pattern of a batch against the worker's index.
    Returns (position, count) pairs so results can be put back in input order.
    """
    return [(i, search(_INDEX, pattern)) for i, pattern in batch]


def make_batches(patterns: Sequence[Pattern], num_processes: int, batch_size: Optional[int] = None) -> List[List[Tuple[int, Pattern]]]:
    indexed_patterns = list(enumerate(patterns))
    if batch_size is None:
        batch_size = max(1, len(indexed_patterns) // (num_processes * 3))

    batches = []
    for i in range(0, len(indexed_patterns), batch_size):
        batches.append(indexed_patterns[i:i + batch_size])
    return batches


def search_batch(
        index: Index,
        patterns: Sequence[Pattern],
        processes: Optional[int] = None,
        batch_size: Optional[int] = None,
        ) -> List[int]:
    """
    Count many patterns against one index, fanning the work out over a process pool.

    Args:
    index: a built Index, shipped once to every worker
    patterns: patterns to count
    processes: worker count (default constants.NUM_PROCESSES); 1 or less, or more
        workers than patterns, runs inline
    batch_size: patterns per task (default: about three tasks per worker)

    Returns:
    Counts, in the order of patterns
    """
    num_processes = processes if processes is not None else NUM_PROCESSES
    if not patterns:
        return []
    if batch_size is not None and batch_size < 1:
        batch_size = 1

    batches = make_batches(patterns, max(1, num_processes), batch_size)
    counts = [0] * len(patterns)

    # fewer patterns than workers is not worth starting a pool for
    if num_processes <= 1 or len(patterns) < num_processes or len(batches) == 1:
        for i, pattern in enumerate(patterns):
            counts[i] = search(index, pattern)
        return counts

    with Pool(
        processes=min(num_processes, len(batches)),
        initializer=_init_worker,
        initargs=(index,),
        ) as pool:
        batch_results = pool.map(process_pattern_batch, batches)
        for batch_counts in batch_results:
            for i, n in batch_counts:
                counts[i] = n

    return counts
