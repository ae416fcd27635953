"""
Main.py:
Handles the command line: read a text, build its index, count patterns.
"""

import argparse
import os
import sys
import time
from typing import IO, List, Optional

import psutil

from .constants.constants import CHECKPOINT_STRIDE, CONSTRUCTION, NUM_PROCESSES
from .errors import RlfmError
from .index.bwt_builder import build
from .models.index import Index
from .models.options import BuildOptions
from .models.units import Segmentation
from .parallelization.batch_search import search_batch


def get_memory_usage():
    """Get current memory usage in bytes using psutil"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(prog="rlfm", description='Count pattern occurrences with an FM-index')

    parser.add_argument('-t', '--text', help='Source text file (default: standard input)')
    parser.add_argument('-p', '--pattern', action='append', default=[], help='Pattern to count, may be repeated')
    parser.add_argument('-P', '--patterns', help='File with one pattern per line')

    # index options
    parser.add_argument('-g', '--graphemes', action='store_true', help='Split text into grapheme clusters instead of code points')
    parser.add_argument('-s', '--stride', type=int, default=CHECKPOINT_STRIDE, help='Rank checkpoint stride')
    parser.add_argument('--naive', action='store_const', const='naive', default=CONSTRUCTION, dest='construction',
                        help='Sort rotations naively (slow, for checking)')
    parser.add_argument('-j', '--processes', type=int, default=NUM_PROCESSES, help='Worker processes for searching')

    # reporting
    parser.add_argument('--timing', action='store_true', help='Report indexing and search time')
    parser.add_argument('-m', '--memory', action='store_true', help='Track memory usage')

    return parser.parse_args(argv)


def read_text(path: Optional[str]) -> str:
    if path is None:
        text = sys.stdin.read()
    else:
        with open(path, "r", encoding="utf-8") as fh:
            text = fh.read()
    # a single trailing newline belongs to the file, not the text
    if text.endswith("\n"):
        text = text[:-1]
    return text


def read_patterns(args) -> List[str]:
    patterns : List[str] = list(args.pattern)
    if args.patterns:
        with open(args.patterns, "r", encoding="utf-8") as fh:
            patterns.extend(line.rstrip("\r\n") for line in fh)
    return patterns


def report(message: str, out: Optional[IO] = None):
    print(message, file=out if out is not None else sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    startTime = time.perf_counter()
    startCpuTime = time.process_time()

    if args.memory:
        baseline_memory = get_memory_usage()

    try:
        options = BuildOptions(
            segmentation=Segmentation.GRAPHEME if args.graphemes else Segmentation.SCALAR,
            checkpointStride=args.stride,
            construction=args.construction,
        )
        text : str = read_text(args.text)
        patterns : List[str] = read_patterns(args)

        index : Index = build(text, options)
    except RlfmError as e:
        print(f"rlfm: {e}", file=sys.stderr)
        return 1

    indexTime = time.perf_counter()
    indexCpuTime = time.process_time()

    if args.memory:
        indexing_memory = get_memory_usage()
        report(f"Indexing (actual system memory): {(indexing_memory - baseline_memory) / 10**6:.2f} MB")

    counts : List[int] = search_batch(index, patterns, processes=args.processes)
    for pattern, n in zip(patterns, counts):
        print(f"{pattern}\t{n}")

    endTime = time.perf_counter()
    endCpuTime = time.process_time()

    if args.memory:
        search_memory = get_memory_usage()
        report(f"Searching (actual system memory): {(search_memory - indexing_memory) / 10**6:.2f} MB")
        report(f"Total cumulative (actual): {(search_memory - baseline_memory) / 10**6:.2f} MB")

    if args.timing:
        report(f"Indexed {len(index)} units, searched {len(patterns)} patterns.")
        report(f"The 'indexing time' part took {indexTime - startTime:.4f} seconds to execute.")
        report(f"The 'search time' part took {endTime - indexTime:.4f} seconds to execute.")
        report(f"The 'indexing cpu time' part took {indexCpuTime - startCpuTime:.4f} seconds to execute.")
        report(f"The 'search cpu time' part took {endCpuTime - indexCpuTime:.4f} seconds to execute.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
