"""Measure how long a sort takes on random input and write plot data."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from algolab.sorting import (
    bubble_sort,
    heap_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

__all__ = ["TimingRecord", "time_sort", "format_records", "write_plot_data", "main"]

_RAND_MAX = 32767

_ALGORITHMS: dict[str, Callable[[list[int]], list[int]]] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
}


@dataclass(frozen=True)
class TimingRecord:
    """One measurement: input size and CPU seconds spent sorting it."""

    size: int
    seconds: float


def time_sort(
    sort: Callable[[list[int]], object],
    sizes: Iterable[int],
    seed: int | None = None,
) -> list[TimingRecord]:
    """Time ``sort`` on a random list of each size, in order."""
    rng = random.Random(seed)
    records = []
    for size in sizes:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        data = [rng.randint(0, _RAND_MAX) for _ in range(size)]
        start = time.process_time()
        sort(data)
        end = time.process_time()
        records.append(TimingRecord(size, end - start))
    return records


def format_records(records: Iterable[TimingRecord]) -> str:
    """Render records as ``size seconds`` lines, one per record."""
    return "".join(f"{float(r.size):f} {r.seconds:f}\n" for r in records)


def write_plot_data(records: Iterable[TimingRecord], path: str | Path) -> None:
    """Write the formatted records to ``path``, replacing its contents."""
    Path(path).write_text(format_records(records), encoding="ascii")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="algolab-timing",
        description="Time a sorting algorithm on random input of given sizes.",
    )
    parser.add_argument("algorithm", choices=sorted(_ALGORITHMS))
    parser.add_argument("sizes", nargs="+", type=int, help="input sizes, one per run")
    parser.add_argument("-o", "--output", default="file.txt", help="plot data file")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        records = time_sort(_ALGORITHMS[args.algorithm], args.sizes, args.seed)
    except ValueError as exc:
        parser.error(str(exc))
    write_plot_data(records, args.output)
    for record in records:
        print(f"n = {record.size}: time required = {record.seconds:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())