#!/usr/bin/env python3
"""Quick perf benchmark for range arithmetic."""

from __future__ import annotations

import argparse
import random
import statistics
import time

from tqdm import tqdm

from rangeaddr import Range


def _make_ranges(count: int, *, max_offset: int, max_length: int, seed: int) -> list[Range]:
    rng = random.Random(seed)
    return [Range(rng.randint(0, max_offset), rng.randint(0, max_length)) for _ in range(count)]


def _count_neighbour_hits(ranges: list[Range], *, progress: tqdm | None) -> tuple[int, int, int]:
    """Intersect each range with its predecessor and try to shrink it."""
    overlapping = touching = shrinkable = 0
    previous = ranges[-1]
    for current in ranges:
        overlapping += current.intersect(previous) is not None
        touching += current.ends_intersect(previous) is not None
        shrinkable += current.shrink() is not None
        previous = current
    if progress is not None:
        progress.update(1)
    return overlapping, touching, shrinkable


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark range arithmetic throughput")
    parser.add_argument("--count", type=int, default=200_000, help="Ranges per run")
    parser.add_argument("--max-offset", type=int, default=10_000, help="Largest generated offset")
    parser.add_argument("--max-length", type=int, default=64, help="Largest generated length")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for generated ranges")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--no-progress", action="store_true", help="Disable the tqdm progress bar")
    args = parser.parse_args()

    if args.count < 1 or args.runs < 1:
        raise SystemExit("--count and --runs must be >= 1")
    if args.max_offset < 0 or args.max_length < 0:
        raise SystemExit("--max-offset and --max-length cannot be negative")

    ranges = _make_ranges(
        args.count,
        max_offset=args.max_offset,
        max_length=args.max_length,
        seed=args.seed,
    )

    progress = None if args.no_progress else tqdm(total=args.runs, desc="runs", unit="run")
    timings: list[float] = []
    hits = (0, 0, 0)
    for _ in range(args.runs):
        start = time.perf_counter()
        hits = _count_neighbour_hits(ranges, progress=progress)
        timings.append(time.perf_counter() - start)
    if progress is not None:
        progress.close()

    overlapping, touching, shrinkable = hits
    mean = statistics.mean(timings)
    print(f"Ranges: {len(ranges)} x {len(timings)} runs")
    print(f"Overlapping neighbours: {overlapping}")
    print(f"Touching or overlapping neighbours: {touching}")
    print(f"Shrinkable: {shrinkable}")
    print(f"Best: {min(timings):.4f}s  Median: {statistics.median(timings):.4f}s  Mean: {mean:.4f}s")
    print(f"Ranges/s (mean): {len(ranges) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
