"""Stress workloads that exercise a Heap, plus a command-line entry point."""

from __future__ import annotations

import argparse
import random
import sys

from .heap import Heap, HeapError


def run_churn(heap, slots, iterations, max_size, rng):
    """Randomly replace allocations in ``slots`` and then release them all.

    Returns the numbers of malloc and free calls made during the run.
    """
    mallocs_before = heap.malloc_count
    frees_before = heap.free_count
    live: list[int | None] = [None] * slots

    for _ in range(iterations):
        slot = rng.randrange(slots)
        if live[slot] is not None:
            heap.free(live[slot])
            live[slot] = None
        size = rng.randrange(max_size) + 1
        pointer = heap.malloc(size)
        if pointer is None:
            raise HeapError(f"*** failed to allocate {size}")
        live[slot] = pointer

    for pointer in live:
        if pointer is not None:
            heap.free(pointer)

    return heap.malloc_count - mallocs_before, heap.free_count - frees_before


def run_repeat(heap, count, repetitions):
    """Allocate ``count`` one-byte blocks and free them, ``repetitions`` times.

    Returns the heap words after the last repetition.
    """
    for _ in range(repetitions):
        pointers = [heap.malloc(1) for _ in range(count)]
        for pointer in pointers:
            heap.free(pointer)
    return heap.words


def check_null_free(heap):
    """Check that an impossible request yields None and that freeing None is safe."""
    pointer = heap.malloc(-1)
    if pointer is not None:
        raise HeapError("pointer in test_null_free was not 0!")
    heap.free(pointer)


def _churn_report(mallocs, frees, iterations):
    lines = []
    if mallocs != frees:
        lines.append(f"m2 {mallocs}")
        lines.append(f"f2 {frees}")
    else:
        lines.append("count match")
    if mallocs != iterations:
        lines.append(f"*** wrong count {mallocs}")
    else:
        lines.append("count ok")
    return lines


def _parser():
    parser = argparse.ArgumentParser(prog="bestfit-heap", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    churn = commands.add_parser("churn", help="random allocate/free workload")
    churn.add_argument("--heap-size", type=int, default=1 << 20)
    churn.add_argument("--slots", type=int, default=20)
    churn.add_argument("--iterations", type=int, default=100_000)
    churn.add_argument("--max-size", type=int, default=1000)
    churn.add_argument("--seed", type=int, default=1)

    repeat = commands.add_parser("repeat", help="repeated allocate-then-free cycles")
    repeat.add_argument("--heap-size", type=int, default=512)
    repeat.add_argument("--count", type=int, default=5)
    repeat.add_argument("--repetitions", type=int, default=1_000_000)
    return parser


def main(argv=None):
    """Run a stress workload and print its verdict; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.command == "churn":
            heap = Heap(args.heap_size)
            mallocs, frees = run_churn(
                heap, args.slots, args.iterations, args.max_size, random.Random(args.seed)
            )
            for line in _churn_report(mallocs, frees, args.iterations):
                print(line)
        else:
            heap = Heap(args.heap_size)
            run_repeat(heap, args.count, args.repetitions)
            check_null_free(heap)
            print("All Correct (AC)", end="")
    except HeapError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())