import random

import pytest

from bestfit_heap.heap import Heap, HeapError
from bestfit_heap.stress import check_null_free, main, run_churn, run_repeat


class _MaxRng:
    """Always returns the largest value randrange can give."""

    def randrange(self, stop):
        return stop - 1


def _reference_state(size_bytes):
    ref = Heap(size_bytes)
    ref.free(ref.malloc(8))
    return ref.words


def test_churn_counts_match_iterations():
    heap = Heap(1 << 16)
    mallocs, frees = run_churn(heap, 20, 500, 1000, random.Random(0))
    assert mallocs == 500
    assert frees == mallocs


def test_churn_leaves_heap_fully_coalesced():
    heap = Heap(1 << 16)
    run_churn(heap, 8, 300, 200, random.Random(3))
    assert heap.words == _reference_state(1 << 16)


def test_churn_raises_when_allocation_fails():
    heap = Heap(64)
    with pytest.raises(HeapError, match="failed to allocate 100"):
        run_churn(heap, 3, 10, 100, _MaxRng())


def test_repeat_returns_to_same_state():
    heap = Heap(512)
    words = run_repeat(heap, 5, 50)
    assert words == _reference_state(512)
    assert heap.malloc_count == 250
    assert heap.free_count == heap.malloc_count


def test_check_null_free_counts_one_of_each():
    heap = Heap(512)
    check_null_free(heap)
    assert (heap.malloc_count, heap.free_count) == (1, 1)


def test_main_repeat_reports_success(capsys):
    assert main(["repeat", "--repetitions", "20"]) == 0
    assert capsys.readouterr().out == "All Correct (AC)"


def test_main_churn_reports_matching_counts(capsys):
    assert main(["churn", "--iterations", "300", "--heap-size", "65536"]) == 0
    assert capsys.readouterr().out == "count match\ncount ok\n"


def test_main_churn_failure_exits_nonzero(capsys):
    status = main(["churn", "--heap-size", "64", "--max-size", "5000", "--iterations", "5"])
    assert status == 1
    assert "failed to allocate" in capsys.readouterr().out