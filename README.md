# bestfit-heap

A small best-fit memory allocator that manages a fixed-size heap made of
8-byte words. Every block carries a two-word header: its payload size in
words (zero or positive when free, negated when allocated) and the header
index of the block before it (`-1` for the first block). A pointer is the
word index of a block's payload. Freed blocks are merged with free
neighbours on both sides.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the allocator

```python
from bestfit_heap.heap import Heap, HeapError, align_words

heap = Heap(512)               # heap size in bytes
p = heap.malloc(24)            # payload word index, or None
q = heap.malloc(100)
heap.free(p)
heap.free(None)                # freeing None is allowed
print(heap.dump())             # heap size in words, then every word
print(heap.words)              # tuple snapshot of the raw words

print(heap.malloc_count, heap.free_count)
print(align_words(24))         # bytes rounded up to 16, expressed in words -> 4
```

The heap is laid out on the first call to `malloc`. Among all free blocks
large enough for the request, `malloc` picks the smallest (the first one
found on a tie) and splits off the remainder as a new free block.

`malloc` returns `None` when:

* the heap is smaller than two words;
* the request is zero or negative bytes;
* the request is at least the heap size minus two bytes;
* no free block is big enough.

`malloc_count` and `free_count` count every call once the heap has been laid
out, including calls that returned `None` or freed `None`.

`free` raises `HeapError` when the pointer does not refer to an allocated
block.

## Stress runs

The `bestfit_heap.stress` module drives a heap with fixed workloads:

* `run_churn(heap, slots, iterations, max_size, rng)` keeps a fixed number of
  slots, repeatedly freeing a randomly chosen slot and allocating between 1
  and `max_size` bytes into it, then frees everything left. It raises
  `HeapError` if an allocation fails and returns the numbers of malloc and
  free calls it made.
* `run_repeat(heap, count, repetitions)` allocates `count` one-byte blocks and
  frees them, `repetitions` times, and returns the heap words afterwards.
* `check_null_free(heap)` checks that `malloc(-1)` yields `None` (raising
  `HeapError` otherwise) and that freeing `None` is harmless.

From the command line, pick one of two workloads:

```
bestfit-heap-stress churn
bestfit-heap-stress repeat
```

`churn` accepts `--heap-size` (default 1048576), `--slots` (20),
`--iterations` (100000), `--max-size` (1000) and `--seed` (1). It prints
`count match` when the malloc and free counts agree (otherwise `m2 <n>` and
`f2 <n>`), then `count ok` when the malloc count equals the iteration count
(otherwise `*** wrong count <n>`).

`repeat` accepts `--heap-size` (default 512), `--count` (5) and
`--repetitions` (1000000). It runs the repeat workload and the null-free
check, then prints `All Correct (AC)`.

If a workload raises `HeapError`, the message is printed and the command
exits with status 1.

## What it does not do

The allocator works only on its own simulated word array; it does not hand
out real memory or replace Python's memory management. There is no
`realloc` or `calloc`, and the heap cannot grow after it is created.