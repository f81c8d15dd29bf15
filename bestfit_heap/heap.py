"""Best-fit allocator over a fixed array of machine words.

Every block starts with a two-word header: the first word holds the payload
size in words (positive or zero when free, negated when allocated), the
second holds the header index of the block before it (``-1`` for the first
block). A pointer is the word index of a block's payload.
"""

from __future__ import annotations

WORD_SIZE = 8
HEADER_WORDS = 2
NO_BLOCK = -1


class HeapError(Exception):
    """Raised when the heap is misused or an allocation cannot be satisfied."""


def align_words(nbytes: int) -> int:
    """Round ``nbytes`` up to a multiple of 16 bytes and return it in words."""
    return (((nbytes - 1) | 15) + 1) // WORD_SIZE


class Heap:
    """A fixed-size heap managed with a best-fit, coalescing free policy."""

    def __init__(self, size_bytes: int) -> None:
        self.size_bytes = size_bytes
        self._words = [0] * (size_bytes // WORD_SIZE)
        self._initialized = False
        self.malloc_count = 0
        self.free_count = 0

    @property
    def words(self) -> tuple[int, ...]:
        """A snapshot of the raw heap words."""
        return tuple(self._words)

    def dump(self) -> str:
        """Render the heap as its size followed by every word."""
        body = "".join(f"{word} " for word in self._words)
        return f"total heap size: {len(self._words)}\n{body}\n"

    def malloc(self, nbytes: int) -> int | None:
        """Allocate ``nbytes`` and return the payload's word index, or None."""
        heap = self._words
        total = len(heap)

        if not self._initialized:
            if total < HEADER_WORDS:
                return None
            heap[0] = total - HEADER_WORDS
            heap[1] = NO_BLOCK
            self._initialized = True

        self.malloc_count += 1

        if nbytes <= 0 or nbytes >= self.size_bytes - 2:
            return None

        needed = align_words(nbytes)

        best_index = NO_BLOCK
        best_size = -1
        index = 0
        while index < total:
            size = heap[index]
            if size > 0 and size >= needed and (best_size == -1 or size < best_size):
                best_size = size
                best_index = index
            if best_size == needed:
                break
            index += abs(size) + HEADER_WORDS

        if best_index == NO_BLOCK:
            return None

        self._split(best_index, best_size, needed)
        return best_index + HEADER_WORDS

    def _split(self, index: int, block_size: int, needed: int) -> None:
        heap = self._words
        total = len(heap)
        remaining = block_size - needed - HEADER_WORDS
        rest_index = index + needed + HEADER_WORDS

        heap[index] = -needed

        if rest_index + 1 < total and remaining > -1:
            heap[rest_index] = remaining
            heap[rest_index + 1] = index
            following = rest_index + remaining + HEADER_WORDS
            if following + 1 < total:
                heap[following + 1] = rest_index

    def free(self, pointer: int | None) -> None:
        """Release the block whose payload starts at ``pointer``; None is a no-op."""
        self.free_count += 1

        if pointer is None:
            return

        heap = self._words
        total = len(heap)
        start = pointer - HEADER_WORDS
        if start < 0 or start + 1 >= total or heap[start] >= 0:
            raise HeapError(f"pointer {pointer} does not refer to an allocated block")

        block_size = -heap[start]
        previous = heap[start + 1]
        end = start + block_size + 1

        heap[start + HEADER_WORDS:end + 1] = [0] * (end - start - 1)

        if end + 1 < total and heap[end + 1] >= 0:
            right_size = heap[end + 1]
            heap[end + 1] = 0
            heap[end + 2] = 0
            end += right_size + HEADER_WORDS
            block_size += right_size + HEADER_WORDS

        if start >= HEADER_WORDS:
            left_size = heap[previous]
            if left_size >= 0:
                heap[start] = 0
                heap[start + 1] = 0
                start = previous
                previous = heap[previous + 1]
                block_size += left_size + HEADER_WORDS

        heap[start] = block_size
        heap[start + 1] = previous

        if end + 2 < total:
            heap[end + 2] = start