"""A double buffer that hands out fixed-size chunks of accumulated values."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class _Chunk(enum.Enum):
    A = "a"
    B = "b"

    @property
    def other(self) -> _Chunk:
        return _Chunk.B if self is _Chunk.A else _Chunk.A


class ChunkBuffer(Generic[T]):
    """Stores values in two alternating chunks and returns a full chunk at a time."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("chunk size must not be negative")
        self._size = size
        self._chunks: dict[_Chunk, list[T]] = {_Chunk.A: [], _Chunk.B: []}
        self._current = _Chunk.A
        self._pos = 0
        self._filled: _Chunk | None = None

    @property
    def chunk_size(self) -> int:
        return self._size

    def full(self) -> bool:
        """Whether a filled chunk is available."""
        return self._filled is not None

    def pop(self) -> list[T] | None:
        """Return the filled chunk, replacing it with an empty one.

        Returns None when no chunk has been filled yet.
        """
        if self._filled is None:
            return None
        chunk = self._chunks[self._filled]
        self._chunks[self._filled] = []
        return chunk

    def extend(self, values: Iterable[T]) -> None:
        """Add values, overflowing into the other chunk when the current one fills."""
        values = list(values)
        remaining = self._size - self._pos
        current = self._current
        other = current.other

        if len(values) <= remaining:
            self._chunks[current].extend(values)
            self._pos += len(values)
            if self._pos == self._size:
                self._pos = 0
                self._filled = current
                self._chunks[other].clear()
                self._current = other
        elif len(values) >= self._size:
            chunk_a = self._chunks[_Chunk.A]
            chunk_a.clear()
            chunk_a.extend(values[len(values) - remaining:])
            self._chunks[_Chunk.B].clear()
            self._filled = _Chunk.A
            self._current = _Chunk.B
            self._pos = 0
        else:
            first, last = values[:remaining], values[remaining:]
            self._chunks[current].extend(first)
            following = self._chunks[other]
            following.clear()
            following.extend(last)
            self._pos = len(last)
            self._filled = current
            self._current = other