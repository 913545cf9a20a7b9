"""Bounded binary min-heap of weighted terms."""

from __future__ import annotations

from dataclasses import dataclass

HEAP_MAX_SIZE = 1024


@dataclass(slots=True)
class Term:
    """An entity: identifier plus weight."""

    id: int
    weight: float


class MinHeap:
    """Binary heap ordered by ``Term.weight`` holding at most ``maxsize - 1`` terms.

    Adding to a full heap is ignored.
    """

    def __init__(self, maxsize: int = HEAP_MAX_SIZE) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._data: list[Term] = []

    @classmethod
    def with_capacity(cls, n: int) -> "MinHeap":
        """Return a heap able to hold ``n`` terms."""
        return cls(n + 1)

    def __len__(self) -> int:
        return len(self._data)

    def add(self, term: Term) -> bool:
        """Insert ``term``; return False if the heap was full."""
        data = self._data
        if len(data) >= self.maxsize - 1:
            return False
        position = len(data)
        data.append(term)
        while position > 0:
            parent = (position - 1) // 2
            if not term.weight < data[parent].weight:
                break
            data[position] = data[parent]
            position = parent
        data[position] = term
        return True

    def peek(self) -> Term:
        """Return the term of smallest weight without removing it."""
        if not self._data:
            raise IndexError("heap is empty")
        return self._data[0]

    def remove_min(self) -> Term:
        """Remove and return the term of smallest weight."""
        data = self._data
        if not data:
            raise IndexError("heap is empty")
        top = data[0]
        value = data.pop()
        size = len(data)
        if size == 0:
            return top
        position = 0
        while True:
            child = 2 * position + 1
            if child >= size:
                break
            if child + 1 < size and data[child + 1].weight < data[child].weight:
                child += 1
            if value.weight < data[child].weight:
                break
            data[position] = data[child]
            position = child
        data[position] = value
        return top