import random

import pytest

from louvaingraph.heap import HEAP_MAX_SIZE, MinHeap, Term


def test_remove_min_yields_sorted_weights():
    rng = random.Random(7)
    weights = [rng.uniform(-10, 10) for _ in range(60)]
    heap = MinHeap()
    for i, w in enumerate(weights):
        assert heap.add(Term(i, w))
    out = [heap.remove_min().weight for _ in range(len(weights))]
    assert out == sorted(weights)
    assert len(heap) == 0


def test_ids_travel_with_weights():
    heap = MinHeap()
    for i, w in [(10, 3.0), (20, 1.0), (30, 2.0)]:
        heap.add(Term(i, w))
    assert heap.peek() == Term(20, 1.0)
    assert [heap.remove_min().id for _ in range(3)] == [20, 30, 10]


def test_capacity_limits_additions():
    heap = MinHeap.with_capacity(2)
    assert heap.add(Term(0, 5.0))
    assert heap.add(Term(1, 4.0))
    assert not heap.add(Term(2, 1.0))
    assert len(heap) == 2
    assert heap.peek().id == 1


def test_default_capacity():
    heap = MinHeap()
    assert heap.maxsize == HEAP_MAX_SIZE
    for i in range(HEAP_MAX_SIZE):
        heap.add(Term(i, float(i)))
    assert len(heap) == HEAP_MAX_SIZE - 1


def test_empty_heap_errors():
    heap = MinHeap()
    with pytest.raises(IndexError):
        heap.remove_min()
    with pytest.raises(IndexError):
        heap.peek()


def test_invalid_maxsize():
    with pytest.raises(ValueError):
        MinHeap(0)


def test_interleaved_operations_keep_min_at_top():
    heap = MinHeap()
    for i, w in enumerate([5.0, 3.0, 8.0, 1.0]):
        heap.add(Term(i, w))
    assert heap.remove_min().weight == 1.0
    heap.add(Term(9, 2.0))
    remaining = [heap.remove_min().weight for _ in range(len(heap))]
    assert remaining == sorted(remaining)
    assert len(remaining) == 4