from __future__ import annotations
from typing import List, Sequence

from studyboard.subjects import SubjectTotal


# heap helpers -------------------------------------------------------------
def sift_down(heap: List[SubjectTotal], i: int, size: int) -> None:
    """Push ``heap[i]`` down until no child within ``size`` beats it.

    A child only displaces its parent when strictly greater, so equal totals
    stay where they are.
    """
    while True:
        left = 2 * i + 1
        right = 2 * i + 2
        largest = i
        if left < size and heap[left].total_minutes > heap[largest].total_minutes:
            largest = left
        if right < size and heap[right].total_minutes > heap[largest].total_minutes:
            largest = right
        if largest == i:
            return
        heap[i], heap[largest] = heap[largest], heap[i]
        i = largest


def build_heap(entries: Sequence[SubjectTotal]) -> List[SubjectTotal]:
    """Return a max-heap ordered copy of ``entries``."""
    heap = list(entries)
    for i in range(len(heap) // 2 - 1, -1, -1):
        sift_down(heap, i, len(heap))
    return heap


# ranking ------------------------------------------------------------------
def rank(entries: Sequence[SubjectTotal]) -> List[SubjectTotal]:
    """Return ``entries`` ordered by total minutes, highest first.

    The input is never modified. Order among equal totals is not specified.
    """
    heap = build_heap(entries)
    ranked: List[SubjectTotal] = []
    size = len(heap)
    while size > 0:
        last = size - 1
        heap[0], heap[last] = heap[last], heap[0]
        size = last
        ranked.append(heap[last])
        sift_down(heap, 0, size)
    return ranked
