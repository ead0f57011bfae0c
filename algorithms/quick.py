"""
quick.py — Quick Sort (Lomuto partition)
=========================================
Pivot is always the last card of the range.  Every card in the range is
compared against it; cards ≤ pivot are exchanged into the growing left
block, then the pivot is exchanged into the slot just after that block.

Not stable.  O(n log n) on average, O(n²) on already-sorted or
reverse-sorted input.
"""

from typing import Iterator, List

from algorithms.moves import exchange
from algorithms.step import Step, compare_step, done_step
from sequence import Sequence


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                # 0
    "    if low < high:",                           # 1
    "        pivot ← a[high];  i ← low - 1",        # 2
    "        for j in low .. high-1:",              # 3
    "            compare a[j], pivot",              # 4
    "            if a[j] ≤ pivot: i += 1; exchange(i, j)",  # 5
    "        exchange(i+1, high)",                  # 6
    "        quick_sort(a, low, i)",                # 7
    "        quick_sort(a, i+2, high)",             # 8
]


def quick_sort(sequence: Sequence) -> Iterator[Step]:
    yield from _quick(sequence, 0, len(sequence) - 1)
    yield done_step(0, "All partitions are down to a single card.")


def _quick(sequence: Sequence, low: int, high: int) -> Iterator[Step]:
    # the right partition is sorted by looping, so only left partitions nest
    while low < high:
        pivot = sequence.value(high)
        i = low - 1
        for j in range(low, high):
            yield compare_step(
                j, high, 4,
                f"Compare card {j} with the pivot {pivot} at {high}.",
            )
            if sequence.value(j) <= pivot:
                i += 1
                yield from exchange(sequence, i, j, 5)
        # positions < high were the only ones touched, the pivot is still at high
        yield from exchange(sequence, i + 1, high, 6)
        yield from _quick(sequence, low, i)
        low = i + 2
