"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Compare neighbours j, j+1
  2. Swap them when out of order
  3. Final step once the outer loop completes

The sorted suffix (indices ≥ n-i-1) is never re-scanned, so the number
of comparisons is exactly n(n-1)/2 regardless of input order.
"""

from typing import Iterator, List

from algorithms.moves import transpose
from algorithms.step import Step, compare_step, done_step
from sequence import Sequence


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in 0 .. n-2:",                       # 1
    "        for j in 0 .. n-i-2:",                 # 2
    "            compare a[j], a[j+1]",             # 3
    "            if a[j] > a[j+1]: swap(j, j+1)",   # 4
    "    return a",                                 # 5
]


def bubble_sort(sequence: Sequence) -> Iterator[Step]:
    n = len(sequence)
    for i in range(n - 1):
        for j in range(n - i - 1):
            yield compare_step(
                j, j + 1, 3,
                f"Compare neighbours {j} and {j + 1}.",
            )
            if sequence.value(j) > sequence.value(j + 1):
                yield from transpose(
                    sequence, j, j + 1, 4,
                    f"{sequence.value(j)} > {sequence.value(j + 1)}: "
                    f"swap so the larger card bubbles right.",
                )
    yield done_step(5, "Every pass complete; the largest cards have bubbled to the end.")
