"""
selection.py — Selection Sort
==============================
Scan the unsorted suffix for its minimum, then exchange it into place.

Exactly n(n-1)/2 comparisons.  Not stable: one exchange can carry a card
past several equal-valued cards.  Non-adjacent exchanges are performed
through algorithms.moves.exchange, so every physical move is still an
adjacent swap.
"""

from typing import Iterator, List

from algorithms.moves import exchange
from algorithms.step import Step, compare_step, done_step
from sequence import Sequence


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in 0 .. n-2:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            compare a[min], a[j]",             # 4
    "            if a[j] < a[min]: min ← j",        # 5
    "        if min ≠ i: exchange(i, min)",         # 6
    "    return a",                                 # 7
]


def selection_sort(sequence: Sequence) -> Iterator[Step]:
    n = len(sequence)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            yield compare_step(
                min_idx, j, 4,
                f"Is card {j} smaller than the current minimum at {min_idx}?",
            )
            if sequence.value(j) < sequence.value(min_idx):
                min_idx = j
        if min_idx != i:
            yield from exchange(sequence, i, min_idx, 6)
    yield done_step(7, "Each position now holds the minimum of what followed it.")
