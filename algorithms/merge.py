"""
merge.py — Merge Sort (in place, by relocation)
================================================
Top-down merge sort on a board whose only primitive is the adjacent swap.

The merge step snapshots the IDENTITIES of the left and right halves,
then repeatedly:
  1. Looks up where the next unconsumed left / right card currently sits
     (Sequence.position_of, since cards drift as others are relocated).
  2. Compares the two.
  3. Relocates the smaller one into output slot k, preferring the left
     card on ties.  That preference is what makes the sort stable.

Identities, not values, are tracked, so duplicate values never confuse
which card is which.

Cost: O(n log n) comparisons, but up to O(n) adjacent swaps per relocate
→ O(n² log n) physical swaps in the worst case.
"""

from typing import Iterator, List

from algorithms.moves import relocate
from algorithms.step import Step, compare_step, done_step
from sequence import Sequence


PSEUDOCODE: List[str] = [
    "def merge_sort(a, low, high):",                # 0
    "    if low ≥ high: return",                    # 1
    "    mid ← ⌊(low + high) / 2⌋",                 # 2
    "    merge_sort(a, low, mid)",                  # 3
    "    merge_sort(a, mid+1, high)",               # 4
    "    L ← a[low..mid];  R ← a[mid+1..high]",     # 5
    "    while L and R remain:",                    # 6
    "        compare L.head, R.head",               # 7
    "        move smaller (L on ties) to slot k",   # 8
    "    move leftovers to slots k…",               # 9
]


def merge_sort(sequence: Sequence) -> Iterator[Step]:
    yield from _merge_sort(sequence, 0, len(sequence) - 1)
    yield done_step(0, "All runs merged into one sorted run.")


def _merge_sort(sequence: Sequence, low: int, high: int) -> Iterator[Step]:
    if low >= high:
        return
    mid = (low + high) // 2
    yield from _merge_sort(sequence, low, mid)
    yield from _merge_sort(sequence, mid + 1, high)
    yield from _merge(sequence, low, mid, high)


def _merge(sequence: Sequence, left: int, mid: int, right: int) -> Iterator[Step]:
    left_ids  = [sequence[k].id for k in range(left, mid + 1)]
    right_ids = [sequence[k].id for k in range(mid + 1, right + 1)]
    a = b = 0
    k = left

    while a < len(left_ids) and b < len(right_ids):
        idx_l = sequence.position_of(left_ids[a])
        idx_r = sequence.position_of(right_ids[b])
        yield compare_step(
            idx_l, idx_r, 7,
            f"Merge [{left}..{right}]: compare left head at {idx_l} "
            f"with right head at {idx_r}.",
        )
        if sequence.value(idx_l) <= sequence.value(idx_r):
            yield from relocate(sequence, idx_l, k, 8)
            a += 1
        else:
            yield from relocate(sequence, idx_r, k, 8)
            b += 1
        k += 1

    for item_id in left_ids[a:] + right_ids[b:]:
        yield from relocate(sequence, sequence.position_of(item_id), k, 9)
        k += 1
