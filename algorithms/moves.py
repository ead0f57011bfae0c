"""
moves.py — Transposition & Move Decomposition
==============================================
The board can only animate one thing smoothly: two NEIGHBOURING cards
trading places.  Everything else is built from that.

    transpose(seq, i, i±1)  one adjacent swap, then yield SWAP(i, i±1)
    relocate(seq, a, b)     pull the card at a to b, sliding the cards in
                            between one slot toward a
    exchange(seq, i, j)     two distant cards trade places, everything in
                            between ends where it started

All three are generators meant to be consumed with `yield from` inside an
algorithm, so every physical swap surfaces as its own Step.
"""

from typing import Iterator

from algorithms.step import Step, swap_step
from sequence import Sequence


def transpose(
    sequence: Sequence,
    i: int,
    j: int,
    line: int = 0,
    explanation: str = "",
) -> Iterator[Step]:
    """Swap adjacent positions i and j, then report it."""
    sequence.swap(i, j)
    yield swap_step(i, j, line, explanation or f"Swap positions {i} and {j}.")


def relocate(
    sequence: Sequence,
    src: int,
    dst: int,
    line: int = 0,
) -> Iterator[Step]:
    """
    Move the item at `src` to `dst` through adjacent swaps.

    src < dst : swap(k, k+1) for k = src … dst-1
    src > dst : swap(k, k-1) for k = src … dst+1   (decreasing)
    src == dst: nothing
    """
    sequence.check_index(src)
    sequence.check_index(dst)
    if src < dst:
        for k in range(src, dst):
            yield from transpose(
                sequence, k, k + 1, line,
                f"Slide card from {src} toward {dst}: swap {k} and {k + 1}.",
            )
    elif src > dst:
        for k in range(src, dst, -1):
            yield from transpose(
                sequence, k, k - 1, line,
                f"Slide card from {src} toward {dst}: swap {k} and {k - 1}.",
            )


def exchange(
    sequence: Sequence,
    i: int,
    j: int,
    line: int = 0,
) -> Iterator[Step]:
    """
    Trade the items at i and j.  Non-adjacent exchanges become
    relocate(lo, hi) then relocate(hi-1, lo): 2·|i-j| - 1 adjacent swaps.
    """
    sequence.check_index(i)
    sequence.check_index(j)
    if i == j:
        return
    lo, hi = min(i, j), max(i, j)
    if hi - lo == 1:
        yield from transpose(sequence, i, j, line)
        return
    yield from relocate(sequence, lo, hi, line)
    yield from relocate(sequence, hi - 1, lo, line)
