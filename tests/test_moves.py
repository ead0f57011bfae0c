"""Tests for transposition, relocation and exchange."""

import pytest

from algorithms.moves import exchange, relocate, transpose
from algorithms.step import StepKind
from errors import InvalidOperation
from sequence import Sequence


def _drain(gen):
    return [step.pair for step in gen if step.kind is StepKind.SWAP]


def test_transpose_swaps_then_reports() -> None:
    seq = Sequence.from_values([1, 2])
    gen = transpose(seq, 0, 1)
    step = next(gen)
    assert step.kind is StepKind.SWAP
    assert step.pair == (0, 1)
    assert seq.values() == [2, 1]


def test_relocate_forward_swap_order() -> None:
    seq = Sequence.from_values([0, 1, 2, 3, 4])
    assert _drain(relocate(seq, 1, 4)) == [(1, 2), (2, 3), (3, 4)]
    assert seq.values() == [0, 2, 3, 4, 1]


def test_relocate_backward_swap_order() -> None:
    seq = Sequence.from_values([0, 1, 2, 3, 4])
    assert _drain(relocate(seq, 3, 0)) == [(3, 2), (2, 1), (1, 0)]
    assert seq.values() == [3, 0, 1, 2, 4]


def test_relocate_same_index_is_noop() -> None:
    seq = Sequence.from_values([5, 6])
    assert _drain(relocate(seq, 1, 1)) == []
    assert seq.values() == [5, 6]


def test_relocate_matches_extract_and_insert_for_every_pair() -> None:
    n = 6
    for src in range(n):
        for dst in range(n):
            seq = Sequence.from_values(list(range(n)))
            ids = seq.ids()
            _drain(relocate(seq, src, dst))

            expected = list(ids)
            moved = expected.pop(src)
            expected.insert(dst, moved)
            assert seq.ids() == expected

            others_before = [i for i in ids if i != moved]
            others_after = [i for i in seq.ids() if i != moved]
            assert others_after == others_before


def test_relocate_out_of_range() -> None:
    seq = Sequence.from_values([1, 2, 3])
    with pytest.raises(InvalidOperation):
        _drain(relocate(seq, 0, 3))


def test_exchange_distant_items_keeps_middle_in_place() -> None:
    seq = Sequence.from_values([5, 3, 8, 1])
    ids = seq.ids()
    swaps = _drain(exchange(seq, 0, 3))
    assert swaps == [(0, 1), (1, 2), (2, 3), (2, 1), (1, 0)]
    assert seq.ids() == [ids[3], ids[1], ids[2], ids[0]]


def test_exchange_adjacent_is_single_swap_and_same_is_noop() -> None:
    seq = Sequence.from_values([1, 2, 3])
    assert _drain(exchange(seq, 2, 1)) == [(2, 1)]
    assert seq.values() == [1, 3, 2]
    assert _drain(exchange(seq, 1, 1)) == []
    assert seq.values() == [1, 3, 2]


def test_exchange_every_pair_is_a_pure_swap() -> None:
    n = 5
    for i in range(n):
        for j in range(n):
            seq = Sequence.from_values(list(range(n)))
            expected = seq.ids()
            expected[i], expected[j] = expected[j], expected[i]
            swaps = _drain(exchange(seq, i, j))
            assert seq.ids() == expected
            assert all(abs(a - b) == 1 for a, b in swaps)
