"""Tests for the Sequence data layer."""

import pytest

from errors import InvalidInput, InvalidOperation
from sequence import MAX_LENGTH, Item, Sequence, VALUE_MAX, VALUE_MIN


def test_from_values_assigns_unique_ids() -> None:
    seq = Sequence.from_values([4, 4, 4])
    assert seq.values() == [4, 4, 4]
    assert len(set(seq.ids())) == 3


@pytest.mark.parametrize("bad", [[], None, "123", [1, "2"], [1.5], [True, 2]])
def test_from_values_rejects_malformed_input(bad) -> None:
    with pytest.raises(InvalidInput):
        Sequence.from_values(bad)


def test_duplicate_ids_are_rejected() -> None:
    with pytest.raises(InvalidInput):
        Sequence([Item(1, "a"), Item(2, "a")])


def test_swap_adjacent_updates_order_and_positions() -> None:
    seq = Sequence.from_values([1, 2, 3])
    first, second = seq.ids()[0], seq.ids()[1]
    seq.swap(0, 1)
    assert seq.values() == [2, 1, 3]
    assert seq.position_of(first) == 1
    assert seq.position_of(second) == 0
    seq.swap(2, 1)
    assert seq.values() == [2, 3, 1]


@pytest.mark.parametrize("i, j", [(0, 2), (0, 0), (-1, 0), (2, 3), (1, 1)])
def test_swap_rejects_non_adjacent_or_out_of_range(i: int, j: int) -> None:
    seq = Sequence.from_values([1, 2, 3])
    before = seq.ids()
    with pytest.raises(InvalidOperation):
        seq.swap(i, j)
    assert seq.ids() == before


def test_index_access_is_bounds_checked() -> None:
    seq = Sequence.from_values([7])
    assert seq.value(0) == 7
    with pytest.raises(InvalidOperation):
        seq.value(1)


def test_position_of_unknown_id() -> None:
    seq = Sequence.from_values([1, 2])
    with pytest.raises(InvalidOperation):
        seq.position_of("nope")


def test_generate_random_is_distinct_bounded_and_seeded() -> None:
    a = Sequence.generate_random(20, seed=7)
    b = Sequence.generate_random(20, seed=7)
    assert a.values() == b.values()
    assert len(set(a.values())) == 20
    assert all(VALUE_MIN <= v <= VALUE_MAX for v in a.values())
    assert a.ids() != b.ids()


@pytest.mark.parametrize("size", [0, VALUE_MAX - VALUE_MIN + 2])
def test_generate_random_rejects_bad_size(size: int) -> None:
    with pytest.raises(InvalidInput):
        Sequence.generate_random(size)


def test_copy_is_independent() -> None:
    seq = Sequence.from_values([3, 1, 2])
    clone = seq.copy()
    clone.swap(0, 1)
    assert seq.values() == [3, 1, 2]
    assert clone.values() == [1, 3, 2]
    assert sorted(seq.ids()) == sorted(clone.ids())


def test_to_dict_lists_items_in_board_order() -> None:
    seq = Sequence.from_values([9, 8])
    seq.swap(0, 1)
    assert seq.to_dict()["items"] == [{"id": it.id, "value": it.value} for it in seq]
    assert [d["value"] for d in seq.to_dict()["items"]] == [8, 9]


def test_from_values_rejects_oversized_input() -> None:
    assert len(Sequence.from_values(list(range(MAX_LENGTH)))) == MAX_LENGTH
    with pytest.raises(InvalidInput):
        Sequence.from_values(list(range(MAX_LENGTH + 1)))


def test_is_sorted() -> None:
    assert Sequence.from_values([1, 1, 2]).is_sorted()
    assert not Sequence.from_values([2, 1]).is_sorted()
