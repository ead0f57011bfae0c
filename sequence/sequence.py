"""
sequence.py — The Ordered Collection Being Sorted
==================================================
Single source of truth for card order.  Algorithms mutate it, the
renderer only reads it.

Responsibilities:
  1. Hold the Items in board order             (index 0 = leftmost card)
  2. The ONE mutation primitive                (swap of adjacent positions)
  3. Identity lookups                          (position_of(item_id))
  4. Dataset factories                         (from_values, generate_random)
  5. Serialisation                            (to_dict)

Design decisions:
  - Only adjacent positions may be swapped.  Longer moves are expressed
    as chains of adjacent swaps by algorithms.moves, because only an
    adjacent exchange has one unambiguous on-screen animation.
  - A separate index  `_positions[item_id] → index`  is maintained on
    every swap so identity lookups are O(1), not O(n).
  - Every check happens BEFORE the mutation; a rejected swap leaves the
    Sequence untouched.
"""

import random
from typing import Dict, Iterable, Iterator, List, Optional

from errors import InvalidInput, InvalidOperation
from sequence.item import Item


# ---------------------------------------------------------------------------
# Dataset bounds: the card pool is the 90 distinct values 10..99
# ---------------------------------------------------------------------------
VALUE_MIN = 10
VALUE_MAX = 99

# Longest board; one card per pool value
MAX_LENGTH = VALUE_MAX - VALUE_MIN + 1


class Sequence:
    """
    Attributes:
        items      : [Item, …] in current board order.
        _positions : {item_id: index}
    """

    def __init__(self, items: Iterable[Item]):
        self.items: List[Item] = list(items)
        if not self.items:
            raise InvalidInput("Dataset must contain at least one value.")
        self._positions: Dict[str, int] = {}
        for idx, item in enumerate(self.items):
            if item.id in self._positions:
                raise InvalidInput(f"Duplicate item id {item.id!r}.")
            self._positions[item.id] = idx

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Sequence":
        """Build Items with fresh identities.  Rejects empty, oversized or non-int input."""
        if values is None or isinstance(values, (str, bytes)):
            raise InvalidInput("Dataset must be a sequence of integers.")
        try:
            vals = list(values)
        except TypeError as exc:
            raise InvalidInput("Dataset must be a sequence of integers.") from exc
        if not vals:
            raise InvalidInput("Dataset must contain at least one value.")
        if len(vals) > MAX_LENGTH:
            raise InvalidInput(
                f"Dataset holds at most {MAX_LENGTH} values, got {len(vals)}."
            )
        for v in vals:
            # bool is an int subclass but never a card value
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidInput(f"Dataset values must be integers, got {v!r}.")
        return cls(Item.create(v) for v in vals)

    @classmethod
    def generate_random(
        cls,
        size: int,
        seed: Optional[int] = None,
        low: int = VALUE_MIN,
        high: int = VALUE_MAX,
    ) -> "Sequence":
        """
        Draw `size` distinct values from the pool low..high (inclusive),
        shuffled.  Distinct values keep the cards readable on screen.
        """
        pool = list(range(low, high + 1))
        if not 1 <= size <= len(pool):
            raise InvalidInput(f"Size must be between 1 and {len(pool)}, got {size}.")
        rng = random.Random(seed)
        rng.shuffle(pool)
        return cls.from_values(pool[:size])

    # ==================================================================
    # READS
    # ==================================================================
    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Item:
        self.check_index(index)
        return self.items[index]

    def value(self, index: int) -> int:
        return self[index].value

    def values(self) -> List[int]:
        return [it.value for it in self.items]

    def ids(self) -> List[str]:
        return [it.id for it in self.items]

    def position_of(self, item_id: str) -> int:
        """Current index of the item with this identity."""
        try:
            return self._positions[item_id]
        except KeyError:
            raise InvalidOperation(f"Unknown item id {item_id!r}.") from None

    def is_sorted(self) -> bool:
        vals = self.values()
        return all(vals[k] <= vals[k + 1] for k in range(len(vals) - 1))

    # ==================================================================
    # THE MUTATION PRIMITIVE
    # ==================================================================
    def swap(self, i: int, j: int) -> None:
        """Exchange two ADJACENT positions.  Anything else is rejected."""
        self.check_index(i)
        self.check_index(j)
        if abs(i - j) != 1:
            raise InvalidOperation(
                f"swap({i}, {j}) is not adjacent; relocate or exchange instead."
            )
        a, b = self.items[i], self.items[j]
        self.items[i], self.items[j] = b, a
        self._positions[a.id] = j
        self._positions[b.id] = i

    # ==================================================================
    # COPY / SERIALISATION
    # ==================================================================
    def copy(self) -> "Sequence":
        """Same identities, independent order."""
        return Sequence(self.items)

    def to_dict(self) -> dict:
        return {"items": [it.to_dict() for it in self.items]}

    # ==================================================================
    # INTERNAL
    # ==================================================================
    def check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidOperation(f"Index must be an integer, got {index!r}.")
        if not 0 <= index < len(self.items):
            raise InvalidOperation(
                f"Index {index} out of range for {len(self.items)} items."
            )

    def __repr__(self) -> str:
        return f"Sequence({self.values()})"
