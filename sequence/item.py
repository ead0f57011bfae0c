from dataclasses import dataclass, field
from typing import Optional
import uuid


def _new_id() -> str:
    return str(uuid.uuid4())[:8]


# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Item:
    """
    One card on the board: an immutable value plus a stable identity.

    Attributes:
        value : The integer printed on the card.  Algorithms reorder items,
                they never rewrite values.
        id    : Opaque identity assigned once at creation.  Independent of
                the value, so duplicates stay distinguishable.
    """

    value: int
    id:    str = field(default_factory=_new_id)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value}

    @classmethod
    def create(cls, value: int, item_id: Optional[str] = None) -> "Item":
        return cls(value=value, id=item_id or _new_id())

    def __repr__(self) -> str:
        return f"Item(id={self.id}, value={self.value})"
