"""
sequence/
---------
Core data layer.  Public API:

    from sequence import Sequence, Item
"""

from sequence.item     import Item
from sequence.sequence import Sequence, MAX_LENGTH, VALUE_MIN, VALUE_MAX

__all__ = [
    "Item",
    "Sequence",
    "VALUE_MIN",
    "VALUE_MAX",
    "MAX_LENGTH",
]
