"""
step.py — Algorithm Step Events
================================
Every sorting algorithm is a generator that yields Step objects.
A Step is one event the renderer must acknowledge before the algorithm
is allowed to continue:

    • COMPARE(i, j) – the cards at i and j are being compared
    • SWAP(i, j)    – the ADJACENT cards at i and j have just been exchanged
    • DONE          – the algorithm has finished

Design decisions:
  - Step is a frozen dataclass.  The algorithm generator is the only
    writer of the Sequence; the stepper / engine / renderer are readers.
  - A SWAP step is yielded AFTER the Sequence was mutated, so whoever
    receives it already sees the new order.  The algorithm stays suspended
    until the consumer asks for the next step.
  - `step_number` is stamped by the consumer (Stepper), not the algorithm:
    algorithms recurse through `yield from` and have no global counter.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Any, Tuple


class StepKind(Enum):
    COMPARE = "compare"
    SWAP    = "swap"
    DONE    = "done"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        kind            : StepKind.
        i, j            : Positions involved (-1 for DONE).
        step_number     : 0-based index of this step in the run.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        explanation     : Human-readable "why" text for Learning Mode.
        is_final        : True on the very last step.
    """

    kind:             StepKind
    i:                int  = -1
    j:                int  = -1
    step_number:      int  = 0
    pseudocode_line:  int  = 0
    explanation:      str  = ""
    is_final:         bool = False

    @property
    def pair(self) -> Tuple[int, int]:
        return (self.i, self.j)

    def numbered(self, step_number: int) -> "Step":
        return replace(self, step_number=step_number)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind":            self.kind.value,
            "i":               self.i,
            "j":               self.j,
            "step_number":     self.step_number,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
            "is_final":        self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience constructors so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
def compare_step(i: int, j: int, line: int = 0, explanation: str = "") -> Step:
    return Step(StepKind.COMPARE, i, j, pseudocode_line=line, explanation=explanation)


def swap_step(i: int, j: int, line: int = 0, explanation: str = "") -> Step:
    return Step(StepKind.SWAP, i, j, pseudocode_line=line, explanation=explanation)


def done_step(line: int = 0, explanation: str = "Sorted.") -> Step:
    return Step(StepKind.DONE, pseudocode_line=line, explanation=explanation, is_final=True)
