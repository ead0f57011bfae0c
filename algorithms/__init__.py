"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, stable, …),
        …
    }

Adding an algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional

from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.step      import Step
from sequence             import Sequence


SortFn = Callable[[Sequence], Iterator[Step]]


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                SortFn                 # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    stable:            bool     = False
    complexity_best:   str      = ""
    complexity_avg:    str      = ""
    complexity_worst:  str      = ""
    complexity_space:  str      = ""
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "stable":           self.stable,
            "complexity_best":  self.complexity_best,
            "complexity_avg":   self.complexity_avg,
            "complexity_worst": self.complexity_worst,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        stable=True,
        complexity_best="O(n)", complexity_avg="O(n²)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Adjacent comparisons and swaps; largest elements bubble to the end.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        stable=False,
        complexity_best="O(n²)", complexity_avg="O(n²)", complexity_worst="O(n²)",
        complexity_space="O(1)",
        description="Selects the smallest remaining and places it next.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        stable=False,
        complexity_best="O(n log n)", complexity_avg="O(n log n)", complexity_worst="O(n²)",
        complexity_space="O(log n)",
        description="Partition around a pivot; recursively sort partitions.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        stable=True,
        complexity_best="O(n log n)", complexity_avg="O(n log n)", complexity_worst="O(n log n)",
        complexity_space="O(n)",
        description="Divide and conquer with stable merging.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithm_keys() -> List[str]:
    return list(REGISTRY)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SortFn",
    "get_algorithm",
    "list_algorithms",
    "algorithm_keys",
]
