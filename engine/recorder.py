"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete, un-paced algorithm run (all Steps) on a private copy
of a dataset, then computes the analytics the Comparison Mode needs.

Usage:
    rec = Recorder()
    rec.start(algo_key="merge", values=[5, 3, 8, 1])
    metrics = rec.run_to_completion()   # exhausts the generator
    rec.export()                        # serialisable snapshot for replay

Comparison Mode:
    Two Recorders (one per algo) run on the SAME values, then
    compare(rec1, rec2) → ComparisonResult.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step, StepKind
from engine.config import validate_algorithm
from engine.stepper import Stepper
from sequence import Sequence

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    size:          int   = 0
    comparisons:   int   = 0
    swaps:         int   = 0          # adjacent transpositions
    total_steps:   int   = 0          # number of Steps yielded, DONE included
    wall_time_ms:  float = 0.0        # wall-clock time to run to completion
    memory_bytes:  int   = 0          # approx size of the step buffer
    sorted_ok:     bool  = False
    stable:        bool  = False      # property of the algorithm, not the run


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which algo compared less
    winner_swaps:       str = ""   # which algo moved cards less
    winner_steps:       str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps       : Full list of Steps from the run.
        frames      : Item ids in board order after each Step.
        metrics     : Computed RunMetrics (available after run_to_completion).
        stepper     : The underlying Stepper.
        sequence    : The private Sequence the algorithm sorted.
    """

    def __init__(self):
        self.steps:     List[Step]           = []
        self.frames:    List[List[str]]      = []
        self.metrics:   Optional[RunMetrics] = None
        self.stepper:   Optional[Stepper]    = None
        self.sequence:  Optional[Sequence]   = None

        self._algo_info:  Optional[AlgoInfo] = None
        self._initial:    Optional[Sequence] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Iterable[int]) -> None:
        """Build a private Sequence and attach the algorithm's generator."""
        info = get_algorithm(validate_algorithm(algo_key))

        self._algo_info = info
        self._initial   = Sequence.from_values(values)
        self.sequence   = self._initial.copy()
        self.steps      = []
        self.frames     = []
        self.metrics    = None

        self.stepper = Stepper()
        self.stepper.start(info.fn(self.sequence), self.sequence)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        start = time.monotonic()
        self.stepper.jump_to_end()
        wall_ms = (time.monotonic() - start) * 1000

        self.steps  = list(self.stepper.steps)
        self.frames = list(self.stepper.frames)
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            "Recorded %s: %d steps in %.2f ms",
            self.metrics.algo_key, self.metrics.total_steps, wall_ms,
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        initial = self._initial
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "items":    initial.to_dict()["items"] if initial else [],
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
            "frames":   self.frames,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        comparisons = sum(1 for s in self.steps if s.kind is StepKind.COMPARE)
        swaps       = sum(1 for s in self.steps if s.kind is StepKind.SWAP)

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            size=len(self.sequence) if self.sequence else 0,
            comparisons=comparisons,
            swaps=swaps,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            sorted_ok=self.sequence.is_sorted() if self.sequence else False,
            stable=info.stable if info else False,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_swaps      =winner(l.swaps, r.swaps, l.algo_label, r.algo_label),
        winner_steps      =winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
    )
