"""
controller.py — Run Controller
===============================
SortEngine is the per-session context object: it owns the Sequence, the
configuration, the renderer hooks and the single "running" flag.

    engine = SortEngine(hooks=paced_hooks(lambda: engine.config.speed))
    engine.generate(size=12)
    outcome = await engine.run("merge")

Run life-cycle:
    IDLE  →  run()  →  RUNNING  →  COMPLETED
                                →  FAILED      (hook rejected / aborted)

Driver loop:
    The algorithm is a generator of Steps.  The controller pulls ONE step
    through a Stepper, awaits the matching hook, and only then pulls the
    next.  Hooks therefore resolve in exactly the order the steps were
    issued, and the algorithm never runs ahead of the renderer.

Mutual exclusion:
    One boolean flag.  While it is set, run / initialize / generate /
    reset are refused with AlreadyRunning.  It is cleared on every exit
    path, including failures and task cancellation.  The flag is tested
    and set under a threading.Lock; one session may reach run() from two
    request threads at once.
"""

import asyncio
import inspect
import logging
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set

from algorithms import get_algorithm
from algorithms.step import Step, StepKind
from engine.config import EngineConfig, validate_algorithm, validate_seed, validate_size
from engine.hooks import Hooks, PairHook, maybe_await
from engine.stepper import Stepper
from errors import AlreadyRunning, EmptySequence, HookFailure, SortEngineError
from sequence import Sequence

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Run state & outcome
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    COMPLETED = "completed"
    FAILED    = "failed"


@dataclass(frozen=True)
class RunOutcome:
    state:  RunState
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state == RunState.COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        return {"state": self.state.value, "reason": self.reason}


@dataclass
class Run:
    """
    One execution of one algorithm over the engine's Sequence.

    Attributes:
        algo_key    : Registry key of the algorithm.
        size        : Dataset length at start.
        speed       : Speed preset at start.
        state       : RunState.
        step_count  : Steps issued so far, DONE included (monotonic).
        comparisons : COMPARE steps issued.
        swaps       : SWAP steps issued (adjacent transpositions).
        trace       : Every Step, in issue order.
        frames      : Item ids in board order after each Step.
        initial_frame : Item ids in board order before the first Step.
        outcome     : Set once the run leaves RUNNING.
        stepper     : The Stepper that pulled the trace; it keeps the
                      buffer for step-by-step review afterwards.
    """

    algo_key:    str
    size:        int
    speed:       str
    state:       RunState            = RunState.IDLE
    step_count:  int                 = 0
    comparisons: int                 = 0
    swaps:       int                 = 0
    trace:       List[Step]          = field(default_factory=list)
    frames:      List[List[str]]     = field(default_factory=list)
    initial_frame: List[str]         = field(default_factory=list)
    started_at:  float               = 0.0
    elapsed_ms:  float               = 0.0
    outcome:     Optional[RunOutcome] = None
    stepper:     Optional[Stepper]    = field(default=None, repr=False)

    def record(self, step: Step) -> None:
        self.step_count += 1
        if step.kind is StepKind.COMPARE:
            self.comparisons += 1
        elif step.kind is StepKind.SWAP:
            self.swaps += 1

    def finish(self, state: RunState, reason: Optional[str] = None) -> RunOutcome:
        self.state      = state
        self.elapsed_ms = round((time.monotonic() - self.started_at) * 1000, 2)
        self.outcome    = RunOutcome(state, reason)
        return self.outcome

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algo_key":    self.algo_key,
            "size":        self.size,
            "speed":       self.speed,
            "state":       self.state.value,
            "step_count":  self.step_count,
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
            "elapsed_ms":  self.elapsed_ms,
            "outcome":     self.outcome.to_dict() if self.outcome else None,
        }


# ---------------------------------------------------------------------------
# SortEngine
# ---------------------------------------------------------------------------
class SortEngine:
    """
    Attributes:
        config    : EngineConfig (replaced, never mutated).
        hooks     : Renderer Hooks awaited at every step.
        sequence  : The current dataset, or None before generate/initialize.
        last_run  : The most recent Run (active or finished).
    """

    def __init__(self, config: Optional[EngineConfig] = None, hooks: Optional[Hooks] = None):
        self.config:   EngineConfig       = config or EngineConfig()
        self.hooks:    Hooks              = hooks or Hooks()
        self.sequence: Optional[Sequence] = None
        self.last_run: Optional[Run]      = None
        self._running: bool               = False
        self._lock:    threading.Lock     = threading.Lock()
        self._pending: Set["asyncio.Future[Any]"] = set()

    # ------------------------------------------------------------------
    # Dataset lifecycle
    # ------------------------------------------------------------------
    def initialize(self, values: Iterable[int]) -> Sequence:
        """Replace the dataset with Items built from `values`."""
        with self._lock:
            self._ensure_idle()
            sequence = Sequence.from_values(values)
            self.sequence = sequence
            self.last_run = None
        logger.info("Dataset initialised with %d items", len(sequence))
        return sequence

    def generate(self, size: Optional[int] = None, seed: Optional[int] = None) -> Sequence:
        """Replace the dataset with `size` distinct random card values."""
        with self._lock:
            self._ensure_idle()
            size = validate_size(self.config.size if size is None else size)
            seed = validate_seed(self.config.seed if seed is None else seed)
            sequence = Sequence.generate_random(size, seed=seed)
            self.sequence = sequence
            self.last_run = None
            self.config   = self.config.with_size(size)
        logger.info("Generated %d cards (seed=%s)", size, seed)
        return sequence

    def reset(self) -> None:
        """Discard the dataset and the last run."""
        with self._lock:
            self._ensure_idle()
            self.sequence = None
            self.last_run = None
        logger.info("Engine reset")

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_speed(self, speed: str) -> None:
        """Allowed mid-run; paced hooks pick it up on the next step."""
        self.config = self.config.with_speed(speed)

    def set_size(self, size: int) -> None:
        """Takes effect on the next generate()."""
        with self._lock:
            self._ensure_idle()
            self.config = self.config.with_size(size)

    def set_algorithm(self, algo_key: str) -> None:
        with self._lock:
            self._ensure_idle()
            self.config = self.config.with_algorithm(algo_key)

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self._running

    async def run(self, algo_key: Optional[str] = None) -> RunOutcome:
        """
        Sort the current Sequence with one algorithm.

        Raises (before touching any state):
            AlreadyRunning : a run is active.
            EmptySequence  : no dataset yet.
            InvalidInput   : unknown algorithm key.

        Returns:
            RunOutcome — COMPLETED, or FAILED with the reason when a hook
            rejected.  Cancelling the awaiting task aborts the run; it is
            marked FAILED and the cancellation propagates.
        """
        with self._lock:
            if self._running:
                raise AlreadyRunning()
            if self.sequence is None:
                raise EmptySequence()
            key  = validate_algorithm(self.config.algorithm if algo_key is None else algo_key)
            info = get_algorithm(key)

            sequence = self.sequence
            run = Run(algo_key=key, size=len(sequence), speed=self.config.speed)
            run.state      = RunState.RUNNING
            run.started_at = time.monotonic()
            self.last_run  = run
            self._running  = True

        stepper = Stepper()
        run.stepper = stepper
        stepper.start(info.fn(sequence), sequence)
        run.trace  = stepper.steps
        run.frames = stepper.frames
        run.initial_frame = stepper.initial_frame
        logger.info("Run started: %s on %d items", info.label, len(sequence))

        try:
            while stepper.next_step():
                step = stepper.current_step
                run.record(step)
                logger.debug("step %d %s%s", step.step_number, step.kind.value, step.pair)
                if step.kind is StepKind.COMPARE:
                    await self._await_hook("on_compare", self.hooks.on_compare, step)
                elif step.kind is StepKind.SWAP:
                    await self._await_hook("on_swap", self.hooks.on_swap, step)
        except SortEngineError as exc:
            stepper.close()
            outcome = run.finish(RunState.FAILED, str(exc))
            logger.warning("Run failed after %d steps: %s", run.step_count, exc)
            return outcome
        except asyncio.CancelledError:
            stepper.close()
            run.finish(RunState.FAILED, "aborted")
            logger.warning("Run aborted after %d steps", run.step_count)
            raise
        except Exception as exc:
            stepper.close()
            run.finish(RunState.FAILED, repr(exc))
            logger.exception("Run crashed after %d steps", run.step_count)
            raise
        finally:
            self._running = False

        outcome = run.finish(RunState.COMPLETED)
        if not sequence.is_sorted():
            logger.error("Run %s completed but the sequence is not sorted: %s", key, sequence)
        logger.info(
            "Run completed: %s, %d comparisons, %d swaps, %.1f ms",
            info.label, run.comparisons, run.swaps, run.elapsed_ms,
        )
        self._notify_complete()
        return outcome

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def snapshot(self) -> Dict[str, Any]:
        return {
            "config":     self.config.to_dict(),
            "is_running": self._running,
            "sequence":   self.sequence.to_dict() if self.sequence else None,
            "values":     self.sequence.values() if self.sequence else [],
            "last_run":   self.last_run.to_dict() if self.last_run else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _ensure_idle(self) -> None:
        if self._running:
            raise AlreadyRunning()

    async def _await_hook(self, name: str, hook: Optional[PairHook], step: Step) -> None:
        if hook is None:
            return
        try:
            await maybe_await(hook(step.i, step.j))
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            raise HookFailure(name, step.pair, exc) from exc

    def _notify_complete(self) -> None:
        hook = self.hooks.on_complete
        if hook is None:
            return
        try:
            result = hook()
        except Exception:
            logger.exception("on_complete hook raised")
            return
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._pending.add(task)
            task.add_done_callback(self._on_complete_done)

    def _on_complete_done(self, task: "asyncio.Future[Any]") -> None:
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("on_complete hook failed", exc_info=task.exception())
