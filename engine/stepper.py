"""
stepper.py — Step Buffer & Review Cursor
=========================================
The Stepper is the pull side of an algorithm generator.  It owns the
generator, buffers every Step it has seen, stamps the monotonically
increasing step number, and snapshots the card order after every step so
an earlier step can still be drawn once the board has moved on.

    SortEngine.run       pulls with next_step(), one step per awaited hook
    Recorder             drains with jump_to_end()
    /api/step/*          walks the finished buffer with rewind / next /
                         prev / goto

State machine:
    IDLE  →  start()  →  READY  →  (generator exhausted)  →  FINISHED

Moving the cursor backwards only moves the VIEW: the Sequence itself is
never un-sorted.

Thread safety:
  This class is NOT thread-safe.  Drive it from one thread or one event
  loop; the async SortEngine does exactly that.
"""

from enum import Enum
from typing import Iterator, List, Optional

from algorithms.step import Step
from sequence import Sequence


class StepperState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    FINISHED = "finished"


class Stepper:
    """
    Attributes:
        state         : Current StepperState.
        steps         : Every Step pulled so far.
        frames        : frames[k] = item ids in board order right after steps[k].
        initial_frame : Item ids in board order before the first step.
        current_idx   : Index into `steps` under the cursor; -1 is before
                        the first step.
    """

    def __init__(self):
        self._generator:    Optional[Iterator[Step]] = None
        self._sequence:     Optional[Sequence]       = None
        self.steps:         List[Step]       = []
        self.frames:        List[List[str]]  = []
        self.initial_frame: List[str]        = []
        self.current_idx:   int              = -1
        self.state:         StepperState     = StepperState.IDLE

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: Iterator[Step], sequence: Optional[Sequence] = None) -> None:
        """Attach a fresh algorithm generator.  Nothing is pulled yet."""
        self._generator    = generator
        self._sequence     = sequence
        self.steps         = []
        self.frames        = []
        self.initial_frame = sequence.ids() if sequence is not None else []
        self.current_idx   = -1
        self.state         = StepperState.READY

    def close(self) -> None:
        """Stop the algorithm generator; the buffer stays reviewable."""
        if self._generator is not None:
            self._generator.close()
        self._generator = None
        if self.state is StepperState.READY:
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step, pulling from the generator at the buffer's end."""
        target = self.current_idx + 1
        if target >= len(self.steps) and not self._fetch_next():
            return False
        self.current_idx = target
        return True

    def prev_step(self) -> bool:
        """Move back one step.  Returns False at the first step."""
        if self.current_idx <= 0:
            return False
        self.current_idx -= 1
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index, fetching forward if needed."""
        while idx >= len(self.steps):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.steps):
            self.current_idx = idx
            return True
        return False

    def rewind(self) -> None:
        """Put the cursor before the first step."""
        self.current_idx = -1

    def jump_to_end(self) -> None:
        """Exhaust the generator and move to the final step."""
        while self._fetch_next():
            pass
        self.current_idx = len(self.steps) - 1

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def current_frame(self) -> List[str]:
        if 0 <= self.current_idx < len(self.frames):
            return self.frames[self.current_idx]
        return self.initial_frame

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Pull one Step from the generator into the buffer."""
        if self._generator is None:
            return False
        try:
            step = next(self._generator)
        except StopIteration:
            self._generator = None
            self.state = StepperState.FINISHED
            return False
        self.steps.append(step.numbered(len(self.steps)))
        if self._sequence is not None:
            self.frames.append(self._sequence.ids())
        return True
