"""
engine/
-------
Run control, playback & recording layer.

    from engine import SortEngine, Hooks, Stepper, Recorder, compare
"""

from engine.config     import EngineConfig, SPEED_PRESETS, load_config
from engine.hooks      import Hooks, paced_hooks
from engine.stepper    import Stepper, StepperState
from engine.controller import SortEngine, Run, RunOutcome, RunState
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "EngineConfig",
    "SPEED_PRESETS",
    "load_config",
    "Hooks",
    "paced_hooks",
    "Stepper",
    "StepperState",
    "SortEngine",
    "Run",
    "RunOutcome",
    "RunState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
