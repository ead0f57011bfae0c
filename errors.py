"""
errors.py — Engine Error Hierarchy
===================================
Every failure the sorting engine reports derives from SortEngineError so
callers (the Flask layer, tests, a renderer) can catch one base class.

    SortEngineError
     ├── InvalidInput        empty / malformed dataset, bad config value
     │    └── EmptySequence  run() before any dataset exists
     ├── AlreadyRunning      a Run is active; run / generate / reset refused
     ├── InvalidOperation    non-adjacent or out-of-range swap, unknown id
     └── HookFailure         an awaited renderer hook raised
"""


class SortEngineError(Exception):
    """Base class for all engine errors."""


class InvalidInput(SortEngineError):
    pass


class EmptySequence(InvalidInput):
    def __init__(self, message: str = "No dataset initialised; generate one first."):
        super().__init__(message)


class AlreadyRunning(SortEngineError):
    def __init__(self, message: str = "A sort is already running."):
        super().__init__(message)


class InvalidOperation(SortEngineError):
    pass


class HookFailure(SortEngineError):
    """
    Raised when a compare / swap hook rejects.

    Attributes:
        hook  : Name of the hook that failed ("on_compare" / "on_swap").
        pair  : The (i, j) indices the hook was acknowledging.
    """

    def __init__(self, hook: str, pair, cause: BaseException):
        self.hook  = hook
        self.pair  = tuple(pair)
        self.cause = cause
        super().__init__(f"{hook}{self.pair} failed: {cause!r}")


__all__ = [
    "SortEngineError",
    "InvalidInput",
    "EmptySequence",
    "AlreadyRunning",
    "InvalidOperation",
    "HookFailure",
]
