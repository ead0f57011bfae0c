"""
hooks.py — Renderer Hooks
==========================
The engine awaits one hook per Step.  The renderer decides how long each
one takes (that is where animation timing lives):

    on_compare(i, j)   awaited; resolve when the comparison highlight is done
    on_swap(i, j)      awaited; resolve when the swap animation is done
    on_complete()      fire-and-forget; the run has finished sorting

A hook may be an `async def` or a plain callable; plain callables are
treated as resolving immediately.
"""

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from engine.config import COMPARE_FRACTION, SPEED_PRESETS


PairHook     = Callable[[int, int], Union[Awaitable[None], None]]
CompleteHook = Callable[[], Any]


@dataclass
class Hooks:
    on_compare:  Optional[PairHook]     = None
    on_swap:     Optional[PairHook]     = None
    on_complete: Optional[CompleteHook] = None


def paced_hooks(
    get_speed: Callable[[], str],
    on_compare: Optional[PairHook] = None,
    on_swap: Optional[PairHook] = None,
    on_complete: Optional[CompleteHook] = None,
) -> Hooks:
    """
    Wrap hooks so each one also waits the per-step delay of the CURRENT
    speed preset.  `get_speed` is read on every step, so changing speed
    mid-run takes effect on the next step.
    """

    async def _compare(i: int, j: int) -> None:
        if on_compare is not None:
            await maybe_await(on_compare(i, j))
        await asyncio.sleep(SPEED_PRESETS[get_speed()] * COMPARE_FRACTION)

    async def _swap(i: int, j: int) -> None:
        if on_swap is not None:
            await maybe_await(on_swap(i, j))
        await asyncio.sleep(SPEED_PRESETS[get_speed()])

    return Hooks(on_compare=_compare, on_swap=_swap, on_complete=on_complete)


async def maybe_await(result: Any) -> None:
    if inspect.isawaitable(result):
        await result
