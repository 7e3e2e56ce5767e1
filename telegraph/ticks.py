# telegraph/ticks.py
"""
Rail scale ticks.

Eleven uniformly spaced marks (0..10, i.e. speed / 3) laid over the stack
independently of the detent boundaries.
"""
from dataclasses import dataclass
from typing import List

import numpy as np

from telegraph.layout import ResolvedLayout

TICK_COUNT = 11
MAJOR_EVERY = 5
TOP_HEADROOM = 0.25   # fraction of the top (Flank) detent kept clear above tick 10


@dataclass(frozen=True)
class Tick:
    value: int
    y_offset: float   # px from the zero end of the rail
    major: bool


def usable_span(layout: ResolvedLayout) -> float:
    top_headroom = layout.heights[0] * TOP_HEADROOM
    return (layout.stack_height - top_headroom) - layout.baseline_offset


def ticks(layout: ResolvedLayout) -> List[Tick]:
    """Tick list for `layout`; empty when the layout is degenerate."""
    if layout.is_degenerate:
        return []

    start = layout.baseline_offset
    stop = start + usable_span(layout)
    offsets = np.linspace(start, stop, TICK_COUNT)

    return [
        Tick(value=i, y_offset=float(y), major=(i % MAJOR_EVERY == 0))
        for i, y in enumerate(offsets)
    ]
