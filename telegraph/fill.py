# telegraph/fill.py
from typing import Optional

from telegraph.layout import ResolvedLayout


def fill(active_index: Optional[int], layout: ResolvedLayout) -> float:
    """
    Rail fill height in pixels for the active detent.

    Sum of every detent below the active one (down to and including Stop)
    plus half of the active detent, so the fill ends mid-band on the
    current notch.
    """
    heights = layout.heights
    if active_index is None or not 0 <= active_index < len(heights):
        return 0.0
    below = sum(heights[active_index + 1:])
    return below + heights[active_index] * 0.5
