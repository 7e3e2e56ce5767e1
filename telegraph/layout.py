# telegraph/layout.py
"""
Pixel layout of the telegraph stack.

Height tokens are resolved to device pixels through a DimensionProvider.
The whole table is re-resolved on every call so that the stack height and
baseline always come from the same measurement pass.
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Protocol, Sequence, Tuple

from telegraph.detents import Detent

logger = logging.getLogger(__name__)


class DimensionProvider(Protocol):
    def resolve_length(self, token: str) -> float:
        """Return the current length of `token` in device pixels."""
        ...


@dataclass(frozen=True)
class ResolvedLayout:
    heights: Tuple[float, ...]
    stack_height: float
    baseline_offset: float

    @property
    def is_degenerate(self) -> bool:
        return not self.heights or self.stack_height <= 0


EMPTY_LAYOUT = ResolvedLayout(heights=(), stack_height=0.0, baseline_offset=0.0)


def _resolve_one(token: str, provider: DimensionProvider) -> float:
    try:
        raw = provider.resolve_length(token)
    except (KeyError, ValueError, TypeError) as e:
        logger.debug(f"Height token {token!r} unresolved ({e}); using 0")
        return 0.0

    if raw is None:
        logger.debug(f"Height token {token!r} resolved to nothing; using 0")
        return 0.0

    try:
        px = float(raw)
    except (TypeError, ValueError):
        logger.debug(f"Height token {token!r} resolved to {raw!r}; using 0")
        return 0.0
    if math.isnan(px) or px < 0:
        logger.debug(f"Height token {token!r} resolved to {raw!r}; using 0")
        return 0.0
    return px


def resolve(detents: Sequence[Detent], provider: DimensionProvider) -> ResolvedLayout:
    """
    Resolve every detent's height token to pixels.

    Unresolvable tokens count as zero height instead of failing the layout.
    """
    heights = tuple(_resolve_one(d.height_token, provider) for d in detents)
    if not heights:
        return EMPTY_LAYOUT
    return ResolvedLayout(
        heights=heights,
        stack_height=sum(heights),
        baseline_offset=heights[-1] * 0.5,
    )


# ------------------ Providers ------------------ #

class StaticDimensionProvider:
    """Fixed token -> pixel table."""

    def __init__(self, lengths: Mapping[str, float]):
        self._lengths: Dict[str, float] = dict(lengths)

    def resolve_length(self, token: str) -> float:
        return self._lengths[token]


@dataclass(frozen=True)
class ClampLength:
    """
    A clamp(min, vh, max) style length.

    Resolves to `vh` percent of the viewport height, bounded to
    [min_px, max_px].
    """
    min_px: float
    vh: float
    max_px: float

    def to_pixels(self, viewport_height: float) -> float:
        preferred = viewport_height * self.vh / 100.0
        return max(self.min_px, min(self.max_px, preferred))


class ViewportDimensionProvider:
    """
    Resolves tokens against the current viewport height.

    The owner updates the viewport height on every resize and then
    re-runs `resolve`; answers are stable until the next update.
    """

    def __init__(self, tokens: Mapping[str, ClampLength], viewport_height: float = 0.0):
        self._tokens: Dict[str, ClampLength] = dict(tokens)
        self.viewport_height = float(viewport_height)

    def set_viewport_height(self, height: float) -> None:
        self.viewport_height = float(height)

    def resolve_length(self, token: str) -> Optional[float]:
        length = self._tokens.get(token)
        if length is None:
            return None
        # Whole pixels, so the buttons and the rails agree on every edge
        return float(round(length.to_pixels(self.viewport_height)))
