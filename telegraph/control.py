# telegraph/control.py
"""
Telegraph composition: layout snapshot + per-speed frame.

The model owns the resolved layout and tick list for one mount. A frame is
derived fresh for every speed from the latest snapshot; nothing from a
previous classification is kept.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from telegraph.classifier import classify
from telegraph.detents import DETENTS, Detent
from telegraph.fill import fill
from telegraph.layout import EMPTY_LAYOUT, DimensionProvider, ResolvedLayout, resolve
from telegraph.ticks import Tick, ticks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelegraphFrame:
    active_index: Optional[int]
    fill_height: float
    stack_height: float
    ticks: List[Tick]
    layout: ResolvedLayout


class TelegraphModel:
    """
    Qt-free core of the engine order telegraph.

    Args:
        provider: DimensionProvider used to size the detents
        detents: Ordered detent catalog (defaults to DETENTS)
        on_speed_request: Called with a detent's target speed when pressed
    """

    def __init__(
        self,
        provider: DimensionProvider,
        detents: Sequence[Detent] = DETENTS,
        on_speed_request: Optional[Callable[[float], None]] = None,
    ):
        self.provider = provider
        self.detents = tuple(detents)
        self.on_speed_request = on_speed_request

        self._layout = EMPTY_LAYOUT
        self._ticks: List[Tick] = []

    @property
    def layout(self) -> ResolvedLayout:
        return self._layout

    def relayout(self) -> ResolvedLayout:
        """Re-measure all detents and rebuild the tick list together."""
        layout = resolve(self.detents, self.provider)
        self._layout = layout
        self._ticks = ticks(layout)
        logger.debug(
            f"Telegraph layout: heights={layout.heights} "
            f"stack={layout.stack_height:.1f} baseline={layout.baseline_offset:.1f}"
        )
        return layout

    def frame(self, speed: float) -> TelegraphFrame:
        layout = self._layout
        active = classify(speed, self.detents)
        return TelegraphFrame(
            active_index=active,
            fill_height=fill(active, layout),
            stack_height=layout.stack_height,
            ticks=list(self._ticks),
            layout=layout,
        )

    def press(self, index: int) -> float:
        """Request the detent's target speed from the host."""
        target = self.detents[index].target_speed
        logger.info(f"Telegraph: {self.detents[index].id} requested ({target} kts)")
        if self.on_speed_request is not None:
            self.on_speed_request(target)
        return target
