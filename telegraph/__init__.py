"""
Engine order telegraph geometry and state (no Qt dependency).
"""
from telegraph.detents import DETENTS, Detent, detent_title, validate_detents
from telegraph.layout import (
    DimensionProvider,
    ClampLength,
    ResolvedLayout,
    StaticDimensionProvider,
    ViewportDimensionProvider,
    resolve,
)
from telegraph.classifier import classify
from telegraph.fill import fill
from telegraph.ticks import Tick, ticks
from telegraph.control import TelegraphFrame, TelegraphModel

__all__ = [
    'DETENTS', 'Detent', 'detent_title', 'validate_detents',
    'DimensionProvider', 'ClampLength', 'ResolvedLayout',
    'StaticDimensionProvider', 'ViewportDimensionProvider', 'resolve',
    'classify', 'fill', 'Tick', 'ticks',
    'TelegraphFrame', 'TelegraphModel',
]
