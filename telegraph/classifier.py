# telegraph/classifier.py
"""
Nearest-detent classification for the live commanded speed.
"""
from typing import Optional, Sequence

from telegraph.detents import Detent


def classify(speed: float, detents: Sequence[Detent]) -> Optional[int]:
    """
    Index of the detent closest to `speed`.

    Detents are scanned in catalog order and a later one only wins on a
    strictly smaller distance, so an exact midpoint resolves to the
    higher-speed neighbour. Speeds outside 0..30 still get the nearest
    detent. Returns None for an empty catalog.
    """
    best = None
    best_distance = None
    for i, detent in enumerate(detents):
        distance = abs(speed - detent.target_speed)
        if best is None or distance < best_distance:
            best = i
            best_distance = distance
    return best
