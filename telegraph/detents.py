# telegraph/detents.py
"""
Engine order telegraph detent catalog.

The catalog is ordered top to bottom as the buttons appear on the telegraph:
highest commanded speed first, ending at Stop. Height tokens give each detent
its relative visual weight and are independent of the speed spacing
(Flank is drawn smaller than Ahead Full).
"""
from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Detent:
    id: str                  # unique symbolic name
    label: Tuple[str, ...]   # one or two display lines
    target_speed: float      # knots
    height_token: str        # key into the telegraph height token table


DETENTS: Tuple[Detent, ...] = (
    Detent("flank", ("Flank",), 28, "--h-tele-xl"),
    Detent("full", ("Ahead", "Full"), 25, "--h-tele-xxl"),
    Detent("standard", ("Std",), 20, "--h-tele-lg"),
    Detent("ahead23", ("Ahead", "2/3"), 18, "--h-tele-md"),
    Detent("ahead13", ("Ahead", "1/3"), 10, "--h-tele-sm"),
    Detent("stop", ("Stop",), 0, "--h-tele-stop"),
)


def validate_detents(detents: Sequence[Detent]) -> None:
    """
    Check the catalog invariants.

    Raises:
        ValueError: if ids or tokens repeat, speeds are not strictly
            decreasing, or the catalog does not end on a single Stop detent.
    """
    ids = [d.id for d in detents]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Duplicate detent ids: {ids}")

    tokens = [d.height_token for d in detents]
    if len(set(tokens)) != len(tokens):
        raise ValueError(f"Duplicate height tokens: {tokens}")

    for upper, lower in zip(detents, detents[1:]):
        if not upper.target_speed > lower.target_speed:
            raise ValueError(
                f"Detent speeds must strictly decrease: "
                f"{upper.id}={upper.target_speed} before {lower.id}={lower.target_speed}"
            )

    stops = [d for d in detents if d.target_speed == 0]
    if len(stops) != 1:
        raise ValueError(f"Expected exactly one zero-speed detent, found {len(stops)}")
    if detents[-1] is not stops[0]:
        raise ValueError("Zero-speed detent must be last in the catalog")


def detent_title(detent: Detent) -> str:
    """Tooltip text, e.g. 'Ahead Full (25 kts)'."""
    return f"{' '.join(detent.label)} ({detent.target_speed:g} kts)"


validate_detents(DETENTS)
