# bridge/speed_command.py
"""
Host-owned commanded speed.

Every speed input (numeric entry, slider, telegraph detent, simulation
source) goes through SpeedCommand, which clamps to the 0..30 kt range and
only notifies when the value actually changes. The last point keeps the
round trip to the simulation source from echoing forever.
"""
import logging
import math
from numbers import Real
from typing import Any, Optional

from PyQt5 import QtCore

logger = logging.getLogger(__name__)

MIN_SPEED = 0.0
MAX_SPEED = 30.0
INITIAL_SPEED = 30.0


def clamp_speed(value: float) -> float:
    return max(MIN_SPEED, min(MAX_SPEED, float(value)))


def parse_speed_text(text: str) -> Optional[float]:
    """
    Speed from the numeric entry box.

    Empty text means 0; anything that is not a number is ignored (None).
    """
    text = text.strip()
    if text == "":
        return MIN_SPEED
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return clamp_speed(value)


def coerce_remote_speed(value: Any) -> Optional[float]:
    """desiredSpeed pushed by the simulation source; non-numbers are dropped."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    if math.isnan(value):
        return None
    return clamp_speed(value)


def coerce_fuel_load(value: Any) -> Optional[float]:
    """totalFuelLoad pushed by the simulation source; None when unknown."""
    if value is None or isinstance(value, bool):
        return None
    try:
        load = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(load):
        return None
    return load


class SpeedCommand(QtCore.QObject):
    """
    Single source of truth for the commanded speed.

    Signals:
        speed_changed(float speed) - emitted after every effective change
    """

    speed_changed = QtCore.pyqtSignal(float)

    def __init__(self, initial: float = INITIAL_SPEED, parent=None):
        super().__init__(parent)
        self._speed = clamp_speed(initial)

    @property
    def speed(self) -> float:
        return self._speed

    def set_speed(self, value: float) -> bool:
        """Clamp and adopt `value`. Returns True if the speed changed."""
        speed = clamp_speed(value)
        if speed == self._speed:
            return False
        self._speed = speed
        logger.debug(f"Commanded speed -> {speed:g} kts")
        self.speed_changed.emit(speed)
        return True

    def set_from_text(self, text: str) -> bool:
        speed = parse_speed_text(text)
        if speed is None:
            return False
        return self.set_speed(speed)

    def set_from_remote(self, value: Any) -> bool:
        speed = coerce_remote_speed(value)
        if speed is None:
            logger.debug(f"Ignoring non-numeric desiredSpeed: {value!r}")
            return False
        return self.set_speed(speed)
