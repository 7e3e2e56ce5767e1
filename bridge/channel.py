# bridge/channel.py
"""
Named value channel to the external simulation source (CST).

Mirrors the CST scripting contract: subscribers register per value name and
get back an unsubscribe callable; outgoing writes and operation calls are
forwarded to a sender (normally the UDP bridge).
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)

DESIRED_SPEED = "desiredSpeed"
TOTAL_FUEL_LOAD = "totalFuelLoad"
SET_CONDITION_1 = "SetCondition1"


class CstSender(Protocol):
    def send_value(self, name: str, value: Any) -> None: ...

    def send_operation(self, name: str) -> None: ...


class ValueChannel:
    """
    Subscribe/unsubscribe hub for named simulation values.

    Args:
        sender: Optional outbound transport; without one, writes are dropped
    """

    def __init__(self, sender: Optional[CstSender] = None):
        self.sender = sender
        self._subscribers: Dict[str, List[Callable[[Any], None]]] = {}

    def on_value(self, name: str, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Subscribe to `name`; call the returned function to unsubscribe."""
        self._subscribers.setdefault(name, []).append(callback)

        def off():
            callbacks = self._subscribers.get(name, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return off

    def subscriber_count(self, name: str) -> int:
        return len(self._subscribers.get(name, []))

    def publish(self, name: str, value: Any) -> None:
        """Deliver an incoming value to every subscriber of `name`."""
        for callback in list(self._subscribers.get(name, [])):
            try:
                callback(value)
            except Exception as e:
                logger.error(f"Subscriber for {name!r} failed: {e}", exc_info=True)

    def set_value(self, name: str, value: Any) -> None:
        if self.sender is None:
            return
        self.sender.send_value(name, value)

    def call_operation(self, name: str) -> None:
        if self.sender is None:
            logger.info(f"No CST connection; operation {name!r} not sent")
            return
        self.sender.send_operation(name)
