# bridge/cst_udp.py
"""
CST simulation bridge over UDP.

The simulation exchanges one JSON object per datagram:

    {"type": "value", "name": "desiredSpeed", "value": 18}
    {"type": "operation", "name": "SetCondition1"}

CstBridgeWorker listens for incoming values on its own thread and emits
them as Qt signals; outgoing values and operation calls are sent from the
caller's thread on a separate socket.
"""
import json
import logging
import socket
from typing import Any, Optional, Tuple

from PyQt5 import QtCore

logger = logging.getLogger(__name__)


class CstProtocolError(ValueError):
    """Raised for datagrams that are not valid CST messages."""


def encode_value(name: str, value: Any) -> bytes:
    return json.dumps({"type": "value", "name": name, "value": value}).encode("utf-8")


def encode_operation(name: str) -> bytes:
    return json.dumps({"type": "operation", "name": name}).encode("utf-8")


def parse_cst_message(data: bytes) -> Optional[Tuple[str, Any]]:
    """
    Decode one datagram.

    Returns (name, value) for value messages and None for other message
    types.

    Raises:
        CstProtocolError: on bad encoding, bad JSON or missing fields
    """
    try:
        message = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CstProtocolError(f"Undecodable datagram: {e}") from e

    if not isinstance(message, dict):
        raise CstProtocolError(f"Expected a JSON object, got {type(message).__name__}")

    kind = message.get("type")
    name = message.get("name")
    if not isinstance(kind, str) or not isinstance(name, str) or not name:
        raise CstProtocolError(f"Message missing type/name: {message!r}")

    if kind != "value":
        return None
    if "value" not in message:
        raise CstProtocolError(f"Value message for {name!r} has no value")
    return name, message["value"]


class CstBridgeWorker(QtCore.QThread):
    """
    UDP link to the CST simulation.

    Signals:
        value_received(str name, object value) - value pushed by CST
        status_update(str message) - status messages for the UI/log
    """

    value_received = QtCore.pyqtSignal(str, object)
    status_update = QtCore.pyqtSignal(str)

    def __init__(
        self,
        cst_host: str = "127.0.0.1",
        cst_port: int = 9310,
        listen_host: str = "127.0.0.1",
        listen_port: int = 9311,
        parent=None,
    ):
        """
        :param cst_host: Host the simulation listens on for our writes.
        :param cst_port: UDP port the simulation listens on.
        :param listen_host: Local address to bind for incoming values.
        :param listen_port: Local UDP port the simulation pushes values to.
        """
        super().__init__(parent)
        self.cst_host = cst_host
        self.cst_port = cst_port
        self.listen_host = listen_host
        self.listen_port = listen_port
        self.running = False

        self._sock: Optional[socket.socket] = None
        self._send_sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    # ------------------ Core QThread loop ------------------ #

    def run(self):
        self.status_update.emit(
            f"Starting CST listener on {self.listen_host}:{self.listen_port}..."
        )

        try:
            self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._sock.bind((self.listen_host, self.listen_port))
            self._sock.settimeout(1.0)  # lets stop() take effect
        except OSError as e:
            self.status_update.emit(f"ERROR: Could not open CST socket: {e}")
            return

        self.status_update.emit("CST link ready")
        self.running = True

        try:
            while self.running:
                try:
                    data, _addr = self._sock.recvfrom(4096)
                except socket.timeout:
                    continue
                except OSError:
                    # Socket closed during shutdown
                    break

                try:
                    parsed = parse_cst_message(data)
                except CstProtocolError as e:
                    self.status_update.emit(f"CST parse error: {e}")
                    continue

                if parsed is None:
                    continue

                name, value = parsed
                self.value_received.emit(name, value)
        finally:
            if self._sock is not None:
                self._sock.close()
                self._sock = None
            self.status_update.emit("CST link stopped")

    def stop(self):
        logger.info("Stopping CST bridge...")
        self.running = False

    def close(self):
        """Release the send socket; call after the thread has finished."""
        self._send_sock.close()

    # ------------------ Outbound ------------------ #

    def _send(self, payload: bytes) -> None:
        try:
            self._send_sock.sendto(payload, (self.cst_host, self.cst_port))
        except OSError as e:
            logger.warning(f"CST send to {self.cst_host}:{self.cst_port} failed: {e}")

    def send_value(self, name: str, value: Any) -> None:
        self._send(encode_value(name, value))

    def send_operation(self, name: str) -> None:
        logger.info(f"Calling CST operation {name!r}")
        self._send(encode_operation(name))
