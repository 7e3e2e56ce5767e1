#!/usr/bin/env python3
"""
Ship Bridge Dashboard - Main Entry Point

Real-time platform status with an engine order telegraph, linked to the CST
simulation over UDP.

Usage:
    python main.py              # Run with the CST link
    python main.py --no-cst     # Run standalone (no simulation link)
"""
import sys
import os
import logging

from dotenv import load_dotenv
from PyQt5 import QtWidgets

# Load environment variables from .env file
load_dotenv()

# Configure logging FIRST - before any other imports
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

logger = logging.getLogger("bridge_dashboard")

print("="*60)
print("🚢 BRIDGE DASHBOARD STARTING...")
print("="*60)

from bridge.channel import DESIRED_SPEED, ValueChannel
from bridge.cst_udp import CstBridgeWorker
from bridge.speed_command import SpeedCommand
from ui.main_window import MainWindow

print("✅ All core modules imported successfully")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer; using {default}")
        return default


def main(enable_cst: bool = True):
    """
    Entry point for the bridge dashboard.

    Args:
        enable_cst: Link to the CST simulation over UDP
    """
    print("🔧 Creating Qt application...")
    app = QtWidgets.QApplication(sys.argv)

    cst_thread = None
    if enable_cst:
        cst_host = os.getenv("CST_HOST", "127.0.0.1")
        cst_port = _env_int("CST_PORT", 9310)
        listen_port = _env_int("CST_LISTEN_PORT", 9311)
        print(f"🔗 CST link: send {cst_host}:{cst_port}, listen :{listen_port}")
        cst_thread = CstBridgeWorker(
            cst_host=cst_host,
            cst_port=cst_port,
            listen_port=listen_port,
        )

    channel = ValueChannel(sender=cst_thread)
    speed_command = SpeedCommand()

    print("🖥️  Creating main window...")
    window = MainWindow(speed_command, channel, ship_name=os.getenv("SHIP_NAME", "DDG 115"))

    if cst_thread:
        print("🔗 Connecting Qt signals...")
        cst_thread.value_received.connect(channel.publish)
        cst_thread.status_update.connect(lambda msg: logger.info(f"[CST] {msg}"))

        print("🚀 Starting CST bridge thread...")
        cst_thread.start()

        # Announce the initial commanded speed
        channel.set_value(DESIRED_SPEED, speed_command.speed)

    print("🪟 Showing UI window...")
    window.show()

    print("\n" + "="*60)
    if cst_thread:
        print("✅ DASHBOARD READY - CST link ACTIVE")
    else:
        print("✅ DASHBOARD READY - standalone (no CST link)")
    print("="*60 + "\n")

    # Run Qt event loop
    result = app.exec_()

    # Clean shutdown
    print("\n🛑 Shutting down...")
    if cst_thread:
        cst_thread.stop()
        cst_thread.wait()
        cst_thread.close()

    print("👋 Goodbye!")
    sys.exit(result)


if __name__ == "__main__":
    enable_cst = "--no-cst" not in sys.argv

    print(f"🎯 Command line args: {sys.argv}")
    print(f"🔗 CST enabled: {enable_cst}\n")

    try:
        main(enable_cst)
    except Exception as e:
        print("\n" + "="*60)
        print("❌ FATAL ERROR:")
        print("="*60)
        print(f"Error type: {type(e).__name__}")
        print(f"Error message: {e}")
        import traceback
        print("\nFull traceback:")
        traceback.print_exc()
        print("="*60)
        sys.exit(1)
