"""
Host-side speed state and the link to the CST simulation.
"""
from bridge.channel import DESIRED_SPEED, SET_CONDITION_1, TOTAL_FUEL_LOAD, ValueChannel
from bridge.cst_udp import CstBridgeWorker, CstProtocolError, parse_cst_message
from bridge.speed_command import SpeedCommand, clamp_speed, parse_speed_text

__all__ = [
    'DESIRED_SPEED', 'SET_CONDITION_1', 'TOTAL_FUEL_LOAD', 'ValueChannel',
    'CstBridgeWorker', 'CstProtocolError', 'parse_cst_message',
    'SpeedCommand', 'clamp_speed', 'parse_speed_text',
]
