"""
Serial communication for radarscope

Handles port detection, line framing and distance line parsing.
"""

from .connection import SerialConnection
from .line_framer import LineFramer
from .protocol import parse_distance, has_signature, clamp_distance
from .port_scanner import detect, open_manual, candidate_ports

__all__ = [
    'SerialConnection',
    'LineFramer',
    'parse_distance',
    'has_signature',
    'clamp_distance',
    'detect',
    'open_manual',
    'candidate_ports',
]
