"""
ASCII protocol parser for the radar sketch

The sketch sends two kinds of lines:
- an identity line containing the signature (e.g. "RADAR_READY"), once after reset
- data lines starting with a signed decimal distance in cm, e.g. "42\\n" or "-1\\n"

Anything after the leading number is ignored. Lines that do not start with a
number (boot banners, the signature itself) are rejected.
"""

import re
from typing import Optional, Union

from ..model.data_structures import DistanceSample
from ..utils.constants import MIN_DISTANCE_CM, MAX_DISTANCE_CM

# Leading whitespace, optional minus, then digits (C-locale isspace set)
_DISTANCE_RE = re.compile(rb"[ \t\n\r\f\v]*(-?[0-9]+)")


def _as_bytes(line: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(line, str):
        return line.encode('ascii', errors='replace')
    return bytes(line)


def clamp_distance(value: int) -> int:
    """
    Clamp a raw reading to the valid distance range

    Args:
        value: Raw reading in cm

    Returns:
        Value clamped to [-1, 500]
    """
    if value < MIN_DISTANCE_CM:
        return MIN_DISTANCE_CM
    if value > MAX_DISTANCE_CM:
        return MAX_DISTANCE_CM
    return value


def parse_distance(line: Union[bytes, bytearray, str]) -> Optional[DistanceSample]:
    """
    Parse a distance line

    Args:
        line: Line bytes (or text) as returned by the line framer

    Returns:
        DistanceSample with the clamped reading, or None if the line is not numeric
    """
    match = _DISTANCE_RE.match(_as_bytes(line))
    if match is None:
        return None

    value = int(match.group(1))
    return DistanceSample(distance_cm=clamp_distance(value))


def has_signature(line: Union[bytes, bytearray, str], signature: Union[bytes, str]) -> bool:
    """
    Check whether a line contains the identity signature

    Args:
        line: Line bytes (or text)
        signature: Signature substring

    Returns:
        True if the signature appears anywhere in the line
    """
    return _as_bytes(signature) in _as_bytes(line)
