"""
Shared constants, configuration and error types
"""

from .config import RadarConfig
from .exceptions import (
    RadarError,
    EndpointOpenFailed,
    HandshakeTimeout,
    DetectionExhausted,
)

__all__ = [
    'RadarConfig',
    'RadarError',
    'EndpointOpenFailed',
    'HandshakeTimeout',
    'DetectionExhausted',
]
