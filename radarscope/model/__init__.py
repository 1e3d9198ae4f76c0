"""
Radar data model

Sweep state, blips and the per-frame snapshot handed to the renderer.
"""

from .data_structures import DistanceSample, Blip, SweepState, BlipView, RadarFrame
from .ring_buffer import BlipRing
from .sweep import SweepModel

__all__ = [
    'DistanceSample',
    'Blip',
    'SweepState',
    'BlipView',
    'RadarFrame',
    'BlipRing',
    'SweepModel',
]
