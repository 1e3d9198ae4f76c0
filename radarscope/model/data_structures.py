"""
Data structures for the radar model

- DistanceSample: one parsed reading
- Blip: one reading placed at the sweep angle it arrived at
- SweepState: the virtual beam
- BlipView / RadarFrame: what the renderer draws each frame
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..utils.constants import NO_ECHO_CM, SWEEP_MIN_DEG


@dataclass(frozen=True)
class DistanceSample:
    """Parsed distance reading in cm (-1 means no echo)"""
    distance_cm: int

    @property
    def has_echo(self) -> bool:
        return self.distance_cm != NO_ECHO_CM


@dataclass(frozen=True)
class Blip:
    """
    A reading placed on the radar

    Attributes:
        angle_deg: Sweep angle when the reading was accepted (0-180)
        distance_cm: Reading in cm
        created_at: Time the reading was accepted (seconds)
    """
    angle_deg: float
    distance_cm: float
    created_at: float

    def age(self, now: float) -> float:
        return now - self.created_at


@dataclass
class SweepState:
    """Virtual beam angle and travel direction (+1 or -1)"""
    angle_deg: float = SWEEP_MIN_DEG
    direction: int = 1


@dataclass(frozen=True)
class BlipView:
    """Blip mapped to screen space"""
    screen_pos: Tuple[float, float]
    distance_cm: float
    alpha: int


@dataclass
class RadarFrame:
    """Everything the renderer needs for one frame"""
    connection_label: str
    sweep_angle: float
    latest_distance_cm: int
    active_blips: List[BlipView] = field(default_factory=list)
