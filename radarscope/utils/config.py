"""
Runtime configuration for radarscope
"""

from dataclasses import dataclass
from typing import Tuple

from . import constants as C


@dataclass
class RadarConfig:
    """
    Configuration for a radar session.

    Attributes
    ----------
    signature : str
        Substring the sketch prints once after a DTR reset
    baud_rate : int
        Serial baud rate (8N1 framing is fixed)
    handshake_timeout : float
        Seconds to wait for the signature on each candidate port
    dtr_settle : float
        Seconds to hold each DTR transition
    sweep_speed : float
        Virtual beam speed in degrees per second
    blip_lifetime : float
        Seconds a blip stays on screen
    blip_capacity : int
        Maximum number of live blips (oldest evicted first)
    max_range_cm : int
        Distance mapped to the outer ring of the display
    window_width, window_height : int
        Window size in pixels
    fps : int
        Target frame rate
    """
    signature: str = C.SIGNATURE
    baud_rate: int = C.BAUD_RATE
    handshake_timeout: float = C.HANDSHAKE_TIMEOUT_SECS
    dtr_settle: float = C.DTR_SETTLE_SECS
    sweep_speed: float = C.SWEEP_SPEED_DEG_PER_SEC
    blip_lifetime: float = C.BLIP_LIFETIME_SECS
    blip_capacity: int = C.BLIP_CAPACITY
    max_range_cm: int = C.MAX_RANGE_CM
    window_width: int = C.WINDOW_WIDTH
    window_height: int = C.WINDOW_HEIGHT
    fps: int = C.TARGET_FPS

    # Colors (RGBA)
    background: Tuple[int, int, int] = (0, 0, 0)
    grid_color: Tuple[int, int, int, int] = (0, 255, 0, 120)
    grid_dim_color: Tuple[int, int, int, int] = (0, 255, 0, 40)
    beam_color: Tuple[int, int, int, int] = (0, 255, 0, 200)
    blip_color: Tuple[int, int, int] = (255, 50, 50)

    @property
    def pivot(self) -> Tuple[float, float]:
        """Screen position of the sweep pivot (bottom center)"""
        return (self.window_width / 2.0, self.window_height - 60.0)

    @property
    def radar_radius(self) -> float:
        """Radius of the outermost range arc in pixels"""
        return min(self.window_width / 2.0 - 40.0, self.window_height - 120.0)
