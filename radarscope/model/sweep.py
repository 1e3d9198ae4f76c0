"""
Sweep & blip model

The beam sweeps 0 -> 180 -> 0 degrees at a constant speed. Each reading with
an echo becomes a blip at the beam's angle when it arrived; blips expire after
a fixed lifetime.
"""

import logging
from typing import List, Optional

import numpy as np

from .data_structures import Blip, BlipView, DistanceSample, RadarFrame, SweepState
from .ring_buffer import BlipRing
from ..utils.config import RadarConfig
from ..utils.constants import NO_ECHO_CM, SWEEP_MAX_DEG, SWEEP_MIN_DEG
from ..visualization.transforms import blip_alphas, blip_positions

logger = logging.getLogger(__name__)


class SweepModel:
    """
    Virtual sweep angle plus the live blips

    All state is owned and mutated by the main loop.
    """

    def __init__(self, config: Optional[RadarConfig] = None):
        """
        Initialize sweep model

        Args:
            config: Session configuration (default RadarConfig())
        """
        self.config = config or RadarConfig()
        self.speed = self.config.sweep_speed
        self.lifetime = self.config.blip_lifetime

        self.sweep = SweepState()
        self.blips = BlipRing(self.config.blip_capacity)
        self.latest_distance_cm = NO_ECHO_CM
        self.samples_accepted = 0

    @property
    def angle(self) -> float:
        return self.sweep.angle_deg

    @property
    def direction(self) -> int:
        return self.sweep.direction

    def advance(self, elapsed: float):
        """
        Move the beam by speed * elapsed, bouncing off 0 and 180 degrees

        The angle is clamped at the boundary it reaches; the direction flips there.

        Args:
            elapsed: Seconds since the previous frame
        """
        angle = self.sweep.angle_deg + self.sweep.direction * self.speed * elapsed

        if angle >= SWEEP_MAX_DEG:
            angle = SWEEP_MAX_DEG
            self.sweep.direction = -1
        if angle <= SWEEP_MIN_DEG:
            angle = SWEEP_MIN_DEG
            self.sweep.direction = 1

        self.sweep.angle_deg = angle

    def accept(self, sample: DistanceSample, now: float) -> Optional[Blip]:
        """
        Record a reading

        Every reading updates the latest distance; only readings with an echo
        create a blip.

        Args:
            sample: Parsed reading
            now: Current time (seconds)

        Returns:
            The new blip, or None for a no-echo reading
        """
        self.latest_distance_cm = sample.distance_cm
        self.samples_accepted += 1

        if not sample.has_echo:
            return None

        blip = Blip(angle_deg=self.sweep.angle_deg,
                    distance_cm=float(sample.distance_cm),
                    created_at=now)
        self.blips.append(blip)
        return blip

    def purge(self, now: float) -> int:
        """Drop blips at or past their lifetime"""
        removed = self.blips.purge(now, self.lifetime)
        if removed:
            logger.debug("Expired %d blips", removed)
        return removed

    def tick(self, elapsed: float, now: float):
        """
        Per-frame update: advance the beam, then expire old blips

        Args:
            elapsed: Seconds since the previous frame
            now: Current time (seconds)
        """
        self.advance(elapsed)
        self.purge(now)

    def active_blips(self, now: float) -> List[Blip]:
        """Blips younger than the lifetime at time `now`"""
        return [blip for blip in self.blips if blip.age(now) < self.lifetime]

    def frame(self, now: float, connection_label: str = "") -> RadarFrame:
        """
        Snapshot of the model in screen space

        Args:
            now: Current time (seconds)
            connection_label: Port name shown in the status line

        Returns:
            RadarFrame for the renderer
        """
        blips = self.active_blips(now)
        views = []

        if blips:
            angles = np.array([blip.angle_deg for blip in blips])
            distances = np.array([blip.distance_cm for blip in blips])
            ages = np.array([blip.age(now) for blip in blips])

            positions = blip_positions(angles, distances,
                                       self.config.max_range_cm,
                                       self.config.radar_radius,
                                       self.config.pivot)
            alphas = blip_alphas(ages, self.lifetime)

            for blip, pos, alpha in zip(blips, positions, alphas):
                views.append(BlipView(screen_pos=(float(pos[0]), float(pos[1])),
                                      distance_cm=blip.distance_cm,
                                      alpha=int(alpha)))

        return RadarFrame(connection_label=connection_label,
                          sweep_angle=self.sweep.angle_deg,
                          latest_distance_cm=self.latest_distance_cm,
                          active_blips=views)
