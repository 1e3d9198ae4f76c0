"""
Bounded blip storage

A fixed-capacity ring: appending to a full ring evicts the oldest blip.
Age-based expiry is separate and done with purge().
"""

from collections import deque
from typing import Iterator

from .data_structures import Blip
from ..utils.constants import BLIP_CAPACITY


class BlipRing:
    """Insertion-ordered blip collection with evict-oldest overflow"""

    def __init__(self, capacity: int = BLIP_CAPACITY):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.evicted = 0
        self._blips = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._blips)

    def __iter__(self) -> Iterator[Blip]:
        return iter(self._blips)

    def append(self, blip: Blip):
        """Add a blip, evicting the oldest one if the ring is full"""
        if len(self._blips) == self.capacity:
            self.evicted += 1
        self._blips.append(blip)

    def purge(self, now: float, lifetime: float) -> int:
        """
        Drop blips whose age has reached the lifetime

        Args:
            now: Current time (seconds)
            lifetime: Maximum age (seconds)

        Returns:
            Number of blips removed
        """
        before = len(self._blips)
        kept = [blip for blip in self._blips if blip.age(now) < lifetime]
        self._blips.clear()
        self._blips.extend(kept)
        return before - len(kept)
