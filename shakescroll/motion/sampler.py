from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import logging
import time

from shakescroll.motion.vector import Vector

logger = logging.getLogger(__name__)

PositionSource = Callable[[], Tuple[float, float]]
Clock = Callable[[], float]


@dataclass(frozen=True)
class PositionSample:
    position: Vector
    time: float                 # seconds, same clock as the sampler


class PositionSampler:
    """
    Polls the window position and turns consecutive samples into velocity.

    The sampler keeps exactly one previous sample (rolling state). The first
    tick after construction or reset() is a warm-up tick: it only records.
    """

    def __init__(self, position_source: PositionSource, clock: Clock = time.monotonic):
        self.position_source = position_source
        self.clock = clock
        self._previous: Optional[PositionSample] = None

    # --- public API ---------------------------------------------------------
    def sample(self, current_position: Optional[Tuple[float, float]] = None) -> PositionSample:
        pos = self.position_source() if current_position is None else current_position
        return PositionSample(Vector.of(pos), self.clock())

    def velocity(self, previous: PositionSample,
                 current_position: Optional[Tuple[float, float]] = None) -> Optional[Vector]:
        """
        Finite-difference velocity in px/s since `previous`.
        Returns None when no positive time has elapsed (clock anomaly or two
        ticks on the same timestamp); dividing would poison the state with
        inf/NaN.
        """
        current = self.sample(current_position)
        return self._between(previous, current)

    def tick(self) -> Optional[Vector]:
        """One sampler step: velocity against the previous sample, then roll."""
        current = self.sample()
        previous, self._previous = self._previous, current
        if previous is None:
            return None  # warm-up
        return self._between(previous, current)

    def reset(self) -> None:
        self._previous = None

    @property
    def warmed_up(self) -> bool:
        return self._previous is not None

    # --- helpers ------------------------------------------------------------
    @staticmethod
    def _between(previous: PositionSample, current: PositionSample) -> Optional[Vector]:
        dt = current.time - previous.time
        if not dt > 0:
            logger.debug("Skipping velocity: non-positive dt=%r", dt)
            return None
        return (current.position - previous.position) / dt
