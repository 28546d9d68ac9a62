from __future__ import annotations
from dataclasses import dataclass, replace
import logging
import math

logger = logging.getLogger(__name__)


@dataclass
class MotionState:
    acceleration: float = 0.0
    speed: float = 0.0
    ratio: float = 0.0          # fractional scroll position, 0 = top, 1 = bottom

    def reset(self) -> None:
        self.acceleration = 0.0
        self.speed = 0.0
        self.ratio = 0.0


@dataclass(frozen=True)
class Integrator:
    lower: float = 0.0
    upper: float = 1.0

    def integrate(self, state: MotionState, dt: float) -> MotionState:
        """
        Semi-implicit Euler step. The ratio moves with the speed from the
        previous step, then the speed picks up the acceleration. Leaving
        [lower, upper] pins the ratio to the bound and stops it dead.
        """
        if not dt > 0:
            logger.debug("Skipping integration: non-positive dt=%r", dt)
            return replace(state)

        ratio = state.ratio + state.speed * dt
        speed = state.speed + state.acceleration * dt

        if ratio < self.lower or math.isnan(ratio):
            ratio, speed = self.lower, 0.0
        if ratio > self.upper:
            ratio, speed = self.upper, 0.0

        return MotionState(acceleration=state.acceleration, speed=speed, ratio=ratio)
