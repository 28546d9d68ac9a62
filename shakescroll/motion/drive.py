from __future__ import annotations
from dataclasses import dataclass

from shakescroll.motion.vector import Vector


@dataclass(frozen=True)
class DriveModel:
    """
    Leaky-integrator forcing law:

        acceleration = gain * |velocity| - spring_constant * ratio

    Shaking in any direction pushes the ratio up; the spring term pulls it
    back to 0 once the window is still.
    """
    gain: float = 1e-3              # lambda, (1/s) per px/s of window speed
    spring_constant: float = 1.0    # k, restoring force per unit ratio

    def drive(self, velocity: Vector, ratio: float) -> float:
        return self.gain * velocity.magnitude() - self.spring_constant * ratio
