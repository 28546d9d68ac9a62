from __future__ import annotations
from typing import Optional, Protocol
import logging
import time

from shakescroll.motion.drive import DriveModel
from shakescroll.motion.integrator import Integrator, MotionState
from shakescroll.motion.projector import ScrollProjector, ScrollRange
from shakescroll.motion.sampler import Clock, PositionSampler, PositionSource

logger = logging.getLogger(__name__)


class ScrollTarget(Protocol):
    def scroll_range(self) -> ScrollRange: ...
    def set_scroll_position(self, value: float) -> None: ...


class ShakeScroller:
    """
    Owns the shared MotionState and exposes the two periodic task bodies:

      - sample_tick():    window position -> velocity -> state.acceleration
      - integrate_tick(): state -> Integrator -> ScrollProjector -> target

    Both are meant to run on one thread under a cooperative scheduler (each
    body runs to completion, in any interleaving). tick() runs both in a
    single task for schedulers that only want one timer.
    """

    def __init__(
        self,
        position_source: PositionSource,
        target: ScrollTarget,
        *,
        clock: Clock = time.monotonic,
        drive: Optional[DriveModel] = None,
        integrator: Optional[Integrator] = None,
        projector: Optional[ScrollProjector] = None,
    ):
        self.target = target
        self.clock = clock
        self.sampler = PositionSampler(position_source, clock)
        self.drive = drive or DriveModel()
        self.integrator = integrator or Integrator()
        self.projector = projector or ScrollProjector()

        self.state = MotionState()
        self._last_time = clock()

    # --- periodic tasks -----------------------------------------------------
    def sample_tick(self) -> bool:
        v = self.sampler.tick()
        if v is not None:
            self.state.acceleration = self.drive.drive(v, self.state.ratio)
        return True

    def integrate_tick(self) -> bool:
        now = self.clock()
        dt = now - self._last_time
        self._last_time = now

        self.state = self.integrator.integrate(self.state, dt)
        self.target.set_scroll_position(self.position())
        return True

    def tick(self) -> bool:
        self.sample_tick()
        return self.integrate_tick()

    # --- helpers ------------------------------------------------------------
    def position(self) -> float:
        """Absolute scroll position for the current ratio."""
        return self.projector.project(self.state.ratio, self.target.scroll_range())

    def reset(self) -> None:
        self.state.reset()
        self.sampler.reset()
        self._last_time = self.clock()
        logger.debug("Motion state reset")
