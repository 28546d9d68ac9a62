from __future__ import annotations
from typing import Optional, Protocol, List
import pygame

from shakescroll.scheduler import TimerScheduler
from shakescroll.settings import AppCfg


class Scene(Protocol):
    """Lightweight scene protocol with no inheritance burden."""
    # Lifecycle
    def on_enter(self, prev: Optional["Scene"]) -> None: ...
    def on_exit(self,  nxt: Optional["Scene"]) -> None: ...

    # Loop
    def update(self, dt: float) -> None: ...
    def draw(self, surface: pygame.Surface) -> None: ...
    def handle_event(self, e: pygame.event.Event) -> bool: ...


class SceneManager:
    """
    Scene stack plus the shared services scenes need:
      - cfg: the loaded AppCfg (scenes read their motion settings here)
      - screen: the display surface
      - window_position(): where the OS window sits on the desktop
      - scheduler: periodic timers; scenes add theirs in on_enter and
        cancel them in on_exit
    Only the top scene gets events and updates; the whole stack is drawn.
    """
    def __init__(self, screen: pygame.Surface, scheduler: TimerScheduler, window=None,
                 cfg: Optional[AppCfg] = None) -> None:
        self._stack: List[Scene] = []
        self.cfg = cfg if cfg is not None else AppCfg()
        self.screen = screen
        self.scheduler = scheduler
        self.window = window            # pygame Window for the display, if any
        self.request_quit = False

    def window_position(self) -> tuple[int, int]:
        if self.window is None:
            return (0, 0)
        x, y = self.window.position
        return int(x), int(y)

    # ----- stack ops --------------------------------------------------------
    def push(self, scene: Scene) -> None:
        prev = self.active()
        self._stack.append(scene)
        scene.on_enter(prev)

    def pop(self) -> Optional[Scene]:
        if not self._stack:
            return None
        top = self._stack.pop()
        top.on_exit(self.active())
        return top

    def clear(self) -> None:
        while self._stack:
            self.pop()

    # ----- loop -------------------------------------------------------------
    def active(self) -> Optional[Scene]:
        return self._stack[-1] if self._stack else None

    def handle_event(self, e: pygame.event.Event) -> bool:
        top = self.active()
        return bool(top and top.handle_event(e))

    def update(self, dt: float) -> None:
        top = self.active()
        if top:
            top.update(dt)

    def draw(self) -> None:
        for s in self._stack:
            s.draw(self.screen)
