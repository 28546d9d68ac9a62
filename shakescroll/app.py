from __future__ import annotations

import logging
import pygame
from typing import Callable

from shakescroll.settings import AppCfg
from shakescroll.scene import Scene, SceneManager
from shakescroll.scheduler import TimerScheduler

logger = logging.getLogger(__name__)


def display_window():
    """The SDL window behind pygame.display, or None if this pygame can't expose it."""
    try:
        from pygame._sdl2.video import Window
        return Window.from_display_module()
    except Exception as e:
        logger.warning("Window position unavailable, shaking will not scroll: %s", e)
        return None


class ShakeApp:
    """
    App shell: opens the window, owns the frame loop and the timer scheduler,
    and delegates input/update/draw to the active scene via SceneManager.

    Timer events are dispatched before anything else sees them, so periodic
    tasks keep their cadence while dialogs are open.
    """

    def __init__(self, cfg: AppCfg, first_scene: Callable[[SceneManager], Scene]):
        self.cfg = cfg
        pygame.init()
        pygame.display.set_caption(cfg.window.title)

        # Window/display
        flags = pygame.DOUBLEBUF
        if cfg.window.resizable:
            flags |= pygame.RESIZABLE
        self.screen = pygame.display.set_mode(
            (int(cfg.window.width), int(cfg.window.height)),
            flags=flags,
        )

        # Core loop
        self.clock = pygame.time.Clock()
        self.running = True
        self.scheduler = TimerScheduler()

        self.scenes = SceneManager(self.screen, self.scheduler, display_window(), cfg=cfg)
        self.scenes.push(first_scene(self.scenes))
        logger.info("Started '%s' at %dx%d, %d fps", cfg.window.title,
                    cfg.window.width, cfg.window.height, cfg.fps)

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        try:
            while self.running and not self.scenes.request_quit:
                dt = self.clock.tick(self.cfg.fps) / 1000.0

                # ---- event pump -------------------------------------------------
                for e in pygame.event.get():
                    if e.type == pygame.QUIT:
                        self.running = False
                        break

                    if self.scheduler.dispatch(e):
                        continue

                    if e.type == pygame.VIDEORESIZE:
                        self.screen = pygame.display.get_surface()
                        self.scenes.screen = self.screen

                    if self.scenes.handle_event(e):
                        continue

                    # Global hotkeys
                    if e.type == pygame.KEYDOWN and e.key == pygame.K_q and (pygame.key.get_mods() & pygame.KMOD_CTRL):
                        self.running = False

                # ---- update/draw -----------------------------------------------
                self.scenes.update(dt)
                self.scenes.draw()
                pygame.display.flip()
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        self.scenes.clear()
        self.scheduler.cancel_all()
        pygame.quit()
        logger.info("Shut down")
