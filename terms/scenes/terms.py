# terms/scenes/terms.py
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import logging
import pygame

from shakescroll.scene import Scene, SceneManager
from shakescroll.settings import MotionCfg, load_ui_defaults, build_theme_from_defaults
from shakescroll.resources import load_text

# Core UI
from shakescroll.ui.fonts import FontCache
from shakescroll.ui.style import Theme
from shakescroll.ui.scroll_model import ScrollModel
from shakescroll.ui.scrollbar import Scrollbar
from shakescroll.ui.text_view import TextView
from shakescroll.ui.widgets.button import Button
from shakescroll.ui.widgets.check_button import CheckButton
from shakescroll.ui.widgets.dialog import DialogStack, MessageDialog

# Motion
from shakescroll.motion.shaker import ShakeScroller

logger = logging.getLogger(__name__)

HEADLINE = "Terms of Use"
ACCEPT_LABEL = "I have read and accept the Terms of Use"
INSTRUCTION_TEXT = ("Shake the window to scroll down. If you agree to the Terms, "
                    "check the checkbox and press Continue.")
AGREED_TEXT = "Now you can use our application!"


class TermsScene(Scene):
    """
    Terms of Use page that can only be scrolled by shaking the window.
    - Headline + lorem ipsum body, then the accept checkbox and Continue button
      at the very bottom of the scrolled column
    - Continue stays insensitive until the checkbox is ticked
    - How-to instructions pop up on entry and whenever the text is clicked
    - Two periodic timers drive ShakeScroller (sample + integrate)
    """

    def __init__(self, mgr: SceneManager, *, motion: Optional[MotionCfg] = None,
                 defaults: Optional[Dict[str, Any]] = None):
        self.mgr = mgr
        self.motion = motion or mgr.cfg.motion

        # ---- theme, fonts ------------------------------------------------
        self.defaults = load_ui_defaults() if defaults is None else defaults
        self.theme: Theme = build_theme_from_defaults(self.defaults)
        self.fonts = FontCache()

        # ---- widgets -----------------------------------------------------
        th = self.theme
        self.text = TextView(th, self.fonts, on_focus=self.show_instructions)
        self.text.set_text(HEADLINE, "\n" + load_text("lorem-ipsum.txt"))
        self.accept = CheckButton(ACCEPT_LABEL, th.checkbox, self.fonts,
                                  font_path=th.font_path, on_toggled=self._on_accept_toggled)
        self.continue_btn = Button("Continue", th.button, self.fonts, font_path=th.font_path,
                                   on_clicked=self._on_continue, sensitive=False)
        self.dialogs = DialogStack(th)

        # ---- scrolling ---------------------------------------------------
        self.scroll = ScrollModel()
        self.shaker = ShakeScroller(mgr.window_position, self.scroll)
        self._timers: List[int] = []
        self._laid_out_for: Optional[Tuple[int, int]] = None

    # --- lifecycle ---
    def on_enter(self, prev: Optional[Scene]) -> None:
        self.layout(self.mgr.screen.get_size())
        self.show_instructions()
        self.shaker.reset()
        period = self.motion.period_ms
        sched = self.mgr.scheduler
        if self.motion.combined_tick:
            self._timers = [sched.add(period, self.shaker.tick)]
        else:
            self._timers = [
                sched.add(period, self.shaker.sample_tick),
                sched.add(period, self.shaker.integrate_tick),
            ]

    def on_exit(self, nxt: Optional[Scene]) -> None:
        for t in self._timers:
            self.mgr.scheduler.cancel(t)
        self._timers.clear()

    # --- actions ---
    def show_instructions(self) -> None:
        self._show(MessageDialog("Instruction", INSTRUCTION_TEXT, self.theme, self.fonts))

    def _on_accept_toggled(self, active: bool) -> None:
        self.continue_btn.set_sensitive(active)

    def _on_continue(self) -> None:
        logger.info("Terms accepted")
        self._show(MessageDialog("Terms agreed", AGREED_TEXT, self.theme, self.fonts))

    def _show(self, dialog: MessageDialog) -> None:
        self.dialogs.show(dialog, self.mgr.screen.get_size())

    # --- layout ---
    def layout(self, size: Tuple[int, int]) -> None:
        """Stack text view and confirmation row inside the margins."""
        if size == self._laid_out_for:
            return
        self._laid_out_for = size
        sw, sh = size
        t, r, b, l = self.theme.margin
        w = max(1, sw - l - r)

        y = t + self.text.layout(l, t, w) + self.theme.spacing
        cw, ch = self.accept.preferred_size()
        bw, bh = self.continue_btn.preferred_size()
        row_h = max(ch, bh)
        self.accept.rect = pygame.Rect(l, y + (row_h - ch) // 2, cw, ch)
        self.continue_btn.rect = pygame.Rect(l + w - bw, y + (row_h - bh) // 2, bw, bh)

        self.scroll.content_h = y + row_h + b
        self.scroll.viewport_h = sh
        self.scroll.clamp()

    def content_pos(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        """Map a window position into content coordinates."""
        return pos[0], pos[1] + int(round(self.scroll.offset))

    # --- loop ---
    def handle_event(self, e: pygame.event.Event) -> bool:
        if self.dialogs.handle_event(e):
            return True
        if not hasattr(e, "pos"):
            return False
        pos = self.content_pos(e.pos)
        for w in (self.accept, self.continue_btn, self.text):
            if w.handle_event(e, pos):
                return True
        return False

    def update(self, dt: float) -> None:
        self.layout(self.mgr.screen.get_size())

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(self.theme.bg_rgb)
        viewport = surface.get_rect()
        dy = -int(round(self.scroll.offset))

        surface.set_clip(viewport)
        self.text.draw(surface, dy)
        self.accept.draw(surface, dy)
        self.continue_btn.draw(surface, dy)
        surface.set_clip(None)

        Scrollbar.draw(surface, viewport, self.scroll, self.theme.scrollbar)
        self.dialogs.draw(surface)
