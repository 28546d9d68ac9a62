from __future__ import annotations
from typing import List, Optional, Tuple
import logging
import pygame

from shakescroll.ui.style import Theme
from shakescroll.ui.fonts import FontCache
from shakescroll.ui.text_layout import wrap_words
from shakescroll.ui.widgets.button import Button

logger = logging.getLogger(__name__)


class MessageDialog:
    """
    Modal info box: title bar, wrapped message, single OK button.
    Closes on OK, Enter or Escape.
    Centered on the surface it is laid out for.
    """
    def __init__(self, title: str, message: str, theme: Theme, fonts: FontCache):
        self.title = title
        self.message = message
        self.theme = theme
        self.fonts = fonts
        self.visible = True
        self.rect = pygame.Rect(0, 0, 0, 0)

        self.ok = Button("OK", theme.button, fonts, font_path=theme.font_path, on_clicked=self.close)
        self._lines: List[pygame.Surface] = []
        self._laid_out_for: Tuple[int, int] = (0, 0)

    # ----- lifecycle -----
    def close(self) -> None:
        if not self.visible:
            return
        self.visible = False
        logger.info("Dialog '%s' closed", self.title)

    def layout(self, screen_size: Tuple[int, int]) -> None:
        if screen_size == self._laid_out_for:
            return
        self._laid_out_for = screen_size
        th, st = self.theme, self.theme.dialog
        sw, sh = screen_size

        w = min(st.width, max(1, sw - 2 * st.pad))
        inner_w = w - 2 * st.pad
        font = self.fonts.get(th.font_path, th.font_size)
        self._lines = [font.render(ln, True, th.text_rgb)
                       for ln in wrap_words(self.message, inner_w, lambda s: font.size(s)[0])]
        text_h = sum(s.get_height() + th.line_spacing for s in self._lines)

        bw, bh = self.ok.preferred_size()
        h = st.title_h + st.pad + text_h + st.pad + bh + st.pad
        self.rect = pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)
        self.ok.rect = pygame.Rect(self.rect.right - st.pad - bw, self.rect.bottom - st.pad - bh, bw, bh)

    # ----- input -----
    def handle_event(self, e: pygame.event.Event) -> bool:
        if not self.visible:
            return False
        if e.type == pygame.KEYDOWN and e.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
            self.close()
            return True
        if self.ok.handle_event(e):
            return True
        # modal: swallow all other pointer / key input
        return e.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION,
                          pygame.MOUSEWHEEL, pygame.KEYDOWN, pygame.KEYUP)

    # ----- draw -----
    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        self.layout(surface.get_size())
        th, st = self.theme, self.theme.dialog
        r = self.rect

        if st.shadow:
            sh = pygame.Surface((r.w + st.shadow_pad * 2, r.h + st.shadow_pad * 2), pygame.SRCALPHA)
            pygame.draw.rect(sh, (0, 0, 0, st.shadow_alpha), sh.get_rect(), border_radius=st.radius + 2)
            surface.blit(sh, (r.x - st.shadow_pad, r.y - st.shadow_pad))

        pygame.draw.rect(surface, st.bg_rgba, r, border_radius=st.radius)
        trect = pygame.Rect(r.x, r.y, r.w, st.title_h)
        pygame.draw.rect(surface, st.title_bg_rgba, trect, border_radius=st.radius,
                         border_bottom_left_radius=0, border_bottom_right_radius=0)
        pygame.draw.rect(surface, st.border_rgb, r, width=st.border_px, border_radius=st.radius)

        title = self.fonts.get(th.font_path, th.font_size, bold=True).render(self.title, True, st.title_rgb)
        surface.blit(title, (trect.x + st.title_pad_x, trect.y + (trect.h - title.get_height()) // 2))

        y = trect.bottom + st.pad
        for srf in self._lines:
            surface.blit(srf, (r.x + st.pad, y))
            y += srf.get_height() + th.line_spacing

        self.ok.draw(surface)


class DialogStack:
    """
    Open dialogs, top-most last. While any is visible the stack owns input
    and dims everything behind it.
    """
    def __init__(self, theme: Theme):
        self.theme = theme
        self._dialogs: List[MessageDialog] = []
        self._dim_surface: Optional[pygame.Surface] = None

    def show(self, dialog: MessageDialog, screen_size: Optional[Tuple[int, int]] = None) -> MessageDialog:
        if screen_size is not None:
            dialog.layout(screen_size)
        self._dialogs.append(dialog)
        logger.info("Dialog '%s' opened", dialog.title)
        return dialog

    def any_open(self) -> bool:
        self._dialogs = [d for d in self._dialogs if d.visible]
        return bool(self._dialogs)

    def top(self) -> Optional[MessageDialog]:
        return self._dialogs[-1] if self.any_open() else None

    def handle_event(self, e: pygame.event.Event) -> bool:
        top = self.top()
        return bool(top and top.handle_event(e))

    def draw(self, surface: pygame.Surface) -> None:
        if not self.any_open():
            return
        size = surface.get_size()
        if self._dim_surface is None or self._dim_surface.get_size() != size:
            self._dim_surface = pygame.Surface(size, pygame.SRCALPHA)
        self._dim_surface.fill(self.theme.dialog.backdrop_rgba)
        surface.blit(self._dim_surface, (0, 0))
        for d in self._dialogs:
            d.draw(surface)
