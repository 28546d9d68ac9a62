from __future__ import annotations
from typing import Callable, Optional, Tuple
import pygame

from shakescroll.ui.style import ButtonStyle
from shakescroll.ui.fonts import FontCache


class Button:
    """
    Push button with a centered label. Insensitive buttons draw greyed out
    and ignore clicks. A click is press + release inside the rect.
    """

    def __init__(self, label: str, style: ButtonStyle, fonts: FontCache, *,
                 font_path: Optional[str] = None,
                 on_clicked: Optional[Callable[[], None]] = None,
                 sensitive: bool = True):
        self.label = label
        self.style = style
        self.fonts = fonts
        self.font_path = font_path
        self.on_clicked = on_clicked
        self.sensitive = sensitive
        self.rect = pygame.Rect(0, 0, 0, style.h)

        self._hover = False
        self._down = False

    # ---------- public ----------
    def set_sensitive(self, sensitive: bool) -> None:
        self.sensitive = bool(sensitive)
        if not self.sensitive:
            self._down = False

    def preferred_size(self) -> Tuple[int, int]:
        w, _ = self.fonts.measure(self.font_path, self.style.text_size, self.label)
        return w + 2 * self.style.pad_x, self.style.h

    def handle_event(self, e: pygame.event.Event, pos: Optional[Tuple[int, int]] = None) -> bool:
        if pos is None:
            pos = getattr(e, "pos", None)
        if pos is None:
            return False
        inside = self.rect.collidepoint(pos)

        if e.type == pygame.MOUSEMOTION:
            self._hover = inside
            return False
        if not self.sensitive:
            return inside and e.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP)

        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and inside:
            self._down = True
            return True
        if e.type == pygame.MOUSEBUTTONUP and e.button == 1 and self._down:
            self._down = False
            if inside:
                if self.on_clicked:
                    self.on_clicked()
                return True
        return False

    def draw(self, surface: pygame.Surface, dy: int = 0) -> None:
        st = self.style
        rect = self.rect.move(0, dy)
        if not self.sensitive:
            fill, text_rgb = st.disabled_rgba, st.disabled_text_rgb
        elif self._down:
            fill, text_rgb = st.down_rgba, st.text_rgb
        elif self._hover:
            fill, text_rgb = st.hover_rgba, st.text_rgb
        else:
            fill, text_rgb = st.fill_rgba, st.text_rgb

        ov = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(ov, fill, ov.get_rect(), border_radius=st.radius)
        if st.border_px >= 1 and st.border_rgba[3] > 0:
            pygame.draw.rect(ov, st.border_rgba, ov.get_rect(), width=st.border_px, border_radius=st.radius)
        surface.blit(ov, rect.topleft)

        if self.label:
            srf = self.fonts.get(self.font_path, st.text_size).render(self.label, True, text_rgb)
            surface.blit(srf, srf.get_rect(center=rect.center))
