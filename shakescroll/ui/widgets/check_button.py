from __future__ import annotations
from typing import Callable, Optional, Tuple
import pygame

from shakescroll.ui.style import CheckboxStyle
from shakescroll.ui.fonts import FontCache


class CheckButton:
    """Square check box with a label; clicking either toggles it."""

    def __init__(self, label: str, style: CheckboxStyle, fonts: FontCache, *,
                 font_path: Optional[str] = None,
                 on_toggled: Optional[Callable[[bool], None]] = None):
        self.label = label
        self.style = style
        self.fonts = fonts
        self.font_path = font_path
        self.on_toggled = on_toggled
        self.active = False
        self.rect = pygame.Rect(0, 0, 0, 0)

    def set_active(self, active: bool) -> None:
        active = bool(active)
        if active == self.active:
            return
        self.active = active
        if self.on_toggled:
            self.on_toggled(active)

    def preferred_size(self) -> Tuple[int, int]:
        st = self.style
        tw, th = self.fonts.measure(self.font_path, st.text_size, self.label)
        return st.box_px + st.gap + tw, max(st.box_px, th)

    def handle_event(self, e: pygame.event.Event, pos: Optional[Tuple[int, int]] = None) -> bool:
        if pos is None:
            pos = getattr(e, "pos", None)
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and pos is not None:
            if self.rect.collidepoint(pos):
                self.set_active(not self.active)
                return True
        return False

    def draw(self, surface: pygame.Surface, dy: int = 0) -> None:
        st = self.style
        rect = self.rect.move(0, dy)
        box = pygame.Rect(rect.x, rect.y + (rect.h - st.box_px) // 2, st.box_px, st.box_px)
        pygame.draw.rect(surface, st.fill_rgb, box, border_radius=st.radius)
        pygame.draw.rect(surface, st.border_rgb, box, width=1, border_radius=st.radius)
        if self.active:
            p = max(3, st.box_px // 4)
            pts = [(box.x + p, box.centery),
                   (box.centerx - 1, box.bottom - p),
                   (box.right - p, box.y + p)]
            pygame.draw.lines(surface, st.check_rgb, False, pts, 2)

        srf = self.fonts.get(self.font_path, st.text_size).render(self.label, True, st.text_rgb)
        surface.blit(srf, (box.right + st.gap, rect.y + (rect.h - srf.get_height()) // 2))
