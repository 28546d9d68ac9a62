from __future__ import annotations

from typing import Callable, List, Optional, Tuple
import pygame

from shakescroll.ui.style import Theme
from shakescroll.ui.fonts import FontCache
from shakescroll.ui.text_layout import wrap_words


class TextView:
    """
    Read-only text block: an optional headline in a larger font followed by
    word-wrapped body text. Positioned in content coordinates (the owner
    scrolls it by passing a vertical offset to draw()).

    Not editable. Clicking it counts as focusing it; `on_focus` fires then.
    """
    def __init__(self, theme: Theme, fonts: FontCache, *,
                 on_focus: Optional[Callable[[], None]] = None):
        self.theme = theme
        self.fonts = fonts
        self.on_focus = on_focus
        self.rect = pygame.Rect(0, 0, 0, 0)

        self.headline = ""
        self.body = ""
        self._lines: List[Tuple[pygame.Surface, int]] = []     # (surface, y relative to rect)
        self._wrap_w = -1

    # --------- public ---------
    def set_text(self, headline: str, body: str) -> None:
        self.headline = headline or ""
        self.body = body or ""
        self._wrap_w = -1

    def layout(self, x: int, y: int, width: int) -> int:
        """Wrap to `width` at (x, y); returns the resulting height."""
        self.rect.topleft = (x, y)
        if width != self._wrap_w:
            self._build(width)
        self.rect.size = (max(0, width), self._height())
        return self.rect.h

    def handle_event(self, e: pygame.event.Event, pos: Optional[Tuple[int, int]] = None) -> bool:
        """`pos` is the event position already mapped into content coordinates."""
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and pos is not None:
            if self.rect.collidepoint(pos):
                if self.on_focus:
                    self.on_focus()
                return True
        return False

    def draw(self, surface: pygame.Surface, dy: int = 0) -> None:
        clip = surface.get_clip()
        for srf, ly in self._lines:
            y = self.rect.y + ly + dy
            if y + srf.get_height() < clip.top or y > clip.bottom:
                continue
            surface.blit(srf, (self.rect.x, y))

    # --------- internals ---------
    def _build(self, width: int) -> None:
        th = self.theme
        self._lines.clear()
        self._wrap_w = width
        y = 0

        head = self.fonts.get(th.font_path, th.headline_size)
        body = self.fonts.get(th.font_path, th.font_size)
        for font, text in ((head, self.headline), (body, self.body)):
            for line in wrap_words(text, width, lambda s: font.size(s)[0]):
                srf = font.render(line, True, th.text_rgb)
                self._lines.append((srf, y))
                y += srf.get_height() + th.line_spacing

    def _height(self) -> int:
        if not self._lines:
            return 0
        srf, y = self._lines[-1]
        return y + srf.get_height()
