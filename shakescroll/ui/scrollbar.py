from __future__ import annotations

import pygame
from shakescroll.ui.style import ScrollbarStyle
from shakescroll.ui.scroll_model import ScrollModel

class Scrollbar:
    """
    Stateless drawer for a passive vertical scrollbar (position indicator only,
    the user never drags it).
    """
    @staticmethod
    def thumb_rect(viewport: pygame.Rect, scroll: ScrollModel, sb: ScrollbarStyle) -> pygame.Rect | None:
        track_h = viewport.h - 2 * sb.margin
        if track_h <= 0 or sb.width <= 0:
            return None
        track_x = viewport.right - sb.margin - sb.width
        track_y = viewport.y + sb.margin

        if scroll.content_h > scroll.viewport_h:
            frac = max(0.0, min(1.0, scroll.viewport_h / max(1, scroll.content_h)))
            thumb_h = max(sb.min_thumb_size, int(track_h * frac))
            free = max(0, track_h - thumb_h)
            return pygame.Rect(track_x, track_y + int(free * scroll.ratio()), sb.width, thumb_h)
        return pygame.Rect(track_x, track_y, sb.width, track_h)

    @staticmethod
    def draw(surface: pygame.Surface, viewport: pygame.Rect, scroll: ScrollModel, sb: ScrollbarStyle) -> None:
        overflow = scroll.content_h > scroll.viewport_h
        if not overflow and not sb.show_when_no_overflow:
            return
        thumb = Scrollbar.thumb_rect(viewport, scroll, sb)
        if thumb is None:
            return

        track = pygame.Rect(thumb.x, viewport.y + sb.margin, sb.width, viewport.h - 2 * sb.margin)
        layer = pygame.Surface(viewport.size, pygame.SRCALPHA)
        off = (-viewport.x, -viewport.y)
        pygame.draw.rect(layer, sb.track_color, track.move(*off), border_radius=sb.radius)
        pygame.draw.rect(layer, sb.thumb_color, thumb.move(*off), border_radius=sb.radius)
        surface.blit(layer, viewport.topleft)
