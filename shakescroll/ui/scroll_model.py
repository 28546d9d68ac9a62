from dataclasses import dataclass

from shakescroll.motion.projector import ScrollRange

@dataclass
class ScrollModel:
    """
    Vertical scroll state of a content column (pixels). Implements the
    ScrollTarget side of ShakeScroller: the motion core reads scroll_range()
    and writes set_scroll_position() once per integration tick.
    """
    content_h: int = 0
    viewport_h: int = 0
    offset: float = 0.0

    def max(self) -> float: return max(0.0, float(self.content_h - self.viewport_h))
    def clamp(self): self.offset = max(0.0, min(self.max(), self.offset))
    def ratio(self) -> float: return self.offset / self.max() if self.max() > 0 else 0.0

    # --- ScrollTarget -------------------------------------------------------
    def scroll_range(self) -> ScrollRange:
        return ScrollRange(lower=0.0, upper=float(self.content_h), page_size=float(self.viewport_h))

    def set_scroll_position(self, value: float) -> None:
        # Content shorter than the viewport projects below 0; pin it.
        self.offset = float(value)
        self.clamp()
