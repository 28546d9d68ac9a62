from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ScrollRange:
    lower: float = 0.0
    upper: float = 0.0
    page_size: float = 0.0

    @property
    def span(self) -> float:
        # Negative when the page is larger than the content; not guarded.
        return self.upper - self.page_size - self.lower


class ScrollProjector:
    """Stateless map from the unit ratio into [lower, upper - page_size]."""

    @staticmethod
    def project(ratio: float, scroll_range: ScrollRange) -> float:
        return scroll_range.lower + scroll_range.span * ratio
