from __future__ import annotations
from dataclasses import dataclass
from collections import OrderedDict
from typing import Optional, Tuple
import pygame

@dataclass(frozen=True)
class FontKey:
    path: Optional[str]
    size: int
    bold: bool = False

class FontCache:
    """
    Small LRU of pygame fonts. Widgets ask for (path, size[, bold]) every
    frame; building a pygame.font.Font is the expensive part.
    """

    def __init__(self, max_entries: int = 16) -> None:
        self._fonts: "OrderedDict[FontKey, pygame.font.Font]" = OrderedDict()
        self._max = max(1, int(max_entries))

    def get(self, path: Optional[str], size: int, *, bold: bool = False) -> pygame.font.Font:
        k = FontKey(path, int(size), bool(bold))
        f = self._fonts.get(k)
        if f is not None:
            self._fonts.move_to_end(k)
            return f

        if not pygame.font.get_init():
            pygame.font.init()
        f = pygame.font.Font(k.path, k.size)
        f.set_bold(k.bold)
        self._fonts[k] = f
        while len(self._fonts) > self._max:
            self._fonts.popitem(last=False)
        return f

    def measure(self, path: Optional[str], size: int, text: str) -> Tuple[int, int]:
        return self.get(path, size).size(text or "")
