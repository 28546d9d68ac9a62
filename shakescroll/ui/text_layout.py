from __future__ import annotations
from typing import Callable, List

Measure = Callable[[str], int]


def wrap_words(text: str, wrap_w: int, measure: Measure) -> List[str]:
    """
    Soft-wrap on spaces, with a hard-wrap fallback for words wider than
    `wrap_w`. Explicit newlines are kept; blank lines survive as "".
    `measure` returns the rendered width of a string in pixels.
    """
    if not text:
        return []
    if wrap_w <= 0:
        return text.splitlines()

    out: List[str] = []
    for raw in text.splitlines():
        cur = ""
        for w in raw.split(" "):
            cand = w if not cur else f"{cur} {w}"
            if measure(cand) <= wrap_w:
                cur = cand
                continue
            if cur:
                out.append(cur)
            if measure(w) <= wrap_w:
                cur = w
            else:
                chunks = hard_wrap(w, wrap_w, measure)
                out.extend(chunks[:-1])
                cur = chunks[-1] if chunks else ""
        out.append(cur)
    return out


def hard_wrap(word: str, wrap_w: int, measure: Measure) -> List[str]:
    """Split one long word into chunks that each fit (at least one char per chunk)."""
    chunks: List[str] = []
    cur = ""
    for ch in word:
        if cur and measure(cur + ch) > wrap_w:
            chunks.append(cur)
            cur = ch
        else:
            cur += ch
    if cur:
        chunks.append(cur)
    return chunks
