from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

# --- Project / assets root ----------------------------------------------------

def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]  # shakescroll/ -> [project root]

_ASSETS_ROOT = _project_root() / "terms" / "assets"


def asset_path(*parts: str) -> str:
    """
    Build an absolute path into terms/assets. Example:
        asset_path("lorem-ipsum.txt")
    """
    return str(_ASSETS_ROOT.joinpath(*parts))


# --- Text cache + loading -----------------------------------------------------

_text_cache: Dict[str, str] = {}


def load_text(relpath: str) -> str:
    """
    Load and cache a UTF-8 text asset by relative path.
    A missing asset is fatal for the caller: the error is logged and re-raised.
    """
    cached = _text_cache.get(relpath)
    if cached is not None:
        return cached

    abs_path = asset_path(*Path(relpath).parts)
    try:
        with open(abs_path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        logger.error("Could not read text asset '%s': %s", abs_path, e)
        raise

    _text_cache[relpath] = text
    return text