from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict
from shakescroll.ui.style import Theme

try:
    import yaml
except Exception:
    yaml = None

DEFAULTS_PATH = str(Path(__file__).resolve().parents[1] / "terms" / "config" / "defaults.yaml")

@dataclass
class WindowCfg:
    width: int = 600
    height: int = 400
    title: str = "Terms of Use"
    resizable: bool = False

@dataclass
class MotionCfg:
    period_ms: int = 10             # both periodic tasks
    combined_tick: bool = False     # one timer doing sample + integrate

@dataclass
class AppCfg:
    fps: int = 100
    window: WindowCfg = field(default_factory=WindowCfg)
    motion: MotionCfg = field(default_factory=MotionCfg)


def _get(d: dict, path: str, default: Any):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur

def _read_yaml(path: str) -> Dict[str, Any]:
    p = Path(path)
    if yaml is None or not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def load_settings(path: str = DEFAULTS_PATH) -> AppCfg:
    data = _read_yaml(path)

    return AppCfg(
        fps=int(_get(data, "fps", 100)),
        window=WindowCfg(
            width=int(_get(data, "window.width", 600)),
            height=int(_get(data, "window.height", 400)),
            title=str(_get(data, "window.title", "Terms of Use")),
            resizable=bool(_get(data, "window.resizable", False)),
        ),
        motion=MotionCfg(
            period_ms=int(_get(data, "motion.period_ms", 10)),
            combined_tick=bool(_get(data, "motion.combined_tick", False)),
        ),
    )

def load_ui_defaults(path: str = DEFAULTS_PATH) -> Dict[str, Any]:
    """ Load UI defaults (theme/widgets) from YAML; empty when unavailable. """
    return _read_yaml(path)

def _color(v, n: int, name: str) -> tuple:
    if not isinstance(v, (list, tuple)) or len(v) != n:
        raise ValueError(f"{name}: expected {n} colour components, got {v!r}")
    return tuple(int(c) for c in v)

def build_theme_from_defaults(defaults: Dict[str, Any]) -> Theme:
    tdata = defaults.get("theme", {}) or {}
    th = Theme()

    # core
    th.font_path     = tdata.get("font_path", th.font_path)
    th.font_size     = int(tdata.get("font_size", th.font_size))
    th.headline_size = int(tdata.get("headline_size", th.headline_size))
    th.text_rgb      = _color(tdata.get("text_rgb", th.text_rgb), 3, "theme.text_rgb")
    th.bg_rgb        = _color(tdata.get("bg_rgb", th.bg_rgb), 3, "theme.bg_rgb")
    th.margin        = tuple(int(m) for m in tdata.get("margin", th.margin))
    th.spacing       = int(tdata.get("spacing", th.spacing))
    th.line_spacing  = int(tdata.get("line_spacing", th.line_spacing))

    # scrollbar
    sc = tdata.get("scrollbar", {}) or {}
    th.scrollbar.width          = int(sc.get("width", th.scrollbar.width))
    th.scrollbar.margin         = int(sc.get("margin", th.scrollbar.margin))
    th.scrollbar.radius         = int(sc.get("radius", th.scrollbar.radius))
    th.scrollbar.min_thumb_size = int(sc.get("min_thumb_size", th.scrollbar.min_thumb_size))
    th.scrollbar.show_when_no_overflow = bool(sc.get("show_when_no_overflow", th.scrollbar.show_when_no_overflow))
    th.scrollbar.track_color    = _color(sc.get("track_color", th.scrollbar.track_color), 4, "scrollbar.track_color")
    th.scrollbar.thumb_color    = _color(sc.get("thumb_color", th.scrollbar.thumb_color), 4, "scrollbar.thumb_color")

    # button
    b = th.button
    bt = tdata.get("button", {}) or {}
    b.h                 = int(bt.get("h", b.h))
    b.pad_x             = int(bt.get("pad_x", b.pad_x))
    b.radius            = int(bt.get("radius", b.radius))
    b.text_size         = int(bt.get("text_size", b.text_size))
    b.text_rgb          = _color(bt.get("text_rgb", b.text_rgb), 3, "button.text_rgb")
    b.disabled_text_rgb = _color(bt.get("disabled_text_rgb", b.disabled_text_rgb), 3, "button.disabled_text_rgb")
    b.fill_rgba         = _color(bt.get("fill_rgba", b.fill_rgba), 4, "button.fill_rgba")
    b.hover_rgba        = _color(bt.get("hover_rgba", b.hover_rgba), 4, "button.hover_rgba")
    b.down_rgba         = _color(bt.get("down_rgba", b.down_rgba), 4, "button.down_rgba")
    b.disabled_rgba     = _color(bt.get("disabled_rgba", b.disabled_rgba), 4, "button.disabled_rgba")
    b.border_rgba       = _color(bt.get("border_rgba", b.border_rgba), 4, "button.border_rgba")
    b.border_px         = int(bt.get("border_px", b.border_px))

    # checkbox
    c = th.checkbox
    cb = tdata.get("checkbox", {}) or {}
    c.box_px     = int(cb.get("box_px", c.box_px))
    c.gap        = int(cb.get("gap", c.gap))
    c.radius     = int(cb.get("radius", c.radius))
    c.text_size  = int(cb.get("text_size", c.text_size))
    c.text_rgb   = _color(cb.get("text_rgb", c.text_rgb), 3, "checkbox.text_rgb")
    c.border_rgb = _color(cb.get("border_rgb", c.border_rgb), 3, "checkbox.border_rgb")
    c.fill_rgb   = _color(cb.get("fill_rgb", c.fill_rgb), 3, "checkbox.fill_rgb")
    c.check_rgb  = _color(cb.get("check_rgb", c.check_rgb), 3, "checkbox.check_rgb")

    # dialog
    d = th.dialog
    dg = tdata.get("dialog", {}) or {}
    d.width         = int(dg.get("width", d.width))
    d.radius        = int(dg.get("radius", d.radius))
    d.bg_rgba       = _color(dg.get("bg_rgba", d.bg_rgba), 4, "dialog.bg_rgba")
    d.border_rgb    = _color(dg.get("border_rgb", d.border_rgb), 3, "dialog.border_rgb")
    d.shadow        = bool(dg.get("shadow", d.shadow))
    d.title_h       = int(dg.get("title_h", d.title_h))
    d.title_bg_rgba = _color(dg.get("title_bg_rgba", d.title_bg_rgba), 4, "dialog.title_bg_rgba")
    d.pad           = int(dg.get("pad", d.pad))
    d.backdrop_rgba = _color(dg.get("backdrop_rgba", d.backdrop_rgba), 4, "dialog.backdrop_rgba")

    return th
