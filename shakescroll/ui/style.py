from dataclasses import dataclass, field

@dataclass
class ScrollbarStyle:
    width: int = 6
    margin: int = 2
    radius: int = 3
    min_thumb_size: int = 24
    show_when_no_overflow: bool = False
    track_color: tuple[int, int, int, int] = (0, 0, 0, 24)
    thumb_color: tuple[int, int, int, int] = (0, 0, 0, 120)

@dataclass
class ButtonStyle:
    h: int = 34
    pad_x: int = 14
    radius: int = 6
    text_size: int = 16
    text_rgb: tuple[int, int, int] = (30, 30, 34)
    disabled_text_rgb: tuple[int, int, int] = (150, 150, 156)
    fill_rgba: tuple[int, int, int, int] = (232, 232, 236, 255)
    hover_rgba: tuple[int, int, int, int] = (220, 222, 230, 255)
    down_rgba: tuple[int, int, int, int] = (200, 202, 212, 255)
    disabled_rgba: tuple[int, int, int, int] = (240, 240, 242, 255)
    border_rgba: tuple[int, int, int, int] = (0, 0, 0, 70)
    border_px: int = 1

@dataclass
class CheckboxStyle:
    box_px: int = 16
    gap: int = 8
    radius: int = 3
    text_size: int = 16
    text_rgb: tuple[int, int, int] = (30, 30, 34)
    border_rgb: tuple[int, int, int] = (110, 110, 118)
    fill_rgb: tuple[int, int, int] = (255, 255, 255)
    check_rgb: tuple[int, int, int] = (40, 110, 220)

@dataclass
class DialogStyle:
    width: int = 380
    radius: int = 10
    bg_rgba: tuple[int, int, int, int] = (250, 250, 252, 255)
    border_rgb: tuple[int, int, int] = (120, 120, 128)
    border_px: int = 1
    shadow: bool = True
    shadow_alpha: int = 90
    shadow_pad: int = 6
    title_h: int = 30
    title_bg_rgba: tuple[int, int, int, int] = (228, 230, 236, 255)
    title_rgb: tuple[int, int, int] = (30, 30, 34)
    title_pad_x: int = 12
    pad: int = 14
    backdrop_rgba: tuple[int, int, int, int] = (0, 0, 0, 90)

@dataclass
class Theme:
    font_path: str | None = None
    font_size: int = 16
    headline_size: int = 32     # "size-points 24" at 96 dpi, in pixels
    text_rgb: tuple[int, int, int] = (30, 30, 34)
    bg_rgb: tuple[int, int, int] = (246, 245, 244)
    margin: tuple[int, int, int, int] = (10, 10, 0, 10)    # t, r, b, l
    spacing: int = 10           # gap between stacked children
    line_spacing: int = 2
    scrollbar: ScrollbarStyle = field(default_factory=ScrollbarStyle)
    button: ButtonStyle = field(default_factory=ButtonStyle)
    checkbox: CheckboxStyle = field(default_factory=CheckboxStyle)
    dialog: DialogStyle = field(default_factory=DialogStyle)
