from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from scrollthumb.anim import SpringConfig
from scrollthumb.ui.style import ScrollbarStyle

DEFAULT_PATH = "demo/config/defaults.yaml"

@dataclass
class WindowCfg:
    width: int = 960
    height: int = 640
    title: str = "scrollthumb"
    bg_rgb: tuple[int, int, int] = (14, 15, 18)

@dataclass
class InputCfg:
    scroll_wheel_pixels: int = 40

@dataclass
class ScrollbarCfg:
    min_scroll_size: int = 20               # thumb never gets shorter than this
    smooth_scrolling: bool = False          # spring the drawn thumb toward the exact one
    spring: SpringConfig = field(default_factory=SpringConfig)
    style: ScrollbarStyle = field(default_factory=ScrollbarStyle)

@dataclass
class ContentCfg:
    width: int = 3200
    height: int = 4800
    cell: int = 80

@dataclass
class AppCfg:
    fps: int = 60
    log_level: str = "INFO"
    window: WindowCfg = field(default_factory=WindowCfg)
    input: InputCfg = field(default_factory=InputCfg)
    scrollbar: ScrollbarCfg = field(default_factory=ScrollbarCfg)
    content: ContentCfg = field(default_factory=ContentCfg)


def _get(d: dict, path: str, default: Any):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur

def _bool(v: Any) -> bool:
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off", ""):
            return False
        raise ValueError(f"not a boolean: {v!r}")
    return bool(v)

def _color(v: Any) -> tuple[int, ...]:
    c = tuple(int(x) for x in v)
    if len(c) not in (3, 4):
        raise ValueError(f"colour needs 3 or 4 components, got {v!r}")
    return c


def load_settings(path: str = DEFAULT_PATH) -> AppCfg:
    data = {}
    p = Path(path)
    if p.exists():
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    return settings_from_dict(data)

def settings_from_dict(data: dict) -> AppCfg:
    d = AppCfg()
    sb, st, sp = d.scrollbar, d.scrollbar.style, d.scrollbar.spring

    style = ScrollbarStyle(
        thickness=int(_get(data, "scrollbar.style.thickness", st.thickness)),
        margin=int(_get(data, "scrollbar.style.margin", st.margin)),
        radius=int(_get(data, "scrollbar.style.radius", st.radius)),
        track_color=_color(_get(data, "scrollbar.style.track_color", st.track_color)),
        track_active_color=_color(_get(data, "scrollbar.style.track_active_color", st.track_active_color)),
        thumb_color=_color(_get(data, "scrollbar.style.thumb_color", st.thumb_color)),
        thumb_active_color=_color(_get(data, "scrollbar.style.thumb_active_color", st.thumb_active_color)),
        show_when_no_overflow=_bool(_get(data, "scrollbar.style.show_when_no_overflow", st.show_when_no_overflow)),
    )

    return AppCfg(
        fps=int(_get(data, "fps", d.fps)),
        log_level=str(_get(data, "log_level", d.log_level)).upper(),
        window=WindowCfg(
            width=int(_get(data, "window.width", d.window.width)),
            height=int(_get(data, "window.height", d.window.height)),
            title=str(_get(data, "window.title", d.window.title)),
            bg_rgb=_color(_get(data, "window.bg_rgb", d.window.bg_rgb)),
        ),
        input=InputCfg(
            scroll_wheel_pixels=int(_get(data, "input.scroll_wheel_pixels", d.input.scroll_wheel_pixels)),
        ),
        scrollbar=ScrollbarCfg(
            min_scroll_size=int(_get(data, "scrollbar.min_scroll_size", sb.min_scroll_size)),
            smooth_scrolling=_bool(_get(data, "scrollbar.smooth_scrolling", sb.smooth_scrolling)),
            spring=SpringConfig(
                stiffness=float(_get(data, "scrollbar.spring.stiffness", sp.stiffness)),
                damping=float(_get(data, "scrollbar.spring.damping", sp.damping)),
                precision=float(_get(data, "scrollbar.spring.precision", sp.precision)),
            ),
            style=style,
        ),
        content=ContentCfg(
            width=int(_get(data, "content.width", d.content.width)),
            height=int(_get(data, "content.height", d.content.height)),
            cell=int(_get(data, "content.cell", d.content.cell)),
        ),
    )
