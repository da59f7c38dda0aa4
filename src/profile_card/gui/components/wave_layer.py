"""底部半屏的波浪背景。"""

from __future__ import annotations

from nicegui import ui

from profile_card.decor.rain import rain_color
from profile_card.decor.wave import wave_path

_VIEW_W = 1000
_VIEW_H = 400


def wave_svg(dark: bool, phase: float = 0.0) -> str:
    d = wave_path(_VIEW_W, _VIEW_H, amplitude=30, points=4, base=20, phase=phase)
    return (
        f'<svg viewBox="0 0 {_VIEW_W} {_VIEW_H}" preserveAspectRatio="none" '
        f'style="display: flex; width: 100%; height: 100%;">'
        f'<path d="{d}" fill="{rain_color(dark)}"></path>'
        f'</svg>'
    )


def render_wave(dark: bool) -> ui.element:
    return ui.html(wave_svg(dark)).style(
        "position: fixed; left: 0; right: 0; bottom: 0; height: 50vh; "
        "pointer-events: none; z-index: 0;"
    )
