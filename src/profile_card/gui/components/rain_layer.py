"""雨滴背景层。"""

from __future__ import annotations

from typing import Iterable

from nicegui import ui

from profile_card.decor.rain import Raindrop, rain_color


def rain_html(drops: Iterable[Raindrop], dark: bool) -> str:
    color = rain_color(dark)
    rows = []
    for d in drops:
        rows.append(
            f'<div style="position: absolute; width: 4px; height: 48px; '
            f'left: {d.left:.2f}%; top: -48px; '
            f'background: linear-gradient(to bottom, {color}80, transparent); '
            f'animation: fall {d.duration:.2f}s linear {d.delay:.2f}s infinite;"></div>'
        )
    return "".join(rows)


def render_rain(drops: Iterable[Raindrop], dark: bool) -> ui.element:
    return ui.html(rain_html(drops, dark)).style(
        "position: fixed; inset: 0; pointer-events: none; z-index: 5; overflow: hidden;"
    )
