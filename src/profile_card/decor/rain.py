"""雨滴装饰生成器 — 纯随机，不依赖任何交互状态。"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Protocol

RAIN_COLOR_DARK = "#da931e"
RAIN_COLOR_LIGHT = "#e1c8a3"


class _RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class Raindrop:
    id: int
    left: float  # 横向位置，百分比 [0, 100)
    delay: float  # 动画延迟（秒）[0, 2)
    duration: float  # 下落时长（秒）[1, 2)


def generate_raindrops(count: int = 50, rng: _RandomSource | None = None) -> Iterator[Raindrop]:
    """惰性生成 count 个雨滴，每次挂载重新生成一次。"""
    if count < 0:
        raise ValueError(f"雨滴数量不能为负数: {count}")
    source = rng if rng is not None else random
    for i in range(count):
        yield Raindrop(
            id=i,
            left=source.random() * 100,
            delay=source.random() * 2,
            duration=1 + source.random(),
        )


def rain_color(dark: bool) -> str:
    return RAIN_COLOR_DARK if dark else RAIN_COLOR_LIGHT
