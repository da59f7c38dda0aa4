"""底部波浪背景的 SVG 路径生成。"""

from __future__ import annotations

import math


def wave_path(
    width: float,
    height: float,
    amplitude: float = 30,
    points: int = 4,
    base: float = 20,
    phase: float = 0.0,
) -> str:
    """生成一条闭合波浪带的 SVG path。

    points 段曲线横跨 width，波峰高度在 [base, base + 2 * amplitude] 之间，
    下方填充到 height。
    """
    if points < 1:
        raise ValueError(f"points 至少为 1: {points}")
    nodes = []
    for i in range(points + 1):
        x = width * i / points
        y = base + amplitude * (1 + math.sin(phase + i * math.pi / 2))
        nodes.append((x, y))

    x0, y0 = nodes[0]
    parts = [f"M {x0:.2f} {y0:.2f}"]
    for (px, py), (cx, cy) in zip(nodes, nodes[1:]):
        mid = (px + cx) / 2
        parts.append(f"C {mid:.2f} {py:.2f} {mid:.2f} {cy:.2f} {cx:.2f} {cy:.2f}")
    parts.append(f"L {width:.2f} {height:.2f}")
    parts.append(f"L 0.00 {height:.2f}")
    parts.append("Z")
    return " ".join(parts)
