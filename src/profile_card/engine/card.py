"""名片卡片状态 — 主题开关与拖拽偏移累加。"""

from __future__ import annotations

from profile_card.models import CardOffset


class ThemeFlag:
    """深色/浅色主题开关，不持久化，默认浅色。"""

    def __init__(self, dark: bool = False):
        self._dark = bool(dark)

    @property
    def dark(self) -> bool:
        return self._dark

    def toggle(self) -> bool:
        self._dark = not self._dark
        return self._dark


class PositionAccumulator:
    """累加拖拽增量得到卡片的绝对偏移。

    不做边界限制，卡片可以被拖出屏幕。
    """

    def __init__(self):
        self._offset = CardOffset()

    @property
    def offset(self) -> CardOffset:
        return self._offset

    def apply_delta(self, dx: float, dy: float) -> CardOffset:
        self._offset = self._offset.translate(float(dx), float(dy))
        return self._offset
