"""三点跳动的 "正在输入" 指示器。"""

from __future__ import annotations

from nicegui import ui

from profile_card.gui.theme import palette


class TypingIndicator:
    """机器人一侧的气泡，里面三个依次跳动的圆点。"""

    def __init__(self):
        self._container: ui.element | None = None
        self._visible = False

    def create(self, parent: ui.element, dark: bool) -> ui.element:
        """在 parent 中创建指示器（默认隐藏）。"""
        p = palette(dark)
        with parent:
            with ui.row().classes("w-full justify-start") as self._container:
                with ui.row().classes("gap-1 chat-bubble chat-bubble-bot").style(
                    f"background: {p.bot_bubble}; border: 1px solid {p.bot_border}; "
                    f"padding: 12px 16px;"
                ):
                    for _ in range(3):
                        ui.element("div").classes("dot-bounce").style(
                            f"width: 8px; height: 8px; border-radius: 9999px; "
                            f"background: {p.typing_dot};"
                        )
        self._container.set_visibility(self._visible)
        return self._container

    def show(self):
        self._visible = True
        if self._container:
            self._container.set_visibility(True)

    def hide(self):
        self._visible = False
        if self._container:
            self._container.set_visibility(False)

    def sync(self, typing: bool):
        if typing:
            self.show()
        else:
            self.hide()

    @property
    def visible(self) -> bool:
        return self._visible
