"""聊天气泡组件。"""

from __future__ import annotations

from nicegui import ui

from profile_card.gui.theme import palette
from profile_card.models import ChatMessage


def bubble_style(msg: ChatMessage, dark: bool) -> str:
    p = palette(dark)
    if msg.is_user:
        return f"background: {p.user_bubble}; color: {p.user_text};"
    return f"background: {p.bot_bubble}; color: {p.bot_text}; border: 1px solid {p.bot_border};"


def render_message(msg: ChatMessage, dark: bool) -> ui.element:
    """渲染一条消息：用户靠右，机器人靠左。"""
    justify = "justify-end" if msg.is_user else "justify-start"
    cls = "chat-bubble-user" if msg.is_user else "chat-bubble-bot"
    with ui.row().classes(f"w-full {justify}") as row:
        ui.label(msg.text).classes(f"chat-bubble {cls}").style(bubble_style(msg, dark))
    return row
