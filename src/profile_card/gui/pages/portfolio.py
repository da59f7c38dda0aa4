"""名片首页 — 可拖拽卡片、about / contact 弹窗、雨滴与波浪背景。"""

from __future__ import annotations

import asyncio
import logging

from nicegui import ui

from profile_card.config import Settings
from profile_card.controller import PortfolioSession
from profile_card.decor.rain import generate_raindrops
from profile_card.gui.components.draggable_card import DraggableCard
from profile_card.gui.components.message_bubble import render_message
from profile_card.gui.components.rain_layer import render_rain
from profile_card.gui.components.typing_indicator import TypingIndicator
from profile_card.gui.components.wave_layer import render_wave
from profile_card.gui.theme import palette
from profile_card.models import ActiveModal

logger = logging.getLogger(__name__)

LINKEDIN_URL = "https://www.linkedin.com/in/yinbochen/"
GITHUB_URL = "https://github.com/citiniS"
INSPIRED_BY_URL = "https://www.sharyap.com/"

NAV_BUTTONS = [
    ("about", "info", ActiveModal.ABOUT),
    ("contact", "mail", ActiveModal.CONTACT),
]

ABOUT_HTML = (
    '<div style="display: flex; flex-direction: column; gap: 16px; line-height: 1.625;">'
    "<p>Hi, I am Yin Bo Chen.<br/>I'm a<strong> Chinese Malaysian</strong> born in the US.</p>"
    "<p>Currently Studying for: <strong>Bachelor of Science in Computer Science "
    "at Champlain College</strong></p>"
    "<p>I have am fluent in <strong>English</strong>, and can speak decently in "
    "<strong>Mandarin Chinese/中文</strong>.<br/>I can also speak "
    "<strong>Cantonese Chinese</strong> at a very low level.</p>"
    "</div>"
)

# 轮询间隔（秒）：延迟回复在后台任务中写入状态，由 UI 定时读取并重绘
_POLL_INTERVAL = 0.2
# 断线后等待重连的时间（秒），与 NiceGUI 默认 reconnect_timeout 一致
RECONNECT_GRACE = 3.0


async def close_when_gone(client, session: PortfolioSession, grace: float = RECONNECT_GRACE) -> bool:
    """socket 断开后等待 grace 秒，浏览器仍未重连才关闭会话。

    短暂断网时 NiceGUI 会在同一个 client 上重连，此时保留对话。
    返回是否真正关闭了会话。
    """
    await asyncio.sleep(grace)
    if client.has_socket_connection:
        logger.debug("会话 %s 已重连，保留状态", session.session_id)
        return False
    await session.aclose()
    logger.info("会话已关闭: %s", session.session_id)
    return True


def create_portfolio_page(settings: Settings):
    """创建名片首页，每个浏览器连接一个独立会话。"""
    session = PortfolioSession(
        typing_delay=settings.typing_delay,
        reply_delay=settings.reply_delay,
    )
    drops = list(generate_raindrops(settings.rain_count))
    card = DraggableCard(on_drag_end=session.drag)
    card.install()
    typing_indicator = TypingIndicator()
    chat_input: ui.input | None = None
    send_button: ui.button | None = None
    scroll_area: ui.scroll_area | None = None
    rendered_revision = -1

    # ── 事件处理 ──
    def _toggle_theme():
        session.toggle_theme()
        scene.refresh()
        modal_body.refresh()

    def _open(target: ActiveModal):
        session.open_modal(target)
        modal_body.refresh()
        dialog.open()

    def _on_dialog_hide():
        if session.close_modal():
            modal_body.refresh()

    def _on_input_change(e):
        session.update_draft(e.value)
        if send_button:
            send_button.set_enabled(session.chat.can_send)

    def _handle_send():
        msg = session.send(chat_input.value if chat_input else None)
        if msg is None:
            return
        if chat_input:
            chat_input.value = ""
        _sync_chat()

    def _sync_chat():
        nonlocal rendered_revision
        revision = session.chat.revision
        if revision == rendered_revision:
            return
        rendered_revision = revision
        chat_messages.refresh()
        if scroll_area:
            scroll_area.scroll_to(percent=1.0)

    async def _poll_chat():
        if session.active_modal is ActiveModal.CONTACT:
            _sync_chat()

    # ── 背景与卡片 ──
    @ui.refreshable
    def scene():
        dark = session.dark
        p = palette(dark)
        ui.query("body").style(f"background: {p.page_bg}; margin: 0; overflow: hidden;")

        ui.button(
            icon="light_mode" if dark else "dark_mode",
            on_click=_toggle_theme,
        ).props("round unelevated").style(
            f"position: fixed; top: 24px; left: 24px; z-index: 50; "
            f"background: {p.accent} !important; color: {p.accent_text} !important;"
        ).tooltip("Switch to light mode" if dark else "Switch to dark mode")

        render_rain(drops, dark)

        with ui.element("div").style(
            "min-height: 100vh; width: 100%; display: flex; align-items: center; "
            "justify-content: center; position: relative;"
        ):
            with card.create(session.offset, style=f"background: {p.card_bg};"):
                _card_content(dark)

        render_wave(dark)

    def _card_content(dark: bool):
        p = palette(dark)
        # 浏览器风格标题栏，同时是拖拽把手
        ui.element("div").classes("drag-handle").props("data-drag-handle").style(
            f"background: {p.header_bg}; height: 56px; width: 100%;"
        )

        with ui.column().classes("items-center").style(
            f"padding: 64px 48px; text-align: center; color: {p.text}; gap: 0;"
        ):
            gradient = (
                "linear-gradient(to right, #fb923c, #eab308)" if dark
                else "linear-gradient(to right, #60a5fa, #06b6d4)"
            )
            ui.html(
                f'<h1 style="font-size: 4.5rem; font-weight: 700; margin: 0 0 16px;">'
                f'hello, <span style="background: {gradient}; -webkit-background-clip: text; '
                f'background-clip: text; color: transparent;">and welcome</span></h1>'
            )
            ui.label("3rd year CS student and caffeine + game addict").style(
                f"font-size: 1.25rem; margin-bottom: 48px; color: {p.text_muted};"
            )

            with ui.row().classes("justify-center").style("gap: 32px; margin-bottom: 48px;"):
                for label, icon, target in NAV_BUTTONS:
                    with ui.column().classes("items-center nav-button").style("gap: 8px;").on(
                        "click", lambda t=target: _open(t)
                    ).tooltip(f"View {label}"):
                        with ui.element("div").style(
                            f"width: 64px; height: 64px; border-radius: 16px; display: flex; "
                            f"align-items: center; justify-content: center; background: {p.nav_tile};"
                        ):
                            ui.icon(icon, size="32px").style(f"color: {p.nav_icon};")
                        ui.label(label).style(
                            f"font-size: 0.875rem; font-weight: 500; color: {p.text_muted};"
                        )

        with ui.column().classes("items-center").style(
            f"padding: 24px 48px; border-top: 1px solid {p.footer_border}; "
            f"background: {p.footer_bg}; width: 100%; gap: 16px;"
        ):
            with ui.row().style("gap: 24px;"):
                for url, icon, tip in (
                    (LINKEDIN_URL, "work", "LinkedIn Profile"),
                    (GITHUB_URL, "code", "GitHub Profile"),
                ):
                    with ui.link(target=url, new_tab=True).style(
                        f"width: 48px; height: 48px; border-radius: 9999px; display: flex; "
                        f"align-items: center; justify-content: center; background: {p.nav_tile};"
                    ).tooltip(tip):
                        ui.icon(icon, size="24px").style(f"color: {p.nav_icon};")
            ui.html(
                f'<span style="font-size: 0.875rem; color: {p.text_muted};">'
                f"why are you here? theres nothing. Design inspired by "
                f'<a href="{INSPIRED_BY_URL}">sharyap.com/</a></span>'
            )

    # ── 弹窗 ──
    @ui.refreshable
    def modal_body():
        nonlocal chat_input, send_button, scroll_area
        active = session.active_modal
        if active is ActiveModal.NONE:
            chat_input = send_button = scroll_area = None
            return
        dark = session.dark
        p = palette(dark)
        with ui.card().classes("animate-popIn").style(
            f"max-width: 42rem; width: 100%; border-radius: 16px; padding: 32px; "
            f"background: {p.card_bg}; color: {p.text};"
        ):
            with ui.row().classes("w-full items-center justify-between").style("margin-bottom: 24px;"):
                ui.label(active.value.capitalize()).style("font-size: 1.875rem; font-weight: 700;")
                ui.button("×", on_click=dialog.close).props("flat round").style(
                    f"font-size: 1.5rem; color: {p.text};"
                )

            if active is ActiveModal.ABOUT:
                chat_input = send_button = scroll_area = None
                ui.html(ABOUT_HTML).style(f"color: {p.text_muted};")
                return

            with ui.column().classes("w-full").style("height: 24rem; gap: 0;"):
                with ui.scroll_area().classes("w-full").style("flex: 1;") as scroll_area:
                    chat_messages()

                with ui.row().classes("w-full no-wrap items-center").style(
                    f"padding-top: 16px; border-top: 1px solid {p.input_border}; gap: 8px;"
                ):
                    chat_input = ui.input(
                        placeholder="Type a message...",
                        value=session.chat.draft,
                        on_change=_on_input_change,
                    ).props("rounded outlined dense").classes("flex-1").style(
                        f"background: {p.input_bg}; border-radius: 9999px;"
                    )
                    chat_input.on("keydown.enter", _handle_send)
                    send_button = ui.button(icon="send", on_click=_handle_send).props(
                        "round unelevated"
                    ).style(f"background: {p.input_border} !important; color: {p.text} !important;")
                    send_button.set_enabled(session.chat.can_send)

    @ui.refreshable
    def chat_messages():
        dark = session.dark
        with ui.column().classes("w-full").style("padding: 16px 0; gap: 12px;") as column:
            for msg in session.chat.messages:
                render_message(msg, dark)
        typing_indicator.create(column, dark)
        typing_indicator.sync(session.chat.typing)

    with ui.dialog().on("hide", _on_dialog_hide) as dialog:
        modal_body()

    scene()
    ui.timer(_POLL_INTERVAL, _poll_chat)

    client = ui.context.client

    async def _on_disconnect():
        await close_when_gone(client, session)

    client.on_disconnect(_on_disconnect)
    logger.info("新会话已创建: %s", session.session_id)
