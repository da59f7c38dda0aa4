"""深色/浅色主题色板与全局 CSS。"""

from __future__ import annotations

from dataclasses import dataclass

from profile_card.decor.rain import RAIN_COLOR_DARK, RAIN_COLOR_LIGHT

# 字体
FONT_SANS = "'Roboto Variable', 'Roboto', sans-serif"
FONT_MONO = "'Roboto Mono Variable', 'Roboto Mono', monospace"


@dataclass(frozen=True)
class Palette:
    page_bg: str
    accent: str  # 主题按钮、雨滴、波浪
    accent_text: str
    card_bg: str
    header_bg: str
    text: str
    text_muted: str
    nav_tile: str
    nav_icon: str
    footer_bg: str
    footer_border: str
    user_bubble: str
    user_text: str
    bot_bubble: str
    bot_text: str
    bot_border: str
    typing_dot: str
    input_bg: str
    input_border: str
    close_hover: str


DARK = Palette(
    page_bg="#755334",
    accent=RAIN_COLOR_DARK,
    accent_text="#111827",
    card_bg="#1d1d1d",
    header_bg="#1d1d1d",
    text="#ffffff",
    text_muted="#f3f4f6",
    nav_tile="#d0d0d0",
    nav_icon="#1d1d1d",
    footer_bg="#1d1d1d",
    footer_border="#d0d0d0",
    user_bubble="#d0d0d0",
    user_text="#1d1d1d",
    bot_bubble="#1d1d1d",
    bot_text="#ffffff",
    bot_border="#1d1d1d",
    typing_dot="#d0d0d0",
    input_bg="#1d1d1d",
    input_border="#d0d0d0",
    close_hover="#381C34",
)

LIGHT = Palette(
    page_bg="#cc9793",
    accent=RAIN_COLOR_LIGHT,
    accent_text="#1f2937",
    card_bg="linear-gradient(to bottom right, #b7bff1, #f7caff)",
    header_bg="#b7bff1",
    text="#111827",
    text_muted="#374151",
    nav_tile="#ffffff",
    nav_icon="#374151",
    footer_bg="#f7caff",
    footer_border="#b7bff1",
    user_bubble="#b7bff1",
    user_text="#111827",
    bot_bubble="#ffffff",
    bot_text="#111827",
    bot_border="#b7bff1",
    typing_dot="#b7bff1",
    input_bg="#ffffff",
    input_border="#b7bff1",
    close_hover="#ffffff",
)


def palette(dark: bool) -> Palette:
    return DARK if dark else LIGHT


# 全局 CSS
GLOBAL_CSS = """
@import url('https://fonts.googleapis.com/css2?family=Roboto:wght@400;500;700&family=Roboto+Mono&display=swap');

body, .q-page, .nicegui-content {
    font-family: %(font_sans)s;
    transition: background-color 0.5s;
}

.nicegui-content {
    padding: 0 !important;
}

/* 动画 */
@keyframes fall {
    to { transform: translateY(100vh); }
}

@keyframes fadeIn {
    from { opacity: 0; }
    to { opacity: 1; }
}

@keyframes popIn {
    0%% { transform: scale(0.8); opacity: 0; }
    50%% { transform: scale(1.05); }
    100%% { transform: scale(1); opacity: 1; }
}

@keyframes bounce {
    0%%, 60%%, 100%% { transform: translateY(0); }
    30%% { transform: translateY(-10px); }
}

.animate-fadeIn { animation: fadeIn 0.2s ease-out; }
.animate-popIn { animation: popIn 0.3s cubic-bezier(0.68, -0.55, 0.265, 1.55); }

.dot-bounce { animation: bounce 1.4s infinite ease-in-out; }
.dot-bounce:nth-child(1) { animation-delay: 0s; }
.dot-bounce:nth-child(2) { animation-delay: 0.2s; }
.dot-bounce:nth-child(3) { animation-delay: 0.4s; }

/* 卡片与拖拽把手 */
.profile-card { touch-action: none; }
.drag-handle { cursor: grab; user-select: none; }
.drag-handle:active { cursor: grabbing; }

.nav-button { transition: transform 0.15s; cursor: pointer; }
.nav-button:hover { transform: scale(1.1); }

/* 消息气泡 */
.chat-bubble {
    max-width: 20rem;
    padding: 8px 16px;
    border-radius: 16px;
    white-space: pre-wrap;
    word-break: break-word;
}
.chat-bubble-user { border-bottom-right-radius: 0; }
.chat-bubble-bot { border-bottom-left-radius: 0; }
""" % {
    "font_sans": FONT_SANS,
}
