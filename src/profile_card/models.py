"""名片页面的数据模型 — 消息、偏移量、弹窗状态。"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Sender(str, enum.Enum):
    USER = "user"
    BOT = "bot"


class ActiveModal(str, enum.Enum):
    NONE = "none"
    ABOUT = "about"
    CONTACT = "contact"


@dataclass(frozen=True)
class ChatMessage:
    text: str
    sender: Sender

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER


@dataclass(frozen=True)
class CardOffset:
    x: float = 0.0
    y: float = 0.0

    def translate(self, dx: float, dy: float) -> CardOffset:
        return CardOffset(self.x + dx, self.y + dy)
