"""PortfolioSession — 单个访客的交互控制层，供 GUI / CLI 共用。"""

from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Callable

from profile_card.config import DEFAULT_REPLY_DELAY, DEFAULT_TYPING_DELAY
from profile_card.engine.card import PositionAccumulator, ThemeFlag
from profile_card.engine.chat import ChatSimulationEngine
from profile_card.engine.modal import ModalController
from profile_card.models import ActiveModal, CardOffset, ChatMessage

logger = logging.getLogger(__name__)


class PortfolioSession:
    """封装 ThemeFlag + PositionAccumulator + ModalController + ChatSimulationEngine。"""

    def __init__(
        self,
        typing_delay: float = DEFAULT_TYPING_DELAY,
        reply_delay: float = DEFAULT_REPLY_DELAY,
        on_message: Callable[[ChatMessage], None] | None = None,
        on_typing: Callable[[bool], None] | None = None,
        session_id: str | None = None,
    ):
        self._id = session_id or uuid.uuid4().hex[:8]
        self._telemetry_seq = 0
        self.theme = ThemeFlag()
        self.position = PositionAccumulator()
        self.chat = ChatSimulationEngine(
            typing_delay=typing_delay,
            reply_delay=reply_delay,
            on_message=on_message,
            on_typing=on_typing,
        )
        self.modal = ModalController(self.chat)

    @property
    def session_id(self) -> str:
        return self._id

    @property
    def dark(self) -> bool:
        return self.theme.dark

    @property
    def offset(self) -> CardOffset:
        return self.position.offset

    @property
    def active_modal(self) -> ActiveModal:
        return self.modal.active

    def _emit_metric(self, event: str, **fields):
        self._telemetry_seq += 1
        payload = {
            "event": event,
            "session": self._id,
            "ts": round(time.time(), 3),
            "seq": self._telemetry_seq,
            **fields,
        }
        logger.info("telemetry %s", json.dumps(payload, ensure_ascii=False, sort_keys=True))

    def toggle_theme(self) -> bool:
        dark = self.theme.toggle()
        self._emit_metric("theme_toggled", dark=dark)
        return dark

    def drag(self, dx: float, dy: float) -> CardOffset:
        offset = self.position.apply_delta(dx, dy)
        self._emit_metric("card_dragged", dx=dx, dy=dy, x=offset.x, y=offset.y)
        return offset

    def open_modal(self, target: ActiveModal | str) -> ActiveModal:
        previous = self.modal.active
        active = self.modal.open(target)
        if active is not previous:
            self._emit_metric("modal_opened", modal=active.value, previous=previous.value)
        return active

    def close_modal(self) -> bool:
        previous = self.modal.active
        closed = self.modal.close()
        if closed:
            self._emit_metric("modal_closed", modal=previous.value)
        return closed

    def update_draft(self, text: str | None):
        self.chat.update_draft(text)

    def send(self, text: str | None = None) -> ChatMessage | None:
        """在聊天弹窗中发送消息；弹窗未打开时忽略。"""
        if self.modal.active is not ActiveModal.CONTACT:
            logger.debug("聊天弹窗未打开，忽略消息")
            return None
        msg = self.chat.submit(text)
        if msg:
            self._emit_metric(
                "message_sent",
                user_turns=self.chat.user_message_count(),
                input_len=len(msg.text),
            )
        return msg

    async def aclose(self):
        """结束会话，取消所有延迟回复。"""
        await self.chat.aclose()
        self._emit_metric("session_stopped")
