"""弹窗状态机 — NONE / ABOUT / CONTACT。"""

from __future__ import annotations

import logging

from profile_card.engine.chat import ChatSimulationEngine
from profile_card.models import ActiveModal

logger = logging.getLogger(__name__)


def parse_target(target: ActiveModal | str) -> ActiveModal:
    if isinstance(target, ActiveModal):
        return target
    try:
        return ActiveModal(str(target).strip().lower())
    except ValueError:
        raise ValueError(f"未知的弹窗目标: {target!r}") from None


class ModalController:
    """记录当前打开的弹窗，离开 CONTACT 时重置聊天引擎。"""

    def __init__(self, chat: ChatSimulationEngine):
        self._chat = chat
        self._active = ActiveModal.NONE

    @property
    def active(self) -> ActiveModal:
        return self._active

    @property
    def is_open(self) -> bool:
        return self._active is not ActiveModal.NONE

    def open(self, target: ActiveModal | str) -> ActiveModal:
        """打开目标弹窗；已打开其它弹窗时直接切换内容。"""
        target = parse_target(target)
        if target is ActiveModal.NONE:
            self.close()
            return self._active
        if target is self._active:
            return self._active
        previous = self._active
        self._active = target
        # 从聊天切走时同样清理，保证 typing 不会出现在非聊天弹窗上
        if previous is ActiveModal.CONTACT:
            self._chat.reset()
        logger.debug("弹窗切换: %s -> %s", previous.value, target.value)
        return self._active

    def close(self) -> bool:
        """关闭弹窗并重置聊天；本来就没有弹窗时什么都不做。"""
        if self._active is ActiveModal.NONE:
            return False
        previous = self._active
        self._active = ActiveModal.NONE
        self._chat.reset()
        logger.debug("弹窗关闭: %s", previous.value)
        return True
