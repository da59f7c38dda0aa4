"""脚本化假聊天引擎 — 固定延迟 + 按用户消息数选择回复。

每条用户消息对应一对独立的延迟阶段:
  Stage A: typing_delay 后显示 "正在输入"
  Stage B: 再过 reply_delay 后隐藏 "正在输入" 并追加机器人回复

不同消息的阶段之间不排队，回复可能与后续用户消息交错。
reset() 会递增会话令牌并取消全部阶段任务，过期阶段醒来后直接丢弃。
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable

from profile_card.config import DEFAULT_REPLY_DELAY, DEFAULT_TYPING_DELAY
from profile_card.models import ChatMessage, Sender

logger = logging.getLogger(__name__)

REPLY_FIRST = (
    "Sorry, this is fake. Get pranked lol. "
    "If you want to reach me, try going through LinkedIn"
)
REPLY_SECOND = "Seriously, I'm not real."
REPLY_DESPERATE = "bruh why r u so desperate"


def reply(n: int) -> str:
    """按第 n 条用户消息选择固定回复。"""
    if n <= 1:
        return REPLY_FIRST
    if n == 2:
        return REPLY_SECOND
    return REPLY_DESPERATE


def count_user_messages(messages: Iterable[ChatMessage]) -> int:
    return sum(1 for m in messages if m.sender is Sender.USER)


class ChatSimulationEngine:
    """假聊天引擎，拥有对话记录、输入草稿和 "正在输入" 状态。"""

    def __init__(
        self,
        typing_delay: float = DEFAULT_TYPING_DELAY,
        reply_delay: float = DEFAULT_REPLY_DELAY,
        on_message: Callable[[ChatMessage], None] | None = None,
        on_typing: Callable[[bool], None] | None = None,
    ):
        self._typing_delay = max(0.0, float(typing_delay))
        self._reply_delay = max(0.0, float(reply_delay))
        self._on_message = on_message
        self._on_typing = on_typing
        self._messages: list[ChatMessage] = []
        self._draft = ""
        self._typing = False
        self._token = 0
        self._revision = 0
        self._tasks: set[asyncio.Task] = set()

    # ── 只读状态 ──

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def typing(self) -> bool:
        return self._typing

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def can_send(self) -> bool:
        return bool(self._draft.strip())

    @property
    def session_token(self) -> int:
        return self._token

    @property
    def revision(self) -> int:
        """对话记录或 typing 状态变化时递增，供 UI 轮询判断是否需要重绘。"""
        return self._revision

    @property
    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if not t.done())

    def user_message_count(self) -> int:
        return count_user_messages(self._messages)

    # ── 操作 ──

    def update_draft(self, text: str | None):
        self._draft = text or ""

    def submit(self, text: str | None = None) -> ChatMessage | None:
        """提交一条用户消息，空白输入直接忽略。

        text 为 None 时使用当前草稿。必须在运行中的事件循环里调用。
        """
        raw = self._draft if text is None else text
        if not raw or not raw.strip():
            return None
        # 先取事件循环，没有运行中的循环时在修改状态前抛出 RuntimeError
        loop = asyncio.get_running_loop()

        msg = ChatMessage(text=raw, sender=Sender.USER)
        self._append(msg)
        n = self.user_message_count()
        self._draft = ""

        task = loop.create_task(self._respond(n, self._token))
        self._track_task(task, n)
        logger.debug("已排期回复: n=%d token=%d", n, self._token)
        return msg

    def reset(self):
        """清空对话并使所有进行中的延迟阶段失效。"""
        self._token += 1
        cancelled = 0
        for task in list(self._tasks):
            if not task.done():
                task.cancel()
                cancelled += 1
        self._tasks.clear()
        self._messages.clear()
        self._draft = ""
        self._revision += 1
        if self._typing:
            self._set_typing(False)
        if cancelled:
            logger.debug("会话重置，取消 %d 个延迟回复", cancelled)

    async def aclose(self):
        """取消并等待全部阶段任务结束。"""
        tasks = [t for t in self._tasks if not t.done()]
        self.reset()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    # ── 内部 ──

    async def _respond(self, n: int, token: int):
        await asyncio.sleep(self._typing_delay)
        if token != self._token:
            logger.debug("丢弃过期的 typing 阶段: token=%d current=%d", token, self._token)
            return
        self._set_typing(True)

        await asyncio.sleep(self._reply_delay)
        if token != self._token:
            logger.debug("丢弃过期的回复阶段: token=%d current=%d", token, self._token)
            return
        self._set_typing(False)
        self._append(ChatMessage(text=reply(n), sender=Sender.BOT))

    def _append(self, msg: ChatMessage):
        self._messages.append(msg)
        self._revision += 1
        if self._on_message:
            try:
                self._on_message(msg)
            except Exception as e:
                logger.warning("on_message 回调失败: %s", e)

    def _set_typing(self, value: bool):
        self._typing = value
        self._revision += 1
        if self._on_typing:
            try:
                self._on_typing(value)
            except Exception as e:
                logger.warning("on_typing 回调失败: %s", e)

    def _track_task(self, task: asyncio.Task, n: int) -> asyncio.Task:
        """统一管理阶段任务，reset 时可一并取消。"""
        self._tasks.add(task)

        def _on_done(done: asyncio.Task):
            self._tasks.discard(done)
            try:
                exc = done.exception()
            except asyncio.CancelledError:
                return
            if exc:
                logger.warning("延迟回复任务失败 [n=%d]: %s", n, exc)

        task.add_done_callback(_on_done)
        return task
