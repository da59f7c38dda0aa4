from __future__ import annotations

import asyncio
import json
import logging

from profile_card.controller import PortfolioSession
from profile_card.engine.chat import REPLY_FIRST
from profile_card.models import ActiveModal, CardOffset, Sender


def _telemetry(caplog) -> list[dict]:
    rows = []
    for record in caplog.records:
        msg = record.getMessage()
        if msg.startswith("telemetry "):
            rows.append(json.loads(msg[len("telemetry "):]))
    return rows


def test_session_close_then_reopen_starts_clean() -> None:
    async def _run():
        s = PortfolioSession(typing_delay=0.2, reply_delay=0.2)
        s.open_modal("contact")
        s.send("x")
        await asyncio.sleep(0.3)
        assert s.chat.typing is True

        s.close_modal()
        s.open_modal("contact")
        assert s.chat.messages == ()
        assert s.chat.typing is False

        await asyncio.sleep(0.4)
        assert s.chat.messages == ()
        assert s.chat.typing is False

    asyncio.run(_run())


def test_session_send_requires_contact_modal() -> None:
    async def _run():
        s = PortfolioSession(typing_delay=0, reply_delay=0)
        assert s.send("hi") is None
        s.open_modal(ActiveModal.ABOUT)
        assert s.send("hi") is None
        assert s.chat.messages == ()

        s.open_modal(ActiveModal.CONTACT)
        assert s.send("hi") is not None
        await asyncio.sleep(0.05)
        assert [m.sender for m in s.chat.messages] == [Sender.USER, Sender.BOT]
        assert s.chat.messages[-1].text == REPLY_FIRST
        await s.aclose()

    asyncio.run(_run())


def test_session_drag_survives_modal_cycles() -> None:
    s = PortfolioSession()
    s.drag(12, 8)
    s.open_modal("about")
    s.close_modal()
    s.drag(-2, 2)
    assert s.offset == CardOffset(10, 10)


def test_session_emits_telemetry(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="profile_card.controller"):
        s = PortfolioSession(session_id="abc123")
        s.toggle_theme()
        s.drag(1, 2)
        s.open_modal("about")
        s.open_modal("about")
        s.close_modal()
        s.close_modal()

    rows = _telemetry(caplog)
    assert [r["event"] for r in rows] == [
        "theme_toggled", "card_dragged", "modal_opened", "modal_closed",
    ]
    assert all(r["session"] == "abc123" for r in rows)
    assert [r["seq"] for r in rows] == [1, 2, 3, 4]
    assert rows[0]["dark"] is True
    assert rows[2]["modal"] == "about"


def test_session_aclose_cancels_pending_replies() -> None:
    async def _run():
        s = PortfolioSession(typing_delay=60, reply_delay=60)
        s.open_modal("contact")
        s.send("hello")
        assert s.chat.pending_count == 1
        await s.aclose()
        assert s.chat.pending_count == 0

    asyncio.run(_run())


def test_session_defaults_to_two_second_stages() -> None:
    s = PortfolioSession()
    assert s.chat._typing_delay == 2.0
    assert s.chat._reply_delay == 2.0
