"""profile-card CLI — 启动名片页面，或在终端里体验假聊天。"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import replace

import click
from dotenv import load_dotenv

load_dotenv()
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from profile_card.config import load_settings
from profile_card.controller import PortfolioSession
from profile_card.models import ActiveModal, ChatMessage

console = Console()

QUIT_WORDS = ("quit", "exit", "q")


def _setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@click.group()
@click.option("--log-level", envvar="PROFILE_CARD_LOG_LEVEL", default="INFO", help="日志级别")
def cli(log_level: str):
    """profile-card - 可拖拽的个人名片页"""
    _setup_logging(log_level)


@cli.command()
@click.option("--host", default=None, help="监听地址（默认读 PROFILE_CARD_HOST）")
@click.option("--port", type=int, default=None, help="监听端口（默认读 PROFILE_CARD_PORT）")
@click.option("--reload/--no-reload", default=False, help="代码变更时自动重启")
def serve(host: str | None, port: int | None, reload: bool):
    """启动 NiceGUI 名片页面。"""
    settings = load_settings()
    if host:
        settings = replace(settings, host=host)
    if port is not None:
        settings = replace(settings, port=port)
    if not 0 < settings.port < 65536:
        console.print(f"\n  [red]端口无效: {settings.port}[/]\n")
        sys.exit(1)

    from profile_card.gui.app import main as gui_main

    console.print(f"\n  名片页面: [bold cyan]http://{settings.host}:{settings.port}[/]\n")
    gui_main(settings, reload=reload)


@cli.command()
@click.option("--typing-delay", type=float, default=None,
              help="收到消息后多久显示正在输入（秒）")
@click.option("--reply-delay", type=float, default=None,
              help="正在输入持续多久后回复（秒）")
def chat(typing_delay: float | None, reply_delay: float | None):
    """在终端里打开 contact 弹窗聊天。"""
    settings = load_settings()
    if typing_delay is None:
        typing_delay = settings.typing_delay
    if reply_delay is None:
        reply_delay = settings.reply_delay
    if typing_delay < 0 or reply_delay < 0:
        console.print("\n  [red]延迟不能为负数。[/]\n")
        sys.exit(1)
    asyncio.run(_chat_loop(typing_delay, reply_delay))


async def _chat_loop(typing_delay: float, reply_delay: float):
    def _on_message(msg: ChatMessage):
        if not msg.is_user:
            console.print(f"[bold magenta]bot[/]: {msg.text}", highlight=False)

    def _on_typing(is_typing: bool):
        if is_typing:
            console.print("[dim]bot is typing...[/]")

    session = PortfolioSession(
        typing_delay=typing_delay,
        reply_delay=reply_delay,
        on_message=_on_message,
        on_typing=_on_typing,
    )
    session.open_modal(ActiveModal.CONTACT)

    console.print()
    console.print(Panel(
        "随便说点什么，输入 [bold]quit[/] 退出",
        title=Text(" contact ", style="bold white on blue"),
        border_style="blue",
    ))
    console.print()

    loop = asyncio.get_running_loop()
    try:
        while True:
            try:
                user_input = await loop.run_in_executor(None, console.input, "")
            except (EOFError, KeyboardInterrupt):
                console.print("\n")
                break
            if user_input.strip().lower() in QUIT_WORDS:
                break
            session.send(user_input)
    finally:
        session.close_modal()
        await session.aclose()
    console.print("\n  [dim]bye.[/]\n")


def main():
    cli()


if __name__ == "__main__":
    main()
