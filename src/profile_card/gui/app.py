"""NiceGUI 应用入口 — 可拖拽个人名片页。"""

from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

from nicegui import ui

from profile_card.config import Settings, load_settings
from profile_card.gui.theme import GLOBAL_CSS


def setup_routes(settings: Settings):
    """注册路由。"""

    @ui.page("/")
    def portfolio_page():
        ui.add_css(GLOBAL_CSS)
        from profile_card.gui.pages.portfolio import create_portfolio_page
        create_portfolio_page(settings)


def main(settings: Settings | None = None, reload: bool = False):
    """GUI 入口点。"""
    settings = settings or load_settings()
    setup_routes(settings)
    ui.run(
        title="hello, and welcome",
        host=settings.host,
        port=settings.port,
        favicon="🌧️",
        reload=reload,
        show=False,
    )


if __name__ == "__main__":
    main()
