import logging

import flet as ft

from cgpacalc.config.settings import settings
from cgpacalc.state.app_state import AppState
from cgpacalc.ui.views.calculator_view import build_calculator_view


logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    page.title = settings.title
    page.scroll = ft.ScrollMode.AUTO

    app_state = AppState()
    page.views.clear()
    page.views.append(build_calculator_view(page, app_state))
    page.update()


def run() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s (web=%s, port=%s)", settings.title, settings.web_mode, settings.port)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )
