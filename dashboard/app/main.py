"""Madde company dashboard application factory."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type

import httpx

from dashboard.app.auth.models import DashboardSession, Role
from dashboard.app.auth.service import SessionManager
from dashboard.app.common.views import BaseView
from dashboard.app.core.config import Settings, settings as default_settings
from dashboard.app.core.http import ApiClient, create_client
from dashboard.app.core.log_setup import configure_logging
from dashboard.app.modules.assets.view import AssetsView
from dashboard.app.modules.finance.view import FinanceView
from dashboard.app.modules.ip.view import IPView
from dashboard.app.modules.ir.view import IRView
from dashboard.app.modules.overview.view import OverviewView
from dashboard.app.modules.process.view import ProcessDataView
from dashboard.app.modules.production.view import ProductionView
from dashboard.app.modules.projects.view import ProjectsView
from dashboard.app.modules.research.view import ResearchView

logger = logging.getLogger(__name__)

SCREENS: Dict[str, Type[BaseView]] = {
    "dashboard": OverviewView,
    "research": ResearchView,
    "ip": IPView,
    "ir": IRView,
    "assets": AssetsView,
    "finance": FinanceView,
    "projects": ProjectsView,
    "process-data": ProcessDataView,
    "production": ProductionView,
}

SCREEN_LABELS: Dict[str, str] = {
    "dashboard": "대시보드",
    "research": "연구 데이터",
    "ip": "IP 현황",
    "ir": "IR 자료",
    "assets": "현물 현황",
    "finance": "재무 현황",
    "projects": "과제 지원 현황",
    "process-data": "공정 데이터",
    "production": "생산 현황",
}


class Dashboard:
    """One signed-in dashboard: a backend client, a session and its screens."""

    def __init__(self, client: ApiClient, *, config: Optional[Settings] = None) -> None:
        self.config = config or default_settings
        self.client = client
        self.sessions = SessionManager(client)

    @property
    def session(self) -> DashboardSession:
        return self.sessions.session

    def login(self, role: Role | str, password: str) -> DashboardSession:
        return self.sessions.login(role, password)

    def logout(self) -> None:
        self.sessions.logout()

    def open(self, screen: str, *, refresh: bool = True) -> BaseView:
        """Build the controller for ``screen`` and load its data."""

        try:
            view_cls = SCREENS[screen]
        except KeyError as exc:
            raise KeyError(f"Unknown screen {screen!r}") from exc
        view = view_cls(self.session, self.client, config=self.config)
        if refresh:
            view.refresh()
        return view

    def close(self) -> None:
        self.client.close()


def create_dashboard(
    config: Optional[Settings] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> Dashboard:
    config = config or default_settings
    configure_logging(config.log_level)
    client = create_client(config, transport=transport)
    logger.info("Dashboard backend: %s", client.base_url)
    return Dashboard(client, config=config)
