"""Controller for the landing dashboard."""

from __future__ import annotations

import logging
from typing import Any

from dashboard.app.common.numbers import coerce_number
from dashboard.app.common.views import BaseView
from dashboard.app.core.http import BackendRequestError

from .schemas import DashboardStats

logger = logging.getLogger(__name__)


def _count(payload: Any) -> int:
    return len(payload) if isinstance(payload, list) else 0


class OverviewView(BaseView):
    """Counts of each record type plus the cost-base totals.

    A failed refresh keeps the previous figures and only logs the error.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.stats = DashboardStats()

    def refresh(self) -> bool:
        self.loading = True
        try:
            research = self.client.get_json("/research")
            ip = self.client.get_json("/ip")
            ir = self.client.get_json("/ir")
            projects = self.client.get_json("/projects")
            assets = self.client.get_json("/assets") or {}
        except BackendRequestError as exc:
            logger.error("데이터 불러오기 실패: %s", exc)
            return False
        finally:
            self.loading = False

        self.stats = DashboardStats(
            research_count=_count(research),
            ip_count=_count(ip),
            ir_count=_count(ir),
            project_count=_count(projects),
            total_labor=coerce_number(assets.get("personnel_salary_total")),
            total_machine=coerce_number(assets.get("equipment_acquisition_total")),
        )
        return True
