"""Dashboard summary endpoints."""

from __future__ import annotations

import logging
from typing import Any

from cebee_admin.models.dashboard import DashboardData

from .base import ApiClient, ApiResult


logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, client: ApiClient):
        self.client = client

    def alerts(self, *, limit: int = 3, severity: str = "critical", **params: Any) -> ApiResult:
        result = self.client.get("/admin/dashboard/alerts", {"limit": limit, "severity": severity, **params})
        if not result.success:
            result.data = {"alerts": [], "total": 0}
        return result.with_defaults(error="Failed to fetch alerts")

    def load(self) -> ApiResult:
        """Return an :class:`ApiResult` whose data is a :class:`DashboardData`.

        When the summary call fails the page still renders, with zeroed stats.
        """

        summary = self.client.get("/admin/dashboard")
        alerts = self.alerts()
        if not summary.success:
            logger.warning("Dashboard summary unavailable: %s", summary.error)
            return ApiResult(
                False,
                DashboardData(),
                summary.error or "Failed to fetch dashboard data",
                summary.status,
            )
        data = DashboardData.from_backend(
            summary.data if isinstance(summary.data, dict) else None,
            alerts.data if alerts.success else None,
        )
        return ApiResult(True, data, None, summary.status)
