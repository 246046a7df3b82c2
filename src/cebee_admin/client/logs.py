"""Admin activity and platform event log."""

from __future__ import annotations

from typing import Any

from .base import ApiClient, ApiResult, require_id


LOG_FILTERS = (
    "category",
    "type",
    "severity",
    "resolved",
    "search",
    "dateRange",
    "dateFrom",
    "dateTo",
    "adminUser",
    "page",
    "limit",
    "sort",
)


class SystemLogsService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        """Fetch log entries. Only the names in :data:`LOG_FILTERS` are sent."""

        query = {key: value for key, value in params.items() if key in LOG_FILTERS}
        result = self.client.get("/system-logs", query)
        if not result.success:
            result.data = {"logs": [], "pagination": {}, "stats": {}}
        return result.with_defaults(error="Failed to fetch system logs")

    def admins(self) -> ApiResult:
        result = self.client.get("/system-logs/admins")
        if not result.success:
            result.data = {"admins": []}
        return result.with_defaults(error="Failed to fetch admin list")

    def stats(self) -> ApiResult:
        return self.client.get("/system-logs/stats").with_defaults(error="Failed to fetch statistics")

    def get(self, log_id: str) -> ApiResult:
        return require_id(log_id, "Log") or self.client.get(f"/system-logs/{log_id}").with_defaults(
            error="Failed to fetch system log"
        )

    def resolve(self, log_id: str) -> ApiResult:
        missing = require_id(log_id, "Log")
        if missing:
            return missing
        return self.client.put(f"/system-logs/{log_id}/resolve", {}).with_defaults(
            message="Log marked as resolved",
            error="Failed to resolve system log",
        )
