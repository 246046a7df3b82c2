"""Dashboard summary payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    total_users: int = 0
    active_users: int = 0
    total_sp_issued: float = 0
    estimated_rewards_value: float = 0


class TodayFixtureSummary(BaseModel):
    total_matches: int = 0
    completed_matches: int = 0
    live_matches: int = 0
    pending_results: int = 0


class NextFixture(BaseModel):
    label: str
    kickoff_time: Optional[datetime] = None
    league_name: Optional[str] = None


class DashboardData(BaseModel):
    stats: DashboardStats = Field(default_factory=DashboardStats)
    today_summary: TodayFixtureSummary = Field(default_factory=TodayFixtureSummary)
    next_fixture: Optional[NextFixture] = None
    alerts: List[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_backend(
        cls,
        payload: Mapping[str, Any] | None,
        alerts_payload: Any = None,
    ) -> "DashboardData":
        """Map ``/admin/dashboard`` (and the alerts endpoint) onto the page model."""

        payload = payload or {}
        stats = payload.get("stats") or {}
        today = stats.get("todayMatches") or {}

        alerts = _extract_alerts(alerts_payload)
        if alerts is None:
            alerts = _extract_alerts(payload.get("alerts")) or []

        return cls(
            stats=DashboardStats(
                total_users=stats.get("totalUsers") or 0,
                active_users=stats.get("activeUsers") or 0,
                total_sp_issued=stats.get("totalSPIssued") or 0,
                estimated_rewards_value=stats.get("estimatedRewardsValue") or 0,
            ),
            today_summary=TodayFixtureSummary(
                total_matches=today.get("total") or 0,
                completed_matches=today.get("completed") or 0,
                live_matches=today.get("live") or 0,
                pending_results=today.get("pendingResults") or 0,
            ),
            next_fixture=_parse_next_fixture(payload.get("nextFixture")),
            alerts=alerts,
        )


def _extract_alerts(value: Any) -> Optional[List[dict[str, Any]]]:
    # The alerts endpoint has returned a bare list, {"alerts": [...]} and {"data": [...]}.
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    if isinstance(value, Mapping):
        for key in ("alerts", "data"):
            inner = value.get(key)
            if isinstance(inner, list):
                return [item for item in inner if isinstance(item, dict)]
    return None


def _parse_next_fixture(value: Any) -> Optional[NextFixture]:
    if not isinstance(value, Mapping):
        return None
    home = value.get("homeTeam") or value.get("home_team") or "TBD"
    away = value.get("awayTeam") or value.get("away_team") or "TBD"
    return NextFixture(
        label=f"{home} vs {away}",
        kickoff_time=value.get("kickoffTime") or value.get("kickoff_time"),
        league_name=value.get("leagueName") or value.get("league_name"),
    )
