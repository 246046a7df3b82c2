"""Fixture scheduling and results endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Mapping

from .base import ApiClient, ApiResult, require_id


def _iso(value: Any) -> Any:
    return value.isoformat() if isinstance(value, datetime) else value


class FixturesService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/fixtures", params)
        if not result.success:
            result.data = {"fixtures": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch fixtures")

    def get(self, fixture_id: str) -> ApiResult:
        return require_id(fixture_id, "Fixture") or self.client.get(f"/fixtures/{fixture_id}").with_defaults(
            error="Failed to fetch fixture"
        )

    def create(self, fixture: Mapping[str, Any]) -> ApiResult:
        """Create a regular, CeBe featured or community featured fixture.

        Community featured fixtures name a single ``selected_team_id`` and a
        ``matchday``; every other kind needs both team ids.
        """

        for key, label in (
            ("leagueId", "League ID"),
            ("kickoffTime", "Kickoff time"),
            ("publishDateTime", "Publish date time"),
            ("venue", "Venue"),
        ):
            if not fixture.get(key):
                return ApiResult.failure(f"{label} is required")

        body: dict[str, Any] = {
            "leagueId": fixture["leagueId"],
            "kickoffTime": _iso(fixture["kickoffTime"]),
            "publishDateTime": _iso(fixture["publishDateTime"]),
            "venue": fixture["venue"],
        }
        if fixture.get("isCommunityFeatured"):
            if not fixture.get("selected_team_id"):
                return ApiResult.failure("Selected team ID is required for Community Featured fixtures")
            if not fixture.get("matchday"):
                return ApiResult.failure("Matchday is required for Community Featured fixtures")
            body["isCommunityFeatured"] = True
            body["selected_team_id"] = fixture["selected_team_id"]
            body["matchday"] = fixture["matchday"]
        else:
            if not fixture.get("home_team_id") or not fixture.get("away_team_id"):
                return ApiResult.failure("Home team ID and away team ID are required")
            body["home_team_id"] = fixture["home_team_id"]
            body["away_team_id"] = fixture["away_team_id"]
            if fixture.get("isCeBeFeatured"):
                body["isCeBeFeatured"] = True

        for optional in ("cmdId", "status"):
            if fixture.get(optional):
                body[optional] = fixture[optional]

        return self.client.post("/fixtures", body).with_defaults(
            message="Fixture created successfully",
            error="Failed to create fixture",
        )

    def update_status(self, fixture_id: str, status: str) -> ApiResult:
        missing = require_id(fixture_id, "Fixture")
        if missing:
            return missing
        if not status:
            return ApiResult.failure("Status is required")
        return self.client.put(f"/fixtures/{fixture_id}", {"status": status}).with_defaults(
            message="Fixture status updated successfully",
            error="Failed to update fixture status",
        )

    def bulk_update_status(self, fixture_ids: Iterable[str], status: str) -> ApiResult:
        ids = [fixture_id for fixture_id in fixture_ids if fixture_id]
        if not ids:
            return ApiResult.failure("Fixture IDs array is required")
        if not status:
            return ApiResult.failure("Status is required")
        updated = [fixture_id for fixture_id in ids if self.update_status(fixture_id, status).success]
        if not updated:
            return ApiResult.failure("Failed to update any fixtures")
        return ApiResult(
            True,
            {"updated": updated, "failed": [fixture_id for fixture_id in ids if fixture_id not in updated]},
            message=f"Updated {len(updated)} of {len(ids)} fixtures",
        )

    def update_results(self, fixture_id: str, results: Mapping[str, Any]) -> ApiResult:
        missing = require_id(fixture_id, "Fixture")
        if missing:
            return missing
        if results.get("homeScore") in (None, ""):
            return ApiResult.failure("Home score is required")
        if results.get("awayScore") in (None, ""):
            return ApiResult.failure("Away score is required")
        try:
            body: dict[str, Any] = {
                "homeScore": int(results["homeScore"]),
                "awayScore": int(results["awayScore"]),
            }
        except (TypeError, ValueError):
            return ApiResult.failure("Scores must be whole numbers")
        if results.get("firstGoalScorer"):
            body["firstGoalScorer"] = results["firstGoalScorer"]
        if results.get("firstGoalMinute") not in (None, ""):
            body["firstGoalMinute"] = int(results["firstGoalMinute"])
        return self.client.put(f"/fixtures/{fixture_id}/results", body).with_defaults(
            message="Fixture results updated successfully",
            error="Failed to update fixture results",
        )

    def end_match(self, fixture_id: str) -> ApiResult:
        missing = require_id(fixture_id, "Fixture")
        if missing:
            return missing
        return self.client.put(f"/fixtures/{fixture_id}/end-match").with_defaults(
            message="Match ended successfully",
            error="Failed to end match",
        )

    def delete(self, fixture_id: str) -> ApiResult:
        missing = require_id(fixture_id, "Fixture")
        if missing:
            return missing
        return self.client.delete(f"/fixtures/{fixture_id}").with_defaults(
            message="Fixture deleted successfully",
            error="Failed to delete fixture",
        )

    def statistics(self) -> ApiResult:
        return self.client.get("/fixtures/statistics").with_defaults(error="Failed to fetch fixture statistics")
