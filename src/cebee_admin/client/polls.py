"""Poll endpoints of the REST backend."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from cebee_admin.models.poll import PollFixture

from .base import ApiClient, ApiResult, require_id


def _iso(value: Any) -> Any:
    return value.isoformat() if isinstance(value, datetime) else value


def _fixtures_payload(fixtures: Any) -> list[dict[str, Any]]:
    return [PollFixture.model_validate(fixture).to_payload() for fixture in fixtures]


class PollsService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/polls", params)
        if not result.success:
            result.data = {"polls": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch polls")

    def get(self, poll_id: str) -> ApiResult:
        return require_id(poll_id, "Poll") or self.client.get(f"/polls/{poll_id}").with_defaults(
            error="Failed to fetch poll"
        )

    def create(self, poll: Mapping[str, Any]) -> ApiResult:
        if not str(poll.get("leagueId") or "").strip():
            return ApiResult.failure("League ID is required")
        if not poll.get("startTime") or not poll.get("closeTime"):
            return ApiResult.failure("Start time and close time are required")
        fixtures = poll.get("fixtures")
        if not isinstance(fixtures, (list, tuple)) or not fixtures:
            return ApiResult.failure("At least one fixture is required")

        body = {
            "leagueId": poll["leagueId"],
            "startTime": _iso(poll["startTime"]),
            "closeTime": _iso(poll["closeTime"]),
            "fixtures": _fixtures_payload(fixtures),
        }
        return self.client.post("/polls", body).with_defaults(
            message="Poll created successfully",
            error="Failed to create poll",
        )

    def update(self, poll_id: str, poll: Mapping[str, Any]) -> ApiResult:
        missing = require_id(poll_id, "Poll")
        if missing:
            return missing
        body: dict[str, Any] = {}
        if poll.get("leagueId"):
            body["leagueId"] = poll["leagueId"]
        if poll.get("startTime"):
            body["startTime"] = _iso(poll["startTime"])
        if poll.get("closeTime"):
            body["closeTime"] = _iso(poll["closeTime"])
        if isinstance(poll.get("fixtures"), (list, tuple)):
            body["fixtures"] = _fixtures_payload(poll["fixtures"])
        return self.client.put(f"/polls/{poll_id}", body).with_defaults(
            message="Poll updated successfully",
            error="Failed to update poll",
        )

    def close(self, poll_id: str) -> ApiResult:
        missing = require_id(poll_id, "Poll")
        if missing:
            return missing
        return self.client.patch(f"/polls/{poll_id}/close", {}).with_defaults(
            message="Poll closed successfully",
            error="Failed to close poll",
        )
