"""League, team and player management endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from .base import ApiClient, ApiResult, require_id


TEAM_ACTIONS = ("activate", "inactivate", "promote", "relegate")


def _as_list(data: Any, key: str) -> list[dict[str, Any]]:
    # List endpoints answer either a bare list or {key: [...], "pagination": {...}}.
    if isinstance(data, list):
        return data
    if isinstance(data, Mapping) and isinstance(data.get(key), list):
        return list(data[key])
    return []


class LeaguesService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/leagues", params)
        if not result.success:
            result.data = {"leagues": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch leagues")

    def leagues(self, **params: Any) -> list[dict[str, Any]]:
        return _as_list(self.list(**params).data, "leagues")

    def get(self, league_id: str) -> ApiResult:
        return require_id(league_id, "League") or self.client.get(f"/leagues/{league_id}").with_defaults(
            error="Failed to fetch league"
        )

    def create(self, league: Mapping[str, Any]) -> ApiResult:
        if not str(league.get("league_name") or "").strip():
            return ApiResult.failure("League name is required")
        return self.client.post("/leagues", dict(league)).with_defaults(
            message="League created successfully",
            error="Failed to create league",
        )

    def update(self, league_id: str, league: Mapping[str, Any]) -> ApiResult:
        missing = require_id(league_id, "League")
        if missing:
            return missing
        return self.client.put(f"/leagues/{league_id}", dict(league)).with_defaults(
            message="League updated successfully",
            error="Failed to update league",
        )

    def delete(self, league_id: str) -> ApiResult:
        missing = require_id(league_id, "League")
        if missing:
            return missing
        return self.client.delete(f"/leagues/{league_id}").with_defaults(
            message="League deleted successfully",
            error="Failed to delete league",
        )

    def teams(self, league_id: str) -> ApiResult:
        missing = require_id(league_id, "League")
        if missing:
            return missing
        return self.client.get(f"/leagues/{league_id}/teams").with_defaults(
            error="Failed to fetch league teams"
        )


class TeamsService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/teams", params)
        if not result.success:
            result.data = {"teams": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch teams")

    def teams(self, **params: Any) -> list[dict[str, Any]]:
        return _as_list(self.list(**params).data, "teams")

    def get(self, team_id: str) -> ApiResult:
        return require_id(team_id, "Team") or self.client.get(f"/teams/{team_id}").with_defaults(
            error="Failed to fetch team"
        )

    def create(self, team: Mapping[str, Any]) -> ApiResult:
        if not team.get("team_name") or not team.get("league_id"):
            return ApiResult.failure("Team name and league ID are required")
        return self.client.post("/teams", dict(team)).with_defaults(
            message="Team created successfully",
            error="Failed to create team",
        )

    def update(self, team_id: str, team: Mapping[str, Any]) -> ApiResult:
        missing = require_id(team_id, "Team")
        if missing:
            return missing
        return self.client.put(f"/teams/{team_id}", dict(team)).with_defaults(
            message="Team updated successfully",
            error="Failed to update team",
        )

    def change_status(self, team_id: str, action: str, reason: str) -> ApiResult:
        """Run one of :data:`TEAM_ACTIONS`; every transition needs a reason."""

        if action not in TEAM_ACTIONS:
            raise ValueError(f"Unknown team action {action!r}")
        missing = require_id(team_id, "Team")
        if missing:
            return missing
        if not reason:
            noun = {"activate": "activation", "inactivate": "inactivation",
                    "promote": "promotion", "relegate": "relegation"}[action]
            return ApiResult.failure(f"Reason is required for {noun}")
        past = {"activate": "activated", "inactivate": "inactivated",
                "promote": "promoted", "relegate": "relegated"}[action]
        return self.client.patch(f"/teams/{team_id}/{action}", {"reason": reason}).with_defaults(
            message=f"Team {past} successfully",
            error=f"Failed to {action} team",
        )


class PlayersService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/players", params)
        if not result.success:
            result.data = {"players": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch players")

    def by_team(self, team_id: str, **params: Any) -> ApiResult:
        missing = require_id(team_id, "Team")
        if missing:
            return missing
        result = self.client.get(f"/players/team/{team_id}", params)
        if not result.success:
            result.data = {"players": [], "team": None}
        return result.with_defaults(error="Failed to fetch team players")

    def players_for_team(self, team_id: str) -> list[dict[str, Any]]:
        return _as_list(self.by_team(team_id).data, "players")

    def get(self, player_id: str) -> ApiResult:
        return require_id(player_id, "Player") or self.client.get(f"/players/{player_id}").with_defaults(
            error="Failed to fetch player"
        )

    def create(self, player: Mapping[str, Any]) -> ApiResult:
        required = ("team_id", "player_name", "position", "shirt_number")
        if any(not player.get(key) for key in required):
            return ApiResult.failure("Team ID, player name, position, and shirt number are required")
        try:
            shirt_number = int(player["shirt_number"])
        except (TypeError, ValueError):
            shirt_number = 0
        if not 1 <= shirt_number <= 99:
            return ApiResult.failure("Shirt number must be between 1 and 99")

        payload = {
            **player,
            "player_name": str(player["player_name"]).strip(),
            "shirt_number": shirt_number,
        }
        return self.client.post("/players", payload).with_defaults(
            message="Player created successfully",
            error="Failed to create player",
        )

    def update(self, player_id: str, player: Mapping[str, Any]) -> ApiResult:
        missing = require_id(player_id, "Player")
        if missing:
            return missing
        return self.client.put(f"/players/{player_id}", dict(player)).with_defaults(
            message="Player updated successfully",
            error="Failed to update player",
        )

    def deactivate_temporary(self, player_id: str, deactivation: Mapping[str, Any]) -> ApiResult:
        missing = require_id(player_id, "Player")
        if missing:
            return missing
        if not deactivation.get("inactive_reason"):
            return ApiResult.failure("Inactive reason is required")
        return self.client.patch(
            f"/players/{player_id}/deactivate-temporary", dict(deactivation)
        ).with_defaults(
            message="Player temporarily deactivated",
            error="Failed to deactivate player",
        )

    def deactivate_permanent(self, player_id: str, deactivation: Mapping[str, Any]) -> ApiResult:
        missing = require_id(player_id, "Player")
        if missing:
            return missing
        if not deactivation.get("inactive_reason"):
            return ApiResult.failure("Inactive reason is required")
        if deactivation.get("confirm") is not True:
            return ApiResult.failure("Confirmation is required for permanent deactivation")
        return self.client.patch(
            f"/players/{player_id}/deactivate-permanent", dict(deactivation)
        ).with_defaults(
            message="Player permanently deactivated",
            error="Failed to deactivate player",
        )

    def reactivate(self, player_id: str) -> ApiResult:
        missing = require_id(player_id, "Player")
        if missing:
            return missing
        return self.client.patch(f"/players/{player_id}/reactivate").with_defaults(
            message="Player reactivated successfully",
            error="Failed to reactivate player",
        )
