"""League poll records and their request payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from .entities import BackendModel


class PollFixture(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    match_num: int = Field(..., ge=1, validation_alias=AliasChoices("matchNum", "match_num"))
    team_a_id: str = Field(..., min_length=1, validation_alias=AliasChoices("teamAId", "team_a_id"))
    team_b_id: str = Field(..., min_length=1, validation_alias=AliasChoices("teamBId", "team_b_id"))

    def to_payload(self) -> dict[str, Any]:
        return {"matchNum": self.match_num, "teamAId": self.team_a_id, "teamBId": self.team_b_id}


class Poll(BackendModel):
    league_id: str = Field("", validation_alias=AliasChoices("leagueId", "league_id"))
    league_name: str = Field("", validation_alias=AliasChoices("leagueName", "league_name"))
    status: Optional[str] = "draft"
    start_time: Optional[datetime] = Field(None, validation_alias=AliasChoices("startTime", "start_time"))
    close_time: Optional[datetime] = Field(None, validation_alias=AliasChoices("closeTime", "close_time"))
    vote_count: int = Field(0, validation_alias=AliasChoices("voteCount", "vote_count"))
    created_at: Optional[datetime] = Field(None, validation_alias=AliasChoices("createdAt", "created_at"))
    fixtures: List[PollFixture] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _legacy_status(cls, data: Any) -> Any:
        # Older documents carry the status under ``pollStatus``; a null or blank
        # ``status`` falls back to it.
        if isinstance(data, Mapping) and not str(data.get("status") or "").strip() and data.get("pollStatus"):
            return {**data, "status": data["pollStatus"]}
        return data

    @property
    def is_active(self) -> bool:
        return self.status == "active"
