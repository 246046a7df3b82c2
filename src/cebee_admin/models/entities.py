"""Backend resources rendered by the admin pages.

The backend owns these schemas, so every model tolerates extra fields and
accepts both the camelCase keys used by Firestore documents and the
snake_case keys used by the REST endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class BackendModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field("", validation_alias=AliasChoices("id", "_id"))

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Firestore stores cleared fields as null; those fall back to the field default.
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_document(cls, doc_id: str, data: dict[str, Any]):
        """Build a model from a Firestore document id and its fields."""

        return cls.model_validate({**data, "id": doc_id})


class League(BackendModel):
    name: str = Field("", validation_alias=AliasChoices("name", "league_name", "leagueName"))
    country: Optional[str] = None
    league_type: Optional[str] = Field(None, validation_alias=AliasChoices("leagueType", "league_type", "type"))
    is_active: bool = Field(True, validation_alias=AliasChoices("isActive", "is_active"))
    priority: Optional[int] = None
    logo_url: Optional[str] = Field(None, validation_alias=AliasChoices("logoUrl", "logo_url"))


class TeamHistoryEntry(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    history_id: Optional[str] = Field(None, validation_alias=AliasChoices("history_id", "historyId", "id"))
    status: Optional[str] = None
    status_reason: Optional[str] = Field(None, validation_alias=AliasChoices("status_reason", "statusReason"))
    changed_at: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("status_changed_at", "statusChangedAt", "changed_at", "createdAt")
    )
    season_tag: Optional[str] = Field(None, validation_alias=AliasChoices("season_tag", "seasonTag"))
    entry_type: Optional[str] = Field(None, validation_alias=AliasChoices("entry_type", "entryType"))
    changed_by: Optional[str] = Field(None, validation_alias=AliasChoices("changed_by", "changedBy"))


class Team(BackendModel):
    name: str = Field("", validation_alias=AliasChoices("team_name", "name", "teamName"))
    league_id: Optional[str] = Field(None, validation_alias=AliasChoices("league_id", "leagueId"))
    status: Optional[str] = None
    is_active: bool = Field(True, validation_alias=AliasChoices("isActive", "is_active"))
    status_reason: Optional[str] = Field(None, validation_alias=AliasChoices("status_reason", "statusReason"))
    status_changed_at: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("status_changed_at", "statusChangedAt")
    )
    season_tag: Optional[str] = Field(None, validation_alias=AliasChoices("season_tag", "seasonTag"))
    entry_type: Optional[str] = Field(None, validation_alias=AliasChoices("entry_type", "entryType"))
    history: List[TeamHistoryEntry] = Field(default_factory=list)


class Player(BackendModel):
    name: str = Field("", validation_alias=AliasChoices("player_name", "name", "playerName"))
    team_id: Optional[str] = Field(None, validation_alias=AliasChoices("team_id", "teamId"))
    position: Optional[str] = None
    shirt_number: Optional[int] = Field(
        None,
        ge=1,
        le=99,
        validation_alias=AliasChoices("shirt_number", "shirtNumber"),
    )
    status: Optional[str] = None
    inactive_reason: Optional[str] = None


class Fixture(BackendModel):
    league_id: Optional[str] = Field(None, validation_alias=AliasChoices("leagueId", "league_id"))
    home_team: Optional[str] = Field(None, validation_alias=AliasChoices("homeTeam", "home_team", "homeTeamName"))
    away_team: Optional[str] = Field(None, validation_alias=AliasChoices("awayTeam", "away_team", "awayTeamName"))
    kickoff_time: Optional[datetime] = Field(None, validation_alias=AliasChoices("kickoffTime", "kickoff_time"))
    venue: Optional[str] = None
    status: Optional[str] = None
    home_score: Optional[int] = Field(None, validation_alias=AliasChoices("homeScore", "home_score"))
    away_score: Optional[int] = Field(None, validation_alias=AliasChoices("awayScore", "away_score"))

    @property
    def label(self) -> str:
        return f"{self.home_team or 'TBD'} vs {self.away_team or 'TBD'}"


class Prediction(BackendModel):
    user_id: Optional[str] = Field(None, validation_alias=AliasChoices("userId", "user_id"))
    username: Optional[str] = None
    fixture_id: Optional[str] = Field(None, validation_alias=AliasChoices("fixtureId", "fixture_id"))
    status: Optional[str] = None
    sp_earned: float = Field(0.0, validation_alias=AliasChoices("spEarned", "sp_earned", "points"))
    created_at: Optional[datetime] = Field(None, validation_alias=AliasChoices("createdAt", "created_at"))


class Notification(BackendModel):
    title: str = ""
    message: str = Field("", validation_alias=AliasChoices("message", "body"))
    notification_type: Optional[str] = Field(None, validation_alias=AliasChoices("notificationType", "type"))
    target_audience: Optional[str] = Field(None, validation_alias=AliasChoices("targetAudience", "audience"))
    status: Optional[str] = None
    scheduled_for: Optional[datetime] = Field(None, validation_alias=AliasChoices("scheduledFor", "scheduledAt"))
    sent_at: Optional[datetime] = Field(None, validation_alias=AliasChoices("sentAt", "sent_at"))


class FaqItem(BackendModel):
    question: str = ""
    answer: str = ""
    category: Optional[str] = None
    status: Optional[str] = None
    order: Optional[int] = None


class Reward(BackendModel):
    user_id: Optional[str] = Field(None, validation_alias=AliasChoices("userId", "user_id"))
    username: Optional[str] = None
    rank: Optional[int] = None
    month: Optional[str] = None
    usd_amount: float = Field(0.0, validation_alias=AliasChoices("usdAmount", "usd_amount"))
    reward_type: Optional[str] = Field(None, validation_alias=AliasChoices("rewardType", "reward_type"))
    status: Optional[str] = None
    kyc_status: Optional[str] = Field(None, validation_alias=AliasChoices("kycStatus", "kyc_status"))
