from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from cebee_admin.polls import PollRuleCheck


class PollCheckRequest(BaseModel):
    league_id: str = ""
    start_time: datetime
    close_time: datetime
    editing_poll_id: str | None = None


class PollCheckResponse(BaseModel):
    one_poll_per_league: bool
    max_five_active: bool
    close_after_start: bool
    duration_valid: bool
    duration_hours: int
    duration_days: int
    active_polls: int
    conflicting_poll_ids: list[str] = Field(default_factory=list)
    all_satisfied: bool

    @classmethod
    def from_check(cls, check: PollRuleCheck) -> "PollCheckResponse":
        return cls(
            one_poll_per_league=check.one_poll_per_league,
            max_five_active=check.max_five_active,
            close_after_start=check.close_after_start,
            duration_valid=check.duration_valid,
            duration_hours=check.duration_hours,
            duration_days=check.duration_days,
            active_polls=check.active_polls,
            conflicting_poll_ids=list(check.conflicting_poll_ids),
            all_satisfied=check.all_satisfied,
        )
