"""Eligibility rules for scheduling a league poll.

The checks mirror what the poll form shows next to its submit button:

* only one active poll per league,
* fewer than ``max_active_polls`` active polls across all leagues,
* the close time strictly after the start time,
* a duration, in whole hours, inside the inclusive
  ``[min_duration_hours, max_duration_hours]`` window.

A failed rule never raises; it only keeps :attr:`PollRuleCheck.all_satisfied`
false so callers can keep the save action disabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Collection, Iterable, Mapping, Optional

from cebee_admin.config import DEFAULT_POLL_RULES, PollRules
from cebee_admin.models.poll import Poll


PollLike = Poll | Mapping[str, Any]


@dataclass(frozen=True)
class PollRuleCheck:
    """Outcome of evaluating a candidate poll against the scheduling rules."""

    one_poll_per_league: bool
    max_five_active: bool
    close_after_start: bool
    duration_valid: bool
    duration_hours: int
    duration_days: int
    active_polls: int
    conflicting_poll_ids: tuple[str, ...] = ()

    @property
    def all_satisfied(self) -> bool:
        return (
            self.one_poll_per_league
            and self.max_five_active
            and self.close_after_start
            and self.duration_valid
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "onePollPerLeague": self.one_poll_per_league,
            "maxFiveActive": self.max_five_active,
            "closeAfterStart": self.close_after_start,
            "durationValid": self.duration_valid,
            "durationHours": self.duration_hours,
            "durationDays": self.duration_days,
            "activePolls": self.active_polls,
            "conflictingPollIds": list(self.conflicting_poll_ids),
            "allSatisfied": self.all_satisfied,
        }


def poll_status(poll: PollLike) -> str:
    if isinstance(poll, Poll):
        return poll.status or ""
    return str(poll.get("status") or poll.get("pollStatus") or "")


def _poll_league(poll: PollLike) -> str:
    if isinstance(poll, Poll):
        return poll.league_id
    return str(poll.get("leagueId") or poll.get("league_id") or "")


def _poll_id(poll: PollLike) -> str:
    if isinstance(poll, Poll):
        return poll.id
    return str(poll.get("id") or "")


def as_utc(value: datetime) -> datetime:
    # Naive values are read as UTC so mixed inputs stay comparable.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def whole_hours(delta: timedelta) -> int:
    """Whole hours in ``delta``, truncated toward zero."""

    return int(delta / timedelta(hours=1))


def whole_days(delta: timedelta) -> int:
    """Whole days in ``delta``, truncated toward zero."""

    return int(delta / timedelta(days=1))


def check_poll_rules(
    league_id: str,
    start_time: datetime,
    close_time: datetime,
    polls: Iterable[PollLike],
    *,
    editing_poll_id: Optional[str] = None,
    selectable_league_ids: Optional[Collection[str]] = None,
    rules: PollRules = DEFAULT_POLL_RULES,
) -> PollRuleCheck:
    """Evaluate the scheduling rules for a candidate poll.

    ``editing_poll_id`` removes the poll being edited from both the per-league
    and the global counts, so an active poll never conflicts with itself.
    When ``selectable_league_ids`` is given and ``league_id`` is not one of
    them (no league picked yet, or an inactive one), the per-league rule is
    reported as satisfied.
    """

    active = [
        poll
        for poll in polls
        if poll_status(poll) == "active"
        and (not editing_poll_id or _poll_id(poll) != editing_poll_id)
    ]
    league_conflicts = tuple(
        _poll_id(poll) for poll in active if league_id and _poll_league(poll) == league_id
    )
    league_selected = bool(league_id) and (
        selectable_league_ids is None or league_id in selectable_league_ids
    )

    start = as_utc(start_time)
    close = as_utc(close_time)
    delta = close - start
    hours = whole_hours(delta)

    return PollRuleCheck(
        one_poll_per_league=not league_selected or not league_conflicts,
        max_five_active=len(active) < rules.max_active_polls,
        close_after_start=close > start,
        duration_valid=rules.min_duration_hours <= hours <= rules.max_duration_hours,
        duration_hours=hours,
        duration_days=whole_days(delta),
        active_polls=len(active),
        conflicting_poll_ids=league_conflicts if league_selected else (),
    )
