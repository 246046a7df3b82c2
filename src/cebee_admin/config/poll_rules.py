"""Scheduling limits applied to league polls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PollRules:
    max_active_polls: int
    min_duration_hours: int
    max_duration_hours: int
    default_duration_hours: int
    excluded_teams: Tuple[str, ...]

    def summary(self) -> str:
        """Short one-line description used in page headers."""

        max_days = self.max_duration_hours // 24
        return (
            f"One poll per league • Max {self.max_active_polls} active • "
            f"{self.min_duration_hours}h-{max_days}d duration"
        )


DEFAULT_POLL_RULES = PollRules(
    max_active_polls=5,
    min_duration_hours=24,
    max_duration_hours=30 * 24,
    default_duration_hours=48,
    excluded_teams=("Manchester United",),
)
