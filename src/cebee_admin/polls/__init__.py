"""Poll scheduling rules."""

from .rules import PollRuleCheck, check_poll_rules, poll_status, whole_days, whole_hours
from .store import MissingLeague, PollDraft, PollNotFound, PollRulesViolated, PollScheduler

__all__ = [
    "MissingLeague",
    "PollDraft",
    "PollNotFound",
    "PollRuleCheck",
    "PollRulesViolated",
    "PollScheduler",
    "check_poll_rules",
    "poll_status",
    "whole_days",
    "whole_hours",
]
