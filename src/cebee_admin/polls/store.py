"""Firestore-backed poll scheduling used by the console's poll pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from cebee_admin.config import DEFAULT_POLL_RULES, PollRules
from cebee_admin.firestore import FIXTURES, LEAGUES, POLLS, DocumentStore
from cebee_admin.models import Fixture, League, Poll

from .rules import PollRuleCheck, as_utc, check_poll_rules


logger = logging.getLogger(__name__)


class PollNotFound(LookupError):
    pass


class MissingLeague(ValueError):
    pass


class PollRulesViolated(ValueError):
    def __init__(self, check: PollRuleCheck):
        super().__init__("Poll does not satisfy the scheduling rules")
        self.check = check


@dataclass
class PollDraft:
    league_id: str
    start_time: datetime
    close_time: datetime


class PollScheduler:
    def __init__(self, documents: DocumentStore, rules: PollRules = DEFAULT_POLL_RULES):
        self.documents = documents
        self.rules = rules

    def polls(self) -> List[Poll]:
        """Every poll, newest first. Polls without ``createdAt`` are listed last."""

        polls = self._all_polls()
        dated = sorted(
            (poll for poll in polls if poll.created_at),
            key=lambda poll: as_utc(poll.created_at),
            reverse=True,
        )
        return dated + [poll for poll in polls if not poll.created_at]

    def _all_polls(self) -> List[Poll]:
        # Unordered: an ordered Firestore query skips documents missing the ordered field.
        return [Poll.model_validate(doc) for doc in self.documents.list(POLLS)]

    def poll(self, poll_id: str) -> Poll:
        doc = self.documents.get(POLLS, poll_id)
        if doc is None:
            raise PollNotFound(poll_id)
        return Poll.model_validate(doc)

    def active_leagues(self) -> List[League]:
        docs = self.documents.list(LEAGUES, filters=[("isActive", "==", True)])
        return sorted((League.model_validate(doc) for doc in docs), key=lambda league: league.name.lower())

    def league_fixtures(self, league_id: str) -> List[Fixture]:
        if not league_id:
            return []
        docs = self.documents.list(FIXTURES, filters=[("leagueId", "==", league_id)])
        fixtures = [Fixture.model_validate(doc) for doc in docs]
        return sorted(fixtures, key=lambda fixture: fixture.kickoff_time or datetime.max.replace(tzinfo=timezone.utc))

    def default_draft(self, now: Optional[datetime] = None) -> PollDraft:
        start = (now or datetime.now(timezone.utc)).replace(second=0, microsecond=0)
        return PollDraft("", start, start + timedelta(hours=self.rules.default_duration_hours))

    def check(self, draft: PollDraft, *, editing_poll_id: Optional[str] = None) -> PollRuleCheck:
        return check_poll_rules(
            draft.league_id,
            draft.start_time,
            draft.close_time,
            self._all_polls(),
            editing_poll_id=editing_poll_id,
            selectable_league_ids={league.id for league in self.active_leagues()},
            rules=self.rules,
        )

    def save(self, draft: PollDraft, *, poll_id: Optional[str] = None) -> str:
        """Create or update a poll as ``active``.

        Raises :class:`PollRulesViolated` without writing when any rule fails,
        and :class:`MissingLeague` when no league is given.
        """

        if not draft.league_id.strip():
            raise MissingLeague("League is required")
        check = self.check(draft, editing_poll_id=poll_id)
        if not check.all_satisfied:
            raise PollRulesViolated(check)

        league = next((item for item in self.active_leagues() if item.id == draft.league_id), None)
        data = {
            "leagueId": draft.league_id,
            "leagueName": league.name if league else "",
            "startTime": draft.start_time,
            "closeTime": draft.close_time,
            "status": "active",
        }
        if poll_id:
            self.poll(poll_id)
            self.documents.update(POLLS, poll_id, data)
            logger.info("Poll %s updated for league %s", poll_id, draft.league_id)
            return poll_id
        new_id = self.documents.create(POLLS, {**data, "voteCount": 0})
        logger.info("Poll %s created for league %s", new_id, draft.league_id)
        return new_id

    def close(self, poll_id: str) -> None:
        self.poll(poll_id)
        self.documents.update(POLLS, poll_id, {"status": "closed"})
        logger.info("Poll %s closed", poll_id)
