from datetime import datetime, timedelta, timezone

import pytest

from cebee_admin.config import PollRules
from cebee_admin.firestore import LEAGUES, POLLS
from cebee_admin.models import Poll, Prediction, Reward
from cebee_admin.polls import MissingLeague, PollDraft, PollNotFound, PollRulesViolated, PollScheduler


NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def scheduler(fake_db, documents):
    fake_db.seed(LEAGUES, "L1", {"name": "Premier League", "isActive": True})
    fake_db.seed(LEAGUES, "L2", {"name": "La Liga", "isActive": True})
    fake_db.seed(LEAGUES, "L3", {"name": "Old League", "isActive": False})
    return PollScheduler(documents)


# DocumentStore


def test_create_stamps_timestamps_and_returns_id(fake_db, documents):
    doc_id = documents.create("notifications", {"title": "Hi"})

    stored = fake_db.collection("notifications").docs[doc_id]
    assert stored["title"] == "Hi"
    assert isinstance(stored["createdAt"], datetime)
    assert isinstance(stored["updatedAt"], datetime)


def test_get_returns_document_with_id(fake_db, documents):
    fake_db.seed("fixtures", "f1", {"venue": "Emirates"})

    assert documents.get("fixtures", "f1") == {"venue": "Emirates", "id": "f1"}
    assert documents.get("fixtures", "missing") is None


def test_list_filters_orders_and_limits(fake_db, documents):
    fake_db.seed("predictions", "a", {"userId": "u1", "createdAt": NOW})
    fake_db.seed("predictions", "b", {"userId": "u1", "createdAt": NOW + timedelta(hours=1)})
    fake_db.seed("predictions", "c", {"userId": "u2", "createdAt": NOW + timedelta(hours=2)})

    newest = documents.list("predictions", order_by="createdAt", descending=True, limit=2)
    mine = documents.list("predictions", filters=[("userId", "==", "u1")], order_by="createdAt")

    assert [doc["id"] for doc in newest] == ["c", "b"]
    assert [doc["id"] for doc in mine] == ["a", "b"]


def test_update_and_delete(fake_db, documents):
    fake_db.seed("faqs", "q1", {"question": "Why?"})

    documents.update("faqs", "q1", {"answer": "Because"})
    assert fake_db.collection("faqs").docs["q1"]["answer"] == "Because"
    assert "updatedAt" in fake_db.collection("faqs").docs["q1"]

    documents.delete("faqs", "q1")
    assert documents.get("faqs", "q1") is None


# PollScheduler


def test_active_leagues_are_sorted_by_name(scheduler):
    assert [league.id for league in scheduler.active_leagues()] == ["L2", "L1"]


def test_default_draft_uses_default_duration(scheduler):
    draft = scheduler.default_draft(NOW.replace(second=42))

    assert draft.league_id == ""
    assert draft.start_time == NOW
    assert draft.close_time - draft.start_time == timedelta(hours=48)


def test_save_creates_active_poll(fake_db, scheduler):
    poll_id = scheduler.save(PollDraft("L1", NOW, NOW + timedelta(hours=48)))

    stored = fake_db.collection(POLLS).docs[poll_id]
    assert stored["status"] == "active"
    assert stored["leagueName"] == "Premier League"
    assert stored["voteCount"] == 0
    assert scheduler.poll(poll_id).league_id == "L1"


def test_second_poll_for_league_is_rejected(fake_db, scheduler):
    scheduler.save(PollDraft("L1", NOW, NOW + timedelta(hours=48)))

    with pytest.raises(PollRulesViolated) as excinfo:
        scheduler.save(PollDraft("L1", NOW, NOW + timedelta(hours=72)))

    assert excinfo.value.check.one_poll_per_league is False
    assert len(fake_db.collection(POLLS).docs) == 1


def test_editing_keeps_the_poll_valid(fake_db, scheduler):
    poll_id = scheduler.save(PollDraft("L1", NOW, NOW + timedelta(hours=48)))

    assert scheduler.save(PollDraft("L1", NOW, NOW + timedelta(hours=96)), poll_id=poll_id) == poll_id
    assert fake_db.collection(POLLS).docs[poll_id]["closeTime"] == NOW + timedelta(hours=96)


def test_short_duration_is_rejected(scheduler):
    with pytest.raises(PollRulesViolated) as excinfo:
        scheduler.save(PollDraft("L2", NOW, NOW + timedelta(hours=12)))

    assert excinfo.value.check.duration_valid is False
    assert excinfo.value.check.duration_hours == 12


def test_inactive_league_skips_per_league_rule(fake_db, scheduler):
    fake_db.seed(POLLS, "old", {"leagueId": "L3", "status": "active", "createdAt": NOW})

    check = scheduler.check(PollDraft("L3", NOW, NOW + timedelta(hours=48)))

    assert check.one_poll_per_league is True
    assert check.active_polls == 1


def test_global_cap_with_custom_rules(fake_db, documents):
    rules = PollRules(
        max_active_polls=1,
        min_duration_hours=24,
        max_duration_hours=720,
        default_duration_hours=48,
        excluded_teams=(),
    )
    fake_db.seed(LEAGUES, "L1", {"name": "Premier League", "isActive": True})
    fake_db.seed(POLLS, "p1", {"leagueId": "other", "status": "active", "createdAt": NOW})

    check = PollScheduler(documents, rules).check(PollDraft("L1", NOW, NOW + timedelta(hours=48)))

    assert check.max_five_active is False


def test_close_marks_poll_closed(fake_db, scheduler):
    poll_id = scheduler.save(PollDraft("L1", NOW, NOW + timedelta(hours=48)))

    scheduler.close(poll_id)

    assert fake_db.collection(POLLS).docs[poll_id]["status"] == "closed"
    assert scheduler.check(PollDraft("L1", NOW, NOW + timedelta(hours=48))).one_poll_per_league is True


def test_missing_poll_raises(scheduler):
    with pytest.raises(PollNotFound):
        scheduler.close("nope")
    with pytest.raises(PollNotFound):
        scheduler.save(PollDraft("L2", NOW, NOW + timedelta(hours=48)), poll_id="nope")


def test_league_fixtures_sorted_by_kickoff(fake_db, scheduler):
    fake_db.seed("fixtures", "late", {"leagueId": "L1", "kickoffTime": NOW + timedelta(days=2)})
    fake_db.seed("fixtures", "early", {"leagueId": "L1", "kickoffTime": NOW})
    fake_db.seed("fixtures", "other", {"leagueId": "L2", "kickoffTime": NOW})

    assert [fixture.id for fixture in scheduler.league_fixtures("L1")] == ["early", "late"]
    assert scheduler.league_fixtures("") == []


def test_polls_without_created_at_still_count(fake_db, scheduler):
    fake_db.seed(LEAGUES, "L9", {"name": "Serie A", "isActive": True})
    for index in range(5):
        fake_db.seed(POLLS, f"other{index}", {"leagueId": f"X{index}", "status": "active"})
    fake_db.seed(POLLS, "imported", {"leagueId": "L9", "status": "active"})

    check = scheduler.check(PollDraft("L9", NOW, NOW + timedelta(hours=48)))

    assert check.active_polls == 6
    assert check.one_poll_per_league is False
    assert check.conflicting_poll_ids == ("imported",)
    assert check.max_five_active is False
    with pytest.raises(PollRulesViolated):
        scheduler.save(PollDraft("L9", NOW, NOW + timedelta(hours=48)))


def test_polls_listing_puts_undated_polls_last(fake_db, scheduler):
    fake_db.seed(POLLS, "undated", {"leagueId": "L1", "status": "closed"})
    fake_db.seed(POLLS, "older", {"leagueId": "L1", "status": "closed", "createdAt": NOW})
    fake_db.seed(POLLS, "newer", {"leagueId": "L2", "status": "active", "createdAt": NOW + timedelta(days=1)})

    assert [poll.id for poll in scheduler.polls()] == ["newer", "older", "undated"]


def test_save_without_league_is_rejected(fake_db, scheduler):
    with pytest.raises(MissingLeague, match="League is required"):
        scheduler.save(PollDraft("  ", NOW, NOW + timedelta(hours=48)))

    assert fake_db.collection(POLLS).docs == {}


# Documents with null fields


def test_null_status_falls_back_to_legacy_poll_status(fake_db, scheduler):
    fake_db.seed(POLLS, "legacy", {"leagueId": "L1", "status": None, "pollStatus": "active", "voteCount": None})
    fake_db.seed(POLLS, "blank", {"leagueId": "L2", "status": " ", "pollStatus": "active"})

    legacy = scheduler.poll("legacy")
    check = scheduler.check(PollDraft("L1", NOW, NOW + timedelta(hours=48)))

    assert legacy.status == "active"
    assert legacy.vote_count == 0
    assert scheduler.poll("blank").is_active
    assert check.conflicting_poll_ids == ("legacy",)
    assert check.active_polls == 2


def test_poll_without_any_status_is_a_draft():
    assert Poll.model_validate({"status": None}).status == "draft"


def test_null_amounts_use_defaults():
    prediction = Prediction.model_validate({"userId": "u1", "spEarned": None, "createdAt": None})
    reward = Reward.model_validate({"userId": "u1", "usdAmount": None, "status": "pending"})

    assert prediction.sp_earned == 0.0
    assert prediction.created_at is None
    assert reward.usd_amount == 0.0
    assert reward.status == "pending"
