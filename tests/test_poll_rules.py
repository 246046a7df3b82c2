from datetime import datetime, timedelta, timezone

import pytest

from cebee_admin.config import DEFAULT_POLL_RULES, PollRules
from cebee_admin.models import Poll
from cebee_admin.polls import check_poll_rules, whole_days, whole_hours


START = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _active(poll_id: str, league_id: str, status: str = "active") -> dict:
    return {"id": poll_id, "leagueId": league_id, "status": status}


def test_example_scenario_blocks_second_poll_for_same_league():
    polls = [_active("p1", "L1"), _active("p2", "L2"), _active("p3", "L3")]

    check = check_poll_rules("L1", START, START + timedelta(hours=48), polls)

    assert check.one_poll_per_league is False
    assert check.max_five_active is True
    assert check.close_after_start is True
    assert check.duration_valid is True
    assert check.duration_hours == 48
    assert check.duration_days == 2
    assert check.conflicting_poll_ids == ("p1",)
    assert check.all_satisfied is False


def test_editing_a_poll_does_not_conflict_with_itself():
    polls = [_active("p1", "L1"), _active("p2", "L2"), _active("p3", "L3")]

    check = check_poll_rules("L1", START, START + timedelta(hours=48), polls, editing_poll_id="p1")

    assert check.one_poll_per_league is True
    assert check.active_polls == 2
    assert check.all_satisfied is True


@pytest.mark.parametrize(
    "close, expected",
    [
        (START, False),
        (START - timedelta(minutes=1), False),
        (START + timedelta(seconds=1), True),
    ],
)
def test_close_must_be_strictly_after_start(close, expected):
    assert check_poll_rules("L1", START, close, []).close_after_start is expected


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(hours=24), True),
        (timedelta(hours=23, minutes=59), False),
        (timedelta(hours=720), True),
        (timedelta(hours=720, minutes=59), True),
        (timedelta(hours=721), False),
    ],
)
def test_duration_window_uses_whole_hours(duration, expected):
    assert check_poll_rules("L1", START, START + duration, []).duration_valid is expected


def test_reversed_times_report_negative_truncated_duration():
    check = check_poll_rules("L1", START, START - timedelta(hours=25, minutes=30), [])

    assert check.duration_hours == -25
    assert check.duration_days == -1
    assert check.duration_valid is False
    assert check.close_after_start is False


@pytest.mark.parametrize("active_count, expected", [(4, True), (5, False)])
def test_global_cap_on_active_polls(active_count, expected):
    polls = [_active(f"p{i}", f"other{i}") for i in range(active_count)]

    check = check_poll_rules("L1", START, START + timedelta(hours=48), polls)

    assert check.max_five_active is expected
    assert check.active_polls == active_count


def test_only_active_polls_count():
    polls = [
        _active("p1", "L1", status="closed"),
        _active("p2", "L1", status="draft"),
        {"id": "p3", "leagueId": "L2", "pollStatus": "active"},
    ]

    check = check_poll_rules("L1", START, START + timedelta(hours=48), polls)

    assert check.one_poll_per_league is True
    assert check.active_polls == 1


def test_accepts_poll_models_and_legacy_status_key():
    poll = Poll.model_validate({"id": "p9", "leagueId": "L1", "pollStatus": "active"})

    check = check_poll_rules("L1", START, START + timedelta(hours=48), [poll])

    assert check.one_poll_per_league is False
    assert check.conflicting_poll_ids == ("p9",)


def test_unselected_or_inactive_league_satisfies_per_league_rule():
    polls = [_active("p1", "L1")]

    no_league = check_poll_rules("", START, START + timedelta(hours=48), polls)
    inactive = check_poll_rules(
        "L1", START, START + timedelta(hours=48), polls, selectable_league_ids={"L2"}
    )

    assert no_league.one_poll_per_league is True
    assert inactive.one_poll_per_league is True
    assert inactive.conflicting_poll_ids == ()


def test_naive_times_are_read_as_utc():
    naive_start = datetime(2025, 3, 1, 12, 0)

    check = check_poll_rules("L1", naive_start, START + timedelta(hours=30), [])

    assert check.duration_hours == 30
    assert check.close_after_start is True


def test_custom_rules_change_the_limits():
    rules = PollRules(
        max_active_polls=2,
        min_duration_hours=1,
        max_duration_hours=12,
        default_duration_hours=6,
        excluded_teams=(),
    )
    polls = [_active("p1", "A"), _active("p2", "B")]

    check = check_poll_rules("C", START, START + timedelta(hours=6), polls, rules=rules)

    assert check.max_five_active is False
    assert check.duration_valid is True


def test_as_dict_uses_camel_case_keys():
    data = check_poll_rules("L1", START, START + timedelta(hours=48), []).as_dict()

    assert data["onePollPerLeague"] is True
    assert data["durationHours"] == 48
    assert data["allSatisfied"] is True


def test_truncation_helpers():
    assert whole_hours(timedelta(minutes=119)) == 1
    assert whole_hours(timedelta(minutes=-119)) == -1
    assert whole_days(timedelta(hours=47)) == 1


def test_default_rules_summary():
    assert DEFAULT_POLL_RULES.summary() == "One poll per league • Max 5 active • 24h-30d duration"
    assert DEFAULT_POLL_RULES.excluded_teams == ("Manchester United",)
