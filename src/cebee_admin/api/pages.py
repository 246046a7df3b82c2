"""HTML rendering for the admin console pages."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from html import escape
from typing import Any, Iterable, Mapping, Sequence

from cebee_admin.config import DEFAULT_POLL_RULES, PollRules
from cebee_admin.models import (
    DashboardData,
    FaqItem,
    Fixture,
    League,
    Notification,
    PlatformSettings,
    Player,
    Poll,
    Prediction,
    Reward,
    SystemLog,
    Team,
    User,
    UserDetails,
    format_datetime,
)
from cebee_admin.models.settings import DATE_FORMATS, TIME_FORMATS
from cebee_admin.client.content import DOCUMENT_KINDS, DocumentKind
from cebee_admin.client.engagement import AUDIENCE_TARGETS, REWARD_STATUSES
from cebee_admin.polls import PollDraft, PollRuleCheck


NAV_ITEMS: list[tuple[str, str]] = [
    ("/ui", "Dashboard"),
    ("/ui/users", "Users"),
    ("/ui/fixtures", "Fixtures"),
    ("/ui/leagues", "Leagues"),
    ("/ui/teams", "Teams"),
    ("/ui/predictions", "Predictions"),
    ("/ui/leaderboard", "Leaderboard"),
    ("/ui/rewards", "Rewards"),
    ("/ui/notifications", "Notifications"),
    ("/ui/polls", "Polls"),
    ("/ui/referrals", "Referrals"),
    ("/ui/content", "Content"),
    ("/ui/logs", "System logs"),
    ("/ui/settings", "Settings"),
]

AUDIENCE_LABELS: list[tuple[str, str]] = [
    ("all", "All users"),
    ("active-30", "Active in last 30 days"),
    ("inactive", "Inactive users"),
    ("winners", "Winners"),
    ("flagged", "Flagged users"),
    ("by-country", "By country"),
    ("by-league", "By league preference"),
    ("by-club", "By club preference"),
]

FIXTURE_KINDS: list[tuple[str, str]] = [
    ("regular", "Regular"),
    ("cebe", "CeBe Featured"),
    ("community", "Community Featured"),
]

LEADERBOARD_PERIODS: list[tuple[str, str]] = [
    ("allTime", "All time"),
    ("last7days", "Last 7 days"),
    ("last30days", "Last 30 days"),
    ("monthly", "This month"),
]

_ACTIVE = ' class="active"'

_STYLE = """
        body { font-family: Arial, sans-serif; margin: 0; background: #f5f7fa; display: flex; min-height: 100vh; }
        aside { width: 220px; background: #0f172a; color: #e2e8f0; padding: 1.5rem 1rem; }
        aside h2 { font-size: 1.1rem; margin: 0 0 1.5rem; }
        aside a { display: block; color: #cbd5e1; text-decoration: none; padding: 0.45rem 0.6rem; border-radius: 6px; }
        aside a.active { background: #2563eb; color: #fff; }
        .shell { flex: 1; display: flex; flex-direction: column; }
        header.topbar { display: flex; justify-content: space-between; align-items: center; padding: 1rem 2rem; background: #fff; border-bottom: 1px solid #e2e8f0; }
        header.topbar form { margin: 0; display: inline; }
        main { background: #fff; margin: 2rem; padding: 2rem; border-radius: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.08); }
        form { display: grid; gap: 0.75rem; margin-bottom: 1.5rem; }
        form.inline { display: inline-flex; gap: 0.5rem; margin: 0; align-items: center; }
        label { font-weight: 600; }
        input, select, textarea { padding: 0.5rem; border-radius: 6px; border: 1px solid #cbd5e1; }
        button { padding: 0.5rem 1rem; border-radius: 6px; border: none; background: #2563eb; color: #fff; cursor: pointer; }
        button.secondary { background: #475569; }
        button.danger { background: #b91c1c; }
        button:disabled { background: #94a3b8; cursor: not-allowed; }
        table { border-collapse: collapse; width: 100%; margin-top: 1rem; }
        th, td { padding: 0.5rem; border: 1px solid #e2e8f0; text-align: left; vertical-align: top; }
        .cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 1rem; }
        .card { border: 1px solid #e2e8f0; border-radius: 8px; padding: 1rem; background: #f8fafc; }
        .card strong { display: block; font-size: 1.5rem; margin-top: 0.25rem; }
        .hint { color: #475569; margin: 0; }
        .rules { list-style: none; padding: 0; }
        .rules li.ok { color: #047857; }
        .rules li.pending { color: #64748b; }
        .badge { padding: 0.1rem 0.5rem; border-radius: 999px; background: #e2e8f0; font-size: 0.85rem; }
        .badge.active, .badge.online { background: #dcfce7; color: #166534; }
        .badge.maintenance, .badge.closed { background: #fee2e2; color: #991b1b; }
        .notice { margin: 0.5rem 0; padding: 0.75rem 1rem; border-radius: 6px; }
        .notice.success { background: #ecfdf5; color: #065f46; border: 1px solid #a7f3d0; }
        .notice.error { background: #fef2f2; color: #991b1b; border: 1px solid #fecaca; }
        .notice.info { background: #eff6ff; color: #1e3a8a; border: 1px solid #bfdbfe; }
"""


def _render_page(
    body: str,
    *,
    title: str,
    active: str = "",
    user: Mapping[str, Any] | None = None,
    head_extra: str = "",
) -> str:
    nav_html = "".join(
        f"<a href=\"{href}\"{_ACTIVE if href == active else ''}>{escape(label)}</a>"
        for href, label in NAV_ITEMS
    )
    user_html = ""
    if user:
        name = user.get("name") or user.get("email") or "Admin"
        user_html = (
            f"<span>{escape(str(name))}</span> "
            "<form method=\"post\" action=\"/logout\"><button type=\"submit\" class=\"secondary\">Logout</button></form>"
        )
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>{escape(title)} · CeBee Predict Admin</title>
    {head_extra}
    <style>{_STYLE}</style>
</head>
<body>
    <aside><h2>CeBee Predict</h2><nav>{nav_html}</nav></aside>
    <div class=\"shell\">
        <header class=\"topbar\"><h1>{escape(title)}</h1><div>{user_html}</div></header>
        <main>{body}</main>
    </div>
</body>
</html>"""


def _notices(notice: str | None = None, error: str | None = None) -> str:
    html = ""
    if notice:
        html += f"<div class=\"notice success\">{escape(notice)}</div>"
    if error:
        html += f"<div class=\"notice error\">{escape(error)}</div>"
    return html


def _options(choices: Iterable[tuple[str, str]], selected: str | None) -> str:
    return "".join(
        f"<option value=\"{escape(value)}\"{' selected' if value == selected else ''}>{escape(label)}</option>"
        for value, label in choices
    )


def _league_choices(leagues: Sequence[League]) -> list[tuple[str, str]]:
    return [(league.id, league.name or league.id) for league in leagues]


def _input_value(value: datetime | None) -> str:
    """Format a datetime for an ``<input type="datetime-local">`` (UTC)."""

    if value is None:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M")


def _badge(status: str | None) -> str:
    status = status or "unknown"
    return f"<span class=\"badge {escape(status)}\">{escape(status)}</span>"


def _table(headers: Sequence[str], rows: list[str], empty: str) -> str:
    if not rows:
        return f"<p class=\"hint\">{escape(empty)}</p>"
    head = "".join(f"<th>{escape(header)}</th>" for header in headers)
    return f"<table><thead><tr>{head}</tr></thead><tbody>{''.join(rows)}</tbody></table>"


def render_login_page(error: str | None = None) -> str:
    body = _notices(error=error) + """
        <form method=\"post\" action=\"/login\">
            <label for=\"email\">Email</label>
            <input id=\"email\" name=\"email\" type=\"email\" required>
            <label for=\"password\">Password</label>
            <input id=\"password\" name=\"password\" type=\"password\" required>
            <button type=\"submit\">Sign in</button>
        </form>
    """
    return _render_page(body, title="Sign in")


def format_countdown(delta: timedelta) -> str:
    """Human countdown such as ``1d 02h 05m 09s``; ``Kicked off`` once due."""

    seconds = int(delta.total_seconds())
    if seconds <= 0:
        return "Kicked off"
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"{days}d {hours:02d}h {minutes:02d}m {seconds:02d}s"


_COUNTDOWN_SCRIPT = """
<script>
(function () {
    const el = document.getElementById('countdown');
    if (!el || !el.dataset.kickoff) { return; }
    const target = new Date(el.dataset.kickoff).getTime();
    const pad = (n) => String(n).padStart(2, '0');
    function tick() {
        let s = Math.floor((target - Date.now()) / 1000);
        if (s <= 0) { el.textContent = 'Kicked off'; return; }
        const d = Math.floor(s / 86400); s %= 86400;
        const h = Math.floor(s / 3600); s %= 3600;
        const m = Math.floor(s / 60); s %= 60;
        el.textContent = `${d}d ${pad(h)}h ${pad(m)}m ${pad(s)}s`;
    }
    tick();
    setInterval(tick, 1000);
})();
</script>
"""


def render_dashboard_page(
    data: DashboardData,
    *,
    user: Mapping[str, Any] | None,
    refresh_seconds: int,
    settings: PlatformSettings | None = None,
    error: str | None = None,
    now: datetime | None = None,
) -> str:
    now = now or datetime.now(timezone.utc)
    stats = data.stats
    today = data.today_summary
    cards = [
        ("Total users", f"{stats.total_users:,}"),
        ("Active users", f"{stats.active_users:,}"),
        ("SP issued", f"{stats.total_sp_issued:,.0f}"),
        ("Estimated rewards", f"${stats.estimated_rewards_value:,.2f}"),
        ("Matches today", str(today.total_matches)),
        ("Completed", str(today.completed_matches)),
        ("Live", str(today.live_matches)),
        ("Pending results", str(today.pending_results)),
    ]
    cards_html = "".join(
        f"<div class=\"card\">{escape(label)}<strong>{escape(value)}</strong></div>" for label, value in cards
    )

    next_html = "<p class=\"hint\">No upcoming fixture.</p>"
    fixture = data.next_fixture
    if fixture:
        countdown = ""
        if fixture.kickoff_time:
            kickoff = fixture.kickoff_time
            if kickoff.tzinfo is None:
                kickoff = kickoff.replace(tzinfo=timezone.utc)
            countdown = (
                f"<p>Kick-off in <strong id=\"countdown\" data-kickoff=\"{escape(kickoff.isoformat())}\">"
                f"{escape(format_countdown(kickoff - now))}</strong></p>"
            )
        league = f" <span class=\"hint\">{escape(fixture.league_name)}</span>" if fixture.league_name else ""
        next_html = (
            f"<h3>{escape(fixture.label)}{league}</h3>"
            f"<p>{escape(format_datetime(fixture.kickoff_time, settings))}</p>{countdown}"
        )

    alert_rows = [
        "<tr>"
        f"<td>{escape(str(alert.get('severity') or ''))}</td>"
        f"<td>{escape(str(alert.get('title') or alert.get('type') or ''))}</td>"
        f"<td>{escape(str(alert.get('message') or alert.get('description') or ''))}</td>"
        "</tr>"
        for alert in data.alerts
    ]
    body = (
        _notices(error=error)
        + f"<section><div class=\"cards\">{cards_html}</div></section>"
        + f"<section><h2>Next fixture</h2>{next_html}</section>"
        + "<section><h2>High-risk alerts</h2>"
        + _table(["Severity", "Alert", "Details"], alert_rows, "No critical alerts.")
        + f"</section><p class=\"hint\">Refreshes every {refresh_seconds // 60} minutes.</p>"
        + _COUNTDOWN_SCRIPT
    )
    head = f"<meta http-equiv=\"refresh\" content=\"{int(refresh_seconds)}\">"
    return _render_page(body, title="Dashboard", active="/ui", user=user, head_extra=head)


def render_fixtures_page(
    fixtures: Sequence[Fixture],
    leagues: Sequence[League],
    *,
    user: Mapping[str, Any] | None,
    settings: PlatformSettings | None = None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    rows = []
    for fixture in fixtures:
        score = (
            f"{fixture.home_score} - {fixture.away_score}"
            if fixture.home_score is not None and fixture.away_score is not None
            else "—"
        )
        rows.append(
            "<tr>"
            f"<td>{escape(fixture.label)}</td>"
            f"<td>{escape(format_datetime(fixture.kickoff_time, settings))}</td>"
            f"<td>{escape(fixture.venue or '')}</td>"
            f"<td>{_badge(fixture.status)}</td>"
            f"<td>{escape(score)}</td>"
            "<td>"
            f"<form class=\"inline\" method=\"post\" action=\"/ui/fixtures/{escape(fixture.id)}/results\">"
            "<input name=\"home_score\" type=\"number\" min=\"0\" placeholder=\"Home\" required>"
            "<input name=\"away_score\" type=\"number\" min=\"0\" placeholder=\"Away\" required>"
            "<button type=\"submit\">Save result</button></form> "
            f"<form class=\"inline\" method=\"post\" action=\"/ui/fixtures/{escape(fixture.id)}/delete\">"
            "<button type=\"submit\" class=\"danger\">Delete</button></form>"
            "</td></tr>"
        )
    form_html = f"""
        <h2>Schedule fixture</h2>
        <form method=\"post\" action=\"/ui/fixtures\">
            <label>League <select name=\"league_id\" required>{_options(_league_choices(leagues), None)}</select></label>
            <label>Type <select name=\"kind\">{_options(FIXTURE_KINDS, 'regular')}</select></label>
            <label>Home team ID <input name=\"home_team_id\"></label>
            <label>Away team ID <input name=\"away_team_id\"></label>
            <label>Selected team ID (community featured) <input name=\"selected_team_id\"></label>
            <label>Matchday (community featured) <input name=\"matchday\"></label>
            <label>Kick-off (UTC) <input name=\"kickoff_time\" type=\"datetime-local\" required></label>
            <label>Publish at (UTC) <input name=\"publish_time\" type=\"datetime-local\" required></label>
            <label>Venue <input name=\"venue\" required></label>
            <button type=\"submit\">Create fixture</button>
        </form>
    """
    body = (
        _notices(notice, error)
        + form_html
        + "<h2>Fixtures</h2>"
        + _table(["Match", "Kick-off", "Venue", "Status", "Score", "Actions"], rows, "No fixtures scheduled.")
    )
    return _render_page(body, title="Fixtures", active="/ui/fixtures", user=user)


def render_leagues_page(
    leagues: Sequence[League],
    *,
    user: Mapping[str, Any] | None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    rows = [
        "<tr>"
        f"<td>{escape(league.name)}</td>"
        f"<td>{escape(league.country or '')}</td>"
        f"<td>{escape(league.league_type or '')}</td>"
        f"<td>{_badge('active' if league.is_active else 'inactive')}</td>"
        "<td>"
        f"<form class=\"inline\" method=\"post\" action=\"/ui/leagues/{escape(league.id)}\">"
        f"<input name=\"league_name\" value=\"{escape(league.name)}\" required>"
        f"<input name=\"country\" value=\"{escape(league.country or '')}\">"
        "<button type=\"submit\">Update</button></form> "
        f"<form class=\"inline\" method=\"post\" action=\"/ui/leagues/{escape(league.id)}/delete\">"
        "<button type=\"submit\" class=\"danger\">Delete</button></form> "
        f"<a href=\"/ui/teams?league_id={escape(league.id)}\">Teams</a>"
        "</td></tr>"
        for league in leagues
    ]
    form_html = """
        <h2>Add league</h2>
        <form method=\"post\" action=\"/ui/leagues\">
            <label>Name <input name=\"league_name\" required></label>
            <label>Country <input name=\"country\"></label>
            <label>Type <input name=\"league_type\" placeholder=\"domestic\"></label>
            <button type=\"submit\">Create league</button>
        </form>
    """
    body = (
        _notices(notice, error)
        + form_html
        + "<h2>Leagues</h2>"
        + _table(["League", "Country", "Type", "Status", "Actions"], rows, "No leagues yet.")
    )
    return _render_page(body, title="Leagues", active="/ui/leagues", user=user)


def render_teams_page(
    teams: Sequence[Team],
    leagues: Sequence[League],
    *,
    league_filter: str | None,
    user: Mapping[str, Any] | None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    league_names = {league.id: league.name for league in leagues}
    rows = []
    for team in teams:
        actions = "".join(
            f"<form class=\"inline\" method=\"post\" action=\"/ui/teams/{escape(team.id)}/{action}\">"
            f"<input name=\"reason\" placeholder=\"Reason\" required>"
            f"<button type=\"submit\" class=\"secondary\">{action.title()}</button></form> "
            for action in ("activate", "inactivate", "promote", "relegate")
        )
        rows.append(
            "<tr>"
            f"<td><a href=\"/ui/teams/{escape(team.id)}/players\">{escape(team.name)}</a> "
            f"(<a href=\"/ui/teams/{escape(team.id)}/history\">history</a>)</td>"
            f"<td>{escape(league_names.get(team.league_id or '', team.league_id or ''))}</td>"
            f"<td>{_badge(team.status or ('active' if team.is_active else 'inactive'))}</td>"
            f"<td>{actions}</td></tr>"
        )
    filter_html = f"""
        <form class=\"inline\" method=\"get\" action=\"/ui/teams\">
            <select name=\"league_id\"><option value=\"\">All leagues</option>{_options(_league_choices(leagues), league_filter)}</select>
            <button type=\"submit\" class=\"secondary\">Filter</button>
        </form>
    """
    form_html = f"""
        <h2>Add team</h2>
        <form method=\"post\" action=\"/ui/teams\">
            <label>Name <input name=\"team_name\" required></label>
            <label>League <select name=\"league_id\" required>{_options(_league_choices(leagues), league_filter)}</select></label>
            <button type=\"submit\">Create team</button>
        </form>
    """
    body = (
        _notices(notice, error)
        + form_html
        + "<h2>Teams</h2>"
        + filter_html
        + _table(["Team", "League", "Status", "Actions"], rows, "No teams found.")
    )
    return _render_page(body, title="Teams", active="/ui/teams", user=user)


def render_players_page(
    team_id: str,
    team_name: str,
    players: Sequence[Player],
    *,
    user: Mapping[str, Any] | None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    rows = []
    for player in players:
        if player.status and player.status != "active":
            action = (
                f"<form class=\"inline\" method=\"post\" action=\"/ui/players/{escape(player.id)}/reactivate\">"
                f"<input type=\"hidden\" name=\"team_id\" value=\"{escape(team_id)}\">"
                "<button type=\"submit\">Reactivate</button></form>"
            )
        else:
            action = (
                f"<form class=\"inline\" method=\"post\" action=\"/ui/players/{escape(player.id)}/deactivate\">"
                f"<input type=\"hidden\" name=\"team_id\" value=\"{escape(team_id)}\">"
                "<select name=\"mode\"><option value=\"temporary\">Temporary</option>"
                "<option value=\"permanent\">Permanent</option></select>"
                "<input name=\"reason\" placeholder=\"Reason\" required>"
                "<label><input type=\"checkbox\" name=\"confirm\" value=\"true\"> Confirm</label>"
                "<button type=\"submit\" class=\"danger\">Deactivate</button></form>"
            )
        rows.append(
            "<tr>"
            f"<td>{escape(str(player.shirt_number or ''))}</td>"
            f"<td>{escape(player.name)}</td>"
            f"<td>{escape(player.position or '')}</td>"
            f"<td>{_badge(player.status or 'active')}</td>"
            f"<td>{escape(player.inactive_reason or '')}</td>"
            f"<td>{action}</td></tr>"
        )
    form_html = f"""
        <h2>Add player</h2>
        <form method=\"post\" action=\"/ui/teams/{escape(team_id)}/players\">
            <label>Name <input name=\"player_name\" required></label>
            <label>Position <select name=\"position\">{_options([(p, p) for p in ("GK", "DEF", "MID", "FWD")], None)}</select></label>
            <label>Shirt number <input name=\"shirt_number\" type=\"number\" min=\"1\" max=\"99\" required></label>
            <button type=\"submit\">Add player</button>
        </form>
    """
    body = (
        "<p><a href=\"/ui/teams\">← Teams</a></p>"
        + _notices(notice, error)
        + form_html
        + "<h2>Squad</h2>"
        + _table(["#", "Player", "Position", "Status", "Reason", "Actions"], rows, "No players registered.")
    )
    return _render_page(body, title=f"{team_name} players", active="/ui/teams", user=user)


def render_predictions_page(
    predictions: Sequence[Prediction],
    *,
    user: Mapping[str, Any] | None,
    settings: PlatformSettings | None = None,
) -> str:
    rows = [
        "<tr>"
        f"<td>{escape(prediction.username or prediction.user_id or '')}</td>"
        f"<td>{escape(prediction.fixture_id or '')}</td>"
        f"<td>{_badge(prediction.status)}</td>"
        f"<td>{prediction.sp_earned:g}</td>"
        f"<td>{escape(format_datetime(prediction.created_at, settings))}</td>"
        "</tr>"
        for prediction in predictions
    ]
    body = _table(["User", "Fixture", "Status", "SP", "Submitted"], rows, "No predictions yet.")
    return _render_page(body, title="Predictions", active="/ui/predictions", user=user)


def render_leaderboard_page(
    entries: Sequence[Mapping[str, Any]],
    *,
    period: str,
    search: str,
    user: Mapping[str, Any] | None,
    error: str | None = None,
) -> str:
    rows = [
        "<tr>"
        f"<td>{escape(str(entry.get('rank') or ''))}</td>"
        f"<td>{escape(str(entry.get('username') or entry.get('userId') or ''))}</td>"
        f"<td>{escape(str(entry.get('spTotal') or entry.get('sp_total') or 0))}</td>"
        f"<td>{escape(str(entry.get('accuracyRate') or entry.get('accuracy_rate') or 0))}%</td>"
        "</tr>"
        for entry in entries
    ]
    filter_html = f"""
        <form class=\"inline\" method=\"get\" action=\"/ui/leaderboard\">
            <select name=\"period\">{_options(LEADERBOARD_PERIODS, period)}</select>
            <input name=\"search\" value=\"{escape(search)}\" placeholder=\"Search username\">
            <button type=\"submit\" class=\"secondary\">Apply</button>
        </form>
    """
    body = _notices(error=error) + filter_html + _table(
        ["Rank", "User", "SP", "Accuracy"], rows, "No leaderboard entries."
    )
    return _render_page(body, title="Leaderboard", active="/ui/leaderboard", user=user)


def render_rewards_page(
    rewards: Sequence[Reward],
    *,
    status_filter: str | None,
    user: Mapping[str, Any] | None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    status_choices = [(status, status.title()) for status in REWARD_STATUSES]
    rows = [
        "<tr>"
        f"<td>{escape(reward.username or reward.user_id or '')}</td>"
        f"<td>{escape(str(reward.rank or ''))}</td>"
        f"<td>{escape(reward.month or '')}</td>"
        f"<td>${reward.usd_amount:,.2f}</td>"
        f"<td>{_badge(reward.status)}</td>"
        f"<td>{escape(reward.kyc_status or '')}</td>"
        "<td>"
        f"<form class=\"inline\" method=\"post\" action=\"/ui/rewards/{escape(reward.id)}/status\">"
        f"<select name=\"status\">{_options(status_choices, reward.status)}</select>"
        "<input name=\"decline_reason\" placeholder=\"Decline reason\">"
        "<button type=\"submit\">Update</button></form> "
        f"<form class=\"inline\" method=\"post\" action=\"/ui/rewards/{escape(reward.id)}/fulfil\">"
        "<button type=\"submit\" class=\"secondary\">Mark fulfilled</button></form>"
        "</td></tr>"
        for reward in rewards
    ]
    filter_html = f"""
        <form class=\"inline\" method=\"get\" action=\"/ui/rewards\">
            <select name=\"status\"><option value=\"\">All statuses</option>{_options(status_choices, status_filter)}</select>
            <button type=\"submit\" class=\"secondary\">Filter</button>
        </form>
    """
    body = (
        _notices(notice, error)
        + filter_html
        + _table(["User", "Rank", "Month", "Amount", "Status", "KYC", "Actions"], rows, "No rewards found.")
    )
    return _render_page(body, title="Rewards", active="/ui/rewards", user=user)


def render_notifications_page(
    notifications: Sequence[Notification],
    *,
    user: Mapping[str, Any] | None,
    settings: PlatformSettings | None = None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    audience_names = {AUDIENCE_TARGETS[key]: label for key, label in AUDIENCE_LABELS}
    rows = []
    for item in notifications:
        actions = ""
        if item.status in (None, "draft", "scheduled"):
            actions += (
                f"<form class=\"inline\" method=\"post\" action=\"/ui/notifications/{escape(item.id)}/send\">"
                "<button type=\"submit\">Send now</button></form> "
            )
        actions += (
            f"<form class=\"inline\" method=\"post\" action=\"/ui/notifications/{escape(item.id)}/delete\">"
            "<button type=\"submit\" class=\"danger\">Delete</button></form>"
        )
        when = item.sent_at or item.scheduled_for
        rows.append(
            "<tr>"
            f"<td>{escape(item.title)}</td>"
            f"<td>{escape(item.message)}</td>"
            f"<td>{escape(audience_names.get(item.target_audience or '', item.target_audience or ''))}</td>"
            f"<td>{_badge(item.status)}</td>"
            f"<td>{escape(format_datetime(when, settings))}</td>"
            f"<td>{actions}</td></tr>"
        )
    form_html = f"""
        <h2>Compose notification</h2>
        <form method=\"post\" action=\"/ui/notifications\">
            <label>Title <input name=\"title\" required></label>
            <label>Message <textarea name=\"body\" rows=\"3\" required></textarea></label>
            <label>Audience <select name=\"audience\">{_options(AUDIENCE_LABELS, 'all')}</select></label>
            <label>Deep link <input name=\"deep_link\"></label>
            <label>Schedule for (UTC, optional) <input name=\"scheduled_at\" type=\"datetime-local\"></label>
            <div class=\"form-actions\">
                <button type=\"submit\" name=\"action\" value=\"send\">Send / schedule</button>
                <button type=\"submit\" name=\"action\" value=\"draft\" class=\"secondary\">Save draft</button>
            </div>
        </form>
    """
    body = (
        _notices(notice, error)
        + form_html
        + "<h2>History</h2>"
        + _table(["Title", "Message", "Audience", "Status", "When", "Actions"], rows, "No notifications yet.")
    )
    return _render_page(body, title="Notifications", active="/ui/notifications", user=user)


def render_polls_page(
    polls: Sequence[Poll],
    *,
    rules: PollRules = DEFAULT_POLL_RULES,
    user: Mapping[str, Any] | None,
    settings: PlatformSettings | None = None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    rows = []
    for poll in polls:
        actions = f"<a href=\"/ui/polls/{escape(poll.id)}/edit\">Edit</a> "
        if poll.is_active:
            actions += (
                f"<form class=\"inline\" method=\"post\" action=\"/ui/polls/{escape(poll.id)}/close\">"
                "<button type=\"submit\" class=\"danger\">Close</button></form>"
            )
        rows.append(
            "<tr>"
            f"<td>{escape(poll.league_name or poll.league_id)}</td>"
            f"<td>{escape(format_datetime(poll.start_time, settings))}</td>"
            f"<td>{escape(format_datetime(poll.close_time, settings))}</td>"
            f"<td>{_badge(poll.status)}</td>"
            f"<td>{poll.vote_count}</td>"
            f"<td>{actions}</td></tr>"
        )
    body = (
        _notices(notice, error)
        + f"<p class=\"hint\">{escape(rules.summary())}</p>"
        + "<p><a href=\"/ui/polls/new\">Create poll</a></p>"
        + _table(["League", "Opens", "Closes", "Status", "Votes", "Actions"], rows, "No polls yet.")
    )
    return _render_page(body, title="Polls", active="/ui/polls", user=user)


def _rule_item(satisfied: bool, label: str, rule: str) -> str:
    css = "ok" if satisfied else "pending"
    mark = "✓" if satisfied else "○"
    return f"<li class=\"{css}\" data-rule=\"{rule}\"><span class=\"mark\">{mark}</span> {escape(label)}</li>"


def render_poll_checklist(check: PollRuleCheck, rules: PollRules = DEFAULT_POLL_RULES) -> str:
    excluded = ", ".join(rules.excluded_teams)
    items = [
        _rule_item(check.one_poll_per_league, "One poll per league", "onePollPerLeague"),
        _rule_item(check.max_five_active, f"Max {rules.max_active_polls} active polls", "maxFiveActive"),
        _rule_item(check.close_after_start, "Close time after start time", "closeAfterStart"),
        _rule_item(
            check.duration_valid,
            f"Duration between {rules.min_duration_hours} hours and {rules.max_duration_hours // 24} days",
            "durationValid",
        ),
        f"<li class=\"hint\">{escape(excluded)} matches are excluded</li>",
    ]
    return (
        f"<ul class=\"rules\" id=\"poll-rules\">{''.join(items)}</ul>"
        f"<div class=\"notice info\" id=\"poll-duration\">Duration: {check.duration_hours} hours "
        f"({check.duration_days} days)</div>"
    )


_POLL_FORM_SCRIPT = """
<script>
(function () {
    const form = document.getElementById('poll-form');
    if (!form) { return; }
    const submit = form.querySelector('button[type=submit]');
    async function recheck() {
        const data = new FormData(form);
        const start = data.get('start_time');
        const close = data.get('close_time');
        if (!start || !close) { submit.disabled = true; return; }
        const response = await fetch('/polls/check', {
            method: 'POST',
            headers: {'Content-Type': 'application/json'},
            body: JSON.stringify({
                league_id: data.get('league_id') || '',
                start_time: start + ':00Z',
                close_time: close + ':00Z',
                editing_poll_id: form.dataset.pollId || null,
            }),
        });
        if (!response.ok) { submit.disabled = true; return; }
        const check = await response.json();
        const flags = {
            onePollPerLeague: check.one_poll_per_league,
            maxFiveActive: check.max_five_active,
            closeAfterStart: check.close_after_start,
            durationValid: check.duration_valid,
        };
        for (const [rule, ok] of Object.entries(flags)) {
            const item = document.querySelector(`#poll-rules li[data-rule="${rule}"]`);
            if (item) {
                item.className = ok ? 'ok' : 'pending';
                item.querySelector('.mark').textContent = ok ? '✓' : '○';
            }
        }
        document.getElementById('poll-duration').textContent =
            `Duration: ${check.duration_hours} hours (${check.duration_days} days)`;
        submit.disabled = !check.all_satisfied;
    }
    form.addEventListener('change', recheck);
})();
</script>
"""


def render_poll_form_page(
    draft: PollDraft,
    check: PollRuleCheck,
    leagues: Sequence[League],
    fixtures: Sequence[Fixture],
    *,
    rules: PollRules = DEFAULT_POLL_RULES,
    poll_id: str | None = None,
    user: Mapping[str, Any] | None,
    settings: PlatformSettings | None = None,
    error: str | None = None,
) -> str:
    action = f"/ui/polls/{escape(poll_id)}" if poll_id else "/ui/polls"
    disabled = "" if check.all_satisfied else " disabled"
    fixture_rows = [
        "<tr>"
        f"<td>{escape(fixture.label)}</td>"
        f"<td>{escape(format_datetime(fixture.kickoff_time, settings))}</td>"
        "</tr>"
        for fixture in fixtures
    ]
    fixtures_html = ""
    if draft.league_id:
        fixtures_html = "<h2>League fixtures</h2>" + _table(
            ["Match", "Kick-off"], fixture_rows, "No fixtures for this league yet."
        )
    body = f"""
        <p><a href=\"/ui/polls\">← Polls</a></p>
        {_notices(error=error)}
        <p class=\"hint\">{escape(rules.summary())}</p>
        <form method=\"post\" action=\"{action}\" id=\"poll-form\" data-poll-id=\"{escape(poll_id or '')}\">
            <label>League <select name=\"league_id\" required><option value=\"\">Select a league</option>{_options(_league_choices(leagues), draft.league_id)}</select></label>
            <label>Opens (UTC) <input name=\"start_time\" type=\"datetime-local\" value=\"{_input_value(draft.start_time)}\" required></label>
            <label>Closes (UTC) <input name=\"close_time\" type=\"datetime-local\" value=\"{_input_value(draft.close_time)}\" required></label>
            {render_poll_checklist(check, rules)}
            <button type=\"submit\"{disabled}>{'Update poll' if poll_id else 'Create poll'}</button>
        </form>
        {fixtures_html}
        {_POLL_FORM_SCRIPT}
    """
    title = "Edit poll" if poll_id else "New poll"
    return _render_page(body, title=title, active="/ui/polls", user=user)


def render_referrals_page(
    referrals: Sequence[Mapping[str, Any]],
    *,
    user: Mapping[str, Any] | None,
    error: str | None = None,
) -> str:
    rows = [
        "<tr>"
        f"<td>{escape(str(item.get('referrerName') or item.get('referrerId') or ''))}</td>"
        f"<td>{escape(str(item.get('referredName') or item.get('referredUserId') or ''))}</td>"
        f"<td>{escape(str(item.get('referralCode') or ''))}</td>"
        f"<td>{_badge(str(item.get('status') or ''))}</td>"
        f"<td>{escape(str(item.get('spAwarded') or 0))}</td>"
        "</tr>"
        for item in referrals
    ]
    body = _notices(error=error) + _table(
        ["Referrer", "Referred user", "Code", "Status", "SP awarded"], rows, "No referrals yet."
    )
    return _render_page(body, title="Referrals", active="/ui/referrals", user=user)


def render_content_page(
    faqs: Sequence[FaqItem],
    *,
    user: Mapping[str, Any] | None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    statuses = [("published", "Published"), ("draft", "Draft")]
    rows = [
        "<tr><td>"
        f"<form method=\"post\" action=\"/ui/content/faqs/{escape(faq.id)}\">"
        f"<input name=\"question\" value=\"{escape(faq.question)}\" required>"
        f"<textarea name=\"answer\" rows=\"2\" required>{escape(faq.answer)}</textarea>"
        f"<select name=\"status\">{_options(statuses, faq.status or 'published')}</select>"
        "<button type=\"submit\">Save</button></form>"
        "</td><td>"
        f"<form class=\"inline\" method=\"post\" action=\"/ui/content/faqs/{escape(faq.id)}/delete\">"
        "<button type=\"submit\" class=\"danger\">Delete</button></form>"
        "</td></tr>"
        for faq in faqs
    ]
    form_html = f"""
        <h2>Add FAQ</h2>
        <form method=\"post\" action=\"/ui/content/faqs\">
            <label>Question <input name=\"question\" required></label>
            <label>Answer <textarea name=\"answer\" rows=\"3\" required></textarea></label>
            <label>Category <input name=\"category\"></label>
            <label>Status <select name=\"status\">{_options(statuses, 'published')}</select></label>
            <button type=\"submit\">Add FAQ</button>
        </form>
    """
    documents_html = " · ".join(
        f"<a href=\"/ui/content/documents/{escape(slug)}\">{escape(kind.title)}</a>"
        for slug, kind in DOCUMENT_KINDS.items()
    )
    body = (
        _notices(notice, error)
        + f"<p>{documents_html}</p>"
        + form_html
        + "<h2>FAQs</h2>"
        + _table(["FAQ", ""], rows, "No FAQs yet.")
    )
    return _render_page(body, title="Content", active="/ui/content", user=user)


def render_settings_page(
    settings: PlatformSettings,
    *,
    user: Mapping[str, Any] | None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    date_choices = [(key, label) for key, (label, _) in DATE_FORMATS.items()]
    time_choices = [(key, label) for key, (label, _) in TIME_FORMATS.items()]
    if settings.in_maintenance:
        started = format_datetime(settings.maintenance_started_at, settings)
        by = escape(settings.maintenance_started_by or "Admin")
        status_html = f"<p>{_badge('maintenance')} since {escape(started)} by {by}</p>"
        toggle_label = "Bring platform online"
    else:
        status_html = f"<p>{_badge('online')}</p>"
        toggle_label = "Enable maintenance mode"
    example = format_datetime(datetime.now(timezone.utc), settings)
    body = f"""
        {_notices(notice, error)}
        <section>
            <h2>Platform status</h2>
            {status_html}
            <form method=\"post\" action=\"/ui/settings/maintenance\"><button type=\"submit\" class=\"danger\">{toggle_label}</button></form>
        </section>
        <section>
            <h2>Maintenance message</h2>
            <form method=\"post\" action=\"/ui/settings/maintenance-message\">
                <label>Title <input name=\"title\" value=\"{escape(settings.maintenance_title)}\" required></label>
                <label>Message <textarea name=\"body\" rows=\"3\" required>{escape(settings.maintenance_message)}</textarea></label>
                <button type=\"submit\">Save message</button>
            </form>
            <form method=\"post\" action=\"/ui/settings/maintenance-message/reset\"><button type=\"submit\" class=\"secondary\">Reset to default</button></form>
        </section>
        <section>
            <h2>General</h2>
            <form method=\"post\" action=\"/ui/settings/general\">
                <label>App name <input name=\"app_name\" value=\"{escape(settings.app_name)}\" required></label>
                <label>Date format <select name=\"date_format\">{_options(date_choices, settings.date_format)}</select></label>
                <label>Time format <select name=\"time_format\">{_options(time_choices, settings.time_format)}</select></label>
                <p class=\"hint\">Preview: {escape(example)}</p>
                <button type=\"submit\">Save general settings</button>
            </form>
            <form method=\"post\" action=\"/ui/settings/timezone\">
                <label>Display timezone <input name=\"timezone\" value=\"{escape(settings.display_timezone)}\" required></label>
                <button type=\"submit\">Save timezone</button>
            </form>
        </section>
        <section>
            <h2>App versions</h2>
            <form method=\"post\" action=\"/ui/settings/app-versions\">
                <label>iOS <input name=\"ios\" value=\"{escape(settings.ios_app_version)}\" required></label>
                <label>Android <input name=\"android\" value=\"{escape(settings.android_app_version)}\" required></label>
                <button type=\"submit\">Save versions</button>
            </form>
            <form method=\"post\" action=\"/ui/settings/release-notes\">
                <label>Release notes <textarea name=\"release_notes\" rows=\"5\">{escape(settings.release_notes)}</textarea></label>
                <button type=\"submit\">Save release notes</button>
            </form>
        </section>
    """
    return _render_page(body, title="Settings", active="/ui/settings", user=user)


USER_STATUS_FILTERS: list[tuple[str, str]] = [
    ("active", "Active"),
    ("inactive", "Inactive"),
    ("suspended", "Suspended"),
    ("flagged", "Flagged"),
    ("blocked", "Blocked"),
]

LOG_SEVERITIES: list[tuple[str, str]] = [
    ("info", "Info"),
    ("warning", "Warning"),
    ("error", "Error"),
    ("critical", "Critical"),
]

LOG_RESOLUTION_FILTERS: list[tuple[str, str]] = [("false", "Unresolved"), ("true", "Resolved")]


def _stat_cards(stats: Mapping[str, Any], cards: Sequence[tuple[str, str]]) -> str:
    return "<div class=\"cards\">" + "".join(
        f"<div class=\"card\">{escape(label)}<strong>{escape(str(stats.get(key) or 0))}</strong></div>"
        for key, label in cards
    ) + "</div>"


def render_users_page(
    users: Sequence[User],
    stats: Mapping[str, Any],
    *,
    search: str,
    status_filter: str | None,
    user: Mapping[str, Any] | None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    cards = _stat_cards(
        stats,
        [
            ("totalUsers", "Total users"),
            ("activeUsers", "Active users"),
            ("verifiedUsers", "Verified users"),
            ("flaggedUsers", "Flagged users"),
        ],
    )
    rows = [
        "<tr>"
        f"<td><a href=\"/ui/users/{escape(account.id)}\">{escape(account.username or account.id)}</a></td>"
        f"<td>{escape(account.full_name or '')}</td>"
        f"<td>{escape(account.email or '')}</td>"
        f"<td>{escape(account.country or '')}</td>"
        f"<td>{account.sp_total:,.0f}</td>"
        f"<td>{_badge(account.account_status)}</td>"
        "</tr>"
        for account in users
    ]
    filter_html = f"""
        <form class=\"inline\" method=\"get\" action=\"/ui/users\">
            <input name=\"search\" value=\"{escape(search)}\" placeholder=\"Search users\">
            <select name=\"status\"><option value=\"\">All statuses</option>{_options(USER_STATUS_FILTERS, status_filter)}</select>
            <button type=\"submit\" class=\"secondary\">Filter</button>
        </form>
    """
    body = (
        _notices(notice, error)
        + cards
        + "<h2>Users</h2>"
        + filter_html
        + _table(["Username", "Name", "Email", "Country", "SP", "Status"], rows, "No users found.")
    )
    return _render_page(body, title="Users", active="/ui/users", user=user)


def render_user_details_page(
    details: UserDetails,
    *,
    user: Mapping[str, Any] | None,
    settings: PlatformSettings | None = None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    account = details.user
    kyc = details.kyc
    base = f"/ui/users/{escape(account.id)}"
    flags = ", ".join(account.fraud_flags) or "None"
    profile_html = f"""
        <section>
            <h2>{escape(account.username or account.id)}</h2>
            <p>{_badge(account.account_status)} {escape(account.full_name or '')} &lt;{escape(account.email or '')}&gt;</p>
            <p class=\"hint\">Registered {escape(format_datetime(account.created_at, settings))}.
                Last login {escape(format_datetime(account.last_login, settings))}.</p>
            <div class=\"cards\">
                <div class=\"card\">SP balance<strong>{account.sp_current:,.0f}</strong></div>
                <div class=\"card\">SP earned<strong>{account.sp_total:,.0f}</strong></div>
                <div class=\"card\">Predictions<strong>{account.total_predictions:,}</strong></div>
                <div class=\"card\">Accuracy<strong>{account.prediction_accuracy:g}%</strong></div>
            </div>
            <p>Fraud flags: {escape(flags)}</p>
        </section>
    """
    block_label = "Unblock" if account.is_blocked else "Block"
    suspend_label = "Unsuspend" if account.status == "suspended" or not account.is_active else "Suspend"
    moderation_html = f"""
        <section>
            <h2>Moderation</h2>
            <form class=\"inline\" method=\"post\" action=\"{base}/block\">
                <input type=\"hidden\" name=\"blocked\" value=\"{'false' if account.is_blocked else 'true'}\">
                <button type=\"submit\" class=\"danger\">{block_label}</button>
            </form>
            <form class=\"inline\" method=\"post\" action=\"{base}/suspend\">
                <input type=\"hidden\" name=\"active\" value=\"{'true' if suspend_label == 'Unsuspend' else 'false'}\">
                <button type=\"submit\" class=\"secondary\">{suspend_label}</button>
            </form>
            <form method=\"post\" action=\"{base}/sp\">
                <label>SP amount <input name=\"amount\" type=\"number\" step=\"any\" required></label>
                <label>Adjustment <select name=\"adjustment\">{_options([('add', 'Add to balance'), ('set', 'Set balance')], 'add')}</select></label>
                <button type=\"submit\">Adjust SP</button>
            </form>
            <form method=\"post\" action=\"{base}/flag\">
                <label>Flag reason <input name=\"reason\" required></label>
                <label>Fraud flags <input name=\"fraud_flags\" placeholder=\"Comma separated\"></label>
                <button type=\"submit\" class=\"danger\">Flag user</button>
            </form>
        </section>
    """
    risk_choices = [(level, level.title()) for level in ("none", "low", "medium", "high")]
    kyc_html = f"""
        <section>
            <h2>KYC</h2>
            <p>{_badge(kyc.status)} risk level {escape(kyc.risk_level)}</p>
            <p class=\"hint\">Submitted {escape(format_datetime(kyc.submitted_at, settings))}.
                Verified {escape(format_datetime(kyc.verified_at, settings))} by {escape(kyc.verified_by or 'N/A')}.</p>
            <form class=\"inline\" method=\"post\" action=\"{base}/kyc/request\"><button type=\"submit\" class=\"secondary\">Request KYC</button></form>
            <form class=\"inline\" method=\"post\" action=\"{base}/kyc/verify\">
                <select name=\"risk_level\">{_options(risk_choices, kyc.risk_level)}</select>
                <button type=\"submit\">Verify</button>
            </form>
            <form class=\"inline\" method=\"post\" action=\"{base}/kyc/reject\">
                <input name=\"reason\" placeholder=\"Rejection reason\">
                <button type=\"submit\" class=\"danger\">Reject</button>
            </form>
            <form class=\"inline\" method=\"post\" action=\"{base}/kyc/expire\"><button type=\"submit\" class=\"secondary\">Mark expired</button></form>
        </section>
    """
    activity_rows = [
        "<tr>"
        f"<td>{escape(str(item.get('type') or item.get('activityType') or ''))}</td>"
        f"<td>{escape(str(item.get('description') or item.get('details') or ''))}</td>"
        f"<td>{escape(str(item.get('createdAt') or item.get('timestamp') or ''))}</td>"
        "</tr>"
        for item in details.activity
    ]
    body = (
        _notices(notice, error)
        + profile_html
        + moderation_html
        + kyc_html
        + "<h2>Recent activity</h2>"
        + _table(["Activity", "Details", "When"], activity_rows, "No recent activity.")
    )
    return _render_page(body, title="User details", active="/ui/users", user=user)


def render_logs_page(
    logs: Sequence[SystemLog],
    stats: Mapping[str, Any],
    *,
    filters: Mapping[str, str],
    user: Mapping[str, Any] | None,
    settings: PlatformSettings | None = None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    cards = _stat_cards(
        stats,
        [("total", "Total entries"), ("unresolved", "Unresolved"), ("critical", "Critical"), ("today", "Today")],
    )
    rows = []
    for log in logs:
        if log.is_resolved:
            action = _badge("resolved")
        else:
            action = (
                f"<form class=\"inline\" method=\"post\" action=\"/ui/logs/{escape(log.id)}/resolve\">"
                "<button type=\"submit\" class=\"secondary\">Resolve</button></form>"
            )
        rows.append(
            "<tr>"
            f"<td>{escape(log.log_id or log.id)}</td>"
            f"<td>{escape(format_datetime(log.created_at, settings))}</td>"
            f"<td>{escape(log.event)}</td>"
            f"<td>{escape(log.category or '')}</td>"
            f"<td>{_badge(log.severity)}</td>"
            f"<td>{escape(log.admin_name or '')}</td>"
            f"<td>{escape(log.related_username or '')}</td>"
            f"<td>{action}</td></tr>"
        )
    filter_html = f"""
        <form class=\"inline\" method=\"get\" action=\"/ui/logs\">
            <input name=\"search\" value=\"{escape(filters.get('search', ''))}\" placeholder=\"Search events, admins, users\">
            <input name=\"category\" value=\"{escape(filters.get('category', ''))}\" placeholder=\"Category\">
            <select name=\"severity\"><option value=\"\">All severities</option>{_options(LOG_SEVERITIES, filters.get('severity'))}</select>
            <select name=\"resolved\"><option value=\"\">Any state</option>{_options(LOG_RESOLUTION_FILTERS, filters.get('resolved'))}</select>
            <button type=\"submit\" class=\"secondary\">Filter</button>
        </form>
    """
    body = (
        _notices(notice, error)
        + cards
        + "<h2>Log entries</h2>"
        + filter_html
        + _table(
            ["Log", "When", "Event", "Category", "Severity", "Admin", "User", ""],
            rows,
            "No log entries match.",
        )
    )
    return _render_page(body, title="System logs", active="/ui/logs", user=user)


def render_team_history_page(
    team: Team,
    *,
    user: Mapping[str, Any] | None,
    settings: PlatformSettings | None = None,
    error: str | None = None,
) -> str:
    current = f"""
        <section>
            <h2>{escape(team.name or team.id)}</h2>
            <p>{_badge(team.status or ('active' if team.is_active else 'inactive'))}
                {escape(team.season_tag or '')} {escape(team.entry_type or '')}</p>
            <p class=\"hint\">Changed {escape(format_datetime(team.status_changed_at, settings))}.
                {escape(team.status_reason or '')}</p>
            <p><a href=\"/ui/teams/{escape(team.id)}/players\">Squad</a> · <a href=\"/ui/teams\">All teams</a></p>
        </section>
    """
    entries = sorted(
        team.history,
        key=lambda entry: entry.changed_at.timestamp() if entry.changed_at else 0.0,
        reverse=True,
    )
    rows = [
        "<tr>"
        f"<td>{escape(format_datetime(entry.changed_at, settings))}</td>"
        f"<td>{_badge(entry.status)}</td>"
        f"<td>{escape(entry.status_reason or '')}</td>"
        f"<td>{escape(entry.season_tag or '')}</td>"
        f"<td>{escape(entry.entry_type or '')}</td>"
        f"<td>{escape(entry.changed_by or '')}</td>"
        "</tr>"
        for entry in entries
    ]
    body = (
        _notices(error=error)
        + current
        + "<h2>Status history</h2>"
        + _table(["When", "Status", "Reason", "Season", "Entry", "By"], rows, "No status changes recorded.")
    )
    return _render_page(body, title="Team history", active="/ui/teams", user=user)


def render_document_editor_page(
    kind: DocumentKind,
    document: Mapping[str, Any] | None,
    *,
    user: Mapping[str, Any] | None,
    notice: str | None = None,
    error: str | None = None,
) -> str:
    document = document or {}
    doc_id = str(document.get("_id") or document.get("id") or "")
    statuses = [("draft", "Draft"), ("published", "Published")]
    status = str(document.get("status") or "draft").lower()
    title_html = ""
    if kind.requires_title:
        title_html = (
            f"<label>Title <input name=\"title\" value=\"{escape(str(document.get('title') or ''))}\" required></label>"
        )
    links = " · ".join(
        f"<a href=\"/ui/content/documents/{escape(slug)}\">{escape(other.title)}</a>"
        for slug, other in DOCUMENT_KINDS.items()
    )
    state = f"{_badge(status)} version {escape(str(document.get('version') or '1.0'))}" if doc_id else "Not created yet."
    delete_html = ""
    if doc_id:
        delete_html = (
            f"<form method=\"post\" action=\"/ui/content/documents/{escape(kind.slug)}/{escape(doc_id)}/delete\">"
            "<button type=\"submit\" class=\"danger\">Delete</button></form>"
        )
    body = f"""
        {_notices(notice, error)}
        <p><a href=\"/ui/content\">FAQs</a> · {links}</p>
        <p>{state}</p>
        <form method=\"post\" action=\"/ui/content/documents/{escape(kind.slug)}\">
            <input type=\"hidden\" name=\"document_id\" value=\"{escape(doc_id)}\">
            {title_html}
            <label>Content <textarea name=\"content\" rows=\"16\" required>{escape(str(document.get('content') or ''))}</textarea></label>
            <label>Version <input name=\"version\" value=\"{escape(str(document.get('version') or '1.0'))}\"></label>
            <label>Status <select name=\"status\">{_options(statuses, status)}</select></label>
            <button type=\"submit\">Save</button>
        </form>
        {delete_html}
    """
    return _render_page(body, title=kind.title, active="/ui/content", user=user)
