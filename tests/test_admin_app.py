from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from cebee_admin.api import create_app
from cebee_admin.config import AdminConfig
from cebee_admin.firestore import LEAGUES, POLLS, PREDICTIONS


START = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def client(tmp_path, services, documents, fake_db):
    fake_db.seed(LEAGUES, "L1", {"name": "Premier League", "isActive": True})
    fake_db.seed(LEAGUES, "L2", {"name": "La Liga", "isActive": True})
    app = create_app(AdminConfig(session_path=tmp_path / "unused.json"), services=services, documents=documents)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


@pytest.mark.anyio
async def test_health_and_root_redirect(client):
    health = await client.get("/health")
    root = await client.get("/")

    assert health.json() == {"status": "ok"}
    assert root.status_code == 303
    assert root.headers["location"] == "/ui"


@pytest.mark.anyio
async def test_pages_redirect_to_login_when_signed_out(client):
    response = await client.get("/ui")
    polls = await client.get("/ui/polls")

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert polls.headers["location"] == "/login"


@pytest.mark.anyio
async def test_login_flow(client, backend, sessions):
    backend.on(
        "POST",
        "/admin/login",
        {"data": {"token": "jwt", "user": {"id": "u1", "name": "Ada", "role": "admin"}}},
    )

    response = await client.post("/login", data={"email": " ada@example.com ", "password": "secret"})

    assert response.status_code == 303
    assert response.headers["location"] == "/ui?notice=Login+successful"
    assert sessions.token() == "jwt"
    assert backend.bodies("POST", "/admin/login") == [{"email": "ada@example.com", "password": "secret"}]


@pytest.mark.anyio
async def test_login_rejected_for_non_admin(client, backend):
    backend.on("POST", "/admin/login", {"data": {"token": "jwt", "user": {"id": "u2", "role": "user"}}})

    response = await client.post("/login", data={"email": "bob@example.com", "password": "secret"})
    page = await client.get(response.headers["location"])

    assert response.headers["location"].startswith("/login?error=")
    assert "Access denied. Admin privileges required." in page.text


@pytest.mark.anyio
async def test_logout_clears_session(client, signed_in):
    response = await client.post("/logout")

    assert response.headers["location"] == "/login"
    assert signed_in.is_authenticated() is False


@pytest.mark.anyio
async def test_dashboard_renders_stats_and_refresh(client, backend, signed_in):
    backend.on(
        "GET",
        "/admin/dashboard",
        {
            "data": {
                "stats": {"totalUsers": 1250, "activeUsers": 300, "todayMatches": {"total": 6, "live": 2}},
                "nextFixture": {
                    "homeTeam": "Arsenal",
                    "awayTeam": "Chelsea",
                    "kickoffTime": "2099-01-01T15:00:00Z",
                },
            }
        },
    )

    response = await client.get("/ui")

    assert response.status_code == 200
    assert "1,250" in response.text
    assert "Arsenal vs Chelsea" in response.text
    assert 'id="countdown"' in response.text
    assert '<meta http-equiv="refresh" content="600">' in response.text
    assert "No critical alerts." in response.text
    assert "Ada Admin" in response.text


@pytest.mark.anyio
async def test_dashboard_backend_failure_still_renders(client, backend, signed_in):
    backend.on("GET", "/admin/dashboard", {"message": "Dashboard offline"}, status=500)

    response = await client.get("/ui")

    assert response.status_code == 200
    assert "Dashboard offline" in response.text
    assert "No upcoming fixture." in response.text


@pytest.mark.anyio
async def test_expired_session_redirects_to_login(client, backend, signed_in):
    backend.on("GET", "/leagues", {"message": "jwt expired"}, status=401)

    response = await client.get("/ui/leagues")

    assert response.status_code == 303
    assert response.headers["location"].startswith("/login?error=Unauthorized")
    assert signed_in.is_authenticated() is False


@pytest.mark.anyio
async def test_create_league_redirects_with_notice(client, backend, signed_in):
    backend.on("POST", "/leagues", {"data": {"id": "L9"}})

    response = await client.post("/ui/leagues", data={"league_name": " Serie A ", "country": "Italy"})

    assert response.headers["location"] == "/ui/leagues?notice=League+created+successfully"
    assert backend.bodies("POST", "/leagues") == [{"league_name": "Serie A", "country": "Italy"}]


@pytest.mark.anyio
async def test_team_action_requires_reason_and_known_action(client, backend, signed_in):
    missing_reason = await client.post("/ui/teams/t1/promote", data={"reason": ""})
    unknown = await client.post("/ui/teams/t1/disband", data={"reason": "x"})

    assert missing_reason.headers["location"] == "/ui/teams?error=Reason+is+required+for+promotion"
    assert unknown.status_code == 404
    assert backend.requests == []


@pytest.mark.anyio
async def test_add_player_posts_to_team(client, backend, signed_in):
    backend.on("POST", "/players", {"data": {"id": "p1"}})

    response = await client.post(
        "/ui/teams/t1/players",
        data={"player_name": "Saka", "position": "FWD", "shirt_number": "7"},
    )

    assert response.headers["location"] == "/ui/teams/t1/players?notice=Player+created+successfully"
    assert backend.bodies("POST", "/players")[0]["shirt_number"] == 7


@pytest.mark.anyio
async def test_unknown_deactivation_mode_is_rejected(client, signed_in):
    response = await client.post("/ui/players/p1/deactivate", data={"team_id": "t1", "mode": "forever"})

    assert response.status_code == 400


@pytest.mark.anyio
async def test_compose_notification_sends_now(client, backend, signed_in):
    backend.on("POST", "/notifications", {"data": {"id": "n1"}})

    response = await client.post(
        "/ui/notifications",
        data={"title": "Matchday", "body": "Predictions close soon", "audience": "active-30"},
    )

    body = backend.bodies("POST", "/notifications")[0]
    assert response.headers["location"] == "/ui/notifications?notice=Notification+sent+successfully"
    assert body["targetAudience"] == "active_users_30_days"
    assert body["sendNow"] is True


@pytest.mark.anyio
async def test_invalid_schedule_time_is_a_bad_request(client, signed_in):
    response = await client.post(
        "/ui/notifications",
        data={"title": "Matchday", "body": "Soon", "scheduled_at": "next tuesday"},
    )

    assert response.status_code == 400


@pytest.mark.anyio
async def test_fixtures_page_lists_firestore_fixtures(client, fake_db, signed_in):
    fake_db.seed(
        "fixtures",
        "f1",
        {"leagueId": "L1", "homeTeam": "Arsenal", "awayTeam": "Spurs", "kickoffTime": START, "venue": "Emirates"},
    )

    response = await client.get("/ui/fixtures")

    assert response.status_code == 200
    assert "Arsenal vs Spurs" in response.text
    assert "Emirates" in response.text


# Polls


@pytest.mark.anyio
async def test_new_poll_form_shows_rules_and_enables_submit(client, signed_in):
    response = await client.get(
        "/ui/polls/new",
        params={"league_id": "L1", "start_time": "2025-03-01T12:00", "close_time": "2025-03-03T12:00"},
    )

    assert response.status_code == 200
    assert "Duration: 48 hours (2 days)" in response.text
    assert "Manchester United matches are excluded" in response.text
    assert '<button type="submit">Create poll</button>' in response.text


@pytest.mark.anyio
async def test_new_poll_form_disables_submit_on_conflict(client, fake_db, signed_in):
    fake_db.seed(POLLS, "p1", {"leagueId": "L1", "status": "active", "createdAt": START})

    response = await client.get(
        "/ui/polls/new",
        params={"league_id": "L1", "start_time": "2025-03-01T12:00", "close_time": "2025-03-03T12:00"},
    )

    assert '<button type="submit" disabled>Create poll</button>' in response.text
    assert 'class="pending" data-rule="onePollPerLeague"' in response.text


@pytest.mark.anyio
async def test_create_poll(client, fake_db, signed_in):
    response = await client.post(
        "/ui/polls",
        data={"league_id": "L1", "start_time": "2025-03-01T12:00", "close_time": "2025-03-03T12:00"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/ui/polls?notice=Poll+created"
    [stored] = fake_db.collection(POLLS).docs.values()
    assert stored["leagueId"] == "L1"
    assert stored["status"] == "active"
    assert stored["closeTime"] == datetime(2025, 3, 3, 12, 0, tzinfo=timezone.utc)

    listing = await client.get(response.headers["location"])
    assert "Premier League" in listing.text
    assert "Poll created" in listing.text


@pytest.mark.anyio
async def test_create_poll_violating_rules_rerenders_form(client, fake_db, signed_in):
    fake_db.seed(POLLS, "p1", {"leagueId": "L1", "status": "active", "createdAt": START})

    response = await client.post(
        "/ui/polls",
        data={"league_id": "L1", "start_time": "2025-03-01T12:00", "close_time": "2025-03-01T18:00"},
    )

    assert response.status_code == 400
    assert "This poll does not satisfy the scheduling rules." in response.text
    assert "Duration: 6 hours (0 days)" in response.text
    assert len(fake_db.collection(POLLS).docs) == 1


@pytest.mark.anyio
async def test_edit_poll_keeps_its_own_league(client, fake_db, signed_in):
    fake_db.seed(
        POLLS,
        "p1",
        {"leagueId": "L1", "status": "active", "createdAt": START, "startTime": START, "closeTime": START},
    )

    form = await client.get("/ui/polls/p1/edit")
    response = await client.post(
        "/ui/polls/p1",
        data={"league_id": "L1", "start_time": "2025-03-01T12:00", "close_time": "2025-03-04T12:00"},
    )

    assert form.status_code == 200
    assert 'action="/ui/polls/p1"' in form.text
    assert response.headers["location"] == "/ui/polls?notice=Poll+updated"
    assert fake_db.collection(POLLS).docs["p1"]["closeTime"] == datetime(2025, 3, 4, 12, 0, tzinfo=timezone.utc)


@pytest.mark.anyio
async def test_close_poll(client, fake_db, signed_in):
    fake_db.seed(POLLS, "p1", {"leagueId": "L1", "status": "active", "createdAt": START})

    response = await client.post("/ui/polls/p1/close")
    missing = await client.post("/ui/polls/nope/close")
    missing_edit = await client.get("/ui/polls/nope/edit")

    assert response.headers["location"] == "/ui/polls?notice=Poll+closed"
    assert fake_db.collection(POLLS).docs["p1"]["status"] == "closed"
    assert missing.status_code == 404
    assert missing_edit.status_code == 404


@pytest.mark.anyio
async def test_poll_check_endpoint(client, fake_db, signed_in):
    fake_db.seed(POLLS, "p1", {"leagueId": "L1", "status": "active", "createdAt": START})
    payload = {
        "league_id": "L1",
        "start_time": "2025-03-01T12:00:00Z",
        "close_time": "2025-03-03T12:00:00Z",
    }

    conflict = await client.post("/polls/check", json=payload)
    editing = await client.post("/polls/check", json={**payload, "editing_poll_id": "p1"})

    assert conflict.status_code == 200
    assert conflict.json()["one_poll_per_league"] is False
    assert conflict.json()["conflicting_poll_ids"] == ["p1"]
    assert conflict.json()["all_satisfied"] is False
    assert editing.json()["all_satisfied"] is True
    assert editing.json()["duration_hours"] == 48


@pytest.mark.anyio
async def test_poll_check_requires_sign_in(client):
    response = await client.post(
        "/polls/check",
        json={"start_time": "2025-03-01T12:00:00Z", "close_time": "2025-03-03T12:00:00Z"},
    )

    assert response.status_code == 401


# Settings


@pytest.mark.anyio
async def test_maintenance_toggle_on(client, backend, signed_in):
    backend.on("GET", "/admin/settings", {"data": {"settings": {"platformStatus": "online"}}})
    backend.on("PUT", "/admin/settings/platform-status", {"data": {"settings": {"platformStatus": "maintenance"}}})

    response = await client.post("/ui/settings/maintenance")

    body = backend.bodies("PUT", "/admin/settings/platform-status")[0]
    assert response.headers["location"] == "/ui/settings?notice=Maintenance+mode+enabled"
    assert body["platformStatus"] == "maintenance"
    assert body["maintenanceStartedBy"] == "Ada Admin"
    assert body["maintenanceStartedAt"]


@pytest.mark.anyio
async def test_maintenance_toggle_off(client, backend, signed_in):
    backend.on(
        "GET",
        "/admin/settings",
        {"data": {"settings": {"platformStatus": "maintenance", "maintenanceStartedBy": "Ada Admin"}}},
    )
    backend.on("PUT", "/admin/settings/platform-status", {"data": {"settings": {"platformStatus": "online"}}})

    response = await client.post("/ui/settings/maintenance")

    assert response.headers["location"] == "/ui/settings?notice=Platform+is+now+online"
    assert backend.bodies("PUT", "/admin/settings/platform-status") == [
        {"platformStatus": "online", "maintenanceStartedAt": None, "maintenanceStartedBy": None}
    ]


@pytest.mark.anyio
async def test_settings_page_shows_maintenance_state(client, backend, signed_in):
    backend.on(
        "GET",
        "/admin/settings",
        {"data": {"settings": {"platformStatus": "maintenance", "maintenanceStartedBy": "Grace"}}},
    )

    response = await client.get("/ui/settings")

    assert response.status_code == 200
    assert "Bring platform online" in response.text
    assert "by Grace" in response.text


@pytest.mark.anyio
async def test_timezone_form_field(client, backend, signed_in):
    backend.on("PUT", "/admin/settings/timezone", {"data": {"settings": {"timezone": "Africa/Lagos"}}})

    response = await client.post("/ui/settings/timezone", data={"timezone": "Africa/Lagos"})

    assert response.headers["location"] == "/ui/settings?notice=Timezone+updated+successfully"
    assert backend.bodies("PUT", "/admin/settings/timezone") == [{"timezone": "Africa/Lagos"}]


@pytest.mark.anyio
@pytest.mark.parametrize(
    ("path", "form"),
    [
        ("/ui/settings/maintenance", {}),
        ("/ui/settings/maintenance-message/reset", {}),
        ("/ui/settings/general", {"app_name": "CeBee", "date_format": "DD/MM/YYYY", "time_format": "24h"}),
        ("/ui/settings/app-versions", {"ios": "2.0.0", "android": "2.0.1"}),
    ],
)
async def test_settings_updates_stop_when_settings_cannot_load(client, backend, signed_in, path, form):
    backend.on("GET", "/admin/settings", {"message": "Settings unavailable"}, status=500)

    response = await client.post(path, data=form)

    assert response.status_code == 303
    assert response.headers["location"] == "/ui/settings?error=Settings+unavailable"
    assert [request for request in backend.requests if request.method == "PUT"] == []


@pytest.mark.anyio
async def test_settings_update_with_expired_session_goes_to_login(client, backend, signed_in):
    backend.on("GET", "/admin/settings", {"message": "Token expired"}, status=401)

    response = await client.post("/ui/settings/maintenance")

    assert response.headers["location"].startswith("/login?error=")
    assert backend.bodies("PUT", "/admin/settings/platform-status") == []


# Null fields and missing input


@pytest.mark.anyio
async def test_create_poll_without_league_rerenders_form(client, fake_db, signed_in):
    response = await client.post(
        "/ui/polls",
        data={"league_id": " ", "start_time": "2025-03-01T12:00", "close_time": "2025-03-03T12:00"},
    )

    assert response.status_code == 400
    assert "League is required" in response.text
    assert fake_db.collection(POLLS).docs == {}


@pytest.mark.anyio
async def test_predictions_page_tolerates_null_points(client, fake_db, signed_in):
    fake_db.seed(PREDICTIONS, "pr1", {"username": "ada", "spEarned": None, "status": None, "createdAt": START})

    response = await client.get("/ui/predictions")

    assert response.status_code == 200
    assert "ada" in response.text
    assert "<td>0</td>" in response.text


@pytest.mark.anyio
async def test_poll_listing_includes_polls_without_created_at(client, fake_db, signed_in):
    fake_db.seed(POLLS, "imported", {"leagueId": "L2", "leagueName": "La Liga", "pollStatus": "active"})

    listing = await client.get("/ui/polls")
    check = await client.post(
        "/polls/check",
        json={"league_id": "L2", "start_time": "2025-03-01T12:00:00Z", "close_time": "2025-03-03T12:00:00Z"},
    )

    assert "La Liga" in listing.text
    assert check.json()["one_poll_per_league"] is False
    assert check.json()["conflicting_poll_ids"] == ["imported"]


# Users


@pytest.mark.anyio
async def test_users_page_lists_and_filters(client, backend, signed_in):
    backend.on(
        "GET",
        "/users",
        {
            "data": {
                "users": [
                    {"_id": "u1", "username": "ada", "isActive": True, "spTotal": 1200},
                    {"_id": "u2", "username": "bob", "isActive": True, "fraudFlags": ["bot"]},
                ]
            }
        },
    )
    backend.on("GET", "/users/statistics", {"data": {"totalUsers": 2, "flaggedUsers": 1}})

    everyone = await client.get("/ui/users")
    flagged = await client.get("/ui/users", params={"status": "flagged", "search": "b"})

    assert everyone.status_code == 200
    assert 'href="/ui/users/u1"' in everyone.text
    assert "1,200" in everyone.text
    assert "Flagged users<strong>1</strong>" in everyone.text
    assert "bob" in flagged.text
    assert "ada" not in flagged.text.split("<h2>Users</h2>")[1]
    assert backend.requests[-2].url.params["search"] == "b"


@pytest.mark.anyio
async def test_user_details_page_shows_kyc_and_actions(client, backend, signed_in):
    backend.on(
        "GET",
        "/users/u1",
        {
            "data": {
                "profile": {"_id": "u1", "username": "ada", "email": "ada@example.com", "isBlocked": True},
                "points": {"totalSPEarned": 500},
                "kyc": {"status": "pending", "riskLevel": "low"},
            }
        },
    )

    response = await client.get("/ui/users/u1")

    assert response.status_code == 200
    assert "ada@example.com" in response.text
    assert "Unblock" in response.text
    assert 'name="blocked" value="false"' in response.text
    assert 'action="/ui/users/u1/kyc/verify"' in response.text
    assert "risk level low" in response.text


@pytest.mark.anyio
async def test_missing_user_is_not_found(client, backend, signed_in):
    backend.on("GET", "/users/nope", {"message": "User not found"}, status=404)

    response = await client.get("/ui/users/nope")

    assert response.status_code == 404


@pytest.mark.anyio
async def test_user_moderation_forms(client, backend, signed_in):
    backend.on("PUT", "/users/u1/block", {"data": {"id": "u1"}})
    backend.on("PUT", "/users/u1/sp", {"data": {"id": "u1"}})
    backend.on("POST", "/users/u1/flag", {"data": {"id": "u1"}})

    block = await client.post("/ui/users/u1/block", data={"blocked": "true"})
    adjust = await client.post("/ui/users/u1/sp", data={"amount": "150", "adjustment": "add"})
    flag = await client.post("/ui/users/u1/flag", data={"reason": "Bot activity", "fraud_flags": "bot, multi_account"})
    blank_flag = await client.post("/ui/users/u1/flag", data={"reason": " "})
    bad_amount = await client.post("/ui/users/u1/sp", data={"amount": "lots"})

    assert block.headers["location"] == "/ui/users/u1?notice=User+blocked+successfully"
    assert adjust.headers["location"] == "/ui/users/u1?notice=SP+adjusted+successfully"
    assert flag.headers["location"] == "/ui/users/u1?notice=User+flagged+successfully"
    assert blank_flag.headers["location"] == "/ui/users/u1?error=Flag+reason+is+required"
    assert bad_amount.status_code == 400
    assert backend.bodies("PUT", "/users/u1/sp") == [{"amount": 150.0, "type": "add"}]
    assert backend.bodies("POST", "/users/u1/flag") == [
        {"flagReason": "Bot activity", "fraudFlags": ["bot", "multi_account"]}
    ]


@pytest.mark.anyio
async def test_kyc_actions(client, backend, signed_in):
    backend.on("PUT", "/users/u1/kyc/verify", {"data": {"status": "verified"}})
    backend.on("PUT", "/users/u1/kyc/reject", {"data": {"status": "rejected"}})

    verify = await client.post("/ui/users/u1/kyc/verify", data={"risk_level": "medium"})
    reject = await client.post("/ui/users/u1/kyc/reject", data={"reason": "Expired ID"})
    unknown = await client.post("/ui/users/u1/kyc/approve")

    assert verify.headers["location"] == "/ui/users/u1?notice=KYC+verified+successfully"
    assert reject.headers["location"] == "/ui/users/u1?notice=KYC+rejected+successfully"
    assert unknown.status_code == 404
    assert backend.bodies("PUT", "/users/u1/kyc/verify") == [{"riskLevel": "medium"}]


# System logs and team history


@pytest.mark.anyio
async def test_logs_page_filters_and_resolve(client, backend, signed_in):
    backend.on(
        "GET",
        "/system-logs",
        {
            "data": {
                "logs": [
                    {"_id": "l1", "logId": "LOG-1", "event": "Reward paid", "severity": "critical", "status": "unresolved"},
                    {"_id": "l2", "logId": "LOG-2", "event": "Admin login", "logStatus": "resolved"},
                ],
                "stats": {"total": 2, "unresolved": 1},
            }
        },
    )
    backend.on("PUT", "/system-logs/l1/resolve", {"data": {"id": "l1"}})

    page = await client.get("/ui/logs", params={"severity": "critical", "search": "reward"})
    resolve = await client.post("/ui/logs/l1/resolve")

    assert page.status_code == 200
    assert "Reward paid" in page.text
    assert 'action="/ui/logs/l1/resolve"' in page.text
    assert 'action="/ui/logs/l2/resolve"' not in page.text
    assert "Unresolved<strong>1</strong>" in page.text
    listing = next(request for request in backend.requests if request.url.path == "/api/system-logs")
    assert dict(listing.url.params) == {"search": "reward", "severity": "critical"}
    assert resolve.headers["location"] == "/ui/logs?notice=Log+marked+as+resolved"


@pytest.mark.anyio
async def test_team_history_page(client, backend, signed_in):
    backend.on(
        "GET",
        "/teams/t1",
        {
            "data": {
                "team": {
                    "_id": "t1",
                    "team_name": "Arsenal",
                    "status": "promoted",
                    "season_tag": "2024/25",
                    "history": [
                        {"history_id": "h1", "status": "active", "status_reason": "Founded", "status_changed_at": "2023-08-01T00:00:00Z"},
                        {"history_id": "h2", "status": "promoted", "status_reason": "Won the league", "status_changed_at": "2024-05-20T00:00:00Z"},
                    ],
                }
            }
        },
    )
    backend.on("GET", "/teams/gone", {"message": "Team not found"}, status=404)

    response = await client.get("/ui/teams/t1/history")
    missing = await client.get("/ui/teams/gone/history")

    assert response.status_code == 200
    assert "Arsenal" in response.text
    assert response.text.index("Won the league") < response.text.index("Founded")
    assert missing.status_code == 404


# Long-form content documents


@pytest.mark.anyio
async def test_document_editor_loads_and_saves(client, backend, signed_in):
    backend.on(
        "GET",
        "/game-rules",
        {"data": {"gameRules": [{"_id": "g1", "title": "How to play", "content": "Predict", "status": "published"}]}},
    )
    backend.on("PUT", "/game-rules/g1", {"data": {"_id": "g1"}})

    editor = await client.get("/ui/content/documents/game-rules")
    saved = await client.post(
        "/ui/content/documents/game-rules",
        data={"document_id": "g1", "title": "How to play", "content": "Predict scores", "status": "published"},
    )

    assert editor.status_code == 200
    assert 'name="document_id" value="g1"' in editor.text
    assert 'name="title" value="How to play"' in editor.text
    assert saved.headers["location"] == "/ui/content/documents/game-rules?notice=Game+rules+updated+successfully"
    assert backend.bodies("PUT", "/game-rules/g1") == [
        {"content": "Predict scores", "version": "1.0", "status": "published", "title": "How to play"}
    ]


@pytest.mark.anyio
async def test_new_terms_document_is_created(client, backend, signed_in):
    backend.on("POST", "/terms", {"data": {"_id": "t1"}})

    saved = await client.post("/ui/content/documents/terms", data={"content": "Be fair", "version": "2.0"})
    blank = await client.post("/ui/content/documents/terms", data={"content": " "})
    unknown = await client.get("/ui/content/documents/cookies")

    assert saved.headers["location"] == (
        "/ui/content/documents/terms?notice=Terms+%26+Conditions+created+successfully"
    )
    assert backend.bodies("POST", "/terms") == [{"content": "Be fair", "version": "2.0", "status": "draft"}]
    assert blank.headers["location"] == "/ui/content/documents/terms?error=Content+is+required"
    assert unknown.status_code == 404
