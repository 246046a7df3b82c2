"""Web console for CeBee Predict administrators."""

from __future__ import annotations

import logging
import urllib.parse
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from cebee_admin.api import pages
from cebee_admin.api.schemas import PollCheckRequest, PollCheckResponse
from cebee_admin.client import ApiClient, ApiResult, BackendServices, ContentDocumentService
from cebee_admin.config import DEFAULT_POLL_RULES, AdminConfig, PollRules, load_config
from cebee_admin.firestore import FIXTURES, NOTIFICATIONS, PREDICTIONS, DocumentStore, firestore_client
from cebee_admin.models import (
    FaqItem,
    Fixture,
    League,
    Notification,
    PlatformSettings,
    Player,
    Prediction,
    Reward,
    SystemLog,
    Team,
    User,
    UserDetails,
    toggle_maintenance,
)
from cebee_admin.models.settings import reset_maintenance_message
from cebee_admin.client.catalog import TEAM_ACTIONS
from cebee_admin.polls import MissingLeague, PollDraft, PollNotFound, PollRulesViolated, PollScheduler
from cebee_admin.session import SessionStore


logger = logging.getLogger("uvicorn.error")

PREDICTIONS_PAGE_SIZE = 100


def _redirect(path: str, *, notice: str | None = None, error: str | None = None) -> RedirectResponse:
    params = {}
    if notice:
        params["notice"] = notice
    if error:
        params["error"] = error
    url = f"{path}?{urllib.parse.urlencode(params)}" if params else path
    return RedirectResponse(url, status_code=303)


def _result_redirect(result: ApiResult, path: str) -> RedirectResponse:
    if result.status == 401:
        return _redirect("/login", error=result.error)
    if result.success:
        return _redirect(path, notice=result.message)
    return _redirect(path, error=result.error)


def _parse_datetime(raw: str, field: str) -> datetime:
    try:
        value = datetime.fromisoformat(raw.strip())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid {field}: {raw!r}") from exc
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _records(data: Any, key: str) -> list[dict[str, Any]]:
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    if isinstance(data, dict) and isinstance(data.get(key), list):
        return [item for item in data[key] if isinstance(item, dict)]
    return []


def create_app(
    config: AdminConfig | None = None,
    *,
    services: BackendServices | None = None,
    documents: DocumentStore | None = None,
    poll_rules: PollRules = DEFAULT_POLL_RULES,
) -> FastAPI:
    config = config or load_config()
    if services is None:
        sessions = SessionStore(config.session_path)
        services = BackendServices.from_client(
            ApiClient(config.api_base_url, sessions, timeout=config.request_timeout)
        )

    app = FastAPI(title="CeBee Predict Admin")
    app.state.config = config
    app.state.services = services
    app.state.documents = documents
    app.state.poll_rules = poll_rules

    def document_store() -> DocumentStore:
        if app.state.documents is None:
            app.state.documents = DocumentStore(firestore_client(config))
        return app.state.documents

    def scheduler() -> PollScheduler:
        return PollScheduler(document_store(), poll_rules)

    def current_user() -> Optional[dict[str, Any]]:
        if not services.auth.is_authenticated():
            return None
        return services.auth.stored_user() or {}

    def display_settings() -> PlatformSettings:
        return services.settings.load()

    def document_service(kind: str) -> ContentDocumentService:
        if kind not in services.documents:
            raise HTTPException(status_code=404, detail="Unknown content document")
        return services.documents[kind]

    def list_error(result: ApiResult) -> RedirectResponse | None:
        if result.status == 401:
            return _redirect("/login", error=result.error)
        return None

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/")
    async def root():
        return RedirectResponse("/ui", status_code=303)

    @app.get("/login", response_class=HTMLResponse)
    async def login_page(request: Request):
        return HTMLResponse(pages.render_login_page(request.query_params.get("error")))

    @app.post("/login")
    def login(email: str = Form(...), password: str = Form(...)):
        result = services.auth.login(email.strip(), password)
        if not result.success:
            return _redirect("/login", error=result.error)
        logger.info("Admin %s signed in", email)
        return _redirect("/ui", notice=result.message)

    @app.post("/logout")
    def logout():
        services.auth.logout()
        return _redirect("/login")

    @app.get("/ui", response_class=HTMLResponse)
    def ui_dashboard(request: Request):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.dashboard.load()
        if result.status == 401:
            return _redirect("/login", error=result.error)
        content = pages.render_dashboard_page(
            result.data,
            user=user,
            refresh_seconds=config.dashboard_refresh_seconds,
            settings=display_settings(),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    # Fixtures

    @app.get("/ui/fixtures", response_class=HTMLResponse)
    def ui_fixtures(request: Request):
        user = current_user()
        if user is None:
            return _redirect("/login")
        docs = document_store().list(FIXTURES, order_by="kickoffTime")
        fixtures = [Fixture.model_validate(doc) for doc in docs]
        leagues = [League.model_validate(item) for item in services.leagues.leagues()]
        content = pages.render_fixtures_page(
            fixtures,
            leagues,
            user=user,
            settings=display_settings(),
            notice=request.query_params.get("notice"),
            error=request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/fixtures")
    def ui_create_fixture(
        league_id: str = Form(...),
        kind: str = Form("regular"),
        home_team_id: str = Form(""),
        away_team_id: str = Form(""),
        selected_team_id: str = Form(""),
        matchday: str = Form(""),
        kickoff_time: str = Form(...),
        publish_time: str = Form(...),
        venue: str = Form(...),
    ):
        if current_user() is None:
            return _redirect("/login")
        if kind not in {value for value, _ in pages.FIXTURE_KINDS}:
            raise HTTPException(status_code=400, detail=f"Unknown fixture type {kind!r}")
        fixture = {
            "leagueId": league_id,
            "kickoffTime": _parse_datetime(kickoff_time, "kickoff time"),
            "publishDateTime": _parse_datetime(publish_time, "publish time"),
            "venue": venue.strip(),
            "home_team_id": home_team_id.strip(),
            "away_team_id": away_team_id.strip(),
            "selected_team_id": selected_team_id.strip(),
            "matchday": matchday.strip(),
            "isCeBeFeatured": kind == "cebe",
            "isCommunityFeatured": kind == "community",
        }
        return _result_redirect(services.fixtures.create(fixture), "/ui/fixtures")

    @app.post("/ui/fixtures/{fixture_id}/results")
    def ui_fixture_results(fixture_id: str, home_score: str = Form(...), away_score: str = Form(...)):
        if current_user() is None:
            return _redirect("/login")
        result = services.fixtures.update_results(
            fixture_id, {"homeScore": home_score.strip(), "awayScore": away_score.strip()}
        )
        return _result_redirect(result, "/ui/fixtures")

    @app.post("/ui/fixtures/{fixture_id}/delete")
    def ui_delete_fixture(fixture_id: str):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.fixtures.delete(fixture_id), "/ui/fixtures")

    # Leagues, teams and players

    @app.get("/ui/leagues", response_class=HTMLResponse)
    def ui_leagues(request: Request):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.leagues.list()
        redirect = list_error(result)
        if redirect:
            return redirect
        leagues = [League.model_validate(item) for item in _records(result.data, "leagues")]
        content = pages.render_leagues_page(
            leagues,
            user=user,
            notice=request.query_params.get("notice"),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/leagues")
    def ui_create_league(league_name: str = Form(...), country: str = Form(""), league_type: str = Form("")):
        if current_user() is None:
            return _redirect("/login")
        league = {"league_name": league_name.strip(), "country": country.strip() or None}
        if league_type.strip():
            league["league_type"] = league_type.strip()
        return _result_redirect(services.leagues.create(league), "/ui/leagues")

    @app.post("/ui/leagues/{league_id}")
    def ui_update_league(league_id: str, league_name: str = Form(...), country: str = Form("")):
        if current_user() is None:
            return _redirect("/login")
        update = {"league_name": league_name.strip(), "country": country.strip() or None}
        return _result_redirect(services.leagues.update(league_id, update), "/ui/leagues")

    @app.post("/ui/leagues/{league_id}/delete")
    def ui_delete_league(league_id: str):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.leagues.delete(league_id), "/ui/leagues")

    @app.get("/ui/teams", response_class=HTMLResponse)
    def ui_teams(request: Request, league_id: str | None = None):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.teams.list(league_id=league_id)
        redirect = list_error(result)
        if redirect:
            return redirect
        teams = [Team.model_validate(item) for item in _records(result.data, "teams")]
        leagues = [League.model_validate(item) for item in services.leagues.leagues()]
        content = pages.render_teams_page(
            teams,
            leagues,
            league_filter=league_id or None,
            user=user,
            notice=request.query_params.get("notice"),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/teams")
    def ui_create_team(team_name: str = Form(...), league_id: str = Form(...)):
        if current_user() is None:
            return _redirect("/login")
        result = services.teams.create({"team_name": team_name.strip(), "league_id": league_id})
        return _result_redirect(result, "/ui/teams")

    @app.post("/ui/teams/{team_id}/players")
    def ui_create_player(
        team_id: str,
        player_name: str = Form(...),
        position: str = Form(...),
        shirt_number: str = Form(...),
    ):
        if current_user() is None:
            return _redirect("/login")
        player = {
            "team_id": team_id,
            "player_name": player_name,
            "position": position,
            "shirt_number": shirt_number.strip(),
        }
        return _result_redirect(services.players.create(player), f"/ui/teams/{team_id}/players")

    @app.post("/ui/teams/{team_id}/{action}")
    def ui_team_action(team_id: str, action: str, reason: str = Form("")):
        if current_user() is None:
            return _redirect("/login")
        if action not in TEAM_ACTIONS:
            raise HTTPException(status_code=404, detail="Unknown team action")
        return _result_redirect(services.teams.change_status(team_id, action, reason.strip()), "/ui/teams")

    @app.get("/ui/teams/{team_id}/players", response_class=HTMLResponse)
    def ui_players(request: Request, team_id: str):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.players.by_team(team_id)
        redirect = list_error(result)
        if redirect:
            return redirect
        players = [Player.model_validate(item) for item in _records(result.data, "players")]
        team = result.data.get("team") if isinstance(result.data, dict) else None
        team_name = str((team or {}).get("team_name") or (team or {}).get("name") or "Team")
        content = pages.render_players_page(
            team_id,
            team_name,
            players,
            user=user,
            notice=request.query_params.get("notice"),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.get("/ui/teams/{team_id}/history", response_class=HTMLResponse)
    def ui_team_history(team_id: str):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.teams.get(team_id)
        redirect = list_error(result)
        if redirect:
            return redirect
        if result.status == 404:
            raise HTTPException(status_code=404, detail="Team not found")
        if not result.success:
            return _redirect("/ui/teams", error=result.error)
        data = result.data if isinstance(result.data, dict) else {}
        team = Team.model_validate(data.get("team") if isinstance(data.get("team"), dict) else data)
        return HTMLResponse(pages.render_team_history_page(team, user=user, settings=display_settings()))

    @app.post("/ui/players/{player_id}/deactivate")
    def ui_deactivate_player(
        player_id: str,
        team_id: str = Form(...),
        mode: str = Form("temporary"),
        reason: str = Form(""),
        confirm: bool = Form(False),
    ):
        if current_user() is None:
            return _redirect("/login")
        deactivation: dict[str, Any] = {"inactive_reason": reason.strip()}
        if mode == "temporary":
            result = services.players.deactivate_temporary(player_id, deactivation)
        elif mode == "permanent":
            result = services.players.deactivate_permanent(player_id, {**deactivation, "confirm": confirm})
        else:
            raise HTTPException(status_code=400, detail=f"Unknown deactivation mode {mode!r}")
        return _result_redirect(result, f"/ui/teams/{team_id}/players")

    @app.post("/ui/players/{player_id}/reactivate")
    def ui_reactivate_player(player_id: str, team_id: str = Form(...)):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.players.reactivate(player_id), f"/ui/teams/{team_id}/players")

    # Read-only listings

    @app.get("/ui/predictions", response_class=HTMLResponse)
    def ui_predictions():
        user = current_user()
        if user is None:
            return _redirect("/login")
        docs = document_store().list(
            PREDICTIONS, order_by="createdAt", descending=True, limit=PREDICTIONS_PAGE_SIZE
        )
        predictions = [Prediction.model_validate(doc) for doc in docs]
        return HTMLResponse(pages.render_predictions_page(predictions, user=user, settings=display_settings()))

    @app.get("/ui/leaderboard", response_class=HTMLResponse)
    def ui_leaderboard(period: str = "allTime", search: str = ""):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.leaderboard.list(period=period, search=search.strip())
        redirect = list_error(result)
        if redirect:
            return redirect
        content = pages.render_leaderboard_page(
            _records(result.data, "leaderboard"),
            period=period,
            search=search,
            user=user,
            error=result.error,
        )
        return HTMLResponse(content)

    @app.get("/ui/referrals", response_class=HTMLResponse)
    def ui_referrals():
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.referrals.list()
        redirect = list_error(result)
        if redirect:
            return redirect
        content = pages.render_referrals_page(_records(result.data, "referrals"), user=user, error=result.error)
        return HTMLResponse(content)

    # Rewards

    @app.get("/ui/rewards", response_class=HTMLResponse)
    def ui_rewards(request: Request, status: str | None = None):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.rewards.list(status=status)
        redirect = list_error(result)
        if redirect:
            return redirect
        rewards = [Reward.model_validate(item) for item in _records(result.data, "rewards")]
        content = pages.render_rewards_page(
            rewards,
            status_filter=status or None,
            user=user,
            notice=request.query_params.get("notice"),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/rewards/{reward_id}/status")
    def ui_reward_status(reward_id: str, status: str = Form(...), decline_reason: str = Form("")):
        if current_user() is None:
            return _redirect("/login")
        result = services.rewards.update_status(reward_id, status, decline_reason.strip() or None)
        return _result_redirect(result, "/ui/rewards")

    @app.post("/ui/rewards/{reward_id}/fulfil")
    def ui_reward_fulfil(reward_id: str):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.rewards.mark_fulfilled(reward_id), "/ui/rewards")

    # Notifications

    @app.get("/ui/notifications", response_class=HTMLResponse)
    def ui_notifications(request: Request):
        user = current_user()
        if user is None:
            return _redirect("/login")
        docs = document_store().list(NOTIFICATIONS, order_by="createdAt", descending=True)
        notifications = [Notification.model_validate(doc) for doc in docs]
        content = pages.render_notifications_page(
            notifications,
            user=user,
            settings=display_settings(),
            notice=request.query_params.get("notice"),
            error=request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/notifications")
    def ui_compose_notification(
        title: str = Form(...),
        body: str = Form(...),
        audience: str = Form("all"),
        deep_link: str = Form(""),
        scheduled_at: str = Form(""),
        action: str = Form("send"),
    ):
        if current_user() is None:
            return _redirect("/login")
        notification: dict[str, Any] = {
            "title": title.strip(),
            "body": body.strip(),
            "audience": audience,
            "deepLink": deep_link.strip() or None,
        }
        if action == "draft":
            result = services.notifications.save_draft(notification)
        else:
            if scheduled_at.strip():
                notification["scheduleForLater"] = True
                notification["scheduledAt"] = _parse_datetime(scheduled_at, "schedule time")
            result = services.notifications.create(notification)
        return _result_redirect(result, "/ui/notifications")

    @app.post("/ui/notifications/{notification_id}/send")
    def ui_send_notification(notification_id: str):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.notifications.send(notification_id), "/ui/notifications")

    @app.post("/ui/notifications/{notification_id}/delete")
    def ui_delete_notification(notification_id: str):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.notifications.delete(notification_id), "/ui/notifications")

    # Polls

    def render_poll_form(
        draft: PollDraft,
        *,
        poll_id: str | None,
        user: dict[str, Any],
        error: str | None = None,
        check=None,
    ) -> str:
        polls = scheduler()
        check = check or polls.check(draft, editing_poll_id=poll_id)
        return pages.render_poll_form_page(
            draft,
            check,
            polls.active_leagues(),
            polls.league_fixtures(draft.league_id),
            rules=poll_rules,
            poll_id=poll_id,
            user=user,
            settings=display_settings(),
            error=error,
        )

    def draft_from_form(league_id: str, start_time: str, close_time: str) -> PollDraft:
        return PollDraft(
            league_id=league_id.strip(),
            start_time=_parse_datetime(start_time, "start time"),
            close_time=_parse_datetime(close_time, "close time"),
        )

    def save_poll(draft: PollDraft, poll_id: str | None, user: dict[str, Any]):
        try:
            scheduler().save(draft, poll_id=poll_id)
        except PollNotFound as exc:
            raise HTTPException(status_code=404, detail="Poll not found") from exc
        except MissingLeague as exc:
            return HTMLResponse(render_poll_form(draft, poll_id=poll_id, user=user, error=str(exc)), status_code=400)
        except PollRulesViolated as exc:
            content = render_poll_form(
                draft,
                poll_id=poll_id,
                user=user,
                error="This poll does not satisfy the scheduling rules.",
                check=exc.check,
            )
            return HTMLResponse(content, status_code=400)
        return _redirect("/ui/polls", notice="Poll updated" if poll_id else "Poll created")

    @app.get("/ui/polls", response_class=HTMLResponse)
    def ui_polls(request: Request):
        user = current_user()
        if user is None:
            return _redirect("/login")
        content = pages.render_polls_page(
            scheduler().polls(),
            rules=poll_rules,
            user=user,
            settings=display_settings(),
            notice=request.query_params.get("notice"),
            error=request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.get("/ui/polls/new", response_class=HTMLResponse)
    def ui_new_poll(league_id: str = "", start_time: str = "", close_time: str = ""):
        user = current_user()
        if user is None:
            return _redirect("/login")
        draft = scheduler().default_draft()
        draft.league_id = league_id.strip()
        if start_time:
            draft.start_time = _parse_datetime(start_time, "start time")
        if close_time:
            draft.close_time = _parse_datetime(close_time, "close time")
        return HTMLResponse(render_poll_form(draft, poll_id=None, user=user))

    @app.get("/ui/polls/{poll_id}/edit", response_class=HTMLResponse)
    def ui_edit_poll(poll_id: str):
        user = current_user()
        if user is None:
            return _redirect("/login")
        try:
            poll = scheduler().poll(poll_id)
        except PollNotFound as exc:
            raise HTTPException(status_code=404, detail="Poll not found") from exc
        fallback = scheduler().default_draft()
        draft = PollDraft(
            league_id=poll.league_id,
            start_time=poll.start_time or fallback.start_time,
            close_time=poll.close_time or fallback.close_time,
        )
        return HTMLResponse(render_poll_form(draft, poll_id=poll_id, user=user))

    @app.post("/ui/polls")
    def ui_create_poll(league_id: str = Form(""), start_time: str = Form(...), close_time: str = Form(...)):
        user = current_user()
        if user is None:
            return _redirect("/login")
        return save_poll(draft_from_form(league_id, start_time, close_time), None, user)

    @app.post("/ui/polls/{poll_id}/close")
    def ui_close_poll(poll_id: str):
        if current_user() is None:
            return _redirect("/login")
        try:
            scheduler().close(poll_id)
        except PollNotFound as exc:
            raise HTTPException(status_code=404, detail="Poll not found") from exc
        return _redirect("/ui/polls", notice="Poll closed")

    @app.post("/ui/polls/{poll_id}")
    def ui_update_poll(
        poll_id: str,
        league_id: str = Form(""),
        start_time: str = Form(...),
        close_time: str = Form(...),
    ):
        user = current_user()
        if user is None:
            return _redirect("/login")
        return save_poll(draft_from_form(league_id, start_time, close_time), poll_id, user)

    @app.post("/polls/check", response_model=PollCheckResponse)
    def check_poll(payload: PollCheckRequest):
        if current_user() is None:
            raise HTTPException(status_code=401, detail="Not signed in")
        draft = PollDraft(payload.league_id, payload.start_time, payload.close_time)
        check = scheduler().check(draft, editing_poll_id=payload.editing_poll_id)
        return PollCheckResponse.from_check(check)

    # Content

    @app.get("/ui/content", response_class=HTMLResponse)
    def ui_content(request: Request):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.faqs.list()
        redirect = list_error(result)
        if redirect:
            return redirect
        faqs = [FaqItem.model_validate(item) for item in _records(result.data, "faqs")]
        content = pages.render_content_page(
            faqs,
            user=user,
            notice=request.query_params.get("notice"),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/content/faqs")
    def ui_create_faq(
        question: str = Form(...),
        answer: str = Form(...),
        category: str = Form(""),
        status: str = Form("published"),
    ):
        if current_user() is None:
            return _redirect("/login")
        faq = {"question": question.strip(), "answer": answer.strip(), "status": status}
        if category.strip():
            faq["category"] = category.strip()
        return _result_redirect(services.faqs.create(faq), "/ui/content")

    @app.post("/ui/content/faqs/{faq_id}")
    def ui_update_faq(faq_id: str, question: str = Form(...), answer: str = Form(...), status: str = Form("published")):
        if current_user() is None:
            return _redirect("/login")
        faq = {"question": question.strip(), "answer": answer.strip(), "status": status}
        return _result_redirect(services.faqs.update(faq_id, faq), "/ui/content")

    @app.post("/ui/content/faqs/{faq_id}/delete")
    def ui_delete_faq(faq_id: str):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.faqs.delete(faq_id), "/ui/content")

    @app.get("/ui/content/documents/{kind}", response_class=HTMLResponse)
    def ui_document_editor(request: Request, kind: str):
        user = current_user()
        if user is None:
            return _redirect("/login")
        editor = document_service(kind)
        content = pages.render_document_editor_page(
            editor.kind,
            editor.current(),
            user=user,
            notice=request.query_params.get("notice"),
            error=request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/content/documents/{kind}")
    def ui_save_document(
        kind: str,
        document_id: str = Form(""),
        title: str = Form(""),
        content: str = Form(...),
        version: str = Form(""),
        status: str = Form("draft"),
    ):
        if current_user() is None:
            return _redirect("/login")
        editor = document_service(kind)
        document = {"content": content.strip(), "version": version.strip() or "1.0", "status": status}
        if editor.kind.requires_title:
            document["title"] = title.strip()
        result = editor.save(document_id.strip() or None, document)
        return _result_redirect(result, f"/ui/content/documents/{kind}")

    @app.post("/ui/content/documents/{kind}/{document_id}/delete")
    def ui_delete_document(kind: str, document_id: str):
        if current_user() is None:
            return _redirect("/login")
        result = document_service(kind).delete(document_id)
        return _result_redirect(result, f"/ui/content/documents/{kind}")

    # Users

    @app.get("/ui/users", response_class=HTMLResponse)
    def ui_users(request: Request, search: str = "", status: str = ""):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.users.list(search=search.strip())
        redirect = list_error(result)
        if redirect:
            return redirect
        users = [User.model_validate(item) for item in _records(result.data, "users")]
        if status:
            users = [account for account in users if account.matches_status(status)]
        stats = services.users.statistics().data
        content = pages.render_users_page(
            users,
            stats if isinstance(stats, dict) else {},
            search=search,
            status_filter=status or None,
            user=user,
            notice=request.query_params.get("notice"),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.get("/ui/users/{user_id}", response_class=HTMLResponse)
    def ui_user_details(request: Request, user_id: str):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.users.get(user_id, activityLimit=50)
        redirect = list_error(result)
        if redirect:
            return redirect
        if result.status == 404:
            raise HTTPException(status_code=404, detail="User not found")
        if not result.success:
            return _redirect("/ui/users", error=result.error)
        content = pages.render_user_details_page(
            UserDetails.from_backend(result.data, user_id),
            user=user,
            settings=display_settings(),
            notice=request.query_params.get("notice"),
            error=request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/users/{user_id}/block")
    def ui_block_user(user_id: str, blocked: str = Form("true")):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.users.set_blocked(user_id, blocked == "true"), f"/ui/users/{user_id}")

    @app.post("/ui/users/{user_id}/suspend")
    def ui_suspend_user(user_id: str, active: str = Form("false")):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.users.set_active(user_id, active == "true"), f"/ui/users/{user_id}")

    @app.post("/ui/users/{user_id}/sp")
    def ui_adjust_sp(user_id: str, amount: str = Form(...), adjustment: str = Form("add")):
        if current_user() is None:
            return _redirect("/login")
        try:
            value = float(amount)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=f"Invalid SP amount: {amount!r}") from exc
        return _result_redirect(services.users.adjust_sp(user_id, value, adjustment), f"/ui/users/{user_id}")

    @app.post("/ui/users/{user_id}/flag")
    def ui_flag_user(user_id: str, reason: str = Form(""), fraud_flags: str = Form("")):
        if current_user() is None:
            return _redirect("/login")
        flags = [flag.strip() for flag in fraud_flags.split(",") if flag.strip()]
        return _result_redirect(services.users.flag(user_id, reason.strip(), flags), f"/ui/users/{user_id}")

    @app.post("/ui/users/{user_id}/kyc/{action}")
    def ui_kyc_action(user_id: str, action: str, risk_level: str = Form("none"), reason: str = Form("")):
        if current_user() is None:
            return _redirect("/login")
        if action == "request":
            result = services.users.request_kyc(user_id)
        elif action == "verify":
            result = services.users.verify_kyc(user_id, risk_level)
        elif action == "reject":
            result = services.users.reject_kyc(user_id, reason.strip())
        elif action == "expire":
            result = services.users.expire_kyc(user_id)
        else:
            raise HTTPException(status_code=404, detail="Unknown KYC action")
        return _result_redirect(result, f"/ui/users/{user_id}")

    # System logs

    @app.get("/ui/logs", response_class=HTMLResponse)
    def ui_logs(
        request: Request,
        search: str = "",
        category: str = "",
        severity: str = "",
        resolved: str = "",
    ):
        user = current_user()
        if user is None:
            return _redirect("/login")
        filters = {"search": search.strip(), "category": category.strip(), "severity": severity, "resolved": resolved}
        result = services.system_logs.list(**filters)
        redirect = list_error(result)
        if redirect:
            return redirect
        logs = [SystemLog.model_validate(item) for item in _records(result.data, "logs")]
        stats = result.data.get("stats") if isinstance(result.data, dict) else None
        if not stats:
            stats = services.system_logs.stats().data
        content = pages.render_logs_page(
            logs,
            stats if isinstance(stats, dict) else {},
            filters=filters,
            user=user,
            settings=display_settings(),
            notice=request.query_params.get("notice"),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/logs/{log_id}/resolve")
    def ui_resolve_log(log_id: str):
        if current_user() is None:
            return _redirect("/login")
        result = services.system_logs.resolve(log_id)
        if result.success:
            logger.info("System log %s resolved", log_id)
        return _result_redirect(result, "/ui/logs")

    # Settings

    @app.get("/ui/settings", response_class=HTMLResponse)
    def ui_settings(request: Request):
        user = current_user()
        if user is None:
            return _redirect("/login")
        result = services.settings.get()
        redirect = list_error(result)
        if redirect:
            return redirect
        settings = PlatformSettings.from_backend(result.data if result.success else None)
        content = pages.render_settings_page(
            settings,
            user=user,
            notice=request.query_params.get("notice"),
            error=result.error or request.query_params.get("error"),
        )
        return HTMLResponse(content)

    @app.post("/ui/settings/maintenance")
    def ui_toggle_maintenance():
        user = current_user()
        if user is None:
            return _redirect("/login")
        current = services.settings.current()
        if not current.success:
            return _result_redirect(current, "/ui/settings")
        toggled = toggle_maintenance(current.data, str(user.get("name") or "Admin"))
        result = services.settings.update_platform_status(toggled.platform_status, toggled)
        if result.success:
            notice = "Maintenance mode enabled" if toggled.in_maintenance else "Platform is now online"
            logger.info("Platform status set to %s", toggled.platform_status)
            return _redirect("/ui/settings", notice=notice)
        return _result_redirect(result, "/ui/settings")

    @app.post("/ui/settings/maintenance-message")
    def ui_maintenance_message(title: str = Form(...), body: str = Form(...)):
        if current_user() is None:
            return _redirect("/login")
        result = services.settings.update_maintenance_message(title.strip(), body.strip())
        return _result_redirect(result, "/ui/settings")

    @app.post("/ui/settings/maintenance-message/reset")
    def ui_reset_maintenance_message():
        if current_user() is None:
            return _redirect("/login")
        current = services.settings.current()
        if not current.success:
            return _result_redirect(current, "/ui/settings")
        defaults = reset_maintenance_message(current.data)
        result = services.settings.update_maintenance_message(
            defaults.maintenance_title, defaults.maintenance_message
        )
        return _result_redirect(result, "/ui/settings")

    @app.post("/ui/settings/general")
    def ui_general_settings(
        app_name: str = Form(...),
        date_format: str = Form(...),
        time_format: str = Form(...),
    ):
        if current_user() is None:
            return _redirect("/login")
        current = services.settings.current()
        if not current.success:
            return _result_redirect(current, "/ui/settings")
        updated = current.data.model_copy(
            update={"app_name": app_name.strip(), "date_format": date_format, "time_format": time_format}
        )
        return _result_redirect(services.settings.update_general(updated), "/ui/settings")

    @app.post("/ui/settings/timezone")
    def ui_timezone(timezone_name: str = Form(..., alias="timezone")):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.settings.update_timezone(timezone_name.strip()), "/ui/settings")

    @app.post("/ui/settings/app-versions")
    def ui_app_versions(ios: str = Form(...), android: str = Form(...)):
        if current_user() is None:
            return _redirect("/login")
        current = services.settings.current()
        if not current.success:
            return _result_redirect(current, "/ui/settings")
        updated = current.data.model_copy(
            update={"ios_app_version": ios.strip(), "android_app_version": android.strip()}
        )
        return _result_redirect(services.settings.update_app_versions(updated), "/ui/settings")

    @app.post("/ui/settings/release-notes")
    def ui_release_notes(release_notes: str = Form("")):
        if current_user() is None:
            return _redirect("/login")
        return _result_redirect(services.settings.update_release_notes(release_notes), "/ui/settings")

    return app


__all__ = ["create_app"]
