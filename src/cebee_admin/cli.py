"""Command-line interface for the CeBee Predict admin tools."""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from datetime import datetime, timedelta, timezone

import uvicorn
from rich.logging import RichHandler

from cebee_admin.client import ApiClient, ApiError, BackendServices
from cebee_admin.config import DEFAULT_POLL_RULES, AdminConfig, load_config
from cebee_admin.firestore import DocumentStore, firestore_client
from cebee_admin.models import toggle_maintenance
from cebee_admin.polls import PollDraft, PollScheduler
from cebee_admin.session import SessionStore


logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    handler = RichHandler(show_time=False, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _parse_time(raw: str) -> datetime:
    try:
        value = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid ISO datetime: {raw!r}") from exc
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cebee-admin", description="CeBee Predict admin tools")
    parser.add_argument("--log-level", default=None, help="Override CEBEE_LOG_LEVEL (e.g. DEBUG)")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the web console")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    login = commands.add_parser("login", help="Sign in and store the admin session")
    login.add_argument("email")
    login.add_argument("--password", default=None, help="Prompted for when omitted")

    commands.add_parser("logout", help="Forget the stored admin session")
    commands.add_parser("whoami", help="Show the signed-in admin")

    polls = commands.add_parser("polls", help="League poll tools")
    poll_commands = polls.add_subparsers(dest="polls_command", required=True)
    check = poll_commands.add_parser("check", help="Evaluate the scheduling rules for a candidate poll")
    check.add_argument("league_id")
    check.add_argument("--start", type=_parse_time, default=None, help="ISO start time (default: now)")
    check.add_argument("--close", type=_parse_time, default=None, help="ISO close time (default: start + 48h)")
    check.add_argument("--editing", default=None, help="ID of the poll being edited")
    poll_commands.add_parser("list", help="List polls from the backend")
    close = poll_commands.add_parser("close", help="Close a poll")
    close.add_argument("poll_id")

    settings = commands.add_parser("settings", help="Platform settings")
    setting_commands = settings.add_subparsers(dest="settings_command", required=True)
    maintenance = setting_commands.add_parser("maintenance", help="Switch maintenance mode")
    maintenance.add_argument("state", choices=("on", "off"))

    return parser.parse_args(argv)


def _services(config: AdminConfig) -> BackendServices:
    client = ApiClient(config.api_base_url, SessionStore(config.session_path), timeout=config.request_timeout)
    return BackendServices.from_client(client)


def _cmd_serve(args: argparse.Namespace, config: AdminConfig) -> int:
    logger.info("Serving admin console on http://%s:%d/ui (backend %s)", args.host, args.port, config.api_base_url)
    uvicorn.run("cebee_admin.api:create_app", factory=True, host=args.host, port=args.port, reload=args.reload)
    return 0


def _cmd_login(args: argparse.Namespace, config: AdminConfig) -> int:
    password = args.password or getpass.getpass("Password: ")
    result = _services(config).auth.login(args.email, password)
    if not result.success:
        logger.error("%s", result.error)
        return 1
    user = result.data.get("user") or {}
    print(f"Signed in as {user.get('name') or user.get('email') or args.email}")
    return 0


def _cmd_logout(args: argparse.Namespace, config: AdminConfig) -> int:
    _services(config).auth.logout()
    print("Signed out")
    return 0


def _cmd_whoami(args: argparse.Namespace, config: AdminConfig) -> int:
    services = _services(config)
    if not services.auth.is_authenticated():
        print("Not signed in")
        return 1
    print(json.dumps(services.auth.stored_user() or {}, indent=2))
    return 0


def _cmd_polls(args: argparse.Namespace, config: AdminConfig) -> int:
    if args.polls_command == "check":
        start = args.start or datetime.now(timezone.utc).replace(second=0, microsecond=0)
        close = args.close or start + timedelta(hours=DEFAULT_POLL_RULES.default_duration_hours)
        scheduler = PollScheduler(DocumentStore(firestore_client(config)))
        check = scheduler.check(PollDraft(args.league_id, start, close), editing_poll_id=args.editing)
        print(json.dumps(check.as_dict(), indent=2))
        return 0 if check.all_satisfied else 2

    services = _services(config)
    try:
        if args.polls_command == "list":
            data = services.polls.list().unwrap()
            polls = data.get("polls", []) if isinstance(data, dict) else data
            for poll in polls or []:
                status = poll.get("status") or poll.get("pollStatus") or "?"
                print(f"{poll.get('id', '?'):<24} {status:<8} {poll.get('leagueName') or poll.get('leagueId', '')}")
            return 0
        result = services.polls.close(args.poll_id)
        result.unwrap()
        print(result.message)
        return 0
    except ApiError as exc:
        logger.error("%s", exc.message)
        return 1


def _cmd_settings(args: argparse.Namespace, config: AdminConfig) -> int:
    services = _services(config)
    try:
        settings = services.settings.current().unwrap()
    except ApiError as exc:
        logger.error("%s", exc.message)
        return 1
    wanted = "maintenance" if args.state == "on" else "online"
    if settings.platform_status == wanted:
        print(f"Platform already {wanted}")
        return 0
    user = services.auth.stored_user() or {}
    toggled = toggle_maintenance(settings, str(user.get("name") or "Admin"))
    try:
        result = services.settings.update_platform_status(toggled.platform_status, toggled)
        result.unwrap()
    except ApiError as exc:
        logger.error("%s", exc.message)
        return 1
    print("Maintenance mode enabled" if toggled.in_maintenance else "Platform is now online")
    return 0


_COMMANDS = {
    "serve": _cmd_serve,
    "login": _cmd_login,
    "logout": _cmd_logout,
    "whoami": _cmd_whoami,
    "polls": _cmd_polls,
    "settings": _cmd_settings,
}


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = load_config()
    setup_logging(args.log_level.upper() if args.log_level else config.log_level)
    return _COMMANDS[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
