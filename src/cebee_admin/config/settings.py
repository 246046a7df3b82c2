"""Environment-driven configuration for the admin console."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://cebee-backend-api-alpha.vercel.app/api"
DEFAULT_SESSION_PATH = Path.home() / ".cebee_admin" / "admin_session.json"

_API_URL_ENV = "CEBEE_API_URL"
_LEGACY_API_URL_ENV = "REACT_APP_API_URL"
_API_TIMEOUT_ENV = "CEBEE_API_TIMEOUT"
_SESSION_PATH_ENV = "CEBEE_SESSION_PATH"
_FIREBASE_CREDENTIALS_ENV = "CEBEE_FIREBASE_CREDENTIALS"
_FIREBASE_PROJECT_ENV = "CEBEE_FIREBASE_PROJECT"
_DASHBOARD_REFRESH_ENV = "CEBEE_DASHBOARD_REFRESH"
_LOG_LEVEL_ENV = "CEBEE_LOG_LEVEL"


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class AdminConfig:
    api_base_url: str = DEFAULT_API_URL
    request_timeout: float = 15.0
    session_path: Path = DEFAULT_SESSION_PATH
    firebase_credentials: Optional[Path] = None
    firebase_project_id: Optional[str] = None
    dashboard_refresh_seconds: int = 600
    log_level: str = "INFO"


def load_config() -> AdminConfig:
    """Build an :class:`AdminConfig` from the current environment."""

    api_url = os.getenv(_API_URL_ENV) or os.getenv(_LEGACY_API_URL_ENV) or DEFAULT_API_URL
    session_raw = os.getenv(_SESSION_PATH_ENV)
    credentials_raw = os.getenv(_FIREBASE_CREDENTIALS_ENV)
    return AdminConfig(
        api_base_url=api_url.rstrip("/"),
        request_timeout=_env_float(_API_TIMEOUT_ENV, 15.0, clamp_min=1.0),
        session_path=Path(session_raw).expanduser() if session_raw else DEFAULT_SESSION_PATH,
        firebase_credentials=Path(credentials_raw).expanduser() if credentials_raw else None,
        firebase_project_id=os.getenv(_FIREBASE_PROJECT_ENV) or None,
        dashboard_refresh_seconds=_env_int(_DASHBOARD_REFRESH_ENV, 600, min_value=30),
        log_level=(os.getenv(_LOG_LEVEL_ENV) or "INFO").upper(),
    )
