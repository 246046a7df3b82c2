"""Persist and load the signed-in admin session."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


@dataclass
class AdminSession:
    token: str
    user: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = ""

    @classmethod
    def load(cls, path: Path) -> "AdminSession":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            token=data.get("token") or "",
            user=data.get("user") or {},
            timestamp=data.get("timestamp") or "",
        )

    def save(self, path: Path) -> None:
        payload = {
            "token": self.token,
            "user": self.user,
            "timestamp": self.timestamp,
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


class SessionStore:
    """File-backed ``admin_session`` shared by the web console and the CLI."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Optional[AdminSession]:
        if not self.path.exists():
            return None
        try:
            return AdminSession.load(self.path)
        except (OSError, ValueError) as exc:
            logger.error("Error reading stored session %s: %s", self.path, exc)
            return None

    def save(self, token: str, user: Dict[str, Any]) -> AdminSession:
        session = AdminSession(
            token=token,
            user=dict(user),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        session.save(self.path)
        return session

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            logger.error("Error removing stored session %s: %s", self.path, exc)

    def token(self) -> Optional[str]:
        session = self.load()
        return session.token if session and session.token else None

    def user(self) -> Optional[Dict[str, Any]]:
        session = self.load()
        return session.user if session else None

    def is_authenticated(self) -> bool:
        return self.token() is not None
