"""Admin authentication against the backend."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .base import ApiClient, ApiResult


logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, email: str, password: str) -> ApiResult:
        logger.info("Login attempt for %s", email)
        result = self.client.post("/admin/login", {"email": email, "password": password})

        user = result.data.get("user") if result.success and isinstance(result.data, dict) else None
        if user:
            if user.get("role") != "admin":
                return ApiResult.failure("Access denied. Admin privileges required.", status=403)
            token = result.data.get("token")
            if token:
                self.client.sessions.save(token, user)
            return ApiResult(True, result.data, None, result.status, result.message or "Login successful")

        error = result.error or "Login failed. Please check your credentials."
        if result.status == 500:
            error = f"Server error (500): {result.error or 'Internal server error. Please check if the backend server is running and accessible.'}"
        logger.warning("Login failed for %s: %s", email, error)
        return ApiResult.failure(error, status=result.status)

    def current_user(self) -> ApiResult:
        return self.client.get("/auth/me")

    def logout(self) -> ApiResult:
        self.client.sessions.clear()
        return ApiResult(True)

    def is_authenticated(self) -> bool:
        return self.client.sessions.is_authenticated()

    def stored_user(self) -> Optional[dict[str, Any]]:
        return self.client.sessions.user()
