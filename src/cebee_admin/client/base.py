"""HTTP plumbing shared by every backend service."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx

from cebee_admin.session import SessionStore


logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized. Please login again."
NETWORK_ERROR_MESSAGE = (
    "Network error. Please check your connection and ensure the backend server is running."
)


class ApiError(Exception):
    """Raised by :meth:`ApiResult.unwrap` for callers that prefer exceptions."""

    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass
class ApiResult:
    success: bool
    data: Any = None
    error: Optional[str] = None
    status: int = 0
    message: Optional[str] = None

    @classmethod
    def failure(cls, error: str, *, status: int = 0, data: Any = None) -> "ApiResult":
        return cls(success=False, error=error, status=status, data=data)

    def with_defaults(self, *, message: str | None = None, error: str | None = None) -> "ApiResult":
        """Fill in the resource-specific success message or fallback error."""

        if self.success:
            return ApiResult(True, self.data, None, self.status, self.message or message)
        return ApiResult(False, self.data, self.error or error, self.status, self.message)

    def unwrap(self) -> Any:
        if not self.success:
            raise ApiError(self.error or "Request failed", self.status)
        return self.data


def _error_message(data: Any, status: int) -> str:
    if isinstance(data, Mapping):
        if data.get("message"):
            return str(data["message"])
        error = data.get("error")
        if isinstance(error, Mapping) and error.get("message"):
            return str(error["message"])
        if error:
            return error if isinstance(error, str) else json.dumps(error)
    return f"Request failed with status {status}"


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop empty query parameters so filters left blank are not sent."""

    if not params:
        return {}
    return {key: value for key, value in params.items() if value not in (None, "")}


class ApiClient:
    """Bearer-authenticated JSON client for the CeBee backend.

    Every call returns an :class:`ApiResult`; HTTP and transport failures are
    reported through ``success``/``error`` rather than raised. A 401 response
    clears the stored session and leaves it to the caller to send the admin
    back to the login page.
    """

    def __init__(
        self,
        base_url: str,
        sessions: SessionStore,
        *,
        timeout: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.sessions = sessions
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _headers(self, extra: Mapping[str, str] | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.sessions.token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if extra:
            headers.update(extra)
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult:
        content = json.dumps(body, default=str) if body is not None else None
        try:
            response = self._http.request(
                method,
                endpoint,
                content=content,
                params=clean_params(params) or None,
                headers=self._headers(headers),
            )
        except httpx.TransportError as exc:
            logger.error("Network error calling %s %s: %s", method, endpoint, exc)
            return ApiResult.failure(NETWORK_ERROR_MESSAGE)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            try:
                data: Any = response.json()
            except ValueError:
                data = response.text
        else:
            data = response.text

        if response.status_code == 401:
            self.sessions.clear()
            return ApiResult.failure(UNAUTHORIZED_MESSAGE, status=401)

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            wait = (
                f" Please try again in {retry_after} seconds."
                if retry_after
                else " Please wait a moment before trying again."
            )
            return ApiResult.failure(f"Too many requests.{wait}", status=429, data=data)

        if not response.is_success:
            logger.error(
                "API error response: status=%s endpoint=%s%s payload=%s",
                response.status_code,
                self.base_url,
                endpoint,
                data,
            )
            return ApiResult.failure(
                _error_message(data, response.status_code),
                status=response.status_code,
                data=data,
            )

        payload = data
        if isinstance(data, Mapping) and data.get("data") is not None:
            payload = data["data"]
        message = data.get("message") if isinstance(data, Mapping) else None
        return ApiResult(True, payload, None, response.status_code, message)

    def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> ApiResult:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, body: Any = None) -> ApiResult:
        return self.request("POST", endpoint, body={} if body is None else body)

    def put(self, endpoint: str, body: Any = None) -> ApiResult:
        return self.request("PUT", endpoint, body={} if body is None else body)

    def patch(self, endpoint: str, body: Any = None) -> ApiResult:
        return self.request("PATCH", endpoint, body=body)

    def delete(self, endpoint: str) -> ApiResult:
        return self.request("DELETE", endpoint)


def require_id(value: str | None, resource: str) -> Optional[ApiResult]:
    """Return a failed result when an identifier is missing."""

    if not value:
        return ApiResult.failure(f"{resource} ID is required")
    return None
