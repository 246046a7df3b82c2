"""User accounts, moderation and KYC review."""

from __future__ import annotations

from typing import Any, Iterable

from .base import ApiClient, ApiResult, require_id


SP_ADJUSTMENTS = ("add", "set")
KYC_RISK_LEVELS = ("none", "low", "medium", "high")


class UsersService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/users", params)
        if not result.success:
            result.data = {"users": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch users")

    def statistics(self) -> ApiResult:
        result = self.client.get("/users/statistics")
        if not result.success:
            result.data = {"totalUsers": 0, "activeUsers": 0, "verifiedUsers": 0, "flaggedUsers": 0}
        return result.with_defaults(error="Failed to fetch user statistics")

    def get(self, user_id: str, **params: Any) -> ApiResult:
        """Profile, points, KYC record and recent activity of one user."""

        return require_id(user_id, "User") or self.client.get(f"/users/{user_id}", params).with_defaults(
            error="Failed to fetch user details"
        )

    def set_blocked(self, user_id: str, blocked: bool) -> ApiResult:
        missing = require_id(user_id, "User")
        if missing:
            return missing
        return self.client.put(f"/users/{user_id}/block", {"isBlocked": blocked}).with_defaults(
            message="User blocked successfully" if blocked else "User unblocked successfully",
            error="Failed to update user block status",
        )

    def set_active(self, user_id: str, active: bool) -> ApiResult:
        """Suspend (``active=False``) or reinstate a user."""

        missing = require_id(user_id, "User")
        if missing:
            return missing
        return self.client.put(f"/users/{user_id}/suspend", {"isActive": active}).with_defaults(
            message="User unsuspended successfully" if active else "User suspended successfully",
            error="Failed to update user suspend status",
        )

    def adjust_sp(self, user_id: str, amount: float, adjustment: str = "add") -> ApiResult:
        missing = require_id(user_id, "User")
        if missing:
            return missing
        if adjustment not in SP_ADJUSTMENTS:
            return ApiResult.failure('Type must be either "add" or "set"')
        return self.client.put(f"/users/{user_id}/sp", {"amount": amount, "type": adjustment}).with_defaults(
            message="SP adjusted successfully",
            error="Failed to adjust user SP",
        )

    def flag(self, user_id: str, reason: str, fraud_flags: Iterable[str] = ()) -> ApiResult:
        missing = require_id(user_id, "User")
        if missing:
            return missing
        if not (reason or "").strip():
            return ApiResult.failure("Flag reason is required")
        body = {"flagReason": reason, "fraudFlags": list(fraud_flags)}
        return self.client.post(f"/users/{user_id}/flag", body).with_defaults(
            message="User flagged successfully",
            error="Failed to flag user",
        )

    # KYC

    def request_kyc(self, user_id: str) -> ApiResult:
        missing = require_id(user_id, "User")
        if missing:
            return missing
        return self.client.post(f"/users/{user_id}/kyc/request").with_defaults(
            message="KYC request created successfully",
            error="Failed to request KYC",
        )

    def verify_kyc(self, user_id: str, risk_level: str = "none") -> ApiResult:
        missing = require_id(user_id, "User")
        if missing:
            return missing
        if risk_level not in KYC_RISK_LEVELS:
            return ApiResult.failure(f"Risk level must be one of: {', '.join(KYC_RISK_LEVELS)}")
        return self.client.put(f"/users/{user_id}/kyc/verify", {"riskLevel": risk_level}).with_defaults(
            message="KYC verified successfully",
            error="Failed to verify KYC",
        )

    def reject_kyc(self, user_id: str, reason: str = "") -> ApiResult:
        missing = require_id(user_id, "User")
        if missing:
            return missing
        return self.client.put(f"/users/{user_id}/kyc/reject", {"reason": reason}).with_defaults(
            message="KYC rejected successfully",
            error="Failed to reject KYC",
        )

    def expire_kyc(self, user_id: str) -> ApiResult:
        missing = require_id(user_id, "User")
        if missing:
            return missing
        return self.client.put(f"/users/{user_id}/kyc/expire").with_defaults(
            message="KYC marked as expired successfully",
            error="Failed to expire KYC",
        )
