"""Notifications, rewards, leaderboard, referrals and predictions."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from .base import ApiClient, ApiResult, require_id


AUDIENCE_TARGETS = {
    "all": "all_users",
    "active-30": "active_users_30_days",
    "inactive": "inactive_users",
    "winners": "winners",
    "flagged": "flagged_users",
    "by-country": "by_country",
    "by-league": "by_league_preference",
    "by-club": "by_club_preference",
}

REWARD_STATUSES = ("pending", "processing", "paid", "fulfilled", "cancelled", "declined", "unclaimed")

LEADERBOARD_SORTS = {
    "rank": ("rankLowToHigh", "rankHighToLow"),
    "spTotal": ("pointsLowestFirst", "pointsHighestFirst"),
    "accuracyRate": ("accuracyLowestFirst", "accuracyHighestFirst"),
    "username": ("usernameAZ", "usernameZA"),
}


def target_audience(audience: str | None) -> str:
    """Translate a form audience key into the backend's ``targetAudience``."""

    return AUDIENCE_TARGETS.get(audience or "all", "all_users")


class NotificationsService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/notifications/admin/list", params)
        if not result.success:
            result.data = {"notifications": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch notifications")

    def get(self, notification_id: str) -> ApiResult:
        return require_id(notification_id, "Notification") or self.client.get(
            f"/notifications/{notification_id}"
        ).with_defaults(error="Failed to fetch notification")

    def create(self, notification: Mapping[str, Any]) -> ApiResult:
        """Compose a notification.

        Scheduled notifications carry ``scheduledFor``; anything that is neither
        scheduled nor a draft is sent immediately.
        """

        if not notification.get("title") or not notification.get("body"):
            return ApiResult.failure("Title and body are required")

        body: dict[str, Any] = {
            "notificationType": notification.get("type") or "important_announcement",
            "title": notification["title"],
            "message": notification["body"],
            "deepLink": notification.get("deepLink") or None,
            "targetAudience": target_audience(notification.get("audience")),
            "audienceFilters": dict(notification.get("audienceFilters") or {}),
        }
        scheduled_at: Optional[datetime] = notification.get("scheduledAt")
        schedule = bool(notification.get("scheduleForLater"))
        if schedule and scheduled_at:
            body["scheduledFor"] = scheduled_at.isoformat()
        elif not schedule and notification.get("status") != "draft":
            body["sendNow"] = True

        return self.client.post("/notifications", body).with_defaults(
            message="Notification scheduled successfully" if schedule else "Notification sent successfully",
            error="Failed to create notification",
        )

    def save_draft(self, notification: Mapping[str, Any]) -> ApiResult:
        return self.create({**notification, "scheduleForLater": False, "scheduledAt": None, "status": "draft"})

    def send(self, notification_id: str) -> ApiResult:
        missing = require_id(notification_id, "Notification")
        if missing:
            return missing
        return self.client.post(f"/notifications/{notification_id}/send").with_defaults(
            message="Notification sent successfully",
            error="Failed to send notification",
        )

    def delete(self, notification_id: str) -> ApiResult:
        missing = require_id(notification_id, "Notification")
        if missing:
            return missing
        return self.client.delete(f"/notifications/{notification_id}").with_defaults(
            message="Notification deleted successfully",
            error="Failed to delete notification",
        )


class RewardsService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        # Pages count from zero, the backend from one.
        if params.get("page") is not None:
            params["page"] = int(params["page"]) + 1
        result = self.client.get("/rewards", params)
        if not result.success:
            result.data = {"rewards": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch rewards")

    def get(self, reward_id: str) -> ApiResult:
        return require_id(reward_id, "Reward") or self.client.get(f"/rewards/{reward_id}").with_defaults(
            error="Failed to fetch reward"
        )

    def update_status(self, reward_id: str, status: str, decline_reason: str | None = None) -> ApiResult:
        missing = require_id(reward_id, "Reward")
        if missing:
            return missing
        if not status:
            return ApiResult.failure("Status is required")
        body: dict[str, Any] = {"status": status}
        if decline_reason:
            body["declineReason"] = decline_reason
        return self.client.patch(f"/rewards/{reward_id}/status", body).with_defaults(
            message="Reward status updated successfully",
            error="Failed to update reward status",
        )

    def mark_fulfilled(self, reward_id: str) -> ApiResult:
        return self.update_status(reward_id, "fulfilled")

    def cancel(self, reward_id: str, reason: str) -> ApiResult:
        return self.update_status(reward_id, "cancelled", reason)

    def create_gift_card(self, reward: Mapping[str, Any]) -> ApiResult:
        payload = {**reward, "rewardType": "Gift Card", "payoutMethod": "Gift Card"}
        return self.client.post("/rewards", payload).with_defaults(
            message="Gift card reward created successfully",
            error="Failed to create gift card reward",
        )

    def update_notes(self, reward_id: str, notes: str) -> ApiResult:
        missing = require_id(reward_id, "Reward")
        if missing:
            return missing
        return self.client.patch(f"/rewards/{reward_id}/notes", {"adminNotes": notes}).with_defaults(
            message="Notes updated successfully",
            error="Failed to update notes",
        )

    def statistics(self, **params: Any) -> ApiResult:
        result = self.client.get("/rewards/statistics", params)
        if not result.success:
            result.data = {"currentMonthWinners": 0, "pendingPayouts": 0, "processingCount": 0, "totalPaid": 0}
        return result.with_defaults(error="Failed to fetch reward statistics")


class LeaderboardService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        if params.get("period") == "monthly":
            if params.get("cmdId"):
                params.pop("period")
            else:
                params["period"] = "last30days"
        sort_by = params.pop("sort_by", None)
        sort_order = params.pop("sort_order", None)
        if sort_by:
            ascending, descending = LEADERBOARD_SORTS.get(sort_by, ("rankHighToLow", "rankHighToLow"))
            params["sort"] = ascending if sort_order == "asc" else descending

        result = self.client.get("/leaderboard", params)
        if not result.success:
            result.data = {"leaderboard": [], "pagination": {}}
            return result.with_defaults(error="Failed to fetch leaderboard")

        data = result.data if isinstance(result.data, dict) else {"leaderboard": result.data or []}
        data["leaderboard"] = [
            {**entry, "id": entry.get("id") or entry.get("user_id"), "userId": entry.get("user_id") or entry.get("id")}
            for entry in data.get("leaderboard") or []
            if isinstance(entry, Mapping)
        ]
        result.data = data
        return result

    def user(self, user_id: str, **params: Any) -> ApiResult:
        missing = require_id(user_id, "User")
        if missing:
            return missing
        return self.client.get(f"/leaderboard/user/{user_id}", params).with_defaults(
            error="Failed to fetch user leaderboard details"
        )


class ReferralsService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/referrals/admin/list", params)
        if not result.success:
            result.data = {"referrals": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch referrals")

    def get(self, referral_id: str) -> ApiResult:
        return require_id(referral_id, "Referral") or self.client.get(f"/referrals/{referral_id}").with_defaults(
            error="Failed to fetch referral"
        )

    def update_status(self, referral_id: str, status: str, notes: str | None = None) -> ApiResult:
        missing = require_id(referral_id, "Referral")
        if missing:
            return missing
        if not status:
            return ApiResult.failure("Status is required")
        body: dict[str, Any] = {"status": status}
        if notes:
            body["notes"] = notes
        return self.client.patch(f"/referrals/{referral_id}/status", body).with_defaults(
            message="Referral status updated successfully",
            error="Failed to update referral status",
        )


class PredictionsService:
    def __init__(self, client: ApiClient):
        self.client = client

    def list(self, **params: Any) -> ApiResult:
        result = self.client.get("/predictions/admin/list", params)
        if not result.success:
            result.data = {"predictions": [], "pagination": {}}
        return result.with_defaults(error="Failed to fetch predictions")

    def get(self, prediction_id: str) -> ApiResult:
        return require_id(prediction_id, "Prediction") or self.client.get(
            f"/predictions/admin/{prediction_id}"
        ).with_defaults(error="Failed to fetch prediction")

    def for_user(self, user_id: str, **params: Any) -> ApiResult:
        return require_id(user_id, "User") or self.list(**params, userId=user_id)

    def for_fixture(self, fixture_id: str, **params: Any) -> ApiResult:
        return require_id(fixture_id, "Fixture") or self.list(**params, fixtureId=fixture_id)
