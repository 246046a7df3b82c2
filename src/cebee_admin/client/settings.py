"""Platform settings endpoints under ``/admin/settings``."""

from __future__ import annotations

from typing import Any

from cebee_admin.models.settings import PLATFORM_STATUSES, PlatformSettings

from .base import ApiClient, ApiResult


def _settings_document(result: ApiResult) -> ApiResult:
    # Updates answer {"settings": {...}}; older builds return the document itself.
    if result.success and isinstance(result.data, dict) and isinstance(result.data.get("settings"), dict):
        result.data = result.data["settings"]
    return result


class SettingsService:
    def __init__(self, client: ApiClient):
        self.client = client

    def get(self) -> ApiResult:
        return _settings_document(self.client.get("/admin/settings")).with_defaults(
            error="Failed to load settings"
        )

    def load(self) -> PlatformSettings:
        """Fetch and flatten the settings document, falling back to defaults."""

        result = self.get()
        return PlatformSettings.from_backend(result.data if result.success else None)

    def current(self) -> ApiResult:
        """Fetch the settings as :class:`PlatformSettings`, keeping a failed read as a failure.

        Updates that merge into the stored settings start from here, so a failed
        read never writes defaults back to the backend.
        """

        result = self.get()
        if not result.success:
            return result
        return ApiResult(True, PlatformSettings.from_backend(result.data), None, result.status, result.message)

    def _put(self, section: str, body: Any, message: str) -> ApiResult:
        return _settings_document(self.client.put(f"/admin/settings/{section}", body)).with_defaults(
            message=message,
            error=f"Failed to update {section.replace('-', ' ')}",
        )

    def update_platform_status(self, platform_status: str, settings: PlatformSettings | None = None) -> ApiResult:
        """Switch the platform status, sending the maintenance stamp of ``settings`` when given."""

        if platform_status not in PLATFORM_STATUSES:
            return ApiResult.failure(f"Platform status must be one of: {', '.join(PLATFORM_STATUSES)}")
        body: dict[str, Any] = {"platformStatus": platform_status}
        if settings is not None:
            started_at = settings.maintenance_started_at
            body["maintenanceStartedAt"] = started_at.isoformat() if started_at else None
            body["maintenanceStartedBy"] = settings.maintenance_started_by
        return self._put("platform-status", body, "Platform status updated successfully")

    def update_maintenance_message(self, title: str, body: str) -> ApiResult:
        return self._put(
            "maintenance-message",
            {"title": title, "body": body},
            "Maintenance message updated successfully",
        )

    def update_general(self, settings: PlatformSettings) -> ApiResult:
        return self._put("general", settings.general_payload(), "General settings updated successfully")

    def update_timezone(self, timezone: str) -> ApiResult:
        return self._put("timezone", {"timezone": timezone}, "Timezone updated successfully")

    def update_app_versions(self, settings: PlatformSettings) -> ApiResult:
        return self._put("app-versions", settings.app_versions_payload(), "App versions updated successfully")

    def update_release_notes(self, release_notes: str) -> ApiResult:
        return self._put("release-notes", {"releaseNotes": release_notes}, "Release notes updated successfully")
