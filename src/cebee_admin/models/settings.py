"""Platform settings document and its display-format mapping."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field


MAINTENANCE_DEFAULT_TITLE = "Under Maintenance"
MAINTENANCE_DEFAULT_MESSAGE = (
    "We are currently performing scheduled maintenance. The app will be back online "
    "shortly. Thank you for your patience."
)

PLATFORM_STATUSES = ("online", "maintenance")

# key -> (label, strftime pattern)
DATE_FORMATS: dict[str, tuple[str, str]] = {
    "ddMmYyyy": ("DD/MM/YYYY", "%d/%m/%Y"),
    "mmDdYyyy": ("MM/DD/YYYY", "%m/%d/%Y"),
    "yyyyMmDd": ("YYYY-MM-DD", "%Y-%m-%d"),
}

TIME_FORMATS: dict[str, tuple[str, str]] = {
    "hour12": ("12-hour (AM/PM)", "%I:%M %p"),
    "hour24": ("24-hour", "%H:%M"),
}

DEFAULT_DATE_FORMAT = "ddMmYyyy"
DEFAULT_TIME_FORMAT = "hour12"


def date_format_label(key: str) -> str:
    return DATE_FORMATS.get(key, DATE_FORMATS[DEFAULT_DATE_FORMAT])[0]


def time_format_label(key: str) -> str:
    return TIME_FORMATS.get(key, TIME_FORMATS[DEFAULT_TIME_FORMAT])[0]


def _resolve_zone(name: str | None):
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


class PlatformSettings(BaseModel):
    platform_status: str = "online"
    app_name: str = "CeBee Predict"
    maintenance_title: str = MAINTENANCE_DEFAULT_TITLE
    maintenance_message: str = MAINTENANCE_DEFAULT_MESSAGE
    maintenance_started_at: Optional[datetime] = None
    maintenance_started_by: Optional[str] = None
    date_format: str = DEFAULT_DATE_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT
    android_app_version: str = "1.0.0"
    ios_app_version: str = "1.0.0"
    release_notes: str = ""
    last_version_update: Optional[datetime] = None
    display_timezone: str = "UTC"
    extra: dict[str, Any] = Field(default_factory=dict)

    @property
    def in_maintenance(self) -> bool:
        return self.platform_status == "maintenance"

    @classmethod
    def from_backend(cls, payload: Mapping[str, Any] | None) -> "PlatformSettings":
        """Flatten the backend settings document.

        Sections may arrive nested (``general``, ``maintenanceMessage``,
        ``appVersions``) or already flattened; unknown keys are kept in
        ``extra``.
        """

        if not payload:
            return cls()
        data = dict(payload)
        general = data.pop("general", None) or {}
        maintenance = data.pop("maintenanceMessage", None)
        versions = data.pop("appVersions", None) or {}
        values: dict[str, Any] = {}

        def pick(*candidates: tuple[Mapping[str, Any], str]) -> Any:
            for source, key in candidates:
                if isinstance(source, Mapping) and source.get(key) not in (None, ""):
                    return source[key]
            return None

        mapping = {
            "platform_status": pick((data, "platformStatus")),
            "app_name": pick((general, "appName"), (data, "appName")),
            "date_format": pick((general, "dateFormat"), (data, "dateFormat")),
            "time_format": pick((general, "timeFormat"), (data, "timeFormat")),
            "maintenance_title": pick((maintenance or {}, "title"), (data, "maintenanceTitle")),
            "maintenance_started_at": pick((data, "maintenanceStartedAt")),
            "maintenance_started_by": pick((data, "maintenanceStartedBy")),
            "android_app_version": pick((versions, "android"), (data, "androidAppVersion")),
            "ios_app_version": pick((versions, "ios"), (data, "iosAppVersion")),
            "release_notes": pick((data, "releaseNotes")),
            "last_version_update": pick((data, "lastVersionUpdate")),
            "display_timezone": pick((data, "timezone"), (data, "displayTimezone")),
        }
        if isinstance(maintenance, str):
            mapping["maintenance_message"] = maintenance or None
        else:
            mapping["maintenance_message"] = pick((maintenance or {}, "body"), (data, "maintenanceBody"))
        for key, value in mapping.items():
            if value is not None:
                values[key] = value

        known = {
            "platformStatus", "appName", "dateFormat", "timeFormat", "maintenanceTitle",
            "maintenanceStartedAt", "maintenanceStartedBy", "androidAppVersion", "iosAppVersion",
            "releaseNotes", "lastVersionUpdate", "timezone", "displayTimezone", "maintenanceBody",
        }
        values["extra"] = {key: value for key, value in data.items() if key not in known}
        return cls.model_validate(values)

    def general_payload(self) -> dict[str, Any]:
        return {"appName": self.app_name, "dateFormat": self.date_format, "timeFormat": self.time_format}

    def maintenance_message_payload(self) -> dict[str, str]:
        return {"title": self.maintenance_title, "body": self.maintenance_message}

    def app_versions_payload(self) -> dict[str, str]:
        return {"ios": self.ios_app_version, "android": self.android_app_version}

    def format_datetime(self, value: datetime | None) -> str:
        return format_datetime(value, self)


def format_datetime(value: datetime | None, settings: PlatformSettings | None = None) -> str:
    """Render ``value`` using the configured display timezone and formats."""

    if value is None:
        return "—"
    settings = settings or PlatformSettings()
    date_pattern = DATE_FORMATS.get(settings.date_format, DATE_FORMATS[DEFAULT_DATE_FORMAT])[1]
    time_pattern = TIME_FORMATS.get(settings.time_format, TIME_FORMATS[DEFAULT_TIME_FORMAT])[1]
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(_resolve_zone(settings.display_timezone))
    return local.strftime(f"{date_pattern} {time_pattern}")


def toggle_maintenance(
    settings: PlatformSettings,
    admin_name: str,
    *,
    now: datetime | None = None,
) -> PlatformSettings:
    """Flip between ``online`` and ``maintenance``.

    Enabling stamps who started maintenance and when; going back online clears
    both fields.
    """

    if settings.platform_status == "online":
        return settings.model_copy(
            update={
                "platform_status": "maintenance",
                "maintenance_started_at": now or datetime.now(timezone.utc),
                "maintenance_started_by": admin_name or "Admin",
            }
        )
    return settings.model_copy(
        update={
            "platform_status": "online",
            "maintenance_started_at": None,
            "maintenance_started_by": None,
        }
    )


def reset_maintenance_message(settings: PlatformSettings) -> PlatformSettings:
    return settings.model_copy(
        update={
            "maintenance_title": MAINTENANCE_DEFAULT_TITLE,
            "maintenance_message": MAINTENANCE_DEFAULT_MESSAGE,
        }
    )
