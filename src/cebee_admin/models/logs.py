"""Entries of the admin activity and platform event log."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field

from .entities import BackendModel


RESOLVED_LOG_STATUSES = ("acknowledged", "resolved")


class SystemLog(BackendModel):
    log_id: Optional[str] = Field(None, validation_alias=AliasChoices("logId", "log_id"))
    event: str = ""
    category: Optional[str] = None
    log_type: Optional[str] = Field(None, validation_alias=AliasChoices("type", "logType", "log_type"))
    severity: Optional[str] = Field(None, validation_alias=AliasChoices("severity", "severityLevel"))
    status: Optional[str] = Field(None, validation_alias=AliasChoices("status", "logStatus"))
    admin_name: Optional[str] = Field(None, validation_alias=AliasChoices("adminName", "admin_name"))
    related_username: Optional[str] = Field(
        None, validation_alias=AliasChoices("relatedUsername", "related_username")
    )
    created_at: Optional[datetime] = Field(None, validation_alias=AliasChoices("createdAt", "created_at"))

    @property
    def is_resolved(self) -> bool:
        return (self.status or "").lower() in RESOLVED_LOG_STATUSES
