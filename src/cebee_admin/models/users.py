"""Player accounts as returned by ``/users`` and ``/users/{id}``."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict

from .entities import BackendModel


class User(BackendModel):
    username: str = ""
    email: Optional[str] = None
    full_name: Optional[str] = Field(None, validation_alias=AliasChoices("fullName", "full_name", "name"))
    country: Optional[str] = None
    status: Optional[str] = None
    is_active: bool = Field(True, validation_alias=AliasChoices("isActive", "is_active"))
    is_blocked: bool = Field(False, validation_alias=AliasChoices("isBlocked", "is_blocked"))
    is_verified: bool = Field(False, validation_alias=AliasChoices("isVerified", "is_verified"))
    flag_reason: Optional[str] = Field(None, validation_alias=AliasChoices("flagReason", "flag_reason"))
    fraud_flags: List[str] = Field(default_factory=list, validation_alias=AliasChoices("fraudFlags", "fraud_flags"))
    sp_total: float = Field(0.0, validation_alias=AliasChoices("spTotal", "totalSPEarned", "sp_total"))
    sp_current: float = Field(0.0, validation_alias=AliasChoices("spCurrent", "currentSPBalance", "sp_current"))
    total_predictions: int = Field(
        0, validation_alias=AliasChoices("totalPredictions", "totalPredictionsMade", "total_predictions")
    )
    prediction_accuracy: float = Field(
        0.0, validation_alias=AliasChoices("predictionAccuracy", "prediction_accuracy")
    )
    created_at: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("createdAt", "registrationDate", "created_at")
    )
    last_login: Optional[datetime] = Field(None, validation_alias=AliasChoices("lastLogin", "last_login"))

    @property
    def is_flagged(self) -> bool:
        return self.status == "Flagged" or bool(self.fraud_flags) or bool(self.flag_reason)

    @property
    def account_status(self) -> str:
        """The single label shown in listings; flags outrank suspension and blocks."""

        if self.is_flagged:
            return "flagged"
        if self.status == "suspended":
            return "suspended"
        if self.is_blocked:
            return "blocked"
        return "active" if self.is_active else "inactive"

    def matches_status(self, status: str) -> bool:
        if status == "active":
            return self.is_active and not self.is_blocked
        if status == "inactive":
            return not self.is_active and not self.is_blocked
        if status == "suspended":
            return self.status == "suspended"
        if status == "flagged":
            return self.is_flagged
        if status == "blocked":
            return self.is_blocked
        return True


class KycRecord(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    status: str = "not_submitted"
    risk_level: str = Field("none", validation_alias=AliasChoices("riskLevel", "risk_level"))
    submitted_at: Optional[datetime] = Field(None, validation_alias=AliasChoices("submittedAt", "submitted_at"))
    verified_at: Optional[datetime] = Field(None, validation_alias=AliasChoices("verifiedAt", "verified_at"))
    verified_by: Optional[str] = Field(None, validation_alias=AliasChoices("verifiedBy", "verified_by"))


class UserDetails(BaseModel):
    user: User
    kyc: KycRecord = Field(default_factory=KycRecord)
    activity: List[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_backend(cls, data: Any, user_id: str) -> "UserDetails":
        """Merge the ``profile`` and ``points`` sections of a user details response."""

        data = data if isinstance(data, Mapping) else {}
        profile = data.get("profile") if isinstance(data.get("profile"), Mapping) else data
        points = data.get("points") if isinstance(data.get("points"), Mapping) else {}
        kyc = data.get("kyc") if isinstance(data.get("kyc"), Mapping) else {}
        activity = data.get("activityLog") if isinstance(data.get("activityLog"), list) else []
        user_fields = {**points, **profile}
        user_fields["id"] = profile.get("_id") or profile.get("userId") or profile.get("id") or user_id
        return cls(
            user=User.model_validate(user_fields),
            kyc=KycRecord.model_validate({key: value for key, value in kyc.items() if value is not None}),
            activity=[item for item in activity if isinstance(item, Mapping)],
        )
