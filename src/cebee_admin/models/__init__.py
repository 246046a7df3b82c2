"""Pydantic models for backend resources and page payloads."""

from .dashboard import DashboardData, DashboardStats, NextFixture, TodayFixtureSummary
from .entities import (
    BackendModel,
    FaqItem,
    Fixture,
    League,
    Notification,
    Player,
    Prediction,
    Reward,
    Team,
    TeamHistoryEntry,
)
from .logs import SystemLog
from .poll import Poll, PollFixture
from .settings import PlatformSettings, format_datetime, toggle_maintenance
from .users import KycRecord, User, UserDetails

__all__ = [
    "BackendModel",
    "DashboardData",
    "DashboardStats",
    "FaqItem",
    "Fixture",
    "KycRecord",
    "League",
    "NextFixture",
    "Notification",
    "PlatformSettings",
    "Player",
    "Poll",
    "PollFixture",
    "Prediction",
    "Reward",
    "SystemLog",
    "Team",
    "TeamHistoryEntry",
    "TodayFixtureSummary",
    "User",
    "UserDetails",
    "format_datetime",
    "toggle_maintenance",
]
