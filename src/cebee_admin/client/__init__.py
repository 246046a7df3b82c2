"""REST client for the CeBee backend."""

from __future__ import annotations

from dataclasses import dataclass

from .auth import AuthService
from .base import ApiClient, ApiError, ApiResult
from .catalog import LeaguesService, PlayersService, TeamsService
from .content import DOCUMENT_KINDS, ContentDocumentService, DocumentKind, FaqService
from .dashboard import DashboardService
from .engagement import (
    LeaderboardService,
    NotificationsService,
    PredictionsService,
    ReferralsService,
    RewardsService,
    target_audience,
)
from .fixtures import FixturesService
from .logs import SystemLogsService
from .polls import PollsService
from .settings import SettingsService
from .users import UsersService


@dataclass
class BackendServices:
    """One service per backend resource, sharing a single :class:`ApiClient`."""

    client: ApiClient
    auth: AuthService
    dashboard: DashboardService
    fixtures: FixturesService
    leagues: LeaguesService
    teams: TeamsService
    players: PlayersService
    polls: PollsService
    notifications: NotificationsService
    rewards: RewardsService
    leaderboard: LeaderboardService
    referrals: ReferralsService
    predictions: PredictionsService
    faqs: FaqService
    documents: dict[str, ContentDocumentService]
    users: UsersService
    system_logs: SystemLogsService
    settings: SettingsService

    @classmethod
    def from_client(cls, client: ApiClient) -> "BackendServices":
        return cls(
            client=client,
            auth=AuthService(client),
            dashboard=DashboardService(client),
            fixtures=FixturesService(client),
            leagues=LeaguesService(client),
            teams=TeamsService(client),
            players=PlayersService(client),
            polls=PollsService(client),
            notifications=NotificationsService(client),
            rewards=RewardsService(client),
            leaderboard=LeaderboardService(client),
            referrals=ReferralsService(client),
            predictions=PredictionsService(client),
            faqs=FaqService(client),
            documents={slug: ContentDocumentService(client, kind) for slug, kind in DOCUMENT_KINDS.items()},
            users=UsersService(client),
            system_logs=SystemLogsService(client),
            settings=SettingsService(client),
        )


__all__ = [
    "ApiClient",
    "ApiError",
    "ApiResult",
    "AuthService",
    "BackendServices",
    "ContentDocumentService",
    "DashboardService",
    "DocumentKind",
    "FaqService",
    "FixturesService",
    "LeaderboardService",
    "LeaguesService",
    "NotificationsService",
    "PlayersService",
    "PollsService",
    "PredictionsService",
    "ReferralsService",
    "RewardsService",
    "SettingsService",
    "SystemLogsService",
    "TeamsService",
    "UsersService",
    "target_audience",
]
