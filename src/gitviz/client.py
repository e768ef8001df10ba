import datetime
import zoneinfo

import requests

from gitviz.commits.models import Platform, RequestConfig
from gitviz.commits.service import CommitVisualizationService
from gitviz.integrations.github.requests_provider import RequestsGitHubCommitProvider
from gitviz.integrations.gitlab.requests_provider import RequestsGitLabCommitProvider
from gitviz.settings import GitvizSettings


class GitvizClient:
    __slots__ = ("__settings", "__service")

    def __init__(
        self,
        settings: GitvizSettings | None = None,
        service: CommitVisualizationService | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.__settings = settings or GitvizSettings()

        if service is not None:
            self.__service = service
            return

        session = session or requests.Session()
        github_provider = RequestsGitHubCommitProvider(
            user_agent=self.__settings.user_agent,
            timeout_sec=self.__settings.http_timeout_sec,
            session=session,
            base_url=self.__settings.github_api_url,
        )
        gitlab_provider = RequestsGitLabCommitProvider(
            timeout_sec=self.__settings.http_timeout_sec,
            session=session,
            base_url=self.__settings.gitlab_api_url,
        )
        self.__service = CommitVisualizationService(
            providers={Platform.GITHUB: github_provider, Platform.GITLAB: gitlab_provider},
            timezone=_load_timezone(self.__settings.display_timezone),
        )

    @property
    def settings(self) -> GitvizSettings:
        return self.__settings

    @property
    def commits(self) -> CommitVisualizationService:
        return self.__service

    def visualize(self, config: RequestConfig) -> str:
        return self.__service.visualize(config)


def _load_timezone(name: str | None) -> datetime.tzinfo | None:
    if name is None:
        return None
    if name.upper() == "UTC":
        return datetime.UTC
    try:
        return zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown display timezone: {name}") from exc
