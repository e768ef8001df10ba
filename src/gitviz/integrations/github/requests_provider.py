import logging

import pydantic
import requests

from gitviz.commits.interfaces import CommitProvider
from gitviz.commits.models import Platform, RawCommit, ResolvedTarget
from gitviz.errors import FetchError
from gitviz.integrations.http import get_json_list

from .dto import GitHubCommitDTO

logger = logging.getLogger(__name__)

_COMMIT_LIST = pydantic.TypeAdapter(list[GitHubCommitDTO])


class RequestsGitHubCommitProvider(CommitProvider):
    __slots__ = ("__base_url", "__user_agent", "__timeout_sec", "__session")

    def __init__(
        self,
        user_agent: str,
        timeout_sec: float | None = None,
        session: requests.Session | None = None,
        base_url: str = "https://api.github.com",
    ) -> None:
        self.__base_url = base_url.rstrip("/")
        self.__user_agent = user_agent
        self.__timeout_sec = timeout_sec
        self.__session = session or requests.Session()

    def fetch_commits(self, target: ResolvedTarget, branch: str, limit: int) -> list[RawCommit]:
        if target.platform is not Platform.GITHUB:
            raise ValueError(f"GitHub provider cannot fetch {target.platform} targets")

        payload = get_json_list(
            self.__session,
            f"{self.__base_url}/repos/{target.owner}/{target.repo_name}/commits",
            platform_label="GitHub",
            headers={
                "User-Agent": self.__user_agent,
                "Accept": "application/vnd.github.v3+json",
            },
            params={"sha": branch, "per_page": limit},
            timeout_sec=self.__timeout_sec,
        )

        try:
            dtos = _COMMIT_LIST.validate_python(payload)
        except pydantic.ValidationError as exc:
            raise FetchError("GitHub API returned malformed commit records") from exc

        logger.debug("GitHub returned %d commits for %s", len(dtos), target.display_name)
        return [
            RawCommit(
                hash=dto.sha,
                author=dto.commit.author.name,
                message=dto.commit.message,
                authored_at=dto.commit.author.date,
            )
            for dto in dtos
        ]
