import logging
from urllib.parse import quote

import pydantic
import requests

from gitviz.commits.interfaces import CommitProvider
from gitviz.commits.models import Platform, RawCommit, ResolvedTarget
from gitviz.errors import FetchError
from gitviz.integrations.http import get_json_list

from .dto import GitLabCommitDTO

logger = logging.getLogger(__name__)

_COMMIT_LIST = pydantic.TypeAdapter(list[GitLabCommitDTO])


class RequestsGitLabCommitProvider(CommitProvider):
    __slots__ = ("__base_url", "__timeout_sec", "__session")

    def __init__(
        self,
        timeout_sec: float | None = None,
        session: requests.Session | None = None,
        base_url: str = "https://gitlab.com/api/v4",
    ) -> None:
        self.__base_url = base_url.rstrip("/")
        self.__timeout_sec = timeout_sec
        self.__session = session or requests.Session()

    def fetch_commits(self, target: ResolvedTarget, branch: str, limit: int) -> list[RawCommit]:
        if target.platform is not Platform.GITLAB:
            raise ValueError(f"GitLab provider cannot fetch {target.platform} targets")

        # Namespaced paths travel as a single encoded segment: group%2Fsub%2Fproject
        project_id = quote(target.project_path or "", safe="")
        payload = get_json_list(
            self.__session,
            f"{self.__base_url}/projects/{project_id}/repository/commits",
            platform_label="GitLab",
            headers={"Accept": "application/json"},
            params={"ref_name": branch, "per_page": limit},
            timeout_sec=self.__timeout_sec,
        )

        try:
            dtos = _COMMIT_LIST.validate_python(payload)
        except pydantic.ValidationError as exc:
            raise FetchError("GitLab API returned malformed commit records") from exc

        logger.debug("GitLab returned %d commits for %s", len(dtos), target.display_name)
        return [
            RawCommit(
                hash=dto.id,
                author=dto.author_name,
                message=dto.message,
                authored_at=dto.created_at,
            )
            for dto in dtos
        ]
