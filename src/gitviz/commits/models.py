import datetime
import enum
from dataclasses import dataclass

MIN_COMMIT_LIMIT = 1
MAX_COMMIT_LIMIT = 50
DEFAULT_COMMIT_LIMIT = 10
DEFAULT_BRANCH = "main"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SHORT_HASH_LENGTH = 7


def clamp_commit_limit(limit: int) -> int:
    return min(max(limit, MIN_COMMIT_LIMIT), MAX_COMMIT_LIMIT)


@dataclass(frozen=True, slots=True)
class RequestConfig:
    repository_url: str
    commit_limit: int = DEFAULT_COMMIT_LIMIT
    dark_mode: bool = False
    branch: str = DEFAULT_BRANCH

    def __post_init__(self) -> None:
        object.__setattr__(self, "commit_limit", clamp_commit_limit(self.commit_limit))

    def as_log_dict(self) -> dict[str, object]:
        return {
            "repo_url": self.repository_url,
            "limit": self.commit_limit,
            "dark_mode": self.dark_mode,
            "branch": self.branch,
        }


class Platform(enum.StrEnum):
    GITHUB = "github"
    GITLAB = "gitlab"


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    platform: Platform
    owner: str | None = None
    repo_name: str | None = None
    project_path: str | None = None

    @classmethod
    def github(cls, owner: str, repo_name: str) -> "ResolvedTarget":
        return cls(platform=Platform.GITHUB, owner=owner, repo_name=repo_name)

    @classmethod
    def gitlab(cls, project_path: str) -> "ResolvedTarget":
        return cls(platform=Platform.GITLAB, project_path=project_path)

    @property
    def display_name(self) -> str:
        if self.platform is Platform.GITHUB:
            return f"{self.owner}/{self.repo_name}"
        return self.project_path or ""


@dataclass(frozen=True, slots=True)
class RawCommit:
    hash: str
    author: str
    message: str
    authored_at: datetime.datetime


class CommitType(enum.StrEnum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    CHORE = "chore"
    BUILD = "build"
    CI = "ci"
    REVERT = "revert"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class CommitClassification:
    type: CommitType
    scope: str
    title: str
    body: str
    emoji: str


@dataclass(frozen=True, slots=True)
class CommitRecord:
    hash: str
    author: str
    authored_at: datetime.datetime
    type: CommitType
    scope: str
    title: str
    body: str
    emoji: str

    @property
    def formatted_date(self) -> str:
        return self.authored_at.strftime(DATE_FORMAT)

    @property
    def short_hash(self) -> str:
        return self.hash[:SHORT_HASH_LENGTH]
