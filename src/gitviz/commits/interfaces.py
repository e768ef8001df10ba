from typing import Protocol

from .models import RawCommit, ResolvedTarget


class CommitProvider(Protocol):
    def fetch_commits(self, target: ResolvedTarget, branch: str, limit: int) -> list[RawCommit]:
        ...
