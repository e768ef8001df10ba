import datetime

from pydantic import BaseModel


class GitHubCommitAuthorDTO(BaseModel):
    name: str
    date: datetime.datetime


class GitHubCommitDetailDTO(BaseModel):
    message: str
    author: GitHubCommitAuthorDTO


class GitHubCommitDTO(BaseModel):
    sha: str
    commit: GitHubCommitDetailDTO
