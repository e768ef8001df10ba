import datetime

from pydantic import BaseModel


class GitLabCommitDTO(BaseModel):
    id: str
    message: str
    author_name: str
    created_at: datetime.datetime
