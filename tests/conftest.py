import datetime
import json

import requests

from gitviz.commits.models import CommitRecord, CommitType


def make_response(status_code: int = 200, payload=None, text: str | None = None, reason: str = "OK") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    body = text if text is not None else json.dumps(payload)
    response._content = body.encode("utf-8")
    return response


class FakeSession:
    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def github_commit(sha: str, message: str, name: str = "Ada", date: str = "2024-03-01T12:30:45Z") -> dict:
    return {
        "sha": sha,
        "commit": {"message": message, "author": {"name": name, "email": "ada@example.com", "date": date}},
        "html_url": f"https://github.com/o/r/commit/{sha}",
    }


def gitlab_commit(sha: str, message: str, name: str = "Grace", date: str = "2024-03-01T13:30:45.000+01:00") -> dict:
    return {
        "id": sha,
        "short_id": sha[:8],
        "message": message,
        "author_name": name,
        "created_at": date,
    }


def make_record(
    title: str = "add button",
    commit_type: CommitType = CommitType.FEAT,
    scope: str = "",
    body: str = "",
    author: str = "Ada",
    sha: str = "0123456789abcdef0123456789abcdef01234567",
    emoji: str = "✨",
) -> CommitRecord:
    return CommitRecord(
        hash=sha,
        author=author,
        authored_at=datetime.datetime(2024, 3, 1, 12, 30, 45, tzinfo=datetime.UTC),
        type=commit_type,
        scope=scope,
        title=title,
        body=body,
        emoji=emoji,
    )
