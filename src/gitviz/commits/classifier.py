import datetime
import re

from .models import CommitClassification, CommitRecord, CommitType, RawCommit

CONVENTIONAL_HEADLINE_RE = re.compile(
    r"^(feat|fix|docs|style|refactor|perf|test|chore|build|ci|revert)(\(([^)]+)\))?:\s*(.*)"
)

TYPE_EMOJIS: dict[CommitType, str] = {
    CommitType.FEAT: "✨",
    CommitType.FIX: "🔧",
    CommitType.DOCS: "📝",
    CommitType.STYLE: "💄",
    CommitType.REFACTOR: "♻️",
    CommitType.PERF: "⚡️",
    CommitType.TEST: "🧪",
    CommitType.CHORE: "🔨",
    CommitType.BUILD: "📦",
    CommitType.CI: "🎯",
    CommitType.REVERT: "⏪",
    CommitType.OTHER: "💡",
}


def emoji_for(commit_type: str) -> str:
    try:
        return TYPE_EMOJIS[CommitType(commit_type)]
    except ValueError:
        return TYPE_EMOJIS[CommitType.OTHER]


def classify_message(message: str) -> CommitClassification:
    """Split a commit message into conventional-commit parts.

    Never fails: a headline without a recognised prefix is classified as
    ``other`` and kept verbatim as the title.
    """
    headline, newline, rest = message.partition("\n")
    body = rest.strip() if newline else ""

    match = CONVENTIONAL_HEADLINE_RE.match(headline)
    if match is None:
        commit_type = CommitType.OTHER
        scope = ""
        title = headline
    else:
        commit_type = CommitType(match.group(1))
        scope = match.group(3) or ""
        title = match.group(4)

    return CommitClassification(
        type=commit_type,
        scope=scope,
        title=title,
        body=body,
        emoji=emoji_for(commit_type),
    )


def build_commit_record(raw: RawCommit, tz: datetime.tzinfo | None = None) -> CommitRecord:
    classification = classify_message(raw.message)
    return CommitRecord(
        hash=raw.hash,
        author=raw.author,
        authored_at=raw.authored_at.astimezone(tz),
        type=classification.type,
        scope=classification.scope,
        title=classification.title,
        body=classification.body,
        emoji=classification.emoji,
    )
