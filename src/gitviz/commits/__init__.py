from .classifier import build_commit_record, classify_message
from .models import (
    CommitClassification,
    CommitRecord,
    CommitType,
    Platform,
    RawCommit,
    RequestConfig,
    ResolvedTarget,
)
from .resolver import resolve_target

__all__ = [
    "CommitClassification",
    "CommitRecord",
    "CommitType",
    "Platform",
    "RawCommit",
    "RequestConfig",
    "ResolvedTarget",
    "build_commit_record",
    "classify_message",
    "resolve_target",
]
