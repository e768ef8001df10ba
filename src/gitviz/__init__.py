"""gitviz public package API."""

from .client import GitvizClient
from .commits.models import CommitRecord, CommitType, RequestConfig
from .errors import FetchError, GitvizError, InternalError, UpstreamError, ValidationError
from .settings import GitvizSettings

__version__ = "1.0.0"

__all__ = [
    "CommitRecord",
    "CommitType",
    "FetchError",
    "GitvizClient",
    "GitvizError",
    "GitvizSettings",
    "InternalError",
    "RequestConfig",
    "UpstreamError",
    "ValidationError",
]
