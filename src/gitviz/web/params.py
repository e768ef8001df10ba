import re
from typing import Mapping

from gitviz.commits.models import (
    DEFAULT_BRANCH,
    DEFAULT_COMMIT_LIMIT,
    MAX_COMMIT_LIMIT,
    MIN_COMMIT_LIMIT,
    RequestConfig,
)

COLOR_SCHEME_HEADER = "Sec-CH-Prefers-Color-Scheme"

_TRUTHY = frozenset({"1", "true", "on", "yes"})
# Leading decimal number, with optional fraction and exponent ("12abc", "1e3", "2.5").
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_limit(raw: str | None) -> int:
    """Read ``limit`` leniently: a leading number is truncated to an integer,
    anything else is 0.

    Values far outside the accepted range are pinned just past its edges so
    arbitrarily long digit strings never reach ``int()``. Range clamping
    happens in :class:`RequestConfig`.
    """
    if raw is None:
        return DEFAULT_COMMIT_LIMIT
    match = _LEADING_NUMBER_RE.match(raw)
    if match is None:
        return 0
    value = float(match.group(1))
    return int(min(max(value, MIN_COMMIT_LIMIT - 1), MAX_COMMIT_LIMIT + 1))


def parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


def detect_dark_mode(args: Mapping[str, str], headers: Mapping[str, str]) -> bool:
    if "dark_mode" in args:
        return parse_bool(args["dark_mode"])
    preference = headers.get(COLOR_SCHEME_HEADER)
    if preference is None:
        return False
    return preference.strip().strip('"').lower() == "dark"


def build_request_config(args: Mapping[str, str], headers: Mapping[str, str]) -> RequestConfig:
    return RequestConfig(
        repository_url=args.get("repo") or "",
        commit_limit=parse_limit(args.get("limit")),
        dark_mode=detect_dark_mode(args, headers),
        branch=args.get("branch") or DEFAULT_BRANCH,
    )
