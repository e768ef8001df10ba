import os
from dataclasses import dataclass, field

DEFAULT_LOG_DIR = "logs"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_GITLAB_API_URL = "https://gitlab.com/api/v4"
DEFAULT_CACHE_MAX_AGE_SEC = 300

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_user_agent() -> str:
    from . import __version__

    return f"gitviz/{__version__}"


@dataclass(frozen=True, slots=True)
class GitvizSettings:
    log_dir: str | None = DEFAULT_LOG_DIR
    log_level: str = "INFO"
    http_timeout_sec: float | None = None
    user_agent: str = field(default_factory=_default_user_agent)
    github_api_url: str = DEFAULT_GITHUB_API_URL
    gitlab_api_url: str = DEFAULT_GITLAB_API_URL
    display_timezone: str | None = None
    cache_max_age_sec: int = DEFAULT_CACHE_MAX_AGE_SEC

    def __post_init__(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        if self.http_timeout_sec is not None and self.http_timeout_sec <= 0:
            raise ValueError("http_timeout_sec must be > 0")
        if self.cache_max_age_sec < 0:
            raise ValueError("cache_max_age_sec must be >= 0")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "GitvizSettings":
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if "GITVIZ_LOG_DIR" in env:
            # An empty value disables the file log.
            kwargs["log_dir"] = env["GITVIZ_LOG_DIR"] or None
        if env.get("GITVIZ_LOG_LEVEL"):
            kwargs["log_level"] = env["GITVIZ_LOG_LEVEL"].upper()
        if env.get("GITVIZ_HTTP_TIMEOUT_SEC"):
            kwargs["http_timeout_sec"] = _parse_number(env, "GITVIZ_HTTP_TIMEOUT_SEC", float)
        if env.get("GITVIZ_USER_AGENT"):
            kwargs["user_agent"] = env["GITVIZ_USER_AGENT"]
        if env.get("GITVIZ_GITHUB_API_URL"):
            kwargs["github_api_url"] = env["GITVIZ_GITHUB_API_URL"]
        if env.get("GITVIZ_GITLAB_API_URL"):
            kwargs["gitlab_api_url"] = env["GITVIZ_GITLAB_API_URL"]
        if env.get("GITVIZ_TIMEZONE"):
            kwargs["display_timezone"] = env["GITVIZ_TIMEZONE"]
        if env.get("GITVIZ_CACHE_MAX_AGE_SEC"):
            kwargs["cache_max_age_sec"] = _parse_number(env, "GITVIZ_CACHE_MAX_AGE_SEC", int)

        return cls(**kwargs)


def _parse_number(env, name: str, kind: type) -> float | int:
    try:
        return kind(env[name])
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {env[name]!r}") from exc
