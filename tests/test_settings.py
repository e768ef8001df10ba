import pytest

from gitviz.client import GitvizClient
from gitviz.settings import GitvizSettings


def test_defaults():
    settings = GitvizSettings()

    assert settings.log_dir == "logs"
    assert settings.http_timeout_sec is None
    assert settings.user_agent == "gitviz/1.0.0"
    assert settings.github_api_url == "https://api.github.com"
    assert settings.gitlab_api_url == "https://gitlab.com/api/v4"
    assert settings.cache_max_age_sec == 300


def test_from_env_reads_prefixed_variables():
    settings = GitvizSettings.from_env(
        {
            "GITVIZ_LOG_DIR": "",
            "GITVIZ_LOG_LEVEL": "debug",
            "GITVIZ_HTTP_TIMEOUT_SEC": "2.5",
            "GITVIZ_USER_AGENT": "PHP GitViz",
            "GITVIZ_TIMEZONE": "UTC",
            "GITVIZ_CACHE_MAX_AGE_SEC": "60",
            "UNRELATED": "x",
        }
    )

    assert settings.log_dir is None
    assert settings.log_level == "DEBUG"
    assert settings.http_timeout_sec == 2.5
    assert settings.user_agent == "PHP GitViz"
    assert settings.display_timezone == "UTC"
    assert settings.cache_max_age_sec == 60


def test_from_env_rejects_bad_numbers():
    with pytest.raises(ValueError, match="GITVIZ_HTTP_TIMEOUT_SEC"):
        GitvizSettings.from_env({"GITVIZ_HTTP_TIMEOUT_SEC": "soon"})


@pytest.mark.parametrize(
    "kwargs",
    [{"log_level": "LOUD"}, {"http_timeout_sec": 0}, {"cache_max_age_sec": -1}],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        GitvizSettings(**kwargs)


def test_client_rejects_unknown_timezone():
    with pytest.raises(ValueError, match="Unknown display timezone"):
        GitvizClient(settings=GitvizSettings(display_timezone="Mars/Olympus_Mons"))
