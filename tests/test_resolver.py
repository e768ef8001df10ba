import pytest

from gitviz.commits.models import Platform
from gitviz.commits.resolver import resolve_target
from gitviz.errors import ValidationError


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/pallets/flask",
        "https://github.com/pallets/flask/",
        "https://github.com/pallets/flask/tree/main/src",
        "http://www.github.com/pallets/flask.git",
    ],
)
def test_github_uses_first_two_segments(url):
    target = resolve_target(url)

    assert target.platform is Platform.GITHUB
    assert target.owner == "pallets"
    assert target.repo_name in ("flask", "flask.git")
    assert target.project_path is None


def test_gitlab_keeps_namespaced_path():
    target = resolve_target("https://gitlab.com/group/subgroup/project/")

    assert target.platform is Platform.GITLAB
    assert target.project_path == "group/subgroup/project"
    assert target.display_name == "group/subgroup/project"


def _errors(url):
    with pytest.raises(ValidationError) as excinfo:
        resolve_target(url)
    return excinfo.value.errors


@pytest.mark.parametrize("url", [None, "", "   "])
def test_missing_url_is_required(url):
    assert _errors(url) == ["Repository URL is required"]


@pytest.mark.parametrize("url", ["github.com/pallets/flask", "not a url", "https://", "https://github.com/a b/c"])
def test_malformed_url(url):
    assert _errors(url) == ["Invalid repository URL"]


@pytest.mark.parametrize(
    "url",
    ["https://bitbucket.org/team/repo", "https://example.com/github/repo", "https://codeberg.org/a/b"],
)
def test_unsupported_host(url):
    assert _errors(url) == ["Only GitHub and GitLab URLs are supported"]


@pytest.mark.parametrize("url", ["https://github.com/", "https://github.com/pallets"])
def test_github_needs_owner_and_repo(url):
    assert _errors(url) == ["Invalid GitHub repository URL format"]


def test_gitlab_needs_a_path():
    assert _errors("https://gitlab.com/") == ["Invalid GitLab repository URL format"]
