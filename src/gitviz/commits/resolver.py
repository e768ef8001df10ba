from urllib.parse import urlsplit

from gitviz.errors import ValidationError

from .models import ResolvedTarget

GITHUB_HOST_MARKER = "github.com"
GITLAB_HOST_MARKER = "gitlab.com"


def resolve_target(url: str | None) -> ResolvedTarget:
    """Work out which platform hosts ``url`` and the identifiers its API needs.

    Host matching is a substring test, so ``www.github.com`` and similar hosts
    resolve as well. For GitHub only the first two path segments are used; for
    GitLab the whole path is the (possibly namespaced) project path.
    """
    if not url or not url.strip():
        raise ValidationError(["Repository URL is required"])

    parts = _split_absolute_url(url)
    if parts is None:
        raise ValidationError(["Invalid repository URL"])
    host, path = parts

    segments = [segment for segment in path.strip("/").split("/") if segment]

    if GITHUB_HOST_MARKER in host:
        if len(segments) < 2:
            raise ValidationError(["Invalid GitHub repository URL format"])
        return ResolvedTarget.github(owner=segments[0], repo_name=segments[1])

    if GITLAB_HOST_MARKER in host:
        if not segments:
            raise ValidationError(["Invalid GitLab repository URL format"])
        return ResolvedTarget.gitlab(project_path="/".join(segments))

    raise ValidationError(["Only GitHub and GitLab URLs are supported"])


def _split_absolute_url(url: str) -> tuple[str, str] | None:
    if any(char.isspace() for char in url):
        return None
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return None
    if not parts.scheme or not parts.scheme.isascii() or not parts.scheme.isalpha():
        return None
    if not host:
        return None
    return host.lower(), parts.path
