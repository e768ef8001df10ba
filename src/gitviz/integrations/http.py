import logging

import requests

from gitviz.errors import FetchError, UpstreamError

logger = logging.getLogger(__name__)


def get_json_list(
    session: requests.Session,
    url: str,
    *,
    platform_label: str,
    headers: dict[str, str],
    params: dict[str, object],
    timeout_sec: float | None,
) -> list[object]:
    """Issue one GET and return the decoded JSON array body."""
    logger.debug("GET %s params=%s", url, params)
    try:
        response = session.get(url, headers=headers, params=params, timeout=timeout_sec)
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch commits from {platform_label} API") from exc

    if not response.ok:
        raise UpstreamError(
            f"{platform_label} API responded with HTTP {response.status_code}: "
            f"{_upstream_message(response)}",
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchError(f"{platform_label} API returned a non-JSON response") from exc

    if not isinstance(payload, list):
        raise FetchError(f"{platform_label} API returned non-list response")
    return payload


def _upstream_message(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.reason or "unknown error"
    if isinstance(payload, dict):
        # GitHub uses "message", GitLab uses "message" or "error".
        for key in ("message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return response.reason or "unknown error"
