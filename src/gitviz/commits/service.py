import datetime
import json
import logging
from typing import Mapping

from gitviz.render.svg import render_svg

from .classifier import build_commit_record
from .interfaces import CommitProvider
from .models import CommitRecord, Platform, RequestConfig
from .resolver import resolve_target

logger = logging.getLogger(__name__)


class CommitVisualizationService:
    __slots__ = ("__providers", "__timezone")

    def __init__(
        self,
        providers: Mapping[Platform, CommitProvider],
        timezone: datetime.tzinfo | None = None,
    ) -> None:
        self.__providers = dict(providers)
        self.__timezone = timezone

    def collect_commits(self, config: RequestConfig) -> list[CommitRecord]:
        logger.info("Configuration: %s", json.dumps(config.as_log_dict()))
        target = resolve_target(config.repository_url)

        provider = self.__providers.get(target.platform)
        if provider is None:
            raise LookupError(f"No commit provider configured for {target.platform}")

        logger.info("Fetching commits...")
        raw_commits = provider.fetch_commits(target, config.branch, config.commit_limit)
        return [build_commit_record(raw, self.__timezone) for raw in raw_commits]

    def visualize(self, config: RequestConfig) -> str:
        commits = self.collect_commits(config)
        svg = render_svg(commits, config.dark_mode)
        logger.info("Successfully generated SVG for %s", config.repository_url)
        return svg
