"""DevAssist pipeline: record -> metadata paths -> merged pull requests.

Usage:
    source = create_pr_source(config)
    assist = DevAssist(StaticContextSource(profile="Agent"), source, config)
    report = await assist.lookup(RecordContext(object_name="Contact"), "Agent")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from devassist.aggregate import aggregate, make_link_builder
from devassist.config import ProjectConfig
from devassist.context import resolve_context
from devassist.inference import infer_paths_for_context
from devassist.models import AggregationResult, RecordContext
from devassist.sources.base import ContextSource, PullRequestSource

logger = logging.getLogger("devassist.assist")


@dataclass
class AssistReport:
    """Outcome of one DevAssist run."""

    record: RecordContext | None
    profile: str | None
    paths: list[str] = field(default_factory=list)
    result: AggregationResult = field(default_factory=AggregationResult)

    def to_dict(self) -> dict:
        return {
            "record": self.record.model_dump() if self.record else None,
            "profile": self.profile,
            "paths": self.paths,
            "pull_requests": [
                pr.model_dump(mode="json") for pr in self.result.pull_requests
            ],
            "failures": [f.model_dump() for f in self.result.failures],
        }


class DevAssist:
    """Wires a context source and a pull-request source to the core."""

    def __init__(
        self,
        context_source: ContextSource,
        pr_source: PullRequestSource,
        config: ProjectConfig | None = None,
        dedupe: bool = False,
    ) -> None:
        self.context_source = context_source
        self.pr_source = pr_source
        self.config = config or ProjectConfig()
        self.dedupe = dedupe

    def paths_for(self, record: RecordContext, profile: str | None) -> list[str]:
        return infer_paths_for_context(record, profile, self.config.inference.source_roots)

    async def lookup(self, record: RecordContext, profile: str | None) -> AssistReport:
        """Infer paths for a known context and aggregate their pull requests.

        Raises:
            InvalidContextError: If the record has no object name.
        """
        paths = self.paths_for(record, profile)
        result = await aggregate(
            paths,
            self.pr_source.get_merged_prs,
            make_link_builder(self.config.repository.link_base_url),
            dedupe=self.dedupe,
        )
        return AssistReport(record=record, profile=profile, paths=paths, result=result)

    async def run(self, record_id: str) -> AssistReport:
        """Resolve the record and profile, then look up pull requests."""
        resolved = await resolve_context(self.context_source, record_id)
        if not resolved.is_ready:
            logger.info(f"No record context for {record_id}, skipping path inference")
            return AssistReport(record=None, profile=resolved.profile)
        return await self.lookup(resolved.record, resolved.profile)
