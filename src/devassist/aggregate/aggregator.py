"""Pull-request aggregation over a list of metadata paths.

One lookup runs per path, all of them concurrently. A failing lookup only
costs its own path: the error is logged, recorded on the result and the other
paths still contribute. Results are merged after every lookup has settled, in
path order and then in the order the service returned them.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import ValidationError

from devassist.exceptions import LookupFailedError
from devassist.models import (
    AggregationResult,
    AnnotatedPullRequest,
    FileLink,
    LookupFailure,
    PullRequest,
)

logger = logging.getLogger("devassist.aggregate")

Lookup = Callable[[str], Awaitable[Sequence[Any]]]


@dataclass
class _Outcome:
    """Settled state of one path's lookup."""

    path: str
    pull_requests: list[PullRequest] = field(default_factory=list)
    error: str | None = None


async def aggregate(
    paths: Sequence[str],
    lookup: Lookup,
    link_builder: Callable[[str], str],
    *,
    dedupe: bool = False,
) -> AggregationResult:
    """Look up merged pull requests for every path and flatten them.

    Args:
        paths: Metadata paths, in the order results should appear.
        lookup: Coroutine function returning the pull requests for one path.
            Items may be PullRequest instances or plain dicts.
        link_builder: Maps a repo-relative file path to a URL.
        dedupe: Keep only the first occurrence of each PR number. Off by
            default, so a PR matching two paths is listed twice.

    Returns:
        The flattened result. Cancelling the caller cancels every pending lookup.
    """
    paths = list(paths)
    if not paths:
        logger.debug("No paths to look up")
        return AggregationResult()

    outcomes = await asyncio.gather(*(_settle(path, lookup) for path in paths))

    result = AggregationResult()
    seen: set[int] = set()
    for outcome in outcomes:
        if outcome.error is not None:
            result.failures.append(LookupFailure(path=outcome.path, error=outcome.error))
            continue
        for pr in outcome.pull_requests:
            if dedupe:
                if pr.number in seen:
                    continue
                seen.add(pr.number)
            result.pull_requests.append(annotate(pr, outcome.path, link_builder))

    logger.info(
        f"Aggregated {len(result.pull_requests)} pull request(s) from {len(paths)} path(s), "
        f"{len(result.failures)} lookup(s) failed"
    )
    return result


def annotate(
    pr: PullRequest, source_path: str, link_builder: Callable[[str], str]
) -> AnnotatedPullRequest:
    """Attach a link for every changed file, in file order."""
    return AnnotatedPullRequest(
        **pr.model_dump(include=set(PullRequest.model_fields)),
        file_links=[FileLink(name=f, url=link_builder(f)) for f in pr.files],
        source_path=source_path,
    )


async def _settle(path: str, lookup: Lookup) -> _Outcome:
    try:
        data = await lookup(path)
        return _Outcome(path=path, pull_requests=_coerce(path, data))
    except Exception as e:
        logger.warning(f"Error fetching PRs for {path}: {e}")
        return _Outcome(path=path, error=str(e) or type(e).__name__)


def _coerce(path: str, data: Any) -> list[PullRequest]:
    """Validate a lookup response into PullRequest models."""
    if data is None:
        return []
    if not isinstance(data, (list, tuple)):
        raise LookupFailedError(path, f"expected a list of pull requests, got {type(data).__name__}")
    try:
        return [
            item if isinstance(item, PullRequest) else PullRequest.model_validate(item)
            for item in data
        ]
    except ValidationError as e:
        raise LookupFailedError(path, f"malformed pull request ({e.error_count()} error(s))") from e
