"""Join the user's profile and the record context into one resolved value.

Both are fetched concurrently and joined once. Neither failure is fatal: a
missing profile only drops the profile-specific paths, a missing record
context means there is nothing to infer yet.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass

from devassist.models import RecordContext
from devassist.sources.base import ContextSource

logger = logging.getLogger("devassist.context")

# Lightning record pages: /lightning/r/<Object>/<recordId>/view
RECORD_URL_PATTERN = re.compile(r"/r/[^/]+/([a-zA-Z0-9]+)/")


@dataclass(frozen=True)
class ResolvedContext:
    """Everything path inference needs about the current record and user."""

    record: RecordContext | None
    profile: str | None

    @property
    def is_ready(self) -> bool:
        return self.record is not None


def extract_record_id(url: str) -> str | None:
    """Pull the record id out of a Lightning record page URL."""
    match = RECORD_URL_PATTERN.search(url)
    if match is None:
        logger.warning(f"No record id found in URL path: {url}")
        return None
    return match.group(1)


async def resolve_context(source: ContextSource, record_id: str) -> ResolvedContext:
    """Fetch the profile and the record context together."""
    profile, record = await asyncio.gather(
        _fetch_profile(source),
        _fetch_record(source, record_id),
    )
    return ResolvedContext(record=record, profile=profile)


async def _fetch_profile(source: ContextSource) -> str | None:
    try:
        return await source.get_user_profile_name() or None
    except Exception as e:
        logger.warning(f"Error fetching profile: {e}")
        return None


async def _fetch_record(source: ContextSource, record_id: str) -> RecordContext | None:
    try:
        return await source.get_record_context(record_id)
    except Exception as e:
        logger.warning(f"Error fetching record context for {record_id}: {e}")
        return None
