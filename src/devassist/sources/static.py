"""Context source backed by values known up front."""

from __future__ import annotations

from devassist.exceptions import ContextUnavailableError
from devassist.models import RecordContext
from devassist.sources.base import ContextSource


class StaticContextSource(ContextSource):
    """Serves a fixed profile and a record-id -> context mapping.

    ``default`` answers for any record id not in ``records``.
    """

    def __init__(
        self,
        profile: str | None = None,
        records: dict[str, RecordContext] | None = None,
        default: RecordContext | None = None,
    ) -> None:
        self.profile = profile
        self.records = dict(records or {})
        self.default = default

    async def get_user_profile_name(self) -> str | None:
        return self.profile

    async def get_record_context(self, record_id: str) -> RecordContext:
        context = self.records.get(record_id, self.default)
        if context is None:
            raise ContextUnavailableError(f"No record context for '{record_id}'")
        return context
