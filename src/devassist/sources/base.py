"""Base interfaces for the external services DevAssist talks to."""

from __future__ import annotations

from abc import ABC, abstractmethod

from devassist.models import PullRequest, RecordContext


class ContextSource(ABC):
    """Resolves who is looking and what they are looking at."""

    @abstractmethod
    async def get_user_profile_name(self) -> str | None:
        """Return the current user's profile name."""
        ...

    @abstractmethod
    async def get_record_context(self, record_id: str) -> RecordContext:
        """Return the object name and record type of a record."""
        ...


class PullRequestSource(ABC):
    """Searches merged pull requests that touched a metadata path."""

    @abstractmethod
    async def get_merged_prs(self, path: str) -> list[PullRequest]:
        """Return merged pull requests touching ``path``.

        Implementations enforce their own timeouts and raise
        LookupFailedError on transport or response errors.
        """
        ...

    async def aclose(self) -> None:
        """Release any held connections."""
        return None
