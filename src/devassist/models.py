"""Data models shared by path inference and pull-request aggregation."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RecordContext(BaseModel):
    """Object and record type of the record being viewed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    object_name: str = Field(alias="objectName")
    record_type: str | None = Field(default=None, alias="recordType")


class PullRequest(BaseModel):
    """A merged pull request as returned by the search service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int
    title: str = ""
    merged_at: datetime | None = Field(default=None, alias="mergedAt")
    url: str = ""
    files: list[str] = Field(default_factory=list)


class FileLink(BaseModel):
    """A clickable link to one changed file."""

    name: str
    url: str


class AnnotatedPullRequest(PullRequest):
    """A pull request plus links to every file it touched."""

    file_links: list[FileLink] = Field(default_factory=list)
    source_path: str = ""  # Inferred path whose lookup returned this PR


class LookupFailure(BaseModel):
    """A per-path lookup that failed and was left out of the result."""

    path: str
    error: str


class AggregationResult(BaseModel):
    """Flattened pull requests across every inferred path.

    Ordered by path, then by the order the service returned them. Iterating,
    indexing and ``len()`` operate on the pull requests.
    """

    pull_requests: list[AnnotatedPullRequest] = Field(default_factory=list)
    failures: list[LookupFailure] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pull_requests)

    def __iter__(self) -> Iterator[AnnotatedPullRequest]:  # type: ignore[override]
        return iter(self.pull_requests)

    def __getitem__(self, index: int) -> AnnotatedPullRequest:
        return self.pull_requests[index]

    @property
    def failed_paths(self) -> list[str]:
        return [f.path for f in self.failures]
