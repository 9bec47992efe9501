"""Shared test fixtures for DevAssist."""

from __future__ import annotations

from pathlib import Path

import pytest

from devassist.config import ProjectConfig, save_config
from devassist.exceptions import LookupFailedError
from devassist.models import PullRequest
from devassist.sources.base import PullRequestSource

BASE_URL = "https://example.com/repo/blob/main/"


class FakePullRequestSource(PullRequestSource):
    """In-memory pull-request source keyed by metadata path.

    Paths listed in ``failing`` raise LookupFailedError; unknown paths return
    no pull requests. Every call is recorded in ``calls``.
    """

    def __init__(
        self,
        responses: dict[str, list] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.responses = responses or {}
        self.failing = failing or set()
        self.calls: list[str] = []
        self.closed = False

    async def get_merged_prs(self, path: str) -> list[PullRequest]:
        self.calls.append(path)
        if path in self.failing:
            raise LookupFailedError(path, "service unavailable")
        return self.responses.get(path, [])

    async def aclose(self) -> None:
        self.closed = True


def make_pr(number: int, *files: str, title: str = "") -> PullRequest:
    return PullRequest(
        number=number,
        title=title or f"Change #{number}",
        merged_at="2025-03-14T09:26:53Z",
        url=f"https://github.com/acme/metadata/pull/{number}",
        files=list(files),
    )


@pytest.fixture
def fake_source() -> FakePullRequestSource:
    return FakePullRequestSource()


@pytest.fixture
def contact_pr() -> PullRequest:
    return make_pr(
        7,
        "force-app/main/default/objects/Contact/fields/Tier__c.field-meta.xml",
        title="Add Tier field to Contact",
    )


@pytest.fixture
def config() -> ProjectConfig:
    config = ProjectConfig(name="metadata")
    config.repository.owner = "acme"
    config.repository.name = "metadata"
    config.repository.base_url = BASE_URL
    return config


@pytest.fixture
def tmp_project(tmp_path: Path, config: ProjectConfig) -> Path:
    """A project directory with a saved .devassist config."""
    config.root_path = str(tmp_path)
    save_config(tmp_path, config)
    return tmp_path


@pytest.fixture
def pr_factory():
    return make_pr
