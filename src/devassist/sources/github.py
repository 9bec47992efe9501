"""GitHub-backed pull-request source.

GitHub has no "pull requests touching a path" search, so a lookup walks:
  1. the commits on the tracked branch that touched the path
  2. the pull requests each commit belongs to (merged ones only)
  3. the changed files of each of those pull requests
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from devassist.exceptions import LookupFailedError
from devassist.models import PullRequest
from devassist.sources.base import PullRequestSource

logger = logging.getLogger("devassist.github")

RATE_LIMIT_MIN_REMAINING = 10
MAX_FILES_PER_PR = 100


class GitHubPullRequestSource(PullRequestSource):
    """Merged pull-request search over the GitHub REST API."""

    def __init__(
        self,
        owner: str,
        repo: str,
        branch: str = "main",
        api_url: str = "https://api.github.com",
        token: str | None = None,
        timeout: float = 10.0,
        max_commits: int = 30,
        max_concurrency: int = 8,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.max_commits = max_commits
        self.max_concurrency = max(1, max_concurrency)
        # Shared by every lookup on this source, across all paths
        self._semaphore = asyncio.Semaphore(self.max_concurrency)

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.AsyncClient(
            base_url=api_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> GitHubPullRequestSource:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def _repo_prefix(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    async def get_merged_prs(self, path: str) -> list[PullRequest]:
        commits = await self._get_list(
            f"{self._repo_prefix}/commits",
            path,
            params={"path": path.rstrip("/"), "sha": self.branch, "per_page": self.max_commits},
        )
        try:
            shas = [commit["sha"] for commit in commits]
        except (KeyError, TypeError) as e:
            raise LookupFailedError(path, "malformed commit list") from e

        pulls_per_commit = await asyncio.gather(
            *(self._get_list(f"{self._repo_prefix}/commits/{sha}/pulls", path) for sha in shas)
        )

        merged: dict[int, dict[str, Any]] = {}
        for pulls in pulls_per_commit:
            for pull in pulls:
                if not isinstance(pull, dict) or "number" not in pull:
                    raise LookupFailedError(path, "malformed pull request list")
                if pull.get("merged_at") and pull["number"] not in merged:
                    merged[pull["number"]] = pull

        file_lists = await asyncio.gather(
            *(self._get_files(number, path) for number in merged)
        )

        results = [
            PullRequest(
                number=number,
                title=pull.get("title") or "",
                merged_at=pull.get("merged_at"),
                url=pull.get("html_url") or "",
                files=files,
            )
            for (number, pull), files in zip(merged.items(), file_lists)
        ]
        logger.debug(f"{path}: {len(shas)} commit(s), {len(results)} merged PR(s)")
        return results

    async def _get_files(self, number: int, path: str) -> list[str]:
        files = await self._get_list(
            f"{self._repo_prefix}/pulls/{number}/files",
            path,
            params={"per_page": MAX_FILES_PER_PR},
        )
        try:
            return [f["filename"] for f in files]
        except (KeyError, TypeError) as e:
            raise LookupFailedError(path, f"malformed file list for PR #{number}") from e

    async def _get_list(
        self, url: str, path: str, params: dict[str, Any] | None = None
    ) -> list[Any]:
        """GET a JSON array, mapping every failure to LookupFailedError."""
        try:
            async with self._semaphore:
                response = await self._client.get(url, params=params)
            _check_rate_limit(response)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            raise LookupFailedError(path, "request timed out") from e
        except httpx.HTTPStatusError as e:
            raise LookupFailedError(path, f"HTTP {e.response.status_code} from {url}") from e
        except httpx.HTTPError as e:
            raise LookupFailedError(path, f"transport error: {e}") from e
        except ValueError as e:
            raise LookupFailedError(path, "response is not valid JSON") from e

        if not isinstance(data, list):
            raise LookupFailedError(path, f"expected a JSON array from {url}")
        return data


def _check_rate_limit(response: httpx.Response) -> None:
    """Warn when the remaining GitHub API quota runs low."""
    remaining = response.headers.get("X-RateLimit-Remaining")
    if remaining is None:
        return
    try:
        remaining_count = int(remaining)
    except ValueError:
        return
    if remaining_count <= RATE_LIMIT_MIN_REMAINING:
        logger.warning(f"Approaching GitHub API rate limit: {remaining_count} requests remaining")
