"""Factory for creating pull-request sources from configuration."""

from __future__ import annotations

from devassist.config import ProjectConfig
from devassist.exceptions import ConfigError
from devassist.sources.base import PullRequestSource


def create_pr_source(config: ProjectConfig) -> PullRequestSource:
    """Create the pull-request source for the configured repository.

    Raises:
        ConfigError: If the repository owner or name is missing.
    """
    if not config.repository.is_configured:
        raise ConfigError(
            "Repository is not configured. Run 'devassist init --owner <owner> --repo <name>' "
            "or 'devassist config set repository.owner <owner>'."
        )

    from devassist.sources.github import GitHubPullRequestSource

    return GitHubPullRequestSource(
        owner=config.repository.owner,
        repo=config.repository.name,
        branch=config.repository.branch,
        api_url=config.github.api_url,
        token=config.github.token,
        timeout=config.github.timeout,
        max_commits=config.github.max_commits,
        max_concurrency=config.github.max_concurrency,
    )
