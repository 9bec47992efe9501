"""Collaborators that resolve record context and search merged pull requests."""

from devassist.sources.base import ContextSource, PullRequestSource
from devassist.sources.factory import create_pr_source
from devassist.sources.static import StaticContextSource

__all__ = [
    "ContextSource",
    "PullRequestSource",
    "StaticContextSource",
    "create_pr_source",
]
