"""File link construction against a fixed repository base URL."""

from __future__ import annotations

from typing import Callable


def build_link(base_url: str, file_path: str) -> str:
    """Join a repository base URL and a repo-relative file path.

    Exactly one slash separates the two parts. Nothing is URL-encoded.
    """
    return f"{base_url.rstrip('/')}/{file_path.lstrip('/')}"


def make_link_builder(base_url: str) -> Callable[[str], str]:
    """Bind ``base_url`` into a one-argument link builder."""

    def link_builder(file_path: str) -> str:
        return build_link(base_url, file_path)

    return link_builder
