"""Configuration management for DevAssist."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEVASSIST_DIR = ".devassist"
CONFIG_FILE = "config.json"

DEFAULT_SOURCE_ROOTS = [
    "force-app/main/default",
    "unpackaged/core",
    "unpackaged/ui",
]


class RepositoryConfig(BaseModel):
    """The single tracked repository that file links point into."""

    owner: str = ""
    name: str = ""
    branch: str = "main"
    web_url: str = "https://github.com"
    base_url: str = ""  # explicit link base, overrides owner/name/branch

    @property
    def is_configured(self) -> bool:
        return bool(self.owner and self.name)

    @property
    def link_base_url(self) -> str:
        if self.base_url:
            return self.base_url
        return f"{self.web_url.rstrip('/')}/{self.owner}/{self.name}/blob/{self.branch}/"


class GitHubConfig(BaseModel):
    """GitHub REST API settings for the pull-request source."""

    api_url: str = "https://api.github.com"
    token_env: str = "GITHUB_TOKEN"
    timeout: float = 10.0
    max_commits: int = 30
    max_concurrency: int = 8  # in-flight API requests per source

    @property
    def token(self) -> str | None:
        if not self.token_env:
            return None
        return os.environ.get(self.token_env) or None


class InferenceConfig(BaseModel):
    """Path inference configuration."""

    source_roots: list[str] = Field(default_factory=lambda: list(DEFAULT_SOURCE_ROOTS))


class ProjectConfig(BaseModel):
    """Full project configuration."""

    name: str = ""
    root_path: str = "."
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    inference: InferenceConfig = Field(default_factory=InferenceConfig)


def find_project_root(start: Path | None = None) -> Path | None:
    """Walk up from `start` looking for a .devassist directory."""
    current = (start or Path.cwd()).resolve()
    while current != current.parent:
        if (current / DEVASSIST_DIR).is_dir():
            return current
        current = current.parent
    if (current / DEVASSIST_DIR).is_dir():
        return current
    return None


def get_devassist_dir(root: Path) -> Path:
    """Get the .devassist directory for a project root."""
    return root / DEVASSIST_DIR


def load_config(root: Path) -> ProjectConfig:
    """Load configuration from .devassist/config.json."""
    config_path = get_devassist_dir(root) / CONFIG_FILE
    if config_path.exists():
        data = json.loads(config_path.read_text())
        return ProjectConfig(**data)
    return ProjectConfig(name=root.name, root_path=str(root))


def save_config(root: Path, config: ProjectConfig) -> None:
    """Save configuration to .devassist/config.json."""
    da_dir = get_devassist_dir(root)
    da_dir.mkdir(parents=True, exist_ok=True)
    config_path = da_dir / CONFIG_FILE
    config_path.write_text(json.dumps(config.model_dump(), indent=2))


def set_config_value(config: ProjectConfig, key: str, value: Any) -> ProjectConfig:
    """Set a nested config value using dot notation (e.g., 'repository.owner')."""
    parts = key.split(".")
    data = config.model_dump()
    target = data
    for part in parts[:-1]:
        if part not in target or not isinstance(target[part], dict):
            raise KeyError(f"Invalid config key: {key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Invalid config key: {key}")
    target[parts[-1]] = value
    return ProjectConfig(**data)
