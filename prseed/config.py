"""Configuration loading from YAML and environment.

gh handles its own authentication (gh auth login / GH_TOKEN); no tokens
are read here.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RepositoryConfig(BaseSettings):
    """Local working copy the PRs are created from."""

    model_config = SettingsConfigDict(env_prefix="REPO_", extra="ignore")

    path: str = Field(default=".", description="Path to the local git repository")
    remote: str = Field(default="origin", description="Remote to push source branches to")
    mainline: str = Field(default="main", description="Base branch for non-stacked PRs")


class GitHubCLIConfig(BaseSettings):
    """GitHub CLI (gh) settings (cli.github.com)."""

    model_config = SettingsConfigDict(env_prefix="GH_CLI_", extra="ignore")

    command: str = Field(default="gh", description="gh executable name or path")
    timeout: int = Field(default=60, ge=1, description="Timeout per gh call in seconds")


class LabelConfig(BaseSettings):
    """Label attached to stacked PRs (created if missing)."""

    model_config = SettingsConfigDict(env_prefix="STACKED_LABEL_", extra="ignore")

    name: str = Field(default="stacked", min_length=1, description="Label name")
    color: str = Field(default="6f42c1", description="Hex color without #")
    description: str = Field(
        default="Pull request that is stacked on another feature branch",
        description="Label description",
    )


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    github_cli: GitHubCLIConfig = Field(default_factory=GitHubCLIConfig)
    label: LabelConfig = Field(default_factory=LabelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env(value: Any, env: dict[str, str]) -> Any:
    """Replace ${VAR} and $VAR in strings with values from env."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return env.get(key, value)
        # Simple $VAR
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v, env) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Missing file gives defaults (still overridable by REPO_*, GH_CLI_*,
    STACKED_LABEL_*, LOGGING_* env vars).
    """
    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    raw = _substitute_env(raw, dict(os.environ))

    return AppConfig(
        repository=RepositoryConfig(**(raw.get("repository") or {})),
        github_cli=GitHubCLIConfig(**(raw.get("github_cli") or {})),
        label=LabelConfig(**(raw.get("label") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
