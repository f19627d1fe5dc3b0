"""Version-control and hosting-platform adapters (interfaces).

Implementations: prseed.adapters.git.LocalGit,
prseed.adapters.github_cli.GitHubCLIAdapter.
"""

from prseed.adapters.base import (
    HostingCLINotFoundError,
    HostingPlatform,
    HostingPlatformError,
    VersionControl,
    VersionControlError,
)

__all__ = [
    "HostingCLINotFoundError",
    "HostingPlatform",
    "HostingPlatformError",
    "VersionControl",
    "VersionControlError",
]
