"""Abstract interfaces for the version-control and hosting-platform
clients."""

from abc import ABC, abstractmethod
from typing import Sequence


class VersionControlError(Exception):
    """Raised when a version-control command fails."""

    pass


class HostingPlatformError(Exception):
    """Raised when a hosting-platform CLI call fails."""

    pass


class HostingCLINotFoundError(HostingPlatformError):
    """Raised when the hosting-platform CLI binary is not installed."""

    pass


class VersionControl(ABC):
    """Local repository queries and pushes (git)."""

    @abstractmethod
    def branch_exists(self, branch: str) -> bool:
        """Return True if refs/heads/<branch> exists locally."""
        ...

    @abstractmethod
    def is_ancestor(self, branch: str, target: str) -> bool:
        """Return True if branch is fully merged into target."""
        ...

    @abstractmethod
    def push_branch(self, branch: str, remote: str = "origin") -> None:
        """Push branch to remote and set upstream."""
        ...


class HostingPlatform(ABC):
    """Code hosting platform operations (GitHub via gh, ...)."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the client binary is installed."""
        ...

    @abstractmethod
    def auth_status(self) -> None:
        """Raise HostingPlatformError if the client is not authenticated."""
        ...

    @abstractmethod
    def list_labels(self) -> set[str]:
        """Return names of labels defined in the repository."""
        ...

    @abstractmethod
    def create_label(self, name: str, color: str, description: str = "") -> None:
        """Create a repository label."""
        ...

    @abstractmethod
    def create_pr(
        self,
        head: str,
        base: str,
        title: str,
        body: str,
        labels: Sequence[str] = (),
    ) -> str:
        """Create a pull request; return its URL (may be empty)."""
        ...
