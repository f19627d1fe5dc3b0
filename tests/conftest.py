"""Shared fixtures: in-memory git and GitHub fakes."""

from typing import Sequence

import pytest

from prseed.adapters.base import HostingPlatform, HostingPlatformError, VersionControl, VersionControlError


class FakeGit(VersionControl):
    """Local branches and merged (branch, target) pairs held in memory."""

    def __init__(
        self,
        branches: set[str] | None = None,
        merged: set[tuple[str, str]] | None = None,
        push_fails: bool = False,
    ) -> None:
        self.branches = set(branches or ())
        self.merged = set(merged or ())
        self.push_fails = push_fails
        self.pushed: list[tuple[str, str]] = []
        self.calls: list[str] = []

    def branch_exists(self, branch: str) -> bool:
        self.calls.append(f"exists:{branch}")
        return branch in self.branches

    def is_ancestor(self, branch: str, target: str) -> bool:
        self.calls.append(f"ancestor:{branch}")
        return (branch, target) in self.merged

    def push_branch(self, branch: str, remote: str = "origin") -> None:
        self.calls.append(f"push:{branch}")
        if self.push_fails:
            raise VersionControlError("rejected")
        self.pushed.append((remote, branch))


class FakeGitHub(HostingPlatform):
    """Records created labels and PRs; failure switches per operation."""

    def __init__(
        self,
        available: bool = True,
        authenticated: bool = True,
        labels: set[str] | None = None,
        fail_pr_heads: set[str] | None = None,
    ) -> None:
        self.available = available
        self.authenticated = authenticated
        self.labels = set(labels or ())
        self.fail_pr_heads = set(fail_pr_heads or ())
        self.created_labels: list[tuple[str, str, str]] = []
        self.created_prs: list[dict] = []

    def is_available(self) -> bool:
        return self.available

    def auth_status(self) -> None:
        if not self.authenticated:
            raise HostingPlatformError("You are not logged into any GitHub hosts")

    def list_labels(self) -> set[str]:
        return set(self.labels)

    def create_label(self, name: str, color: str, description: str = "") -> None:
        self.labels.add(name)
        self.created_labels.append((name, color, description))

    def create_pr(
        self,
        head: str,
        base: str,
        title: str,
        body: str,
        labels: Sequence[str] = (),
    ) -> str:
        if head in self.fail_pr_heads:
            raise HostingPlatformError(f"a pull request for branch {head!r} already exists")
        self.created_prs.append({"head": head, "base": base, "title": title, "body": body, "labels": tuple(labels)})
        return f"https://github.com/owner/repo/pull/{len(self.created_prs)}"


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def transcript() -> list[str]:
    """Collects echoed console lines."""
    return []
