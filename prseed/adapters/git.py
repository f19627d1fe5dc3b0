"""Local git repository adapter."""

import logging
from pathlib import Path

from prseed.adapters.base import VersionControl
from prseed.services.git import branch_exists, is_ancestor, push_branch


class LocalGit(VersionControl):
    """VersionControl backed by the git binary in a local working copy."""

    def __init__(self, repo_dir: Path | str = ".", log: logging.Logger | None = None) -> None:
        self.repo_dir = Path(repo_dir)
        self._log = log or logging.getLogger("prseed.adapters.git")

    def branch_exists(self, branch: str) -> bool:
        return branch_exists(branch, repo_dir=self.repo_dir, log=self._log)

    def is_ancestor(self, branch: str, target: str) -> bool:
        return is_ancestor(branch, target, repo_dir=self.repo_dir, log=self._log)

    def push_branch(self, branch: str, remote: str = "origin") -> None:
        push_branch(branch, remote=remote, repo_dir=self.repo_dir, log=self._log)
