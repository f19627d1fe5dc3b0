"""Git operations: branch queries, push."""

from prseed.services.git._run import GitRunnerError
from prseed.services.git.branches import branch_exists, is_ancestor
from prseed.services.git.push_pull import push_branch

__all__ = [
    "GitRunnerError",
    "branch_exists",
    "is_ancestor",
    "push_branch",
]
