"""Local branch queries: existence and merge status."""

import logging
from pathlib import Path

from prseed.services.git._run import GitRunnerError, _git_exit_code


def branch_exists(
    branch_name: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> bool:
    """Return True if refs/heads/<branch_name> exists in the local repository.

    Args:
        branch_name: Short branch name (e.g. "feature/user-auth").
        repo_dir: Repository directory; uses cwd if None.
        log: Optional logger.

    Returns:
        True if the local ref exists, False otherwise.

    Raises:
        GitRunnerError: If git is missing or the command did not answer
            (exit code other than 0 or 1).
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    code = _git_exit_code(["show-ref", "--verify", "--quiet", f"refs/heads/{branch_name}"], cwd=cwd, log=log)
    if code not in (0, 1):
        raise GitRunnerError(f"git show-ref refs/heads/{branch_name}: exit code {code}")
    return code == 0


def is_ancestor(
    branch_name: str,
    target_branch: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> bool:
    """Return True if branch_name is an ancestor of target_branch (already
    merged).

    Exit code 0 means ancestor, 1 means not; anything else (unknown
    revision, not a repository) raises GitRunnerError.
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    code = _git_exit_code(["merge-base", "--is-ancestor", branch_name, target_branch], cwd=cwd, log=log)
    if code == 0:
        return True
    if code == 1:
        return False
    raise GitRunnerError(f"git merge-base --is-ancestor {branch_name} {target_branch}: exit code {code}")
