"""Internal helpers: run git commands, GitRunnerError."""

import logging
import subprocess
from pathlib import Path

from prseed.adapters.base import VersionControlError

GIT_TIMEOUT = 60


class GitRunnerError(VersionControlError):
    """Raised when a git command fails."""

    pass


def _run_git(args: list[str], cwd: Path, log: logging.Logger | None = None) -> str:
    """Run git command and return stdout; raise GitRunnerError on non-zero
    exit."""
    cmd = ["git"] + args
    if log:
        log.debug("Running %s", cmd)
    try:
        result = subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True, timeout=GIT_TIMEOUT)
    except subprocess.CalledProcessError as e:
        err = (e.stderr or e.stdout or "").strip()
        if log:
            log.warning("Git %s failed: %s", args, err)
        raise GitRunnerError(f"git {' '.join(args)}: {err}") from e
    except subprocess.TimeoutExpired as e:
        raise GitRunnerError(f"git {' '.join(args)}: timed out after {GIT_TIMEOUT}s") from e
    except FileNotFoundError as e:
        raise GitRunnerError("git not found") from e
    return result.stdout


def _git_exit_code(args: list[str], cwd: Path, log: logging.Logger | None = None) -> int:
    """Run git query command and return its exit code (no check).

    Used for plumbing commands that answer yes/no through the exit
    status (show-ref --verify, merge-base --is-ancestor).
    """
    cmd = ["git"] + args
    if log:
        log.debug("Running %s", cmd)
    try:
        result = subprocess.run(cmd, cwd=cwd, check=False, capture_output=True, text=True, timeout=GIT_TIMEOUT)
    except subprocess.TimeoutExpired as e:
        raise GitRunnerError(f"git {' '.join(args)}: timed out after {GIT_TIMEOUT}s") from e
    except FileNotFoundError as e:
        raise GitRunnerError("git not found") from e
    if result.returncode > 1 and log:
        log.debug("Git %s exited %s: %s", args, result.returncode, (result.stderr or "").strip())
    return result.returncode
