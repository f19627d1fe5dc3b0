"""GitHub adapter that shells out to the GitHub CLI (gh)."""

import json
import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from prseed.adapters.base import HostingCLINotFoundError, HostingPlatform, HostingPlatformError

# gh label list defaults to 30 results
LABEL_LIST_LIMIT = 1000


class GitHubCLIAdapter(HostingPlatform):
    """GitHub implementation on top of the `gh` binary.

    The repository is whatever gh resolves from the working directory
    (git remotes or GH_REPO); authentication is gh's own.
    """

    def __init__(
        self,
        command: str = "gh",
        timeout: int = 60,
        working_directory: Path | str = ".",
        log: logging.Logger | None = None,
    ) -> None:
        self.command = command
        self.timeout = timeout
        self.working_directory = Path(working_directory)
        self._log = log or logging.getLogger("prseed.adapters.github_cli")

    def _run(self, args: list[str]) -> str:
        """Run gh with args; return stdout or raise HostingPlatformError."""
        cmd = [self.command] + args
        self._log.debug("Running %s", cmd[:3])
        try:
            result = subprocess.run(
                cmd,
                cwd=self.working_directory,
                timeout=self.timeout,
                check=False,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise HostingCLINotFoundError(f"{self.command} not found") from e
        except subprocess.TimeoutExpired as e:
            raise HostingPlatformError(f"{self.command} {' '.join(args[:2])}: timed out after {self.timeout}s") from e
        if result.returncode != 0:
            msg = (result.stderr or result.stdout or "").strip() or f"exit code {result.returncode}"
            raise HostingPlatformError(f"{self.command} {' '.join(args[:2])}: {msg}")
        return result.stdout or ""

    def is_available(self) -> bool:
        return shutil.which(self.command) is not None

    def auth_status(self) -> None:
        self._run(["auth", "status"])

    def list_labels(self) -> set[str]:
        out = self._run(["label", "list", "--json", "name", "--limit", str(LABEL_LIST_LIMIT)])
        try:
            data = json.loads(out or "[]")
        except json.JSONDecodeError as e:
            raise HostingPlatformError(f"Invalid JSON from {self.command} label list: {e}") from e
        return {item["name"] for item in data if isinstance(item, dict) and "name" in item}

    def create_label(self, name: str, color: str, description: str = "") -> None:
        self._run(["label", "create", name, "--color", color, "--description", description])
        self._log.info("Created label %s", name)

    def create_pr(
        self,
        head: str,
        base: str,
        title: str,
        body: str,
        labels: Sequence[str] = (),
    ) -> str:
        args = [
            "pr",
            "create",
            "--head",
            head,
            "--base",
            base,
            "--title",
            title,
            "--body",
            body,
        ]
        if labels:
            args.extend(["--label", ",".join(labels)])
        url = self._run(args).strip()
        self._log.info("Created PR %s -> %s %s", head, base, url)
        return url
