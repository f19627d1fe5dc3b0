"""prseed entry point.

Creates a random set of test pull requests on GitHub from local branches.
Usage: prseed [--config config.yaml] [--check]
"""

import argparse
import logging
import sys
from pathlib import Path

from prseed.adapters.git import LocalGit
from prseed.adapters.github_cli import GitHubCLIAdapter
from prseed.config import load_config
from prseed.logging import PRSeedLogging
from prseed.services.seeder import run_seeder


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="prseed",
        description="Create random test pull requests with the GitHub CLI",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, set up logging, run the seeder."""
    args = parse_args(argv)

    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")

    config = load_config(config_path)

    if args.check:
        print("Config OK:", config.repository.path, config.repository.remote, config.repository.mainline)
        return 0

    logs = PRSeedLogging(config.logging)
    logs.setup()
    log = logs.get_logger("prseed")

    repo_dir = Path(config.repository.path).resolve()
    git = LocalGit(repo_dir, log=logs.get_logger("prseed.adapters.git"))
    hosting = GitHubCLIAdapter(
        command=config.github_cli.command,
        timeout=config.github_cli.timeout,
        working_directory=repo_dir,
        log=logs.get_logger("prseed.adapters.github_cli"),
    )

    try:
        return run_seeder(config, git, hosting)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        log.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
