"""
Seeder run: check gh, ensure the stacked label, ask the user, build and
shuffle the catalogue, pick a subset and submit it.

Everything is sequential; state is local to run_seeder.
"""

import logging
import random
from typing import Callable

from prseed.adapters.base import HostingPlatform, HostingPlatformError, VersionControl
from prseed.config import AppConfig
from prseed.prompts import ask_yes_no
from prseed.services.catalogue import build_catalogue
from prseed.services.selection import choose_count, shuffle_catalogue
from prseed.services.submitter import Echo, ensure_label_exists, submit_all

RULE = "=" * 46

STACKED_QUESTION = "Do you want to include stacked PRs (feature branches targeting other feature branches)?"
CREATE_ALL_QUESTION = "Do you want to create ALL possible pull requests?"


def run_seeder(
    config: AppConfig,
    git: VersionControl,
    hosting: HostingPlatform,
    *,
    input_func: Callable[[str], str] = input,
    echo: Echo = print,
    rng: random.Random | None = None,
    log: logging.Logger | None = None,
) -> int:
    """Run one seeding session.

    Returns:
        Exit code: 1 if gh is missing or not authenticated, 0 otherwise
        (individual PR failures do not change it).
    """
    logger = log or logging.getLogger("prseed.seeder")
    echo("Creating random test pull requests for git wrapper testing...")
    echo(RULE)

    if not hosting.is_available():
        echo("Error: GitHub CLI (gh) is not installed")
        echo("Please install it from: https://cli.github.com/")
        return 1

    try:
        hosting.auth_status()
    except HostingPlatformError as e:
        logger.debug("gh auth status: %s", e)
        echo("Error: Not authenticated with GitHub CLI")
        echo("Please run: gh auth login")
        return 1

    label = config.label
    ensure_label_exists(hosting, label.name, label.color, label.description, echo=echo, log=logger)

    include_stacked = ask_yes_no(STACKED_QUESTION, input_func=input_func, echo=echo)
    catalogue = build_catalogue(
        include_stacked,
        mainline=config.repository.mainline,
        stacked_label=label.name,
    )

    create_all = ask_yes_no(CREATE_ALL_QUESTION, input_func=input_func, echo=echo)
    shuffled = shuffle_catalogue(catalogue, rng=rng)
    total = len(shuffled)
    num_to_create = choose_count(total, create_all, rng=rng)
    if create_all:
        echo(f"Creating ALL {total} possible PRs...")
    else:
        echo(f"Randomly selecting {num_to_create} out of {total} possible PRs...")
    echo("")
    logger.info("Processing %s of %s candidate PRs (stacked=%s)", num_to_create, total, include_stacked)

    report = submit_all(
        git,
        hosting,
        shuffled,
        num_to_create,
        remote=config.repository.remote,
        echo=echo,
        log=logger,
    )

    echo(RULE)
    echo(f"Created {report.created_count} pull requests! ({report.attempted} attempted)")
    echo("")
    echo("View all PRs with: gh pr list")
    echo("View PR details with: gh pr view <number>")
    logger.info(
        "Done: created=%s skipped=%s failed=%s",
        report.created_count,
        report.skipped_count,
        report.failed_count,
    )
    return 0
