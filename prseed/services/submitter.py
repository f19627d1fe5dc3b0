"""Validate candidate PRs against the local repository and submit them.

Per descriptor: skip if the source branch is missing or already merged
into its target, otherwise push the branch and create the PR. Failures
are reported and never abort the run.
"""

import logging
from typing import Callable, Sequence

from prseed.adapters.base import HostingPlatform, HostingPlatformError, VersionControl, VersionControlError
from prseed.models import PRDescriptor, SubmissionReport, SubmissionResult
from prseed.services.selection import select_descriptors

DEFAULT_LABEL_COLOR = "0366d6"

Echo = Callable[[str], None]


def ensure_label_exists(
    hosting: HostingPlatform,
    name: str,
    color: str = DEFAULT_LABEL_COLOR,
    description: str = "",
    *,
    echo: Echo = print,
    log: logging.Logger | None = None,
) -> bool:
    """Create label name if the repository does not have it (best effort).

    Returns:
        True if the label exists or was created; False if listing or
        creating failed.
    """
    logger = log or logging.getLogger("prseed.submitter")
    try:
        if name in hosting.list_labels():
            return True
        echo(f"Creating label '{name}'...")
        hosting.create_label(name, color, description)
        return True
    except HostingPlatformError as e:
        logger.warning("Failed to ensure label %s: %s", name, e)
        echo("  Label may already exist")
        return False


def submit_pull_request(
    git: VersionControl,
    hosting: HostingPlatform,
    descriptor: PRDescriptor,
    *,
    remote: str = "origin",
    echo: Echo = print,
    log: logging.Logger | None = None,
) -> SubmissionResult:
    """Check one descriptor and, if eligible, push its branch and open the
    PR."""
    logger = log or logging.getLogger("prseed.submitter")
    source = descriptor.source_branch
    target = descriptor.target_branch

    if not git.branch_exists(source):
        echo(f"Skipping {source} (doesn't exist locally)")
        return SubmissionResult(descriptor, "skipped_missing_branch")

    try:
        merged = git.is_ancestor(source, target)
    except VersionControlError as e:
        logger.warning("Could not check whether %s is merged into %s: %s", source, target, e)
        merged = False
    if merged:
        echo(f"Skipping {source} (already merged into {target})")
        return SubmissionResult(descriptor, "skipped_already_merged")

    echo(f"Creating PR: {source} → {target}")
    echo(f"  Pushing {source} to remote...")
    try:
        git.push_branch(source, remote=remote)
    except VersionControlError as e:
        logger.info("Push of %s failed: %s", source, e)
        echo("  Branch may already exist on remote")

    try:
        url = hosting.create_pr(
            head=source,
            base=target,
            title=descriptor.title,
            body=descriptor.body,
            labels=descriptor.labels,
        )
    except HostingPlatformError as e:
        logger.warning("Failed to create PR %s -> %s: %s", source, target, e)
        echo("  ⚠️  PR may already exist or failed to create")
        echo("")
        return SubmissionResult(descriptor, "submit_failed", str(e))

    echo(f"  ✓ Done {url}".rstrip())
    echo("")
    return SubmissionResult(descriptor, "submitted", url)


def submit_all(
    git: VersionControl,
    hosting: HostingPlatform,
    descriptors: Sequence[PRDescriptor],
    count: int,
    *,
    remote: str = "origin",
    echo: Echo = print,
    log: logging.Logger | None = None,
) -> SubmissionReport:
    """Process the first count descriptors in order; return the report."""
    report = SubmissionReport()
    for descriptor in select_descriptors(descriptors, count):
        report.add(submit_pull_request(git, hosting, descriptor, remote=remote, echo=echo, log=log))
    return report
