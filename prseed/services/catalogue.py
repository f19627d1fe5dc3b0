"""Catalogue of candidate pull requests for the git-wrapper test repository.

Base PRs target the mainline; stacked PRs target another feature branch
from the base set and carry the "stacked" label.
"""

from prseed.models import STACKED_LABEL, PRDescriptor

DEFAULT_MAINLINE = "main"
BASE_SET_SIZE = 7
STACKED_SET_SIZE = 3

# (source, title, body) for PRs into the mainline
_BASE_PRS: tuple[tuple[str, str, str], ...] = (
    (
        "feature/user-auth",
        "feat: Implement user authentication system",
        """This PR implements a complete user authentication system.

## Features
- User registration
- User login/logout
- Session management
- Password hashing

## Related PRs
- feature/user-auth-api (stacked on this branch)""",
    ),
    (
        "bugfix/memory-leak",
        "fix: Resolve memory leak in database connections",
        """This PR fixes a critical memory leak in the database connection pool.

## Problem
- Connections were not being properly released
- Memory usage grew over time

## Solution
- Added proper connection cleanup
- Implemented connection timeout""",
    ),
    (
        "feature/experimental",
        "feat: Experimental WebSocket support",
        """This PR adds experimental WebSocket support for real-time features.

## ⚠️ Experimental
This is still in development and not ready for production.

## Features
- WebSocket server setup
- Client connection handling
- Basic message broadcasting""",
    ),
    (
        "feature/api-v2",
        "feat: API Version 2.0",
        """Major update to our API with breaking changes.

## Breaking Changes
- New response format
- Updated authentication flow
- Deprecated v1 endpoints

## Includes
- Merge from release/v2.0
- feature/api-v2-routes (stacked PR pending)""",
    ),
    (
        "feature/long-running",
        "feat: Long-running background jobs",
        """This PR implements support for long-running background jobs.

## Features
- Job queue implementation
- Worker processes
- Job status tracking
- Retry mechanism""",
    ),
    (
        "release/v2.0",
        "chore: Release v2.0",
        """Release version 2.0 with API improvements and bug fixes.

## Changelog
### Added
- New API v2 endpoints
- WebSocket support (experimental)
- Background job processing

### Fixed
- Memory leak in database connections
- Authentication edge cases

### Changed
- Updated API response format
- Improved error messages""",
    ),
    (
        "feature/database",
        "feat: Complete database integration",
        """This PR completes the database integration that was partially merged.

## Additional Changes Since Partial Merge
- Added migration scripts
- Implemented connection pooling
- Added database models (via feature/database-models)
- Performance optimizations

## Note
This branch was partially merged earlier but continued development.""",
    ),
)

# (source, target, title, body) for PRs stacked on a base feature branch
_STACKED_PRS: tuple[tuple[str, str, str, str], ...] = (
    (
        "feature/user-auth-api",
        "feature/user-auth",
        "feat: Add API endpoints for user authentication",
        """This PR adds REST API endpoints for the user authentication feature.

## Changes
- Added login endpoint
- Added logout endpoint
- Added token validation""",
    ),
    (
        "feature/database-models",
        "feature/database",
        "feat: Add database models for MongoDB",
        """This PR adds Mongoose models for our MongoDB database.

## Changes
- User model
- Session model
- Product model""",
    ),
    (
        "feature/api-v2-routes",
        "feature/api-v2",
        "feat: Implement v2 API routes",
        """This PR implements the new routes for API v2.

## Changes
- Updated route structure
- Added versioning middleware
- New response format""",
    ),
)


def stacked_body(body: str, target_branch: str) -> str:
    """Append the "Stacked on" footer to a PR body."""
    return f"{body}\n\n**Stacked on:** {target_branch}"


def build_catalogue(
    include_stacked: bool,
    mainline: str = DEFAULT_MAINLINE,
    stacked_label: str = STACKED_LABEL,
) -> list[PRDescriptor]:
    """Build the ordered list of candidate PR descriptors.

    Args:
        include_stacked: Prepend the stacked PRs (feature -> feature).
        mainline: Target branch for the base set (e.g. main).
        stacked_label: Label attached to stacked PRs.

    Returns:
        New list: BASE_SET_SIZE descriptors, plus STACKED_SET_SIZE in front
        when include_stacked is set.
    """
    catalogue: list[PRDescriptor] = []
    if include_stacked:
        for source, target, title, body in _STACKED_PRS:
            catalogue.append(
                PRDescriptor(
                    source_branch=source,
                    target_branch=target,
                    title=title,
                    body=stacked_body(body, target),
                    labels=(stacked_label,),
                )
            )
    for source, title, body in _BASE_PRS:
        catalogue.append(
            PRDescriptor(
                source_branch=source,
                target_branch=mainline,
                title=title,
                body=body,
            )
        )
    return catalogue
