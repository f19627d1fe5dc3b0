"""Random ordering and subset size for the PR catalogue."""

import random
from typing import Sequence

from prseed.models import PRDescriptor


class EmptyCatalogueError(ValueError):
    """Raised when there is nothing to select from."""

    pass


def shuffle_catalogue(
    descriptors: Sequence[PRDescriptor],
    rng: random.Random | None = None,
) -> list[PRDescriptor]:
    """Return a uniformly random permutation of descriptors as a new list.

    The input is not modified. rng defaults to the module-level random
    generator (unseeded).
    """
    shuffled = list(descriptors)
    (rng or random).shuffle(shuffled)
    return shuffled


def choose_count(total: int, create_all: bool, rng: random.Random | None = None) -> int:
    """Number of PRs to attempt: all of them, or uniform in [1, total].

    Raises:
        EmptyCatalogueError: If total is not positive.
    """
    if total <= 0:
        raise EmptyCatalogueError(f"PR catalogue is empty (total={total})")
    if create_all:
        return total
    return (rng or random).randint(1, total)


def select_descriptors(descriptors: Sequence[PRDescriptor], count: int) -> list[PRDescriptor]:
    """First count descriptors of the (shuffled) sequence."""
    return list(descriptors[:count])
