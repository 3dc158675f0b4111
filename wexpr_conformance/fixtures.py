"""Discover conformance fixtures in a base directory."""

import logging
from collections.abc import Sequence
from pathlib import Path

from wexpr_conformance.models.fixture import Expectation, Fixture

log = logging.getLogger(__name__)


class FixtureIOError(Exception):
    """Raised when the fixture directory cannot be enumerated."""


def discover_fixtures(base_dir: Path, extension: str = ".wexpr") -> Sequence[Fixture]:
    """Enumerate fixtures under base_dir/success and base_dir/fail.

    Success fixtures come first, then fail fixtures; each group is sorted by
    file name so repeated runs see the same order.

    Args:
        base_dir: Directory containing the success/ and fail/ subdirectories
        extension: Required file suffix (e.g. ".wexpr"), empty for any file

    Returns:
        Fixtures in run order

    Raises:
        FixtureIOError: If base_dir does not exist or cannot be listed

    """
    if not base_dir.is_dir():
        raise FixtureIOError(f"Fixture directory not found: {base_dir}")

    fixtures: list[Fixture] = []
    for expectation in (Expectation.SUCCESS, Expectation.FAILURE):
        fixtures.extend(_discover_category(base_dir, expectation, extension))
    return fixtures


def _discover_category(
    base_dir: Path, expectation: Expectation, extension: str
) -> Sequence[Fixture]:
    category_dir = base_dir / expectation.value
    if not category_dir.is_dir():
        log.warning("No %s/ directory in %s", expectation.value, base_dir)
        return []

    try:
        paths = sorted(
            path
            for path in category_dir.iterdir()
            if path.is_file()
            and not path.name.startswith(".")
            and path.name.endswith(extension)
        )
    except OSError as exc:
        raise FixtureIOError(f"Cannot list {category_dir}: {exc}") from exc

    return [
        Fixture(
            path=path,
            expectation=expectation,
            display_name=path.relative_to(base_dir).as_posix(),
        )
        for path in paths
    ]
