"""Shared fixtures for conformance runner tests."""

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

import pytest


class MakeFixturesFn(Protocol):
    """Protocol for fixture tree creation function."""

    def __call__(
        self,
        success: Mapping[str, str] | None = None,
        fail: Mapping[str, str] | None = None,
    ) -> Path:
        """Write fixture files and return the base directory."""


@pytest.fixture
def make_fixtures(tmp_path: Path) -> MakeFixturesFn:
    """Return a function that writes success/ and fail/ fixture files."""

    def _make(
        success: Mapping[str, str] | None = None,
        fail: Mapping[str, str] | None = None,
    ) -> Path:
        base_dir = tmp_path / "fixtures"
        for category, files in (("success", success), ("fail", fail)):
            category_dir = base_dir / category
            category_dir.mkdir(parents=True, exist_ok=True)
            for name, content in (files or {}).items():
                (category_dir / name).write_text(content)
        return base_dir

    return _make
