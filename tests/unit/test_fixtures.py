"""Tests for fixture discovery."""

import logging
from pathlib import Path

import pytest

from wexpr_conformance.fixtures import FixtureIOError, discover_fixtures
from wexpr_conformance.models.fixture import Expectation

from conftest import MakeFixturesFn


def test_classifies_by_directory(make_fixtures: MakeFixturesFn) -> None:
    """Expectation comes from the directory, never from file content."""
    base_dir = make_fixtures(
        success={"a.wexpr": "this is garbage"},
        fail={"b.wexpr": "(valid looking)"},
    )

    fixtures = discover_fixtures(base_dir)

    assert [(f.display_name, f.expectation) for f in fixtures] == [
        ("success/a.wexpr", Expectation.SUCCESS),
        ("fail/b.wexpr", Expectation.FAILURE),
    ]
    assert fixtures[0].should_succeed is True
    assert fixtures[1].should_succeed is False


def test_sorted_within_category(make_fixtures: MakeFixturesFn) -> None:
    """Success fixtures come first and each category is sorted by name."""
    base_dir = make_fixtures(
        success={"c.wexpr": "", "a.wexpr": "", "b.wexpr": ""},
        fail={"z.wexpr": "", "m.wexpr": ""},
    )

    fixtures = discover_fixtures(base_dir)

    assert [f.display_name for f in fixtures] == [
        "success/a.wexpr",
        "success/b.wexpr",
        "success/c.wexpr",
        "fail/m.wexpr",
        "fail/z.wexpr",
    ]


def test_filters_by_extension(make_fixtures: MakeFixturesFn) -> None:
    """Only files with the configured extension are fixtures."""
    base_dir = make_fixtures(success={"a.wexpr": "", "README.md": "", "b.txt": ""})

    fixtures = discover_fixtures(base_dir)

    assert [f.display_name for f in fixtures] == ["success/a.wexpr"]


def test_empty_extension_matches_all_files(make_fixtures: MakeFixturesFn) -> None:
    """An empty extension accepts every file."""
    base_dir = make_fixtures(fail={"a.json": "", "b.wexpr": ""})

    fixtures = discover_fixtures(base_dir, extension="")

    assert [f.display_name for f in fixtures] == ["fail/a.json", "fail/b.wexpr"]


def test_skips_hidden_files(make_fixtures: MakeFixturesFn) -> None:
    """Dotfiles such as editor lock files are not fixtures."""
    base_dir = make_fixtures(
        success={"a.wexpr": "", ".wexpr": "", ".#a.wexpr": ""},
        fail={".b.wexpr": "", "b.wexpr": ""},
    )

    fixtures = discover_fixtures(base_dir, extension="")

    assert [f.display_name for f in fixtures] == ["success/a.wexpr", "fail/b.wexpr"]


def test_skips_subdirectories(make_fixtures: MakeFixturesFn) -> None:
    """Directories inside a category are not fixtures."""
    base_dir = make_fixtures(success={"a.wexpr": ""})
    (base_dir / "success" / "nested.wexpr").mkdir()

    fixtures = discover_fixtures(base_dir)

    assert [f.display_name for f in fixtures] == ["success/a.wexpr"]


def test_missing_category_is_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """A missing category directory contributes nothing and logs a warning."""
    (tmp_path / "success").mkdir()
    (tmp_path / "success" / "a.wexpr").write_text("")

    with caplog.at_level(logging.WARNING):
        fixtures = discover_fixtures(tmp_path)

    assert [f.display_name for f in fixtures] == ["success/a.wexpr"]
    assert "No fail/ directory" in caplog.text


def test_missing_base_dir_raises(tmp_path: Path) -> None:
    """Raises FixtureIOError when the base directory does not exist."""
    with pytest.raises(FixtureIOError, match="not found"):
        discover_fixtures(tmp_path / "missing")


def test_fixture_paths_are_absolute_under_base(make_fixtures: MakeFixturesFn) -> None:
    """Fixture paths point at the files inside the base directory."""
    base_dir = make_fixtures(success={"a.wexpr": "content"})

    (fixture,) = discover_fixtures(base_dir)

    assert fixture.path == base_dir / "success" / "a.wexpr"
    assert fixture.path.read_text() == "content"
