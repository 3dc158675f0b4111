"""Models for conformance fixtures discovered on disk."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class Expectation(StrEnum):
    """Expected validation outcome, named after the directory holding it."""

    SUCCESS = "success"
    FAILURE = "fail"

    @property
    def should_succeed(self) -> bool:
        """Whether the validator is expected to accept the fixture."""
        return self is Expectation.SUCCESS


@dataclass(frozen=True, kw_only=True)
class Fixture:
    """A sample input file with a fixed expected outcome."""

    path: Path
    expectation: Expectation
    display_name: str

    @property
    def should_succeed(self) -> bool:
        return self.expectation.should_succeed
