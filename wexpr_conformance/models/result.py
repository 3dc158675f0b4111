"""Models for conformance run results."""

from collections.abc import Sequence
from dataclasses import dataclass

from wexpr_conformance.models.fixture import Fixture


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Observed outcome of running the validator against one fixture."""

    __test__ = False

    fixture: Fixture
    succeeded: bool
    exit_code: int | None = None
    output: str = ""
    duration: float = 0.0
    timed_out: bool = False

    @property
    def passed(self) -> bool:
        """Whether the observed outcome matches the fixture's expectation."""
        return self.succeeded == self.fixture.should_succeed


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Aggregate of all results from a single run, in discovery order."""

    results: Sequence[TestResult]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def pass_percentage(self) -> int | None:
        """Floored percentage of passed fixtures, None when nothing ran."""
        return _percentage(self.passed, self.total)

    @property
    def fail_percentage(self) -> int | None:
        """Floored percentage of failed fixtures, None when nothing ran."""
        return _percentage(self.failed, self.total)

    @property
    def mismatches(self) -> Sequence[TestResult]:
        return [result for result in self.results if not result.passed]


def _percentage(count: int, total: int) -> int | None:
    if total == 0:
        return None
    return count * 100 // total
