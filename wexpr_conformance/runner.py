"""Conformance runner executing a validator against each fixture."""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from wexpr_conformance.config import substitute_placeholder
from wexpr_conformance.executor import ProcessExecutor, ProcessOutcome
from wexpr_conformance.models.fixture import Fixture
from wexpr_conformance.models.result import RunSummary, TestResult

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ConformanceRunner:
    """Runs fixtures one at a time and compares outcomes to expectations."""

    executor: ProcessExecutor

    async def run(
        self,
        fixtures: Sequence[Fixture],
        command: Sequence[str],
        *,
        display_output: bool = False,
    ) -> RunSummary:
        """Run the validator command against every fixture in order.

        Individual fixture failures, including crashes and launch errors of
        the validator, are recorded in the summary and never raised.

        Args:
            fixtures: Fixtures in the order they should run
            command: Command template containing the {} placeholder
            display_output: Log captured validator output for every fixture

        Returns:
            Summary of all results, in fixture order

        """
        results: list[TestResult] = []

        for number, fixture in enumerate(fixtures, start=1):
            log.info("%d) %s...", number, fixture.display_name)
            result = await self._run_fixture(fixture, command)

            if display_output and result.output:
                log.info("%s", result.output.rstrip("\n"))

            if result.timed_out:
                log.warning("Timed out: %s", fixture.display_name)

            if not result.passed:
                log.warning(
                    "!!! FAIL: %s : got %s but expected %s",
                    fixture.display_name,
                    _format_bool(result.succeeded),
                    _format_bool(fixture.should_succeed),
                )

            results.append(result)

        return RunSummary(results=results)

    async def _run_fixture(
        self, fixture: Fixture, command: Sequence[str]
    ) -> TestResult:
        """Run one fixture, treating any executor exception as a failure."""
        started = time.monotonic()
        try:
            outcome = await self.executor.run(
                substitute_placeholder(command, str(fixture.path))
            )
        except Exception as exc:
            log.error(
                "Validator execution failed for %s: %s",
                fixture.display_name,
                exc,
                exc_info=exc,
            )
            outcome = ProcessOutcome(exit_code=None, output=str(exc))

        return TestResult(
            fixture=fixture,
            succeeded=outcome.succeeded,
            exit_code=outcome.exit_code,
            output=outcome.output,
            duration=time.monotonic() - started,
            timed_out=outcome.timed_out,
        )


def _format_bool(value: bool) -> str:
    return "true" if value else "false"
