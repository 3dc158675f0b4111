"""Reporting of conformance run summaries."""

import logging
from typing import Any

from wexpr_conformance.models.result import RunSummary


def log_results_summary(log: logging.Logger, summary: RunSummary) -> None:
    """Log pass/fail counts and floored percentages."""
    log.info("---")

    if summary.total == 0:
        log.info("No tests were run")
        log.info("Total: 0")
        return

    log.info("Pass: %d (%d%%)", summary.passed, summary.pass_percentage)
    log.info("Fail: %d (%d%%)", summary.failed, summary.fail_percentage)
    log.info("Total: %d", summary.total)


def format_output(summary: RunSummary) -> dict[str, Any]:
    """Format a run summary for JSON output."""
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "pass_percentage": summary.pass_percentage,
        "fail_percentage": summary.fail_percentage,
        "results": [
            {
                "fixture": result.fixture.display_name,
                "expected": result.fixture.should_succeed,
                "actual": result.succeeded,
                "passed": result.passed,
                "exit_code": result.exit_code,
                "timed_out": result.timed_out,
                "duration": result.duration,
            }
            for result in summary.results
        ],
    }
