"""CLI entry point for the conformance runner."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from wexpr_conformance.config import (
    ConfigurationError,
    RunnerConfig,
    load_runner_config,
)
from wexpr_conformance.executor import SubprocessExecutor
from wexpr_conformance.fixtures import FixtureIOError, discover_fixtures
from wexpr_conformance.report import format_output, log_results_summary
from wexpr_conformance.runner import ConformanceRunner

DISPLAY_OUTPUT_FLAG = "--displayOutput"


async def run(config: RunnerConfig, *, json_output: bool = False) -> int:
    """Run the conformance suite and return exit code."""
    log = logging.getLogger("wexpr_conformance")

    try:
        fixtures = discover_fixtures(config.base_dir, config.extension)
    except FixtureIOError as exc:
        log.error("%s", exc)
        return 1

    log.info("Running %d fixture(s) from %s", len(fixtures), config.base_dir)

    runner = ConformanceRunner(executor=SubprocessExecutor(timeout=config.timeout))
    summary = await runner.run(
        fixtures, config.command, display_output=config.display_output
    )

    log_results_summary(log, summary)

    if json_output:
        print(json.dumps(format_output(summary), indent=2))

    if config.fail_on_mismatch and summary.failed:
        return 1
    return 0


def split_display_output(command: Sequence[str]) -> tuple[Sequence[str], bool]:
    """Remove --displayOutput tokens from the command, reporting if any were found."""
    remaining = [token for token in command if token != DISPLAY_OUTPUT_FLAG]
    return remaining, len(remaining) != len(command)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run a validator command against success/ and fail/ fixtures",
        epilog="Example: wexpr-conformance WexprTool -c validate -i {}",
    )
    parser.add_argument(
        DISPLAY_OUTPUT_FLAG,
        dest="display_output",
        action="store_true",
        help="Print the validator output for every fixture",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=Path("."),
        help="Directory containing the success/ and fail/ fixture directories",
    )
    parser.add_argument(
        "--extension",
        default=".wexpr",
        help="Fixture file extension (default: .wexpr)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-fixture timeout in seconds (default: no timeout)",
    )
    parser.add_argument(
        "--fail-on-mismatch",
        action="store_true",
        help="Exit with status 1 when any fixture does not match its expectation",
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print a JSON summary to stdout after the run",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Validator command, with {} where the fixture path goes",
    )

    args = parser.parse_args()

    # stdout carries only the JSON document when --json is given
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr if args.json_output else sys.stdout,
    )

    command, display_output = split_display_output(args.command)

    try:
        config = load_runner_config(
            command=command,
            base_dir=args.base_dir,
            extension=args.extension,
            display_output=args.display_output or display_output,
            timeout=args.timeout,
            fail_on_mismatch=args.fail_on_mismatch,
        )
    except ConfigurationError as exc:
        logging.getLogger("wexpr_conformance").error(">> %s", exc)
        sys.exit(1)

    exit_code = asyncio.run(run(config, json_output=args.json_output))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
