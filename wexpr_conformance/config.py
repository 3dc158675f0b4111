"""Configuration for a conformance run."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

PLACEHOLDER = "{}"

USAGE_HINT = (
    "Pass the command to run with {} for where to put input files, "
    "for example: wexpr-conformance WexprTool -c validate -i {}"
)


class ConfigurationError(Exception):
    """Raised when the runner is given an unusable configuration."""


class RunnerConfig(BaseModel):
    """Configuration for the conformance runner.

    The command is a token sequence that must contain exactly one ``{}``
    placeholder, either as a whole token or embedded in one (``--input={}``).
    """

    model_config = ConfigDict(frozen=True)

    command: Sequence[str] = Field(..., description="Validator command template")
    base_dir: Path = Field(
        default=Path("."), description="Directory holding success/ and fail/"
    )
    extension: str = Field(
        default=".wexpr", description="Fixture file extension, empty for any file"
    )
    display_output: bool = Field(
        default=False, description="Log captured subprocess output per fixture"
    )
    timeout: float | None = Field(
        default=None, gt=0, description="Per-fixture timeout in seconds"
    )
    fail_on_mismatch: bool = Field(
        default=False, description="Exit non-zero when any fixture mismatches"
    )

    @field_validator("command")
    @classmethod
    def _check_placeholder(cls, command: Sequence[str]) -> Sequence[str]:
        if not command:
            raise ValueError("no command supplied")

        occurrences = sum(token.count(PLACEHOLDER) for token in command)
        if occurrences == 0:
            raise ValueError(f"command has no {PLACEHOLDER} placeholder")
        if occurrences > 1:
            raise ValueError(
                f"command has {occurrences} {PLACEHOLDER} placeholders, expected one"
            )
        return tuple(command)


def substitute_placeholder(command: Sequence[str], value: str) -> Sequence[str]:
    """Replace the first placeholder occurrence in the command tokens."""
    tokens = list(command)
    for index, token in enumerate(tokens):
        if PLACEHOLDER in token:
            tokens[index] = token.replace(PLACEHOLDER, value, 1)
            break
    return tokens


def load_runner_config(**values: Any) -> RunnerConfig:
    """Build a RunnerConfig, converting validation failures.

    Raises:
        ConfigurationError: If the values do not form a valid configuration

    """
    try:
        return RunnerConfig(**values)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"{details}. {USAGE_HINT}") from exc
