"""Loading of decoder functions for the single-file validator."""

from collections.abc import Callable
from importlib.metadata import EntryPoint, entry_points
from typing import Any, TypeAlias

ENTRY_POINT_GROUP = "wexpr_conformance.decoders"

DecodeFn: TypeAlias = Callable[[str], tuple[Any, Any]]


class DecoderNotFoundError(Exception):
    """Raised when a decoder is not found."""


def load_decoder(key: str) -> DecodeFn:
    """Load a decoder by entry point name or ``module:attribute`` reference.

    A decoder takes the document text and returns ``(value, error)``, where
    error is empty exactly when decoding succeeded. It may also raise.

    Args:
        key: The decoder name as registered in pyproject.toml, or a
             reference such as "mypackage.wexpr:decode"

    Returns:
        The decoder callable

    Raises:
        DecoderNotFoundError: If the decoder cannot be found or imported

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            decoder: DecodeFn = entry.load()
            return decoder

    if ":" in key:
        reference = EntryPoint(name=key, value=key, group=ENTRY_POINT_GROUP)
        try:
            decoder = reference.load()
        except (ImportError, AttributeError) as exc:
            raise DecoderNotFoundError(f"Cannot import decoder '{key}': {exc}") from exc
        return decoder

    available = [e.name for e in entries]
    raise DecoderNotFoundError(
        f"Decoder '{key}' not found. Available decoders: {available}"
    )
