"""Single-file validator compatible with the conformance runner.

Exits 0 when the file decodes cleanly and 1 otherwise, so it can be used as
the command given to ``wexpr-conformance``::

    wexpr-conformance wexpr-validate --decoder mylib.wexpr:decode {}
"""

import argparse
import logging
import sys
from pathlib import Path

from wexpr_conformance.decoders import DecodeFn, DecoderNotFoundError, load_decoder

log = logging.getLogger(__name__)


def validate_file(path: Path, decode: DecodeFn) -> int:
    """Decode one file and return the process exit code for the result."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Cannot read %s: %s", path, exc)
        return 1

    try:
        _, error = decode(text)
    except Exception:
        print("exception")
        log.debug("Decoder raised for %s", path, exc_info=True)
        return 1

    if error:
        print(f"Error: {error}")
        return 1

    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Validate a single file")
    parser.add_argument(
        "--decoder",
        required=True,
        help="Decoder entry point name or module:attribute reference",
    )
    parser.add_argument("file", type=Path, help="File to validate")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        decode = load_decoder(args.decoder)
    except DecoderNotFoundError as exc:
        log.error("%s", exc)
        sys.exit(1)

    sys.exit(validate_file(args.file, decode))


if __name__ == "__main__":  # pragma: no cover
    main()
