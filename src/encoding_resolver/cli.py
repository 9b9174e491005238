"""Command-line interface for encoding_resolver."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import encoding_resolver
from encoding_resolver.enums import Encoding

_UNKNOWN = "unknown"


def _format(encoding: Encoding | None) -> str:
    return encoding.value if encoding is not None else _UNKNOWN


def main(argv: list[str] | None = None) -> None:
    """Run the ``resolve-encoding`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(description="Detect character encoding of files.")
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection steps to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"resolve-encoding {encoding_resolver.__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.files:
        data = sys.stdin.buffer.read()
        encoding = _format(encoding_resolver.detect(data))
        print(encoding if args.minimal else f"stdin: {encoding}")
        return

    failed = False
    for filepath in args.files:
        try:
            with Path(filepath).open("rb") as f:
                encoding = _format(encoding_resolver.detect_encoding(f))
        except OSError as e:
            print(f"resolve-encoding: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        print(encoding if args.minimal else f"{filepath}: {encoding}")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
