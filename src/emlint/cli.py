"""Command-line checker: ``emlint [paths...]``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser

from emlint.settings import Settings
from emlint.validator import validate_html

logger = logging.getLogger("emlint.cli")


def main(argv: list[str] | None = None) -> int:
    """Validate each path (stdin when none) and print one line per finding.

    Returns 1 when any finding was reported, 0 otherwise.
    """
    parser = ArgumentParser(prog="emlint", description="Check HTML email markup for defects.")
    parser.add_argument("paths", nargs="*", help="paths to HTML documents (defaults to stdin).")
    parser.add_argument(
        "--json",
        action="store_true",
        help="print all findings as one JSON array; each entry carries its path.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=Settings().log_level.upper())

    documents: list[tuple[str, str]] = []
    for path in args.paths:
        # Non-UTF-8 bytes decode to U+FFFD; tag delimiters and line breaks are ASCII.
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                documents.append((path, f.read()))
        except FileNotFoundError as e:
            parser.exit(2, f"file not found: {e.filename}\n")
        except OSError as e:
            parser.exit(2, f"cannot read {path}: {e.strerror or e}\n")
    if not args.paths:
        documents.append(("<stdin>", sys.stdin.read()))

    found = False
    payload: list[dict[str, object]] = []
    for path, document in documents:
        logger.debug("validating %s (length=%d)", path, len(document))
        errors = validate_html(document)
        found = found or bool(errors)
        if args.json:
            payload.extend(
                {"path": path, **e.model_dump(mode="json", by_alias=True)} for e in errors
            )
            continue
        for e in errors:
            print(f"{path}:{e.line_number}: [{e.code}] {e.message}")

    if args.json:
        print(json.dumps(payload, indent=2))

    return 1 if found else 0


if __name__ == "__main__":
    sys.exit(main())
