"""Command line interface.

Usage:
    websubcheck service.json other.json --format console --ignore WEBSUB_109
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from websubcheck import __version__
from websubcheck.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from websubcheck.application.reporters._base import BaseReporter
from websubcheck.application.services import ServiceChecker
from websubcheck.domain.exceptions import WebSubCheckError
from websubcheck.domain.model.configuration import CheckerConfig
from websubcheck.infrastructure.adapters import JSONDeclarationSource
from websubcheck.infrastructure.logging import configure_logging, get_logger

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2

REPORTERS: dict[str, type[BaseReporter]] = {
    "text": PlainTextReporter,
    "json": JSONReporter,
    "console": ConsoleReporter,
}

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="websubcheck",
        description="Check subscriber service declarations against the websub callback contract",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="JSON declaration documents, one per module",
    )
    parser.add_argument(
        "--format",
        choices=sorted(REPORTERS),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="CODE",
        help="Drop diagnostics with this code (WEBSUB_109 or 109); repeatable",
    )
    parser.add_argument(
        "--fail-on-warning",
        action="store_true",
        help="Exit with failure status when warnings are reported",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checker and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level, json_format=args.log_json)
        config = CheckerConfig.from_code_names(args.ignore, fail_on_warning=args.fail_on_warning)
    except ValueError as e:
        print(f"websubcheck: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        modules = JSONDeclarationSource().load_all(tuple(args.paths))
    except WebSubCheckError as e:
        logger.error("load_failed", error=str(e))
        print(f"websubcheck: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    reporter = REPORTERS[args.format]()
    result = ServiceChecker(config, reporter=reporter).check(modules)
    return EXIT_PASSED if result.passed else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
