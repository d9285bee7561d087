"""Command line driver.

Checks resource families in plain-file mode: the keys of each base
resource are the identifiers, checked against every listed locale.

Exit codes:
    0 - no errors (warnings allowed)
    1 - errors found
    2 - invalid configuration

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

from localecheck.checking import CheckSummary, check_plain
from localecheck.core.babel_compat import BabelImportError
from localecheck.diagnostics import ConfigurationError, OutputFormat, ReportFormatter
from localecheck.enums import Dialect
from localecheck.locales import normalize_locale, parse_locale_list, validate_locale_tags
from localecheck.resources import PropertiesResourceLoader

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="localecheck",
        description="Check that localized message templates stay consistent across locales.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check i18n/Messages.properties against the German and French files:
  localecheck --root src/main/resources --locales de,fr i18n/Messages

  # Directory layout (i18n/messages/de.properties), printf-style values:
  localecheck --locales de --base-locale en --dialect printf i18n/messages/
""",
    )
    parser.add_argument("base_paths", nargs="+", metavar="BASE_PATH", help="Resource base name")
    parser.add_argument(
        "--root", type=Path, default=Path(), help="Resource root directory (default: cwd)"
    )
    parser.add_argument("--locales", default="", help="Comma-separated locale list")
    parser.add_argument("--base-locale", default="", help="Locale of the base resource")
    parser.add_argument(
        "--dialect",
        choices=[d.value for d in Dialect],
        default=None,
        help="Placeholder dialect of all values (default: presence checks only)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Report format",
    )
    parser.add_argument(
        "--strict-locales",
        action="store_true",
        help="Reject locale tags unknown to CLDR (requires Babel)",
    )
    parser.add_argument(
        "--require-placeholders",
        action="store_true",
        help="Report formatted base values without placeholders",
    )
    parser.add_argument(
        "--jobs", "-j", type=int, default=None, help="Worker threads (default: executor default)"
    )
    parser.add_argument(
        "--verbose", "-v", action="count", default=0, help="Log progress (-vv for debug)"
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if not args.root.is_dir():
        print(f"Resource directory doesn't exist: {args.root}", file=sys.stderr)
        return EXIT_CONFIG

    locales = parse_locale_list(args.locales, args.base_locale)
    if args.strict_locales:
        try:
            validate_locale_tags(locales)
        except (ConfigurationError, BabelImportError) as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return EXIT_CONFIG

    check = partial(
        check_plain,
        PropertiesResourceLoader(args.root),
        locales=locales,
        base_locale=normalize_locale(args.base_locale),
        dialect=Dialect(args.dialect) if args.dialect else None,
        require_placeholders=args.require_placeholders,
    )

    try:
        if args.jobs == 1 or len(args.base_paths) == 1:
            reports = [check(base_path=path) for path in args.base_paths]
        else:
            with ThreadPoolExecutor(max_workers=args.jobs) as executor:
                reports = list(executor.map(lambda p: check(base_path=p), args.base_paths))
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_CONFIG

    summary = CheckSummary(tuple(reports))
    formatter = ReportFormatter(output_format=OutputFormat(args.output_format))
    print(formatter.format_summary(summary))
    logger.info("Done: %r", summary)
    return EXIT_OK if summary.passed else EXIT_ERRORS


if __name__ == "__main__":
    sys.exit(main())
