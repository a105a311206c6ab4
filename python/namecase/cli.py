"""
Command-line interface: print the identifier forms of a name.

Usage:
    namecase UserProfile
    namecase UserProfile --variant kebab_case
    namecase Category --plural --variant snake_case
    namecase user_profile --format json
    namecase UserProfile -v --log-file
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from namecase import __version__
from namecase.logging_config import setup_logging
from namecase.naming import CaseVariant, InvalidIdentifierError, require_valid_identifier
from namecase.tools.names import NameToolError, derive_case, derive_inflection, derive_variants

logger = logging.getLogger("namecase.cli")

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namecase",
        description="Derive snake_case, PascalCase, camelCase, kebab-case, "
        "Title Case and plural/singular forms from a name.",
    )
    parser.add_argument("name", help="Name to derive identifiers from")
    parser.add_argument(
        "--variant",
        choices=[v.value for v in CaseVariant],
        default=None,
        help="Print only this case variant",
    )
    number = parser.add_mutually_exclusive_group()
    number.add_argument("--plural", action="store_true", help="Pluralize the (converted) name")
    number.add_argument("--singular", action="store_true", help="Singularize the (converted) name")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        dest="output_format",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject names that are not valid identifiers",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write a daily log file (NAMECASE_LOG_DIR or ./.namecase/logs)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace):
    """
    Dispatch parsed arguments to the matching tool.

    Raises:
        NameToolError: the tool rejected its input
    """
    if args.plural or args.singular:
        direction = "plural" if args.plural else "singular"
        return derive_inflection(
            args.name, direction, variant=args.variant, output_format=args.output_format
        )
    if args.variant:
        return derive_case(args.name, args.variant, output_format=args.output_format)
    return derive_variants(args.name, output_format=args.output_format)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # A one-shot command only writes log files when asked to
    log_file = args.log_file or bool(os.environ.get("NAMECASE_LOG_DIR"))
    setup_logging(
        level=logging.DEBUG if args.verbose else None,
        console=args.verbose,
        log_file=log_file,
    )
    logger.debug(f"namecase {args.name!r} variant={args.variant} format={args.output_format}")

    try:
        # --strict applies to every mode, not only the full variant table
        if args.strict:
            require_valid_identifier(args.name)
        result = run(args)
    except (InvalidIdentifierError, NameToolError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if isinstance(result, dict):
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
