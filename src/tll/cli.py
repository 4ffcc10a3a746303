"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys

from pyhocon import ConfigFactory

from tll.core.config.base import LogLevel
from tll.core.config.loader import load_config
from tll.core.console import ConsoleLogger, configure_logging
from tll.core.schema.validator import SchemaValidator
from tll.runtime.version import VersionChecker, VersionStatus

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tll",
        description="Validate records against type schemas and check for tll updates.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a HOCON tll configuration file.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override the configured logging level.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a record file against a schema file (HOCON or JSON).",
    )
    validate_parser.add_argument("schema", help="Schema file mapping field names to type names.")
    validate_parser.add_argument("record", help="Record file to validate.")
    validate_parser.add_argument(
        "--label",
        default=None,
        help="Name of what is being validated, used in messages (default: table).",
    )

    subparsers.add_parser("check-version", help="Check whether a newer tll release exists.")
    return parser


def _read_table(path: str) -> dict:
    """Parse a HOCON or JSON file into a flat field mapping.

    pyhocon keeps the quotes of quoted keys such as ``"a.b"``; they are
    stripped so field names read as written.
    """
    tree = ConfigFactory.parse_file(path)
    return {str(key).strip('"'): value for key, value in tree.items()}


def _validate(args: argparse.Namespace) -> int:
    try:
        schema = _read_table(args.schema)
        record = _read_table(args.record)
    except Exception as exc:
        logger.error("Failed to read input: %s", exc)
        return 2

    result = SchemaValidator().validate(schema, record, args.label)
    if result.valid:
        print("Validation passed.")
        return 0

    for issue in result.issues:
        print(f"- {issue.message}", file=sys.stderr)
    return 1


def _check_version(checker: VersionChecker) -> int:
    status = checker.check()
    if status is VersionStatus.UP_TO_DATE:
        print("tll is up to date.")
        return 0
    if status is VersionStatus.OUTDATED:
        return 1
    return 2


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Command-line arguments. Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code. ``validate``: 0 valid, 1 invalid, 2 unreadable input.
        ``check-version``: 0 up to date, 1 outdated, 2 unknown.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except Exception as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 2

    if args.log_level:
        config.logging.level = LogLevel(args.log_level)
    configure_logging(config.logging)

    if args.command == "validate":
        return _validate(args)

    checker = VersionChecker(config.version_check, console=ConsoleLogger.from_config(config.logging))
    return _check_version(checker)


if __name__ == "__main__":
    sys.exit(main())
