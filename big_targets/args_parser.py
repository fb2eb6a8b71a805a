"""
Argument parsing for the clean_big_targets CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import ENV_TARGET_DIR, ENV_WORKERS, determine_default_target_dir, determine_default_workers
from .formatting import size_argument


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1, got {number}")
    return number


def add_action_arguments(parser: argparse.ArgumentParser) -> None:
    """Add deletion and confirmation arguments."""
    parser.add_argument(
        "-D",
        "--delete",
        action="store_true",
        help="Delete target directories. Default is report only.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Delete every target directory found without prompting (requires --delete).",
    )


def add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    """Add filtering and performance arguments."""
    parser.add_argument(
        "--min-size",
        type=size_argument,
        metavar="SIZE",
        help="Only include target directories >= SIZE (e.g. 500M, 2G).",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help=f"Threads used to measure directory sizes (default: ${ENV_WORKERS} or CPU count + 4, max 32).",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add output and reporting arguments."""
    parser.add_argument("--report-json", type=Path, help="Optional path to write the measured directories as JSON.")
    parser.add_argument("--report-csv", type=Path, help="Optional path to write the report as CSV.")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clean-big-targets",
        description="Find build 'target' directories under a workspace, report their size and optionally delete them.",
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        type=Path,
        default=determine_default_target_dir(),
        help=f"Directory to scan (default: ${ENV_TARGET_DIR} or the current directory).",
    )
    add_action_arguments(parser)
    add_filter_arguments(parser)
    add_output_arguments(parser)
    return parser


def _validate_and_transform_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate and transform parsed arguments."""
    if args.force and not args.delete:
        parser.error("--force requires --delete")
    if args.workers is None:
        args.workers = determine_default_workers()
    args.target_dir = Path(args.target_dir).expanduser()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and process command-line arguments for clean_big_targets.

    Raises:
        ConfigurationError: If CLEAN_BIG_TARGETS_WORKERS is set to an invalid value.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate_and_transform_args(args, parser)
    return args
