"""
Command-line interface and main entry point for clean_big_targets.

Handles workflow orchestration: scan, measure, then report or delete.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .args_parser import parse_args
from .cancellation import CancellationToken, OperationCancelled
from .config import ConfigurationError, load_env_file
from .deletion import DeletionError, InteractionError, handle_deletion
from .progress import ProgressTracker
from .reports import filter_by_min_size, print_report, write_reports
from .scanner import ScanError, find_target_dirs
from .sizing import MeasureResult, measure_target_dirs

EXIT_INTERRUPTED = 130


def _measure(args: argparse.Namespace, target_dirs: list, cancel: CancellationToken) -> MeasureResult:
    progress = None
    if sys.stderr.isatty():
        progress = ProgressTracker(total=len(target_dirs), label="Measuring target directories")
    result = measure_target_dirs(target_dirs, workers=args.workers, cancel=cancel, progress=progress)
    if result.failures:
        logging.debug("Skipped %d directories whose size could not be read", len(result.failures))
    return result


def _handle_deletion(args: argparse.Namespace, infos: list, cancel: CancellationToken) -> int:
    """Handle deletion logic. Returns exit code."""
    try:
        deleted = handle_deletion(infos, args.force, cancel=cancel)
    except (DeletionError, InteractionError) as exc:
        logging.error("Error during deletion: %s", exc)
        return 1
    except OperationCancelled:
        logging.error("Deletion interrupted by user.")
        return EXIT_INTERRUPTED
    if deleted:
        logging.debug("Deleted %d of %d target directories", len(deleted), len(infos))
    return 0


def _run(args: argparse.Namespace, cancel: CancellationToken) -> int:
    if args.debug:
        logging.debug("Debug mode is on")

    if not args.target_dir.exists():
        logging.error("Target directory does not exist: %s", args.target_dir)
        return 1
    logging.debug("Target directory: %s", args.target_dir)

    try:
        target_dirs = find_target_dirs(args.target_dir, args.debug)
    except ScanError as exc:
        logging.error("Error scanning directories: %s", exc)
        return 1

    if not target_dirs:
        logging.info("No target directories found")
        return 0
    logging.debug("Found %d target directories", len(target_dirs))

    result = _measure(args, target_dirs, cancel)
    infos = filter_by_min_size(result.infos, args.min_size)

    if result.cancelled:
        print_report(infos)
        logging.error("Interrupted: sizes shown for %d of %d directories", len(infos), len(target_dirs))
        return EXIT_INTERRUPTED

    try:
        write_reports(infos, json_path=args.report_json, csv_path=args.report_csv)
    except OSError as exc:
        logging.error("Error writing report: %s", exc)
        return 1

    if not args.delete:
        print_report(infos)
        return 0
    if not infos:
        print("No target directories left to delete")
        return 0
    return _handle_deletion(args, infos, cancel)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the clean_big_targets CLI."""
    load_env_file()
    try:
        args = parse_args(argv if argv is not None else sys.argv[1:])
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    cancel = CancellationToken()
    cancel.install_sigint_handler()
    try:
        return _run(args, cancel)
    except KeyboardInterrupt:
        logging.error("Aborted by user.")
        return EXIT_INTERRUPTED
    finally:
        cancel.restore()
