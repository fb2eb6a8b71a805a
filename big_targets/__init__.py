"""
Clean big targets package.

Find build 'target' directories under a workspace, report their size and optionally delete them.
"""

from . import args_parser, cancellation, config, deletion, formatting, reports, scanner, sizing
from .cancellation import CancellationToken, OperationCancelled
from .config import ConfigurationError
from .deletion import DeletionError, InteractionError, TerminalChecklist, handle_deletion
from .scanner import ScanError, find_target_dirs
from .sizing import MeasureResult, SizeError, TargetDirInfo, calculate_dir_size, measure_target_dirs

__all__ = [
    "CancellationToken",
    "ConfigurationError",
    "DeletionError",
    "InteractionError",
    "MeasureResult",
    "OperationCancelled",
    "ScanError",
    "SizeError",
    "TargetDirInfo",
    "TerminalChecklist",
    "args_parser",
    "calculate_dir_size",
    "cancellation",
    "config",
    "deletion",
    "find_target_dirs",
    "formatting",
    "handle_deletion",
    "measure_target_dirs",
    "reports",
    "scanner",
    "sizing",
]
