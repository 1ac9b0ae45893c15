"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from loguru import logger


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        source_dir: Directory scanned for metadata records.
        target_dir: Root of the series tree (None for scan-only).
        dry_run: If True, report projection operations without performing them.
        verbose: If True, report every projection operation.
        debug: If True, enable debug logging.
    """

    source_dir: Optional[Path] = None
    target_dir: Optional[Path] = None
    dry_run: bool = False
    verbose: bool = True
    debug: bool = False

    @property
    def scan_only(self) -> bool:
        """Check if only the scan and report phases will run."""
        return self.target_dir is None


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='seasonize',
        description="""
        Scans a directory of downloaded channel videos and presents each
        channel as a series, with one season per year, using symbolic links.
        """
    )

    parser.add_argument(
        'source',
        help="directory holding the downloaded videos and their .info.json files"
    )

    parser.add_argument(
        '-t', '--target',
        default=None,
        help="root of the series tree to build (scan and report only when omitted)"
    )

    parser.add_argument(
        '-d', '--dry-run',
        action='store_true',
        help="simulation mode - report the links without creating anything"
    )

    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help="do not report each directory and link operation"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug mode"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def validate_directories(
    source_dir: Path,
    target_dir: Optional[Path] = None,
    dry_run: bool = False
) -> bool:
    """
    Validate the source and target directories.

    The target is never created here; the projector creates what it needs.

    Args:
        source_dir: Source directory (must exist).
        target_dir: Target directory, if any.
        dry_run: If True, a missing target is only reported.

    Returns:
        True if validation passed, False otherwise.
    """
    if not source_dir.is_dir():
        logger.error(f"Source directory {source_dir} does not exist")
        return False

    if target_dir is not None and target_dir.exists() and not target_dir.is_dir():
        logger.error(f"Target {target_dir} exists and is not a directory")
        return False

    if target_dir is not None and dry_run and not target_dir.exists():
        logger.info(f"SIMULATION - Target directory {target_dir} would be created")

    return True


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        source_dir=Path(namespace.source),
        target_dir=Path(namespace.target) if namespace.target else None,
        dry_run=namespace.dry_run,
        verbose=not namespace.quiet,
        debug=namespace.debug,
    )
