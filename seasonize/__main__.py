"""Entry point for the seasonize package.

This module provides the command-line entry point for the channel-to-series tool.
Run with: python -m seasonize <source> [--target DIR] [--dry-run]
"""

import sys
from typing import List, Optional

from loguru import logger

from seasonize.config import (
    CLIArgs,
    LOG_FILE,
    parse_arguments,
    args_to_cli_args,
    validate_directories,
    ExecutionContext,
)
from seasonize.config.settings import LOG_RETENTION, LOG_ROTATION
from seasonize.pipeline import PipelineOrchestrator, SeasonizeError
from seasonize.ui import ConsoleUI, display_summary


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level="DEBUG",
    )


def display_configuration(cli_args: CLIArgs, console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.
    """
    if cli_args.scan_only:
        mode_status = "[cyan]Scan only[/cyan]"
    elif cli_args.dry_run:
        mode_status = "[yellow]SIMULATION[/yellow]"
    else:
        mode_status = "[green]Normal[/green]"

    console.print_settings(
        "Channel Seasonizer",
        [
            ("Source", cli_args.source_dir),
            ("Target", cli_args.target_dir if cli_args.target_dir else "-"),
        ],
        mode=mode_status,
    )


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the seasonize tool.

    Args:
        args: Argument strings (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    # Parse command-line arguments
    namespace = parse_arguments(args)
    cli_args = args_to_cli_args(namespace)

    # Setup logging
    setup_logging(cli_args.debug)

    # Initialize console UI
    console = ConsoleUI()

    # Validate directories
    if not validate_directories(
        source_dir=cli_args.source_dir,
        target_dir=cli_args.target_dir,
        dry_run=cli_args.dry_run,
    ):
        console.print_error("Directory validation failed")
        return 1

    # Dry run only matters when a target is given
    if cli_args.scan_only:
        console.print_info("No target given: the catalogue is only scanned and reported")
    elif cli_args.dry_run:
        console.print_warning(
            "SIMULATION MODE\n\n"
            "• No directory or link will be created\n"
            "• Every operation is reported instead"
        )

    display_configuration(cli_args, console)

    ctx = ExecutionContext.from_cli_args(cli_args)

    logger.info("Starting catalogue scan...")
    try:
        stats = PipelineOrchestrator(ctx).run()
    except SeasonizeError as e:
        logger.error(str(e))
        console.print_failure(e)
        return 1

    display_summary(stats, dry_run=ctx.is_simulation)
    console.print_success("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
