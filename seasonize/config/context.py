"""Execution context for seasonize runs."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from seasonize.config.cli import CLIArgs


@dataclass(frozen=True)
class ExecutionContext:
    """
    Settings of one run, handed to the orchestrator.

    Attributes:
        dry_run: If True, report projection operations without performing them.
        verbose: If True, report every operation even when mutating.
        source_dir: Directory scanned for metadata records.
        target_dir: Root of the series tree, or None for a scan-only run.
    """

    dry_run: bool = False
    verbose: bool = True
    source_dir: Optional[Path] = None
    target_dir: Optional[Path] = None

    @classmethod
    def from_cli_args(cls, cli_args: "CLIArgs") -> "ExecutionContext":
        """Build the run settings from parsed command-line arguments."""
        return cls(
            dry_run=cli_args.dry_run,
            verbose=cli_args.verbose,
            source_dir=cli_args.source_dir,
            target_dir=cli_args.target_dir,
        )

    @property
    def is_simulation(self) -> bool:
        """True when projection only reports; a scan-only run never simulates."""
        return self.dry_run and not self.scan_only

    @property
    def scan_only(self) -> bool:
        """True when no target was given and no projection will run."""
        return self.target_dir is None
