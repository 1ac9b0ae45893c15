"""Tests for ExecutionContext."""

import dataclasses
from pathlib import Path

import pytest

from seasonize.config import CLIArgs
from seasonize.config.context import ExecutionContext


class TestExecutionContext:
    """Tests for ExecutionContext dataclass."""

    def test_default_values(self):
        """Default values are set correctly."""
        ctx = ExecutionContext()
        assert ctx.dry_run is False
        assert ctx.verbose is True
        assert ctx.source_dir is None
        assert ctx.target_dir is None

    def test_from_cli_args(self):
        """Copies the run options of the command line."""
        cli_args = CLIArgs(
            source_dir=Path("/videos"),
            target_dir=Path("/shows"),
            dry_run=True,
            verbose=False,
        )

        ctx = ExecutionContext.from_cli_args(cli_args)

        assert ctx == ExecutionContext(
            dry_run=True, verbose=False, source_dir=Path("/videos"), target_dir=Path("/shows")
        )

    def test_is_simulation_needs_a_target(self):
        """Dry run simulates projection only when there is one."""
        assert ExecutionContext(dry_run=True, target_dir=Path("/shows")).is_simulation is True
        assert ExecutionContext(dry_run=True).is_simulation is False
        assert ExecutionContext(target_dir=Path("/shows")).is_simulation is False

    def test_scan_only_property(self):
        """scan_only is True without a target."""
        assert ExecutionContext().scan_only is True
        assert ExecutionContext(target_dir=Path("/shows")).scan_only is False

    def test_is_frozen(self):
        ctx = ExecutionContext()
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.dry_run = True
