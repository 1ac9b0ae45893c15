"""Idempotent directory and symlink operations."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger

DIRECTORY = "directory"
SYMLINK = "symlink"


class OperationStatus(Enum):
    """Outcome of a directory or link operation."""

    CREATED = "created"
    ALREADY_PRESENT = "already present"
    SIMULATED = "simulated"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationResult:
    """
    Result of ensuring one directory or link.

    Attributes:
        kind: DIRECTORY or SYMLINK.
        path: Directory path, or link path for a symlink.
        status: What happened.
        source: File the link points at (symlinks only).
        error: The OS error for a failed operation.
    """

    kind: str
    path: Path
    status: OperationStatus
    source: Optional[Path] = None
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.status is not OperationStatus.FAILED

    def describe(self) -> str:
        """Human-readable description of the operation."""
        if self.kind == SYMLINK:
            return f"Linking: {self.source} -> {self.path}"
        return f"Creating directory: {self.path}"


def _trace(result: OperationResult, dry_run: bool, verbose: bool) -> None:
    message = result.describe()
    if dry_run:
        logger.info(f"SIMULATION - {message}")
    elif verbose:
        logger.info(message)
    else:
        logger.debug(message)


def ensure_directory(path: Path, dry_run: bool = False, verbose: bool = True) -> OperationResult:
    """
    Create a directory and its parents if absent (or simulate if dry_run).

    Args:
        path: Directory to ensure.
        dry_run: If True, only report the operation.
        verbose: If True, report the operation even when performing it.

    Returns:
        OperationResult; FAILED carries the OS error.
    """
    planned = OperationResult(DIRECTORY, path, OperationStatus.SIMULATED)
    _trace(planned, dry_run, verbose)

    if dry_run:
        return planned

    if path.is_dir():
        return OperationResult(DIRECTORY, path, OperationStatus.ALREADY_PRESENT)

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Cannot create directory {path}: {e}")
        return OperationResult(DIRECTORY, path, OperationStatus.FAILED, error=e)

    logger.debug(f"Directory created: {path}")
    return OperationResult(DIRECTORY, path, OperationStatus.CREATED)


def ensure_symlink(
    source: Path,
    destination: Path,
    dry_run: bool = False,
    verbose: bool = True
) -> OperationResult:
    """
    Create a symbolic link (or simulate if dry_run).

    An existing entry at destination counts as success and is left untouched.

    Args:
        source: File the link points at.
        destination: Link path.
        dry_run: If True, only report the operation.
        verbose: If True, report the operation even when performing it.

    Returns:
        OperationResult; FAILED carries the OS error.
    """
    planned = OperationResult(SYMLINK, destination, OperationStatus.SIMULATED, source=source)
    _trace(planned, dry_run, verbose)

    if dry_run:
        return planned

    try:
        destination.symlink_to(source)
    except FileExistsError:
        logger.debug(f"Symlink already present: {destination}")
        return OperationResult(SYMLINK, destination, OperationStatus.ALREADY_PRESENT, source=source)
    except OSError as e:
        logger.error(f"Cannot create symlink {source} -> {destination}: {e}")
        return OperationResult(SYMLINK, destination, OperationStatus.FAILED, source=source, error=e)

    logger.debug(f"Symlink created: {source} -> {destination}")
    return OperationResult(SYMLINK, destination, OperationStatus.CREATED, source=source)
