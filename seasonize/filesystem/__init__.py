"""Filesystem operations for seasonize."""

from seasonize.filesystem.discovery import (
    is_info_file,
    strip_info_suffix,
    iter_info_files,
    find_sidecar_files,
)
from seasonize.filesystem.operations import (
    DIRECTORY,
    SYMLINK,
    OperationStatus,
    OperationResult,
    ensure_directory,
    ensure_symlink,
)

__all__ = [
    "is_info_file",
    "strip_info_suffix",
    "iter_info_files",
    "find_sidecar_files",
    "DIRECTORY",
    "SYMLINK",
    "OperationStatus",
    "OperationResult",
    "ensure_directory",
    "ensure_symlink",
]
