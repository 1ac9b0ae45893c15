"""File discovery functions for metadata records and their sidecars."""

from pathlib import Path
from typing import Generator, List

from loguru import logger

from seasonize.config.settings import INFO_JSON_SUFFIX


def is_info_file(path: Path) -> bool:
    """Check if a path names a metadata record."""
    return path.name.endswith(INFO_JSON_SUFFIX) and len(path.name) > len(INFO_JSON_SUFFIX)


def strip_info_suffix(path: Path) -> str:
    """
    Return the base name shared by a video's files.

    Args:
        path: Path to a ``.info.json`` file.

    Returns:
        File name without the metadata suffix.
    """
    return path.name[:-len(INFO_JSON_SUFFIX)]


def is_text_name(name: str) -> bool:
    """Check if a file name decoded cleanly from the filesystem."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def iter_info_files(directory: Path) -> Generator[Path, None, None]:
    """
    Generate every metadata record below directory.

    Args:
        directory: Root directory to search in.

    Yields:
        Path objects for each ``.info.json`` file, in walk order.
    """
    logger.debug(f"Scanning: {directory}")
    file_count = 0
    for file in directory.rglob("*"):
        if is_info_file(file) and file.is_file():
            file_count += 1
            yield file
    logger.debug(f"  → {file_count} metadata files found in {directory}")


def find_sidecar_files(info_path: Path) -> List[Path]:
    """
    Find the files belonging to the same video as a metadata record.

    A sidecar is any regular file of the same directory whose stem equals
    the record's name without its metadata suffix. Symlinks are skipped.

    Args:
        info_path: Path to the ``.info.json`` file.

    Returns:
        Matching paths in directory order, the metadata file always first.
    """
    base_name = strip_info_suffix(info_path)
    directory = info_path.parent

    sidecars = [info_path]
    for entry in directory.iterdir():
        if entry == info_path or not is_text_name(entry.name):
            continue
        if entry.stem == base_name and entry.is_file() and not entry.is_symlink():
            sidecars.append(entry)

    logger.debug(f"{len(sidecars)} files for {base_name}")
    return sidecars
