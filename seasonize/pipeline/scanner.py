"""Scanning of the source tree into video records."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generator, List, Optional

from loguru import logger

from seasonize.filesystem.discovery import find_sidecar_files, is_text_name, iter_info_files
from seasonize.models.info import PlaylistInfo, load_info
from seasonize.models.video import VideoRecord
from seasonize.pipeline.exceptions import MetadataParseError, PathEncodingError, SeasonizeError


class ScanStatus(Enum):
    """What the scanner made of one metadata file."""

    RECORD = "record"
    PLAYLIST = "playlist"
    SHORT = "short"
    ERROR = "error"


@dataclass(frozen=True)
class ScanOutcome:
    """
    Result of examining one metadata file.

    Attributes:
        path: The metadata file.
        status: Outcome kind.
        record: The video record, for RECORD only.
        error: The terminal error, for ERROR only.
    """

    path: Path
    status: ScanStatus
    record: Optional[VideoRecord] = None
    error: Optional[SeasonizeError] = None


def read_record(path: Path) -> ScanOutcome:
    """
    Turn a metadata file into a scan outcome.

    Playlists and short-form videos are reported but carry no record.
    Problems are returned as an ERROR outcome rather than raised.

    Args:
        path: Path to the ``.info.json`` file.

    Returns:
        ScanOutcome for the file.
    """
    if not is_text_name(str(path)):
        return ScanOutcome(path, ScanStatus.ERROR, error=PathEncodingError(path))

    try:
        info = load_info(path)
    except (OSError, ValueError) as e:
        return ScanOutcome(path, ScanStatus.ERROR, error=MetadataParseError(path, str(e)))

    if isinstance(info, PlaylistInfo):
        logger.debug(f"Playlist ignored: {path.name}")
        return ScanOutcome(path, ScanStatus.PLAYLIST)

    if info.is_short:
        logger.debug(f"Short ignored: {path.name}")
        return ScanOutcome(path, ScanStatus.SHORT)

    try:
        sidecars = find_sidecar_files(path)
        record = VideoRecord.from_info(info, tuple(sidecars))
    except OSError as e:
        return ScanOutcome(path, ScanStatus.ERROR, error=MetadataParseError(path, f"cannot list sidecar files: {e}"))
    except ValueError as e:
        return ScanOutcome(path, ScanStatus.ERROR, error=MetadataParseError(path, str(e)))

    return ScanOutcome(path, ScanStatus.RECORD, record=record)


def iter_scan(source: Path) -> Generator[ScanOutcome, None, None]:
    """
    Examine every metadata file below source.

    Stops right after yielding the first ERROR outcome.

    Args:
        source: Source directory.

    Yields:
        One ScanOutcome per metadata file, in walk order.
    """
    for path in iter_info_files(source.absolute()):
        logger.info(f"Parsing {path.name}")
        outcome = read_record(path)
        yield outcome
        if outcome.status is ScanStatus.ERROR:
            return


def scan_source(source: Path) -> List[VideoRecord]:
    """
    Collect the valid video records below source.

    Args:
        source: Source directory.

    Returns:
        Records in walk order.

    Raises:
        SeasonizeError: The first malformed record or unreadable path.
    """
    records: List[VideoRecord] = []
    skipped = 0

    for outcome in iter_scan(source):
        if outcome.error is not None:
            raise outcome.error
        if outcome.record is not None:
            records.append(outcome.record)
        else:
            skipped += 1

    logger.info(f"{len(records)} videos found in {source} ({skipped} ignored)")
    return records
