"""Metadata record model: the contents of an ``.info.json`` file."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from seasonize.config.settings import (
    INFO_TYPE_KEY,
    INFO_TYPE_PLAYLIST,
    INFO_TYPE_VIDEO,
    SHORTS_URL_SUFFIX,
    UPLOAD_DATE_FORMAT,
    UPLOAD_DATE_LENGTH,
)


@dataclass(frozen=True)
class PlaylistInfo:
    """A playlist record. Nothing in it is consumed."""


@dataclass(frozen=True)
class VideoInfo:
    """
    The fields of a video record used to build the catalogue.

    Attributes:
        id: Video identifier.
        title: Plain title.
        fulltitle: Full title (may be empty).
        channel: Channel name, used verbatim as the show name.
        upload_date: Compact calendar date (YYYYMMDD).
        timestamp: Optional epoch seconds; preferred over upload_date.
        playlist_webpage_url: Optional URL of the listing the video came from.
    """

    id: str
    title: str
    fulltitle: str
    channel: str
    upload_date: str
    timestamp: Optional[int] = None
    playlist_webpage_url: Optional[str] = None

    @property
    def is_short(self) -> bool:
        """Check if the video was downloaded from a short-form listing."""
        if self.playlist_webpage_url is None:
            return False
        return self.playlist_webpage_url.endswith(SHORTS_URL_SUFFIX)

    def resolve_date(self) -> datetime:
        """
        Resolve the date used to order this video.

        The epoch timestamp takes precedence. The upload date is parsed as
        midnight UTC when the timestamp is absent or out of range.

        Returns:
            Timezone-aware UTC datetime.

        Raises:
            ValueError: If neither field yields a date.
        """
        if self.timestamp is not None:
            try:
                return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                pass

        return parse_upload_date(self.upload_date)


InfoRecord = Union[VideoInfo, PlaylistInfo]


def parse_upload_date(value: str) -> datetime:
    """
    Parse a YYYYMMDD date as midnight UTC.

    Args:
        value: Compact date string.

    Returns:
        Timezone-aware UTC datetime.

    Raises:
        ValueError: If the value is not an 8-digit valid date.
    """
    if len(value) != UPLOAD_DATE_LENGTH or not value.isdigit():
        raise ValueError(f"invalid upload_date {value!r}")
    return datetime.strptime(value, UPLOAD_DATE_FORMAT).replace(tzinfo=timezone.utc)


def _required_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _optional_timestamp(data: Dict[str, Any]) -> Optional[int]:
    value = data.get("timestamp")
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field 'timestamp' must be an integer, got {value!r}")
    return value


def parse_info(data: Any) -> InfoRecord:
    """
    Build a metadata record from decoded JSON.

    Args:
        data: Decoded JSON document.

    Returns:
        VideoInfo or PlaylistInfo depending on the discriminator.

    Raises:
        ValueError: If the document is not a known record kind or a field is malformed.
    """
    if not isinstance(data, dict):
        raise ValueError("metadata record must be a JSON object")

    kind = data.get(INFO_TYPE_KEY)
    if kind == INFO_TYPE_PLAYLIST:
        return PlaylistInfo()
    if kind != INFO_TYPE_VIDEO:
        raise ValueError(f"unknown record type {kind!r}")

    return VideoInfo(
        id=_required_str(data, "id"),
        title=_required_str(data, "title"),
        fulltitle=_required_str(data, "fulltitle"),
        channel=_required_str(data, "channel"),
        upload_date=_required_str(data, "upload_date"),
        timestamp=_optional_timestamp(data),
        playlist_webpage_url=_optional_str(data, "playlist_webpage_url"),
    )


def load_info(path: Path) -> InfoRecord:
    """
    Read and parse a metadata file.

    Args:
        path: Path to the ``.info.json`` file.

    Returns:
        Parsed record.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not valid JSON or not a valid record.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_info(data)
