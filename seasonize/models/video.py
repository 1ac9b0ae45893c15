"""Video record model for the seasonize package."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Tuple

from seasonize.config.settings import (
    MIN_FULL_TITLE_LENGTH,
    TITLE_PATH_SEPARATOR,
    TITLE_SEPARATOR_REPLACEMENT,
)
from seasonize.models.info import VideoInfo


@dataclass(frozen=True)
class VideoRecord:
    """
    One downloaded video and the files that belong to it.

    Records are created by the scanner and never modified afterwards.
    Seasons refer to these objects instead of copying them.

    Attributes:
        id: Video identifier.
        title: Plain title.
        full_title: Full title.
        channel: Channel name.
        effective_date: UTC datetime used as the ordering key.
        is_short_form: True if downloaded from a short-form listing.
        sidecar_paths: Files sharing the video's stem, metadata file first.
    """

    id: str
    title: str
    full_title: str
    channel: str
    effective_date: datetime
    is_short_form: bool
    sidecar_paths: Tuple[Path, ...]

    def __post_init__(self) -> None:
        if not self.sidecar_paths:
            raise ValueError(f"video {self.id!r} has no sidecar files")

    @classmethod
    def from_info(cls, info: VideoInfo, sidecar_paths: Tuple[Path, ...]) -> "VideoRecord":
        """
        Build a record from a parsed metadata record.

        Args:
            info: Parsed video metadata.
            sidecar_paths: Files sharing the video's stem, metadata file first.

        Returns:
            VideoRecord instance.

        Raises:
            ValueError: If the date cannot be resolved.
        """
        return cls(
            id=info.id,
            title=info.title,
            full_title=info.fulltitle,
            channel=info.channel,
            effective_date=info.resolve_date(),
            is_short_form=info.is_short,
            sidecar_paths=tuple(sidecar_paths),
        )

    @property
    def metadata_path(self) -> Path:
        """Path of the ``.info.json`` file."""
        return self.sidecar_paths[0]

    @property
    def display_title(self) -> str:
        """Full title when it is meaningful, plain title otherwise."""
        if len(self.full_title) >= MIN_FULL_TITLE_LENGTH:
            return self.full_title
        return self.title

    @property
    def link_basename(self) -> str:
        """Display title made safe for use as a single path segment."""
        return self.display_title.replace(TITLE_PATH_SEPARATOR, TITLE_SEPARATOR_REPLACEMENT)

    def link_name(self, sidecar: Path) -> str:
        """
        Name of the link pointing at one of this video's files.

        Args:
            sidecar: One of the sidecar paths.

        Returns:
            Sanitized title followed by the file's own extension.
        """
        return f"{self.link_basename}{sidecar.suffix}"
