"""Data models for seasonize."""

from seasonize.models.info import (
    InfoRecord,
    PlaylistInfo,
    VideoInfo,
    load_info,
    parse_info,
    parse_upload_date,
)
from seasonize.models.video import VideoRecord
from seasonize.models.season import (
    ChannelStructure,
    Season,
    format_episode_code,
    format_season_folder,
)

__all__ = [
    "InfoRecord",
    "PlaylistInfo",
    "VideoInfo",
    "load_info",
    "parse_info",
    "parse_upload_date",
    "VideoRecord",
    "ChannelStructure",
    "Season",
    "format_episode_code",
    "format_season_folder",
]
