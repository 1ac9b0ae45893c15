"""Season and channel views over catalogue records."""

from dataclasses import dataclass
from typing import Iterator, Tuple

from seasonize.config.settings import SEASON_FOLDER_TEMPLATE
from seasonize.models.video import VideoRecord


def format_season_folder(number: int) -> str:
    """
    Format season number as folder name.

    Args:
        number: Season number (1-based).

    Returns:
        Formatted string like "Season 1".
    """
    return SEASON_FOLDER_TEMPLATE.format(number=number)


def format_episode_code(season: int, episode: int) -> str:
    """
    Format a season/episode pair for display.

    Args:
        season: Season number.
        episode: Episode number.

    Returns:
        String like "S001E004".
    """
    return f"S{season:03d}E{episode:03d}"


@dataclass(frozen=True)
class Season:
    """
    A channel's videos for one year, in date order.

    Attributes:
        number: Rank of the year among the channel's years, starting at 1.
        videos: Records shared with the catalogue, sorted by date.
    """

    number: int
    videos: Tuple[VideoRecord, ...]

    @property
    def year(self) -> int:
        """Calendar year shared by every video of the season."""
        return self.videos[0].effective_date.year

    @property
    def folder_name(self) -> str:
        return format_season_folder(self.number)

    def episodes(self) -> Iterator[Tuple[int, VideoRecord]]:
        """Yield (episode number, record) pairs, numbered from 1."""
        return enumerate(self.videos, start=1)

    def __len__(self) -> int:
        return len(self.videos)


@dataclass(frozen=True)
class ChannelStructure:
    """
    A channel presented as a series.

    Attributes:
        channel_name: Channel name, used as the show folder.
        seasons: Seasons in ascending number order.
    """

    channel_name: str
    seasons: Tuple[Season, ...]

    @property
    def video_count(self) -> int:
        return sum(len(season) for season in self.seasons)

    def iter_episodes(self) -> Iterator[Tuple[Season, int, VideoRecord]]:
        """Yield (season, episode number, record) for every video of the channel."""
        for season in self.seasons:
            for episode, record in season.episodes():
                yield season, episode, record
