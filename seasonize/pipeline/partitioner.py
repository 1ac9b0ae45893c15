"""Splitting of a channel's videos into yearly seasons."""

from itertools import groupby
from typing import Iterable, List

from seasonize.models.season import ChannelStructure, Season
from seasonize.models.video import VideoRecord


def build_channel(name: str, records: Iterable[VideoRecord]) -> ChannelStructure:
    """
    Arrange a channel's videos as seasons of episodes.

    Videos are sorted by date (ties keep their order) and split into one
    season per occurring year. Seasons are numbered by rank, so a channel
    with videos in 2018 and 2021 only has seasons 1 and 2.

    Args:
        name: Channel name.
        records: The channel's records.

    Returns:
        ChannelStructure with seasons in ascending order.
    """
    ordered = sorted(records, key=lambda record: record.effective_date)

    seasons: List[Season] = []
    for number, (_, videos) in enumerate(
        groupby(ordered, key=lambda record: record.effective_date.year), start=1
    ):
        seasons.append(Season(number=number, videos=tuple(videos)))

    return ChannelStructure(channel_name=name, seasons=tuple(seasons))
