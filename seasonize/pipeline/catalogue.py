"""Catalogue of the videos found in one scan."""

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from loguru import logger

from seasonize.models.season import ChannelStructure
from seasonize.models.video import VideoRecord
from seasonize.pipeline.partitioner import build_channel
from seasonize.pipeline.scanner import scan_source


class VideoCatalogue:
    """
    Owns every valid video record of a run.

    Seasons built from the catalogue reference its records, so they
    must not be kept beyond the catalogue's lifetime.
    """

    def __init__(self, records: Iterable[VideoRecord]):
        self._records: Tuple[VideoRecord, ...] = tuple(records)

    @classmethod
    def build(cls, source: Path) -> "VideoCatalogue":
        """Scan source and catalogue what was found."""
        return cls(scan_source(source))

    @property
    def records(self) -> Tuple[VideoRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VideoRecord]:
        return iter(self._records)

    def by_channel(self) -> Dict[str, List[VideoRecord]]:
        """
        Group records by exact channel name.

        Records keep their scan order within a channel. The order of the
        channels themselves is not meaningful.

        Returns:
            Dict mapping channel name to its records.
        """
        channels: Dict[str, List[VideoRecord]] = {}
        for record in self._records:
            channels.setdefault(record.channel, []).append(record)
        return channels

    def build_seasons(self) -> List[ChannelStructure]:
        """
        Build the seasoned structure of every channel.

        Returns:
            One ChannelStructure per channel, sorted by channel name.
        """
        structures = [
            build_channel(name, records)
            for name, records in sorted(self.by_channel().items())
        ]
        logger.debug(f"{len(structures)} channels catalogued")
        return structures
