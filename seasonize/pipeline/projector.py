"""Projection of a seasoned channel onto a symlink tree."""

from pathlib import Path
from typing import List, NamedTuple, Optional

from loguru import logger

from seasonize.filesystem.operations import (
    DIRECTORY,
    SYMLINK,
    OperationResult,
    ensure_directory,
    ensure_symlink,
)
from seasonize.models.season import ChannelStructure, Season
from seasonize.models.video import VideoRecord
from seasonize.pipeline.exceptions import ProjectionError


class PlannedOperation(NamedTuple):
    """A directory or link the projector will ensure."""

    kind: str
    path: Path
    source: Optional[Path] = None


class SeasonProjector:
    """
    Materializes one channel as ``<target>/<channel>/Season <N>/<title>.<ext>``.

    Every step is idempotent: existing directories and links are kept as
    they are, so the projector can be re-run over a built tree. In dry-run
    mode the same operations are reported and nothing is written.
    """

    def __init__(
        self,
        target_base: Path,
        structure: ChannelStructure,
        dry_run: bool = False,
        verbose: bool = True
    ):
        """
        Args:
            target_base: Root of the series tree.
            structure: Channel to project.
            dry_run: If True, report operations without performing them.
            verbose: If True, report operations even when performing them.
        """
        self.structure = structure
        self.channel_dir = target_base / structure.channel_name
        self.dry_run = dry_run
        self.verbose = verbose

    def season_dir(self, season: Season) -> Path:
        return self.channel_dir / season.folder_name

    @staticmethod
    def link_path(season_dir: Path, record: VideoRecord, sidecar: Path) -> Path:
        return season_dir / record.link_name(sidecar)

    def plan(self) -> List[PlannedOperation]:
        """
        List the operations build() performs, in order, without touching the disk.

        Returns:
            PlannedOperation entries.
        """
        operations = [PlannedOperation(DIRECTORY, self.channel_dir)]

        for season in self.structure.seasons:
            season_dir = self.season_dir(season)
            operations.append(PlannedOperation(DIRECTORY, season_dir))

            for _, record in season.episodes():
                for sidecar in record.sidecar_paths:
                    operations.append(
                        PlannedOperation(SYMLINK, self.link_path(season_dir, record, sidecar), sidecar)
                    )

        return operations

    def build(self) -> List[OperationResult]:
        """
        Ensure the channel directory, season directories and episode links.

        Returns:
            One OperationResult per operation, in order.

        Raises:
            ProjectionError: On the first operation that fails. Earlier
                operations are not undone.
        """
        logger.debug(f"Projecting channel {self.structure.channel_name} to {self.channel_dir}")
        results: List[OperationResult] = []

        for operation in self.plan():
            if operation.kind == DIRECTORY:
                result = ensure_directory(operation.path, self.dry_run, self.verbose)
            else:
                result = ensure_symlink(operation.source, operation.path, self.dry_run, self.verbose)

            if not result.ok:
                raise ProjectionError(result)
            results.append(result)

        return results
