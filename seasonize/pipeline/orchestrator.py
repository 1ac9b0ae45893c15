"""Orchestration du pipeline : scan, saisons, projection."""

from dataclasses import dataclass
from typing import Iterable, List

from loguru import logger
from tqdm import tqdm

from seasonize.config.context import ExecutionContext
from seasonize.filesystem.operations import OperationResult, OperationStatus
from seasonize.models.season import ChannelStructure
from seasonize.pipeline.catalogue import VideoCatalogue
from seasonize.pipeline.projector import SeasonProjector
from seasonize.ui.display import display_structures


@dataclass
class ProcessingStats:
    """Statistiques d'une exécution."""

    channels: int = 0
    seasons: int = 0
    videos: int = 0
    created: int = 0
    already_present: int = 0
    simulated: int = 0

    @classmethod
    def from_structures(cls, structures: List[ChannelStructure]) -> "ProcessingStats":
        """Compte les chaînes, saisons et vidéos d'une structure."""
        return cls(
            channels=len(structures),
            seasons=sum(len(s.seasons) for s in structures),
            videos=sum(s.video_count for s in structures),
        )

    def add_results(self, results: Iterable[OperationResult]) -> None:
        """Ajoute les résultats d'une projection aux compteurs."""
        for result in results:
            if result.status is OperationStatus.CREATED:
                self.created += 1
            elif result.status is OperationStatus.ALREADY_PRESENT:
                self.already_present += 1
            elif result.status is OperationStatus.SIMULATED:
                self.simulated += 1


class PipelineOrchestrator:
    """
    Enchaîne les phases d'une exécution.

    Le scan est terminé avant le découpage en saisons, et toutes les
    saisons sont calculées avant la première projection. Chaque chaîne
    est projetée entièrement avant la suivante.
    """

    def __init__(self, context: ExecutionContext):
        """
        Initialise l'orchestrateur.

        Arguments :
            context: Réglages de l'exécution.
        """
        self.context = context

    def run(self) -> ProcessingStats:
        """
        Exécute le pipeline complet.

        Retourne :
            ProcessingStats de l'exécution.

        Lève :
            SeasonizeError: à la première erreur, sans poursuivre.
        """
        if self.context.source_dir is None:
            raise ValueError("ExecutionContext.source_dir is required")

        catalogue = VideoCatalogue.build(self.context.source_dir)
        structures = catalogue.build_seasons()
        stats = ProcessingStats.from_structures(structures)

        display_structures(structures)

        if self.context.scan_only:
            logger.info("No target given, skipping projection")
            return stats

        self.project(structures, stats)
        return stats

    def project(self, structures: List[ChannelStructure], stats: ProcessingStats) -> None:
        """
        Projette chaque chaîne dans le répertoire cible.

        Arguments :
            structures: Chaînes à projeter.
            stats: Statistiques à compléter.
        """
        with tqdm(structures, desc="Projection des chaînes", unit="chaîne",
                  disable=not structures) as pbar:
            for structure in pbar:
                pbar.set_postfix_str(structure.channel_name[:30])
                projector = SeasonProjector(
                    self.context.target_dir,
                    structure,
                    dry_run=self.context.dry_run,
                    verbose=self.context.verbose,
                )
                stats.add_results(projector.build())
