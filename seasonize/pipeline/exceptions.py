"""Exceptions personnalisées pour les erreurs du pipeline."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seasonize.filesystem.operations import OperationResult


class SeasonizeError(Exception):
    """Classe de base pour toutes les erreurs qui interrompent une exécution."""

    pass


class PathEncodingError(SeasonizeError):
    """Nom de fichier non représentable en texte."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Can't parse path: {path!r}")


class MetadataParseError(SeasonizeError):
    """Fichier .info.json illisible, mal formé ou sans date exploitable."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid metadata file {path}: {reason}")


class ProjectionError(SeasonizeError):
    """Échec d'une création de répertoire ou de lien (hors « déjà présent »)."""

    def __init__(self, result: "OperationResult"):
        self.result = result
        super().__init__(f"{result.describe()} failed: {result.error}")
