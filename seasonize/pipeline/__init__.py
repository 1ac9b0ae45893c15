"""Catalogue building and projection pipeline."""

from seasonize.pipeline.exceptions import (
    SeasonizeError,
    PathEncodingError,
    MetadataParseError,
    ProjectionError,
)
from seasonize.pipeline.scanner import (
    ScanStatus,
    ScanOutcome,
    read_record,
    iter_scan,
    scan_source,
)
from seasonize.pipeline.partitioner import build_channel
from seasonize.pipeline.catalogue import VideoCatalogue
from seasonize.pipeline.projector import PlannedOperation, SeasonProjector
from seasonize.pipeline.orchestrator import ProcessingStats, PipelineOrchestrator

__all__ = [
    "SeasonizeError",
    "PathEncodingError",
    "MetadataParseError",
    "ProjectionError",
    "ScanStatus",
    "ScanOutcome",
    "read_record",
    "iter_scan",
    "scan_source",
    "build_channel",
    "VideoCatalogue",
    "PlannedOperation",
    "SeasonProjector",
    "ProcessingStats",
    "PipelineOrchestrator",
]
