"""
Internal error taxonomy.

None of these ever leave NamingEngine.generate(): each is raised at the stage
that detects it and recovered by the stage (or the facade) above it.
"""

from enum import Enum


class Degradation(Enum):
    """Which stage degraded, used only in log messages."""

    NORMALIZATION_MISS = "normalization_miss"  # unmapped token, passed through
    ANALYSIS_EMPTY = "analysis_empty"  # tagger produced nothing usable
    GENERATION_EMPTY = "generation_empty"  # zero candidates, padded from fallbacks
    PROJECT_SCAN_FAILURE = "project_scan_failure"  # proceeding without snapshot
    STYLE_EDGE_CASE = "style_edge_case"  # digit-leading or empty phrase


class NamingEngineError(Exception):
    """Base class for recoverable engine failures."""


class GenerationEmpty(NamingEngineError):
    """No candidate phrase could be built from the analysis."""


class ProjectScanFailure(NamingEngineError):
    """The project root could not be scanned (missing, not a dir, unreadable)."""
