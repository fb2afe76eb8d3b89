"""
Records passed between engine stages.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class MatchStage(Enum):
    """Which normalization stage produced a term."""

    EXACT = "exact"
    DECOMPOSED = "decomposed"
    PATTERN = "pattern"
    PASSTHROUGH = "passthrough"
    ROMANIZED = "romanized"


@dataclass(frozen=True)
class NormalizedTerm:
    """One source token and the English words it normalized to."""

    source: str
    terms: tuple[str, ...]
    stage: MatchStage


@dataclass(frozen=True)
class FrameworkHints:
    """Framework conventions detected from a description or a project scan."""

    hook_prefix: bool = False
    component_suffix: Optional[str] = None
    store_pattern: bool = False

    def __bool__(self) -> bool:
        return self.hook_prefix or self.store_pattern or self.component_suffix is not None


@dataclass(frozen=True)
class SemanticRoles:
    """Tagged tokens by coarse role, in first-seen order."""

    action: tuple[str, ...] = ()
    object: tuple[str, ...] = ()
    modifier: tuple[str, ...] = ()


@dataclass(frozen=True)
class SemanticAnalysis:
    """
    Part-of-speech view of a normalized description.

    verbs/nouns include inflected variants; roles hold the tagged tokens
    only. phrases are contiguous adjective/noun chunks of two or more words,
    space-joined.
    """

    verbs: tuple[str, ...] = ()
    nouns: tuple[str, ...] = ()
    adjectives: tuple[str, ...] = ()
    phrases: tuple[str, ...] = ()
    roles: SemanticRoles = field(default_factory=SemanticRoles)
    hints: FrameworkHints = field(default_factory=FrameworkHints)

    def is_empty(self) -> bool:
        return not (self.verbs or self.nouns or self.adjectives)


class EngineState(Enum):
    """Facade lifecycle for one generate() call."""

    IDLE = "idle"
    NORMALIZING = "normalizing"
    ANALYZING = "analyzing"
    GENERATING = "generating"
    STYLING = "styling"
    FINALIZING = "finalizing"
    DONE = "done"
    ERROR_FALLBACK = "error_fallback"


def unique(items) -> tuple:
    """Deduplicate preserving first-seen order."""
    return tuple(dict.fromkeys(items))
