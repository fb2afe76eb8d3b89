"""
Naming pipeline: normalize → analyze → generate → style → finalize.
"""

from .analyzer import LinguisticAnalyzer, detect_framework_hints
from .conventions import CombinationPolicy, ConventionStore, KindRule
from .facade import NamingEngine, generate_names, get_default_engine
from .generator import CandidateGenerator
from .normalizer import TermNormalizer
from .sampler import RankerSampler
from .tagger import LexiconTagger, SpacyTagger, Tagger
from .types import EngineState, FrameworkHints, MatchStage, NormalizedTerm, SemanticAnalysis, SemanticRoles

__all__ = [
    "CandidateGenerator",
    "CombinationPolicy",
    "ConventionStore",
    "EngineState",
    "FrameworkHints",
    "KindRule",
    "LexiconTagger",
    "LinguisticAnalyzer",
    "MatchStage",
    "NamingEngine",
    "NormalizedTerm",
    "RankerSampler",
    "SemanticAnalysis",
    "SemanticRoles",
    "SpacyTagger",
    "Tagger",
    "TermNormalizer",
    "detect_framework_hints",
    "generate_names",
    "get_default_engine",
]
