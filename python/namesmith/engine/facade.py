"""
NamingEngine: the single entry point of the naming pipeline.

Stages, in order:
    NORMALIZING → ANALYZING → GENERATING → STYLING → FINALIZING → DONE

Any exception in a stage moves the call to ERROR_FALLBACK, which answers
with the generic fallback names styled to the requested convention.
generate() never raises and always returns exactly config.count distinct
names valid in the requested style.
"""

import logging
import threading
from typing import Optional

from namesmith.config import EngineConfig
from namesmith.errors import Degradation, GenerationEmpty
from namesmith.logging_config import configure_logging
from namesmith.naming.styles import convert
from namesmith.types import MAX_DESCRIPTION_LENGTH, CasingStyle, IdentifierKind, NamingRequest

from .analyzer import LinguisticAnalyzer
from .conventions import ConventionStore
from .generator import CandidateGenerator
from .normalizer import TermNormalizer
from .sampler import RankerSampler
from .tagger import Tagger
from .types import EngineState

DEFAULT_KIND = IdentifierKind.VARIABLE
DEFAULT_STYLE = CasingStyle.CAMEL


class NamingEngine:
    """
    Offline identifier generator.

    Args:
        config: Engine settings (default: EngineConfig())
        tagger: POS tagger for the analyzer (default: LexiconTagger)
        normalizer: TermNormalizer (default honors config.romanize_unmapped)
        conventions: ConventionStore with kind rules and fallbacks
        project_cache: ProjectConventionCache; built from
            config.project_root when not given
        logger: Receives degradation diagnostics

    Example:
        >>> engine = NamingEngine()
        >>> engine.generate("获取用户信息", "function", "camelCase")[0]
        "getUserInfo"
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        tagger: Optional[Tagger] = None,
        normalizer: Optional[TermNormalizer] = None,
        conventions: Optional[ConventionStore] = None,
        project_cache=None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config if config is not None else EngineConfig()
        self.logger = logger if logger is not None else logging.getLogger("namesmith.engine")

        self.normalizer = normalizer if normalizer is not None else TermNormalizer(
            romanize_unmapped=self.config.romanize_unmapped
        )
        self.analyzer = LinguisticAnalyzer(tagger)
        self.conventions = conventions if conventions is not None else ConventionStore()
        self.generator = CandidateGenerator(
            self.conventions,
            top_k=self.config.top_k,
            max_candidates=self.config.max_candidates,
        )
        self.sampler = RankerSampler(self.conventions, seed=self.config.sample_seed)

        if project_cache is None and self.config.project_root is not None:
            from namesmith.workspace import ProjectConventionCache

            project_cache = ProjectConventionCache(
                self.config.project_root,
                scan_timeout=self.config.scan_timeout,
                max_files=self.config.max_scan_files,
            )
        self.project_cache = project_cache

        # Informational only: final state of the most recent call
        self.last_state = EngineState.IDLE

    def generate(self, description, kind=DEFAULT_KIND, style=DEFAULT_STYLE) -> list[str]:
        """
        Generate config.count identifiers for a description.

        Args:
            description: Chinese and/or English text; non-str is treated as
                empty, longer than 500 characters is truncated
            kind: IdentifierKind or its value; unknown → variable
            style: CasingStyle or its value; unknown → camelCase

        Returns:
            Exactly config.count distinct names valid in the style
        """
        request = NamingRequest(
            self._coerce_description(description),
            self._coerce_kind(kind),
            self._coerce_style(style),
        )
        text, kind, style = request.description, request.kind, request.style
        n = self.config.count

        state = EngineState.IDLE
        try:
            state = EngineState.NORMALIZING
            terms = self.normalizer.normalize(text)

            state = EngineState.ANALYZING
            analysis = self.analyzer.analyze(terms, description=text)
            if analysis.is_empty():
                self.logger.debug(f"{Degradation.ANALYSIS_EMPTY.value}: {text[:50]!r}")

            state = EngineState.GENERATING
            snapshot = self.project_cache.get() if self.project_cache is not None else None
            try:
                phrases = self.generator.generate(analysis, kind, snapshot=snapshot)
            except GenerationEmpty as e:
                self.logger.debug(f"{Degradation.GENERATION_EMPTY.value}: {e}")
                phrases = []

            state = EngineState.STYLING
            styled = [convert(phrase, style) for phrase in phrases]

            state = EngineState.FINALIZING
            names = self.sampler.finalize(styled, n, kind, style)
        except Exception as e:
            self.logger.warning(f"Naming failed during {state.value}, using fallback names: {e}", exc_info=True)
            self.last_state = EngineState.ERROR_FALLBACK
            return self._fallback_names(style, n)

        self.last_state = EngineState.DONE
        return names

    def _fallback_names(self, style: CasingStyle, n: int) -> list[str]:
        return self.sampler.pad([], n, None, style)

    def _coerce_kind(self, kind) -> IdentifierKind:
        try:
            return IdentifierKind.parse(kind)
        except ValueError:
            self.logger.info(f"Unknown identifier kind {kind!r}, using {DEFAULT_KIND.value}")
            return DEFAULT_KIND

    def _coerce_style(self, style) -> CasingStyle:
        try:
            return CasingStyle.parse(style)
        except ValueError:
            self.logger.info(f"Unknown casing style {style!r}, using {DEFAULT_STYLE.value}")
            return DEFAULT_STYLE

    def _coerce_description(self, description) -> str:
        if not isinstance(description, str):
            if description is not None:
                self.logger.info(f"Ignoring non-string description of type {type(description).__name__}")
            return ""
        if len(description) > MAX_DESCRIPTION_LENGTH:
            self.logger.debug(f"Truncating description to {MAX_DESCRIPTION_LENGTH} characters")
            return description[:MAX_DESCRIPTION_LENGTH]
        return description


_default_engine: Optional[NamingEngine] = None
_default_engine_lock = threading.Lock()


def get_default_engine() -> NamingEngine:
    """
    Process-wide engine built from NAMESMITH_* environment variables.

    The first call also applies NAMESMITH_LOG_DIR / NAMESMITH_LOG_LEVEL.
    """
    global _default_engine
    if _default_engine is None:
        with _default_engine_lock:
            if _default_engine is None:
                config = EngineConfig.from_env()
                configure_logging(config)
                _default_engine = NamingEngine(config)
    return _default_engine


def generate_names(description, kind=DEFAULT_KIND, style=DEFAULT_STYLE) -> list[str]:
    """
    Five (config.count) distinct identifiers for a description. Never raises.

    Examples:
        >>> generate_names("max retry count", "constant", "CONSTANT_CASE")[0]
        "MAX_RETRY_COUNT"

        >>> generate_names("user profile", "component", "PascalCase")[0]
        "UserProfile"
    """
    return get_default_engine().generate(description, kind, style)
