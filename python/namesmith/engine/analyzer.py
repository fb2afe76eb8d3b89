"""
Part-of-speech analysis of normalized descriptions.
"""

import logging
import re
from typing import Optional, Sequence

from namesmith.errors import Degradation
from namesmith.naming.inflection import noun_forms, verb_forms

from .tagger import ADJ, NOUN, VERB, LexiconTagger, Tagger
from .types import FrameworkHints, SemanticAnalysis, SemanticRoles, unique

logger = logging.getLogger("namesmith.engine.analyzer")

_HOOK_WORD = re.compile(r"\bhooks?\b")
_HOOK_SYMBOL = re.compile(r"\buse[A-Z]")
_COMPONENT_WORD = re.compile(r"\b(?:vue|components?)\b")
_DIRECTIVE_WORD = re.compile(r"\b(?:angular|directives?)\b")
_STORE_WORD = re.compile(r"\b(?:stores?|pinia|redux|vuex)\b")


def detect_framework_hints(*texts: str) -> FrameworkHints:
    """
    Keyword detection of framework conventions.

    Examples:
        >>> detect_framework_hints("useAuth hook").hook_prefix
        True

        >>> detect_framework_hints("vue user card").component_suffix
        "component"

        >>> detect_framework_hints("angular tooltip directive").component_suffix
        "directive"

    Edge Cases:
        - Both vue and angular words: directive wins
        - No keywords: FrameworkHints() (falsy)
    """
    raw = " ".join(t for t in texts if isinstance(t, str))
    lower = raw.lower()

    component_suffix = None
    if _COMPONENT_WORD.search(lower):
        component_suffix = "component"
    if _DIRECTIVE_WORD.search(lower):
        component_suffix = "directive"

    return FrameworkHints(
        hook_prefix=bool(_HOOK_WORD.search(lower) or _HOOK_SYMBOL.search(raw)),
        component_suffix=component_suffix,
        store_pattern=bool(_STORE_WORD.search(lower)),
    )


def extract_phrases(tagged: Sequence[tuple[str, str]]) -> tuple[str, ...]:
    """
    Contiguous ADJ* NOUN+ chunks of at least two words.

    Examples:
        >>> extract_phrases([("max", "ADJ"), ("retry", "NOUN"), ("count", "NOUN")])
        ("max retry count",)

        >>> extract_phrases([("get", "VERB"), ("user", "NOUN"), ("info", "NOUN")])
        ("user info",)
    """
    phrases: list[str] = []
    chunk: list[str] = []
    has_noun = False

    def close():
        nonlocal chunk, has_noun
        if has_noun and len(chunk) >= 2:
            phrases.append(" ".join(chunk))
        chunk, has_noun = [], False

    for token, pos in tagged:
        if pos == ADJ:
            if has_noun:
                close()
            chunk.append(token)
        elif pos == NOUN:
            chunk.append(token)
            has_noun = True
        else:
            close()
    close()

    return unique(phrases)


class LinguisticAnalyzer:
    """
    Builds a SemanticAnalysis from normalized text.

    Args:
        tagger: Any Tagger; defaults to the offline LexiconTagger
    """

    def __init__(self, tagger: Optional[Tagger] = None):
        self.tagger = tagger if tagger is not None else LexiconTagger()

    def analyze(self, normalized: str | Sequence[str], description: str = "") -> SemanticAnalysis:
        """
        Extract verbs, nouns, adjectives, phrases, roles and framework hints.

        Args:
            normalized: Normalized text, or the term list from TermNormalizer
            description: Raw description, only used for framework hints
                ("useAuth" survives there but not in normalized terms)

        Returns:
            SemanticAnalysis; empty (not an error) for blank input or when
            the tagger fails
        """
        if isinstance(normalized, str):
            text = normalized
        elif normalized:
            text = " ".join(t for t in normalized if isinstance(t, str))
        else:
            text = ""

        hints = detect_framework_hints(description, text)

        if not text.strip():
            return SemanticAnalysis(hints=hints)

        try:
            tagged = self.tagger.tag(text)
        except Exception as e:
            logger.warning(f"{Degradation.ANALYSIS_EMPTY.value}: tagger failed on {text!r}: {e}")
            return SemanticAnalysis(hints=hints)

        action = unique(token for token, pos in tagged if pos == VERB)
        objects = unique(token for token, pos in tagged if pos == NOUN)
        modifiers = unique(token for token, pos in tagged if pos == ADJ)

        analysis = SemanticAnalysis(
            verbs=unique(form for verb in action for form in verb_forms(verb)),
            nouns=unique(form for noun in objects for form in noun_forms(noun)),
            adjectives=modifiers,
            phrases=extract_phrases(tagged),
            roles=SemanticRoles(action=action, object=objects, modifier=modifiers),
            hints=hints,
        )

        if analysis.is_empty():
            logger.debug(f"{Degradation.ANALYSIS_EMPTY.value}: no content words in {text!r}")
        return analysis
