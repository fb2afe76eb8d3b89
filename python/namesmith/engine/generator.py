"""
Candidate phrase construction.

Turns a SemanticAnalysis into raw, space-joined lowercase phrases
("get user info", "use user store"). Styling happens later, so phrases
that only differ in casing are harmless duplicates here.
"""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from namesmith.errors import GenerationEmpty
from namesmith.naming.inflection import verb_base
from namesmith.types import IdentifierKind

from .conventions import CombinationPolicy, ConventionStore, KindRule
from .types import FrameworkHints, SemanticAnalysis, unique

if TYPE_CHECKING:
    from namesmith.workspace.scanner import ProjectConventionSnapshot

logger = logging.getLogger("namesmith.engine.generator")

DEFAULT_TOP_K = 4
DEFAULT_MAX_CANDIDATES = 200

# Project verbs that are really prefixes, not actions
_PREFIX_VERBS = frozenset({"use", "is", "has", "can", "should", "on"})

# Frequent project nouns borrowed when an action lacks objects
_PROJECT_NOUN_LIMIT = 3


class _CandidateList:
    """Ordered, deduplicated phrase list with a hard size cap."""

    def __init__(self, limit: int):
        self.limit = limit
        self._items: dict[str, None] = {}

    @property
    def full(self) -> bool:
        return len(self._items) >= self.limit

    def add(self, *parts: str):
        if self.full:
            return
        phrase = " ".join(p for p in parts if p).strip()
        if phrase:
            self._items.setdefault(phrase, None)

    def items(self) -> list[str]:
        return list(self._items)


def _ends_with(phrase: str, word: str) -> bool:
    return phrase == word or phrase.endswith(" " + word)


def _prefer(items: Iterable[str], preferred: Iterable[str]) -> tuple[str, ...]:
    """Move preferred items (adding missing ones) to the front, keeping order otherwise."""
    preferred = tuple(p for p in preferred if p)
    return unique((*preferred, *items))


class CandidateGenerator:
    """
    Builds bounded candidate phrases for one identifier kind.

    Args:
        conventions: Kind rules and verb synonyms
        top_k: Words kept per category (verbs, objects, adjectives)
        max_candidates: Hard cap on phrases returned
    """

    def __init__(
        self,
        conventions: Optional[ConventionStore] = None,
        top_k: int = DEFAULT_TOP_K,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
    ):
        self.conventions = conventions if conventions is not None else ConventionStore()
        self.top_k = top_k
        self.max_candidates = max_candidates

    def generate(
        self,
        analysis: SemanticAnalysis,
        kind: IdentifierKind,
        hints: Optional[FrameworkHints] = None,
        snapshot: Optional["ProjectConventionSnapshot"] = None,
    ) -> list[str]:
        """
        Candidate phrases for a kind, most relevant first.

        Args:
            analysis: Output of LinguisticAnalyzer
            kind: Identifier kind selecting the template
            hints: Extra framework hints, merged with analysis.hints
            snapshot: Optional project conventions (preferred verbs,
                suffixes, hook/store habits)

        Returns:
            At most max_candidates distinct phrases

        Raises:
            GenerationEmpty: analysis has neither verbs nor nouns usable
                by the kind template or the basic combination
        """
        rule = self._effective_rule(kind, analysis.hints, hints, snapshot)

        verbs = self._select_verbs(analysis, rule, snapshot)
        objects = self._select_objects(analysis, rule, snapshot)
        adjectives = self._top(analysis.roles.modifier, analysis.adjectives)

        out = _CandidateList(self.max_candidates)
        if rule.policy is CombinationPolicy.ACTION_OBJECT:
            self._action_object(out, rule, verbs, objects, adjectives)
        elif rule.policy is CombinationPolicy.PREFIXED:
            self._prefixed(out, kind, rule, verbs, objects or adjectives or verbs)
        elif rule.policy is CombinationPolicy.SUFFIXED:
            self._suffixed(out, kind, rule, verbs, objects)
        else:
            self._modified(out, rule, analysis.phrases, objects, adjectives)

        candidates = out.items()
        if not candidates:
            basic = _CandidateList(self.max_candidates)
            nouns = self._top(analysis.roles.object, analysis.nouns)
            self._basic(basic, verbs, nouns, rule.default_verbs)
            candidates = basic.items()

        if not candidates:
            raise GenerationEmpty(f"no candidates for kind {kind.value}")

        logger.debug(f"Generated {len(candidates)} candidates for {kind.value}")
        return candidates

    # ─────────────────────────────────────────
    # Word selection
    # ─────────────────────────────────────────

    def _top(self, *sources: Iterable[str]) -> tuple[str, ...]:
        """First top_k distinct words across sources, in priority order."""
        return unique(w for source in sources for w in source if w)[: self.top_k]

    def _select_verbs(self, analysis, rule: KindRule, snapshot) -> tuple[str, ...]:
        """
        Role verbs (base form), then their synonyms, then inflected forms,
        then frequent project verbs for kinds that need an action.
        """
        actions = self._top(verb_base(v) for v in analysis.roles.action)
        synonyms = [s for v in actions for s in self.conventions.synonyms_for(v)]

        project_verbs: tuple[str, ...] = ()
        if snapshot is not None and (rule.requires_verbs or rule.policy is CombinationPolicy.PREFIXED):
            project_verbs = tuple(v for v in snapshot.top_verbs if v not in _PREFIX_VERBS)

        ranked = unique((*actions, *synonyms, *analysis.verbs, *project_verbs))
        return ranked[: self.top_k * 2]

    def _select_objects(self, analysis, rule: KindRule, snapshot) -> tuple[str, ...]:
        """
        Phrases, then role objects and nouns. Kinds that need an action top
        up a short list with the project's most frequent nouns.
        """
        # Multi-word phrases are the most specific objects
        phrases = analysis.phrases[: self.top_k]
        objects = unique((*phrases, *self._top(analysis.roles.object, analysis.nouns)))

        if snapshot is not None and rule.requires_verbs and len(objects) < self.top_k:
            project_nouns = snapshot.top_nouns[:_PROJECT_NOUN_LIMIT]
            objects = unique((*objects, *project_nouns))[: self.top_k]
        return objects

    def _effective_rule(self, kind, *sources) -> KindRule:
        """Kind rule with prefixes/suffixes reordered by hints and project habits."""
        rule = self.conventions.rule_for(kind)
        prefixes, suffixes = rule.prefixes, rule.suffixes

        hook_prefix = store_pattern = False
        component_suffixes: list[str] = []
        for source in sources:
            if source is None:
                continue
            hook_prefix = hook_prefix or source.hook_prefix
            store_pattern = store_pattern or source.store_pattern
            if isinstance(source, FrameworkHints):
                if source.component_suffix:
                    component_suffixes.append(source.component_suffix)
            else:
                component_suffixes.extend(source.component_suffixes)

        if hook_prefix and kind in (IdentifierKind.HOOK, IdentifierKind.COMPOSABLE, IdentifierKind.STORE):
            prefixes = _prefer(prefixes, ("use",))
        if store_pattern and rule.policy is CombinationPolicy.SUFFIXED and "store" not in suffixes:
            suffixes = (*suffixes, "store")
        if component_suffixes and kind in (
            IdentifierKind.COMPONENT, IdentifierKind.PAGE, IdentifierKind.LAYOUT, IdentifierKind.DIRECTIVE,
        ):
            suffixes = _prefer(suffixes, component_suffixes)

        return KindRule(rule.policy, prefixes, suffixes, rule.default_verbs)

    # ─────────────────────────────────────────
    # Templates
    # ─────────────────────────────────────────

    @staticmethod
    def _action_object(out, rule, verbs, objects, adjectives):
        if not verbs or not objects:
            return
        for verb in verbs:
            for obj in objects:
                out.add(verb, obj)
        for suffix in rule.suffixes:
            for verb in verbs:
                for obj in objects:
                    out.add(verb, obj, suffix)
            for adj in adjectives:
                for obj in objects:
                    out.add(adj, obj, suffix)

    @staticmethod
    def _prefixed(out, kind, rule, verbs, objects):
        if not objects:
            return
        for prefix in rule.prefixes:
            for obj in objects:
                out.add(prefix, obj)

        if kind in (IdentifierKind.HOOK, IdentifierKind.COMPOSABLE):
            for verb in verbs:
                for obj in objects:
                    if verb != obj:
                        out.add("use", verb, obj)
            for obj in objects:
                for suffix in rule.suffixes:
                    if not _ends_with(obj, suffix):
                        out.add("use", obj, suffix)
        else:
            for obj in objects:
                for suffix in rule.suffixes:
                    if not _ends_with(obj, suffix):
                        out.add(obj, suffix)

    @staticmethod
    def _suffixed(out, kind, rule, verbs, objects):
        if not objects:
            return
        for suffix in rule.suffixes:
            for obj in objects:
                out.add(obj if _ends_with(obj, suffix) else f"{obj} {suffix}")
        for prefix in rule.prefixes:
            for suffix in rule.suffixes:
                for obj in objects:
                    out.add(prefix, obj if _ends_with(obj, suffix) else f"{obj} {suffix}")
        if kind is IdentifierKind.SERVICE:
            for verb in verbs:
                for obj in objects:
                    out.add(verb, obj, "service")
        if kind in (IdentifierKind.CLASS, IdentifierKind.TYPE):
            for obj in objects:
                out.add(obj)

    @staticmethod
    def _modified(out, rule, phrases, objects, adjectives):
        if not objects:
            return
        for phrase in phrases:
            out.add(phrase)
        for phrase in phrases:
            for suffix in rule.suffixes:
                if not _ends_with(phrase, suffix):
                    out.add(phrase, suffix)
        nouns = [o for o in objects if " " not in o]
        for adj in adjectives:
            for noun in nouns:
                out.add(adj, noun)
        for noun in nouns:
            out.add(noun)
        for noun in nouns:
            for suffix in rule.suffixes:
                if noun != suffix:
                    out.add(noun, suffix)

    @staticmethod
    def _basic(out, verbs, nouns, default_verbs=()):
        if verbs and nouns:
            for verb in verbs:
                for noun in nouns:
                    out.add(verb + noun.capitalize())
                    out.add(verb, noun)
        elif nouns:
            for noun in nouns:
                for verb in default_verbs:
                    out.add(verb, noun)
            for noun in nouns:
                out.add(noun)
        else:
            for verb in verbs:
                out.add(verb)
