"""
Static naming conventions: per-kind templates, casing rules, verb synonyms
and fallback names.

Every table here is built once at import and exposed read-only
(MappingProxyType / tuples). ConventionStore is a thin lookup facade over
them so alternative tables can be injected in tests.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Optional

from namesmith.naming.styles import CASING_FUNCTIONS
from namesmith.types import CasingStyle, IdentifierKind


class CombinationPolicy(Enum):
    """How a kind combines verbs, objects, prefixes and suffixes."""

    ACTION_OBJECT = "action_object"  # verb + object (+ suffix)
    PREFIXED = "prefixed"  # prefix + object
    SUFFIXED = "suffixed"  # object + suffix (+ prefix)
    MODIFIED = "modified"  # [adjective] object (+ suffix)


@dataclass(frozen=True)
class KindRule:
    """Template rule for one identifier kind."""

    policy: CombinationPolicy
    prefixes: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ()
    # Verbs put in front of bare nouns when nothing else combines
    default_verbs: tuple[str, ...] = ()

    @property
    def requires_verbs(self) -> bool:
        return self.policy is CombinationPolicy.ACTION_OBJECT


KIND_RULES: "MappingProxyType[IdentifierKind, KindRule]" = MappingProxyType({
    IdentifierKind.FUNCTION: KindRule(CombinationPolicy.ACTION_OBJECT, default_verbs=("handle", "process", "do")),
    IdentifierKind.UTIL: KindRule(CombinationPolicy.ACTION_OBJECT, suffixes=("util", "helper")),
    IdentifierKind.BOOLEAN: KindRule(CombinationPolicy.PREFIXED, prefixes=("is", "has", "can", "should")),
    IdentifierKind.HOOK: KindRule(CombinationPolicy.PREFIXED, prefixes=("use",), suffixes=("data", "state")),
    IdentifierKind.COMPOSABLE: KindRule(CombinationPolicy.PREFIXED, prefixes=("use",), suffixes=("state",)),
    IdentifierKind.DIRECTIVE: KindRule(CombinationPolicy.PREFIXED, prefixes=("v",), suffixes=("directive",)),
    IdentifierKind.CLASS: KindRule(CombinationPolicy.SUFFIXED, suffixes=("manager", "service", "config")),
    IdentifierKind.STORE: KindRule(CombinationPolicy.SUFFIXED, prefixes=("use",), suffixes=("store",)),
    IdentifierKind.SERVICE: KindRule(CombinationPolicy.SUFFIXED, suffixes=("service", "api", "client")),
    IdentifierKind.TYPE: KindRule(CombinationPolicy.SUFFIXED, suffixes=("type", "props", "schema")),
    IdentifierKind.ENUM: KindRule(CombinationPolicy.SUFFIXED, suffixes=("enum", "type", "kind")),
    IdentifierKind.VARIABLE: KindRule(CombinationPolicy.MODIFIED, suffixes=("list", "count")),
    IdentifierKind.CONSTANT: KindRule(CombinationPolicy.MODIFIED, suffixes=("limit", "value", "default")),
    IdentifierKind.COMPONENT: KindRule(CombinationPolicy.MODIFIED, suffixes=("view", "container", "component")),
    IdentifierKind.PAGE: KindRule(CombinationPolicy.MODIFIED, suffixes=("page", "view", "screen")),
    IdentifierKind.LAYOUT: KindRule(CombinationPolicy.MODIFIED, suffixes=("layout", "wrapper", "container")),
})

assert set(KIND_RULES) == set(IdentifierKind), "every kind needs a rule"

# Style → casing function, shared with the style converter
STYLE_RULES: "MappingProxyType[CasingStyle, Callable[[list[str]], str]]" = CASING_FUNCTIONS

# Interchangeable front-end action verbs, most common first
VERB_SYNONYMS: "MappingProxyType[str, tuple[str, ...]]" = MappingProxyType({
    "get": ("fetch", "load", "retrieve"),
    "fetch": ("get", "load"),
    "load": ("fetch", "get"),
    "query": ("search", "find"),
    "search": ("query", "find"),
    "find": ("search", "query"),
    "save": ("submit", "store", "persist"),
    "submit": ("save", "persist"),
    "create": ("add", "new"),
    "add": ("create", "insert"),
    "update": ("set", "mutate"),
    "delete": ("remove",),
    "remove": ("delete",),
    "reset": ("clear",),
    "clear": ("reset",),
    "watch": ("observe",),
    "handle": ("process",),
    "calculate": ("compute",),
    "validate": ("check", "verify"),
    "check": ("validate", "verify"),
    "show": ("display",),
    "toggle": ("switch",),
})

# Raw phrases, styled at padding time. Generic names are the last resort
# for every kind and the whole answer when the pipeline fails.
GENERIC_FALLBACKS = (
    "default name",
    "fallback name",
    "backup name",
    "alternative name",
    "reserve name",
)

KIND_FALLBACKS: "MappingProxyType[IdentifierKind, tuple[str, ...]]" = MappingProxyType({
    IdentifierKind.FUNCTION: ("handle action", "process data", "execute task"),
    IdentifierKind.UTIL: ("format value", "parse input", "common util"),
    IdentifierKind.BOOLEAN: ("is enabled", "is valid", "has value", "can proceed", "should update"),
    IdentifierKind.HOOK: ("use data", "use state", "use loader"),
    IdentifierKind.COMPOSABLE: ("use state", "use data", "use handler"),
    IdentifierKind.DIRECTIVE: ("v custom", "custom directive"),
    IdentifierKind.CLASS: ("data manager", "base service", "app config"),
    IdentifierKind.STORE: ("app store", "use app store", "main store"),
    IdentifierKind.SERVICE: ("api service", "data service", "http client"),
    IdentifierKind.TYPE: ("data type", "item props", "base schema"),
    IdentifierKind.ENUM: ("status enum", "item type", "mode kind"),
    IdentifierKind.VARIABLE: ("value", "result", "data", "item list", "item count"),
    IdentifierKind.CONSTANT: ("default value", "max limit", "default config"),
    IdentifierKind.COMPONENT: ("base view", "main container", "app component"),
    IdentifierKind.PAGE: ("home page", "main view", "index screen"),
    IdentifierKind.LAYOUT: ("main layout", "page wrapper", "app container"),
})


class ConventionStore:
    """
    Read-only access to the convention tables.

    All lookups are total: every IdentifierKind has a rule and a fallback
    list, every CasingStyle has a casing function, and verbs without
    synonyms map to an empty tuple.
    """

    def __init__(
        self,
        kind_rules=KIND_RULES,
        verb_synonyms=VERB_SYNONYMS,
        kind_fallbacks=KIND_FALLBACKS,
        generic_fallbacks: tuple[str, ...] = GENERIC_FALLBACKS,
    ):
        self._kind_rules = MappingProxyType(dict(kind_rules))
        self._verb_synonyms = MappingProxyType(dict(verb_synonyms))
        self._kind_fallbacks = MappingProxyType(dict(kind_fallbacks))
        self.generic_fallbacks = tuple(generic_fallbacks)

    def rule_for(self, kind: IdentifierKind) -> KindRule:
        return self._kind_rules[kind]

    def casing_for(self, style: CasingStyle) -> Callable[[list[str]], str]:
        return STYLE_RULES[style]

    def synonyms_for(self, verb: str) -> tuple[str, ...]:
        return self._verb_synonyms.get(verb, ())

    def fallbacks_for(self, kind: Optional[IdentifierKind]) -> tuple[str, ...]:
        """Kind fallbacks followed by the generic list, deduplicated."""
        kind_list = self._kind_fallbacks.get(kind, ()) if kind is not None else ()
        return tuple(dict.fromkeys(kind_list + self.generic_fallbacks))
