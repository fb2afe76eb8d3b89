"""
Word splitting, inflection, and casing conversion for identifiers.

Converts raw phrases and existing symbol names between naming conventions
(camelCase, PascalCase, snake_case, kebab-case, CONSTANT_CASE, flatcase).
"""

from .styles import CASING_FUNCTIONS, STYLE_PATTERNS, convert, convert_all, guard_leading_digit, is_valid
from .parsers import split_lower, split_words, strip_common_prefixes, strip_common_suffixes
from .inflection import noun_forms, pluralize, singularize, verb_base, verb_forms
from .constants import (
    IRREGULAR_VERBS,
    PLURAL_EXCEPTIONS,
    SINGULAR_EXCEPTIONS,
    UNCOUNTABLE_NOUNS,
)

__all__ = [
    "convert",
    "convert_all",
    "guard_leading_digit",
    "is_valid",
    "split_words",
    "split_lower",
    "strip_common_prefixes",
    "strip_common_suffixes",
    "pluralize",
    "singularize",
    "noun_forms",
    "verb_forms",
    "verb_base",
    "CASING_FUNCTIONS",
    "STYLE_PATTERNS",
    "IRREGULAR_VERBS",
    "PLURAL_EXCEPTIONS",
    "SINGULAR_EXCEPTIONS",
    "UNCOUNTABLE_NOUNS",
]
