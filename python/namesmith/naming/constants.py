"""
Constants for word splitting, inflection, and casing.
"""

import re

PLURAL_EXCEPTIONS = {
    "person": "people",
    "child": "children",
    "tooth": "teeth",
    "foot": "feet",
    "mouse": "mice",
    "goose": "geese",
    "man": "men",
    "woman": "women",
    "index": "indices",
    "matrix": "matrices",
    "criterion": "criteria",
}

SINGULAR_EXCEPTIONS = {v: k for k, v in PLURAL_EXCEPTIONS.items()}

# Mass nouns used in identifiers: "userInfo", never "userInfos"
UNCOUNTABLE_NOUNS = frozenset({
    "info",
    "data",
    "metadata",
    "config",
    "feedback",
    "auth",
    "cache",
    "media",
    "news",
    "progress",
    "storage",
    "equipment",
    "information",
    "software",
    "hardware",
    "firmware",
    "middleware",
    "traffic",
    "content",
    "history",
    "state",
    "status",
    "analysis",
    "series",
    "settings",
})

# base -> (third person present, past)
IRREGULAR_VERBS = {
    "be": ("is", "was"),
    "have": ("has", "had"),
    "do": ("does", "did"),
    "get": ("gets", "got"),
    "set": ("sets", "set"),
    "put": ("puts", "put"),
    "make": ("makes", "made"),
    "find": ("finds", "found"),
    "send": ("sends", "sent"),
    "build": ("builds", "built"),
    "run": ("runs", "ran"),
    "read": ("reads", "read"),
    "write": ("writes", "wrote"),
    "hide": ("hides", "hid"),
    "show": ("shows", "showed"),
    "take": ("takes", "took"),
    "give": ("gives", "gave"),
    "begin": ("begins", "began"),
    "bind": ("binds", "bound"),
    "choose": ("chooses", "chose"),
    "cut": ("cuts", "cut"),
    "reset": ("resets", "reset"),
    "split": ("splits", "split"),
    "sync": ("syncs", "synced"),
}

IRREGULAR_PAST = {past: base for base, (_, past) in IRREGULAR_VERBS.items()}

# Word splitting: any run of characters outside [A-Za-z0-9] is a separator.
SEPARATOR_PATTERN = re.compile(r"[^A-Za-z0-9]+")

# Words inside a separator-free chunk, in priority order:
# 1. Acronym (+digits) followed by a capitalized word: HTTP in HTTPServer
# 2. Optionally capitalized word, digits stay attached: Server, auth2, i18n
# 3. Acronym with inner digits, not followed by lowercase: I18N, MODEL3D, A in A2b
# 4. Digit-led word keeps a trailing lowercase run or acronym: 3d, 3D, 42
WORD_PATTERN = re.compile(
    r"[A-Z]+[0-9]*(?=[A-Z][a-z])"
    r"|[A-Z]?[a-z]+(?:[0-9]+[a-z]*)*"
    r"|[A-Z]+(?:[0-9]+[A-Z]*)*(?![a-z])"
    r"|[0-9]+(?:[a-z]+|[A-Z]+(?![a-z]))?"
)

# Output validation per style. A leading underscore is only legal in front
# of a digit (the digit-leading guard).
STYLE_PATTERN_SOURCES = {
    "camelCase": r"^(?:_[0-9]|[a-z])[a-zA-Z0-9]*$",
    "PascalCase": r"^(?:_[0-9]|[A-Z])[a-zA-Z0-9]*$",
    "snake_case": r"^(?:_[0-9]|[a-z])[a-z0-9]*(?:_[a-z0-9]+)*$",
    "kebab-case": r"^(?:_[0-9]|[a-z])[a-z0-9]*(?:-[a-z0-9]+)*$",
    "CONSTANT_CASE": r"^(?:_[0-9]|[A-Z])[A-Z0-9]*(?:_[A-Z0-9]+)*$",
    "flatcase": r"^(?:_[0-9]|[a-z])[a-z0-9]*$",
}
