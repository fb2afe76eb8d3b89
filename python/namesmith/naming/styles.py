"""
Casing conversion.

convert() is pure and total: any input yields a string that is either empty
(nothing alphanumeric survived) or a valid identifier in the requested style.
Converting an already converted name with the same style returns it
unchanged.
"""

import re
from types import MappingProxyType
from typing import Callable

from namesmith.types import CasingStyle

from .constants import STYLE_PATTERN_SOURCES
from .parsers import split_words


def _capitalize(word: str) -> str:
    # str.capitalize() lowercases the tail, which is what we want: HTTP → Http
    return word.capitalize()


def _merge_single_letters(words: list[str]) -> list[str]:
    # Adjacent one-letter words ("a b c") would camel-case to "aBC", which
    # re-splits as ["a", "BC"]; join them so re-conversion is stable.
    merged: list[str] = []
    in_letter_run = False
    for word in words:
        is_letter = len(word) == 1 and word.isalpha()
        if is_letter and in_letter_run:
            merged[-1] += word
        else:
            merged.append(word)
        in_letter_run = is_letter
    return merged


def to_camel(words: list[str]) -> str:
    words = _merge_single_letters(words)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(w) for w in words[1:])


def to_pascal(words: list[str]) -> str:
    words = _merge_single_letters(words)
    return "".join(_capitalize(w) for w in words)


def to_snake(words: list[str]) -> str:
    return "_".join(w.lower() for w in words)


def to_kebab(words: list[str]) -> str:
    return "-".join(w.lower() for w in words)


def to_constant(words: list[str]) -> str:
    return "_".join(w.upper() for w in words)


def to_flat(words: list[str]) -> str:
    return "".join(w.lower() for w in words)


CASING_FUNCTIONS: "MappingProxyType[CasingStyle, Callable[[list[str]], str]]" = MappingProxyType({
    CasingStyle.CAMEL: to_camel,
    CasingStyle.PASCAL: to_pascal,
    CasingStyle.SNAKE: to_snake,
    CasingStyle.KEBAB: to_kebab,
    CasingStyle.CONSTANT: to_constant,
    CasingStyle.FLAT: to_flat,
})

STYLE_PATTERNS: "MappingProxyType[CasingStyle, re.Pattern]" = MappingProxyType({
    style: re.compile(STYLE_PATTERN_SOURCES[style.value]) for style in CasingStyle
})

assert set(CASING_FUNCTIONS) == set(CasingStyle), "every style needs a casing function"


# camelCase and PascalCase carry word boundaries only as capitals, so a digit
# or one-letter word can blur them: ["3", "a"] renders "3A", which reads back
# as the single word "3A". Such names fall back to one lower-cased word.
_JOINED_STYLES = frozenset({CasingStyle.CAMEL, CasingStyle.PASCAL})


def _joined_fallback(words: list[str], style: CasingStyle) -> str:
    joined = to_flat(words)
    return _capitalize(joined) if style is CasingStyle.PASCAL else joined


def guard_leading_digit(name: str) -> str:
    """
    Keep a name valid as an identifier when it would start with a digit.

    Examples:
        >>> guard_leading_digit("3dModel")
        "_3dModel"

        >>> guard_leading_digit("model3d")
        "model3d"
    """
    if name and name[0].isdigit():
        return "_" + name
    return name


def convert(phrase: str, style: CasingStyle | str) -> str:
    """
    Convert a raw phrase or an identifier into one casing convention.

    Args:
        phrase: Words separated by spaces/-/_ or camel/Pascal transitions
        style: Target style (enum member or its value, e.g. "snake_case")

    Returns:
        Styled identifier, or "" when the phrase holds no ASCII alphanumerics

    Examples:
        >>> convert("get user info", CasingStyle.CAMEL)
        "getUserInfo"

        >>> convert("HTTPServer", "snake_case")
        "http_server"

        >>> convert("3d model", CasingStyle.CAMEL)
        "_3dModel"

    Edge Cases:
        - Idempotent: convert(convert(x, S), S) == convert(x, S)
        - camel/Pascal names that would read back differently collapse to
          one word: convert("3 a", CasingStyle.PASCAL) == "_3a"
        - Non-ASCII only: convert("用户", S) == ""
        - Digit-leading results get a "_" prefix in every style
    """
    style = CasingStyle.parse(style)
    words = split_words(phrase)
    if not words:
        return ""
    casing = CASING_FUNCTIONS[style]
    name = guard_leading_digit(casing(words))
    if style in _JOINED_STYLES and guard_leading_digit(casing(split_words(name))) != name:
        name = guard_leading_digit(_joined_fallback(words, style))
    return name


def convert_all(phrase: str) -> dict[CasingStyle, str]:
    """
    Convert a phrase into every supported casing convention.

    Examples:
        >>> convert_all("user profile")[CasingStyle.KEBAB]
        "user-profile"
    """
    return {style: convert(phrase, style) for style in CasingStyle}


def is_valid(name: str, style: CasingStyle | str) -> bool:
    """True when name is a well-formed identifier in the given style."""
    style = CasingStyle.parse(style)
    return bool(name) and STYLE_PATTERNS[style].match(name) is not None
