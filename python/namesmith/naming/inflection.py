"""
Pluralization, singularization, and verb forms.
"""

from .constants import (
    IRREGULAR_PAST,
    IRREGULAR_VERBS,
    PLURAL_EXCEPTIONS,
    SINGULAR_EXCEPTIONS,
    UNCOUNTABLE_NOUNS,
)

_VOWELS = "aeiou"


def _match_case(source: str, result: str) -> str:
    if source[:1].isupper():
        return result[0].upper() + result[1:]
    return result


def pluralize(word: str) -> str:
    """
    Convert singular word to plural form (English rules).

    Examples:
        >>> pluralize("user")
        "users"

        >>> pluralize("child")
        "children"

        >>> pluralize("category")
        "categories"

    Edge Cases:
        - Already plural: "users" → "users" (no change)
        - Uncountable: "info" → "info"
        - Ends in 'sh/ch/x': "box" → "boxes"
    """
    if not word:
        return word

    lower_word = word.lower()

    if lower_word in UNCOUNTABLE_NOUNS:
        return word

    if lower_word in PLURAL_EXCEPTIONS:
        return _match_case(word, PLURAL_EXCEPTIONS[lower_word])

    if lower_word in SINGULAR_EXCEPTIONS:
        return word

    # Likely already plural (ends in 's' but not 'ss', 'us', 'is')
    if lower_word.endswith('s') and not lower_word.endswith(('ss', 'us', 'is')):
        return word

    if lower_word.endswith(('ss', 'sh', 'ch', 'x', 'z', 'us', 'is')):
        return word + 'es'

    # Consonant + 'y' → 'ies'
    if len(word) >= 2 and lower_word.endswith('y') and lower_word[-2] not in _VOWELS:
        return word[:-1] + 'ies'

    return word + 's'


def singularize(word: str) -> str:
    """
    Convert plural word to singular form (English rules).

    Examples:
        >>> singularize("users")
        "user"

        >>> singularize("children")
        "child"

        >>> singularize("categories")
        "category"

    Edge Cases:
        - Already singular: "user" → "user"
        - False plural: "status" → "status" (not "statu")
    """
    if not word:
        return word

    lower_word = word.lower()

    if lower_word in UNCOUNTABLE_NOUNS:
        return word

    if lower_word in SINGULAR_EXCEPTIONS:
        return _match_case(word, SINGULAR_EXCEPTIONS[lower_word])

    if lower_word.endswith('ies') and len(word) > 3:
        return word[:-3] + 'y'

    # Words that end in 's' but aren't plural: status, basis, class
    if lower_word.endswith(('us', 'is', 'ss')):
        return word

    if lower_word.endswith('es') and len(word) > 2:
        stem = word[:-2]
        if stem.lower().endswith(('s', 'sh', 'ch', 'x', 'z')):
            return stem
        return word[:-1]

    if lower_word.endswith('s') and len(word) > 1:
        return word[:-1]

    return word


def noun_forms(noun: str) -> list[str]:
    """
    Base noun plus its singular/plural variants, deduplicated, base first.

    Examples:
        >>> noun_forms("user")
        ["user", "users"]

        >>> noun_forms("files")
        ["files", "file"]

        >>> noun_forms("info")
        ["info"]
    """
    forms = [noun]
    for variant in (singularize(noun), pluralize(noun)):
        if variant and variant not in forms:
            forms.append(variant)
    return forms


def verb_forms(verb: str) -> list[str]:
    """
    Base, third-person present, and past forms of a verb, deduplicated.

    The input may itself be inflected ("fetched", "gets"); the base form is
    recovered first so results are stable regardless of input tense.

    Examples:
        >>> verb_forms("fetch")
        ["fetch", "fetches", "fetched"]

        >>> verb_forms("get")
        ["get", "gets", "got"]

        >>> verb_forms("update")
        ["update", "updates", "updated"]

    Edge Cases:
        - Consonant + 'y': "apply" → ["apply", "applies", "applied"]
        - Unchanged past: "reset" → ["reset", "resets"]
    """
    if not verb:
        return []

    base = verb_base(verb.lower())

    if base in IRREGULAR_VERBS:
        present, past = IRREGULAR_VERBS[base]
    else:
        if base.endswith(('s', 'sh', 'ch', 'x', 'z', 'o')):
            present = base + 'es'
        elif len(base) >= 2 and base.endswith('y') and base[-2] not in _VOWELS:
            present = base[:-1] + 'ies'
        else:
            present = base + 's'

        if base.endswith('e'):
            past = base + 'd'
        elif len(base) >= 2 and base.endswith('y') and base[-2] not in _VOWELS:
            past = base[:-1] + 'ied'
        else:
            past = base + 'ed'

    forms = []
    for form in (base, present, past):
        if form not in forms:
            forms.append(form)
    return forms


def verb_base(verb: str) -> str:
    """
    Best-effort base form of an inflected verb.

    Examples:
        >>> verb_base("fetched")
        "fetch"

        >>> verb_base("got")
        "get"

        >>> verb_base("applies")
        "apply"
    """
    lower = verb.lower()

    if lower in IRREGULAR_VERBS:
        return lower
    if lower in IRREGULAR_PAST:
        return IRREGULAR_PAST[lower]
    for base, (present, _) in IRREGULAR_VERBS.items():
        if lower == present:
            return base

    if lower.endswith('ied') and len(lower) > 4:
        return lower[:-3] + 'y'
    if lower.endswith('ies') and len(lower) > 4:
        return lower[:-3] + 'y'
    if lower.endswith('ed') and len(lower) > 4:
        stem = lower[:-2]
        # "updated" → "update", "saved" → "save"; "fetched" → "fetch"
        if stem.endswith(('at', 'av', 'et', 'iz', 'ov', 'ur', 'ir', 'id', 'ar', 'in', 'os', 'rs', 'ng', 'rc')):
            return stem + 'e'
        return stem
    if lower.endswith(('ches', 'shes', 'sses', 'xes')) and len(lower) > 4:
        return lower[:-2]
    if lower.endswith('s') and not lower.endswith(('ss', 'us', 'is')) and len(lower) > 3:
        return lower[:-1]
    return lower
