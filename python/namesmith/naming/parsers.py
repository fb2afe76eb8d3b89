"""
Phrase and symbol parsing into words.
"""

from .constants import SEPARATOR_PATTERN, WORD_PATTERN


def split_words(text: str) -> list[str]:
    """
    Parse a phrase or symbol name into individual words.

    Handles multiple input formats:
    - Phrases: "get user info" → ["get", "user", "info"]
    - PascalCase: "UserService" → ["User", "Service"]
    - camelCase: "userService" → ["user", "Service"]
    - snake_case / kebab-case: "user_service" → ["user", "service"]
    - SCREAMING_SNAKE: "USER_SERVICE" → ["USER", "SERVICE"]
    - Acronyms: "HTTPServer" → ["HTTP", "Server"]
    - Digits: "OAuth2Client" → ["O", "Auth2", "Client"], "3dModel" → ["3d", "Model"]

    Args:
        text: Input text (any convention, may contain non-ASCII)

    Returns:
        List of ASCII words in original case (empty when nothing survives)

    Edge Cases:
        - Empty string: []
        - Only non-ASCII: "用户" → [] (CJK acts as a separator)
        - Leading underscore: "_3dModel" → ["3d", "Model"]
    """
    if not text:
        return []

    words: list[str] = []
    for chunk in SEPARATOR_PATTERN.split(text):
        if chunk:
            words.extend(WORD_PATTERN.findall(chunk))
    return words


def split_lower(text: str) -> list[str]:
    """split_words() with every word lower-cased."""
    return [w.lower() for w in split_words(text)]


def strip_common_prefixes(symbol_name: str) -> list[str]:
    """
    Strip hook/boolean prefixes from an identifier.

    Used by the project scan to recover the noun behind "useUserStore" or
    "isVisible".

    Examples:
        >>> strip_common_prefixes("useUserStore")
        ["useUserStore", "UserStore"]

        >>> strip_common_prefixes("isVisible")
        ["isVisible", "Visible"]

    Edge Cases:
        - No prefix: "user" → ["user"]
        - Prefix only: "use" → ["use"] (whole word is the prefix)
    """
    results = [symbol_name]
    for prefix in ("use", "is", "has", "can", "should"):
        rest = symbol_name[len(prefix):]
        if symbol_name.startswith(prefix) and rest[:1].isupper():
            results.append(rest)
            break
    return results


def strip_common_suffixes(symbol_name: str) -> list[str]:
    """
    Strip common type suffixes from symbol names.

    Examples:
        >>> strip_common_suffixes("UserStore")
        ["UserStore", "User"]

        >>> strip_common_suffixes("ProfileCardComponent")
        ["ProfileCardComponent", "ProfileCard"]

    Edge Cases:
        - No suffix: "User" → ["User"]
        - Whole word is suffix: "Store" → ["Store"]
        - Multiple: "UserServiceManager" → ["UserServiceManager", "UserService", "User"]
    """
    results = [symbol_name]

    common_suffixes = [
        "Component", "Container", "View", "Page", "Layout",
        "Store", "Service", "Manager", "Handler", "Util", "Helper",
    ]

    for suffix in common_suffixes:
        if symbol_name.endswith(suffix) and len(symbol_name) > len(suffix):
            without_suffix = symbol_name[:-len(suffix)]
            results.append(without_suffix)

            # Recursively check for more suffixes
            for variant in strip_common_suffixes(without_suffix):
                if variant not in results:
                    results.append(variant)
            break  # Only strip one suffix per call (recursion handles multiple)

    return results
