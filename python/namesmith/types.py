"""
Closed request vocabulary: identifier kinds, casing styles, and the request record.

Both enums are closed sets. String values coming from collaborators (HTTP
payloads, config files) go through .parse() so that dispatch elsewhere can
match on enum members only.
"""

from dataclasses import dataclass
from enum import Enum

MAX_DESCRIPTION_LENGTH = 500


class IdentifierKind(Enum):
    """Category of the symbol being named."""

    FUNCTION = "function"
    VARIABLE = "variable"
    CLASS = "class"
    BOOLEAN = "boolean"
    CONSTANT = "constant"
    COMPONENT = "component"
    HOOK = "hook"
    COMPOSABLE = "composable"
    STORE = "store"
    UTIL = "util"
    TYPE = "type"
    SERVICE = "service"
    DIRECTIVE = "directive"
    ENUM = "enum"
    PAGE = "page"
    LAYOUT = "layout"

    @classmethod
    def parse(cls, value: "IdentifierKind | str") -> "IdentifierKind":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(f"Unknown identifier kind: {value!r}")


class CasingStyle(Enum):
    """Textual convention applied to multi-word names."""

    CAMEL = "camelCase"
    PASCAL = "PascalCase"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"
    CONSTANT = "CONSTANT_CASE"
    FLAT = "flatcase"

    @classmethod
    def parse(cls, value: "CasingStyle | str") -> "CasingStyle":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if member.value == key:
                    return member
            alias = _STYLE_ALIASES.get(key.lower().replace("-", "_"))
            if alias is not None:
                return alias
        raise ValueError(f"Unknown casing style: {value!r}")


_STYLE_ALIASES = {
    "camelcase": CasingStyle.CAMEL,
    "camel": CasingStyle.CAMEL,
    "pascalcase": CasingStyle.PASCAL,
    "pascal": CasingStyle.PASCAL,
    "snake_case": CasingStyle.SNAKE,
    "snake": CasingStyle.SNAKE,
    "kebab_case": CasingStyle.KEBAB,
    "kebab": CasingStyle.KEBAB,
    "constant_case": CasingStyle.CONSTANT,
    "upper_snake_case": CasingStyle.CONSTANT,
    "screaming_snake": CasingStyle.CONSTANT,
    "flatcase": CasingStyle.FLAT,
    "flat": CasingStyle.FLAT,
}


@dataclass(frozen=True)
class NamingRequest:
    """
    One validated naming request.

    Raises:
        ValueError: description is not a str or exceeds 500 characters,
            or kind/style are not members of the closed sets
    """

    description: str
    kind: IdentifierKind
    style: CasingStyle

    def __post_init__(self):
        if not isinstance(self.description, str):
            raise ValueError("description must be a string")
        if len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValueError(
                f"description exceeds {MAX_DESCRIPTION_LENGTH} characters"
            )
        object.__setattr__(self, "kind", IdentifierKind.parse(self.kind))
        object.__setattr__(self, "style", CasingStyle.parse(self.style))
