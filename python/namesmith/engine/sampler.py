"""
Final selection: dedupe styled names, pick exactly n, pad from fallbacks.
"""

import logging
import random
from typing import Iterable, Optional

from namesmith.errors import Degradation
from namesmith.naming.styles import convert, is_valid
from namesmith.types import CasingStyle, IdentifierKind

from .conventions import ConventionStore

logger = logging.getLogger("namesmith.engine.sampler")


class RankerSampler:
    """
    Selects the final names.

    Args:
        conventions: Source of the fallback lists
        seed: When set, names beyond the first n are sampled with
            random.Random(seed) instead of truncated (relative order kept)
    """

    def __init__(self, conventions: Optional[ConventionStore] = None, seed: Optional[int] = None):
        self.conventions = conventions if conventions is not None else ConventionStore()
        self.seed = seed

    def finalize(
        self,
        styled: Iterable[str],
        n: int = 5,
        fallback_kind: Optional[IdentifierKind] = None,
        style: CasingStyle | str = CasingStyle.CAMEL,
    ) -> list[str]:
        """
        Exactly n distinct, non-empty names valid in style.

        Examples:
            >>> RankerSampler().finalize(["getUser", "getUser", ""], 3, IdentifierKind.FUNCTION, "camelCase")
            ["getUser", "handleAction", "processData"]

        Edge Cases:
            - Names invalid for the style are dropped (logged)
            - Fewer than n after dedupe: padded with the kind's fallback
              list, then the generic list, then numbered generic names
        """
        style = CasingStyle.parse(style)

        unique_names: list[str] = []
        seen = set()
        for name in styled:
            if not name or name in seen:
                continue
            if not is_valid(name, style):
                logger.debug(f"{Degradation.STYLE_EDGE_CASE.value}: dropping {name!r} for {style.value}")
                continue
            seen.add(name)
            unique_names.append(name)

        selected = self._select(unique_names, n)
        if len(selected) < n:
            self.pad(selected, n, fallback_kind, style)
        return selected

    def pad(
        self,
        names: list[str],
        n: int,
        fallback_kind: Optional[IdentifierKind],
        style: CasingStyle,
    ) -> list[str]:
        """Append styled fallback names to names (in place) until it holds n."""
        taken = set(names)

        for phrase in self.conventions.fallbacks_for(fallback_kind):
            if len(names) >= n:
                return names
            name = convert(phrase, style)
            if name and name not in taken:
                names.append(name)
                taken.add(name)

        base = self.conventions.generic_fallbacks[0] if self.conventions.generic_fallbacks else "name"
        counter = 1
        while len(names) < n:
            name = convert(f"{base} {counter}", style)
            if name not in taken:
                names.append(name)
                taken.add(name)
            counter += 1
        return names

    def _select(self, names: list[str], n: int) -> list[str]:
        if len(names) <= n:
            return list(names)
        if self.seed is None:
            return names[:n]
        picked = sorted(random.Random(self.seed).sample(range(len(names)), n))
        return [names[i] for i in picked]
