"""
Chinese/English description → English technical vocabulary.

ASCII text is split on separators and camel/Pascal boundaries. Chinese runs
are segmented against the term tables, and every segment goes through:

1. Exact lookup (EXACT_TERMS)
2. Compound decomposition: first N-1 chars + last char, both MORPHEMES
3. Synonym regex rules (PATTERN_RULES), first match wins
4. Romanization with pypinyin, or pass-through when disabled
"""

import logging
import re
from typing import Optional

from pypinyin import lazy_pinyin

from namesmith.errors import Degradation
from namesmith.naming.parsers import split_lower

from .terms import EXACT_TERMS, MAX_TERM_LENGTH, MORPHEMES, PATTERN_RULES, STOP_CHARS
from .types import MatchStage, NormalizedTerm, unique

logger = logging.getLogger("namesmith.engine.normalizer")

# CJK unified ideographs (+ extension A and compatibility block)
_CJK_RUN = re.compile(r"([\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]+)")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")

# Segment kinds produced by _segment()
_EXACT = "exact"
_DECOMPOSED = "decomposed"
_UNKNOWN = "unknown"
_STOP = "stop"


def _is_cjk_run(chunk: str) -> bool:
    return _CJK_RUN.fullmatch(chunk) is not None


class TermNormalizer:
    """
    Maps a free-text description to a flat list of English words.

    Pure and total: the same input always yields the same terms, and
    non-blank input never yields an empty list.

    Args:
        romanize_unmapped: Romanize Chinese text no table recognizes
            (pinyin, joined into one word). When False the text is passed
            through unchanged and later dropped by casing conversion.
    """

    def __init__(self, romanize_unmapped: bool = True):
        self.romanize_unmapped = romanize_unmapped

    def normalize(self, text: str) -> list[str]:
        """
        Flat English terms for a description.

        Examples:
            >>> TermNormalizer().normalize("获取用户信息")
            ["get", "user", "info"]

            >>> TermNormalizer().normalize("max retry count")
            ["max", "retry", "count"]

            >>> TermNormalizer().normalize("用户表")
            ["user", "table"]
        """
        if not isinstance(text, str) or not text.strip():
            return []

        terms = [term for item in self.normalize_terms(text) for term in item.terms]
        if not terms:
            # Only stop characters or punctuation: keep the raw tokens
            return text.split()
        return terms

    def normalize_terms(self, text: str) -> list[NormalizedTerm]:
        """Per-token view of normalize(), with the stage that matched each token."""
        if not isinstance(text, str) or not text.strip():
            return []

        results: list[NormalizedTerm] = []
        for chunk in _CJK_RUN.split(text):
            if not chunk:
                continue
            if _is_cjk_run(chunk):
                results.extend(self._normalize_cjk(chunk))
            else:
                for word in split_lower(chunk):
                    results.append(NormalizedTerm(word, (word,), MatchStage.PASSTHROUGH))
        return results

    # ─────────────────────────────────────────
    # Chinese runs
    # ─────────────────────────────────────────

    def _normalize_cjk(self, run: str) -> list[NormalizedTerm]:
        results = []
        for kind, source, senses in self._segment(run):
            if kind == _EXACT:
                results.append(NormalizedTerm(source, senses, MatchStage.EXACT))
            elif kind == _DECOMPOSED:
                results.append(NormalizedTerm(source, senses, MatchStage.DECOMPOSED))
            elif kind == _STOP:
                continue
            else:
                results.append(self._normalize_unknown(source))
        return results

    def _segment(self, run: str) -> list[tuple[str, str, tuple[str, ...]]]:
        """
        Minimum-cost segmentation of a Chinese run.

        Cost is (unknown chars, segments, decompositions), compared in that
        order, so known vocabulary always beats unknown characters and one
        long exact term beats two short ones. Stop characters are dropped
        at no cost but still separate unknown runs. Adjacent unknown
        characters are merged into one segment.
        """
        n = len(run)
        # best[i] = (cost, segments) for run[:i]
        best: list[Optional[tuple[tuple[int, int, int], list]]] = [None] * (n + 1)
        best[0] = ((0, 0, 0), [])

        def offer(end, cost, segments):
            if best[end] is None or cost < best[end][0]:
                best[end] = (cost, segments)

        for i in range(n):
            if best[i] is None:
                continue
            (unknown, count, decomposed), segments = best[i]

            for length in range(1, min(MAX_TERM_LENGTH, n - i) + 1):
                word = run[i:i + length]
                if word in EXACT_TERMS:
                    offer(i + length, (unknown, count + 1, decomposed),
                          segments + [(_EXACT, word, (EXACT_TERMS[word],))])

            for length in (2, 3):
                if i + length > n:
                    break
                head, tail = run[i:i + length - 1], run[i + length - 1]
                if head in MORPHEMES and tail in MORPHEMES:
                    senses = unique(MORPHEMES[head] + MORPHEMES[tail])
                    offer(i + length, (unknown, count + 1, decomposed + 1),
                          segments + [(_DECOMPOSED, run[i:i + length], senses)])

            char = run[i]
            if char in STOP_CHARS:
                offer(i + 1, (unknown, count, decomposed), segments + [(_STOP, char, ())])
            else:
                offer(i + 1, (unknown + 1, count + 1, decomposed),
                      segments + [(_UNKNOWN, char, ())])

        merged: list[tuple[str, str, tuple[str, ...]]] = []
        for segment in best[n][1]:
            if segment[0] == _UNKNOWN and merged and merged[-1][0] == _UNKNOWN:
                merged[-1] = (_UNKNOWN, merged[-1][1] + segment[1], ())
            else:
                merged.append(segment)
        return merged

    def _normalize_unknown(self, token: str) -> NormalizedTerm:
        for pattern, word in PATTERN_RULES:
            if pattern.search(token):
                return NormalizedTerm(token, (word,), MatchStage.PATTERN)

        if self.romanize_unmapped:
            romanized = _NON_ALNUM.sub("", "".join(lazy_pinyin(token)).lower())
            if romanized:
                logger.debug(
                    f"{Degradation.NORMALIZATION_MISS.value}: {token!r} romanized as {romanized!r}"
                )
                return NormalizedTerm(token, (romanized,), MatchStage.ROMANIZED)

        logger.debug(f"{Degradation.NORMALIZATION_MISS.value}: {token!r} passed through")
        return NormalizedTerm(token, (token,), MatchStage.PASSTHROUGH)
