"""
Part-of-speech taggers.

The analyzer only needs (token, universal POS tag) pairs, so any tagger that
satisfies the Tagger protocol can be injected. Two are provided:

- LexiconTagger: default, dependency-free, deterministic
- SpacyTagger: wraps a spaCy pipeline (optional "spacy" extra)
"""

import logging
from typing import Protocol, runtime_checkable

from namesmith.naming.inflection import verb_base
from namesmith.naming.parsers import split_lower

from . import lexicon

logger = logging.getLogger("namesmith.engine.tagger")

# Universal POS tags the analyzer acts on; everything else is ignored
NOUN = "NOUN"
VERB = "VERB"
ADJ = "ADJ"

_FUNCTION_WORD_TAGS = (
    (lexicon.DETERMINERS, "DET"),
    (lexicon.PREPOSITIONS, "ADP"),
    (lexicon.CONJUNCTIONS, "CCONJ"),
    (lexicon.PRONOUNS, "PRON"),
    (lexicon.AUXILIARIES, "AUX"),
    (lexicon.META_WORDS, "X"),
)


@runtime_checkable
class Tagger(Protocol):
    """Anything that can tag text with universal POS tags."""

    def tag(self, text: str) -> list[tuple[str, str]]:
        ...


class LexiconTagger:
    """
    Closed-vocabulary tagger for short technical descriptions.

    Rules, first match wins:
    1. Function words (determiners, prepositions, auxiliaries, ...) and
       meta words ("function", "variable") get a non-content tag
    2. Digits are NUM
    3. Verb/noun homographs ("search", "count", "retry") are VERB only
       as the first content word, NOUN anywhere else
    4. Lexicon verbs and adjectives; a word in both is VERB when first
    5. Inflected lexicon verbs ("fetched", "updates") are VERB when first
    6. Suffix heuristics: -able/-ive/-ful/-ous → ADJ, -ize/-ify → VERB
    7. Everything else is NOUN
    """

    def tag(self, text: str) -> list[tuple[str, str]]:
        tagged: list[tuple[str, str]] = []
        first_content = True

        for token in split_lower(text):
            pos = self._function_word_tag(token)
            if pos is None:
                pos = self._content_tag(token, first_content)
                first_content = False
            tagged.append((token, pos))

        return tagged

    @staticmethod
    def _function_word_tag(token: str) -> str | None:
        if token.isdigit():
            return "NUM"
        for words, pos in _FUNCTION_WORD_TAGS:
            if token in words:
                return pos
        return None

    @staticmethod
    def _content_tag(token: str, first: bool) -> str:
        if token in lexicon.VERB_NOUN_AMBIGUOUS:
            return VERB if first else NOUN

        is_verb = token in lexicon.VERBS
        is_adj = token in lexicon.ADJECTIVES
        if is_verb and is_adj:
            return VERB if first else ADJ
        if is_verb:
            return VERB
        if is_adj:
            return ADJ

        if first and verb_base(token) in lexicon.VERBS:
            return VERB

        if len(token) > 4:
            if token.endswith(lexicon.ADJECTIVE_SUFFIXES):
                return ADJ
            if token.endswith(lexicon.VERB_SUFFIXES):
                return VERB

        return NOUN


class SpacyTagger:
    """
    Adapter over a spaCy pipeline.

    Args:
        nlp: A loaded spaCy Language object (or anything callable returning
            tokens with .text, .pos_ and .is_space)
        model: Model name loaded with spacy.load() when nlp is not given
    """

    # spaCy tags proper nouns separately; names treat them as nouns
    _POS_MAP = {"PROPN": NOUN}

    def __init__(self, nlp=None, model: str = "en_core_web_sm"):
        if nlp is None:
            import spacy

            logger.info(f"Loading spaCy model {model}")
            nlp = spacy.load(model)
        self._nlp = nlp

    def tag(self, text: str) -> list[tuple[str, str]]:
        tagged = []
        for token in self._nlp(text):
            if token.is_space:
                continue
            tagged.append((token.text.lower(), self._POS_MAP.get(token.pos_, token.pos_)))
        return tagged
