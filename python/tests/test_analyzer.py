"""
Tests for POS tagging and semantic analysis.
"""

from types import SimpleNamespace

import pytest

from namesmith.engine import (
    FrameworkHints,
    LexiconTagger,
    LinguisticAnalyzer,
    SemanticAnalysis,
    SpacyTagger,
    Tagger,
    detect_framework_hints,
)
from namesmith.engine.analyzer import extract_phrases


class TestLexiconTagger:
    """Test the default offline tagger."""

    def test_function_words(self):
        assert LexiconTagger().tag("the user is active") == [
            ("the", "DET"),
            ("user", "NOUN"),
            ("is", "AUX"),
            ("active", "ADJ"),
        ]

    def test_homograph_is_verb_only_first(self):
        """search users → VERB, user search → NOUN."""
        tagger = LexiconTagger()

        assert tagger.tag("search users") == [("search", "VERB"), ("users", "NOUN")]
        assert tagger.tag("user search") == [("user", "NOUN"), ("search", "NOUN")]

    def test_inflected_verb_first(self):
        assert LexiconTagger().tag("fetched users")[0] == ("fetched", "VERB")

    def test_suffix_heuristics(self):
        tagger = LexiconTagger()

        assert tagger.tag("sortable list")[0] == ("sortable", "ADJ")
        assert tagger.tag("tokenize text")[0] == ("tokenize", "VERB")

    def test_unknown_word_is_noun(self):
        assert LexiconTagger().tag("zhangsan") == [("zhangsan", "NOUN")]

    def test_satisfies_protocol(self):
        assert isinstance(LexiconTagger(), Tagger)


class TestSpacyTagger:
    """SpacyTagger maps spaCy tokens without loading a model."""

    def test_maps_tokens(self):
        def fake_nlp(text):
            return [
                SimpleNamespace(text="Render", pos_="VERB", is_space=False),
                SimpleNamespace(text=" ", pos_="SPACE", is_space=True),
                SimpleNamespace(text="Chart", pos_="PROPN", is_space=False),
            ]

        tagger = SpacyTagger(nlp=fake_nlp)
        assert tagger.tag("Render Chart") == [("render", "VERB"), ("chart", "NOUN")]


class TestAnalyze:
    """Test LinguisticAnalyzer.analyze()."""

    def test_verb_object(self, analyzer):
        analysis = analyzer.analyze(["get", "user", "info"])

        assert analysis.roles.action == ("get",)
        assert analysis.roles.object == ("user", "info")
        assert analysis.verbs == ("get", "gets", "got")
        assert analysis.nouns == ("user", "users", "info")
        assert analysis.phrases == ("user info",)

    def test_adjective_noun_phrase(self, analyzer):
        analysis = analyzer.analyze("max retry count")

        assert analysis.verbs == ()
        assert analysis.adjectives == ("max",)
        assert analysis.roles.modifier == ("max",)
        assert analysis.phrases == ("max retry count",)

    def test_collections_are_deduplicated(self, analyzer):
        analysis = analyzer.analyze("user user users")

        assert analysis.roles.object == ("user", "users")
        assert analysis.nouns == ("user", "users")

    @pytest.mark.parametrize("text", ["", "   ", [], None])
    def test_empty_input(self, analyzer, text):
        analysis = analyzer.analyze(text)

        assert analysis.is_empty()
        assert analysis.phrases == ()
        assert analysis.roles.action == ()

    def test_tagger_failure_degrades_to_empty(self):
        class BrokenTagger:
            def tag(self, text):
                raise RuntimeError("model missing")

        analysis = LinguisticAnalyzer(BrokenTagger()).analyze("get user")
        assert analysis == SemanticAnalysis()

    def test_injected_tagger(self):
        class FixedTagger:
            def tag(self, text):
                return [("render", "VERB"), ("chart", "NOUN"), ("!", "PUNCT")]

        analysis = LinguisticAnalyzer(FixedTagger()).analyze("whatever")

        assert analysis.roles.action == ("render",)
        assert analysis.roles.object == ("chart",)
        assert "rendered" in analysis.verbs

    def test_hints_from_raw_description(self, analyzer):
        """useAuth only survives in the raw description."""
        analysis = analyzer.analyze(["auth"], description="like useAuth")
        assert analysis.hints.hook_prefix is True


class TestExtractPhrases:
    """Test ADJ* NOUN+ chunking."""

    def test_single_noun_is_not_a_phrase(self):
        assert extract_phrases([("get", "VERB"), ("user", "NOUN")]) == ()

    def test_adjective_starts_new_chunk_after_noun(self):
        tagged = [("active", "ADJ"), ("user", "NOUN"), ("new", "ADJ"), ("order", "NOUN")]
        assert extract_phrases(tagged) == ("active user", "new order")

    def test_function_word_breaks_chunk(self):
        tagged = [("user", "NOUN"), ("list", "NOUN"), ("of", "ADP"), ("order", "NOUN"), ("item", "NOUN")]
        assert extract_phrases(tagged) == ("user list", "order item")


class TestFrameworkHints:
    """Test keyword detection."""

    def test_hook(self):
        assert detect_framework_hints("auth hook").hook_prefix is True
        assert detect_framework_hints("like useAuth").hook_prefix is True

    def test_component(self):
        assert detect_framework_hints("vue user card").component_suffix == "component"

    def test_directive_wins(self):
        hints = detect_framework_hints("angular tooltip component directive")
        assert hints.component_suffix == "directive"

    def test_store(self):
        assert detect_framework_hints("pinia cart").store_pattern is True

    def test_no_keywords(self):
        hints = detect_framework_hints("get user info")

        assert hints == FrameworkHints()
        assert not hints

    def test_words_inside_other_words_do_not_count(self):
        """'user' contains 'use' but is not a hook hint."""
        assert detect_framework_hints("user restore").hook_prefix is False
        assert detect_framework_hints("user restore").store_pattern is False
