# tests/test_engine.py
"""
Engine façade: text operations, language binding and rules resolution.
"""

import pytest

from app.core.domain.exceptions import UnknownRulesError
from app.core.domain.models import Feature
from morphology.engine import RULES_REGISTRY, MorphologyEngine, resolve_rules
from morphology.english import EnglishRules
from morphology.germanic import GermanRules
from morphology.romance import FrenchRules, SpanishRules


class TestReplaceLastWord:
    def test_transforms_the_last_word(self, engine):
        assert engine.replace_last_word("I want to play", engine.to_ing) == "I want to playing"
        assert engine.replace_last_word("Go", engine.to_past) == "Went"
        assert engine.replace_last_word("I like the cat.", engine.pluralize) == "I like the cats."
        assert engine.replace_last_word("I like pizza!", lambda _: "pizzas") == "I like pizzas!"

    def test_trailing_punctuation_and_quotes_are_kept(self, engine):
        assert engine.replace_last_word("She said “ran.”", engine.base_verb) == "She said “run.”"
        assert engine.replace_last_word("Look at the dog!?", engine.pluralize) == "Look at the dogs!?"

    def test_surrounding_whitespace_is_untouched(self, engine):
        text = "I  like   the cat.  "
        assert engine.replace_last_word(text, engine.pluralize) == "I  like   the cats.  "

    def test_text_without_words_is_unchanged(self, engine):
        assert engine.replace_last_word("", engine.pluralize) == ""
        assert engine.replace_last_word("!!!", engine.pluralize) == "!!!"
        assert engine.replace_last_word("   ", engine.pluralize) == "   "

    def test_do_not_change_word_survives(self, engine):
        engine.update_overrides(lambda o: o.do_not_change.add("pants"))
        assert engine.replace_last_word("I like pants,", engine.singularize) == "I like pants,"


def test_last_word(engine):
    assert engine.last_word("Hello world!") == "world"
    assert engine.last_word("don't") == "don't"
    assert engine.last_word("...") is None
    assert engine.last_word("") is None


def test_append_word(engine):
    assert engine.append_word("cats", "  I like ") == "I like cats"
    assert engine.append_word("hi", "") == "hi"
    assert engine.append_word("hi", "   ") == "hi"


class TestLanguageBinding:
    def test_region_subtags_are_dropped(self, store):
        engine = MorphologyEngine("en-GB", overrides_store=store)
        assert engine.language_code == "en"
        assert isinstance(engine.rules, EnglishRules)

        engine.set_language("fr_CA")
        assert engine.language_code == "fr"
        assert isinstance(engine.rules, FrenchRules)

    @pytest.mark.parametrize("code", ["../../x", "/tmp/x", "en1", "-US"])
    def test_codes_without_a_letter_subtag_bind_the_default(self, store, code):
        engine = MorphologyEngine(code, overrides_store=store)
        assert engine.language_code == "en"

    def test_non_string_codes_are_rejected(self, engine):
        with pytest.raises(TypeError):
            engine.set_language(None)
        with pytest.raises(TypeError):
            engine.set_language(42)
        # A rejected code leaves the binding as it was.
        assert engine.language_code == "en"

    def test_default_store_is_private(self):
        a = MorphologyEngine()
        b = MorphologyEngine()
        a.update_overrides(lambda o: o.past.update({"yeet": "yote"}))
        assert b.to_past("yeet") == "yeeted"


class TestRulesResolution:
    @pytest.mark.parametrize(
        "code, rules_cls",
        [("de", GermanRules), ("es", SpanishRules), ("fr", FrenchRules)],
    )
    def test_placeholder_languages_delegate_to_english(self, store, code, rules_cls):
        engine = MorphologyEngine(code, overrides_store=store)
        assert isinstance(engine.rules, rules_cls)
        assert engine.rules.language_code == code
        assert engine.supports(Feature.TOKENIZATION)
        assert not engine.supports(Feature.VERBS)
        assert not engine.supports(Feature.NOUNS)
        assert engine.to_past("go") == "went"
        assert engine.pluralize("child") == "children"

    def test_each_placeholder_owns_its_fallback(self):
        assert resolve_rules("de")._fallback is not resolve_rules("es")._fallback

    def test_english_supports_everything(self, engine):
        assert all(engine.supports(feature) for feature in Feature)

    def test_unregistered_language_uses_english(self, store):
        engine = MorphologyEngine("it", overrides_store=store)
        assert isinstance(engine.rules, EnglishRules)
        assert engine.language_code == "it"
        assert engine.supports(Feature.VERBS)

    def test_broken_registry_entry_raises(self, monkeypatch, store):
        monkeypatch.setitem(RULES_REGISTRY, "xx", ("morphology.missing_module", "Rules"))
        monkeypatch.setitem(RULES_REGISTRY, "yy", ("morphology.english", "MissingRules"))

        with pytest.raises(UnknownRulesError):
            resolve_rules("xx")
        with pytest.raises(UnknownRulesError) as exc_info:
            MorphologyEngine("yy", overrides_store=store)
        assert exc_info.value.language_code == "yy"


def test_match_case_is_idempotent():
    once = MorphologyEngine.match_case("Go", "went")
    assert once == "Went"
    assert MorphologyEngine.match_case("Go", once) == once
    assert MorphologyEngine.match_case("GO", "went") == "WENT"
    assert MorphologyEngine.match_case("go", "Went") == "Went"


class TestSharedOverrides:
    def test_engines_on_one_store_see_each_others_writes(self, store):
        us = MorphologyEngine("en-US", overrides_store=store)
        gb = MorphologyEngine("en-GB", overrides_store=store)

        us.update_overrides(lambda o: o.plural.update({"octopus": "octopodes"}))
        assert gb.pluralize("octopus") == "octopodes"
        assert gb.get_overrides().plural == {"octopus": "octopodes"}

    def test_overrides_are_scoped_by_language(self, store):
        en = MorphologyEngine("en", overrides_store=store)
        es = MorphologyEngine("es", overrides_store=store)

        en.update_overrides(lambda o: o.do_not_change.add("pants"))
        assert en.singularize("pants") == "pants"
        assert es.singularize("pants") == "pant"

    def test_plural_override_does_not_leak_into_other_languages(self, store):
        en = MorphologyEngine("en", overrides_store=store)
        de = MorphologyEngine("de", overrides_store=store)

        en.update_overrides(lambda o: o.plural.update({"child": "childs"}))
        assert en.pluralize("child") == "childs"
        assert en.pluralize("Child") == "Childs"
        assert en.pluralize("CHILD") == "CHILDS"
        assert de.pluralize("child") == "children"

    def test_explicit_language_argument(self, engine):
        engine.update_overrides(lambda o: o.past.update({"go": "goed"}), language="es-MX")
        assert engine.to_past("go") == "went"
        assert engine.get_overrides("es").past == {"go": "goed"}

    def test_set_overrides_replaces_the_bundle(self, engine):
        engine.update_overrides(lambda o: o.past.update({"yeet": "yote"}))
        replaced = engine.set_overrides(engine.get_overrides().model_copy(update={"past": {}}))
        assert replaced.past == {}
        assert engine.to_past("yeet") == "yeeted"
