"""
ENGINE
======

Morphology engine façade.

An engine is bound to one primary language at a time. It resolves the
rules variant for that language through `RULES_REGISTRY`, reads the
language's overrides bundle from an `OverridesStore` for every call, and
adds the text-level operations (replace the last word, append a word,
negate or question a sentence) on top of the tokenizer.

Engines are plain values owned by the caller:

    store = OverridesStore(FileSystemOverridesRepository("data/overrides"))
    engine = MorphologyEngine("en-US", overrides_store=store)

    engine.to_past("go")                                    # "went"
    engine.replace_last_word("I like the cat.", engine.pluralize)
    # "I like the cats."

Several engines can share one store; overrides written through any of them
are visible to all engines bound to the same primary language.

Extendibility
-------------
A new language only needs a rules class and a registry entry; languages
without an entry use the English rules.
"""

from __future__ import annotations

import importlib
from typing import Callable, Dict, List, Optional, Tuple

from app.adapters.persistence.memory_repo import InMemoryOverridesRepository
from app.core.domain.exceptions import UnknownRulesError
from app.core.domain.models import (
    Aspect,
    DeterminerPreference,
    Feature,
    MorphologyOverrides,
    Number,
    Person,
    Tense,
    Voice,
    primary_language,
)
from app.services.overrides_store import Mutator, OverridesStore
from morphology import casing
from morphology.base import MorphologyRules
from morphology.tokenizer import replace_span, split_trailing_punctuation, tokenize_words, words_from
from utils.logging_setup import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Registry: primary language -> (module path, rules class name)
# ---------------------------------------------------------------------------

RULES_REGISTRY: Dict[str, Tuple[str, str]] = {
    # lang   module path              class name
    "en": ("morphology.english", "EnglishRules"),
    "de": ("morphology.germanic", "GermanRules"),
    "es": ("morphology.romance", "SpanishRules"),
    "fr": ("morphology.romance", "FrenchRules"),
}

DEFAULT_RULES: Tuple[str, str] = RULES_REGISTRY["en"]


def resolve_rules(language: str) -> MorphologyRules:
    """
    Instantiate the rules variant for a primary language subtag.

    Unregistered languages get the English rules. A registry entry that
    points at a missing module or class raises `UnknownRulesError`.
    """
    module_path, class_name = RULES_REGISTRY.get(language, DEFAULT_RULES)
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise UnknownRulesError(language, module_path) from e
    try:
        rules_cls = getattr(module, class_name)
    except AttributeError as e:
        raise UnknownRulesError(language, f"{module_path}.{class_name}") from e

    rules = rules_cls()
    logger.debug("rules_resolved", lang=language, rules=class_name)
    return rules


# ---------------------------------------------------------------------------
# MorphologyEngine
# ---------------------------------------------------------------------------


class MorphologyEngine:
    def __init__(self, language_code: str = "en", overrides_store: Optional[OverridesStore] = None):
        self._store = overrides_store or OverridesStore(InMemoryOverridesRepository())
        self._language_code = ""
        self._rules: Optional[MorphologyRules] = None
        self.set_language(language_code)

    # --------------------- language -----------------------------

    @property
    def language_code(self) -> str:
        """Primary subtag of the active language ("en" for "en-US")."""
        return self._language_code

    @property
    def rules(self) -> MorphologyRules:
        return self._rules

    @property
    def overrides_store(self) -> OverridesStore:
        return self._store

    def set_language(self, code: str) -> None:
        """Re-bind the engine; raises TypeError for a non-string code."""
        language = primary_language(code)
        self._rules = resolve_rules(language)
        self._language_code = language

    def supports(self, feature: Feature) -> bool:
        return self._rules.supports(feature)

    def _overrides(self) -> MorphologyOverrides:
        return self._store.get(self._language_code)

    # --------------------- verbs --------------------------------

    def to_ing(self, verb: str) -> str:
        return self._rules.to_ing(verb, self._overrides())

    def to_past(self, verb: str) -> str:
        return self._rules.to_past(verb, self._overrides())

    def to_past_participle(self, verb: str) -> str:
        return self._rules.to_past_participle(verb, self._overrides())

    def to_3rd_person_s(self, verb: str) -> str:
        return self._rules.to_3rd_person_s(verb, self._overrides())

    def base_verb(self, verb: str) -> str:
        return self._rules.base_verb(verb, self._overrides())

    def conjugate(
        self,
        lemma: str,
        person: Person,
        number: Number,
        tense: Tense,
        aspect: Aspect = Aspect.SIMPLE,
        voice: Voice = Voice.ACTIVE,
    ) -> str:
        return self._rules.conjugate(lemma, person, number, tense, aspect, voice, self._overrides())

    # --------------------- nouns --------------------------------

    def pluralize(self, noun: str, conservative: bool = False) -> str:
        return self._rules.pluralize(noun, conservative, self._overrides())

    def singularize(self, noun: str, conservative: bool = False) -> str:
        return self._rules.singularize(noun, conservative, self._overrides())

    def possessive(self, noun: str) -> str:
        return self._rules.possessive(noun, self._overrides())

    # --------------------- adjectives / adverbs -----------------

    def to_comparative(self, adjective: str) -> str:
        return self._rules.to_comparative(adjective, self._overrides())

    def to_superlative(self, adjective: str) -> str:
        return self._rules.to_superlative(adjective, self._overrides())

    def to_adverb(self, adjective: str) -> str:
        return self._rules.to_adverb(adjective, self._overrides())

    def adverb_to_adjective(self, adverb: str) -> str:
        return self._rules.adverb_to_adjective(adverb, self._overrides())

    # --------------------- clauses (word lists) -----------------

    def negate(self, words: List[str], contracted: bool = False) -> List[str]:
        return self._rules.negate(list(words), contracted, self._overrides())

    def make_yes_no_question(self, words: List[str]) -> List[str]:
        return self._rules.make_yes_no_question(list(words), self._overrides())

    def make_wh_question(self, words: List[str], wh: str) -> List[str]:
        return self._rules.make_wh_question(list(words), wh, self._overrides())

    # --------------------- articles / pronouns ------------------

    def indefinite_article(self, word: str) -> str:
        return self._rules.indefinite_article(word, self._overrides())

    def determiner(
        self,
        noun_phrase: str,
        preference: DeterminerPreference = DeterminerPreference.INDEFINITE,
    ) -> str:
        return self._rules.determiner(noun_phrase, preference, self._overrides())

    def pronoun_variants(self, token: str) -> List[str]:
        return self._rules.pronoun_variants(token)

    # --------------------- text operations ----------------------

    def replace_last_word(self, text: str, transform: Callable[[str], str]) -> str:
        """
        Replace the last word of `text` in place with `transform(word)`.

        Trailing punctuation of the token is preserved and everything outside
        the token's span is left byte-for-byte intact. Text without a word
        token is returned unchanged.
        """
        for token in reversed(tokenize_words(text, self._language_code)):
            core, trailing = split_trailing_punctuation(token.text)
            if core:
                replacement = transform(core) + trailing
                return replace_span(text, token.start, token.end, replacement)
        return text

    def last_word(self, text: str) -> Optional[str]:
        for token in reversed(tokenize_words(text, self._language_code)):
            core, _ = split_trailing_punctuation(token.text)
            if core:
                return core
        return None

    def append_word(self, word: str, text: str) -> str:
        trimmed = text.strip()
        if not trimmed:
            return word
        return f"{trimmed} {word}"

    def insert_not(self, text: str) -> str:
        words = words_from(text, self._language_code)
        return " ".join(self._rules.insert_not(words))

    def negate_simple_verb(self, text: str) -> str:
        return self.negate_text(text, contracted=False)

    def negate_text(self, text: str, contracted: bool = False) -> str:
        words = words_from(text, self._language_code)
        return " ".join(self.negate(words, contracted))

    def yes_no_question_text(self, text: str) -> str:
        words = words_from(text, self._language_code)
        return " ".join(self.make_yes_no_question(words))

    def wh_question_text(self, text: str, wh: str) -> str:
        words = words_from(text, self._language_code)
        return " ".join(self.make_wh_question(words, wh))

    # --------------------- overrides ----------------------------

    def get_overrides(self, language: Optional[str] = None) -> MorphologyOverrides:
        return self._store.get(language or self._language_code)

    def set_overrides(self, overrides: MorphologyOverrides, language: Optional[str] = None) -> MorphologyOverrides:
        return self._store.set(language or self._language_code, overrides)

    def update_overrides(self, mutate: Mutator, language: Optional[str] = None) -> MorphologyOverrides:
        """
        Atomically edit the overrides of `language` (default: the active one).

            engine.update_overrides(lambda o: o.plural.update({"octopus": "octopodes"}))
        """
        return self._store.update(language or self._language_code, mutate)

    # --------------------- case matching ------------------------

    @staticmethod
    def match_case(original: str, replacement: str) -> str:
        return casing.match_case(original, replacement)
