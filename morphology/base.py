"""
morphology/base.py

The capability set every language rules variant implements.

A rules object is stateless apart from its language code: the caller passes
the language's overrides bundle into each overridable operation, so one
instance can be shared by every engine bound to that language.

`DelegatingRules` is the base for languages that do not have real rules yet.
It owns a private English rules instance and forwards every operation to it
explicitly, reporting only tokenization as natively supported.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from app.core.domain.models import (
    Aspect,
    DeterminerPreference,
    Feature,
    MorphologyOverrides,
    Number,
    Person,
    Tense,
    Voice,
)


class MorphologyRules(ABC):
    language_code: str = ""

    @abstractmethod
    def supports(self, feature: Feature) -> bool: ...

    # --------------------- verbs --------------------------------

    @abstractmethod
    def to_ing(self, verb: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def to_past(self, verb: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def to_past_participle(self, verb: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def to_3rd_person_s(self, verb: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def base_verb(self, verb: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def conjugate(
        self,
        lemma: str,
        person: Person,
        number: Number,
        tense: Tense,
        aspect: Aspect,
        voice: Voice,
        overrides: MorphologyOverrides,
    ) -> str: ...

    # --------------------- nouns --------------------------------

    @abstractmethod
    def pluralize(self, noun: str, conservative: bool, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def singularize(self, noun: str, conservative: bool, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def possessive(self, noun: str, overrides: MorphologyOverrides) -> str: ...

    # --------------------- adjectives / adverbs -----------------

    @abstractmethod
    def to_comparative(self, adjective: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def to_superlative(self, adjective: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def to_adverb(self, adjective: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def adverb_to_adjective(self, adverb: str, overrides: MorphologyOverrides) -> str: ...

    # --------------------- clauses ------------------------------

    @abstractmethod
    def negate(self, words: List[str], contracted: bool, overrides: MorphologyOverrides) -> List[str]: ...

    @abstractmethod
    def make_yes_no_question(self, words: List[str], overrides: MorphologyOverrides) -> List[str]: ...

    @abstractmethod
    def make_wh_question(self, words: List[str], wh: str, overrides: MorphologyOverrides) -> List[str]: ...

    @abstractmethod
    def insert_not(self, words: List[str]) -> List[str]: ...

    # --------------------- articles / pronouns ------------------

    @abstractmethod
    def indefinite_article(self, word: str, overrides: MorphologyOverrides) -> str: ...

    @abstractmethod
    def determiner(
        self,
        noun_phrase: str,
        preference: DeterminerPreference,
        overrides: MorphologyOverrides,
    ) -> str: ...

    @abstractmethod
    def pronoun_variants(self, token: str) -> List[str]: ...


class DelegatingRules(MorphologyRules):
    """
    Placeholder rules for a language without a real implementation.

    Every operation is forwarded to a private English rules instance. When
    the language gets real rules, subclasses override the methods they
    implement and widen `supports`.
    """

    def __init__(self, language_code: str):
        # Imported here: english.py itself imports this module.
        from morphology.english import EnglishRules

        self.language_code = language_code
        self._fallback = EnglishRules()

    def supports(self, feature: Feature) -> bool:
        return feature == Feature.TOKENIZATION

    def to_ing(self, verb, overrides):
        return self._fallback.to_ing(verb, overrides)

    def to_past(self, verb, overrides):
        return self._fallback.to_past(verb, overrides)

    def to_past_participle(self, verb, overrides):
        return self._fallback.to_past_participle(verb, overrides)

    def to_3rd_person_s(self, verb, overrides):
        return self._fallback.to_3rd_person_s(verb, overrides)

    def base_verb(self, verb, overrides):
        return self._fallback.base_verb(verb, overrides)

    def conjugate(self, lemma, person, number, tense, aspect, voice, overrides):
        return self._fallback.conjugate(lemma, person, number, tense, aspect, voice, overrides)

    def pluralize(self, noun, conservative, overrides):
        return self._fallback.pluralize(noun, conservative, overrides)

    def singularize(self, noun, conservative, overrides):
        return self._fallback.singularize(noun, conservative, overrides)

    def possessive(self, noun, overrides):
        return self._fallback.possessive(noun, overrides)

    def to_comparative(self, adjective, overrides):
        return self._fallback.to_comparative(adjective, overrides)

    def to_superlative(self, adjective, overrides):
        return self._fallback.to_superlative(adjective, overrides)

    def to_adverb(self, adjective, overrides):
        return self._fallback.to_adverb(adjective, overrides)

    def adverb_to_adjective(self, adverb, overrides):
        return self._fallback.adverb_to_adjective(adverb, overrides)

    def negate(self, words, contracted, overrides):
        return self._fallback.negate(words, contracted, overrides)

    def make_yes_no_question(self, words, overrides):
        return self._fallback.make_yes_no_question(words, overrides)

    def make_wh_question(self, words, wh, overrides):
        return self._fallback.make_wh_question(words, wh, overrides)

    def insert_not(self, words):
        return self._fallback.insert_not(words)

    def indefinite_article(self, word, overrides):
        return self._fallback.indefinite_article(word, overrides)

    def determiner(self, noun_phrase, preference, overrides):
        return self._fallback.determiner(noun_phrase, preference, overrides)

    def pronoun_variants(self, token):
        return self._fallback.pronoun_variants(token)
