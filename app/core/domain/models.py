# app/core/domain/models.py
from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Dict, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums ---


class Feature(str, Enum):
    """Capability groups a language rules variant may implement natively."""
    VERBS = "verbs"
    NOUNS = "nouns"
    ADJECTIVES_ADVERBS = "adjectives_adverbs"
    CLAUSES = "clauses"
    ARTICLES = "articles"
    PRONOUNS = "pronouns"
    TOKENIZATION = "tokenization"


class Person(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Number(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"


class Tense(str, Enum):
    PRESENT = "present"
    PAST = "past"
    FUTURE = "future"


class Aspect(str, Enum):
    SIMPLE = "simple"
    PROGRESSIVE = "progressive"
    PERFECT = "perfect"
    PERFECT_PROGRESSIVE = "perfect_progressive"


class Voice(str, Enum):
    ACTIVE = "active"
    PASSIVE = "passive"


class DeterminerPreference(str, Enum):
    DEFINITE = "definite"
    INDEFINITE = "indefinite"
    NONE = "none"


# --- Entities ---


def _norm_key(raw: Any) -> str:
    return str(raw).strip().lower()


class MorphologyOverrides(BaseModel):
    """
    User-defined overrides for one language.

    Keys (and do-not-change members) are lowercase-normalized on validation.
    Values are stored as lowercase canonical forms; the rules re-apply the
    casing of the word being transformed.
    """
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    do_not_change: Set[str] = Field(default_factory=set)

    plural: Dict[str, str] = Field(default_factory=dict)       # noun -> plural
    singular: Dict[str, str] = Field(default_factory=dict)     # plural -> singular

    past: Dict[str, str] = Field(default_factory=dict)         # verb -> past
    third_s: Dict[str, str] = Field(default_factory=dict)      # verb -> 3rd person singular
    ing: Dict[str, str] = Field(default_factory=dict)          # verb -> -ing
    base: Dict[str, str] = Field(default_factory=dict)         # inflected -> lemma

    comparative: Dict[str, str] = Field(default_factory=dict)  # adj -> comparative
    superlative: Dict[str, str] = Field(default_factory=dict)  # adj -> superlative
    adverb: Dict[str, str] = Field(default_factory=dict)       # adj -> adverb
    adjective: Dict[str, str] = Field(default_factory=dict)    # adv -> adjective

    article: Dict[str, str] = Field(default_factory=dict)      # word or phrase -> "a"/"an"/"the"/"some"/""

    @field_validator("do_not_change", mode="before")
    @classmethod
    def _normalize_members(cls, value: Any) -> Set[str]:
        if value is None:
            return set()
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise ValueError("do_not_change must be a collection of words")
        members = list(value)
        if not all(isinstance(v, str) for v in members):
            raise ValueError("do_not_change members must be strings")
        return {_norm_key(v) for v in members if _norm_key(v)}

    @field_validator(
        "plural",
        "singular",
        "past",
        "third_s",
        "ing",
        "base",
        "comparative",
        "superlative",
        "adverb",
        "adjective",
        "article",
        mode="before",
    )
    @classmethod
    def _normalize_mapping(cls, value: Any) -> Dict[str, str]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("expected a word -> word mapping")
        out: Dict[str, str] = {}
        for k, v in value.items():
            if not isinstance(k, str) or not isinstance(v, str):
                raise ValueError("expected a word -> word mapping")
            key = _norm_key(k)
            if key:
                out[key] = _norm_key(v)
        return out

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in type(self).model_fields)


# --- Language keys ---


def primary_language(raw: str, default: str = "en") -> str:
    """
    Reduce a language tag to its lowercased primary subtag.

    'en-US', 'en_GB' and 'EN' all map to 'en'. An empty tag, or a subtag that
    is not purely ASCII letters ('../x', '/tmp/x', 'en1'), maps to `default`.
    """
    if not isinstance(raw, str):
        raise TypeError("language code must be a string")
    code = raw.strip().replace("_", "-")
    head = code.split("-", 1)[0].lower()
    if not (head.isascii() and head.isalpha()):
        return default
    return head
