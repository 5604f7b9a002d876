"""
morphology/english.py

English rules: the fully realized language variant.

Every lexical operation follows the same precedence:

    1. user override (per-language bundle, lowercase keys)
    2. irregular table (morphology.english_data)
    3. regular spelling rule

and copies the casing of the input word onto the lowercase result
(`morphology.casing.match_case`).

Clause transforms (negation, questions) work on word lists produced by the
tokenizer and rely on small heuristics: the subject is the first word (or a
determiner plus a noun), the verb is the word after it.

Typical usage goes through `morphology.engine.MorphologyEngine`; the rules
object can also be used directly:

    rules = EnglishRules()
    rules.to_past("Go", MorphologyOverrides())          # "Went"
    rules.negate(["He", "goes"], True, MorphologyOverrides())
    # ["He", "doesn't", "go"]
"""

from __future__ import annotations

import unicodedata
from typing import Iterable, List, Optional, Tuple

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
from morphology.base import MorphologyRules
from morphology.casing import (
    capitalize_first,
    decapitalize_first,
    is_all_upper,
    is_proper_name,
    match_case,
)
from morphology.english_data import (
    ANGLICIZED_CLASSICAL,
    AUXILIARIES,
    C_TAKES_K,
    CLASSICAL_PLURALS,
    CLASSICAL_SINGULARS,
    CONSONANT_SOUND_VOWEL_PREFIXES,
    CONTRACTIONS,
    DETERMINERS,
    ED_ENDING_LEMMAS,
    F_FE_TAKES_S,
    F_TO_VES,
    IE_NOUNS,
    INVARIANT_PLURALS,
    IRREGULAR_ADJECTIVE_TO_ADVERB,
    IRREGULAR_ADVERB_TO_ADJECTIVE,
    IRREGULAR_COMPARATIVES,
    IRREGULAR_LEMMA,
    IRREGULAR_PAST,
    IRREGULAR_PAST_FORMS,
    IRREGULAR_PAST_PARTICIPLE,
    IRREGULAR_PLURALS,
    IRREGULAR_PRESENT_PARTICIPLE,
    IRREGULAR_SINGULARS,
    IRREGULAR_SUPERLATIVES,
    IRREGULAR_THIRD_PERSON,
    NO_DOUBLING,
    O_TAKES_S,
    OE_NOUNS,
    PARTICLES,
    PRONOUN_VARIANTS,
    SILENT_H_PREFIXES,
    UNCOUNTABLES,
    VOWEL_NAMED_LETTERS,
    VOWELS,
)

# ---------------------------------------------------------------------------
# 1. Spelling primitives
# ---------------------------------------------------------------------------

_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")
_NATURAL_DOUBLES = ("ll", "ss", "ff", "zz")


def ends_with_consonant_y(lower: str) -> bool:
    return len(lower) >= 2 and lower.endswith("y") and lower[-2] not in VOWELS


def should_double_final_consonant(lower: str) -> bool:
    """
    Consonant-vowel-consonant ending, final letter not y/w/x
    ("stop" -> "stopping", "big" -> "bigger").
    """
    if len(lower) < 3 or lower in NO_DOUBLING:
        return False
    first, mid, last = lower[-3], lower[-2], lower[-1]
    if not (first.isalpha() and mid.isalpha() and last.isalpha()):
        return False
    if last in "ywx":
        return False
    return first not in VOWELS and mid in VOWELS and last not in VOWELS


def has_doubled_final_consonant(word: str) -> bool:
    if len(word) < 2:
        return False
    last = word[-1]
    if last in "ywx" or last in VOWELS or not last.isalpha():
        return False
    return word[-2] == last


def syllable_count(word: str) -> int:
    """Vowel-group count with a silent final 'e' correction (never below 1)."""
    lower = word.lower()
    if not lower:
        return 0
    count = 0
    prev_was_vowel = False
    for ch in lower:
        is_vowel = ch in "aeiouy"
        if is_vowel and not prev_was_vowel:
            count += 1
        prev_was_vowel = is_vowel
    if lower.endswith("e") and not lower.endswith("le") and count > 1:
        count -= 1
    return max(1, count)


def regular_ing(lower: str) -> str:
    if lower.endswith("ie"):
        return lower[:-2] + "ying"
    if lower.endswith("e") and not lower.endswith("ee") and len(lower) > 1:
        return lower[:-1] + "ing"
    if lower in C_TAKES_K:
        return lower + "king"
    if should_double_final_consonant(lower):
        return lower + lower[-1] + "ing"
    return lower + "ing"


def regular_past(lower: str) -> str:
    if lower.endswith("e"):
        return lower + "d"
    if lower in C_TAKES_K:
        return lower + "ked"
    if ends_with_consonant_y(lower):
        return lower[:-1] + "ied"
    if should_double_final_consonant(lower):
        return lower + lower[-1] + "ed"
    return lower + "ed"


def regular_3rd(lower: str) -> str:
    if ends_with_consonant_y(lower):
        return lower[:-1] + "ies"
    if lower.endswith(_SIBILANT_ENDINGS + ("o",)):
        return lower + "es"
    return lower + "s"


def _first_verified(candidates: Iterable[str], inflect, target: str) -> Optional[str]:
    for candidate in candidates:
        if len(candidate) >= 2 and inflect(candidate) == target:
            return candidate
    return None


def needs_silent_e(stem: str) -> bool:
    """
    Stems that do not end an English word without a final 'e':
    "danc", "lov", "continu", "chang", "judg", "caus", "us".
    """
    if not stem or stem[-1] in "aeioy":
        return False
    if len(stem) <= 2:
        return True
    if stem.endswith(("v", "u", "c", "ang", "dg", "rg", "lg")):
        return True
    if stem.endswith("z") and not stem.endswith("zz"):
        return True
    if stem.endswith("s") and not stem.endswith("ss"):
        return not (stem.endswith("us") and stem[-3] not in VOWELS)
    return False


def _stem_candidates(stem: str, e_form: str) -> List[str]:
    if stem.endswith("ck") and stem[:-1] in C_TAKES_K:
        return [stem[:-1], stem]
    if has_doubled_final_consonant(stem) and not stem.endswith(_NATURAL_DOUBLES):
        return [stem[:-1], stem, e_form]
    if needs_silent_e(stem):
        return [e_form, stem]
    return [stem, e_form]


def regular_lemma(lower: str) -> Optional[str]:
    """
    Recover the lemma of a regularly inflected verb form.

    A candidate stem is accepted only if re-applying the regular rule to it
    reproduces the input exactly, so "liked" -> "like", "stopped" -> "stop",
    "carries" -> "carry", while "pizza" or "bus" yield None.
    """
    if lower in ED_ENDING_LEMMAS:
        return None

    if lower.endswith("ing") and len(lower) > 4:
        stem = lower[:-3]
        if lower.endswith("ying"):
            ie_form = lower[:-4] + "ie"
            candidates = [ie_form, stem] if len(lower) <= 5 else [stem, ie_form]
        else:
            candidates = _stem_candidates(stem, stem + "e")
        return _first_verified(candidates, regular_ing, lower)

    if lower.endswith("ied") and len(lower) > 3:
        y_form, ie_form = lower[:-3] + "y", lower[:-1]
        candidates = [ie_form, y_form] if len(lower) <= 4 else [y_form, ie_form]
        return _first_verified(candidates, regular_past, lower)

    if lower.endswith("ed") and len(lower) > 3:
        return _first_verified(_stem_candidates(lower[:-2], lower[:-1]), regular_past, lower)

    if lower.endswith("ies") and len(lower) > 3:
        y_form, ie_form = lower[:-3] + "y", lower[:-1]
        candidates = [ie_form, y_form] if len(lower) <= 4 else [y_form, ie_form]
        return _first_verified(candidates, regular_3rd, lower)

    if lower.endswith("es") and len(lower) > 3:
        stem = lower[:-2]
        candidates = [lower[:-1], stem] if needs_silent_e(stem) else [stem, lower[:-1]]
        return _first_verified(candidates, regular_3rd, lower)

    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")) and len(lower) > 2:
        return _first_verified([lower[:-1]], regular_3rd, lower)

    return None


def split_phrasal(verb: str) -> Tuple[str, str]:
    """
    "give up" -> ("give", " up"); non-phrasal input comes back whole.
    """
    parts = verb.split(" ")
    if len(parts) > 1 and parts[0] and all(p.lower() in PARTICLES for p in parts[1:]):
        return parts[0], " " + " ".join(parts[1:])
    return verb, ""


def is_past_form(lower: str) -> bool:
    if lower in IRREGULAR_PAST_FORMS:
        return True
    return lower.endswith("ed") and lower not in ED_ENDING_LEMMAS


# ---------------------------------------------------------------------------
# 2. Nouns
# ---------------------------------------------------------------------------


def regular_plural(lower: str) -> str:
    if ends_with_consonant_y(lower):
        return lower[:-1] + "ies"
    if lower.endswith("ff") or lower in F_FE_TAKES_S:
        return lower + "s"
    if lower.endswith("fe"):
        return lower[:-2] + "ves"
    if lower.endswith("f"):
        return lower[:-1] + "ves"
    if lower.endswith("o"):
        if lower in O_TAKES_S or (len(lower) > 1 and lower[-2] in VOWELS):
            return lower + "s"
        return lower + "es"
    if lower.endswith(_SIBILANT_ENDINGS):
        return lower + "es"
    return lower + "s"


def regular_singular(lower: str) -> str:
    if len(lower) < 3 or lower.endswith(("ss", "us", "is")):
        return lower
    if lower.endswith("ies"):
        if lower[:-1] in IE_NOUNS:
            return lower[:-1]
        return lower[:-3] + "y"
    if lower.endswith("ves"):
        stem = lower[:-3]
        if stem + "fe" in F_TO_VES:
            return stem + "fe"
        if stem + "f" in F_TO_VES:
            return stem + "f"
        return lower[:-1]
    if lower.endswith("oes"):
        if lower[:-1] in OE_NOUNS:
            return lower[:-1]
        return lower[:-2]
    if lower.endswith("es"):
        stem = lower[:-2]
        if stem.endswith(("ss", "sh", "ch", "x", "z")):
            return stem
        if stem.endswith("us") and not stem.endswith("ous"):
            return stem
        return lower[:-1]
    if lower.endswith("s"):
        return lower[:-1]
    return lower


def looks_plural(lower: str) -> bool:
    if lower in INVARIANT_PLURALS or lower in IRREGULAR_SINGULARS or lower in CLASSICAL_SINGULARS:
        return True
    return lower.endswith("s") and not lower.endswith(("ss", "us", "is"))


def head_noun(phrase: str) -> str:
    parts = phrase.split()
    return _strip_punctuation(parts[-1]) if parts else ""


# ---------------------------------------------------------------------------
# 3. Adjectives / adverbs
# ---------------------------------------------------------------------------


def takes_degree_suffix(lower: str) -> bool:
    syllables = syllable_count(lower)
    if syllables == 1:
        return True
    return syllables == 2 and lower.endswith(("y", "le", "er", "ow"))


def add_degree_suffix(lower: str, suffix: str) -> str:
    """suffix is 'er' or 'est'."""
    if ends_with_consonant_y(lower):
        return lower[:-1] + "i" + suffix
    if lower.endswith("e"):
        return lower + suffix[1:]
    if syllable_count(lower) == 1 and should_double_final_consonant(lower):
        return lower + lower[-1] + suffix
    return lower + suffix


# ---------------------------------------------------------------------------
# 4. Articles
# ---------------------------------------------------------------------------


def _strip_punctuation(word: str) -> str:
    start, end = 0, len(word)
    while start < end and unicodedata.category(word[start]).startswith("P"):
        start += 1
    while end > start and unicodedata.category(word[end - 1]).startswith("P"):
        end -= 1
    return word[start:end]


def starts_with_vowel_sound(word: str) -> bool:
    w = _strip_punctuation(word)
    if not w:
        return False
    lower = w.lower()

    if lower.startswith(SILENT_H_PREFIXES):
        return True
    if lower.startswith(CONSONANT_SOUND_VOWEL_PREFIXES):
        return False

    # Numbers are read aloud: "an 8", "an 11", "an 18".
    if lower[0].isdigit():
        return lower[0] == "8" or lower in ("11", "18")

    # Acronyms are spelled out letter by letter: "an FBI agent", "a UFO".
    if is_all_upper(w):
        return w[0] in VOWEL_NAMED_LETTERS
    return lower[0] in VOWELS


# ---------------------------------------------------------------------------
# 5. Clauses
# ---------------------------------------------------------------------------


def find_auxiliary(words: List[str]) -> Optional[int]:
    for idx, word in enumerate(words):
        if word.lower() in AUXILIARIES:
            return idx
    return None


def subject_length(words: List[str]) -> int:
    """1 for "I go", 2 for "the dog barks", 0 for a bare verb ("go")."""
    if len(words) < 2:
        return 0
    if len(words) >= 3 and words[0].lower() in DETERMINERS:
        return 2
    return 1


def person_number(subject: List[str]) -> Tuple[Person, Number]:
    if not subject:
        return Person.THIRD, Number.PLURAL
    first = subject[0].lower()
    if len(subject) == 2 and first in DETERMINERS:
        noun = subject[1].lower()
        if first in ("these", "those") or looks_plural(noun):
            return Person.THIRD, Number.PLURAL
        return Person.THIRD, Number.SINGULAR
    if first == "i":
        return Person.FIRST, Number.SINGULAR
    if first == "you":
        return Person.SECOND, Number.SINGULAR
    if first in ("he", "she", "it", "this", "that"):
        return Person.THIRD, Number.SINGULAR
    if first == "we":
        return Person.FIRST, Number.PLURAL
    if first in ("they", "these", "those"):
        return Person.THIRD, Number.PLURAL
    # A capitalized single token reads as a name ("Mom", "Alex").
    if is_proper_name(subject[0]):
        return Person.THIRD, Number.SINGULAR
    return Person.THIRD, Number.PLURAL


_SUBJECT_PRONOUNS = frozenset(forms[0].lower() for forms in PRONOUN_VARIANTS.values())


def is_bare_subject(words: List[str]) -> bool:
    """A clause that is only a subject pronoun ("I", "they")."""
    return len(words) == 1 and words[0].lower() in _SUBJECT_PRONOUNS


def _present_do(subject: List[str]) -> str:
    person, number = person_number(subject)
    if person == Person.THIRD and number == Number.SINGULAR:
        return "does"
    return "do"


def _lower_subject_start(word: str) -> str:
    lower = word.lower()
    if lower != "i" and (lower in PRONOUN_VARIANTS or lower in DETERMINERS):
        return decapitalize_first(word)
    return word


def be_form(person: Person, number: Number, tense: Tense) -> str:
    if tense == Tense.FUTURE:
        return "will be"
    if tense == Tense.PAST:
        if number == Number.SINGULAR and person != Person.SECOND:
            return "was"
        return "were"
    if person == Person.FIRST and number == Number.SINGULAR:
        return "am"
    if person == Person.THIRD and number == Number.SINGULAR:
        return "is"
    return "are"


def have_form(person: Person, number: Number, tense: Tense) -> str:
    if tense == Tense.FUTURE:
        return "will have"
    if tense == Tense.PAST:
        return "had"
    return "has" if (person == Person.THIRD and number == Number.SINGULAR) else "have"


# ---------------------------------------------------------------------------
# 6. Rules object
# ---------------------------------------------------------------------------


class EnglishRules(MorphologyRules):
    """English implementation of the full capability set."""

    def __init__(self, language_code: str = "en"):
        self.language_code = language_code

    def supports(self, feature: Feature) -> bool:
        return True

    # --------------------- verbs --------------------------------

    def to_ing(self, verb: str, overrides: MorphologyOverrides) -> str:
        lower = verb.lower()
        if not lower:
            return verb
        if lower in overrides.ing:
            return match_case(verb, overrides.ing[lower])
        head, particles = split_phrasal(verb)
        if particles:
            return self.to_ing(head, overrides) + particles
        if lower in IRREGULAR_PRESENT_PARTICIPLE:
            return match_case(verb, IRREGULAR_PRESENT_PARTICIPLE[lower])
        return match_case(verb, regular_ing(lower))

    def to_past(self, verb: str, overrides: MorphologyOverrides) -> str:
        lower = verb.lower()
        if not lower:
            return verb
        if lower in overrides.past:
            return match_case(verb, overrides.past[lower])
        head, particles = split_phrasal(verb)
        if particles:
            return self.to_past(head, overrides) + particles
        if lower in IRREGULAR_PAST:
            return match_case(verb, IRREGULAR_PAST[lower])
        return match_case(verb, regular_past(lower))

    def to_past_participle(self, verb: str, overrides: MorphologyOverrides) -> str:
        lower = verb.lower()
        if not lower:
            return verb
        head, particles = split_phrasal(verb)
        if particles:
            return self.to_past_participle(head, overrides) + particles
        if lower in IRREGULAR_PAST_PARTICIPLE:
            return match_case(verb, IRREGULAR_PAST_PARTICIPLE[lower])
        # For regular verbs the participle is the past form.
        if lower in overrides.past:
            return match_case(verb, overrides.past[lower])
        return match_case(verb, regular_past(lower))

    def to_3rd_person_s(self, verb: str, overrides: MorphologyOverrides) -> str:
        lower = verb.lower()
        if not lower:
            return verb
        if lower in overrides.third_s:
            return match_case(verb, overrides.third_s[lower])
        head, particles = split_phrasal(verb)
        if particles:
            return self.to_3rd_person_s(head, overrides) + particles
        if lower in IRREGULAR_THIRD_PERSON:
            return match_case(verb, IRREGULAR_THIRD_PERSON[lower])
        return match_case(verb, regular_3rd(lower))

    def base_verb(self, verb: str, overrides: MorphologyOverrides) -> str:
        lower = verb.lower()
        if not lower:
            return verb
        if lower in overrides.base:
            return match_case(verb, overrides.base[lower])
        head, particles = split_phrasal(verb)
        if particles:
            return self.base_verb(head, overrides) + particles
        if lower in IRREGULAR_LEMMA:
            return match_case(verb, IRREGULAR_LEMMA[lower])
        lemma = regular_lemma(lower)
        if lemma is None:
            return verb
        return match_case(verb, lemma)

    def conjugate(
        self,
        lemma: str,
        person: Person,
        number: Number,
        tense: Tense,
        aspect: Aspect = Aspect.SIMPLE,
        voice: Voice = Voice.ACTIVE,
        overrides: Optional[MorphologyOverrides] = None,
    ) -> str:
        overrides = overrides or MorphologyOverrides()
        base = lemma.strip().lower()
        if not base:
            return lemma
        participle = self.to_past_participle(base, overrides)
        third_singular = person == Person.THIRD and number == Number.SINGULAR

        if voice == Voice.PASSIVE:
            if aspect == Aspect.SIMPLE:
                return f"{be_form(person, number, tense)} {participle}"
            if aspect == Aspect.PROGRESSIVE:
                if tense == Tense.FUTURE:
                    return f"will be being {participle}"
                return f"{be_form(person, number, tense)} being {participle}"
            if aspect == Aspect.PERFECT:
                return f"{have_form(person, number, tense)} been {participle}"
            return f"{have_form(person, number, tense)} been being {participle}"

        if aspect == Aspect.SIMPLE:
            if base == "be":
                return be_form(person, number, tense)
            if tense == Tense.FUTURE:
                return f"will {base}"
            if tense == Tense.PAST:
                return self.to_past(base, overrides)
            return self.to_3rd_person_s(base, overrides) if third_singular else base
        if aspect == Aspect.PROGRESSIVE:
            return f"{be_form(person, number, tense)} {self.to_ing(base, overrides)}"
        if aspect == Aspect.PERFECT:
            return f"{have_form(person, number, tense)} {participle}"
        return f"{have_form(person, number, tense)} been {self.to_ing(base, overrides)}"

    # --------------------- nouns --------------------------------

    def pluralize(self, noun: str, conservative: bool, overrides: MorphologyOverrides) -> str:
        lower = noun.lower()
        if not lower.strip():
            return noun
        if lower in overrides.do_not_change:
            return noun
        if lower in overrides.plural:
            return match_case(noun, overrides.plural[lower])

        if conservative and is_proper_name(noun):
            return noun
        if lower in INVARIANT_PLURALS or lower in UNCOUNTABLES:
            return noun
        if lower in IRREGULAR_PLURALS:
            return match_case(noun, IRREGULAR_PLURALS[lower])
        if lower in CLASSICAL_PLURALS:
            if not (conservative and lower in ANGLICIZED_CLASSICAL):
                return match_case(noun, CLASSICAL_PLURALS[lower])
        return match_case(noun, regular_plural(lower))

    def singularize(self, noun: str, conservative: bool, overrides: MorphologyOverrides) -> str:
        lower = noun.lower()
        if not lower.strip():
            return noun
        if lower in overrides.do_not_change:
            return noun
        if lower in overrides.singular:
            return match_case(noun, overrides.singular[lower])

        if conservative and is_proper_name(noun):
            return noun
        if lower in INVARIANT_PLURALS or lower in UNCOUNTABLES:
            return noun
        if lower in IRREGULAR_SINGULARS:
            return match_case(noun, IRREGULAR_SINGULARS[lower])
        if lower in CLASSICAL_SINGULARS:
            return match_case(noun, CLASSICAL_SINGULARS[lower])
        singular = regular_singular(lower)
        if singular == lower:
            return noun
        return match_case(noun, singular)

    def possessive(self, noun: str, overrides: MorphologyOverrides) -> str:
        lower = noun.lower()
        if not lower:
            return noun
        if lower.endswith("s"):
            return match_case(noun, lower + "'")
        return match_case(noun, lower + "'s")

    # --------------------- adjectives / adverbs -----------------

    def _degree(self, adjective: str, overridden, irregular, suffix: str, periphrastic: str) -> str:
        lower = adjective.lower()
        if not lower:
            return adjective
        if lower in overridden:
            return match_case(adjective, overridden[lower])
        if lower in irregular:
            return match_case(adjective, irregular[lower])
        if " " not in lower and (ends_with_consonant_y(lower) or takes_degree_suffix(lower)):
            return match_case(adjective, add_degree_suffix(lower, suffix))
        return match_case(adjective, f"{periphrastic} {lower}")

    def to_comparative(self, adjective: str, overrides: MorphologyOverrides) -> str:
        return self._degree(adjective, overrides.comparative, IRREGULAR_COMPARATIVES, "er", "more")

    def to_superlative(self, adjective: str, overrides: MorphologyOverrides) -> str:
        return self._degree(adjective, overrides.superlative, IRREGULAR_SUPERLATIVES, "est", "most")

    def to_adverb(self, adjective: str, overrides: MorphologyOverrides) -> str:
        lower = adjective.lower()
        if not lower:
            return adjective
        if lower in overrides.adverb:
            return match_case(adjective, overrides.adverb[lower])
        if lower in IRREGULAR_ADJECTIVE_TO_ADVERB:
            return match_case(adjective, IRREGULAR_ADJECTIVE_TO_ADVERB[lower])
        if ends_with_consonant_y(lower):
            return match_case(adjective, lower[:-1] + "ily")
        if lower.endswith("ic"):
            return match_case(adjective, lower + "ally")
        if lower.endswith("le") and len(lower) > 2 and lower[-3] not in VOWELS:
            return match_case(adjective, lower[:-1] + "y")
        if lower.endswith("ll"):
            return match_case(adjective, lower + "y")
        return match_case(adjective, lower + "ly")

    def adverb_to_adjective(self, adverb: str, overrides: MorphologyOverrides) -> str:
        lower = adverb.lower()
        if not lower:
            return adverb
        if lower in overrides.adjective:
            return match_case(adverb, overrides.adjective[lower])
        if lower in IRREGULAR_ADVERB_TO_ADJECTIVE:
            return match_case(adverb, IRREGULAR_ADVERB_TO_ADJECTIVE[lower])
        if lower.endswith("ically"):
            return match_case(adverb, lower[:-4])
        if lower.endswith("ily") and len(lower) > 4:
            return match_case(adverb, lower[:-3] + "y")
        if lower.endswith(("bly", "ply")):
            return match_case(adverb, lower[:-1] + "e")
        if lower.endswith("ly") and len(lower) > 3:
            return match_case(adverb, lower[:-2])
        return adverb

    # --------------------- clauses ------------------------------

    def _split_clause(self, words: List[str]) -> Tuple[List[str], str, List[str]]:
        n = subject_length(words)
        return list(words[:n]), words[n], list(words[n + 1:])

    def _do_support(self, subject: List[str], verb: str, overrides: MorphologyOverrides) -> Tuple[str, str]:
        verb_lower = verb.lower()
        lemma = self.base_verb(verb_lower, overrides)
        if is_past_form(verb_lower):
            return "did", lemma
        return _present_do(subject), lemma

    def negate(self, words: List[str], contracted: bool, overrides: MorphologyOverrides) -> List[str]:
        if not words:
            return ["don't"] if contracted else ["do", "not"]

        aux_index = find_auxiliary(words)
        if aux_index is not None:
            out = list(words)
            aux = words[aux_index]
            contraction = CONTRACTIONS.get(aux.lower()) if contracted else None
            if contraction:
                out[aux_index] = match_case(aux, contraction)
            else:
                out.insert(aux_index + 1, "not")
            return out

        if is_bare_subject(words):
            do_aux = _present_do(words)
            if contracted:
                return list(words) + [CONTRACTIONS[do_aux]]
            return list(words) + [do_aux, "not"]

        subject, verb, rest = self._split_clause(words)
        do_aux, lemma = self._do_support(subject, verb, overrides)
        if not subject:
            do_aux = match_case(verb, do_aux)
        if contracted:
            negation = [match_case(do_aux, CONTRACTIONS[do_aux.lower()])]
        else:
            negation = [do_aux, "not"]
        return subject + negation + [lemma] + rest

    def make_yes_no_question(self, words: List[str], overrides: MorphologyOverrides) -> List[str]:
        if not words:
            return []

        aux_index = find_auxiliary(words)
        if aux_index is not None:
            out = list(words)
            aux = out.pop(aux_index)
            if out:
                out[0] = _lower_subject_start(out[0])
            return [capitalize_first(aux)] + out

        if is_bare_subject(words):
            return [capitalize_first(_present_do(words)), _lower_subject_start(words[0])]

        subject, verb, rest = self._split_clause(words)
        do_aux, lemma = self._do_support(subject, verb, overrides)
        if subject:
            subject[0] = _lower_subject_start(subject[0])
        return [capitalize_first(do_aux)] + subject + [lemma] + rest

    def make_wh_question(self, words: List[str], wh: str, overrides: MorphologyOverrides) -> List[str]:
        if not words:
            return [capitalize_first(wh)]
        inverted = self.make_yes_no_question(words, overrides)
        inverted[0] = decapitalize_first(inverted[0])
        return [capitalize_first(wh)] + inverted

    def insert_not(self, words: List[str]) -> List[str]:
        if not words:
            return ["not"]
        out = list(words)
        aux_index = find_auxiliary(words)
        if aux_index is None:
            out.append("not")
        else:
            out.insert(aux_index + 1, "not")
        return out

    # --------------------- articles -----------------------------

    def indefinite_article(self, word: str, overrides: MorphologyOverrides) -> str:
        key = word.strip().lower()
        if key in overrides.article:
            return overrides.article[key]
        parts = word.split()
        if not parts:
            return "a"
        return "an" if starts_with_vowel_sound(parts[0]) else "a"

    def determiner(
        self,
        noun_phrase: str,
        preference: DeterminerPreference,
        overrides: MorphologyOverrides,
    ) -> str:
        key = noun_phrase.strip().lower()
        if key in overrides.article:
            return overrides.article[key]
        head = head_noun(noun_phrase)
        if head and is_proper_name(head):
            return ""
        if preference == DeterminerPreference.DEFINITE:
            return "the"
        if preference == DeterminerPreference.NONE:
            return ""
        lower_head = head.lower()
        if lower_head in UNCOUNTABLES or looks_plural(lower_head):
            return "some"
        return self.indefinite_article(noun_phrase, overrides)

    # --------------------- pronouns -----------------------------

    def pronoun_variants(self, token: str) -> List[str]:
        forms = PRONOUN_VARIANTS.get(token.lower())
        if forms is None:
            return [token]
        if len(token) > 1 and is_all_upper(token):
            return [form.upper() for form in forms]
        if len(token) > 1 and token[0].isupper() and not any(ch.isupper() for ch in token[1:]):
            return [capitalize_first(forms[0])] + [form.lower() for form in forms[1:]]
        return list(forms)
