"""
morphology/english_data.py

Immutable lexical data for English morphology.

Every table is built once at import time and exposed read-only
(`frozenset` / `MappingProxyType`). All keys and values are lowercase
canonical forms; callers re-apply casing with `morphology.casing.match_case`.

Sections:

1. Irregular verbs (past, past participle, present participle, 3rd person)
2. Lemma index (inverse of the verb tables)
3. Nouns (irregular, classical, invariant, uncountable, spelling exceptions)
4. Adjectives / adverbs
5. Clause vocabulary (auxiliaries, contractions, particles, determiners)
6. Pronouns
7. Articles (sound-based exceptions)
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple


def _freeze(table: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(table))


def _invert(*tables: Mapping[str, str]) -> Dict[str, str]:
    inverse: Dict[str, str] = {}
    for table in tables:
        for base, form in table.items():
            inverse.setdefault(form, base)
    return inverse


VOWELS = frozenset("aeiou")

# ---------------------------------------------------------------------------
# 1. Irregular verbs
# ---------------------------------------------------------------------------

IRREGULAR_PAST = _freeze({
    "arise": "arose", "awake": "awoke", "be": "was", "bear": "bore", "beat": "beat",
    "become": "became", "begin": "began", "bend": "bent", "bet": "bet", "bind": "bound",
    "bite": "bit", "bleed": "bled", "blow": "blew", "break": "broke", "bring": "brought",
    "build": "built", "burn": "burned", "burst": "burst", "buy": "bought", "catch": "caught",
    "choose": "chose", "cling": "clung", "come": "came", "cost": "cost", "creep": "crept",
    "cut": "cut", "deal": "dealt", "dig": "dug", "do": "did", "draw": "drew",
    "dream": "dreamed", "drink": "drank", "drive": "drove", "eat": "ate", "fall": "fell",
    "feed": "fed", "feel": "felt", "fight": "fought", "find": "found", "flee": "fled",
    "fly": "flew", "forbid": "forbade", "forget": "forgot", "forgive": "forgave",
    "freeze": "froze", "get": "got", "give": "gave", "go": "went", "grind": "ground",
    "grow": "grew", "hang": "hung", "have": "had", "hear": "heard", "hide": "hid",
    "hit": "hit", "hold": "held", "hurt": "hurt", "keep": "kept", "kneel": "knelt",
    "know": "knew", "lay": "laid", "lead": "led", "leave": "left", "lend": "lent",
    "let": "let", "lie": "lay", "light": "lit", "lose": "lost", "make": "made",
    "mean": "meant", "meet": "met", "pay": "paid", "put": "put", "quit": "quit",
    "read": "read", "ride": "rode", "ring": "rang", "rise": "rose", "run": "ran",
    "say": "said", "see": "saw", "seek": "sought", "sell": "sold", "send": "sent",
    "set": "set", "shake": "shook", "shine": "shone", "shoot": "shot", "show": "showed",
    "shrink": "shrank", "shut": "shut", "sing": "sang", "sink": "sank", "sit": "sat",
    "sleep": "slept", "slide": "slid", "speak": "spoke", "spend": "spent", "spin": "spun",
    "split": "split", "spread": "spread", "stand": "stood", "steal": "stole",
    "stick": "stuck", "sting": "stung", "strike": "struck", "swear": "swore",
    "sweep": "swept", "swim": "swam", "swing": "swung", "take": "took", "teach": "taught",
    "tear": "tore", "tell": "told", "think": "thought", "throw": "threw",
    "understand": "understood", "wake": "woke", "wear": "wore", "weep": "wept",
    "win": "won", "wind": "wound", "write": "wrote",
})

IRREGULAR_PAST_PARTICIPLE = _freeze({
    "arise": "arisen", "awake": "awoken", "be": "been", "bear": "borne", "beat": "beaten",
    "become": "become", "begin": "begun", "bend": "bent", "bet": "bet", "bind": "bound",
    "bite": "bitten", "bleed": "bled", "blow": "blown", "break": "broken",
    "bring": "brought", "build": "built", "burn": "burned", "burst": "burst",
    "buy": "bought", "catch": "caught", "choose": "chosen", "cling": "clung",
    "come": "come", "cost": "cost", "creep": "crept", "cut": "cut", "deal": "dealt",
    "dig": "dug", "do": "done", "draw": "drawn", "dream": "dreamed", "drink": "drunk",
    "drive": "driven", "eat": "eaten", "fall": "fallen", "feed": "fed", "feel": "felt",
    "fight": "fought", "find": "found", "flee": "fled", "fly": "flown",
    "forbid": "forbidden", "forget": "forgotten", "forgive": "forgiven",
    "freeze": "frozen", "get": "gotten", "give": "given", "go": "gone",
    "grind": "ground", "grow": "grown", "hang": "hung", "have": "had", "hear": "heard",
    "hide": "hidden", "hit": "hit", "hold": "held", "hurt": "hurt", "keep": "kept",
    "kneel": "knelt", "know": "known", "lay": "laid", "lead": "led", "leave": "left",
    "lend": "lent", "let": "let", "lie": "lain", "light": "lit", "lose": "lost",
    "make": "made", "mean": "meant", "meet": "met", "pay": "paid", "put": "put",
    "quit": "quit", "read": "read", "ride": "ridden", "ring": "rung", "rise": "risen",
    "run": "run", "say": "said", "see": "seen", "seek": "sought", "sell": "sold",
    "send": "sent", "set": "set", "shake": "shaken", "shine": "shone", "shoot": "shot",
    "show": "shown", "shrink": "shrunk", "shut": "shut", "sing": "sung", "sink": "sunk",
    "sit": "sat", "sleep": "slept", "slide": "slid", "speak": "spoken", "spend": "spent",
    "spin": "spun", "split": "split", "spread": "spread", "stand": "stood",
    "steal": "stolen", "stick": "stuck", "sting": "stung", "strike": "struck",
    "swear": "sworn", "sweep": "swept", "swim": "swum", "swing": "swung",
    "take": "taken", "teach": "taught", "tear": "torn", "tell": "told",
    "think": "thought", "throw": "thrown", "understand": "understood", "wake": "woken",
    "wear": "worn", "weep": "wept", "win": "won", "wind": "wound", "write": "written",
})

IRREGULAR_PRESENT_PARTICIPLE = _freeze({
    "be": "being", "see": "seeing", "flee": "fleeing", "die": "dying",
    "dye": "dyeing", "singe": "singeing",
})

IRREGULAR_THIRD_PERSON = _freeze({
    "be": "is", "am": "is", "are": "is", "have": "has", "do": "does", "go": "goes",
    "say": "says", "fly": "flies", "try": "tries", "deny": "denies", "study": "studies",
})

# ---------------------------------------------------------------------------
# 2. Lemma index
# ---------------------------------------------------------------------------

_LEMMA_EXTRAS = {
    "was": "be", "were": "be", "is": "be", "am": "be", "are": "be", "been": "be",
    "being": "be", "has": "have", "had": "have", "does": "do", "did": "do", "done": "do",
}

IRREGULAR_LEMMA = _freeze({
    **_invert(IRREGULAR_PAST, IRREGULAR_PAST_PARTICIPLE, IRREGULAR_THIRD_PERSON),
    **_LEMMA_EXTRAS,
})

# Past forms used by clause transforms to pick "did".
IRREGULAR_PAST_FORMS = frozenset(IRREGULAR_PAST.values())

# Lemmas that merely end in "-ed": "need" is not a past form of "nee".
ED_ENDING_LEMMAS = frozenset({
    "need", "seed", "weed", "heed", "speed", "breed", "bleed", "feed", "shed", "wed",
    "embed", "proceed", "succeed", "exceed", "bed", "shred", "sled", "red",
})

# Unstressed final syllables: no consonant doubling ("opening", "visited").
NO_DOUBLING = frozenset({
    "open", "happen", "listen", "visit", "enter", "offer", "order", "answer", "edit",
    "limit", "credit", "benefit", "target", "budget", "focus", "develop", "gallop",
    "wonder", "whisper", "gather", "cover", "deliver", "consider", "remember", "suffer",
    "water", "color", "colour", "fasten", "frighten", "threaten", "widen", "darken",
    "sharpen", "lessen", "harden", "soften", "iron", "travel", "cancel", "label", "model",
})

# Final "c" hardens to "ck" before -ed and -ing ("panicked", "picnicking").
C_TAKES_K = frozenset({
    "panic", "picnic", "mimic", "traffic", "frolic", "bivouac", "shellac", "politic",
})

# ---------------------------------------------------------------------------
# 3. Nouns
# ---------------------------------------------------------------------------

IRREGULAR_PLURALS = _freeze({
    "child": "children", "person": "people", "man": "men", "woman": "women",
    "mouse": "mice", "louse": "lice", "goose": "geese", "tooth": "teeth",
    "foot": "feet", "ox": "oxen", "die": "dice",
})

IRREGULAR_SINGULARS = _freeze(_invert(IRREGULAR_PLURALS))

# Latin/Greek plurals, grouped by ending pattern.
CLASSICAL_US_TO_I = frozenset({
    "cactus", "focus", "fungus", "nucleus", "radius", "stimulus", "syllabus", "alumnus",
})
CLASSICAL_IS_TO_ES = frozenset({
    "analysis", "diagnosis", "crisis", "axis", "basis", "thesis", "parenthesis",
    "hypothesis", "oasis", "synopsis",
})
CLASSICAL_ON_UM_TO_A = frozenset({
    "phenomenon", "criterion", "datum", "medium", "bacterium", "curriculum", "memorandum",
})
CLASSICAL_IX_EX_TO_ICES = frozenset({
    "index", "appendix", "matrix", "vertex",
})
CLASSICAL_A_TO_AE = frozenset({
    "formula", "antenna", "larva", "vertebra",
})


def _classical_plural(noun: str) -> str:
    if noun in CLASSICAL_US_TO_I:
        return noun[:-2] + "i"
    if noun in CLASSICAL_IS_TO_ES:
        return noun[:-2] + "es"
    if noun in CLASSICAL_ON_UM_TO_A:
        return noun[:-2] + "a"
    if noun in CLASSICAL_IX_EX_TO_ICES:
        return noun[:-2] + "ices"
    return noun + "e"


CLASSICAL_PLURALS = _freeze({
    noun: _classical_plural(noun)
    for group in (
        CLASSICAL_US_TO_I,
        CLASSICAL_IS_TO_ES,
        CLASSICAL_ON_UM_TO_A,
        CLASSICAL_IX_EX_TO_ICES,
        CLASSICAL_A_TO_AE,
    )
    for noun in group
})

CLASSICAL_SINGULARS = _freeze(_invert(CLASSICAL_PLURALS))

# Classical nouns with an accepted anglicized plural ("cactuses", "indexes").
# A conservative pluralization prefers the anglicized form for these.
ANGLICIZED_CLASSICAL = frozenset({
    "cactus", "focus", "fungus", "syllabus", "radius",
    "index", "appendix", "matrix", "vertex",
    "formula", "antenna", "medium", "curriculum", "memorandum",
})

INVARIANT_PLURALS = frozenset({
    "sheep", "fish", "deer", "series", "species", "aircraft", "salmon", "trout",
    "bison", "moose", "swine", "offspring", "shrimp",
})

UNCOUNTABLES = frozenset({
    "information", "equipment", "furniture", "luggage", "baggage", "advice", "rice",
    "money", "news", "bread", "butter", "cheese", "coffee", "tea", "water", "milk",
    "sand", "traffic", "homework", "work", "music", "weather", "knowledge",
})

# -f / -fe nouns that take a plain "+s".
F_FE_TAKES_S = frozenset({
    "roof", "belief", "chef", "chief", "proof", "cliff", "reef", "gulf",
    "handkerchief", "safe", "giraffe", "staff",
})

# Nouns whose plural is "-ves"; singularize consults this set so that
# "gloves" and "waves" keep their "e".
F_TO_VES = frozenset({
    "leaf", "loaf", "thief", "wolf", "half", "calf", "elf", "shelf", "self",
    "sheaf", "scarf", "hoof", "dwarf", "wharf", "knife", "wife", "life",
})

# Singulars ending in "-ie": "movies" -> "movie", not "movy".
IE_NOUNS = frozenset({
    "movie", "cookie", "pie", "tie", "lie", "brownie", "zombie", "calorie",
    "hippie", "selfie", "rookie", "genie", "smoothie", "goalie", "prairie",
    "necktie", "hoodie", "birdie", "pixie", "veggie", "auntie",
})

# Singulars ending in "-oe": "shoes" -> "shoe", while "heroes" -> "hero".
OE_NOUNS = frozenset({"shoe", "toe", "canoe", "hoe", "oboe", "foe", "floe", "woe", "tiptoe"})

# -o nouns that take a plain "+s".
O_TAKES_S = frozenset({
    "piano", "photo", "halo", "solo", "soprano", "radio", "studio", "video", "zoo",
    "kilo", "memo", "avocado", "taco", "kangaroo", "logo", "auto", "euro", "disco",
})

# ---------------------------------------------------------------------------
# 4. Adjectives / adverbs
# ---------------------------------------------------------------------------

IRREGULAR_COMPARATIVES = _freeze({
    "good": "better", "well": "better", "bad": "worse", "far": "farther",
    "little": "less", "many": "more", "much": "more",
})

IRREGULAR_SUPERLATIVES = _freeze({
    "good": "best", "well": "best", "bad": "worst", "far": "farthest",
    "little": "least", "many": "most", "much": "most",
})

IRREGULAR_ADJECTIVE_TO_ADVERB = _freeze({
    "good": "well", "fast": "fast", "hard": "hard", "late": "late", "early": "early",
    "true": "truly", "whole": "wholly", "due": "duly",
    "public": "publicly",  # exception to the "-ic" -> "-ically" rule
})

IRREGULAR_ADVERB_TO_ADJECTIVE = _freeze({
    "well": "good", "fast": "fast", "hard": "hard", "late": "late", "early": "early",
    "truly": "true", "wholly": "whole", "duly": "due", "publicly": "public",
    "gently": "gentle", "fully": "full", "dully": "dull", "shrilly": "shrill",
})

# ---------------------------------------------------------------------------
# 5. Clause vocabulary
# ---------------------------------------------------------------------------

AUXILIARIES = frozenset({
    "am", "is", "are", "was", "were", "be", "been", "being",
    "do", "does", "did",
    "have", "has", "had",
    "can", "will", "shall", "may", "might", "must", "should", "would", "could",
})

CONTRACTIONS = _freeze({
    "am": "am not", "is": "isn't", "are": "aren't", "was": "wasn't", "were": "weren't",
    "do": "don't", "does": "doesn't", "did": "didn't",
    "have": "haven't", "has": "hasn't", "had": "hadn't",
    "can": "can't", "will": "won't", "would": "wouldn't", "should": "shouldn't",
    "could": "couldn't", "might": "mightn't", "must": "mustn't",
})

PARTICLES = frozenset({
    "up", "off", "out", "in", "over", "on", "away", "back", "down", "through", "about",
    "around", "along", "together", "apart", "by", "for", "after", "into", "onto", "under",
})

# Words that open a two-word subject ("the dog", "my sister").
DETERMINERS = frozenset({
    "the", "a", "an", "my", "your", "his", "her", "its", "our", "their",
    "this", "that", "these", "those", "some", "every", "each", "no",
})

# ---------------------------------------------------------------------------
# 6. Pronouns
# ---------------------------------------------------------------------------

# subject, object, possessive determiner, possessive pronoun, reflexive
_I = ("I", "me", "my", "mine", "myself")
_YOU = ("you", "you", "your", "yours", "yourself")
_HE = ("he", "him", "his", "his", "himself")
_SHE = ("she", "her", "her", "hers", "herself")
_IT = ("it", "it", "its", "its", "itself")
_WE = ("we", "us", "our", "ours", "ourselves")
_THEY = ("they", "them", "their", "theirs", "themselves")

PRONOUN_VARIANTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "i": _I, "me": _I, "my": _I, "mine": _I, "myself": _I,
    "you": _YOU, "your": _YOU, "yours": _YOU, "yourself": _YOU,
    "he": _HE, "him": _HE, "his": _HE, "himself": _HE,
    "she": _SHE, "her": _SHE, "hers": _SHE, "herself": _SHE,
    "it": _IT, "its": _IT, "itself": _IT,
    "we": _WE, "us": _WE, "our": _WE, "ours": _WE, "ourselves": _WE,
    "they": _THEY, "them": _THEY, "their": _THEY, "theirs": _THEY, "themselves": _THEY,
})

# ---------------------------------------------------------------------------
# 7. Articles
# ---------------------------------------------------------------------------

SILENT_H_PREFIXES = ("honest", "honor", "honour", "hour", "heir", "herb")

CONSONANT_SOUND_VOWEL_PREFIXES = (
    "university", "unit", "user", "usual", "european", "eulogy", "euphemism",
    "eureka", "ubiquitous", "unicorn", "unique", "uniform", "one", "once", "ouija",
)

# Letters whose spoken name starts with a vowel sound ("an FBI agent").
VOWEL_NAMED_LETTERS = frozenset("AEFHILMNORSX")
