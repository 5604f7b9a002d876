"""
morphology.tokenizer
====================

Word segmentation with source spans, used by the engine's text operations.

A word is a run of letters, digits and combining marks, optionally joined by
internal connectors (apostrophes, periods, "@", hyphens, underscores), so
"don't", "e.g", "co-op" and "me@example.com" are single tokens while
surrounding punctuation and whitespace never are.

For languages that elide articles and pronouns (French, Italian, Catalan)
the elided clitic is split off: "l'homme" -> "l'", "homme".

Typical usage
-------------
>>> [t.text for t in tokenize_words("Hello, world!", "en")]
['Hello', 'world']
>>> split_trailing_punctuation("cats!?")
('cats', '!?')
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import List, Tuple

from app.core.domain.models import primary_language

__all__ = [
    "Token",
    "tokenize_words",
    "split_trailing_punctuation",
    "words_from",
    "replace_span",
]

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Letters/digits plus the common combining-mark blocks ("é").
_WORD_CHARS = r"[\w\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f]"
_CONNECTORS = r"['’.@\-_]"

_WORD_RE = re.compile(rf"{_WORD_CHARS}+(?:{_CONNECTORS}{_WORD_CHARS}+)*")

# Elided clitic at the start of a word: l'homme, qu'il, d'accord, j’ai.
_ELISION_RE = re.compile(rf"(?i)(?:qu|[cdjlmnst])['’](?={_WORD_CHARS})")

_ELIDING_LANGUAGES = frozenset({"fr", "it", "ca"})

_APOSTROPHES = ("'", "’")


@dataclass(frozen=True)
class Token:
    """A word and its [start, end) span in the source text."""

    text: str
    start: int
    end: int


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def tokenize_words(text: str, language: str = "en") -> List[Token]:
    """Segment `text` into word tokens in source order."""
    if not text:
        return []
    split_elision = primary_language(language) in _ELIDING_LANGUAGES

    tokens: List[Token] = []
    for match in _WORD_RE.finditer(text):
        start, end = match.span()
        if split_elision:
            start = _emit_elisions(text, start, end, tokens)
        if start < end:
            tokens.append(Token(text[start:end], start, end))
    return tokens


def split_trailing_punctuation(token: str) -> Tuple[str, str]:
    """
    Split a token into (core, trailing punctuation).

    Scans backward while the character is neither alphanumeric, a combining
    mark, nor an apostrophe, so "cats'" keeps its possessive apostrophe.
    """
    if not token:
        return "", ""
    split = len(token)
    while split > 0:
        ch = token[split - 1]
        if ch.isalnum() or ch in _APOSTROPHES or unicodedata.category(ch).startswith("M"):
            break
        split -= 1
    return token[:split], token[split:]


def words_from(text: str, language: str = "en") -> List[str]:
    """Token cores (trailing punctuation removed), blanks dropped."""
    words: List[str] = []
    for token in tokenize_words(text, language):
        core, _ = split_trailing_punctuation(token.text)
        word = core or token.text
        if word.strip():
            words.append(word)
    return words


def replace_span(text: str, start: int, end: int, replacement: str) -> str:
    return text[:start] + replacement + text[end:]


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _emit_elisions(text: str, start: int, end: int, tokens: List[Token]) -> int:
    # Clitics only split at the start of a token and may chain ("qu'l'").
    while start < end:
        clitic = _ELISION_RE.match(text, start, end)
        if clitic is None:
            break
        tokens.append(Token(clitic.group(0), clitic.start(), clitic.end()))
        start = clitic.end()
    return start
