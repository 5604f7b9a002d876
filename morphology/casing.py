"""
morphology/casing.py

Case helpers shared by every rules variant.

Stored forms (rule tables and user overrides) are lowercase canonical; the
rules compute a lowercase result and then copy the casing pattern of the
word the caller typed onto it with `match_case`.
"""


def is_all_upper(word: str) -> bool:
    """True when the word has cased characters and all of them are uppercase."""
    return word == word.upper() and word != word.lower()


def match_case(original: str, replacement: str) -> str:
    """
    Reproduce the capitalization pattern of `original` on `replacement`.

    - all-uppercase original -> uppercase replacement ("GO" -> "WENT")
    - first character uppercase -> capitalize only the first character of
      the replacement, leaving the rest as is ("Go" -> "Went")
    - otherwise -> replacement unchanged
    """
    if not original or not replacement:
        return replacement
    if is_all_upper(original):
        return replacement.upper()
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def capitalize_first(word: str) -> str:
    if not word:
        return word
    return word[0].upper() + word[1:]


def decapitalize_first(word: str) -> str:
    if not word:
        return word
    return word[0].lower() + word[1:]


def is_proper_name(token: str) -> bool:
    """
    Heuristic: an acronym ("NASA") or a Titlecase token ("John").
    """
    if not token:
        return False
    if len(token) > 1 and is_all_upper(token):
        return True
    return token[0].isupper() and not any(ch.isupper() for ch in token[1:])
