"""
morphology/germanic.py

Rules for Germanic languages other than English.

German (de) is registered so that a German-speaking user gets a rules
object of its own, but it has no German morphology yet: every operation is
forwarded to the English rules and `supports()` only reports tokenization.
Callers that want to hide English-only controls should check `supports()`.

    rules = GermanRules()
    rules.supports(Feature.VERBS)        # False
    rules.pluralize("Kind", False, MorphologyOverrides())   # English result
"""

from morphology.base import DelegatingRules


class GermanRules(DelegatingRules):
    def __init__(self, language_code: str = "de"):
        super().__init__(language_code)
