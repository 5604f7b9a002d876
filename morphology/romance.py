"""
morphology/romance.py

Rules for Romance languages (ES, FR).

Both are placeholders over the English rules (see `DelegatingRules`). The
tokenizer already treats French elision natively ("l'homme" -> "l'",
"homme"); everything else is forwarded unchanged.
"""

from morphology.base import DelegatingRules


class SpanishRules(DelegatingRules):
    def __init__(self, language_code: str = "es"):
        super().__init__(language_code)


class FrenchRules(DelegatingRules):
    def __init__(self, language_code: str = "fr"):
        super().__init__(language_code)
