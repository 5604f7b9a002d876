# app/core/domain/exceptions.py
"""
Domain exceptions.

Transformations never raise on text input; these errors only describe
infrastructure problems (persistence, rules resolution). The overrides
store catches persistence errors and logs them.
"""


class MorphologyError(Exception):
    """Base class for all morphology engine errors."""


class OverridesPersistenceError(MorphologyError):
    """A durable overrides record could not be read or written."""

    def __init__(self, key: str, operation: str, reason: str = ""):
        self.key = key
        self.operation = operation
        self.reason = reason
        message = f"Overrides {operation} failed for '{key}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownRulesError(MorphologyError):
    """A rules registry entry points at a module or class that does not exist."""

    def __init__(self, language_code: str, target: str):
        self.language_code = language_code
        self.target = target
        super().__init__(f"Rules for '{language_code}' could not be resolved ({target})")
