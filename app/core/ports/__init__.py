# app/core/ports/__init__.py
"""
Core Ports (Interfaces).

Abstract base classes the infrastructure adapters implement. The overrides
store talks to durable storage only through `OverridesRepository`, so the
filesystem, Redis and in-memory backends are interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Optional

# =========================================================
# PERSISTENCE PORTS
# =========================================================


class OverridesRepository(ABC):
    """
    Port for the durable key-value record holding one serialized
    overrides bundle per primary language subtag.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the serialized record for `key`, or None if absent."""
        pass

    @abstractmethod
    def save(self, key: str, payload: str) -> None:
        """Replace the serialized record for `key`."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the record for `key` (no-op when absent)."""
        pass


# =========================================================
# EXPORTS
# =========================================================
__all__ = [
    "OverridesRepository",
]
