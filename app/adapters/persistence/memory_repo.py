# app/adapters/persistence/memory_repo.py
import threading
from typing import Dict, Optional

from app.core.ports import OverridesRepository


class InMemoryOverridesRepository(OverridesRepository):
    """Dict-backed overrides port. Durable only for the life of the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._records: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def load(self, key: str) -> Optional[str]:
        with self._lock:
            return self._records.get(key)

    def save(self, key: str, payload: str) -> None:
        with self._lock:
            self._records[key] = payload

    def delete(self, key: str) -> None:
        with self._lock:
            self._records.pop(key, None)

    def keys(self):
        with self._lock:
            return sorted(self._records)
