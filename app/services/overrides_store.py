# app/services/overrides_store.py
"""
Language-scoped overrides store.

- Bundles are cached in memory by primary language subtag ('en' serves
  'en-US' and 'en-GB').
- The first `get` for a language lazily loads the durable record; a missing,
  unreadable or malformed record yields an empty bundle.
- `set` / `update` persist immediately. A failed write is logged and the
  in-memory cache stays authoritative for the running session.
- One re-entrant lock per store serializes every read-modify-persist
  sequence, so concurrent updates never lose each other's changes.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, Optional

from pydantic import ValidationError

from app.core.domain.exceptions import OverridesPersistenceError
from app.core.domain.models import MorphologyOverrides, primary_language
from app.core.ports import OverridesRepository
from utils.logging_setup import get_logger

logger = get_logger(__name__)

Mutator = Callable[[MorphologyOverrides], None]


class OverridesStore:
    def __init__(self, repository: OverridesRepository):
        self._repository = repository
        self._by_language: Dict[str, MorphologyOverrides] = {}
        self._lock = threading.RLock()

    @property
    def repository(self) -> OverridesRepository:
        return self._repository

    # --------------------- public API ---------------------------

    def get(self, language: str) -> MorphologyOverrides:
        """Return the bundle for a language. Never raises for a string code."""
        key = primary_language(language)
        cached = self._by_language.get(key)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._by_language.get(key)
            if cached is not None:
                return cached
            loaded = self._load(key) or MorphologyOverrides()
            self._by_language[key] = loaded
            return loaded

    def set(self, language: str, overrides: MorphologyOverrides) -> MorphologyOverrides:
        """Replace the bundle for a language and persist it."""
        key = primary_language(language)
        with self._lock:
            current = MorphologyOverrides.model_validate(overrides.model_dump())
            self._by_language[key] = current
            self._persist(key, current)
            return current

    def update(self, language: str, mutate: Mutator) -> MorphologyOverrides:
        """
        Read-modify-persist under the store lock.

        `mutate` receives a private copy of the current bundle and edits it in
        place. Keys written by the mutator are normalized before caching.
        """
        key = primary_language(language)
        with self._lock:
            current = self._by_language.get(key)
            if current is None:
                current = self._load(key) or MorphologyOverrides()
            working = current.model_copy(deep=True)
            mutate(working)
            updated = MorphologyOverrides.model_validate(working.model_dump())
            self._by_language[key] = updated
            self._persist(key, updated)
            return updated

    def evict(self, language: Optional[str] = None) -> None:
        """Drop cached bundles; the next `get` reloads from durable storage."""
        with self._lock:
            if language is None:
                self._by_language.clear()
            else:
                self._by_language.pop(primary_language(language), None)

    # --------------------- internals ----------------------------

    def _persist(self, key: str, overrides: MorphologyOverrides) -> None:
        payload = overrides.model_dump_json()
        try:
            self._repository.save(key, payload)
        except OverridesPersistenceError as e:
            logger.warning("overrides_persist_failed", lang=key, error=str(e))
            return
        logger.debug("overrides_persisted", lang=key, bytes=len(payload))

    def _load(self, key: str) -> Optional[MorphologyOverrides]:
        try:
            payload = self._repository.load(key)
        except OverridesPersistenceError as e:
            logger.warning("overrides_load_failed", lang=key, error=str(e))
            return None
        if not payload:
            return None
        try:
            loaded = MorphologyOverrides.model_validate_json(payload)
        except ValidationError as e:
            logger.warning("overrides_decode_failed", lang=key, errors=e.error_count())
            return None
        logger.info("overrides_loaded", lang=key)
        return loaded
