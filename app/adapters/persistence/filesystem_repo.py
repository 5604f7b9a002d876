# app/adapters/persistence/filesystem_repo.py
import os
import tempfile
from pathlib import Path
from typing import Optional

from app.core.domain.exceptions import OverridesPersistenceError
from app.core.ports import OverridesRepository
from utils.logging_setup import get_logger

logger = get_logger(__name__)


class FileSystemOverridesRepository(OverridesRepository):
    """
    Concrete implementation of the overrides port using local JSON files.
    One record per language: '<base_path>/<key>.json'.
    """

    def __init__(self, base_path: str):
        self.root = Path(base_path).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, key: str, operation: str) -> Path:
        # Record keys are bare language subtags, never path fragments.
        if not (key.isascii() and key.isalpha()):
            raise OverridesPersistenceError(key, operation, "invalid record key")
        return self.root / f"{key}.json"

    def load(self, key: str) -> Optional[str]:
        path = self._get_file_path(key, "read")
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("repo_read_failed", lang=key, path=str(path), error=str(e))
            raise OverridesPersistenceError(key, "read", str(e)) from e

    def save(self, key: str, payload: str) -> None:
        path = self._get_file_path(key, "write")
        # Write to a sibling temp file and swap it in, so a crash never
        # leaves a half-written record behind.
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.root)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error("repo_write_failed", lang=key, path=str(path), error=str(e))
            raise OverridesPersistenceError(key, "write", str(e)) from e
        logger.debug("repo_record_saved", lang=key, path=str(path))

    def delete(self, key: str) -> None:
        path = self._get_file_path(key, "delete")
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise OverridesPersistenceError(key, "delete", str(e)) from e
