# app/adapters/persistence/redis_repo.py
from typing import Optional

import redis

from app.core.domain.exceptions import OverridesPersistenceError
from app.core.ports import OverridesRepository
from utils.logging_setup import get_logger

logger = get_logger(__name__)


class RedisOverridesRepository(OverridesRepository):
    """
    Overrides port backed by Redis: one string value per language,
    stored under '<prefix><key>' (e.g. 'MorphOverrides.en').
    """

    def __init__(
        self,
        client: Optional["redis.Redis"] = None,
        url: str = "redis://localhost:6379/0",
        prefix: str = "MorphOverrides.",
    ):
        self.client = client if client is not None else redis.from_url(url, decode_responses=True)
        self.prefix = prefix

    def _redis_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def load(self, key: str) -> Optional[str]:
        try:
            raw = self.client.get(self._redis_key(key))
        except (redis.exceptions.RedisError, UnicodeDecodeError) as e:
            logger.error("redis_read_failed", lang=key, error=str(e))
            raise OverridesPersistenceError(key, "read", str(e)) from e
        if raw is None:
            return None
        if isinstance(raw, bytes):
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.error("redis_read_failed", lang=key, error=str(e))
                raise OverridesPersistenceError(key, "read", str(e)) from e
        return raw

    def save(self, key: str, payload: str) -> None:
        try:
            self.client.set(self._redis_key(key), payload)
        except redis.exceptions.RedisError as e:
            logger.error("redis_write_failed", lang=key, error=str(e))
            raise OverridesPersistenceError(key, "write", str(e)) from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(self._redis_key(key))
        except redis.exceptions.RedisError as e:
            raise OverridesPersistenceError(key, "delete", str(e)) from e
