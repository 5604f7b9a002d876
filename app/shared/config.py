# app/shared/config.py
import os
from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class StorageBackend(str, Enum):
    FILESYSTEM = "filesystem"
    REDIS = "redis"
    MEMORY = "memory"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be set with a
    MORPH_-prefixed environment variable or in a .env file.
    """

    # --- Application Meta ---
    APP_NAME: str = "Morphology Engine"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Language ---
    DEFAULT_LANGUAGE: str = "en"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # --- Persistence ---
    STORAGE_BACKEND: StorageBackend = StorageBackend.FILESYSTEM

    # FILESYSTEM CONFIG
    FILESYSTEM_REPO_PATH: str = os.path.join(os.getcwd(), "data")

    # REDIS CONFIG
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = "MorphOverrides."

    @property
    def OVERRIDES_DIR(self) -> str:
        return os.path.join(self.FILESYSTEM_REPO_PATH, "overrides")

    model_config = SettingsConfigDict(env_prefix="MORPH_", env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
