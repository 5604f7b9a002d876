# app/shared/container.py
from typing import Optional

from dependency_injector import containers, providers

from app.shared.config import Settings, get_settings

# --- Adapters ---
from app.adapters.persistence.filesystem_repo import FileSystemOverridesRepository
from app.adapters.persistence.memory_repo import InMemoryOverridesRepository
from app.adapters.persistence.redis_repo import RedisOverridesRepository

# --- Services ---
from app.services.overrides_store import OverridesStore
from morphology.engine import MorphologyEngine


def _storage_backend(settings: Settings) -> str:
    return settings.STORAGE_BACKEND.value


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.
    Connects the overrides adapters to the store and hands the store to
    every engine it builds.
    """

    # 1. Configuration
    settings = providers.Singleton(get_settings)

    # 2. Persistence (Selector: filesystem vs redis vs memory)
    overrides_repository = providers.Selector(
        providers.Callable(_storage_backend, settings),
        filesystem=providers.Singleton(
            FileSystemOverridesRepository,
            base_path=settings.provided.OVERRIDES_DIR,
        ),
        redis=providers.Singleton(
            RedisOverridesRepository,
            url=settings.provided.REDIS_URL,
            prefix=settings.provided.REDIS_KEY_PREFIX,
        ),
        memory=providers.Singleton(InMemoryOverridesRepository),
    )

    # 3. Services
    # One store per process: every engine sees the same cached bundles.
    overrides_store = providers.Singleton(OverridesStore, repository=overrides_repository)

    morphology_engine = providers.Factory(
        MorphologyEngine,
        language_code=settings.provided.DEFAULT_LANGUAGE,
        overrides_store=overrides_store,
    )


# Global Container Instance
container = Container()

_default_engine: Optional[MorphologyEngine] = None


def get_default_engine() -> MorphologyEngine:
    """
    Process-wide convenience engine for application entry points.

    Library code should take an engine (or build one from `container`)
    instead of reaching for this.
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = container.morphology_engine()
    return _default_engine


def reset_default_engine() -> None:
    """Forget the default engine; the next call builds a fresh one."""
    global _default_engine
    _default_engine = None
