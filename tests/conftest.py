# tests/conftest.py
import pytest
from unittest.mock import MagicMock

from app.adapters.persistence.filesystem_repo import FileSystemOverridesRepository
from app.adapters.persistence.memory_repo import InMemoryOverridesRepository
from app.adapters.persistence.redis_repo import RedisOverridesRepository
from app.core.domain.models import MorphologyOverrides
from app.services.overrides_store import OverridesStore
from app.shared.container import Container
from morphology.engine import MorphologyEngine
from morphology.english import EnglishRules


@pytest.fixture(scope="function")
def memory_repo():
    """A fresh dict-backed repository per test."""
    return InMemoryOverridesRepository()


@pytest.fixture(scope="function")
def store(memory_repo):
    return OverridesStore(memory_repo)


@pytest.fixture(scope="function")
def engine(store):
    """English engine bound to an isolated, in-memory overrides store."""
    return MorphologyEngine("en", overrides_store=store)


@pytest.fixture
def rules():
    return EnglishRules()


@pytest.fixture
def no_overrides():
    return MorphologyOverrides()


@pytest.fixture(scope="function")
def fs_repo(tmp_path):
    return FileSystemOverridesRepository(str(tmp_path / "overrides"))


@pytest.fixture(scope="function")
def mock_redis():
    """A MagicMock standing in for a redis.Redis client, backed by a dict."""
    data = {}
    client = MagicMock()
    client.get.side_effect = lambda key: data.get(key)
    client.set.side_effect = lambda key, value: data.__setitem__(key, value)
    client.delete.side_effect = lambda key: data.pop(key, None)
    client.data = data
    return client


@pytest.fixture(scope="function")
def redis_repo(mock_redis):
    return RedisOverridesRepository(client=mock_redis)


@pytest.fixture(scope="function")
def container(memory_repo):
    """
    Container with the repository provider overridden by the in-memory one.
    """
    container = Container()
    container.overrides_repository.override(memory_repo)

    yield container

    container.overrides_repository.reset_override()
