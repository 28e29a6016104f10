import pytest

from src.kv_store import redis_client


class FakeRedis:
    """Stand-in for upstash_redis.Redis that records how it was built."""

    instances = []

    def __init__(self, url, token, **kwargs):
        self.url = url
        self.token = token
        self.kwargs = kwargs
        self.reachable = True
        FakeRedis.instances.append(self)

    def ping(self):
        if not self.reachable:
            raise ConnectionError("store unreachable")
        return "PONG"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # Keep a developer's .env and shell exports out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("UPSTASH_REDIS_URL", raising=False)
    monkeypatch.delenv("UPSTASH_REDIS_TOKEN", raising=False)


@pytest.fixture
def fake_redis(monkeypatch):
    FakeRedis.instances = []
    monkeypatch.setattr(redis_client, "Redis", FakeRedis)
    return FakeRedis


@pytest.fixture
def store_env(monkeypatch):
    monkeypatch.setenv("UPSTASH_REDIS_URL", "https://example.upstash.io")
    monkeypatch.setenv("UPSTASH_REDIS_TOKEN", "abc123")
