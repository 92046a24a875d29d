import pytest
from django.core.cache import cache

from dashboard.services.remote_store import RemoteStoreConfig
from dashboard.services.sync import pull
from dashboard.state import reset_state
from dashboard.tests.fakes import FakeRemoteStore


@pytest.fixture(autouse=True)
def _clean_throttle_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def remote():
    return FakeRemoteStore()


@pytest.fixture
def offline_state():
    """State with no remote store configured and empty collections."""
    return reset_state(client=FakeRemoteStore(), config=RemoteStoreConfig())


@pytest.fixture
def state(remote):
    """Connected state loaded from the sample payload."""
    s = reset_state(client=remote, config=RemoteStoreConfig(url='https://sheets.example/exec', enabled=True))
    assert pull(s)
    s.notifications.drain()
    return s
