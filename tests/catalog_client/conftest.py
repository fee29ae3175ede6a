import pytest
from respx import MockRouter

from catalog_client import CatalogClient, CatalogEntry

@pytest.fixture
def respx_mock() -> MockRouter:
    """Provides a RESPX mock router for mocking HTTPX requests."""
    router = MockRouter(assert_all_called=False)
    with router:
        yield router

@pytest.fixture
def mock_client_env(monkeypatch):
    """Clears catalog env vars so defaults apply."""
    monkeypatch.delenv("SMARTBLOCKS_API_URL", raising=False)
    monkeypatch.delenv("SMARTBLOCKS_TIMEOUT_SECONDS", raising=False)
    return monkeypatch

@pytest.fixture
def client(mock_client_env):
    return CatalogClient(base_url="https://catalog.example.com")

@pytest.fixture
def sample_entries():
    """A small catalog with entries for every tab, authored by three graphs."""
    return [
        CatalogEntry(id="1", name="Daily Notes", tags=["journal", "daily"], author="alice", description="Start the day"),
        CatalogEntry(id="2", name="Weekly Review", tags=["review"], author="bob", price=500),
        CatalogEntry(id="3", name="My Template", tags=["template"], author="me", description="Personal"),
        CatalogEntry(id="4", name="Book Notes", tags=["reading"], author="carol"),
        CatalogEntry(id="5", name="Standup", tags=[], author="me"),
    ]
