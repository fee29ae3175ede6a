from unittest.mock import AsyncMock

import pytest

from catalog_client import CatalogClient, CatalogEntry, UpsertResult
from workflow_sync import InMemoryTreeStore
from workflow_sync.markers import CONFIG_PAGE_TITLE

@pytest.fixture
def store():
    """An in-memory graph with the SmartBlocks configuration page and a 'Workflows' page."""
    tree_store = InMemoryTreeStore(graph="test-graph")
    tree_store.add_page(CONFIG_PAGE_TITLE)
    tree_store.add_page("Workflows")
    return tree_store

@pytest.fixture
def config_page_uid(store):
    return store.add_page(CONFIG_PAGE_TITLE)

@pytest.fixture
def workflows_page_uid(store):
    return store.add_page("Workflows")

@pytest.fixture
def mock_catalog():
    """A CatalogClient double whose upsert assigns 'catalog-id-1' to new entries and echoes existing ids."""
    catalog = AsyncMock(spec=CatalogClient)

    async def upsert(payload, token):
        return UpsertResult(id=payload.get("id", "catalog-id-1"), requires_review=False)

    catalog.upsert_entry = AsyncMock(side_effect=upsert)
    catalog.get_entry = AsyncMock(return_value=CatalogEntry(
        id="abc", name="Demo", author="someone",
        workflow="[{\"text\":\"Step 1\",\"children\":[]}]",
    ))
    return catalog
