import pytest

from workflow_sync import ConfigurationError, InMemoryTreeStore, PublishIndex, TransportNode

@pytest.mark.asyncio
async def test_read_token_without_index_is_empty_and_read_only(store, config_page_uid):
    index = PublishIndex(store)

    assert await index.read_token() == ""
    assert await store.get_children(config_page_uid) == []

@pytest.mark.asyncio
async def test_read_token(store, config_page_uid):
    await store.create_node(config_page_uid, "publish", children=[
        TransportNode(text="Token", children=[TransportNode(text="  tok-123 ")]),
    ])

    assert await PublishIndex(store).read_token() == "tok-123"

@pytest.mark.asyncio
async def test_ensure_index_reuses_existing(store, config_page_uid):
    existing = await store.create_node(config_page_uid, "Publish")
    index = PublishIndex(store)

    assert await index.ensure_index() == existing
    assert len(await store.get_children(config_page_uid)) == 1

@pytest.mark.asyncio
async def test_record_creates_then_overwrites(store):
    index = PublishIndex(store)

    record_uid = await index.record("wf-uid", "id-1")
    again_uid = await index.record("wf-uid", "id-2")

    assert again_uid == record_uid
    record = await store.get_tree(record_uid)
    assert record.text == "((wf-uid))"
    assert [child.text for child in record.children] == ["uuid"]
    assert [value.text for value in record.children[0].children] == ["id-2"]
    assert await index.recorded_id("wf-uid") == "id-2"

@pytest.mark.asyncio
async def test_records_are_kept_per_workflow(store):
    index = PublishIndex(store)

    await index.record("wf-a", "id-a")
    await index.record("wf-b", "id-b")

    assert await index.recorded_id("wf-a") == "id-a"
    assert await index.recorded_id("wf-b") == "id-b"
    index_uid = await index.find_index()
    assert len(await store.get_children(index_uid)) == 2

@pytest.mark.asyncio
async def test_recorded_id_unknown_workflow(store):
    assert await PublishIndex(store).recorded_id("never") is None

@pytest.mark.asyncio
async def test_missing_config_page():
    index = PublishIndex(InMemoryTreeStore())

    assert await index.read_token() == ""
    with pytest.raises(ConfigurationError, match="roam/js/smartblocks"):
        await index.record("wf", "id")
