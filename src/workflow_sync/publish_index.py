import logging
from typing import Optional

from .exceptions import ConfigurationError
from .markers import (
    CONFIG_PAGE_TITLE,
    PUBLISH_INDEX_ORDER,
    PUBLISH_LABEL,
    PUBLISH_RECORD_ORDER,
    TOKEN_LABEL,
    UUID_LABEL,
    flex_pattern,
    reference_token,
)
from .store import TreeStore

logger = logging.getLogger(__name__)

class PublishIndex:
    """
    Local bookkeeping of published workflows.

    Layout under the configuration page:

        publish
          token
            <publish token>
          ((<workflow uid>))
            uuid
              <catalog id>

    One record per workflow uid. Its uuid value is overwritten on republish.
    """
    def __init__(self, store: TreeStore, page_title: str = CONFIG_PAGE_TITLE):
        self.store = store
        self.page_title = page_title

    async def page_uid(self) -> str:
        uid = await self.store.get_page_uid(self.page_title)
        if not uid:
            raise ConfigurationError(f"Configuration page [[{self.page_title}]] does not exist.")
        return uid

    async def find_index(self) -> Optional[str]:
        page_uid = await self.store.get_page_uid(self.page_title)
        if not page_uid:
            return None
        return await self.store.find_child(page_uid, flex_pattern(PUBLISH_LABEL))

    async def ensure_index(self) -> str:
        page_uid = await self.page_uid()
        index_uid = await self.store.find_child(page_uid, flex_pattern(PUBLISH_LABEL))
        if index_uid:
            return index_uid
        logger.info(f"Creating '{PUBLISH_LABEL}' index on [[{self.page_title}]]")
        return await self.store.create_node(page_uid, PUBLISH_LABEL, order=PUBLISH_INDEX_ORDER)

    async def read_token(self) -> str:
        """Returns the stored publish token, or an empty string. Never writes."""
        index_uid = await self.find_index()
        if not index_uid:
            return ""
        token_uid = await self.store.find_child(index_uid, flex_pattern(TOKEN_LABEL))
        if not token_uid:
            return ""
        return (await self.store.get_first_child_text(token_uid) or "").strip()

    async def _find_record_in(self, index_uid: str, target_uid: str) -> Optional[str]:
        ref = reference_token(target_uid)
        for child in await self.store.get_children(index_uid):
            if child.text.strip() == ref:
                return child.uid
        return None

    async def find_record(self, target_uid: str) -> Optional[str]:
        index_uid = await self.find_index()
        if not index_uid:
            return None
        return await self._find_record_in(index_uid, target_uid)

    async def recorded_id(self, target_uid: str) -> Optional[str]:
        """Last catalog id recorded for a workflow, if it was ever published from this graph."""
        record_uid = await self.find_record(target_uid)
        if not record_uid:
            return None
        uuid_uid = await self.store.find_child(record_uid, flex_pattern(UUID_LABEL))
        if not uuid_uid:
            return None
        return await self.store.get_first_child_text(uuid_uid)

    async def record(self, target_uid: str, entry_id: str) -> str:
        """
        Stores entry_id as the catalog id of target_uid and returns the record uid.

        Each step needs the uid produced by the one before it, so they run
        strictly in sequence.
        """
        index_uid = await self.ensure_index()
        record_uid = await self._find_record_in(index_uid, target_uid)
        if not record_uid:
            record_uid = await self.store.create_node(
                index_uid, reference_token(target_uid), order=PUBLISH_RECORD_ORDER
            )
        uuid_uid = await self.store.find_child(record_uid, flex_pattern(UUID_LABEL))
        if not uuid_uid:
            uuid_uid = await self.store.create_node(record_uid, UUID_LABEL)
        value_uid = await self.store.get_first_child_uid(uuid_uid)
        if value_uid:
            await self.store.update_node(value_uid, entry_id)
        else:
            await self.store.create_node(uuid_uid, entry_id)
        logger.info(f"Recorded catalog id {entry_id} for workflow {target_uid}")
        return record_uid
