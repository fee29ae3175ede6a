import logging
from typing import Dict, List

from .markers import METADATA_LABELS
from .store import TreeStore
from .types import WorkflowMetadata

logger = logging.getLogger(__name__)

class MetadataExtractor:
    """
    Reads catalog metadata stored next to a workflow rather than inside it.

    Every node referencing the workflow root may carry labeled groups
    (description, image, tags, uuid) whose children are the values. For each
    label the first non-empty group wins, walking referencing nodes in the
    store's enumeration order and their groups top to bottom. Unknown labels
    are ignored.
    """
    def __init__(self, store: TreeStore):
        self.store = store

    async def extract(self, target_uid: str) -> WorkflowMetadata:
        found: Dict[str, List[str]] = {}
        for ref_uid in await self.store.get_referencing_uids(target_uid):
            tree = await self.store.get_tree(ref_uid)
            for group in tree.children:
                label = group.text.strip().lower()
                if label not in METADATA_LABELS or label in found:
                    continue
                values = [child.text for child in group.children]
                if values:
                    found[label] = values
        logger.debug(f"Metadata for {target_uid}: labels {sorted(found)}")
        return WorkflowMetadata(**{label: found.get(label, []) for label in METADATA_LABELS})
