import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from catalog_client import CatalogClient, CatalogError, InvalidRequestError

from . import codec
from .exceptions import WorkflowSyncError
from .markers import WORKFLOW_MARKER
from .store import TreeStore
from .types import TransportNode

logger = logging.getLogger(__name__)

class InstallState(str, Enum):
    IDLE = "idle"
    INSTALLING = "installing"
    SUCCESS = "success"
    FAILED = "failed"

@dataclass
class InstallOutcome:
    entry_id: str
    root_uid: Optional[str] = None
    location: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

class InstallCoordinator:
    """Installs a catalog entry as a new workflow under a parent node."""
    def __init__(self, store: TreeStore, catalog: CatalogClient):
        self.store = store
        self.catalog = catalog
        self.state = InstallState.IDLE
        self.error = ""

    async def install(self, entry_id: str, parent_uid: str) -> InstallOutcome:
        self.state = InstallState.INSTALLING
        self.error = ""
        try:
            if not entry_id:
                raise InvalidRequestError("No catalog entry selected to install.")
            entry = await self.catalog.get_entry(entry_id)
            children = codec.loads_workflow(entry.workflow)
            root = TransportNode(text=f"{WORKFLOW_MARKER} {entry.name}", children=children)
            # Nothing is written until the payload has parsed in full.
            root_uid = await codec.decode(self.store, parent_uid, root)
            location = await self.store.url_for(root_uid)
        except (CatalogError, WorkflowSyncError) as e:
            logger.error(f"Installing catalog entry {entry_id} failed: {e}")
            self.state = InstallState.FAILED
            self.error = str(e)
            return InstallOutcome(entry_id=entry_id, error=e)

        logger.info(f"Installed catalog entry {entry_id} ('{entry.name}') as {root_uid}")
        self.state = InstallState.SUCCESS
        return InstallOutcome(entry_id=entry_id, root_uid=root_uid, location=location)

    def close(self) -> None:
        """Dismisses the dialog. A failure message is cleared with it."""
        self.state = InstallState.IDLE
        self.error = ""
