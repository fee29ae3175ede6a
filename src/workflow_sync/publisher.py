import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from catalog_client import CatalogClient, CatalogError, UpsertPayload

from . import codec
from .exceptions import MissingCredentialError, WorkflowSyncError
from .markers import workflow_name
from .metadata import MetadataExtractor
from .publish_index import PublishIndex
from .store import TreeStore

logger = logging.getLogger(__name__)

PUBLISH_SUCCESS_TEXT = "Successfully published workflow to the SmartBlocks Store!"
REVIEW_NOTICE_TEXT = (
    "Because your workflow contains custom JavaScript, it will first undergo "
    "review by RoamJS before going live."
)
MISSING_TOKEN_TEXT = (
    "Token necessary for publishing Smartblocks Workflows. "
    "Please head to the [[roam/js/smartblocks]] page to generate one."
)

def success_notice(requires_review: bool) -> str:
    if requires_review:
        return f"{PUBLISH_SUCCESS_TEXT}\n\n{REVIEW_NOTICE_TEXT}"
    return PUBLISH_SUCCESS_TEXT

class PublishState(str, Enum):
    IDLE = "idle"
    PUBLISHING = "publishing"
    SUCCESS = "success"
    FAILED = "failed"

@dataclass
class PublishOutcome:
    target_uid: str
    entry_id: Optional[str] = None
    requires_review: bool = False
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is not None:
            return str(self.error)
        return success_notice(self.requires_review)

class PublishCoordinator:
    """
    Publishes a local workflow to the catalog and remembers the id it got.

    A workflow that already has a recorded id is sent with that id, so the
    service updates the entry instead of creating another one. The local
    record is written only after the service accepted the upsert; a failed
    publish leaves the graph untouched.

    Failures never raise out of publish(): the coordinator moves to FAILED
    and keeps the message in `error` for display until close().
    """
    def __init__(
        self,
        store: TreeStore,
        catalog: CatalogClient,
        on_success: Optional[Callable[[PublishOutcome], None]] = None,
    ):
        self.store = store
        self.catalog = catalog
        self.on_success = on_success
        self.index = PublishIndex(store)
        self.extractor = MetadataExtractor(store)
        self.state = PublishState.IDLE
        self.error = ""
        self._dismissed = False

    async def publish(self, target_uid: str, auth_token: Optional[str] = None) -> PublishOutcome:
        self.state = PublishState.PUBLISHING
        self.error = ""
        self._dismissed = False
        try:
            outcome = await self._publish(target_uid, auth_token)
        except (CatalogError, WorkflowSyncError) as e:
            logger.error(f"Publishing workflow {target_uid} failed: {e}")
            self.state = PublishState.FAILED
            self.error = str(e)
            return PublishOutcome(target_uid=target_uid, error=e)

        if self._dismissed:
            logger.debug(f"Publish of {target_uid} finished after the dialog closed")
            self.state = PublishState.IDLE
        else:
            self.state = PublishState.SUCCESS
            if self.on_success is not None:
                self.on_success(outcome)
        return outcome

    async def _publish(self, target_uid: str, auth_token: Optional[str]) -> PublishOutcome:
        token = auth_token if auth_token is not None else await self.index.read_token()
        token = (token or "").strip()
        if not token:
            raise MissingCredentialError(MISSING_TOKEN_TEXT)
        # Fail before the upsert if the record could not be stored afterwards.
        await self.index.page_uid()

        tree = await self.store.get_tree(target_uid)
        workflow = codec.encode(tree)
        metadata = await self.extractor.extract(target_uid)

        payload: UpsertPayload = {
            "name": workflow_name(tree.text),
            "tags": metadata.tags,
            "author": await self.store.current_user(),
            "description": (metadata.first("description") or "").replace("__", "_"),
            "workflow": codec.dumps_workflow(workflow.children),
        }
        existing_id = metadata.first("uuid")
        if existing_id:
            payload["id"] = existing_id
        image = metadata.first("image")
        if image:
            payload["img"] = image

        logger.info(
            f"Publishing workflow {target_uid} as '{payload['name']}' "
            f"({'update of ' + existing_id if existing_id else 'new entry'})"
        )
        result = await self.catalog.upsert_entry(payload, token)
        await self.index.record(target_uid, result.id)
        return PublishOutcome(
            target_uid=target_uid, entry_id=result.id, requires_review=result.requires_review
        )

    def close(self) -> None:
        """Dismisses the dialog. An in-flight publish still completes but skips on_success."""
        if self.state is PublishState.PUBLISHING:
            self._dismissed = True
        else:
            self.state = PublishState.IDLE
            self.error = ""
