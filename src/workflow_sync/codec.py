"""
Conversion between host trees and the transport format.

encode drops host uids; decode always creates fresh nodes. A workflow
payload is the JSON list of a root's children, the root's own text travels
separately as the catalog name.
"""
import json
import logging
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from .exceptions import MalformedWorkflowError
from .store import TreeStore
from .types import TransportNode, TreeNode

logger = logging.getLogger(__name__)

_forest_adapter = TypeAdapter(List[TransportNode])

def encode(node: TreeNode) -> TransportNode:
    return TransportNode(text=node.text, children=[encode(child) for child in node.children])

async def decode(
    store: TreeStore,
    parent_uid: str,
    node: TransportNode,
    order: Optional[int] = None,
) -> str:
    """Creates node and its descendants under parent_uid in one store call; returns the new uid."""
    return await store.create_node(parent_uid, node.text, children=node.children, order=order)

def dumps_workflow(nodes: Sequence[TransportNode]) -> str:
    return json.dumps([node.model_dump() for node in nodes], ensure_ascii=False)

def loads_workflow(payload: Optional[str]) -> List[TransportNode]:
    """
    Parses a workflow payload into a node forest.

    Raises:
        MalformedWorkflowError: If the payload is missing, is not JSON, or is not
            a list of {text, children} objects.
    """
    if not isinstance(payload, str) or not payload.strip():
        raise MalformedWorkflowError("Workflow payload is missing or empty.")
    try:
        return _forest_adapter.validate_json(payload)
    except ValidationError as e:
        logger.warning(f"Rejected workflow payload: {e.error_count()} validation error(s)")
        raise MalformedWorkflowError(f"Workflow payload could not be parsed: {e.errors()[0]['msg']}") from e
