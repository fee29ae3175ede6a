import logging
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Sequence

from .exceptions import NodeNotFoundError
from .markers import reference_token
from .store import TreeStore
from .types import TransportNode, TreeNode

logger = logging.getLogger(__name__)

@dataclass
class _StoredNode:
    text: str
    parent: Optional[str]
    children: List[str] = field(default_factory=list)

class InMemoryTreeStore(TreeStore):
    """
    Dict-backed TreeStore.

    A node references another when its text contains `((uid))`. Referencing
    nodes are enumerated in creation order.
    """
    def __init__(self, graph: str = "local-graph", base_url: str = "https://roamresearch.com/#/app"):
        self.graph = graph
        self.base_url = base_url
        self._nodes: Dict[str, _StoredNode] = {}
        self._pages: Dict[str, str] = {}

    def _new_uid(self) -> str:
        uid = uuid.uuid4().hex[:9]
        while uid in self._nodes:
            uid = uuid.uuid4().hex[:9]
        return uid

    def _get(self, uid: str) -> _StoredNode:
        try:
            return self._nodes[uid]
        except KeyError:
            raise NodeNotFoundError(f"No node with uid '{uid}'") from None

    def add_page(self, title: str) -> str:
        """Creates a page root (or returns the existing one) and returns its uid."""
        if title in self._pages:
            return self._pages[title]
        uid = self._new_uid()
        self._nodes[uid] = _StoredNode(text=title, parent=None)
        self._pages[title] = uid
        return uid

    def _insert(self, parent_uid: str, text: str, children: Sequence[TransportNode], order: Optional[int]) -> str:
        parent = self._get(parent_uid)
        uid = self._new_uid()
        self._nodes[uid] = _StoredNode(text=text, parent=parent_uid)
        if order is None or order >= len(parent.children):
            parent.children.append(uid)
        else:
            parent.children.insert(max(order, 0), uid)
        for child in children:
            self._insert(uid, child.text, child.children, None)
        return uid

    def _snapshot(self, uid: str, deep: bool = True) -> TreeNode:
        node = self._get(uid)
        children = [self._snapshot(child, deep) for child in node.children] if deep else []
        return TreeNode(uid=uid, text=node.text, children=children)

    async def create_node(
        self,
        parent_uid: str,
        text: str,
        children: Optional[Sequence[TransportNode]] = None,
        order: Optional[int] = None,
    ) -> str:
        self._get(parent_uid)
        uid = self._insert(parent_uid, text, children or [], order)
        logger.debug(f"Created node {uid} under {parent_uid}: {text[:50]}")
        return uid

    async def update_node(self, uid: str, text: str) -> None:
        self._get(uid).text = text
        logger.debug(f"Updated node {uid}: {text[:50]}")

    async def get_tree(self, uid: str) -> TreeNode:
        return self._snapshot(uid)

    async def get_children(self, uid: str) -> List[TreeNode]:
        return [self._snapshot(child, deep=False) for child in self._get(uid).children]

    async def find_child(self, parent_uid: str, pattern: Pattern[str]) -> Optional[str]:
        for child in self._get(parent_uid).children:
            if pattern.search(self._nodes[child].text):
                return child
        return None

    async def get_first_child_uid(self, uid: str) -> Optional[str]:
        children = self._get(uid).children
        return children[0] if children else None

    async def get_first_child_text(self, uid: str) -> Optional[str]:
        first = await self.get_first_child_uid(uid)
        return self._nodes[first].text if first else None

    async def get_page_uid(self, title: str) -> Optional[str]:
        return self._pages.get(title)

    async def get_referencing_uids(self, uid: str) -> List[str]:
        token = reference_token(uid)
        return [other for other, node in self._nodes.items() if other != uid and token in node.text]

    async def current_user(self) -> str:
        return self.graph

    async def url_for(self, uid: str) -> str:
        self._get(uid)
        return f"{self.base_url}/{self.graph}/page/{uid}"
