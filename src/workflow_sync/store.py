from abc import ABC, abstractmethod
from typing import List, Optional, Pattern, Sequence

from .types import TransportNode, TreeNode

class TreeStore(ABC):
    """
    Async access to the host graph: a tree of text nodes keyed by opaque uids.

    Writes are visible to reads as soon as the awaited call returns, so a
    caller chaining dependent writes only needs to await each one in turn.
    """

    @abstractmethod
    async def create_node(
        self,
        parent_uid: str,
        text: str,
        children: Optional[Sequence[TransportNode]] = None,
        order: Optional[int] = None,
    ) -> str:
        """Creates a node (and any children, recursively) under parent_uid and returns its uid.

        The whole subtree becomes visible at once. `order` is the position
        among the parent's children; None appends.
        """

    @abstractmethod
    async def update_node(self, uid: str, text: str) -> None:
        """Replaces the text of an existing node."""

    @abstractmethod
    async def get_tree(self, uid: str) -> TreeNode:
        """Returns the full subtree rooted at uid."""

    @abstractmethod
    async def get_children(self, uid: str) -> List[TreeNode]:
        """Returns the direct children of uid, without their descendants."""

    @abstractmethod
    async def find_child(self, parent_uid: str, pattern: Pattern[str]) -> Optional[str]:
        """Returns the uid of the first direct child whose text matches pattern."""

    @abstractmethod
    async def get_first_child_uid(self, uid: str) -> Optional[str]:
        pass

    @abstractmethod
    async def get_first_child_text(self, uid: str) -> Optional[str]:
        pass

    @abstractmethod
    async def get_page_uid(self, title: str) -> Optional[str]:
        """Resolves a page title to the uid of the page root."""

    @abstractmethod
    async def get_referencing_uids(self, uid: str) -> List[str]:
        """Returns the uids of nodes that reference uid, in the store's stable enumeration order."""

    @abstractmethod
    async def current_user(self) -> str:
        """Identity of the current graph, used as catalog author."""

    @abstractmethod
    async def url_for(self, uid: str) -> str:
        """Location a view can navigate to in order to show uid."""
