import logging
from typing import AbstractSet, Iterable, List, Optional, Union

from .client import CatalogClient
from .exceptions import CatalogError
from .filtering import CatalogTab, entries_for_tab, search
from .types import CatalogEntry

logger = logging.getLogger(__name__)

class CatalogSession:
    """
    One activation of the catalog view.

    Entries are fetched once per refresh and never merged with a previous
    fetch. A failed refresh leaves an empty list and sets `error`.
    """
    def __init__(self, client: CatalogClient, author: str, installed: Iterable[str] = ()):
        self.client = client
        self.author = author
        self.installed: AbstractSet[str] = frozenset(installed)
        self.entries: List[CatalogEntry] = []
        self.error: str = ""
        self.loading: bool = False

    async def refresh(self) -> List[CatalogEntry]:
        self.loading = True
        self.error = ""
        try:
            self.entries = await self.client.list_entries()
        except CatalogError as e:
            logger.warning(f"Catalog refresh failed: {e}")
            self.entries = []
            self.error = str(e)
        finally:
            self.loading = False
        return self.entries

    def visible(self, tab: Union[CatalogTab, str] = CatalogTab.MARKETPLACE, query: str = "") -> List[CatalogEntry]:
        """Entries shown on a tab, narrowed by the search query."""
        return search(entries_for_tab(self.entries, tab, self.author, self.installed), query)

    def find(self, entry_id: str) -> Optional[CatalogEntry]:
        return next((entry for entry in self.entries if entry.id == entry_id), None)

    def is_installed(self, entry: CatalogEntry) -> bool:
        return entry.name in self.installed

    async def load_detail(self, entry_id: str) -> CatalogEntry:
        """Fetches the full record for the detail view. Errors propagate to the caller."""
        return await self.client.get_entry(entry_id)
