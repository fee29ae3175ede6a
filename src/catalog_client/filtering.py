'''
Categorization and search predicates over catalog entries.

Every entry falls into exactly one tab. Authorship is checked first, so an
entry the current graph published shows under Published even when it is
also installed locally.
'''
from enum import Enum
from typing import AbstractSet, Iterable, List, Pattern, Union
import re

from .types import CatalogEntry

class CatalogTab(str, Enum):
    MARKETPLACE = "Marketplace"
    INSTALLED = "Installed"
    PUBLISHED = "Published"

def categorize(entry: CatalogEntry, author: str, installed: AbstractSet[str]) -> CatalogTab:
    '''
    Returns the single tab an entry belongs to for the given graph and installed names.

    An entry written by `author` is always PUBLISHED, whether or not it is
    installed and whether or not the service recorded it under a different
    name. It never shows in the Installed tab, so the three tabs partition
    the listing.
    '''
    if entry.author == author:
        return CatalogTab.PUBLISHED
    if entry.name in installed:
        return CatalogTab.INSTALLED
    return CatalogTab.MARKETPLACE

def entries_for_tab(
    entries: Iterable[CatalogEntry],
    tab: Union[CatalogTab, str],
    author: str,
    installed: AbstractSet[str],
) -> List[CatalogEntry]:
    tab = CatalogTab(tab)
    return [entry for entry in entries if categorize(entry, author, installed) is tab]

def compile_query(query: str) -> Pattern[str]:
    '''
    Compiles a free-text query into a case-insensitive pattern.
    Queries that are not valid regular expressions are matched literally.
    '''
    try:
        return re.compile(query or "", re.IGNORECASE)
    except re.error:
        return re.compile(re.escape(query), re.IGNORECASE)

def matches_query(entry: CatalogEntry, pattern: Pattern[str]) -> bool:
    '''True when the pattern matches the name, description, any tag, or the author.'''
    fields = [entry.name, entry.description or "", entry.author, *entry.tags]
    return any(pattern.search(value) for value in fields)

def search(entries: Iterable[CatalogEntry], query: str) -> List[CatalogEntry]:
    if not query:
        return list(entries)
    pattern = compile_query(query)
    return [entry for entry in entries if matches_query(entry, pattern)]
