from .auth import AuthStrategy, TokenAuth
from .client import CatalogClient
from .exceptions import CatalogError, InvalidRequestError, ServiceError, TransportError
from .filtering import CatalogTab, categorize, compile_query, entries_for_tab, matches_query, search
from .session import CatalogSession
from .types import CatalogEntry, UpsertPayload, UpsertResult
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    SMARTBLOCKS_API_URL_ENV_VAR,
    SMARTBLOCKS_TIMEOUT_SECONDS_ENV_VAR,
)

__all__ = [
    "CatalogClient",
    "CatalogSession",
    "AuthStrategy",
    "TokenAuth",
    "CatalogError",
    "InvalidRequestError",
    "ServiceError",
    "TransportError",
    # Predicates
    "CatalogTab",
    "categorize",
    "compile_query",
    "entries_for_tab",
    "matches_query",
    "search",
    # Wire models
    "CatalogEntry",
    "UpsertPayload",
    "UpsertResult",
    # Exported config constants
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "SMARTBLOCKS_API_URL_ENV_VAR",
    "SMARTBLOCKS_TIMEOUT_SECONDS_ENV_VAR",
]
