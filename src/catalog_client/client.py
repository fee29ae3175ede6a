import httpx
import json
import logging
from typing import List, Dict, Any, Optional, Union

from pydantic import ValidationError

from .auth import AuthStrategy, TokenAuth
from .exceptions import InvalidRequestError, ServiceError, TransportError
from .types import CatalogEntry, UpsertPayload, UpsertResult
from . import config

logger = logging.getLogger(__name__)

def _service_message(response: httpx.Response) -> Optional[str]:
    """Pulls a human-readable message out of an error response, if the service sent one."""
    text = response.text.strip()
    if not text:
        return None
    try:
        body = json.loads(text)
    except ValueError:
        return text
    if isinstance(body, str):
        return body.strip() or None
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None
    return None

class CatalogClient:
    """Client for the SmartBlocks catalog service."""
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[Union[float, int]] = None,
    ):
        """
        Initialize the CatalogClient.

        Configuration is resolved in the following order of precedence:
        1. Direct parameters passed to the constructor.
        2. Environment variables (SMARTBLOCKS_API_URL, SMARTBLOCKS_TIMEOUT_SECONDS).
        3. Default values defined in the library.

        Reads are anonymous. Writes take the user's publish token per call,
        since the token lives in the user's graph rather than in the process
        environment.
        """
        self.base_url = config.get_base_url(base_url_override=base_url)
        self.timeout_seconds = config.get_timeout_seconds(timeout_override=timeout_seconds)
        logger.info(f"CatalogClient initialized. Base URL: {self.base_url}, Timeout: {self.timeout_seconds}s")

    @property
    def store_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{config.STORE_ENDPOINT}"

    def _get_headers(self, auth_strategy: Optional[AuthStrategy] = None) -> Dict[str, str]:
        """Internal method to get all necessary headers for a request."""
        headers = {"Content-Type": "application/json"}
        if auth_strategy is not None:
            headers.update(auth_strategy.get_auth_headers())
        return headers

    async def _request(
        self,
        method: str,
        url: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        auth_strategy: Optional[AuthStrategy] = None,
    ) -> Any:
        """Makes a single asynchronous HTTP request to the catalog service. Failures are not retried."""
        headers = self._get_headers(auth_strategy)
        request_details = f"Request: {method} {url}"
        if params:
            request_details += f" Params: {params}"
        if payload:
            request_details += f" Payload: {str(payload)[:200]}..."
        logger.debug(request_details)

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.request(
                    method, url, json=payload, headers=headers, params=params
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                f"API Error: {method} {url} - Status {status_code} - Response: {e.response.text[:200]}",
                exc_info=True,
            )
            message = _service_message(e.response)
            if message:
                raise ServiceError(
                    message, status_code=status_code, response_content=e.response.text
                ) from e
            raise TransportError(
                f"Request failed with status code {status_code}", status_code=status_code
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request Error: {method} {url} - {e}", exc_info=True)
            raise TransportError(str(e) or e.__class__.__name__) from e

        if response.status_code == 204 or not response.content:
            logger.debug(f"Response: {method} {url} - Status {response.status_code} (No Content)")
            return {}
        try:
            response_data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {method} {url}: {response.text[:200]}")
            raise TransportError("Catalog service returned an invalid response") from e
        logger.debug(
            f"Response: {method} {url} - Status {response.status_code} - Data: {str(response_data)[:200]}..."
        )
        return response_data

    async def list_entries(self) -> List[CatalogEntry]:
        """
        Fetches the catalog listing, sorted case-insensitively by name.

        The listing never carries workflow bodies; use get_entry for those.

        Raises:
            TransportError: If the service cannot be reached or the response is malformed.
            ServiceError: If the service rejects the request with a message.
        """
        logger.info("Listing catalog entries")
        data = await self._request("GET", self.store_url)
        raw_entries = data.get("smartblocks") if isinstance(data, dict) else None
        if raw_entries is None:
            raw_entries = []
        if not isinstance(raw_entries, list):
            logger.error(f"Malformed catalog listing: {str(raw_entries)[:200]}")
            raise TransportError("Catalog service returned a malformed listing")
        entries = []
        for raw in raw_entries:
            try:
                entries.append(CatalogEntry.model_validate(raw))
            except ValidationError as e:
                # Malformed records are skipped, the rest still list.
                logger.warning(f"Skipping malformed catalog record {str(raw)[:200]}: {e.error_count()} error(s)")
        return sorted(entries, key=lambda entry: entry.name.casefold())

    async def get_entry(self, entry_id: str) -> CatalogEntry:
        """
        Fetches one full catalog record, including its serialized workflow.

        Raises:
            InvalidRequestError: If entry_id is not provided.
            TransportError: If the service cannot be reached or the response is malformed.
            ServiceError: If the service rejects the request with a message.
        """
        if not entry_id:
            raise InvalidRequestError("entry_id must be provided")
        logger.info(f"Getting catalog entry {entry_id}")
        data = await self._request("GET", self.store_url, params={"id": entry_id})
        try:
            return CatalogEntry.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed catalog entry {entry_id}: {e}")
            raise TransportError(f"Catalog service returned a malformed entry for {entry_id}") from e

    async def upsert_entry(self, payload: UpsertPayload, token: str) -> UpsertResult:
        """
        Creates or updates a catalog entry.

        A payload carrying 'id' updates that entry in place; without it the
        service creates a new entry and assigns an id.

        Args:
            payload: The entry fields to publish.
            token: The user's publish token.

        Returns:
            The id the entry is stored under and whether it awaits review.

        Raises:
            ValueError: If token is empty.
            TransportError: If the service cannot be reached or the response is malformed.
            ServiceError: If the service rejects the entry with a message.
        """
        auth_strategy = TokenAuth(token)
        logger.info(f"Upserting catalog entry '{payload.get('name')}' (id: {payload.get('id') or 'new'})")
        data = await self._request("PUT", self.store_url, payload=dict(payload), auth_strategy=auth_strategy)
        try:
            return UpsertResult.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed upsert response: {e}")
            raise TransportError("Catalog service returned a malformed publish response") from e
