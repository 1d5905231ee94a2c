"""
Directus Content HTTP Client.

Purpose:
- Fetches catalog listings (services, tires, mags, gallery) and site settings
- Submits booking requests and contact messages

Error policy:
- Reads never raise. Network errors, non-2xx responses and unreadable JSON are
  logged and the read returns None so a page can render its empty state.
- Writes never raise either, but report the failure back as
  {"success": False, "error": ...} so the form can show a message.

Important:
- This client should be the ONLY place that talks to Directus over HTTP.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from wheelpower.integrations.contracts.catalog import (
    GALLERY,
    MAGS,
    SERVICES,
    TIRES,
    CatalogItem,
    CollectionQuery,
    sort_tires,
)
from wheelpower.integrations.contracts.mutations import (
    BOOKINGS_COLLECTION,
    CONTACTS_COLLECTION,
    MutationResult,
    booking_payload,
    contact_payload,
)
from wheelpower.integrations.policy import formatters
from wheelpower.integrations.policy.response_wrappers import (
    describe_status_error,
    unwrap_envelope,
)
from wheelpower.utils.config_loader import DEFAULT_BASE_URL, ContentServiceConfig

logger = logging.getLogger(__name__)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class DirectusContentClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = 15.0,
        settings_collection: str = "settings",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.settings_collection = settings_collection
        self.transport = transport

    @classmethod
    def from_config(
        cls,
        config: ContentServiceConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "DirectusContentClient":
        return cls(
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            settings_collection=config.settings_collection,
            transport=transport,
        )

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_seconds,
            transport=self.transport,
            follow_redirects=True,
        )

    def items_url(self, collection: str) -> str:
        return f"{self.base_url}/items/{collection}"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def _fetch_collection(self, collection: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET /items/<collection> and return the envelope's data, or None on any failure."""
        query = [
            (name, _query_value(value))
            for name, value in (params or {}).items()
            if value is not None
        ]
        return await self._get_data(self.items_url(collection), query, label=collection)

    async def _get_data(self, url: str, query: List[tuple], label: str) -> Any:
        try:
            async with self._http_client() as client:
                response = await client.get(url, params=query or None)
                response.raise_for_status()
                data = unwrap_envelope(response.json())
            logger.debug(f"Fetched {label}: status={response.status_code}")
            return data
        except httpx.HTTPStatusError as e:
            details = describe_status_error(e.response.status_code, e.response.text)
            logger.error(f"Error fetching {label}: HTTP error {details}")
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {label}: request failed: {e!r}")
        except ValueError as e:
            # json.JSONDecodeError and ContentResponseError
            logger.error(f"Error fetching {label}: invalid response body: {e}")
        return None

    async def fetch_listing(self, query: CollectionQuery) -> Optional[List[CatalogItem]]:
        return await self._fetch_collection(query.collection, query.to_params())

    async def get_services(self) -> Optional[List[CatalogItem]]:
        return await self.fetch_listing(SERVICES)

    async def get_tires(self) -> Optional[List[CatalogItem]]:
        return sort_tires(await self.fetch_listing(TIRES))

    async def get_mags(self) -> Optional[List[CatalogItem]]:
        return await self.fetch_listing(MAGS)

    async def get_gallery(self) -> Optional[List[CatalogItem]]:
        return await self.fetch_listing(GALLERY)

    async def get_site_settings(self) -> Optional[Dict[str, Any]]:
        # Plain GET without query parameters.
        return await self._get_data(self.items_url(self.settings_collection), [], label="site settings")

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def _create_item(self, collection: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = self.items_url(collection)
        try:
            # Dates and other non-JSON values from form data go out as strings.
            body = json.dumps(payload, default=str)
            async with self._http_client() as client:
                response = await client.post(url, content=body, headers={"Content-Type": "application/json"})
                response.raise_for_status()
                data = unwrap_envelope(response.json())
            logger.info(f"Created {collection} item: status={response.status_code}")
            return MutationResult.ok(data).as_dict()
        except httpx.HTTPStatusError as e:
            details = describe_status_error(e.response.status_code, e.response.text)
            logger.error(f"Error creating {collection}: HTTP error {details}")
            return MutationResult.failed(f"HTTP error! status: {e.response.status_code}").as_dict()
        except httpx.HTTPError as e:
            logger.error(f"Error creating {collection}: request failed: {e!r}")
            return MutationResult.failed(str(e) or type(e).__name__).as_dict()
        except (TypeError, ValueError) as e:
            # Unencodable payload, json.JSONDecodeError or ContentResponseError
            logger.error(f"Error creating {collection}: invalid request or response body: {e}")
            return MutationResult.failed(str(e) or "Invalid request or response body").as_dict()

    async def create_booking(self, booking_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Submit a booking request; it is stored with status "pending"."""
        return await self._create_item(BOOKINGS_COLLECTION, booking_payload(booking_data))

    async def create_contact(self, contact_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Submit a contact form message."""
        return await self._create_item(CONTACTS_COLLECTION, contact_payload(contact_data))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def get_image_url(self, image_id: Any) -> Optional[str]:
        return formatters.build_image_url(self.base_url, image_id)

    @staticmethod
    def format_price(price: Any) -> str:
        return formatters.format_price(price)
