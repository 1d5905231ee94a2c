"""
Local Content Client (Mock/Local).

Purpose:
- Acts as a development-time content source when the Directus instance is
  not reachable (offline builds, previews, tests of page code).
- Reads each collection from ``<data_root>/<collection>.json`` and applies the
  same status filters and sort order the real client asks Directus for.
- Persists every booking/contact submission under
  ``<output_root>/<collection>/`` so form handling can be inspected.

Swap:
Set INTEGRATIONS_MODE=real (the default) to use
clients/real_http/directus.py instead.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from wheelpower.integrations.contracts.catalog import (
    GALLERY,
    MAGS,
    SERVICES,
    TIRES,
    CatalogItem,
    CollectionQuery,
    apply_query,
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
from wheelpower.integrations.policy.response_wrappers import unwrap_envelope
from wheelpower.utils.config_loader import DEFAULT_BASE_URL, ContentServiceConfig

logger = logging.getLogger(__name__)


class LocalContentClient:
    """Mock content client backed by JSON files on disk."""

    def __init__(
        self,
        data_root: Optional[Path] = None,
        output_root: Optional[Path] = None,
        base_url: Optional[str] = None,
        settings_collection: str = "settings",
    ) -> None:
        self.data_root = Path(data_root or "data/content")
        self.output_root = Path(output_root or "data/submissions")
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.settings_collection = settings_collection

    @classmethod
    def from_config(cls, config: ContentServiceConfig) -> "LocalContentClient":
        return cls(
            data_root=Path(config.mock_data_dir),
            output_root=Path(config.mock_output_dir),
            base_url=config.base_url,
            settings_collection=config.settings_collection,
        )

    def _read_collection(self, collection: str) -> Any:
        path = self.data_root / f"{collection}.json"
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Error fetching {collection} from {path}: {e}")
            return None
        if not isinstance(raw, list):
            try:
                raw = unwrap_envelope(raw)
            except ValueError as e:
                logger.error(f"Error fetching {collection} from {path}: {e}")
                return None
        if isinstance(raw, list) and not all(isinstance(item, dict) for item in raw):
            logger.error(f"Error fetching {collection} from {path}: every item must be a JSON object")
            return None
        return raw

    async def fetch_listing(self, query: CollectionQuery) -> Optional[List[CatalogItem]]:
        items = self._read_collection(query.collection)
        if not isinstance(items, list):
            return items
        return apply_query(items, query)

    async def get_services(self) -> Optional[List[CatalogItem]]:
        return await self.fetch_listing(SERVICES)

    async def get_tires(self) -> Optional[List[CatalogItem]]:
        return sort_tires(await self.fetch_listing(TIRES))

    async def get_mags(self) -> Optional[List[CatalogItem]]:
        return await self.fetch_listing(MAGS)

    async def get_gallery(self) -> Optional[List[CatalogItem]]:
        return await self.fetch_listing(GALLERY)

    async def get_site_settings(self) -> Optional[Dict[str, Any]]:
        return self._read_collection(self.settings_collection)

    def _persist(self, collection: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        item = dict(payload)
        item.setdefault("id", uuid4().hex[:12])
        target_dir = self.output_root / collection
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            target = target_dir / f"{item['id']}.json"
            target.write_text(json.dumps(item, indent=2, ensure_ascii=False, default=str), encoding="utf-8")
        except OSError as e:
            logger.error(f"Error creating {collection}: {e}")
            return MutationResult.failed(str(e)).as_dict()
        logger.info(f"Stored mock {collection} submission at {target}")
        return MutationResult.ok(item).as_dict()

    async def create_booking(self, booking_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        return self._persist(BOOKINGS_COLLECTION, booking_payload(booking_data))

    async def create_contact(self, contact_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        return self._persist(CONTACTS_COLLECTION, contact_payload(contact_data))

    def get_image_url(self, image_id: Any) -> Optional[str]:
        return formatters.build_image_url(self.base_url, image_id)

    @staticmethod
    def format_price(price: Any) -> str:
        return formatters.format_price(price)
