"""
Content accessors used by the site's pages.

Usage::

    from wheelpower import content

    tires = await content.get_tires() or []
    result = await content.create_booking({"name": "Juan", "service": "alignment"})
    if not result["success"]:
        show_error(result["error"])

Reads return the collection data or None; writes return
{"success": True, "data": ...} or {"success": False, "error": ...}.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from wheelpower.integrations.clients.mocks import LocalContentClient
from wheelpower.integrations.clients.real_http import DirectusContentClient
from wheelpower.integrations.policy import formatters
from wheelpower.utils.config_loader import ContentServiceConfig, load_content_config

logger = logging.getLogger(__name__)

ContentClient = Union[DirectusContentClient, LocalContentClient]

settings = load_content_config()

# Base URL for direct asset linking from templates
DIRECTUS_URL = settings.base_url
directus_url = DIRECTUS_URL


def _should_use_mock(config: ContentServiceConfig) -> bool:
    return config.integrations_mode == "mock"


def get_content_client(config: Optional[ContentServiceConfig] = None) -> ContentClient:
    """Build the content client for the configured integrations mode."""
    config = config or settings
    if _should_use_mock(config):
        logger.debug(f"Using local content from {config.mock_data_dir}")
        return LocalContentClient.from_config(config)
    return DirectusContentClient.from_config(config)


async def get_services() -> Optional[List[Dict[str, Any]]]:
    """Get all available services"""
    return await get_content_client().get_services()


async def get_tires() -> Optional[List[Dict[str, Any]]]:
    """Get all tires, sale items first"""
    return await get_content_client().get_tires()


async def get_mags() -> Optional[List[Dict[str, Any]]]:
    return await get_content_client().get_mags()


async def get_gallery() -> Optional[List[Dict[str, Any]]]:
    return await get_content_client().get_gallery()


async def get_site_settings() -> Optional[Dict[str, Any]]:
    return await get_content_client().get_site_settings()


async def create_booking(booking_data: Mapping[str, Any]) -> Dict[str, Any]:
    """Submit a booking request"""
    return await get_content_client().create_booking(booking_data)


async def create_contact(contact_data: Mapping[str, Any]) -> Dict[str, Any]:
    """Submit a contact form message"""
    return await get_content_client().create_contact(contact_data)


def get_image_url(image_id: Any) -> Optional[str]:
    return formatters.build_image_url(DIRECTUS_URL, image_id)


def format_price(price: Any) -> str:
    return formatters.format_price(price)
