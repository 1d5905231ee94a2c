"""
Integrations layer.
This package contains all code used to communicate with the Directus content
service that backs the Wheel Power site:
- Catalog listings (services, tires, mags, gallery) and site settings
- Booking requests and contact messages

Key rule:
- Page code MUST NOT call Directus directly.
- Pages call wheelpower.content, which delegates to an integration client
  (under wheelpower/integrations/clients).
- We use the MOCK client for offline development and the REAL_HTTP client
  everywhere else.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (wheelpower/content.py).
"""

from .contracts.catalog import (
    GALLERY,
    LISTINGS,
    MAGS,
    SERVICES,
    TIRES,
    CollectionQuery,
    apply_query,
    sort_tires,
)
from .contracts.mutations import MutationResult, stamp_submission
from .policy.formatters import build_image_url, format_price
from .policy.response_wrappers import ContentResponseError, unwrap_envelope

__all__ = [
    # catalog
    "CollectionQuery", "LISTINGS", "SERVICES", "TIRES", "MAGS", "GALLERY",
    "apply_query", "sort_tires",
    # mutations
    "MutationResult", "stamp_submission",
    # policy
    "ContentResponseError", "unwrap_envelope", "build_image_url", "format_price",
]
