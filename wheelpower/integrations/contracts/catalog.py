"""
Catalog collection contracts.

Defines how each public catalog listing is queried from the content service:
- collection name
- sort order (``sort=<field>`` ascending, ``sort=-<field>`` descending)
- status filters (``filter[<field>][_eq]`` / ``filter[<field>][_neq]``)

These contracts must be used by both:
- clients/real_http/directus.py (query string sent to Directus)
- clients/mocks/local_content.py (same filters applied to local files)

Catalog items themselves stay opaque mappings; the only fields inspected here
are the filtered ones and, for tires, ``original_price`` and ``rim_size``.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


CatalogItem = Dict[str, Any]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Query models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CollectionQuery:
    """A fixed listing query against one content collection."""
    collection: str
    sort: Optional[str] = None                   # "-field" sorts descending
    eq: Dict[str, Any] = field(default_factory=dict)
    neq: Dict[str, Any] = field(default_factory=dict)

    def to_params(self) -> Dict[str, Any]:
        """Render the query in Directus query-string form."""
        params: Dict[str, Any] = {}
        if self.sort is not None:
            params["sort"] = self.sort
        for name, value in self.eq.items():
            params[f"filter[{name}][_eq]"] = value
        for name, value in self.neq.items():
            params[f"filter[{name}][_neq]"] = value
        return params


SERVICES = CollectionQuery("services", sort="sort", eq={"status": "available"})
# Tires are ordered client side, see sort_tires().
TIRES = CollectionQuery("tires", neq={"status": "unavailable"})
MAGS = CollectionQuery("mags", sort="sort", neq={"status": "unavailable"})
GALLERY = CollectionQuery("gallery", sort="sort", eq={"status": "published"})

LISTINGS: Dict[str, CollectionQuery] = {
    query.collection: query for query in (SERVICES, TIRES, MAGS, GALLERY)
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_rim_size(value: Any) -> float:
    """Leading integer of ``value`` (``"17"``, ``17``, ``"17 in"``), else infinity."""
    if value is None or isinstance(value, bool):
        return math.inf
    match = _LEADING_INT.match(str(value))
    if not match:
        return math.inf
    return int(match.group(1))


def tire_sort_key(item: CatalogItem):
    on_sale = bool(item.get("original_price"))
    return (0 if on_sale else 1, parse_rim_size(item.get("rim_size")))


def sort_tires(items: Optional[List[CatalogItem]]) -> Optional[List[CatalogItem]]:
    """Sale tires first, then ascending rim size; unknown sizes go last.

    The sort is stable so ties keep the order the content service returned.
    """
    if not isinstance(items, list):
        return items
    return sorted(items, key=tire_sort_key)


def apply_query(items: List[CatalogItem], query: CollectionQuery) -> List[CatalogItem]:
    """Apply a CollectionQuery's filters and sort to in-memory items."""
    result = list(items)

    for name, value in query.eq.items():
        result = [item for item in result if item.get(name) == value]
    for name, value in query.neq.items():
        result = [item for item in result if item.get(name) != value]

    if query.sort:
        descending = query.sort.startswith("-")
        name = query.sort.lstrip("-")
        # Items without the sort field go last in either direction.
        present = [item for item in result if item.get(name) is not None]
        missing = [item for item in result if item.get(name) is None]
        present.sort(key=lambda item: item[name], reverse=descending)
        result = present + missing

    return result
