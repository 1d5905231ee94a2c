"""
Presentation helpers shared by the content clients. No network I/O.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Optional


PESO_SIGN = "₱"
NO_PRICE_LABEL = "Contact for price"

_MAX_FRACTION = Decimal("0.001")


def build_image_url(base_url: str, image_id: Any) -> Optional[str]:
    """Public asset URL for a Directus file id, or None when there is no id."""
    if not image_id:
        return None
    return f"{base_url.rstrip('/')}/assets/{image_id}"


def format_price(price: Any) -> str:
    """Format a price in Philippine Peso, e.g. ``1500`` -> ``₱1,500``.

    A zero or missing price is not public, so it renders as "Contact for price".
    """
    if not price:
        return NO_PRICE_LABEL
    try:
        amount = Decimal(str(price).strip())
    except (InvalidOperation, ValueError):
        return NO_PRICE_LABEL
    if not amount.is_finite():
        return NO_PRICE_LABEL

    with localcontext() as ctx:
        # Room for every integer digit plus the fraction digits kept.
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        rounded = amount.quantize(_MAX_FRACTION, rounding=ROUND_HALF_UP)

    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return PESO_SIGN + text
