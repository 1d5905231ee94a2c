"""
Mutation contracts: submissions sent to the content service and the result
envelope handed back to the site.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel


BOOKINGS_COLLECTION = "bookings"
CONTACTS_COLLECTION = "contacts"
BOOKING_INITIAL_STATUS = "pending"


class MutationResult(BaseModel):
    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any) -> "MutationResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> "MutationResult":
        return cls(success=False, error=error or "Unknown error")

    def as_dict(self) -> Dict[str, Any]:
        """``{"success": True, "data": ...}`` or ``{"success": False, "error": ...}``."""
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "error": self.error}


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2024-05-01T08:30:00.000Z``."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def stamp_submission(data: Optional[Mapping[str, Any]], **extra: Any) -> Dict[str, Any]:
    """Copy the caller's payload and add ``extra`` fields plus ``date_created``.

    Added fields win over caller-supplied keys of the same name.
    """
    payload: Dict[str, Any] = dict(data or {})
    payload.update(extra)
    payload["date_created"] = utc_timestamp()
    return payload


def booking_payload(data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    return stamp_submission(data, status=BOOKING_INITIAL_STATUS)


def contact_payload(data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    return stamp_submission(data)
