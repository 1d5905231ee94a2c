from __future__ import annotations

from typing import Any, Dict, Optional


class ContentResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload


def unwrap_envelope(raw: Any) -> Any:
    """Return the ``data`` member of a Directus ``{"data": ...}`` envelope.

    A missing ``data`` member unwraps to ``None``; a body that is not a JSON
    object is rejected.
    """
    if not isinstance(raw, dict):
        raise ContentResponseError(
            f"Expected a JSON object envelope, got {type(raw).__name__}.",
            payload=raw,
        )
    return raw.get("data")


def describe_status_error(status_code: int, body: str = "") -> Dict[str, Any]:
    """Structured log context for a non-2xx content service response."""
    snippet = (body or "").strip()
    if len(snippet) > 200:
        snippet = snippet[:200] + "..."
    return {"status": status_code, "body": snippet}
