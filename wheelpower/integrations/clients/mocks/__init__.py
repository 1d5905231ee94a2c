"""
Mock integration clients.

These clients return content without calling Directus.
They are used when:
- The Directus instance is not reachable (offline development, previews)
- We want to test page code end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients should return data shaped according to wheelpower/integrations/contracts/*

Switching to real:
Set INTEGRATIONS_MODE=real; the selection happens in wheelpower/content.py only.
"""

from .local_content import LocalContentClient

__all__ = ["LocalContentClient"]
