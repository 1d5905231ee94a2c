"""
Real HTTP integration clients.

These clients communicate with the hosted Directus content service via HTTP.

Important:
- Must implement the same interface as the mock clients
- Must return data shaped according to wheelpower/integrations/contracts/*

Switching:
The selection of mock vs real clients should happen in wheelpower/content.py only.
"""

from .directus import DirectusContentClient

__all__ = ["DirectusContentClient"]
