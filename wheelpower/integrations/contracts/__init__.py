"""
Contracts (data models).

This folder defines the request/response shapes exchanged with the content
service (Directus).
Examples:
- Catalog listing queries (collection, sort, status filters)
- Booking / contact submissions and their result envelope

Why this exists:
- Keeps the filter and sort conventions in one place
- Mock and real clients return the same shapes, so pages never care which
  one is wired in

Both mock and real HTTP clients should use these contracts.
"""
