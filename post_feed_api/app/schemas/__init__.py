"""
Pydantic schema definitions for API payloads.

The post schema is both the in‑memory entity kept by the store and the
JSON shape exchanged with clients, so the two can never drift apart.
"""
