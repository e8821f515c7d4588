"""
Top‑level package for the Post Feed API.

This file makes ``post_feed_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``post_feed_api.app.main``.  The HTTP client for the service lives in
``post_feed_api.client``.
"""

__all__ = []
