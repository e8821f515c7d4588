"""
Top‑level router for version 1 of the API.

Aggregates the feed and post routers.  Both define their full paths
internally, so they are included without a prefix here.
"""

from fastapi import APIRouter

from .endpoints import feed, posts

router = APIRouter()

router.include_router(feed.router, tags=["feed"])
router.include_router(posts.router, tags=["posts"])
