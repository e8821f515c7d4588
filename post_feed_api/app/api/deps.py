"""
Shared FastAPI dependencies.

The post store lives on ``app.state`` and is handed to each request's
``PostService`` here, so every operation works on the same store
without reaching for a module global.
"""

from fastapi import Request

from post_feed_api.app.core.store import PostStore
from post_feed_api.app.services.post_service import PostService


def get_store(request: Request) -> PostStore:
    return request.app.state.store


def get_post_service(request: Request) -> PostService:
    return PostService(get_store(request))
