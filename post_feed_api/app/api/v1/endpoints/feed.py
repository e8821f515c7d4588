"""
Feed endpoint for API v1.

``GET /feed`` returns every post, oldest first, as a JSON array.  An
empty store yields ``[]``.
"""

from fastapi import APIRouter, Depends, Response

from post_feed_api.app.api.deps import get_post_service
from post_feed_api.app.services.post_service import PostService

router = APIRouter()


@router.get("/feed")
async def list_feed(service: PostService = Depends(get_post_service)) -> Response:
    """Return all posts in the order they were created."""
    return Response(content=service.feed(), media_type="application/json")
