"""
Post endpoints for API v1.

``POST /post`` accepts a post in its JSON wire format and echoes it
back with ``201 Created``, serialized exactly as ``GET /post/{id}``
will later return it.  ``GET /post/{id}`` returns one post or ``404``
with an empty body.  Errors raised by the service are
converted to responses by the handlers installed in ``main``.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from starlette.requests import ClientDisconnect

from post_feed_api.app.api.deps import get_post_service
from post_feed_api.app.core.errors import ServerFault
from post_feed_api.app.services.post_service import PostService

router = APIRouter()


@router.post("/post", status_code=status.HTTP_201_CREATED)
async def create_post(
    request: Request,
    service: PostService = Depends(get_post_service),
) -> Response:
    """Store the posted post and echo it in its canonical JSON form."""
    # The body is validated by the service rather than by FastAPI so a
    # malformed payload is reported as 400 with the parser's message.
    try:
        raw = await request.body()
    except (ClientDisconnect, OSError) as exc:
        raise ServerFault(str(exc) or "Failed to read request body") from exc
    post = service.create(raw)
    return Response(
        content=service.encode(post),
        status_code=status.HTTP_201_CREATED,
        media_type="application/json",
    )


@router.get("/post/{id}")
async def get_post(id: UUID, service: PostService = Depends(get_post_service)) -> Response:
    """Retrieve a single post by its identifier."""
    return Response(content=service.get(id), media_type="application/json")
