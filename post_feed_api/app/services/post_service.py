"""
Service layer for the post feed.

``PostService`` implements the three operations of the feed against a
shared ``PostStore``:

* ``feed`` – every post, oldest first, encoded as a JSON array.
* ``create`` – validate a raw request body as a post and append it.
* ``get`` – a single post by identifier, encoded as a JSON object.

Failures are reported with the exceptions from ``core.errors``; the
store is only touched once the input is known to be a valid post, so
a failed ``create`` never leaves a partial mutation behind.

The identifier and timestamp of a created post are taken from the
request as given.  Nothing is generated server side and duplicate ids
are stored like any other post.
"""

from __future__ import annotations

import logging
from typing import List
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from post_feed_api.app.core.errors import ClientInputError, PostNotFound, ServerFault
from post_feed_api.app.core.store import PostStore
from post_feed_api.app.schemas.post import Post

logger = logging.getLogger(__name__)

_post_list = TypeAdapter(List[Post])


class PostService:
    """Operations over a shared post store."""

    def __init__(self, store: PostStore) -> None:
        self.store = store

    def feed(self) -> bytes:
        """Return all posts as a JSON array (``[]`` when the store is empty)."""
        posts = self.store.list()
        try:
            return _post_list.dump_json(posts)
        except ValueError as exc:
            raise ServerFault(str(exc)) from exc

    def create(self, raw: bytes) -> Post:
        """Validate ``raw`` as a post and append it to the store.

        Raises ``ClientInputError`` when the body is not a JSON
        representation of a post; the store is left untouched.
        """
        try:
            post = Post.model_validate_json(raw)
        except ValidationError as exc:
            raise ClientInputError(str(exc)) from exc
        self.store.add(post)
        logger.info("Created post %s", post.id)
        return post

    def get(self, post_id: UUID) -> bytes:
        """Return the post with ``post_id`` as a JSON object."""
        post = self.store.find(post_id)
        if post is None:
            raise PostNotFound()
        return self.encode(post)

    def encode(self, post: Post) -> bytes:
        """Return the canonical JSON form of ``post``."""
        try:
            return post.model_dump_json().encode("utf-8")
        except ValueError as exc:
            raise ServerFault(str(exc)) from exc
