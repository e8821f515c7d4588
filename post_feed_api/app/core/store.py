"""
In‑memory post store.

``PostStore`` keeps posts in insertion order (oldest first) and
serialises every access behind a single lock: ``add``, ``list`` and
``find`` never interleave, so a reader can never observe a partially
appended post.  Contents are lost when the process exits.

Exactly one store exists per application.  ``create_app`` builds it and
hands it to the operations through a dependency; nothing in the package
keeps a module‑level store.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional
from uuid import UUID

from post_feed_api.app.schemas.post import Author, Post

logger = logging.getLogger(__name__)


class PostStore:
    """Exclusive‑access container of posts."""

    def __init__(self) -> None:
        self._posts: List[Post] = []
        self._lock = threading.Lock()

    def add(self, post: Post) -> None:
        """Append ``post``.  Duplicate ids are accepted as is."""
        with self._lock:
            self._posts.append(post)

    def list(self) -> List[Post]:
        """Return a snapshot of all posts in insertion order."""
        with self._lock:
            return list(self._posts)

    def find(self, post_id: UUID) -> Optional[Post]:
        """Return the first post whose id equals ``post_id``, if any."""
        with self._lock:
            for post in self._posts:
                if post.id == post_id:
                    return post
            return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)


def seed_store(store: PostStore) -> None:
    """Add the two sample posts shown on a fresh instance."""
    author = Author(name="Me")
    store.add(Post.new("First Post", "This is the first post ever", author))
    store.add(
        Post.new(
            "My web app is now online",
            "Today marks the day that this app is online!",
            author,
        )
    )
    logger.info("Seeded post store with %s sample posts", len(store))
