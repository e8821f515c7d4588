"""
Unit tests for the in‑memory post store.
"""
import threading
from datetime import datetime, timezone
from uuid import UUID, uuid4

from post_feed_api.app.core.store import PostStore, seed_store
from post_feed_api.app.schemas.post import Author, Post


def make_post(title="T", post_id=None):
    return Post(
        id=post_id or uuid4(),
        title=title,
        body="B",
        author=Author(name="A"),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_list_empty_store():
    assert PostStore().list() == []


def test_list_preserves_insertion_order():
    store = PostStore()
    posts = [make_post(title=str(i)) for i in range(5)]
    for post in posts:
        store.add(post)

    assert store.list() == posts
    assert len(store) == 5


def test_list_returns_snapshot():
    store = PostStore()
    store.add(make_post())
    snapshot = store.list()

    store.add(make_post())

    assert len(snapshot) == 1
    assert len(store.list()) == 2


def test_find_returns_added_post():
    store = PostStore()
    first, second = make_post("first"), make_post("second")
    store.add(first)
    store.add(second)

    assert store.find(second.id) == second
    assert store.find(first.id) == first


def test_find_unknown_id_returns_none():
    store = PostStore()
    store.add(make_post())

    assert store.find(uuid4()) is None


def test_duplicate_ids_are_kept_and_find_returns_first():
    store = PostStore()
    post_id = UUID("00000000-0000-0000-0000-000000000001")
    original = make_post("original", post_id)
    duplicate = make_post("duplicate", post_id)
    store.add(original)
    store.add(duplicate)

    assert store.list() == [original, duplicate]
    assert store.find(post_id).title == "original"


def test_concurrent_adds_lose_nothing():
    store = PostStore()
    workers, per_worker = 8, 50
    barrier = threading.Barrier(workers)

    def worker():
        barrier.wait()
        for _ in range(per_worker):
            store.add(make_post())

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    posts = store.list()
    assert len(posts) == workers * per_worker
    assert len({post.id for post in posts}) == workers * per_worker


def test_seed_store_adds_two_sample_posts():
    store = PostStore()
    seed_store(store)

    posts = store.list()
    assert [post.title for post in posts] == ["First Post", "My web app is now online"]
    assert all(post.author.name == "Me" for post in posts)
    assert posts[0].id != posts[1].id
