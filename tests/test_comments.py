"""Unit tests for the in-memory comments store.

WHY: The comments routes rely on the store's create/list/delete
contract and on its locking under concurrent requests.

HOW: Each test builds a fresh CommentStore; thread-safety tests hammer
one store from several threads.
"""

from __future__ import annotations

import threading

import pytest

from case_converter.errors import CommentStoreError
from case_converter.server.comments import Comment, CommentStore


class TestCreate:

    def test_create_returns_comment(self):
        store = CommentStore()
        comment = store.create("first!", author="ana")
        assert isinstance(comment, Comment)
        assert comment.body == "first!"
        assert comment.author == "ana"
        assert len(comment.id) == 32
        assert comment.created_at > 0

    def test_ids_are_unique(self):
        store = CommentStore()
        ids = {store.create("c{}".format(i)).id for i in range(20)}
        assert len(ids) == 20

    def test_author_is_optional(self):
        assert CommentStore().create("x").author is None

    def test_capacity_limit(self):
        store = CommentStore(max_comments=2)
        store.create("a")
        store.create("b")
        with pytest.raises(CommentStoreError, match="Maximum number of comments"):
            store.create("c")


class TestRead:

    def test_list_empty(self):
        assert CommentStore().list_comments() == []

    def test_list_oldest_first(self):
        store = CommentStore()
        first = store.create("a")
        second = store.create("b")
        assert [c.id for c in store.list_comments()] == [first.id, second.id]

    def test_list_returns_a_copy(self):
        store = CommentStore()
        store.create("a")
        listing = store.list_comments()
        listing.clear()
        assert len(store.list_comments()) == 1

    def test_get(self):
        store = CommentStore()
        comment = store.create("a")
        assert store.get(comment.id) is comment
        assert store.get("missing") is None


class TestDelete:

    def test_delete_returns_removed_comment(self):
        store = CommentStore()
        comment = store.create("a")
        assert store.delete_by_id(comment.id) is comment
        assert store.get(comment.id) is None

    def test_delete_missing_returns_none(self):
        assert CommentStore().delete_by_id("missing") is None

    def test_delete_twice(self):
        store = CommentStore()
        comment = store.create("a")
        store.delete_by_id(comment.id)
        assert store.delete_by_id(comment.id) is None

    def test_clear(self):
        store = CommentStore()
        store.create("a")
        store.clear()
        assert store.list_comments() == []


class TestThreadSafety:

    def test_concurrent_creates(self):
        store = CommentStore(max_comments=1000)
        errors = []

        def worker():
            try:
                for i in range(50):
                    store.create("c{}".format(i))
            except Exception as exc:  # pragma: no cover
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(store.list_comments()) == 400

    def test_concurrent_create_and_delete(self):
        store = CommentStore(max_comments=1000)
        created = [store.create("c{}".format(i)) for i in range(200)]

        def deleter(chunk):
            for comment in chunk:
                store.delete_by_id(comment.id)

        threads = [
            threading.Thread(target=deleter, args=(created[i::4],))
            for i in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.list_comments() == []
