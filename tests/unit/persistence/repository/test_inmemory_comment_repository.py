"""Unit tests for InMemoryCommentRepository.

The in-memory repository stands in for postgres in every unit test, so its
query semantics must match the SQL implementation.
"""

from datetime import datetime
from uuid import uuid4

import pytest

from cinema.domain.value import CommentId, MovieId, UserId
from cinema.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment


@pytest.fixture
def repo() -> InMemoryCommentRepository:
    return InMemoryCommentRepository()


class TestReplyCounter:
    @pytest.mark.asyncio
    async def test_adjust_never_goes_negative(self, repo):
        comment = await repo.save(make_comment(MovieId(uuid4()), UserId(uuid4())))

        await repo.adjust_reply_count(comment.id, 2)
        await repo.adjust_reply_count(comment.id, -5)

        assert (await repo.find_by_id(comment.id)).reply_count == 0

    @pytest.mark.asyncio
    async def test_adjust_missing_comment_is_noop(self, repo):
        await repo.adjust_reply_count(CommentId(uuid4()), 1)

        assert await repo.count_all() == 0


class TestDescendants:
    @pytest.mark.asyncio
    async def test_finds_transitive_and_root_linked_descendants(self, repo):
        # Arrange
        movie_id, user_id = MovieId(uuid4()), UserId(uuid4())
        root = await repo.save(make_comment(movie_id, user_id, "root"))
        child = await repo.save(make_comment(movie_id, user_id, "child", root))
        grandchild = await repo.save(make_comment(movie_id, user_id, "gc", child))
        unrelated = await repo.save(make_comment(movie_id, user_id, "other"))

        # Act
        from_root = await repo.find_descendant_ids(root.id)
        from_child = await repo.find_descendant_ids(child.id)

        # Assert
        assert set(from_root) == {child.id, grandchild.id}
        assert set(from_child) == {grandchild.id}
        assert unrelated.id not in from_root

    @pytest.mark.asyncio
    async def test_delete_many_counts_only_existing(self, repo):
        comment = await repo.save(make_comment(MovieId(uuid4()), UserId(uuid4())))

        removed = await repo.delete_many([comment.id, CommentId(uuid4())])

        assert removed == 1
        assert await repo.find_by_id(comment.id) is None


class TestReplyQueries:
    @pytest.mark.asyncio
    async def test_nested_filter_excludes_parent_itself(self, repo):
        # Arrange
        movie_id, user_id = MovieId(uuid4()), UserId(uuid4())
        root = await repo.save(make_comment(movie_id, user_id, "root"))
        child = await repo.save(make_comment(movie_id, user_id, "child", root))
        await repo.save(make_comment(movie_id, user_id, "gc", child))

        # Act & Assert
        assert await repo.count_replies(root.id) == 1
        assert await repo.count_replies(root.id, include_nested=True) == 2
        assert await repo.count_direct_replies(root.id) == 1
        assert await repo.count_root_descendants(root.id) == 1
        nested = await repo.find_replies(root.id, include_nested=True)
        assert root.id not in {c.id for c in nested}


class TestInsertionOrder:
    @pytest.mark.asyncio
    async def test_same_timestamp_lists_latest_insert_first(self, repo):
        movie_id = MovieId(uuid4())
        same_time = datetime(2026, 3, 1, 20, 0, 0)
        saved = [
            await repo.save(
                make_comment(movie_id, UserId(uuid4()), f"c{i}", created_at=same_time)
            )
            for i in range(4)
        ]

        listed = await repo.find_top_level(movie_id, limit=10)

        assert [c.id for c in listed] == [c.id for c in reversed(saved)]

    @pytest.mark.asyncio
    async def test_update_keeps_original_position(self, repo):
        movie_id = MovieId(uuid4())
        first = await repo.save(make_comment(movie_id, UserId(uuid4()), "first"))
        second = await repo.save(make_comment(movie_id, UserId(uuid4()), "second"))

        await repo.save(first.with_changes(reply_count=3))

        assert await repo.find_ids() == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_find_ids_pages(self, repo):
        movie_id = MovieId(uuid4())
        saved = [
            await repo.save(make_comment(movie_id, UserId(uuid4()), f"c{i}"))
            for i in range(5)
        ]

        pages = [await repo.find_ids(limit=2, offset=o) for o in (0, 2, 4)]

        assert pages == [
            [saved[0].id, saved[1].id],
            [saved[2].id, saved[3].id],
            [saved[4].id],
        ]
