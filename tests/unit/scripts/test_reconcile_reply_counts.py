"""Unit tests for the reply count reconcile script."""

from uuid import uuid4

import pytest
import pytest_asyncio

from cinema.domain.repository import CommentRepository
from cinema.domain.service import CommentService
from cinema.domain.value import CommentId, MovieId, UserId
from scripts.reconcile_reply_counts import main, reconcile
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    yield container
    await container.close()


async def seed_drifted_thread(container):
    """Root with one reply and one grandchild, both counters corrupted."""
    async with container() as request_container:
        service = await request_container.get(CommentService)
        repo = await request_container.get(CommentRepository)
        movie_id, user_id = MovieId(uuid4()), UserId(uuid4())

        root = await service.create_comment(movie_id, user_id, "root")
        child = await service.create_comment(
            movie_id, user_id, "child", parent_comment_id=root.id
        )
        await service.create_comment(
            movie_id, user_id, "grandchild", parent_comment_id=child.id
        )

        await repo.adjust_reply_count(root.id, 40)
        await repo.adjust_reply_count(child.id, -1)
    return root, child, repo


class TestReconcile:
    @pytest.mark.asyncio
    async def test_without_ids_repairs_every_comment(self, container):
        # Arrange
        root, child, repo = await seed_drifted_thread(container)

        # Act
        summary = await reconcile(container, batch_size=2)

        # Assert
        assert summary.checked == 3
        assert summary.fixed == 2
        assert summary.missing == []
        assert (await repo.find_by_id(root.id)).reply_count == 2
        assert (await repo.find_by_id(child.id)).reply_count == 1

    @pytest.mark.asyncio
    async def test_unknown_id_does_not_stop_the_run(self, container):
        # Arrange
        root, _, repo = await seed_drifted_thread(container)
        unknown = CommentId(uuid4())

        # Act
        summary = await reconcile(container, [unknown, root.id])

        # Assert
        assert summary.missing == [str(unknown)]
        assert summary.checked == 1
        assert summary.fixed == 1
        assert (await repo.find_by_id(root.id)).reply_count == 2

    @pytest.mark.asyncio
    async def test_consistent_counters_are_left_alone(self, container):
        await seed_drifted_thread(container)
        await reconcile(container)

        summary = await reconcile(container)

        assert summary.checked == 3
        assert summary.fixed == 0


class TestMain:
    def test_malformed_id_is_usage_error(self):
        assert main(["not-a-uuid"]) == 2
