"""Unit tests for DeleteCommentUseCase."""

import pytest

from cinema.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from cinema.domain.repository import CommentRepository, MovieRepository, UserRepository
from tests.conftest import make_movie, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    @pytest.mark.asyncio
    async def test_reports_removed_subtree_size(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        user = await (await unit_env.get(UserRepository)).save(make_user())
        movie = await (await unit_env.get(MovieRepository)).save(make_movie())
        top = await create.execute(
            CreateCommentRequest(movie_id=movie.id, user_id=user.id, content="top")
        )
        parent_id = top.id
        for i in range(3):
            reply = await create.execute(
                CreateCommentRequest(
                    movie_id=movie.id,
                    user_id=user.id,
                    content=f"reply {i}",
                    parent_comment_id=parent_id,
                )
            )
            parent_id = reply.id

        # Act
        result = await delete.execute(
            DeleteCommentRequest(comment_id=top.id, user_id=user.id)
        )

        # Assert
        assert result.success is True
        assert result.removed_count == 4
        assert await (await unit_env.get(CommentRepository)).count_all() == 0
