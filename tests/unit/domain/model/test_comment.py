"""Unit tests for the Comment entity."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from cinema.domain.model.comment import MAX_NESTING_LEVEL, Comment
from cinema.domain.value import CommentId, MovieId, UserId


def _comment(**overrides) -> Comment:
    fields = {
        "id": CommentId(uuid4()),
        "movie_id": MovieId(uuid4()),
        "user_id": UserId(uuid4()),
        "content": "Hello",
    }
    fields.update(overrides)
    return Comment(**fields)


class TestCommentInvariants:
    def test_top_level_defaults(self):
        comment = _comment()

        assert comment.is_top_level
        assert comment.nesting_level == 0
        assert comment.reply_count == 0
        assert comment.edited_at is None

    def test_nested_comment_needs_parent_and_root(self):
        parent_id = CommentId(uuid4())

        comment = _comment(
            parent_comment_id=parent_id,
            root_parent_comment_id=parent_id,
            nesting_level=1,
        )

        assert not comment.is_top_level

    @pytest.mark.parametrize(
        "overrides",
        [
            {"nesting_level": 1},
            {"parent_comment_id": CommentId(uuid4())},
            {"root_parent_comment_id": CommentId(uuid4()), "nesting_level": 2},
        ],
    )
    def test_inconsistent_nesting_fields_rejected(self, overrides):
        with pytest.raises(ValidationError):
            _comment(**overrides)

    def test_level_above_max_rejected(self):
        parent_id = CommentId(uuid4())

        with pytest.raises(ValidationError):
            _comment(
                parent_comment_id=parent_id,
                root_parent_comment_id=parent_id,
                nesting_level=MAX_NESTING_LEVEL + 1,
            )

    def test_negative_reply_count_rejected(self):
        with pytest.raises(ValidationError):
            _comment(reply_count=-1)

    def test_empty_content_rejected(self):
        with pytest.raises(ValidationError):
            _comment(content="")

    def test_comment_is_immutable(self):
        comment = _comment()

        with pytest.raises(ValidationError):
            comment.content = "changed"
