"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from cinema.config import AuthSettings
from cinema.domain.service import JWTService
from cinema.domain.value import UserRole
from cinema.util.jwt import JWTError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestGetActorFromToken:
    def test_valid_token_yields_actor(self, jwt_service):
        # Arrange
        user_id = uuid4()
        token = jwt_service.create_token(
            str(user_id), role=UserRole.ADMIN, email="a@example.com"
        )

        # Act
        actor = jwt_service.get_actor_from_token(token)

        # Assert
        assert actor is not None
        assert actor.user_id == user_id
        assert actor.is_admin
        assert actor.email == "a@example.com"

    def test_missing_token_yields_none(self, jwt_service):
        assert jwt_service.get_actor_from_token(None) is None
        assert jwt_service.get_actor_from_token("") is None

    def test_token_signed_with_other_secret_yields_none(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(str(uuid4()))

        assert jwt_service.get_actor_from_token(token) is None

    def test_non_uuid_subject_yields_none(self, jwt_service):
        token = jwt_service.create_token("not-a-uuid")

        assert jwt_service.get_actor_from_token(token) is None

    def test_verify_token_raises_on_garbage(self, jwt_service):
        with pytest.raises(JWTError):
            jwt_service.verify_token("garbage")
