"""API tests for the comment routes.

The app runs against a test container with in-memory repositories; requests
go through httpx's ASGI transport without a network.
"""

from uuid import uuid4

import httpx
import pytest
import pytest_asyncio

from cinema.config import AuthSettings
from cinema.domain.repository import MovieRepository, UserRepository
from cinema.domain.service import JWTService
from cinema.domain.value import UserRole
from cinema.interface.api.app import create_app
from tests.conftest import make_movie, make_user
from tests.di import build_test_container


class ApiEnv:
    """App plus helpers to act as a given user."""

    def __init__(
        self,
        app,
        jwt_service: JWTService,
        users: UserRepository,
        movies: MovieRepository,
    ) -> None:
        self.app = app
        self.jwt_service = jwt_service
        self.users = users
        self.movies = movies

    def client(self, user=None) -> httpx.AsyncClient:
        cookies = {}
        if user is not None:
            cookies["auth_token"] = self.jwt_service.create_token(
                str(user.id), role=user.role, email=user.email
            )
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=self.app),
            base_url="http://test",
            cookies=cookies,
        )


@pytest_asyncio.fixture
async def api_env():
    container = build_test_container(with_fastapi=True)
    auth_settings = await container.get(AuthSettings)
    env = ApiEnv(
        create_app(container),
        JWTService(auth_settings),
        users=await container.get(UserRepository),
        movies=await container.get(MovieRepository),
    )
    yield env
    await container.close()


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, api_env):
        async with api_env.client() as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCreateComment:
    @pytest.mark.asyncio
    async def test_requires_authentication(self, api_env):
        movie = await api_env.movies.save(make_movie())

        async with api_env.client() as client:
            response = await client.post(
                f"/movies/{movie.id}/comments", json={"content": "hi"}
            )

        assert response.status_code == 401
        assert response.json()["detail"]["key"] == "unauthenticated"

    @pytest.mark.asyncio
    async def test_creates_comment(self, api_env):
        # Arrange
        user = await api_env.users.save(make_user("Agnes Varda"))
        movie = await api_env.movies.save(make_movie())

        # Act
        async with api_env.client(user) as client:
            response = await client.post(
                f"/movies/{movie.id}/comments",
                json={"content": "<em>Beautiful</em> shots"},
            )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["content"] == "Beautiful shots"
        assert body["nesting_level"] == 0
        assert body["reply_count"] == 0
        assert body["author"]["full_name"] == "Agnes Varda"

    @pytest.mark.asyncio
    async def test_unknown_movie_is_404(self, api_env):
        user = await api_env.users.save(make_user())

        async with api_env.client(user) as client:
            response = await client.post(
                f"/movies/{uuid4()}/comments", json={"content": "hi"}
            )

        assert response.status_code == 404
        assert response.json()["detail"]["key"] == "movieNotFound"

    @pytest.mark.asyncio
    async def test_malformed_movie_id_is_422(self, api_env):
        user = await api_env.users.save(make_user())

        async with api_env.client(user) as client:
            response = await client.post(
                "/movies/not-a-uuid/comments", json={"content": "hi"}
            )

        assert response.status_code == 422
        assert response.json()["detail"]["key"] == "validationError"

    @pytest.mark.asyncio
    async def test_markup_only_content_is_422(self, api_env):
        user = await api_env.users.save(make_user())
        movie = await api_env.movies.save(make_movie())

        async with api_env.client(user) as client:
            response = await client.post(
                f"/movies/{movie.id}/comments", json={"content": "<br>"}
            )

        assert response.status_code == 422
        assert response.json()["detail"]["key"] == "validationError"

    @pytest.mark.asyncio
    async def test_missing_body_field_uses_keyed_payload(self, api_env):
        user = await api_env.users.save(make_user())
        movie = await api_env.movies.save(make_movie())

        async with api_env.client(user) as client:
            response = await client.post(f"/movies/{movie.id}/comments", json={})

        assert response.status_code == 422
        assert response.json()["detail"]["key"] == "validationError"


class TestThreadLifecycle:
    @pytest.mark.asyncio
    async def test_create_list_edit_delete(self, api_env):
        # Arrange
        author = await api_env.users.save(make_user("Author"))
        replier = await api_env.users.save(make_user("Replier"))
        movie = await api_env.movies.save(make_movie())
        base = f"/movies/{movie.id}/comments"

        async with api_env.client(author) as author_client, api_env.client(
            replier
        ) as replier_client:
            top = (await author_client.post(base, json={"content": "top"})).json()
            child = (
                await replier_client.post(
                    base, json={"content": "child", "parent_comment_id": top["id"]}
                )
            ).json()
            grandchild = (
                await author_client.post(
                    base, json={"content": "grandchild", "parent_comment_id": child["id"]}
                )
            ).json()

            # Act
            listing = (await author_client.get(base)).json()
            direct = (await author_client.get(f"{base}/{top['id']}/replies")).json()
            nested = (
                await author_client.get(
                    f"{base}/{top['id']}/replies",
                    params={"include_nested_replies": "true"},
                )
            ).json()
            edited = await author_client.patch(
                f"/comments/{top['id']}", json={"content": "top, edited"}
            )
            forbidden = await replier_client.patch(
                f"/comments/{top['id']}", json={"content": "hijack"}
            )
            deleted = await author_client.delete(f"/comments/{top['id']}")
            after = (await author_client.get(base)).json()

        # Assert
        assert listing["total"] == 1
        assert listing["data"][0]["reply_count"] == 2
        assert [c["id"] for c in direct["data"]] == [child["id"]]
        assert [c["id"] for c in nested["data"]] == [child["id"], grandchild["id"]]
        assert nested["data"][0]["author"]["full_name"] == "Replier"

        assert edited.status_code == 200
        assert edited.json()["content"] == "top, edited"
        assert edited.json()["edited_at"] is not None

        assert forbidden.status_code == 403
        assert forbidden.json()["detail"]["key"] == "unauthorized"

        assert deleted.status_code == 200
        assert deleted.json() == {"success": True, "removed_count": 3}
        assert after["total"] == 0
        assert after["data"] == []

    @pytest.mark.asyncio
    async def test_delete_requires_authentication(self, api_env):
        async with api_env.client() as client:
            response = await client.delete(f"/comments/{uuid4()}")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_delete_unknown_comment_is_404(self, api_env):
        user = await api_env.users.save(make_user())

        async with api_env.client(user) as client:
            response = await client.delete(f"/comments/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"]["key"] == "commentNotFound"


class TestPagination:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 501}])
    async def test_out_of_range_paging_is_422(self, api_env, params):
        movie = await api_env.movies.save(make_movie())

        async with api_env.client() as client:
            response = await client.get(f"/movies/{movie.id}/comments", params=params)

        assert response.status_code == 422
        assert response.json()["detail"]["key"] == "validationError"

    @pytest.mark.asyncio
    async def test_pages_through_top_level(self, api_env):
        user = await api_env.users.save(make_user())
        movie = await api_env.movies.save(make_movie())

        async with api_env.client(user) as client:
            for i in range(3):
                await client.post(
                    f"/movies/{movie.id}/comments", json={"content": f"c{i}"}
                )
            page = (
                await client.get(
                    f"/movies/{movie.id}/comments", params={"page": 2, "limit": 2}
                )
            ).json()

        assert page["total"] == 3
        assert page["count"] == 1
        assert page["current_page"] == 2
        assert page["has_more"] is False


class TestStats:
    @pytest.mark.asyncio
    async def test_members_are_forbidden(self, api_env):
        member = await api_env.users.save(make_user())

        async with api_env.client(member) as client:
            response = await client.get("/stats/comments")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_sees_totals(self, api_env):
        admin = await api_env.users.save(make_user("Admin", role=UserRole.ADMIN))
        movie = await api_env.movies.save(make_movie("Stalker"))

        async with api_env.client(admin) as client:
            await client.post(f"/movies/{movie.id}/comments", json={"content": "zone"})
            response = await client.get("/stats/comments")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["today"] == 1
        assert body["recent"][0]["movie_name"] == "Stalker"
        assert body["recent"][0]["user_name"] == "Admin"
