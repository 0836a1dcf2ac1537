"""
Tests for bearer-token authentication on the bookmark endpoints.

Every /bookmarks route requires ``Authorization: Bearer <API_TOKEN>``;
/health is intentionally public.
"""
import pytest
from httpx import AsyncClient

from core.auth import verify_token
from core.config import Settings

TEST_API_TOKEN = "test-token-123"

PROTECTED_ENDPOINTS = [
    ("GET", "/bookmarks"),
    ("POST", "/bookmarks"),
    ("GET", "/bookmarks/some-id"),
    ("DELETE", "/bookmarks/some-id"),
]


class TestMissingOrMalformedHeader:
    """Requests without a usable Authorization header."""

    @pytest.mark.parametrize(("method", "path"), PROTECTED_ENDPOINTS)
    async def test__protected_endpoint__requires_authentication(
        self,
        anonymous_client: AsyncClient,
        method: str,
        path: str,
    ) -> None:
        """Protected endpoints return 401 when no header is sent."""
        response = await anonymous_client.request(method, path, json={})
        assert response.status_code == 401
        assert response.json() == {"error": "No valid Auth header found"}
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.parametrize("header", [
        f"Basic {TEST_API_TOKEN}",
        TEST_API_TOKEN,
        "Bearer",
        "Bearer ",
    ])
    async def test__malformed_header__is_rejected(
        self,
        anonymous_client: AsyncClient,
        header: str,
    ) -> None:
        """A header without the Bearer scheme and a token counts as missing."""
        response = await anonymous_client.get(
            "/bookmarks", headers={"Authorization": header},
        )
        assert response.status_code == 401
        assert response.json() == {"error": "No valid Auth header found"}

    async def test__malformed_json_body__is_rejected_before_parsing(
        self,
        anonymous_client: AsyncClient,
    ) -> None:
        """An unauthenticated POST gets a 401 even when its body is not JSON."""
        response = await anonymous_client.post(
            "/bookmarks",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 401
        assert response.json() == {"error": "No valid Auth header found"}


class TestTokenValidation:
    """Requests with a bearer token."""

    async def test__wrong_token__is_rejected(self, anonymous_client: AsyncClient) -> None:
        """A well-formed header with the wrong token is a 401."""
        response = await anonymous_client.get(
            "/bookmarks", headers={"Authorization": "Bearer wrong-token"},
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    async def test__correct_token__is_accepted(self, anonymous_client: AsyncClient) -> None:
        """The configured token grants access."""
        response = await anonymous_client.get(
            "/bookmarks", headers={"Authorization": f"Bearer {TEST_API_TOKEN}"},
        )
        assert response.status_code == 200

    async def test__scheme__is_case_insensitive(self, anonymous_client: AsyncClient) -> None:
        """The Bearer scheme is matched case-insensitively."""
        response = await anonymous_client.get(
            "/bookmarks", headers={"Authorization": f"bearer {TEST_API_TOKEN}"},
        )
        assert response.status_code == 200

    async def test__rejected_request__does_not_mutate_store(
        self,
        anonymous_client: AsyncClient,
        client: AsyncClient,
    ) -> None:
        """An unauthenticated create never reaches the store."""
        await anonymous_client.post(
            "/bookmarks",
            json={
                "title": "Ex",
                "url": "http://example.com",
                "desc": "A valid description",
                "rating": 3,
            },
        )
        response = await client.get("/bookmarks")
        assert response.json() == []


class TestHealthIsPublic:
    """The health endpoint needs no token."""

    async def test__health__accessible_without_authentication(
        self,
        anonymous_client: AsyncClient,
    ) -> None:
        """Health check works without an Authorization header."""
        response = await anonymous_client.get("/health")
        assert response.status_code == 200


class TestVerifyToken:
    """Unit tests for token comparison."""

    def test__verify_token__matches_exactly(self, settings: Settings) -> None:
        """Only the exact configured token verifies."""
        assert verify_token(TEST_API_TOKEN, settings)
        assert not verify_token(TEST_API_TOKEN.upper(), settings)
        assert not verify_token(TEST_API_TOKEN + "x", settings)
        assert not verify_token("", settings)
