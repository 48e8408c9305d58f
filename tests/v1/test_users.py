# tests/v1/test_users.py
"""Tests for profile endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from neoping_feed.models import ContentKind, User


class TestProfile:
    """Profile read and update."""

    def test_get_my_profile(self, client: TestClient, alice: User, alice_headers: dict[str, str]) -> None:
        r = client.get("/api/v1/users/me/profile", headers=alice_headers)

        assert r.status_code == status.HTTP_200_OK
        data = r.json()
        assert data["username"] == "alice"
        assert data["display_name"] == "Alice"
        assert data["email"] == "alice@example.com"

    def test_get_my_profile_unauthorized(self, client: TestClient) -> None:
        r = client.get("/api/v1/users/me/profile")
        assert r.status_code == status.HTTP_401_UNAUTHORIZED

    def test_public_profile(self, client: TestClient, alice: User) -> None:
        r = client.get("/api/v1/users/alice/profile")

        assert r.status_code == status.HTTP_200_OK
        assert r.json()["username"] == "alice"

    def test_unknown_profile_is_404(self, client: TestClient) -> None:
        r = client.get("/api/v1/users/ghost/profile")

        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.json()["error"] == "Profile not found"

    def test_partial_update_keeps_other_fields(
        self,
        client: TestClient,
        db_session: Session,
        alice: User,
        alice_headers: dict[str, str],
    ) -> None:
        r = client.patch(
            "/api/v1/users/me/profile",
            json={"bio": "Writes about rockets"},
            headers=alice_headers,
        )

        assert r.status_code == status.HTTP_200_OK
        data = r.json()
        assert data["bio"] == "Writes about rockets"
        assert data["display_name"] == "Alice"

        db_session.refresh(alice)
        assert alice.bio == "Writes about rockets"
        assert alice.email == "alice@example.com"

    def test_update_rejects_bad_email(self, client: TestClient, alice_headers: dict[str, str]) -> None:
        r = client.patch(
            "/api/v1/users/me/profile",
            json={"email": "not-an-email"},
            headers=alice_headers,
        )
        assert r.status_code == 422


def test_user_posts_listing(client: TestClient, alice: User, bob: User, make_item) -> None:
    older = make_item(alice)
    newer = make_item(alice)
    make_item(alice, kind=ContentKind.NEWS)
    make_item(bob)

    r = client.get("/api/v1/users/alice/posts")

    assert r.status_code == status.HTTP_200_OK
    assert [item["id"] for item in r.json()] == [newer.id, older.id]
    assert client.get("/api/v1/users/ghost/posts").status_code == status.HTTP_404_NOT_FOUND
