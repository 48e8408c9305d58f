# tests/v1/test_bookmarks.py
"""Tests for the bookmark listing."""

from fastapi import status
from fastapi.testclient import TestClient

from neoping_feed.models import ContentKind, User


def test_bookmarks_list_mixes_posts_and_news(
    client: TestClient,
    alice: User,
    bob_headers: dict[str, str],
    make_item,
) -> None:
    post = make_item(alice)
    story = make_item(alice, kind=ContentKind.NEWS)
    make_item(alice)

    client.post(f"/api/v1/posts/{post.id}/bookmark", headers=bob_headers)
    client.post(f"/api/v1/news/{story.id}/bookmark", headers=bob_headers)

    body = client.get("/api/v1/bookmarks", headers=bob_headers).json()

    assert body["total"] == 2
    assert {item["id"] for item in body["items"]} == {post.id, story.id}
    assert all(item["bookmarked_by_viewer"] for item in body["items"])
    assert body["has_more"] is False


def test_bookmarks_paginate(
    client: TestClient,
    alice: User,
    bob_headers: dict[str, str],
    make_item,
) -> None:
    for _ in range(3):
        post = make_item(alice)
        client.post(f"/api/v1/posts/{post.id}/bookmark", headers=bob_headers)

    first = client.get("/api/v1/bookmarks", params={"limit": 2}, headers=bob_headers).json()
    second = client.get("/api/v1/bookmarks", params={"page": 1, "limit": 2}, headers=bob_headers).json()

    assert len(first["items"]) == 2 and first["has_more"] is True
    assert len(second["items"]) == 1 and second["has_more"] is False
    assert not {i["id"] for i in first["items"]} & {i["id"] for i in second["items"]}


def test_bookmarks_require_auth(client: TestClient) -> None:
    assert client.get("/api/v1/bookmarks").status_code == status.HTTP_401_UNAUTHORIZED
