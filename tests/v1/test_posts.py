# tests/v1/test_posts.py
"""Tests for the post feed and post endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from neoping_feed.models import ContentKind, User


def test_feed_pages_are_disjoint_and_cover_everything(
    client: TestClient, alice: User, make_item
) -> None:
    ids = {make_item(alice, title=f"post {i}").id for i in range(25)}

    pages = [client.get("/api/v1/posts", params={"page": p, "limit": 10}).json() for p in range(3)]

    seen = [item["id"] for page in pages for item in page["items"]]
    assert len(seen) == len(set(seen)) == 25
    assert set(seen) == ids
    assert [len(page["items"]) for page in pages] == [10, 10, 5]
    assert [page["has_more"] for page in pages] == [True, True, False]
    assert all(page["total"] == 25 for page in pages)
    assert pages[1]["offset"] == 10


def test_feed_is_newest_first(client: TestClient, alice: User, make_item) -> None:
    first = make_item(alice, title="older")
    second = make_item(alice, title="newer")

    items = client.get("/api/v1/posts").json()["items"]

    assert [item["id"] for item in items] == [second.id, first.id]


def test_feed_excludes_news(client: TestClient, alice: User, make_item) -> None:
    post = make_item(alice, kind=ContentKind.POST)
    make_item(alice, kind=ContentKind.NEWS)

    body = client.get("/api/v1/posts").json()

    assert [item["id"] for item in body["items"]] == [post.id]
    assert body["total"] == 1
    assert body["items"][0]["kind"] == "post"


def test_page_beyond_end_is_empty(client: TestClient, alice: User, make_item) -> None:
    for _ in range(3):
        make_item(alice)

    body = client.get("/api/v1/posts", params={"page": 5, "limit": 10}).json()

    assert body["items"] == []
    assert body["total"] == 3
    assert body["has_more"] is False


def test_category_filter_is_case_insensitive(client: TestClient, alice: User, make_item) -> None:
    tech = make_item(alice, category="Tech")
    make_item(alice, category="Sports")

    for value in ("tech", "TECH", "Tech"):
        body = client.get("/api/v1/posts", params={"category": value}).json()
        assert [item["id"] for item in body["items"]] == [tech.id]


def test_all_sentinel_disables_category_filter(client: TestClient, alice: User, make_item) -> None:
    make_item(alice, category="Tech")
    make_item(alice, category=None)

    for value in ("All", "all", ""):
        body = client.get("/api/v1/posts", params={"category": value}).json()
        assert body["total"] == 2


def test_category_takes_precedence_over_search(client: TestClient, alice: User, make_item) -> None:
    tech = make_item(alice, title="nothing to see", category="Tech")
    make_item(alice, title="python tips", category="Sports")

    body = client.get("/api/v1/posts", params={"category": "tech", "search": "python"}).json()

    assert [item["id"] for item in body["items"]] == [tech.id]


def test_search_matches_title_or_body(client: TestClient, alice: User, make_item) -> None:
    in_title = make_item(alice, title="Python tips")
    in_body = make_item(alice, title="misc", body="learning PYTHON today")
    make_item(alice, title="cooking", body="pasta")

    body = client.get("/api/v1/posts/latest", params={"search": "python"}).json()

    assert {item["id"] for item in body["items"]} == {in_title.id, in_body.id}


def test_popular_orders_by_likes(client: TestClient, alice: User, make_item) -> None:
    low = make_item(alice, like_count=1)
    high = make_item(alice, like_count=7)
    mid = make_item(alice, like_count=3)

    items = client.get("/api/v1/posts/popular").json()["items"]

    assert [item["id"] for item in items] == [high.id, mid.id, low.id]


def test_order_query_parameter_selects_popular(client: TestClient, alice: User, make_item) -> None:
    older_popular = make_item(alice, like_count=5)
    make_item(alice, like_count=0)

    items = client.get("/api/v1/posts", params={"order": "popular"}).json()["items"]

    assert items[0]["id"] == older_popular.id


def test_category_route(client: TestClient, alice: User, make_item) -> None:
    art = make_item(alice, category="Art")
    make_item(alice, category="Music")

    body = client.get("/api/v1/posts/category/art").json()

    assert [item["id"] for item in body["items"]] == [art.id]


def test_unauthenticated_flags_are_false(
    client: TestClient, alice: User, bob: User, bob_headers: dict[str, str], make_item
) -> None:
    post = make_item(alice)
    client.post(f"/api/v1/posts/{post.id}/like", headers=bob_headers)
    client.post(f"/api/v1/posts/{post.id}/bookmark", headers=bob_headers)

    anonymous = client.get("/api/v1/posts").json()["items"][0]
    as_bob = client.get("/api/v1/posts", headers=bob_headers).json()["items"][0]

    assert anonymous["liked_by_viewer"] is False
    assert anonymous["bookmarked_by_viewer"] is False
    assert as_bob["liked_by_viewer"] is True
    assert as_bob["bookmarked_by_viewer"] is True


def test_flags_are_per_viewer(
    client: TestClient,
    alice: User,
    alice_headers: dict[str, str],
    bob_headers: dict[str, str],
    make_item,
) -> None:
    post = make_item(alice)
    client.post(f"/api/v1/posts/{post.id}/like", headers=bob_headers)

    as_alice = client.get(f"/api/v1/posts/{post.id}", headers=alice_headers).json()

    assert as_alice["liked_by_viewer"] is False
    assert as_alice["like_count"] == 1


def test_invalid_token_is_rejected(client: TestClient, alice: User, make_item) -> None:
    make_item(alice)

    r = client.get("/api/v1/posts", headers={"Authorization": "Bearer not-a-token"})

    assert r.status_code == status.HTTP_401_UNAUTHORIZED
    assert r.json()["success"] is False


def test_get_post_by_id(client: TestClient, alice: User, make_item) -> None:
    post = make_item(alice, title="hello", body="world", category="Misc")

    r = client.get(f"/api/v1/posts/{post.id}")

    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["title"] == "hello"
    assert data["author"] == "alice"
    assert data["like_count"] == 0


def test_get_missing_post_is_404(client: TestClient) -> None:
    r = client.get("/api/v1/posts/9999")

    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert r.json() == {"success": False, "error": "Post not found"}


def test_news_id_is_not_a_post(client: TestClient, alice: User, make_item) -> None:
    story = make_item(alice, kind=ContentKind.NEWS)

    assert client.get(f"/api/v1/posts/{story.id}").status_code == status.HTTP_404_NOT_FOUND


def test_create_post(client: TestClient, alice: User, alice_headers: dict[str, str]) -> None:
    r = client.post(
        "/api/v1/posts",
        json={"title": "First", "body": "hello there", "category": "Life"},
        headers=alice_headers,
    )

    assert r.status_code == status.HTTP_201_CREATED
    data = r.json()
    assert data["kind"] == "post"
    assert data["author"] == "alice"
    assert (data["like_count"], data["upvotes"], data["comment_count"]) == (0, 0, 0)

    listed = client.get("/api/v1/posts").json()
    assert [item["id"] for item in listed["items"]] == [data["id"]]


def test_create_post_requires_auth(client: TestClient) -> None:
    r = client.post("/api/v1/posts", json={"title": "x"})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED


def test_create_post_validates_title(client: TestClient, alice_headers: dict[str, str]) -> None:
    r = client.post("/api/v1/posts", json={"title": ""}, headers=alice_headers)
    assert r.status_code == 422


def test_posts_by_user(client: TestClient, alice: User, bob: User, make_item) -> None:
    mine = make_item(alice)
    make_item(bob)

    r = client.get("/api/v1/posts/by-user/alice")

    assert [item["id"] for item in r.json()] == [mine.id]
    assert client.get("/api/v1/posts/by-user/nobody").status_code == status.HTTP_404_NOT_FOUND


def test_my_posts(client: TestClient, alice: User, bob: User, alice_headers: dict[str, str], make_item) -> None:
    mine = make_item(alice)
    make_item(bob)

    r = client.get("/api/v1/posts/user/me", headers=alice_headers)

    assert [item["id"] for item in r.json()] == [mine.id]
    assert client.get("/api/v1/posts/user/me").status_code == status.HTTP_401_UNAUTHORIZED


def test_comments_on_post(
    client: TestClient, alice: User, bob_headers: dict[str, str], make_item
) -> None:
    post = make_item(alice)

    first = client.post(
        f"/api/v1/posts/{post.id}/comments",
        json={"content": "nice"},
        headers=bob_headers,
    )
    second = client.post(
        f"/api/v1/posts/{post.id}/comments",
        json={"content": "really nice"},
        headers=bob_headers,
    )

    assert first.json()["comment_count"] == 1
    assert second.json()["comment_count"] == 2
    comments = client.get(f"/api/v1/posts/{post.id}/comments").json()["comments"]
    assert [c["content"] for c in comments] == ["nice", "really nice"]
    assert comments[0]["username"] == "bob"
    assert client.get(f"/api/v1/posts/{post.id}").json()["comment_count"] == 2


def test_empty_comment_is_stored_as_given(
    client: TestClient, alice: User, bob_headers: dict[str, str], make_item
) -> None:
    post = make_item(alice)

    r = client.post(f"/api/v1/posts/{post.id}/comments", json={"content": ""}, headers=bob_headers)

    assert r.status_code == status.HTTP_200_OK
    assert r.json()["comment_count"] == 1
    comments = client.get(f"/api/v1/posts/{post.id}/comments").json()["comments"]
    assert [c["content"] for c in comments] == [""]
    assert client.get(f"/api/v1/posts/{post.id}").json()["comment_count"] == 1


def test_search_treats_wildcards_literally(client: TestClient, alice: User, make_item) -> None:
    make_item(alice, title="cooking")
    make_item(alice, title="gardening")
    percent = make_item(alice, title="100% effort")
    underscore = make_item(alice, title="misc", body="snake_case names")

    def _ids(query: str) -> set[int]:
        body = client.get("/api/v1/posts", params={"search": query}).json()
        return {item["id"] for item in body["items"]}

    assert _ids("_") == {underscore.id}
    assert _ids("%") == {percent.id}
    assert _ids("0% e") == {percent.id}
    assert _ids("g%g") == set()


def test_page_index_is_bounded(client: TestClient, alice: User, make_item) -> None:
    make_item(alice)

    r = client.get("/api/v1/posts", params={"page": 10**12})

    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert "page" in body["error"]


def test_validation_errors_share_error_envelope(
    client: TestClient, alice_headers: dict[str, str]
) -> None:
    r = client.post("/api/v1/posts", json={"body": "no title"}, headers=alice_headers)

    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert body["error"].startswith("title")
    assert body["detail"][0]["loc"] == ["body", "title"]
