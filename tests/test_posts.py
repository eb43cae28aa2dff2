"""Post Tests

Publishing rules, visibility of unpublished posts, counters and statistics.
"""

import pytest


def _create_post(client, headers=None, **overrides):
    payload = {"title": "Consensus reading group", "content": "Notes on Raft and Paxos."}
    payload.update(overrides)
    response = client.post("/api/posts", json=payload, headers=headers or {})
    assert response.status_code == 200, response.text
    return response.json()


class TestPostCreation:
    """POST /api/posts"""

    def test_defaults(self, client):
        post = _create_post(client)

        assert post["status"] == "DRAFT"
        assert post["allowComments"] is True
        assert post["featured"] is False
        assert post["viewCount"] == 0
        assert post["likeCount"] == 0
        assert post["publishedAt"] is None
        assert post["authorId"] is None

    def test_published_gets_timestamp(self, client):
        post = _create_post(client, status="PUBLISHED")

        assert post["status"] == "PUBLISHED"
        assert post["publishedAt"] is not None

    def test_author_from_token(self, client, admin_headers):
        post = _create_post(client, headers=admin_headers)

        assert post["authorId"] is not None
        assert post["authorName"] == "Lab Admin"

    @pytest.mark.parametrize("field", ["title", "content"])
    def test_blank_required_field(self, client, field):
        payload = {"title": "t", "content": "c", field: "   "}
        response = client.post("/api/posts", json=payload)
        assert response.status_code == 422

    def test_title_too_long(self, client):
        response = client.post("/api/posts", json={"title": "x" * 201, "content": "c"})
        assert response.status_code == 422


class TestPostVisibility:
    """GET /api/posts/{id}"""

    def test_published_visible_to_anyone(self, client):
        post = _create_post(client, status="PUBLISHED")
        response = client.get(f"/api/posts/{post['id']}")
        assert response.status_code == 200

    def test_draft_hidden_from_anonymous(self, client):
        post = _create_post(client)
        response = client.get(f"/api/posts/{post['id']}")
        assert response.status_code == 403

    def test_draft_hidden_from_non_admin(self, client, user_headers):
        post = _create_post(client)
        response = client.get(f"/api/posts/{post['id']}", headers=user_headers)
        assert response.status_code == 403

    def test_draft_visible_to_admin(self, client, admin_headers):
        post = _create_post(client)
        response = client.get(f"/api/posts/{post['id']}", headers=admin_headers)
        assert response.status_code == 200

    def test_missing_post(self, client):
        assert client.get("/api/posts/999").status_code == 404


class TestPostListing:
    """Paged and unpaged post lists"""

    def test_list_only_published(self, client):
        _create_post(client, title="draft one")
        for i in range(3):
            _create_post(client, title=f"published {i}", status="PUBLISHED")

        response = client.get("/api/posts", params={"page": 0, "size": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["totalPages"] == 2
        assert data["hasNext"] is True
        assert data["hasPrev"] is False
        assert len(data["content"]) == 2

    def test_list_sorted_ascending(self, client):
        for title in ("b", "a", "c"):
            _create_post(client, title=title, status="PUBLISHED")

        response = client.get("/api/posts", params={"sortBy": "title", "sortDirection": "asc"})
        assert [p["title"] for p in response.json()["content"]] == ["a", "b", "c"]

    def test_unknown_sort_field(self, client):
        response = client.get("/api/posts", params={"sortBy": "nonsense"})
        assert response.status_code == 400

    def test_by_status(self, client):
        _create_post(client)
        _create_post(client, status="PUBLISHED")

        data = client.get("/api/posts/status/DRAFT").json()
        assert data["total"] == 1
        assert data["content"][0]["status"] == "DRAFT"

    def test_featured(self, client):
        _create_post(client, title="feat", status="PUBLISHED", featured=True)
        _create_post(client, title="feat draft", featured=True)
        _create_post(client, title="plain", status="PUBLISHED")

        titles = [p["title"] for p in client.get("/api/posts/featured").json()]
        assert titles == ["feat"]

    def test_latest_limit(self, client):
        for i in range(4):
            _create_post(client, title=f"post {i}", status="PUBLISHED")

        response = client.get("/api/posts/latest", params={"limit": 2})
        assert len(response.json()) == 2

    def test_search(self, client):
        _create_post(client, title="Zero knowledge proofs", status="PUBLISHED")
        _create_post(client, title="Zero knowledge draft")
        _create_post(client, title="Byzantine faults", status="PUBLISHED")

        data = client.get("/api/posts/search", params={"keyword": "knowledge"}).json()
        assert data["total"] == 1
        assert data["content"][0]["title"] == "Zero knowledge proofs"

    def test_by_tag(self, client):
        _create_post(client, title="tagged", status="PUBLISHED", tags="consensus,zk")
        _create_post(client, title="other", status="PUBLISHED", tags="ml")

        titles = [p["title"] for p in client.get("/api/posts/tag/zk").json()]
        assert titles == ["tagged"]

    @pytest.mark.parametrize("tag", ["%25", "_"])
    def test_by_tag_wildcards_are_literal(self, client, tag):
        _create_post(client, title="zk post", status="PUBLISHED", tags="zk")
        _create_post(client, title="ml post", status="PUBLISHED", tags="ml")

        assert client.get(f"/api/posts/tag/{tag}").json() == []

    def test_by_tag_with_literal_percent(self, client):
        _create_post(client, title="discount", status="PUBLISHED", tags="50%off")
        _create_post(client, title="other", status="PUBLISHED", tags="50off")

        titles = [p["title"] for p in client.get("/api/posts/tag/50%25off").json()]
        assert titles == ["discount"]


class TestPostMutations:
    """Update, delete, status and permission checks"""

    def test_update_overwrites(self, client):
        post = _create_post(client, summary="old summary", featured=True)

        response = client.put(
            f"/api/posts/{post['id']}",
            json={"title": "New title", "content": "New content", "status": "PUBLISHED"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "New title"
        assert data["summary"] is None
        assert data["publishedAt"] is not None

    def test_update_requires_status(self, client):
        post = _create_post(client)
        response = client.put(f"/api/posts/{post['id']}", json={"title": "t", "content": "c"})
        assert response.status_code == 422

    def test_update_by_other_user_forbidden(self, client, admin_headers, user_headers):
        post = _create_post(client, headers=admin_headers)

        response = client.put(
            f"/api/posts/{post['id']}",
            json={"title": "t", "content": "c", "status": "DRAFT"},
            headers=user_headers,
        )
        assert response.status_code == 403

    def test_delete_by_other_user_forbidden(self, client, admin_headers, user_headers):
        post = _create_post(client, headers=admin_headers)
        response = client.delete(f"/api/posts/{post['id']}", headers=user_headers)
        assert response.status_code == 403

    def test_anonymous_delete(self, client, admin_headers):
        post = _create_post(client, headers=admin_headers)

        assert client.delete(f"/api/posts/{post['id']}").status_code == 200
        assert client.get(f"/api/posts/{post['id']}", headers=admin_headers).status_code == 404

    def test_status_patch_keeps_first_publish_time(self, client):
        post = _create_post(client, status="PUBLISHED")
        first = post["publishedAt"]

        client.patch(f"/api/posts/{post['id']}/status", params={"status": "ARCHIVED"})
        response = client.patch(f"/api/posts/{post['id']}/status", params={"status": "PUBLISHED"})

        assert response.json()["publishedAt"] == first

    def test_display_order(self, client):
        post = _create_post(client, status="PUBLISHED")

        response = client.patch(f"/api/posts/{post['id']}/display-order", params={"displayOrder": 7})

        assert response.status_code == 200
        assert client.get(f"/api/posts/{post['id']}").json()["displayOrder"] == 7


class TestPostCounters:
    """Likes and views"""

    def test_like_unlike(self, client):
        post = _create_post(client, status="PUBLISHED")
        url = f"/api/posts/{post['id']}"

        client.post(f"{url}/like")
        client.post(f"{url}/like")
        client.delete(f"{url}/like")

        assert client.get(url).json()["likeCount"] == 1

    def test_unlike_floors_at_zero(self, client):
        post = _create_post(client, status="PUBLISHED")
        url = f"/api/posts/{post['id']}"

        assert client.delete(f"{url}/like").status_code == 200
        assert client.get(url).json()["likeCount"] == 0

    def test_view_count(self, client):
        post = _create_post(client, status="PUBLISHED")
        url = f"/api/posts/{post['id']}"

        for _ in range(3):
            assert client.post(f"{url}/view").status_code == 200

        assert client.get(url).json()["viewCount"] == 3

    def test_view_missing_post(self, client):
        assert client.post("/api/posts/999/view").status_code == 404


class TestPostStatistics:
    """GET /api/posts/statistics"""

    def test_empty(self, client):
        data = client.get("/api/posts/statistics").json()

        assert data["totalPosts"] == 0
        assert data["statusCounts"] == {"DRAFT": 0, "PUBLISHED": 0, "ARCHIVED": 0}
        assert data["totalViews"] == 0

    def test_counts(self, client):
        _create_post(client)
        published = _create_post(client, status="PUBLISHED")
        client.post(f"/api/posts/{published['id']}/like")
        client.post(f"/api/posts/{published['id']}/view")

        data = client.get("/api/posts/statistics").json()

        assert data["totalPosts"] == 2
        assert data["statusCounts"]["DRAFT"] == 1
        assert data["statusCounts"]["PUBLISHED"] == 1
        assert data["statusCounts"]["ARCHIVED"] == 0
        assert data["totalLikes"] == 1
        assert data["totalViews"] == 1
