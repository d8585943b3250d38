def test_history_is_newest_first(client, saved_query_id):
    second = client.post("/api/sql/generate", json={"naturalLanguageQuery": "second"}).json()["queryId"]

    ids = [q["id"] for q in client.get("/api/queries").json()]
    assert ids == [second, saved_query_id]


def test_toggle_favorite(client, saved_query_id):
    response = client.patch(f"/api/queries/{saved_query_id}/favorite", json={"isFavorite": True})

    assert response.status_code == 200
    assert response.json()["isFavorite"] is True
    assert [q["id"] for q in client.get("/api/queries/favorites").json()] == [saved_query_id]

    client.patch(f"/api/queries/{saved_query_id}/favorite", json={"isFavorite": False})
    assert client.get("/api/queries/favorites").json() == []


def test_toggle_favorite_unknown_id_leaves_store_untouched(client, saved_query_id):
    before = client.get("/api/queries").json()

    response = client.patch("/api/queries/999/favorite", json={"isFavorite": True})

    assert response.status_code == 404
    assert response.json()["detail"] == "Query not found"
    assert client.get("/api/queries").json() == before


def test_delete_query(client, saved_query_id):
    response = client.delete(f"/api/queries/{saved_query_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/queries").json() == []
    assert client.delete(f"/api/queries/{saved_query_id}").status_code == 404


def test_share_without_expiry(client, saved_query_id):
    response = client.post(f"/api/queries/{saved_query_id}/share", json={"isPublic": True})

    assert response.status_code == 200
    body = response.json()
    token = body["shareToken"]
    assert len(token) == 12
    assert body["shareUrl"] == f"http://testserver/shared/{token}"
    assert "expiresAt" not in body

    shared = client.get(f"/api/shared/{token}")
    assert shared.status_code == 200
    shared_body = shared.json()
    assert shared_body["query"]["id"] == saved_query_id
    assert shared_body["isPublic"] is True
    assert "sharedAt" in shared_body


def test_share_without_body_defaults_to_private(client, saved_query_id):
    token = client.post(f"/api/queries/{saved_query_id}/share").json()["shareToken"]
    assert client.get(f"/api/shared/{token}").json()["isPublic"] is False


def test_share_tokens_are_unique(client, saved_query_id):
    tokens = {client.post(f"/api/queries/{saved_query_id}/share").json()["shareToken"] for _ in range(5)}
    assert len(tokens) == 5


def test_share_with_future_expiry(client, saved_query_id):
    body = client.post(f"/api/queries/{saved_query_id}/share", json={"expiresIn": 3600}).json()

    assert body["expiresAt"] is not None
    assert client.get(f"/api/shared/{body['shareToken']}").status_code == 200


def test_share_expiring_immediately_is_gone(client, saved_query_id):
    token = client.post(f"/api/queries/{saved_query_id}/share", json={"expiresIn": 0}).json()["shareToken"]

    response = client.get(f"/api/shared/{token}")
    assert response.status_code == 410
    assert response.json()["detail"] == "Shared query has expired"


def test_share_negative_expiry_rejected(client, saved_query_id):
    assert client.post(f"/api/queries/{saved_query_id}/share", json={"expiresIn": -5}).status_code == 422


def test_share_unknown_query(client):
    assert client.post("/api/queries/42/share", json={}).status_code == 404


def test_unknown_share_token(client):
    response = client.get("/api/shared/doesnotexist")
    assert response.status_code == 404
    assert response.json()["detail"] == "Shared query not found"


def test_share_of_deleted_query_is_not_found(client, saved_query_id):
    token = client.post(f"/api/queries/{saved_query_id}/share").json()["shareToken"]
    client.delete(f"/api/queries/{saved_query_id}")

    assert client.get(f"/api/shared/{token}").status_code == 404


def test_each_app_has_its_own_store(client, saved_query_id):
    from fastapi.testclient import TestClient

    from app.main import create_app

    with TestClient(create_app()) as other:
        assert other.get("/api/queries").json() == []


def test_share_expiry_beyond_datetime_range_rejected(client, saved_query_id):
    response = client.post(f"/api/queries/{saved_query_id}/share", json={"expiresIn": 10 ** 12})

    assert response.status_code == 422
    assert client.get("/api/queries").json()[0]["id"] == saved_query_id


def test_share_expiry_at_upper_bound(client, saved_query_id):
    from app.schemas.query import MAX_SHARE_SECONDS

    body = client.post(f"/api/queries/{saved_query_id}/share", json={"expiresIn": MAX_SHARE_SECONDS}).json()
    assert client.get(f"/api/shared/{body['shareToken']}").status_code == 200
