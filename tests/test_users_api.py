def test_get_user_hides_password(client, user):
    resp = client.get(f"/api/users/{user['id']}")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["email"] == "ada@example.com"
    assert body["badges"] == []
    assert "password" not in body


def test_get_missing_user(client):
    assert client.get("/api/users/nope").status_code == 404


def test_add_points_awards_level_and_badge(client, user):
    resp = client.put(f"/api/users/{user['id']}/points", json={"points": 95})
    assert resp.get_json()["level"] == 1

    resp = client.put(f"/api/users/{user['id']}/points", json={"points": 10})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["points"] == 105
    assert body["level"] == 2
    assert body["badges"] == ["Centenary"]

    # persisted, not just echoed
    assert client.get(f"/api/users/{user['id']}").get_json()["badges"] == ["Centenary"]


def test_badges_survive_point_loss(client, user):
    client.put(f"/api/users/{user['id']}/points", json={"points": 520})
    body = client.put(f"/api/users/{user['id']}/points", json={"points": -500}).get_json()
    assert body["points"] == 20
    assert body["level"] == 1
    assert body["badges"] == ["Centenary", "Champion"]


def test_points_for_missing_user(client):
    assert client.put("/api/users/nope/points", json={"points": 10}).status_code == 404


def test_points_must_be_integer(client, user):
    assert client.put(f"/api/users/{user['id']}/points", json={"points": "10"}).status_code == 400


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "habits" in resp.get_json()["endpoints"]


def test_unknown_route_keeps_404(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "message" in resp.get_json()
