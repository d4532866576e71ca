import jwt

from models import db, User


def test_signup_returns_profile_and_token(app, client):
    resp = client.post("/api/auth/signup", json={"name": "Ada", "email": "Ada@Example.com", "password": "pw"})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["name"] == "Ada"
    assert body["email"] == "ada@example.com"
    assert body["points"] == 0
    assert body["level"] == 1
    assert "password" not in body
    payload = jwt.decode(body["token"], app.config["JWT_SECRET_KEY"], algorithms=["HS256"])
    assert payload["user_id"] == body["id"]


def test_password_is_stored_hashed(app, client, user):
    with app.app_context():
        stored = db.session.get(User, user["id"])
        assert stored.password != "s3cret"
        assert stored.password.startswith("$2")


def test_duplicate_email_rejected(client, user):
    resp = client.post("/api/auth/signup", json={"name": "Other", "email": "ADA@example.com", "password": "pw"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Email already registered"


def test_signup_requires_fields(client):
    resp = client.post("/api/auth/signup", json={"name": "Ada"})
    assert resp.status_code == 400


def test_signup_requires_json_object(client):
    resp = client.post("/api/auth/signup", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_login(client, user):
    resp = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "s3cret"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == user["id"]
    assert body["badges"] == []
    assert body["token"]


def test_login_wrong_password(client, user):
    resp = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "nope"})
    assert resp.status_code == 401


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "pw"})
    assert resp.status_code == 401


def test_password_over_bcrypt_limit_rejected(client, user):
    resp = client.post("/api/auth/signup", json={"name": "Bob", "email": "bob@example.com", "password": "p" * 100})
    assert resp.status_code == 400
    resp = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "p" * 100})
    assert resp.status_code == 400


def test_password_whitespace_is_significant(client):
    resp = client.post("/api/auth/signup", json={"name": "Bob", "email": "bob@example.com", "password": " pw "})
    assert resp.status_code == 201
    assert client.post("/api/auth/login", json={"email": "bob@example.com", "password": " pw "}).status_code == 200
    assert client.post("/api/auth/login", json={"email": "bob@example.com", "password": "pw"}).status_code == 401
