import os
import sys

# Put the repository root on sys.path so the top-level modules import
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import pytest

from app import create_app
from config import TestConfig
from models import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(client):
    resp = client.post("/api/auth/signup", json={
        "name": "Ada",
        "email": "ada@example.com",
        "password": "s3cret",
    })
    assert resp.status_code == 201
    return resp.get_json()


@pytest.fixture
def habit(client, user):
    resp = client.post("/api/habits", json={
        "userId": user["id"],
        "name": "Drink water",
        "dailyTarget": 4,
        "unit": "glasses",
    })
    assert resp.status_code == 201
    return resp.get_json()
