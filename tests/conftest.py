"""Pytest fixtures: the Flask app on in-memory SQLite."""

import os

import pytest

# Must be set before app.py is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("STRICT_STATUS_TRANSITIONS", "")

from app import app as flask_app  # noqa: E402
from models import db  # noqa: E402
from services.goal_store import InMemoryGoalStore  # noqa: E402


@pytest.fixture
def app():
    flask_app.config["TESTING"] = True
    flask_app.config["STRICT_STATUS_TRANSITIONS"] = False
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def goal_store():
    return InMemoryGoalStore()


@pytest.fixture
def sample_entries():
    return [
        {"date": "2025-03-05", "amount": "100.00", "status": "received"},
        {"date": "2025-03-20", "amount": "50.00", "status": "pending"},
        {"date": "2025-04-01", "amount": "75.00", "status": "received"},
    ]
