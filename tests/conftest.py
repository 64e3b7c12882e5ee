# tests/conftest.py
import os
import sys
from datetime import datetime, timedelta

import pytest

# so that `from app import create_app` works when pytest runs from the root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from config import TestingConfig
from extensions import db


class FakeClock:
    """Deterministic stand-in for ``datetime.now``."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 5, 10, 9, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture()
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_ctx(app):
    # only for tests that touch models directly; client requests push their own context
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_password(app):
    return app.config["ADMIN_PASSWORD"]


@pytest.fixture()
def logged_in_client(client, admin_password):
    resp = client.post("/api/auth/login", json={"password": admin_password})
    assert resp.status_code == 200
    return client


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def repo(app_ctx, clock):
    from modules.books.repository import BookRepository

    return BookRepository(clock=clock)
