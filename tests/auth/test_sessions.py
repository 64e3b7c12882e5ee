"""Session store lifecycle."""

from datetime import timedelta

from extensions import db
from modules.auth.models import UserSession
from modules.auth.sessions import SessionStore


def test_create_marks_session_authenticated(app_ctx, clock) -> None:
    store = SessionStore(clock=clock)
    token = store.create()

    assert token
    assert store.is_authenticated(token)
    record = db.session.get(UserSession, token)
    assert record.expires_at - record.created_at == timedelta(hours=24)


def test_tokens_are_unique(app_ctx, clock) -> None:
    store = SessionStore(clock=clock)
    assert store.create() != store.create()


def test_unknown_and_missing_tokens_are_not_authenticated(app_ctx, clock) -> None:
    store = SessionStore(clock=clock)
    assert not store.is_authenticated(None)
    assert not store.is_authenticated("")
    assert not store.is_authenticated("never-issued")


def test_destroy_is_idempotent(app_ctx, clock) -> None:
    store = SessionStore(clock=clock)
    token = store.create()

    store.destroy(token)
    store.destroy(token)
    store.destroy(None)

    assert not store.is_authenticated(token)


def test_ttl_counts_from_creation_not_activity(app_ctx, clock) -> None:
    store = SessionStore(clock=clock)
    token = store.create()

    clock.advance(hours=23, minutes=59)
    assert store.is_authenticated(token)

    clock.advance(minutes=1)
    assert not store.is_authenticated(token)
    # the expired row is gone, not just hidden
    assert db.session.get(UserSession, token) is None


def test_purge_expired_removes_only_stale_rows(app_ctx, clock) -> None:
    store = SessionStore(ttl=timedelta(hours=1), clock=clock)
    old = store.create()
    clock.advance(minutes=30)
    fresh = store.create()
    clock.advance(minutes=45)

    assert store.purge_expired() == 1
    assert db.session.get(UserSession, old) is None
    assert store.is_authenticated(fresh)
