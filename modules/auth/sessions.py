"""Relational session store backing the auth cookie."""

import secrets
from datetime import datetime, timedelta
from typing import Callable

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from errors import StorageError
from extensions import db

from .models import UserSession


class SessionStore:
    """Create, look up and destroy sessions keyed by an opaque token.

    Sessions live for a fixed ``ttl`` counted from creation; activity does
    not extend them. An expired session behaves exactly like a missing one.
    """

    def __init__(self, ttl: timedelta = timedelta(hours=24), clock: Callable[[], datetime] = datetime.now) -> None:
        self.ttl = ttl
        self.clock = clock

    def create(self, user_id: int | None = None) -> str:
        now = self.clock()
        token = secrets.token_urlsafe(32)
        record = UserSession(
            token=token,
            user_id=user_id,
            authenticated=True,
            created_at=now,
            expires_at=now + self.ttl,
        )
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StorageError() from exc
        return token

    def get(self, token: str | None) -> UserSession | None:
        """Return the live session for ``token``; expired rows are dropped."""
        if not token:
            return None
        try:
            record = db.session.get(UserSession, token)
            if record is None:
                return None
            if record.is_expired(self.clock()):
                db.session.delete(record)
                db.session.commit()
                return None
            return record
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StorageError() from exc

    def is_authenticated(self, token: str | None) -> bool:
        record = self.get(token)
        return bool(record is not None and record.authenticated)

    def destroy(self, token: str | None) -> None:
        if not token:
            return
        try:
            db.session.execute(delete(UserSession).where(UserSession.token == token))
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StorageError() from exc

    def purge_expired(self) -> int:
        try:
            result = db.session.execute(delete(UserSession).where(UserSession.expires_at <= self.clock()))
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StorageError() from exc
        return result.rowcount or 0
