"""SQLAlchemy models for cookie sessions."""

from datetime import datetime

from extensions import db


class UserSession(db.Model):
    """A login session, addressed by the opaque token stored in the cookie."""

    __tablename__ = "user_sessions"

    token = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"))
    authenticated = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<UserSession {self.token[:8]} expires={self.expires_at:%Y-%m-%d %H:%M}>"
