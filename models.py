"""Shared SQLAlchemy models."""

from flask_login import UserMixin

from extensions import db


class User(UserMixin, db.Model):
    """The account whose password unlocks the catalog."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.username}>"
