"""SQLAlchemy models for the book catalog."""

from datetime import datetime

from extensions import db


class Book(db.Model):
    """A catalogued book."""

    __tablename__ = "books"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    author = db.Column(db.String(255), nullable=False, index=True)
    isbn = db.Column(db.String(17), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.now)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Book {self.id}: {self.name}>"
