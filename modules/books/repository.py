"""Data access for books.

Every public method is one statement plus a commit. Driver failures are
rolled back and re-raised as ``StorageError`` so callers never see SQL.
"""

from datetime import datetime
from functools import wraps
from typing import Callable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import delete, func, or_
from sqlalchemy.exc import SQLAlchemyError

from errors import NotFoundError, StorageError, ValidationError
from extensions import db

from .models import Book
from .schemas import BookCreate, BookUpdate

# ids outside a signed 64-bit INTEGER can never name a stored row
MAX_BOOK_ID = 2**63 - 1


def _storage_guard(method):
    @wraps(method)
    def wrapped(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StorageError() from exc
    return wrapped


def _validated(schema: type[BaseModel], data) -> BaseModel:
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data or {})
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc, "Invalid book data") from exc


def _check_id(book_id: int) -> None:
    if not 0 < book_id <= MAX_BOOK_ID:
        raise NotFoundError()


def _escape_like(keyword: str) -> str:
    return keyword.replace("/", "//").replace("%", "/%").replace("_", "/_")


class BookRepository:
    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self.clock = clock

    @staticmethod
    def _ordered(query):
        # newest first; id breaks ties between identical timestamps
        return query.order_by(Book.created_at.desc(), Book.id.desc())

    @_storage_guard
    def create(self, data) -> Book:
        payload = _validated(BookCreate, data)
        now = self.clock()
        book = Book(
            name=payload.name,
            author=payload.author,
            isbn=payload.isbn,
            created_at=now,
            updated_at=now,
        )
        db.session.add(book)
        db.session.commit()
        return book

    @_storage_guard
    def get(self, book_id: int) -> Book:
        _check_id(book_id)
        book = db.session.get(Book, book_id)
        if book is None:
            raise NotFoundError()
        return book

    @_storage_guard
    def update(self, book_id: int, data) -> Book:
        changes = _validated(BookUpdate, data).changes()
        book = self.get(book_id)
        for field, value in changes.items():
            setattr(book, field, value)
        book.updated_at = max(self.clock(), book.created_at)
        db.session.commit()
        return book

    @_storage_guard
    def delete(self, book_id: int) -> bool:
        _check_id(book_id)
        result = db.session.execute(delete(Book).where(Book.id == book_id))
        db.session.commit()
        if not result.rowcount:
            raise NotFoundError()
        return True

    @_storage_guard
    def list_all(self) -> list[Book]:
        return self._ordered(Book.query).all()

    @_storage_guard
    def search(self, query: str | None) -> list[Book]:
        keyword = (query or "").strip()
        if not keyword:
            return self.list_all()

        columns = (Book.name, Book.author, Book.isbn)
        if db.session.get_bind().dialect.name == "sqlite":
            # unicode_lower is registered on every SQLite connection in extensions.py
            pattern = f"%{_escape_like(keyword.lower())}%"
            matches = [func.unicode_lower(col).like(pattern, escape="/") for col in columns]
        else:
            matches = [col.icontains(keyword, autoescape=True) for col in columns]

        return self._ordered(Book.query.filter(or_(*matches))).all()
