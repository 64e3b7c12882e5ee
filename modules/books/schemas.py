"""Request/response contracts for the books API.

Field constraints live in ``BOOK_FIELD_RULES`` so the same rules apply to a
full insert and to a partial update, whatever the storage model looks like.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

ISBN_PATTERN = re.compile(r"^[0-9-]{10,17}$")


@dataclass(frozen=True)
class FieldRule:
    required_message: str
    pattern: Optional[re.Pattern] = None
    pattern_message: str = "Invalid value."

    def check(self, value: Optional[str]) -> str:
        value = (value or "").strip()
        if not value:
            raise PydanticCustomError("required", self.required_message)
        if self.pattern is not None and not self.pattern.match(value):
            raise PydanticCustomError("pattern", self.pattern_message)
        return value


BOOK_FIELD_RULES = {
    "name": FieldRule("Book name is required."),
    "author": FieldRule("Author is required."),
    "isbn": FieldRule("ISBN is required.", pattern=ISBN_PATTERN, pattern_message="Invalid ISBN."),
}


class BookCreate(BaseModel):
    name: str
    author: str
    isbn: str

    @field_validator("name", "author", "isbn")
    @classmethod
    def _apply_rules(cls, value, info):
        return BOOK_FIELD_RULES[info.field_name].check(value)


class BookUpdate(BaseModel):
    """Any subset of the editable fields; only supplied ones are checked."""

    name: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None

    @field_validator("name", "author", "isbn")
    @classmethod
    def _apply_rules(cls, value, info):
        return BOOK_FIELD_RULES[info.field_name].check(value)

    def changes(self) -> dict:
        return self.model_dump(include=self.model_fields_set)


class BookOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    author: str
    isbn: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class AuthorCount(BaseModel):
    author: str
    count: int


class CatalogStats(BaseModel):
    totalBooks: int
    uniqueAuthors: int
    todayBooks: int
    uniqueISBNs: int
    frequentAuthors: list[AuthorCount]
    recentBooks: list[BookOut]


def serialize_book(book) -> dict:
    return BookOut.model_validate(book).model_dump(mode="json", by_alias=True)
