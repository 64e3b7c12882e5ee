"""Error taxonomy and the JSON error handlers shared by every blueprint."""

from flask import jsonify, request
from werkzeug.exceptions import HTTPException


class CatalogError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(CatalogError):
    """Malformed or missing request fields, reported per field."""

    status_code = 400
    message = "Validation failed"

    def __init__(self, errors: dict[str, list[str]] | None = None, message: str | None = None) -> None:
        super().__init__(message)
        self.errors = errors or {}

    @classmethod
    def from_pydantic(cls, exc, message: str | None = None) -> "ValidationError":
        errors: dict[str, list[str]] = {}
        for item in exc.errors():
            loc = item.get("loc") or ()
            field = str(loc[0]) if loc else "body"
            errors.setdefault(field, []).append(item.get("msg", "Invalid value"))
        return cls(errors, message)

    def to_dict(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class AuthenticationError(CatalogError):
    status_code = 401
    message = "Authentication required"


class NotFoundError(CatalogError):
    status_code = 404
    message = "Book not found"


class StorageError(CatalogError):
    """The database failed; the message never carries driver details."""

    status_code = 500
    message = "Storage failure"


def register_error_handlers(app) -> None:
    """Funnel every failure into a JSON body with the mapped status code."""

    @app.errorhandler(CatalogError)
    def handle_catalog_error(exc: CatalogError):
        if exc.status_code >= 500:
            app.logger.error("%s %s failed: %s", request.method, request.path, exc.__class__.__name__)
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        if not request.path.startswith("/api"):
            return exc
        return jsonify({"message": exc.description or exc.name}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": "Internal Server Error"}), 500
