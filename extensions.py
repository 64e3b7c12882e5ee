import sqlite3

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Extensions are created unbound and attached in create_app()

# Database
db = SQLAlchemy()

# Cookie-token authentication
login_manager = LoginManager()


def get_session_store():
    """Return the SessionStore bound to the running application."""
    return current_app.extensions["session_store"]


def get_book_repository():
    """Return the BookRepository bound to the running application."""
    return current_app.extensions["book_repository"]


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def register_sqlite_functions(dbapi_conn, connection_record):
    """SQLite's own lower() folds ASCII only; expose Python's for search."""
    if isinstance(dbapi_conn, sqlite3.Connection):
        dbapi_conn.create_function("unicode_lower", 1, _unicode_lower, deterministic=True)
