"""Account helpers used by the login view, app start-up and create_user.py."""

from flask import current_app

from extensions import db
from models import User

from .passwords import hash_password


def get_user_by_username(username: str) -> User | None:
    return User.query.filter_by(username=username).first()


def create_user(username: str, password: str) -> User:
    username = (username or "").strip()
    if not username:
        raise ValueError("Username must not be empty")
    if get_user_by_username(username):
        raise ValueError(f"User '{username}' already exists")

    user = User(username=username, password=hash_password(password))
    db.session.add(user)
    db.session.commit()
    return user


def set_password(username: str, password: str) -> User:
    """Rotate the password of an existing user."""
    user = get_user_by_username(username)
    if user is None:
        raise LookupError(f"User '{username}' does not exist")
    user.password = hash_password(password)
    db.session.commit()
    return user


def ensure_admin() -> User | None:
    """Seed the admin account from ``ADMIN_PASSWORD`` when it is missing."""
    username = current_app.config["ADMIN_USERNAME"]
    user = get_user_by_username(username)
    if user is not None:
        return user

    password = current_app.config.get("ADMIN_PASSWORD")
    if not password:
        current_app.logger.warning(
            "No '%s' account and ADMIN_PASSWORD is unset; login is impossible until one is created", username
        )
        return None

    user = create_user(username, password)
    current_app.logger.info("Seeded '%s' account", username)
    return user
