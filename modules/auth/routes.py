"""HTTP routes for logging in and out of the catalog."""

from flask import current_app, jsonify, request
from flask_login import current_user

from errors import AuthenticationError
from extensions import db, get_session_store, login_manager
from models import User
from utils import load_json, no_cache

from . import bp
from .passwords import verify_password
from .schemas import AuthStatus, LoginRequest, LoginResponse
from .users import get_user_by_username


def _session_token() -> str | None:
    return request.cookies.get(current_app.config["SESSION_TOKEN_COOKIE"])


@login_manager.request_loader
def load_user_from_cookie(req) -> User | None:
    """Resolve the session cookie into the logged-in ``User``."""

    token = req.cookies.get(current_app.config["SESSION_TOKEN_COOKIE"])
    record = get_session_store().get(token)
    if record is None or not record.authenticated or record.user_id is None:
        return None
    return db.session.get(User, record.user_id)


@login_manager.unauthorized_handler
def unauthorized():
    raise AuthenticationError()


@bp.route("/login", methods=["POST"])
def login():
    data = load_json(LoginRequest, "Invalid login data")
    user = get_user_by_username(current_app.config["ADMIN_USERNAME"])

    if user is None or not verify_password(data.password, user.password):
        current_app.logger.warning("Rejected login attempt from %s", request.remote_addr)
        raise AuthenticationError("Invalid credentials")

    store = get_session_store()
    # a fresh token on every login; the one the client held is discarded
    store.destroy(_session_token())
    token = store.create(user_id=user.id)

    resp = jsonify(LoginResponse(success=True, message="Login successful").model_dump())
    resp.set_cookie(
        current_app.config["SESSION_TOKEN_COOKIE"],
        token,
        max_age=int(store.ttl.total_seconds()),
        httponly=True,
        secure=current_app.config["SESSION_COOKIE_SECURE"],
        samesite=current_app.config["SESSION_COOKIE_SAMESITE"],
    )
    current_app.logger.info("User '%s' logged in", user.username)
    return resp


@bp.route("/logout", methods=["POST"])
def logout():
    get_session_store().destroy(_session_token())
    resp = current_app.response_class(status=204)
    resp.delete_cookie(
        current_app.config["SESSION_TOKEN_COOKIE"],
        httponly=True,
        secure=current_app.config["SESSION_COOKIE_SECURE"],
        samesite=current_app.config["SESSION_COOKIE_SAMESITE"],
    )
    current_app.logger.info("Session closed")
    return resp


@bp.route("/status", methods=["GET"])
def status():
    payload = AuthStatus(authenticated=bool(current_user.is_authenticated))
    return no_cache(jsonify(payload.model_dump()))
