from datetime import timedelta

from flask import Flask, jsonify
from dotenv import load_dotenv
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)
from errors import register_error_handlers  # noqa: E402


def create_app(config_object=Config) -> Flask:
    """Application factory for the book catalog API."""

    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)

    from modules.auth.sessions import SessionStore
    from modules.books.repository import BookRepository

    app.extensions["session_store"] = SessionStore(ttl=timedelta(hours=app.config["SESSION_TTL_HOURS"]))
    app.extensions["book_repository"] = BookRepository()

    # blueprints
    from modules.auth import bp as auth_bp
    from modules.books import bp as books_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(books_bp)

    register_error_handlers(app)

    @app.route("/api/health")
    def health():
        try:
            db.session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            app.logger.exception("Database health check failed")
            return jsonify({"status": "degraded", "database": "unavailable"}), 503
        return jsonify({"status": "healthy", "database": "connected"})

    # DB
    with app.app_context():
        # models must be imported before create_all()
        from models import User  # noqa: F401
        from modules.auth import models as auth_models  # noqa: F401
        from modules.books import models as books_models  # noqa: F401

        db.create_all()

        from modules.auth.users import ensure_admin

        ensure_admin()
        purged = app.extensions["session_store"].purge_expired()
        if purged:
            app.logger.info("Purged %d expired sessions", purged)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=app.config["APP_ENV"] != "production")
