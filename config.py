import os


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///catalog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    APP_ENV = os.getenv('APP_ENV', 'development')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # single-account catalog: login only asks for the password
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD')

    SESSION_TTL_HOURS = int(os.getenv('SESSION_TTL_HOURS', '24'))
    SESSION_TOKEN_COOKIE = os.getenv('SESSION_TOKEN_COOKIE', 'catalog_session')
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv('SESSION_COOKIE_SAMESITE', 'Lax')
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', '1' if APP_ENV == 'production' else '0')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_PASSWORD = 'test-password'
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = 'WARNING'
