import os
from dataclasses import dataclass

from sqlalchemy.engine import URL


@dataclass(frozen=True)
class Settings:
    secret_key: str
    env: str
    database_url: str
    db_pool_size: int
    db_max_overflow: int
    db_pool_recycle_seconds: int

    app_port: int
    log_level: str
    shutdown_grace_seconds: int
    request_timeout_seconds: int


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getint(name: str, default: int) -> int:
    raw = _getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _database_url() -> str:
    """
    DATABASE_URL wins. Otherwise compose one from the DB_* parts; with
    neither present fall back to a local SQLite file.
    """
    url = _getenv("DATABASE_URL")
    if url:
        return url
    host = _getenv("DB_HOST")
    if not host:
        return "sqlite:///playground.db"
    sslmode = _getenv("DB_SSLMODE")
    composed = URL.create(
        _getenv("DB_DRIVER", "postgresql+psycopg2"),
        username=_getenv("DB_USER") or None,
        password=_getenv("DB_PASSWORD") or None,
        host=host,
        port=_getint("DB_PORT", 5432),
        database=_getenv("DB_NAME") or None,
        query={"sslmode": sslmode} if sslmode else {},
    )
    return composed.render_as_string(hide_password=False)


def load_settings() -> Settings:
    return Settings(
        secret_key=_getenv("SECRET_KEY", "change-me"),
        env=_getenv("ENV", "development"),
        database_url=_database_url(),
        db_pool_size=_getint("DB_POOL_SIZE", 5),
        db_max_overflow=_getint("DB_MAX_OVERFLOW", 10),
        db_pool_recycle_seconds=_getint("DB_POOL_RECYCLE_SECONDS", 1800),
        app_port=_getint("APP_PORT", _getint("PORT", 8080)),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        shutdown_grace_seconds=_getint("SHUTDOWN_GRACE_SECONDS", 5),
        request_timeout_seconds=_getint("REQUEST_TIMEOUT_SECONDS", 15),
    )


def load_config() -> dict:
    s = load_settings()
    return {
        "SECRET_KEY": s.secret_key,
        "ENV": s.env,
        "DATABASE_URL": s.database_url,
        "DB_POOL_SIZE": s.db_pool_size,
        "DB_MAX_OVERFLOW": s.db_max_overflow,
        "DB_POOL_RECYCLE_SECONDS": s.db_pool_recycle_seconds,
        "APP_PORT": s.app_port,
        "LOG_LEVEL": s.log_level,
        "SHUTDOWN_GRACE_SECONDS": s.shutdown_grace_seconds,
        "REQUEST_TIMEOUT_SECONDS": s.request_timeout_seconds,
    }
