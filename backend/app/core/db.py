"""Database configuration and session management.

`DATABASE_URL` wins when set (any SQLAlchemy URL). Otherwise the backend uses a
SQLite file named `landing.db` inside `DB_DIR` (default `/app/db`).

Mount whatever host directory you prefer to `/app/db` via Docker Compose.
If the directory is not accessible at runtime, the backend logs an error and stops.
"""

from typing import Generator
from pathlib import Path
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
import os
from sqlalchemy.orm import Session, sessionmaker, declarative_base

DEFAULT_DB_FILENAME = "landing.db"
DB_DIR = Path(os.getenv("DB_DIR", "/app/db"))

logger = logging.getLogger(__name__)


def _ensure_dir(path: Path) -> tuple[bool, str]:
    try:
        if not path.exists():
            logger.warning("DB dir does not exist: %s. Attempting to create it", path)
        path.mkdir(parents=True, exist_ok=True)
        if not os.access(path, os.W_OK):
            return False, "directory not writable"
        return True, ""
    except Exception as exc:  # pragma: no cover - safety net
        return False, str(exc)


def _build_sqlite_url(db_dir: Path) -> str:
    db_file = db_dir / DEFAULT_DB_FILENAME
    logger.info("DB file path: %s", db_file)
    # `sqlite:///` + absolute path results in four slashes (sqlite:////...) which SQLAlchemy expects
    return f"sqlite:///{db_file.resolve()}"


def _resolve_database_url() -> str | None:
    """Return `DATABASE_URL` normalized for SQLAlchemy, or None when unset.

    Hosted Postgres providers hand out `postgres://` URLs which SQLAlchemy 2
    no longer accepts.
    """
    raw = os.getenv("DATABASE_URL", "").strip()
    if not raw:
        return None
    if raw.startswith("postgres://"):
        raw = raw.replace("postgres://", "postgresql://", 1)
    return raw


def _resolve_sql_echo() -> bool | str:
    """Resolve SQL echo flag from environment.

    Supports the following values for `LOG_SQL_ECHO`:
    - "" (unset or empty): returns False (no SQL echo)
    - truthy ("1", "true", "yes", "on"): returns True (INFO-level statements)
    - "debug": returns "debug" (DEBUG-level with parameter values)
    Any other value defaults to False.
    """
    raw = os.getenv("LOG_SQL_ECHO", "").strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("debug", "2", "verbose"):
        return "debug"
    return False


_engine: Engine | None = None
SessionLocal: sessionmaker | None = None

# Create base class for models
Base = declarative_base()


def get_engine() -> Engine:
    """Create the SQLAlchemy engine lazily.

    Without `DATABASE_URL`, ensures `DB_DIR` exists and is writable. If not,
    logs an error and exits.
    """
    global _engine, SessionLocal
    if _engine is not None:
        return _engine

    url = _resolve_database_url()
    if url is None:
        ok, reason = _ensure_dir(DB_DIR)
        if not ok:
            logger.error("Database directory '%s' is not usable: %s", DB_DIR, reason)
            raise SystemExit(1)
        logger.info("DB path resolved | using_dir=%s", DB_DIR)
        url = _build_sqlite_url(DB_DIR)

    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # Required for SQLite

    _engine = create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,
        echo=_resolve_sql_echo(),
    )
    logger.info("DB engine created | dialect=%s", _engine.dialect.name)

    # Bind a session factory
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    return _engine


def get_session_factory() -> sessionmaker:
    """Return the session factory, creating the engine on first use."""
    if SessionLocal is None:
        get_engine()
        assert SessionLocal is not None
    return SessionLocal


def get_session() -> Generator[Session, None, None]:
    """Get database session."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Initialize database tables.

    Safety principle: NEVER drop tables automatically in application code.
    This function only attempts to create missing tables.
    """
    # Import models so Base.metadata has the complete schema
    from app.models import SiteSetting, Provider, PoolGame, GameSnapshot  # noqa: F401

    logger.info("init_db: creating tables if missing")
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("init_db: ensured tables exist")


def bootstrap_db() -> None:
    """Insert default site settings that are missing; existing values are kept."""
    from app.core.config import load_config
    from app.services.site_settings import SiteSettingsService

    db = get_session_factory()()
    try:
        inserted = SiteSettingsService(db).ensure_defaults(load_config().timezone)
        if inserted:
            logger.info("bootstrap_db: inserted default settings | keys=%s", ",".join(inserted))
        else:
            logger.info("bootstrap_db: settings already present")
    finally:
        db.close()
