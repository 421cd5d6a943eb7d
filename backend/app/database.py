"""Database access layer: lazily created engine (connection pool), sessions and raw query helpers."""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool

from app.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

Base = declarative_base()
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

_engine: Optional[Engine] = None


def _init_mysql_session(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("SET SESSION sql_mode = 'TRADITIONAL'")
        cursor.execute("SET NAMES 'utf8'")
    finally:
        cursor.close()


def _build_engine(**overrides) -> Engine:
    url = settings.database_url()
    options: Dict[str, Any] = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            pool_recycle=settings.DB_POOL_RECYCLE,
            connect_args={"connect_timeout": settings.DB_CONNECT_TIMEOUT},
        )
    options.update(overrides)
    if options.get("poolclass") is NullPool:
        options.pop("pool_size", None)
        options.pop("pool_recycle", None)
    engine = create_engine(url, **options)
    if settings.is_mysql():
        event.listen(engine, "connect", _init_mysql_session)
    return engine


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = _build_engine()
        logger.info(
            "[db] connection pool created for %s:%s/%s",
            settings.DB_HOST, settings.DB_PORT, settings.DB_NAME,
        )
    return _engine


def close_engine() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
        logger.info("[db] connection pool closed")


def get_db():
    db = SessionLocal(bind=get_engine())
    try:
        yield db
    finally:
        db.close()


def create_connection() -> Connection:
    """Open a single connection outside the pool. The caller closes it."""
    try:
        connection = _build_engine(poolclass=NullPool).connect()
    except Exception as exc:
        logger.error(
            "[db] connection error: %s (host=%s port=%s user=%s database=%s)",
            exc, settings.DB_HOST, settings.DB_PORT, settings.DB_USER, settings.DB_NAME,
        )
        raise
    logger.info("[db] connection established to %s:%s/%s", settings.DB_HOST, settings.DB_PORT, settings.DB_NAME)
    return connection


def execute_query(sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """Run a parameterized statement on the pool and return the rows as dicts."""
    try:
        with get_engine().begin() as conn:
            result = conn.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            return [dict(row._mapping) for row in result]
    except Exception as exc:
        logger.error("[db] query execution error: %s | sql=%s | params=%s", exc, sql, params)
        raise


def run_in_transaction(callback: Callable[[Connection], T]) -> T:
    """Call ``callback`` with a connection inside a transaction; roll back if it raises."""
    with get_engine().connect() as conn:
        trans = conn.begin()
        try:
            result = callback(conn)
            trans.commit()
            return result
        except Exception:
            trans.rollback()
            raise


def table_exists(table_name: str) -> bool:
    try:
        return inspect(get_engine()).has_table(table_name)
    except Exception as exc:
        logger.error("[db] error checking table existence for %s: %s", table_name, exc)
        return False


def get_table_structure(table_name: str) -> List[Dict[str, Any]]:
    columns = inspect(get_engine()).get_columns(table_name)
    return [
        {
            "name": column["name"],
            "type": str(column["type"]),
            "nullable": bool(column.get("nullable", True)),
            "default": column.get("default"),
        }
        for column in columns
    ]
