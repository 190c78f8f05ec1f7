# ============================================================================
# FILE: moodplaylist/db/session.py
# ============================================================================
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from moodplaylist.config import settings
from moodplaylist.core.exceptions import ReferentialIntegrityError, StoreError
import logging

logger = logging.getLogger(__name__)

def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless this pragma is set per connection"""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

def build_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": settings.DB_CONNECT_TIMEOUT_SECONDS}
    engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)
    enable_sqlite_foreign_keys(engine)
    return engine

engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db() -> Iterator[Session]:
    """FastAPI dependency: one session per request"""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    return "foreign key" in str(exc.orig).lower()

@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Group the writes made inside the block into one transaction.
    Commits when the block exits normally, rolls back on any exception
    (cancellation included) and translates store errors into
    ReferentialIntegrityError / StoreError.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Integrity error, transaction rolled back: {e.orig}")
        if _is_foreign_key_violation(e):
            raise ReferentialIntegrityError("Referenced row does not exist") from e
        raise StoreError("Conflicting data could not be stored") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error, transaction rolled back: {e}")
        raise StoreError("Internal storage error") from e
    except BaseException:
        db.rollback()
        raise
