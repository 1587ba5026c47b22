"""Database package: engine, session factory, init_db(), get_session(), dispose_db()."""

import threading
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from threadmail.config import DATABASE_ECHO, DATABASE_URL, SEED_DEMO_DATA
from threadmail.db.base import Base

# Import all models so Base.metadata has all tables
from threadmail.db.models import Email, Folder, Thread, ThreadFolder, User  # noqa: F401
from threadmail.utils.logger import get_logger

logger = get_logger("threadmail.db")

_init_lock = threading.Lock()
_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def _get_engine(url: str) -> Engine:
    """Create engine; SQLite connections may be used from worker threads."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, echo=DATABASE_ECHO, pool_pre_ping=True)
    kwargs = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # One shared connection, otherwise every session gets its own empty database
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=DATABASE_ECHO, **kwargs)


def init_db(url: str | None = None, seed: bool | None = None) -> None:
    """Create engine and tables once. A brand-new database is seeded from the packaged demo CSVs when seeding is on."""
    global _engine, _SessionLocal
    with _init_lock:
        if _SessionLocal is not None:
            return
        engine = _get_engine(url or DATABASE_URL)
        is_new = not inspect(engine).has_table(User.__tablename__)
        Base.metadata.create_all(bind=engine)
        should_seed = SEED_DEMO_DATA if seed is None else seed
        if is_new and should_seed:
            from threadmail.db.seed_data import seed_mock_data

            with Session(bind=engine) as session:
                inserted = seed_mock_data(session)
                session.commit()
            url_text = engine.url.render_as_string(hide_password=True)
            if inserted:
                logger.info("db.init.seeded", url=url_text, rows=inserted)
            else:
                logger.warning("db.init.seed_empty", url=url_text)
        _engine = engine
        _SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
        logger.debug("db.init.ready", created=is_new)


def dispose_db() -> None:
    """Close the pool and forget the engine so the next init_db() can bind a different URL."""
    global _engine, _SessionLocal
    with _init_lock:
        if _engine is not None:
            _engine.dispose()
        _engine = None
        _SessionLocal = None


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Context manager yielding a DB session. Calls init_db() on first use."""
    init_db()
    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
