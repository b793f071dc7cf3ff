# student_intake/db/session.py
from typing import Generator
from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session


def build_engine(db_url: str) -> Engine:
    """Create the engine for ``db_url`` (e.g. "sqlite:///./student_intake.db")."""
    # SQLite-friendly connect args
    is_sqlite = db_url.startswith("sqlite")
    connect_args = {"check_same_thread": False, "timeout": 30} if is_sqlite else {}

    engine = create_engine(
        db_url,
        future=True,
        pool_pre_ping=True,
        connect_args=connect_args,
    )

    # Enable WAL + sane pragmas for SQLite
    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, connection_record):
            cur = dbapi_connection.cursor()
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.close()

    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        future=True,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a request-scoped Session.
    The factory is created once in ``create_app`` and kept on ``app.state``.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
