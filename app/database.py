from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings


def build_engine(database_url: str, echo: bool = False):
    url = make_url(database_url)
    kwargs = {"echo": echo, "pool_pre_ping": True}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory sqlite: every session must share the one connection
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **kwargs)

    if url.get_backend_name() == "sqlite":
        # sqlite leaves foreign keys unenforced unless asked per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def session_dependency(session_factory):
    """Build a FastAPI dependency yielding one session per request."""

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db


get_db = session_dependency(SessionLocal)
