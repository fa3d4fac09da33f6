"""
Database connection and table creation for the local state mirror.
Uses SQLAlchemy; SQLite by default, any SQLAlchemy URL works.
The mirror is best-effort: the in-memory session stays authoritative.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from parkzone.config import settings

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,          # Auto-reconnect if DB connection drops
    # FastAPI runs sync handlers in a threadpool
    connect_args={"check_same_thread": False} if _is_sqlite else {},
    echo=False,                  # Set True to log all SQL queries (debug only)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yields a DB session and closes it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """Creates the mirror table on startup. Safe to call multiple times."""
    from parkzone.models.mirror_entry import MirrorEntry   # noqa

    Base.metadata.create_all(bind=engine)
