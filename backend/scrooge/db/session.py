"""
Database session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from scrooge.core.config import settings
from scrooge.db.base import Base


def make_engine(database_url: str = None, echo: bool = None) -> Engine:
    """Create an engine for the configured database."""
    database_url = database_url or settings.DATABASE_URL
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Requests are served from a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=settings.DB_ECHO if echo is None else echo,
        pool_pre_ping=True,
        connect_args=connect_args
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine):
    """Initialize database tables."""
    # Import models so SQLAlchemy registers them
    import scrooge.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
