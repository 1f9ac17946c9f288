from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings

Base = declarative_base()


def make_engine(url: str):
    if not url.startswith("sqlite"):
        return create_engine(url)
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every session sees an empty database
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def init_db(bind=None):
    # Import models so their tables are registered on Base.metadata
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
