# picstash/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from picstash.config import Settings

# Base class for all models
Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    """Create the database engine"""
    kwargs = {"echo": settings.debug}  # SQL query log
    if settings.database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory databases live as long as their single connection
        if ":memory:" in settings.database_url or settings.database_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
    return create_engine(settings.database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to the engine"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Open and close a DB session per request"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
