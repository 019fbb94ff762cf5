import os
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Default to a local sqlite file if not specified
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./semaforo.db")

Base = declarative_base()

def build_engine(url: Optional[str] = None, echo: bool = False, pool_pre_ping: bool = True) -> Engine:
    """
    Creates the engine for the backing store.
    In-memory sqlite shares one connection so every session sees the same tables.
    """
    url = url or DATABASE_URL
    kwargs = {"echo": echo, "pool_pre_ping": pool_pre_ping}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)

def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

def init_db(bind: Engine):
    """Initialize database tables."""
    # Import models here to ensure they are registered with Base
    from . import models
    Base.metadata.create_all(bind=bind)
