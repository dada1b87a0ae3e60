from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from inventory_sync.config import settings

DATABASE_URL = settings.DATABASE_URL


def build_engine(url: str = DATABASE_URL, **kwargs):
    connect_args = kwargs.pop("connect_args", {})
    if url.startswith("sqlite"):
        # The store is driven from the event loop thread and from tests alike
        connect_args.setdefault("check_same_thread", False)
    return create_engine(url, connect_args=connect_args, echo=settings.DB_ECHO, **kwargs)


engine = build_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
