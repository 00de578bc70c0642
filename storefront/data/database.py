# storefront/data/database.py
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from storefront.utils.settings import DATABASE_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def make_engine(url: str):
    kwargs = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
    return create_engine(url, **kwargs)


engine = make_engine(DATABASE_URL)

# autocommit is off, every request runs in one explicit transaction
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def transaction(session_factory=None):
    """
    One connection per request:
    - commit when the block finishes normally
    - rollback and re-raise on any error
    - always close
    """
    db: Session = (session_factory or SessionLocal)()
    try:
        yield db
        db.commit()
    except Exception as e:
        logger.error(f"Transaction rolled back: {e!r}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


def get_conn(request: Request):
    """Dependency: the request's transactional connection, also kept as request.state.conn."""
    factory = getattr(request.app.state, "session_factory", None)
    with transaction(factory) as conn:
        request.state.conn = conn
        yield conn
