from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .constants import DATABASE_URL

_engine: Optional[Engine] = None

Base = declarative_base()


def get_engine() -> Engine:
    """Lazily create the process-wide engine for DATABASE_URL."""
    global _engine
    if _engine is None:
        _engine = create_engine(DATABASE_URL)
    return _engine


def get_orm_base():
    return Base


@contextmanager
def session_scope(engine: Optional[Engine] = None) -> Iterator[Session]:
    """
    Session bound to `engine` (the configured engine by default) that commits on exit.

    Attributes stay readable after the commit, so saved entities can still be
    printed once the session is closed. Any error rolls the transaction back
    and is re-raised.
    """
    session = sessionmaker(bind=engine or get_engine(), expire_on_commit=False)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def save_instances(instances: Iterable, engine: Optional[Engine] = None) -> None:
    """Add all instances in a single transaction."""
    with session_scope(engine) as session:
        session.add_all(list(instances))
