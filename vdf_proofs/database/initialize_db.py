import logging

from sqlalchemy.exc import OperationalError

from .database import get_engine, get_orm_base
from .entity import ProofEntity  # noqa: F401  registers the table on Base

logger = logging.getLogger(__name__)


def initialize_database() -> None:
    """
    Creates all tables defined in the ORM models.
    """
    engine = get_engine()
    try:
        logger.info("Initializing the database...")
        get_orm_base().metadata.create_all(engine)
        logger.info("Database initialized successfully.")
    except OperationalError:
        logger.exception("Failed to initialize the database")
        raise
    finally:
        engine.dispose()


if __name__ == "__main__":
    initialize_database()
