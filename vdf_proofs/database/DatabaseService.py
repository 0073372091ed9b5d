import logging
from typing import List, Optional

from sqlalchemy import Engine

from .database import save_instances
from .mixins.saveable import Saveable

logger = logging.getLogger(__name__)


class DatabaseService:
    """Batch persistence for proof entities."""

    @staticmethod
    def save_many(instances: List[Saveable], engine: Optional[Engine] = None) -> None:
        """
        Save entities in one transaction: either all of them are stored or none.

        Args:
            instances: Entities to save
            engine: Engine to write through, the configured database by default
        """
        if not instances:
            return
        save_instances(instances, engine)
        logger.info("Saved %d proof(s)", len(instances))
