from typing import Optional

from sqlalchemy import Engine

from ..database import save_instances


class Saveable:
    """Mixin for entities that persist themselves."""

    def save(self, engine: Optional[Engine] = None) -> None:
        save_instances([self], engine)
