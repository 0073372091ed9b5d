"""Database settings read from the environment (and a .env file when present)."""

import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

DATABASE_TYPE = os.getenv("DATABASE_TYPE", "sqlite")  # sqlite or postgresql
DATABASE_NAME = os.getenv("DATABASE_NAME", "vdf_proofs.db")


def build_database_url() -> URL:
    """Assemble the SQLAlchemy URL; credentials are only read for postgresql."""
    if DATABASE_TYPE == "sqlite":
        return URL.create("sqlite", database=DATABASE_NAME)
    return URL.create(
        "postgresql+psycopg2",
        username=os.getenv("DATABASE_USER", ""),
        password=os.getenv("DATABASE_PASSWORD", ""),
        host=os.getenv("DATABASE_HOST", "localhost"),
        port=int(os.getenv("DATABASE_PORT", "5432")),
        database=DATABASE_NAME,
    )


DATABASE_URL = build_database_url()
