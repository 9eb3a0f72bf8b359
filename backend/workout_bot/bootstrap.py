"""
Process startup: configuration check, logging, database, schema and seed data.

Anything that fails here is fatal: the bot refuses to run half-configured.
"""
import logging
import os

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

import config
from workout_bot.database import Base, create_db_engine, make_session_factory
from workout_bot.errors import ConfigError
from workout_bot.seed import seed_exercises
from workout_bot.store import Store
import workout_bot.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)

BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ALEMBIC_INI = os.path.join(BACKEND_DIR, "alembic.ini")


def configure_logging(level: str = None):
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def check_config(required=config.REQUIRED_SETTINGS):
    missing = config.missing_settings(required)
    if missing:
        raise ConfigError(f"{', '.join(missing)} is required")
    if config.JWT_SECRET == config.DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; tokens are signed with the insecure default secret")


def run_migrations(engine: Engine):
    """Apply Alembic migrations, then make sure every table exists."""
    try:
        from alembic.config import Config
        from alembic import command
        alembic_cfg = Config(ALEMBIC_INI)
        with engine.begin() as connection:
            alembic_cfg.attributes["connection"] = connection
            command.upgrade(alembic_cfg, "head")
        logger.info("[Alembic] Migrations applied successfully")
    except Exception as e:
        logger.exception(f"[Alembic] Migration failed, falling back to create_all: {e}")

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        raise ConfigError(f"Schema setup failed: {e}") from e


def build_store(database_url: str = None, seed: bool = True) -> Store:
    """Connect, migrate and seed. Raises ConfigError when the database is unusable."""
    url = database_url or config.DATABASE_URL
    if not url:
        raise ConfigError("DATABASE_URL is required")

    try:
        engine = create_db_engine(url)
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise ConfigError(f"DB connection error: {e}") from e

    run_migrations(engine)
    store = Store(make_session_factory(engine))
    if seed:
        seed_exercises(store)
    return store
