from workout_bot.database import Base, create_db_engine, make_session_factory
from workout_bot.store import Store
import workout_bot.models  # noqa: F401

# Use an in-memory SQLite DB for testing logic only
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


def make_store():
    """Fresh in-memory database with every table created. Returns (store, engine)."""
    engine = create_db_engine(SQLALCHEMY_DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    return Store(make_session_factory(engine)), engine
