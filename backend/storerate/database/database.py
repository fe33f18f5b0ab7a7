from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from tenacity import retry, stop_after_attempt, wait_exponential

from storerate.core.config import settings
from storerate.core.logger import setup_logger
from storerate.models.base import Base
import storerate.models

logger = setup_logger("database")


def build_engine(url: str, **kwargs) -> Engine:
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_size", settings.DB_POOL_SIZE)
        kwargs.setdefault("pool_pre_ping", True)
    db_engine = create_engine(url, **kwargs)

    if db_engine.dialect.name == "sqlite":
        # SQLite ignores ON DELETE clauses unless asked per connection
        @event.listens_for(db_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = None) -> None:
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database schema synced")


@retry(stop=stop_after_attempt(3), wait=wait_exponential(multiplier=1, min=1, max=10), reraise=True)
def check_connection(bind: Engine = None) -> None:
    with (bind or engine).connect() as connection:
        connection.execute(text("SELECT 1"))
