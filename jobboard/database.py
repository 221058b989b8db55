# jobboard/database.py
import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from jobboard import config

log = logging.getLogger("jobboard.database")

Base = declarative_base()


class Database:
    """Owns the engine and session factory for one process.

    Built once at startup (see ``main.create_app``) and disposed on shutdown.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or config.default_database_url()
        parsed = make_url(self.url)

        connect_args = {}
        engine_kwargs = {}
        # Required for SQLite when used with FastAPI/threads
        if parsed.drivername.startswith("sqlite"):
            connect_args["check_same_thread"] = False
            # In-memory databases live on a single shared connection
            if parsed.database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(
            self.url,
            echo=config.SQL_ECHO if echo is None else echo,
            connect_args=connect_args,
            pool_pre_ping=True,  # avoid stale connections on resume
            **engine_kwargs,
        )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        # Side-effect import registers the tables on Base.metadata
        from jobboard import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            log.warning("Database ping failed: %s", e)
            return False

    def dispose(self) -> None:
        self.engine.dispose()

    def __repr__(self) -> str:
        return f"<Database url={make_url(self.url).render_as_string(hide_password=True)!r}>"
