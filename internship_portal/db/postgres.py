from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session
from contextlib import contextmanager

from internship_portal.core.logging import get_logger

logger = get_logger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


class Database:
    """
    The persistence connector.

    Built once during application startup, shared by every request through
    dependency injection, and disposed at shutdown. Each call runs a single
    parameterized statement in its own short session.
    """

    def __init__(self, url: str, pool_size: int = 5, echo: bool = False):
        self.engine = create_engine(
            url,
            pool_size=pool_size,
            pool_pre_ping=True,
            echo=echo  # Log SQL queries in debug mode
        )
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @contextmanager
    def session(self):
        """
        Context manager for database sessions.
        Usage:
            with db.session() as s:
                s.execute(text("SELECT * FROM users"))
        """
        session: Session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def execute(self, sql: str, params: Optional[dict] = None) -> list:
        """
        Execute one statement and return its rows as a list of dicts.
        Statements without a result set return an empty list.
        """
        with self.session() as s:
            result = s.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            columns = list(result.keys())
            return [dict(zip(columns, row)) for row in result.fetchall()]

    def fetch_one(self, sql: str, params: Optional[dict] = None) -> Optional[dict]:
        rows = self.execute(sql, params)
        return rows[0] if rows else None

    def ping(self) -> bool:
        """
        Test if PostgreSQL is reachable.
        Returns True if connection successful, False otherwise.
        """
        try:
            row = self.fetch_one("SELECT 1 AS test")
            return row is not None and row["test"] == 1
        except Exception:
            logger.exception("PostgreSQL connection failed")
            return False

    def init_schema(self, path: Path = SCHEMA_PATH):
        """Create tables, constraints and indexes if they do not exist."""
        ddl = path.read_text(encoding="utf-8")
        with self.engine.begin() as conn:
            conn.exec_driver_sql(ddl)
        logger.info("Database schema applied from %s", path.name)

    def dispose(self):
        self.engine.dispose()
        logger.info("Database connections released")
