"""
SQLite database client (local development and tests)
"""
import logging
import os
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from typing import Dict, Any
from leavedesk.core.database.base import DatabaseClient

logger = logging.getLogger(__name__)

def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

class SQLiteClient(DatabaseClient):
    """SQLite database client implementation"""

    def __init__(self, url: str):
        super().__init__(url)
        self.db_path = make_url(url).database

    @property
    def in_memory(self) -> bool:
        return not self.db_path or self.db_path == ":memory:"

    def connect(self) -> bool:
        """Connect to SQLite database"""
        try:
            kwargs = {"connect_args": {"check_same_thread": False}}
            if self.in_memory:
                # A single shared connection, otherwise every checkout sees an empty database
                kwargs["poolclass"] = StaticPool
            else:
                directory = os.path.dirname(self.db_path)
                if directory:
                    os.makedirs(directory, exist_ok=True)

            self.engine = create_engine(self.url, **kwargs)
            event.listen(self.engine, "connect", _enable_foreign_keys)
            self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
            self.is_connected = True
            return True
        except Exception as e:
            logger.error("SQLite connection error: %s", e)
            self.is_connected = False
            return False

    def health_check(self) -> Dict[str, Any]:
        """Check SQLite health"""
        return {
            "type": "sqlite",
            "connected": self.is_connected,
            "path": self.db_path or ":memory:",
            "status": "healthy" if self.test_connection() else "unhealthy"
        }
