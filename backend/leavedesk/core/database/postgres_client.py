"""
PostgreSQL database client
"""
import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from typing import Dict, Any
from leavedesk.core.database.base import DatabaseClient

logger = logging.getLogger(__name__)

class PostgreSQLClient(DatabaseClient):
    """PostgreSQL database client implementation"""

    def __init__(self, url: str, pool_size: int = 10, max_overflow: int = 20, pool_recycle: int = 30):
        super().__init__(url)
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_recycle = pool_recycle

    def connect(self) -> bool:
        """Connect to PostgreSQL database"""
        try:
            self.engine = create_engine(
                self.url,
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_recycle=self.pool_recycle,
                pool_pre_ping=True,
            )
            self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
            self.is_connected = True
            return True
        except Exception as e:
            logger.error("PostgreSQL connection error: %s", e)
            self.is_connected = False
            return False

    def health_check(self) -> Dict[str, Any]:
        """Check PostgreSQL health"""
        url = make_url(self.url)
        return {
            "type": "postgresql",
            "connected": self.is_connected,
            "host": url.host,
            "database": url.database,
            "status": "healthy" if self.test_connection() else "unhealthy"
        }
