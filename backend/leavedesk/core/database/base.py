"""
Abstract base class for database clients
"""
from abc import ABC, abstractmethod
from typing import Any, Dict
from sqlalchemy.orm import Session

class DatabaseClient(ABC):
    """Base interface for all database clients"""

    def __init__(self, url: str):
        self.url = url
        self.engine = None
        self.SessionLocal = None
        self.is_connected = False

    @abstractmethod
    def connect(self) -> bool:
        """Create the engine and session factory"""
        pass

    def disconnect(self) -> bool:
        """Dispose the engine and its pooled connections"""
        if self.engine is not None:
            self.engine.dispose()
        self.is_connected = False
        return True

    def test_connection(self) -> bool:
        """Round-trip a trivial statement"""
        from sqlalchemy import text
        try:
            if not self.is_connected and not self.connect():
                return False
            with self.SessionLocal() as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    def get_session(self) -> Session:
        """Get database session"""
        if not self.is_connected:
            self.connect()
        return self.SessionLocal()

    @abstractmethod
    def health_check(self) -> Dict[str, Any]:
        """Check database health"""
        pass
