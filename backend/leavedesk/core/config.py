from pydantic_settings import BaseSettings
from typing import Optional, List, Union
from urllib.parse import quote_plus

import os

class Settings(BaseSettings):
    # Base directory calculation (backend/leavedesk/core/config.py -> backend/)
    BASE_DIR: str = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

    # Database - DATABASE_URL wins, otherwise built from the libpq style PG* variables
    DATABASE_URL: Optional[str] = None
    PGUSER: str = "postgres"
    PGPASSWORD: str = ""
    PGHOST: str = "localhost"
    PGPORT: int = 5432
    PGDATABASE: str = "leavedesk"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE_SECONDS: int = 30

    # JWT
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60  # 1 hour

    # Bcrypt cost factor
    BCRYPT_ROUNDS: int = 10

    # Status returned when a bearer token is present but cannot be verified.
    # 403 keeps existing clients working, 401 unifies all authentication failures.
    INVALID_TOKEN_STATUS: int = 403

    # Guard levels: "none", "identity" or "admin"
    STATISTICS_GUARD: str = "none"
    USER_MANAGEMENT_GUARD: str = "identity"

    # CORS - can be comma-separated string or list
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = quote_plus(self.PGPASSWORD)
        return (
            f"postgresql://{self.PGUSER}:{password}"
            f"@{self.PGHOST}:{self.PGPORT}/{self.PGDATABASE}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS_ORIGINS to list format"""
        if not self.CORS_ORIGINS:
            return ["*"]
        if isinstance(self.CORS_ORIGINS, list):
            return self.CORS_ORIGINS
        return [
            origin.strip()
            for origin in self.CORS_ORIGINS.split(",")
            if origin.strip()
        ]

    @property
    def cors_allow_credentials(self) -> bool:
        # Browsers reject credentialed requests against a wildcard origin
        return "*" not in self.cors_origins_list

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
