import os

# Settings are read at import time
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from leavedesk.main import app
from leavedesk.core.database import Base, get_db
from leavedesk.core.database.sqlite_client import _enable_foreign_keys
from leavedesk.models.user import User
from leavedesk.core.security import get_password_hash

# 1. Setup In-Memory SQLite Database
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
# Cascading deletes need the pragma on every connection
event.listen(engine, "connect", _enable_foreign_keys)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 2. Dependency Override
def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

# 3. Fixtures
@pytest.fixture(scope="module")
def client():
    # Create tables
    Base.metadata.create_all(bind=engine)

    # Pre-seed Data
    db = TestingSessionLocal()

    if not db.query(User).filter(User.user_id == "admin").first():
        db.add(User(
            user_id="admin",
            name="Admin",
            email="admin@example.com",
            mobile="0000000000",
            password=get_password_hash("admin123"),
            is_admin=True,
        ))

    if not db.query(User).filter(User.user_id == "user1").first():
        db.add(User(
            user_id="user1",
            name="Normal User",
            email="user@example.com",
            mobile="1111111111",
            password=get_password_hash("user123"),
            is_admin=False,
        ))

    db.commit()
    db.close()

    with TestClient(app) as c:
        yield c

    # Drop tables (cleanup)
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="module")
def admin_token(client):
    response = client.post("/signin", json={"user_id": "admin", "password": "admin123"})
    return response.json()["token"]

@pytest.fixture(scope="module")
def user_token(client):
    response = client.post("/signin", json={"user_id": "user1", "password": "user123"})
    return response.json()["token"]

def auth_header(token):
    return {"Authorization": f"Bearer {token}"}

@pytest.fixture
def admin_headers(admin_token):
    return auth_header(admin_token)

@pytest.fixture
def user_headers(user_token):
    return auth_header(user_token)
