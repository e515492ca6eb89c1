from sqlalchemy import Column, String, Boolean
from leavedesk.core.database import Base

class User(Base):
    __tablename__ = "users"

    user_id = Column(String, primary_key=True, index=True)  # Externally assigned, immutable
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    mobile = Column(String, nullable=True)
    password = Column(String, nullable=False)  # bcrypt hash, never plaintext
    is_admin = Column(Boolean, default=False, nullable=False)
