from pydantic import BaseModel
from typing import Optional

class UserPublic(BaseModel):
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    is_admin: bool = False

    class Config:
        from_attributes = True

class UserRecord(UserPublic):
    """Full row as stored, password hash included"""
    password: str
