from pydantic import BaseModel, Field
from typing import Optional, Union

class SignupRequest(BaseModel):
    user_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    password: Optional[str] = None
    # Only boolean true or the string "true" grants admin
    is_admin: Optional[Union[bool, str]] = None

    @property
    def wants_admin(self) -> bool:
        if isinstance(self.is_admin, bool):
            return self.is_admin
        return isinstance(self.is_admin, str) and self.is_admin.strip().lower() == "true"

class SigninRequest(BaseModel):
    user_id: Optional[str] = None
    password: Optional[str] = None

class ChangePasswordRequest(BaseModel):
    user_id: Optional[str] = None
    new_password: Optional[str] = Field(None, alias="newPassword")

    class Config:
        populate_by_name = True

class TokenResponse(BaseModel):
    token: str
    user: dict

class MessageResponse(BaseModel):
    message: str
