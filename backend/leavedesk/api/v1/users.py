from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from leavedesk.core.database import get_db
from leavedesk.core.permissions import require_configured_level
from leavedesk.schemas.auth import MessageResponse
from leavedesk.schemas.user import UserRecord
from leavedesk.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

# Guard level comes from USER_MANAGEMENT_GUARD
user_management_guard = require_configured_level("USER_MANAGEMENT_GUARD")

@router.get("", response_model=List[UserRecord])
async def get_users(
    claims: Optional[dict] = Depends(user_management_guard),
    db: Session = Depends(get_db)
):
    service = UserService(db)
    return service.list_users()

@router.put("/makeadmin/{user_id}", response_model=MessageResponse)
async def make_admin(
    user_id: str,
    claims: Optional[dict] = Depends(user_management_guard),
    db: Session = Depends(get_db)
):
    service = UserService(db)
    service.make_admin(user_id)
    return {"message": "User promoted to admin"}

@router.put("/removeadmin/{user_id}", response_model=MessageResponse)
async def remove_admin(
    user_id: str,
    claims: Optional[dict] = Depends(user_management_guard),
    db: Session = Depends(get_db)
):
    service = UserService(db)
    service.remove_admin(user_id)
    return {"message": "Admin rights removed"}

@router.get("/{user_id}", response_model=UserRecord)
async def get_user(
    user_id: str,
    claims: Optional[dict] = Depends(user_management_guard),
    db: Session = Depends(get_db)
):
    service = UserService(db)
    return service.get_user(user_id)

@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    claims: Optional[dict] = Depends(user_management_guard),
    db: Session = Depends(get_db)
):
    service = UserService(db)
    service.delete_user(user_id)
    return {"message": "User deleted successfully"}
