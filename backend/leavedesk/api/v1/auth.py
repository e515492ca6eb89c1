from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from leavedesk.core.database import get_db
from leavedesk.schemas.auth import SignupRequest, SigninRequest, ChangePasswordRequest, TokenResponse, MessageResponse
from leavedesk.schemas.user import UserRecord
from leavedesk.services.auth_service import AuthService

router = APIRouter(tags=["auth"])

@router.post("/signup", response_model=UserRecord)
async def signup(
    signup_data: SignupRequest,
    db: Session = Depends(get_db)
):
    service = AuthService(db)
    return service.signup(signup_data)

@router.post("/signin", response_model=TokenResponse)
async def signin(
    signin_data: SigninRequest,
    db: Session = Depends(get_db)
):
    service = AuthService(db)
    return service.signin(signin_data)

@router.post("/changepassword", response_model=MessageResponse)
async def change_password(
    password_data: ChangePasswordRequest,
    db: Session = Depends(get_db)
):
    service = AuthService(db)
    service.change_password(password_data)
    return {"message": "Password updated successfully"}
