from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from leavedesk.core.database import get_db
from leavedesk.core.permissions import get_current_claims, get_admin_claims
from leavedesk.schemas.auth import MessageResponse
from leavedesk.schemas.request import RequestCreate, StatusUpdate, RejectRequest, RequestResponse, RequestWithRequester
from leavedesk.services.request_service import RequestService

router = APIRouter(prefix="/requests", tags=["requests"])

@router.post("", response_model=RequestResponse)
async def create_request(
    request_data: RequestCreate,
    claims: dict = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    service = RequestService(db)
    return service.create(request_data)

@router.get("", response_model=List[RequestWithRequester])
async def get_requests(
    claims: dict = Depends(get_admin_claims),
    db: Session = Depends(get_db)
):
    """All requests with the requester's name (admin only)"""
    service = RequestService(db)
    return service.list_all()

@router.get("/user/{user_id}", response_model=List[RequestResponse])
async def get_user_requests(
    user_id: str,
    claims: dict = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    service = RequestService(db)
    return service.list_for_user(user_id)

@router.put("/{request_id}", response_model=RequestResponse)
async def update_request_status(
    request_id: int,
    status_data: StatusUpdate,
    claims: dict = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    """Overwrite the status without approve/reject side effects"""
    service = RequestService(db)
    return service.update_status(request_id, status_data.status)

@router.put("/{request_id}/approve", response_model=RequestResponse)
async def approve_request(
    request_id: int,
    claims: dict = Depends(get_admin_claims),
    db: Session = Depends(get_db)
):
    service = RequestService(db)
    return service.approve(request_id)

@router.put("/{request_id}/reject", response_model=RequestResponse)
async def reject_request(
    request_id: int,
    reject_data: RejectRequest,
    claims: dict = Depends(get_admin_claims),
    db: Session = Depends(get_db)
):
    """Reject a request; the admin's reason replaces the submitted reason"""
    service = RequestService(db)
    return service.reject(request_id, reject_data.reason)

@router.delete("/{request_id}", response_model=MessageResponse)
async def delete_request(
    request_id: int,
    claims: dict = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    service = RequestService(db)
    service.delete(request_id)
    return {"message": "Request deleted successfully"}
