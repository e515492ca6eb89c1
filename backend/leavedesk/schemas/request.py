from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime, time

class RequestCreate(BaseModel):
    # Presence of required columns is enforced by the database, not here
    req_datetime: Optional[datetime] = None
    req_type: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    time_from: Optional[time] = None
    time_to: Optional[time] = None
    user_id: Optional[str] = None
    reason: Optional[str] = None
    attachment: Optional[str] = None

class StatusUpdate(BaseModel):
    status: Optional[str] = None

class RejectRequest(BaseModel):
    reason: Optional[str] = None

class RequestResponse(BaseModel):
    id: int
    req_datetime: datetime
    req_type: str
    date_from: date
    date_to: Optional[date] = None
    time_from: Optional[time] = None
    time_to: Optional[time] = None
    user_id: str
    reason: str
    attachment: str = ""
    status: str

    class Config:
        from_attributes = True

class RequestWithRequester(RequestResponse):
    name: Optional[str] = None
