from sqlalchemy import Column, Integer, String, Text, Date, Time, DateTime, ForeignKey, UniqueConstraint
from leavedesk.core.database import Base

class RequestType:
    SICK_LEAVE = "sick leave"
    ANNUAL_LEAVE = "annual leave"
    OTHER_LEAVE = "other leave"
    EMERGENCY_LEAVE = "emergency leave"
    MATERNITY_LEAVE = "maternity leave"
    PERMISSION = "permission"
    SWAP = "swap"

    LEAVES = (SICK_LEAVE, ANNUAL_LEAVE, OTHER_LEAVE, EMERGENCY_LEAVE, MATERNITY_LEAVE)

class RequestStatus:
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    ALL = (PENDING, APPROVED, REJECTED)

class Request(Base):
    __tablename__ = "requests"
    __table_args__ = (
        UniqueConstraint("user_id", "req_datetime", name="uq_requests_user_datetime"),
    )

    id = Column(Integer, primary_key=True, index=True)
    req_datetime = Column(DateTime, nullable=False)
    req_type = Column(String, nullable=False)  # see RequestType
    date_from = Column(Date, nullable=False)
    date_to = Column(Date, nullable=True)
    time_from = Column(Time, nullable=True)
    time_to = Column(Time, nullable=True)
    user_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    reason = Column(Text, nullable=False)  # also carries the rejection reason
    attachment = Column(String, default="", nullable=False)
    status = Column(String, default=RequestStatus.PENDING, nullable=False)  # see RequestStatus
