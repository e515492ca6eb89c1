from leavedesk.schemas.auth import SignupRequest, SigninRequest, ChangePasswordRequest, TokenResponse, MessageResponse
from leavedesk.schemas.user import UserPublic, UserRecord
from leavedesk.schemas.request import RequestCreate, StatusUpdate, RejectRequest, RequestResponse, RequestWithRequester
from leavedesk.schemas.statistics import DashboardStatistics

__all__ = [
    "SignupRequest",
    "SigninRequest",
    "ChangePasswordRequest",
    "TokenResponse",
    "MessageResponse",
    "UserPublic",
    "UserRecord",
    "RequestCreate",
    "StatusUpdate",
    "RejectRequest",
    "RequestResponse",
    "RequestWithRequester",
    "DashboardStatistics",
]
