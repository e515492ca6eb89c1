from leavedesk.models.user import User
from leavedesk.models.request import Request, RequestType, RequestStatus

__all__ = ["User", "Request", "RequestType", "RequestStatus"]
