# API v1 routers
from leavedesk.api.v1 import auth, leave_requests, users, dashboard

__all__ = ["auth", "leave_requests", "users", "dashboard"]
