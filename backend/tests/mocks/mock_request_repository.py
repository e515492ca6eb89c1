from collections import Counter
from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from leavedesk.models.request import Request

REQUIRED_COLUMNS = ("req_datetime", "req_type", "date_from", "user_id", "reason")

class MockRequestRepository:
    """In-memory stand-in that enforces the same constraints as the table"""

    def __init__(self, names=None):
        self.requests = {}
        self.next_id = 1
        # user_id -> display name, for the requester join
        self.names = names or {}

    def get_all_with_requester(self, db) -> List[Tuple[Request, Optional[str]]]:
        return [(r, self.names.get(r.user_id)) for r in self.requests.values()]

    def get_by_user_id(self, db, user_id: str) -> List[Request]:
        return [r for r in self.requests.values() if r.user_id == user_id]

    def get_by_id(self, db, request_id: int) -> Optional[Request]:
        return self.requests.get(request_id)

    def create(self, db, request: Request) -> Request:
        for column in REQUIRED_COLUMNS:
            if getattr(request, column) is None:
                raise IntegrityError(
                    "INSERT INTO requests", {},
                    Exception(f"NOT NULL constraint failed: requests.{column}"),
                )
        for existing in self.requests.values():
            if existing.user_id == request.user_id and existing.req_datetime == request.req_datetime:
                raise IntegrityError(
                    "INSERT INTO requests", {},
                    Exception("UNIQUE constraint failed: requests.user_id, requests.req_datetime"),
                )
        request.id = self.next_id
        self.requests[self.next_id] = request
        self.next_id += 1
        return request

    def update(self, db, request: Request) -> Request:
        self.requests[request.id] = request
        return request

    def delete(self, db, request_id: int) -> bool:
        if request_id in self.requests:
            del self.requests[request_id]
            return True
        return False

    def count_by_type_and_status(self, db) -> List[Tuple[str, str, int]]:
        groups = Counter((r.req_type, r.status) for r in self.requests.values())
        return [(req_type, status, count) for (req_type, status), count in groups.items()]
