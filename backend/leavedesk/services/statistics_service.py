import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Iterable, Tuple

from leavedesk.models.request import RequestType, RequestStatus
from leavedesk.schemas.statistics import DashboardStatistics
from leavedesk.core.exceptions import InternalError
from leavedesk.repositories.request_repository import RequestRepository
from leavedesk.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

# Counter suffix per request type; the five leave subtypes share one bucket
CATEGORY_BY_TYPE = {leave_type: "Leaves" for leave_type in RequestType.LEAVES}
CATEGORY_BY_TYPE[RequestType.PERMISSION] = "Permissions"
CATEGORY_BY_TYPE[RequestType.SWAP] = "Swaps"

STATUS_PREFIX = {
    RequestStatus.PENDING: "Pending",
    RequestStatus.APPROVED: "Approved",
    RequestStatus.REJECTED: "Rejected",
}

def fold_statistics(groups: Iterable[Tuple[str, str, int]], total_users: int) -> DashboardStatistics:
    """Fold (req_type, status, count) groups into the dashboard counters"""
    counters = {"totalUsers": total_users}
    total_requests = 0

    for req_type, status, count in groups:
        total_requests += count
        category = CATEGORY_BY_TYPE.get(req_type)
        if category is None:
            continue

        key = f"total{category}"
        counters[key] = counters.get(key, 0) + count

        prefix = STATUS_PREFIX.get(status)
        if prefix:
            status_key = f"total{prefix}{category}"
            counters[status_key] = counters.get(status_key, 0) + count

    counters["totalRequests"] = total_requests
    return DashboardStatistics(**counters)

class StatisticsService:
    def __init__(self, db: Session):
        self.db = db
        self.request_repo = RequestRepository()
        self.user_repo = UserRepository()

    def get_statistics(self) -> DashboardStatistics:
        try:
            groups = self.request_repo.count_by_type_and_status(self.db)
            total_users = self.user_repo.count(self.db)
        except SQLAlchemyError as e:
            logger.error("[STATISTICS] Aggregation failed: %s", e)
            raise InternalError("Error retrieving statistics")
        return fold_statistics(groups, total_users)
