"""
Request lifecycle.

A request starts ``pending`` and is moved to ``approved`` or ``rejected`` by an
admin; rejecting also replaces ``reason`` with the admin's reason. A second,
permissive path (``update_status``) lets any authenticated caller set any
lifecycle status without those side effects.
"""
import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List

from leavedesk.models.request import Request, RequestStatus
from leavedesk.schemas.request import RequestCreate, RequestResponse
from leavedesk.core.database import integrity_error_kind
from leavedesk.core.exceptions import ValidationError, ConflictError, NotFound, InternalError
from leavedesk.repositories.request_repository import RequestRepository

logger = logging.getLogger(__name__)

class RequestService:
    def __init__(self, db: Session):
        self.db = db
        self.request_repo = RequestRepository()

    def create(self, request_data: RequestCreate) -> Request:
        request = Request(
            req_datetime=request_data.req_datetime,
            req_type=request_data.req_type,
            date_from=request_data.date_from,
            date_to=request_data.date_to,
            time_from=request_data.time_from,
            time_to=request_data.time_to,
            user_id=request_data.user_id,
            reason=request_data.reason,
            attachment=request_data.attachment or "",
            status=RequestStatus.PENDING,
        )
        try:
            request = self.request_repo.create(self.db, request)
        except IntegrityError as e:
            self.db.rollback()
            kind = integrity_error_kind(e)
            logger.warning("[REQUESTS] Insert rejected (%s): %s", kind, e.orig)
            if kind == "not_null":
                raise ValidationError("Missing required fields")
            if kind == "unique":
                raise ConflictError("Duplicate request")
            raise InternalError("Error creating permission request")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("[REQUESTS] Insert failed: %s", e)
            raise InternalError("Error creating permission request")

        logger.info("[REQUESTS] Request %s created (%s) for %s", request.id, request.req_type, request.user_id)
        return request

    def list_all(self) -> List[dict]:
        """All requests with the requester's name attached"""
        try:
            rows = self.request_repo.get_all_with_requester(self.db)
        except SQLAlchemyError as e:
            logger.error("[REQUESTS] Listing requests failed: %s", e)
            raise InternalError("Error retrieving requests")

        result = []
        for request, name in rows:
            request_dict = RequestResponse.model_validate(request).model_dump()
            request_dict["name"] = name
            result.append(request_dict)
        return result

    def list_for_user(self, user_id: str) -> List[Request]:
        try:
            return self.request_repo.get_by_user_id(self.db, user_id)
        except SQLAlchemyError as e:
            logger.error("[REQUESTS] Listing requests of %s failed: %s", user_id, e)
            raise InternalError("Error retrieving user requests")

    def update_status(self, request_id: int, new_status: str) -> Request:
        if not new_status:
            raise ValidationError("Missing required fields")
        if new_status not in RequestStatus.ALL:
            raise ValidationError(
                "Invalid status",
                details=f"status must be one of: {', '.join(RequestStatus.ALL)}",
            )
        return self._transition(request_id, new_status, "Error updating request")

    def approve(self, request_id: int) -> Request:
        return self._transition(request_id, RequestStatus.APPROVED, "Error approving request")

    def reject(self, request_id: int, reason: str) -> Request:
        if not reason:
            raise ValidationError("Rejection reason is required")
        return self._transition(request_id, RequestStatus.REJECTED, "Error rejecting request", reason=reason)

    def _transition(self, request_id: int, new_status: str, failure_message: str, reason: str = None) -> Request:
        try:
            request = self.request_repo.get_by_id(self.db, request_id)
            if not request:
                raise NotFound("Request not found")

            old_status = request.status
            request.status = new_status
            if reason is not None:
                request.reason = reason
            request = self.request_repo.update(self.db, request)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("[REQUESTS] Transition of %s to %s failed: %s", request_id, new_status, e)
            raise InternalError(failure_message)

        logger.info("[REQUESTS] Request %s: %s -> %s", request_id, old_status, new_status)
        return request

    def delete(self, request_id: int) -> None:
        try:
            deleted = self.request_repo.delete(self.db, request_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("[REQUESTS] Deleting %s failed: %s", request_id, e)
            raise InternalError("Error deleting request")
        if not deleted:
            raise NotFound("Request not found")
        logger.info("[REQUESTS] Request %s deleted", request_id)
