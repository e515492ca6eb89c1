from sqlalchemy import func
from sqlalchemy.orm import Session
from leavedesk.models.request import Request
from leavedesk.models.user import User
from typing import List, Optional, Tuple

class RequestRepository:
    def get_all_with_requester(self, db: Session) -> List[Tuple[Request, Optional[str]]]:
        """Every request paired with the requester's name (None when the user row is gone)"""
        return (
            db.query(Request, User.name)
            .outerjoin(User, User.user_id == Request.user_id)
            .order_by(Request.id)
            .all()
        )

    def get_by_user_id(self, db: Session, user_id: str) -> List[Request]:
        return db.query(Request).filter(Request.user_id == user_id).order_by(Request.id).all()

    def get_by_id(self, db: Session, request_id: int) -> Optional[Request]:
        return db.query(Request).filter(Request.id == request_id).first()

    def create(self, db: Session, request: Request) -> Request:
        db.add(request)
        db.commit()
        db.refresh(request)
        return request

    def update(self, db: Session, request: Request) -> Request:
        db.commit()
        db.refresh(request)
        return request

    def delete(self, db: Session, request_id: int) -> bool:
        deleted = db.query(Request).filter(Request.id == request_id).delete()
        db.commit()
        return deleted > 0

    def count_by_type_and_status(self, db: Session) -> List[Tuple[str, str, int]]:
        return (
            db.query(Request.req_type, Request.status, func.count(Request.id))
            .group_by(Request.req_type, Request.status)
            .all()
        )
