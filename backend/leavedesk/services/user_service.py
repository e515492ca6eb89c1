import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List

from leavedesk.models.user import User
from leavedesk.core.exceptions import NotFound, ValidationError, InternalError
from leavedesk.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository()

    def list_users(self) -> List[User]:
        try:
            return self.user_repo.get_all(self.db)
        except SQLAlchemyError as e:
            logger.error("[USERS] Listing users failed: %s", e)
            raise InternalError("Error retrieving users")

    def get_user(self, user_id: str) -> User:
        try:
            user = self.user_repo.get_by_user_id(self.db, user_id)
        except SQLAlchemyError as e:
            logger.error("[USERS] Lookup of %s failed: %s", user_id, e)
            raise InternalError("Error retrieving user")
        if not user:
            raise NotFound("User not found")
        return user

    def delete_user(self, user_id: str) -> None:
        try:
            deleted = self.user_repo.delete(self.db, user_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("[USERS] Deleting %s failed: %s", user_id, e)
            raise InternalError("Error deleting user")
        if not deleted:
            raise NotFound("User not found")
        logger.info("[USERS] User deleted: %s", user_id)

    def make_admin(self, user_id: str) -> User:
        user = self.user_repo.get_by_user_id(self.db, user_id)
        if not user:
            raise NotFound("User not found")
        return self._set_admin(user, True)

    def remove_admin(self, user_id: str) -> User:
        user = self.user_repo.get_by_user_id(self.db, user_id)
        if not user:
            # Existing clients expect 400 here, unlike make_admin
            raise ValidationError("User not found")
        return self._set_admin(user, False)

    def _set_admin(self, user: User, is_admin: bool) -> User:
        # Read-then-write, not transactional
        user.is_admin = is_admin
        try:
            user = self.user_repo.update(self.db, user)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("[USERS] Updating admin flag for %s failed: %s", user.user_id, e)
            raise InternalError("Error updating user")
        logger.info("[USERS] is_admin=%s for %s", is_admin, user.user_id)
        return user
