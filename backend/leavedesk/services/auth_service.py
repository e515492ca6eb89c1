import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leavedesk.models.user import User
from leavedesk.schemas.auth import SignupRequest, SigninRequest, ChangePasswordRequest, TokenResponse
from leavedesk.schemas.user import UserPublic
from leavedesk.core.security import verify_password, get_password_hash, create_user_token
from leavedesk.core.exceptions import ValidationError, InternalError
from leavedesk.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"

class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository()

    def signup(self, signup_data: SignupRequest) -> User:
        if not signup_data.password:
            raise ValidationError("Password is required")

        user = User(
            user_id=signup_data.user_id,
            name=signup_data.name,
            email=signup_data.email,
            mobile=signup_data.mobile,
            password=get_password_hash(signup_data.password),
            is_admin=signup_data.wants_admin,
        )
        try:
            user = self.user_repo.create(self.db, user)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("[AUTH] Signup failed for user_id %s: %s", signup_data.user_id, e)
            raise InternalError("Error creating user", details=str(e))

        logger.info("[AUTH] User created: %s (admin=%s)", user.user_id, user.is_admin)
        return user

    def signin(self, signin_data: SigninRequest) -> TokenResponse:
        user = None
        if signin_data.user_id:
            user = self.user_repo.get_by_user_id(self.db, signin_data.user_id)

        # Same answer for unknown user and wrong password so existence does not leak
        if not user:
            logger.warning("[AUTH] Login failed - user not found: '%s'", signin_data.user_id)
            raise ValidationError(INVALID_CREDENTIALS)

        if not verify_password(signin_data.password, user.password):
            logger.warning("[AUTH] Login failed for user_id %s - invalid password", user.user_id)
            raise ValidationError(INVALID_CREDENTIALS)

        return self._create_token_response(user)

    def _create_token_response(self, user: User) -> TokenResponse:
        token = create_user_token(user.user_id, user.is_admin)
        return TokenResponse(
            token=token,
            user=UserPublic.model_validate(user).model_dump(),
        )

    def change_password(self, password_data: ChangePasswordRequest) -> None:
        user = None
        if password_data.user_id:
            user = self.user_repo.get_by_user_id(self.db, password_data.user_id)
        if not user:
            raise ValidationError("User not found")

        if not password_data.new_password:
            raise ValidationError("Password is required")

        user.password = get_password_hash(password_data.new_password)
        try:
            self.user_repo.update(self.db, user)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("[AUTH] Password change failed for user_id %s: %s", user.user_id, e)
            raise InternalError("Error changing password")

        logger.info("[AUTH] Password changed for user_id %s", user.user_id)
