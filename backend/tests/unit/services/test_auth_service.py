import pytest
from unittest.mock import MagicMock, patch
from leavedesk.api.v1 import auth as auth_routes
from leavedesk.services.auth_service import AuthService
from leavedesk.models.user import User
from leavedesk.schemas.auth import SignupRequest, SigninRequest, ChangePasswordRequest
from leavedesk.core.security import get_password_hash, verify_password, decode_access_token
from leavedesk.core.exceptions import ValidationError, InternalError
from tests.mocks.mock_user_repository import MockUserRepository

class TestAuthService:
    @pytest.fixture
    def service(self):
        repo = MockUserRepository()
        repo.create(None, User(
            user_id="u1",
            name="User One",
            email="u1@example.com",
            password=get_password_hash("pw"),
            is_admin=False,
        ))
        repo.create(None, User(
            user_id="boss",
            name="Boss",
            password=get_password_hash("boss-pw"),
            is_admin=True,
        ))

        service = AuthService(db=MagicMock())  # DB session mocked
        service.user_repo = repo  # Inject mock repo
        return service

    def test_signup_hashes_password(self, service):
        user = service.signup(SignupRequest(user_id="u2", name="Two", password="secret"))
        assert user.password != "secret"
        assert verify_password("secret", user.password)
        assert user.is_admin is False

    @pytest.mark.parametrize("flag,expected", [
        (True, True),
        ("true", True),
        ("TRUE", True),
        (False, False),
        ("yes", False),
        (None, False),
    ])
    def test_signup_admin_flag(self, service, flag, expected):
        user = service.signup(SignupRequest(user_id="u3", password="pw", is_admin=flag))
        assert user.is_admin is expected

    def test_signup_requires_password(self, service):
        with pytest.raises(ValidationError) as exc:
            service.signup(SignupRequest(user_id="u4", name="No Password"))
        assert exc.value.status_code == 400
        assert exc.value.error == "Password is required"
        assert "u4" not in service.user_repo.users

    def test_signup_duplicate_is_internal_error(self, service):
        with pytest.raises(InternalError) as exc:
            service.signup(SignupRequest(user_id="u1", password="other"))
        assert exc.value.status_code == 500
        assert exc.value.error == "Error creating user"
        assert "UNIQUE" in exc.value.details
        service.db.rollback.assert_called_once()

    def test_signin_success(self, service):
        response = service.signin(SigninRequest(user_id="boss", password="boss-pw"))
        claims = decode_access_token(response.token)
        assert claims["user_id"] == "boss"
        assert claims["is_admin"] is True
        assert "exp" in claims
        assert response.user["user_id"] == "boss"
        assert "password" not in response.user

    def test_signin_wrong_password(self, service):
        with pytest.raises(ValidationError) as exc:
            service.signin(SigninRequest(user_id="u1", password="wrong"))
        assert exc.value.error == "Invalid credentials"

    def test_signin_unknown_user_same_answer(self, service):
        with pytest.raises(ValidationError) as exc:
            service.signin(SigninRequest(user_id="ghost", password="pw"))
        assert exc.value.error == "Invalid credentials"

    def test_signin_missing_fields(self, service):
        with pytest.raises(ValidationError):
            service.signin(SigninRequest())

    def test_change_password(self, service):
        service.change_password(ChangePasswordRequest(user_id="u1", newPassword="new-pw"))
        stored = service.user_repo.users["u1"].password
        assert verify_password("new-pw", stored)
        assert not verify_password("pw", stored)

    def test_change_password_unknown_user(self, service):
        with pytest.raises(ValidationError) as exc:
            service.change_password(ChangePasswordRequest(user_id="ghost", newPassword="x"))
        assert exc.value.error == "User not found"

    def test_change_password_requires_value(self, service):
        with pytest.raises(ValidationError) as exc:
            service.change_password(ChangePasswordRequest(user_id="u1"))
        assert exc.value.error == "Password is required"

@pytest.mark.asyncio
async def test_auth_routes_async_flow():
    repo = MockUserRepository()
    repo.create(None, User(user_id="async-user", password=get_password_hash("pass"), is_admin=False))

    service = AuthService(db=MagicMock())
    service.user_repo = repo

    with patch("leavedesk.api.v1.auth.AuthService", return_value=service):
        # 1. Success
        response = await auth_routes.signin(SigninRequest(user_id="async-user", password="pass"), db=MagicMock())
        assert response.user["user_id"] == "async-user"

        # 2. Invalid Pwd
        with pytest.raises(ValidationError) as exc:
            await auth_routes.signin(SigninRequest(user_id="async-user", password="wrong"), db=MagicMock())
        assert exc.value.status_code == 400

        # 3. Password change, then sign in with the new one
        result = await auth_routes.change_password(
            ChangePasswordRequest(user_id="async-user", newPassword="new-pass"), db=MagicMock()
        )
        assert result == {"message": "Password updated successfully"}
        await auth_routes.signin(SigninRequest(user_id="async-user", password="new-pass"), db=MagicMock())
