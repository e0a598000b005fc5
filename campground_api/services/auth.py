"""
Auth Service.

Registration, login and token issuance.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from campground_api.core.config import get_app_config
from campground_api.core.exceptions import AuthenticationError, ConflictError, ValidationError
from campground_api.core.security import create_access_token, hash_password, verify_password
from campground_api.models.user import User, UserRole
from campground_api.repositories.user import UserRepository
from campground_api.schemas.user import TokenResponse, UserLogin, UserRegister
from campground_api.services.base import BaseService


def issue_token(user: User) -> TokenResponse:
    """Sign a token for the user and bundle it with their profile."""
    token = create_access_token({"sub": user.id, "role": user.role.value})
    return TokenResponse(
        id=user.id,
        name=user.name,
        telephone=user.telephone,
        email=user.email,
        token=token,
    )


class AuthService(BaseService):
    """Service for account registration and authentication."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.users = UserRepository(session)

    async def register(self, data: UserRegister) -> TokenResponse:
        """
        Create an account and sign a token for it.

        Raises:
            ValidationError: Admin self-registration while it is disabled
            ConflictError: Email already registered
        """
        features = get_app_config().features
        if data.role == UserRole.ADMIN and not features.auth_allow_admin_registration:
            raise ValidationError("Admin accounts cannot be self-registered")

        if await self.users.exists_by_email(data.email):
            raise ConflictError("Email already registered")

        self._log_operation("Registering user", email=data.email, role=data.role.value)

        user = await self._execute_db_operation(
            "register_user",
            self.users.create(
                name=data.name,
                telephone=data.telephone,
                email=data.email,
                hashed_password=hash_password(data.password),
                role=data.role,
            ),
            conflict_message="Email already registered",
        )
        return issue_token(user)

    async def login(self, data: UserLogin) -> TokenResponse:
        """
        Check credentials and sign a token.

        Raises:
            ValidationError: Email or password missing
            AuthenticationError: Unknown email or wrong password
        """
        self._validate_required(
            data.model_dump(),
            ["email", "password"],
            message="Please provide an email and password",
        )

        user = await self.users.get_by_email(data.email)
        if user is None or not verify_password(data.password, user.hashed_password):
            self._logger.warning("Login failed", extra={"email": data.email})
            raise AuthenticationError("Invalid credentials")

        self._log_operation("User logged in", user_id=user.id)
        return issue_token(user)

    async def get_user(self, user_id: str) -> User:
        """Load the account behind a token."""
        user = await self.users.get_by_id_or_none(user_id)
        if user is None:
            raise AuthenticationError("Not authorized to access this route")
        return user

    async def create_admin(self, name: str, email: str, password: str) -> User:
        """Create an admin account directly (CLI bootstrap)."""
        email = email.strip().lower()
        if await self.users.exists_by_email(email):
            raise ConflictError("Email already registered")

        self._log_operation("Creating admin user", email=email)
        return await self._execute_db_operation(
            "create_admin",
            self.users.create(
                name=name,
                email=email,
                hashed_password=hash_password(password),
                role=UserRole.ADMIN,
            ),
        )
