"""
Base Service.

Base class for all services. Services orchestrate repositories,
apply business rules and translate persistence failures into
application exceptions.

Usage:
    class CampgroundService(BaseService):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(session)
            self.repo = CampgroundRepository(session)
"""

from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campground_api.core.exceptions import (
    AuthorizationError,
    ConflictError,
    DatabaseError,
    ValidationError,
)
from campground_api.core.logging import get_logger
from campground_api.models.user import User

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Database session access
    - Error wrapping for database operations
    - Required-field and ownership checks
    - Structured operation logging
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        return self._session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Any,
        conflict_message: str = "Resource already exists",
    ) -> T:
        """
        Execute a database operation with error handling.

        Args:
            operation: Description of the operation for logging
            coro: Coroutine to execute
            conflict_message: Message used when a unique constraint trips

        Raises:
            ConflictError: For unique constraint violations
            DatabaseError: For other database errors
        """
        try:
            return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            error_str = str(e).lower()
            if "unique" in error_str or "duplicate" in error_str:
                raise ConflictError(conflict_message) from e
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    def _validate_required(
        self,
        fields: dict[str, Any],
        field_names: list[str],
        message: str = "Required fields missing",
    ) -> None:
        """
        Validate that required fields are present and not empty.

        Raises:
            ValidationError: If any required field is missing or empty
        """
        missing = []
        for name in field_names:
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)

        if missing:
            raise ValidationError(message, details={"missing_fields": missing})

    def _ensure_owner_or_admin(
        self,
        user: User,
        owner_id: str,
        action: str,
        resource: str,
    ) -> None:
        """
        Allow the action only for the record's owner or an admin.

        Raises:
            AuthorizationError: If the user neither owns the record nor is admin
        """
        if owner_id != user.id and not user.is_admin:
            self._logger.warning(
                "Ownership check failed",
                extra={"user_id": user.id, "owner_id": owner_id, "action": action},
            )
            raise AuthorizationError(
                f"User {user.id} is not authorized to {action} this {resource}"
            )

    def _log_operation(self, operation: str, **context: Any) -> None:
        """Log a service operation with context."""
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(self, message: str, **context: Any) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
