# app/core/exceptions.py

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """Standardized error codes for the application."""

    # Account errors
    EMAIL_ALREADY_TAKEN = "EMAIL_ALREADY_TAKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Session / ownership errors
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"

    # Order errors
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"

    # System errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"


# HTTP status for each code, consumed by the error handlers
STATUS_CODE_MAP = {
    ErrorCode.EMAIL_ALREADY_TAKEN: 409,
    ErrorCode.INVALID_CREDENTIALS: 400,
    ErrorCode.USER_NOT_FOUND: 404,
    ErrorCode.NOT_AUTHENTICATED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.ORDER_NOT_FOUND: 404,
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
    ErrorCode.RATE_LIMIT_EXCEEDED: 429,
}


class StorefrontError(Exception):
    """Base exception for all Storefront application errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.user_message = user_message
        self.context = context or {}
        super().__init__(self.user_message)

    @property
    def status_code(self) -> int:
        return STATUS_CODE_MAP.get(self.code, 400)

    def to_response(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "status": "fail" if self.status_code < 500 else "error",
            "error": {
                "code": self.code.value,
                "message": self.user_message,
                "context": self.context,
            },
        }


class DuplicateEmailError(StorefrontError):
    """Raised when registering with an email that already belongs to a user."""

    def __init__(self):
        super().__init__(
            code=ErrorCode.EMAIL_ALREADY_TAKEN,
            user_message="email is already taken",
        )


class InvalidCredentialsError(StorefrontError):
    """
    Raised on a failed login.

    The message is the same whether the email is unknown, the account is
    disabled or the password is wrong, so callers cannot probe for accounts.
    """

    def __init__(self):
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            user_message="Wrong credentials",
        )


class NotAuthenticatedError(StorefrontError):
    def __init__(self, message: str = "Invalid session"):
        super().__init__(code=ErrorCode.NOT_AUTHENTICATED, user_message=message)


class ForbiddenError(StorefrontError):
    def __init__(self, message: str = "You are not allowed to perform this action"):
        super().__init__(code=ErrorCode.FORBIDDEN, user_message=message)


class UserNotFoundError(StorefrontError):
    def __init__(self, user_id: Any):
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            user_message="User not found",
            context={"user_id": user_id},
        )


class OrderNotFoundError(StorefrontError):
    def __init__(self, order_id: Any):
        super().__init__(
            code=ErrorCode.ORDER_NOT_FOUND,
            user_message="Order not found",
            context={"order_id": order_id},
        )
