"""Errors raised by the friend registry, the session and the split strategies"""
from typing import Any, Optional


class AppException(Exception):
    """
    Base error; the API turns it into a JSON error body.

    Silently discarded form submissions never raise; these are for calls
    that cannot be carried out at all.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "AppError",
        details: Optional[Any] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Input the split logic can't interpret, such as an unknown payer"""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_type="ValidationError",
            details=details
        )


class NotFoundError(AppException):
    """No friend with the requested id"""

    def __init__(self, message: str = "Friend not found", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=404,
            error_type="NotFoundError",
            details=details
        )


class ConflictError(AppException):
    """Request clashes with session state: a duplicate friend id, or no friend selected"""

    def __init__(self, message: str = "Conflicts with current session state", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=409,
            error_type="ConflictError",
            details=details
        )
