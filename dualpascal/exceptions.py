"""
Custom Exception Classes for Dual Pascal

This module defines custom exceptions for better error handling and
consistent error responses across the application.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes returned alongside error messages."""

    AUTH_FAILED = "AUTH_FAILED"
    AUTH_INVALID_CREDENTIALS = "AUTH_INVALID_CREDENTIALS"
    AUTH_ACCOUNT_SUSPENDED = "AUTH_ACCOUNT_SUSPENDED"
    AUTH_PERMISSION_DENIED = "AUTH_PERMISSION_DENIED"
    AUTH_ADMIN_REQUIRED = "AUTH_ADMIN_REQUIRED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    VALIDATION_DUPLICATE_RESOURCE = "VALIDATION_DUPLICATE_RESOURCE"
    INVALID_OPERATION = "INVALID_OPERATION"
    PREVIEW_FAILED = "PREVIEW_FAILED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class BlogException(Exception):
    """Base exception class for all blog-related exceptions"""

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Authentication & Authorization Exceptions
# ============================================================================


class AuthenticationError(BlogException):
    """Raised when authentication fails"""

    error_code = ErrorCode.AUTH_FAILED

    def __init__(self, message: str = "Authentication failed", details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED, details=details or {})


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid"""

    error_code = ErrorCode.AUTH_INVALID_CREDENTIALS

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message=message)


class AccountSuspendedError(AuthenticationError):
    """Raised when a suspended or pending account tries to log in"""

    error_code = ErrorCode.AUTH_ACCOUNT_SUSPENDED

    def __init__(self, account_status: str):
        super().__init__(message=f"Account is {account_status}", details={"status": account_status})


class AuthorizationError(BlogException):
    """Raised when user lacks permission for an action"""

    error_code = ErrorCode.AUTH_PERMISSION_DENIED

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message=message, status_code=status.HTTP_403_FORBIDDEN)


class AdminRequiredError(AuthorizationError):
    """Raised when a non-admin reaches an admin action"""

    error_code = ErrorCode.AUTH_ADMIN_REQUIRED

    def __init__(self):
        super().__init__(message="Administrator privileges are required")


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(BlogException):
    """Base class for resource not found errors"""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class UserNotFoundError(ResourceNotFoundError):
    """Raised when a user is not found"""

    def __init__(self, user_id: Any | None = None):
        super().__init__(resource_type="User", resource_id=user_id)


class ArticleNotFoundError(ResourceNotFoundError):
    """Raised when an article is not found"""

    def __init__(self, article_id: Any | None = None):
        super().__init__(resource_type="Article", resource_id=article_id)


class TranslationNotFoundError(ResourceNotFoundError):
    """Raised when an original article has no translation"""

    def __init__(self, original_id: Any | None = None):
        super().__init__(resource_type="Translation", resource_id=original_id)


class CategoryNotFoundError(ResourceNotFoundError):
    """Raised when a category is not found"""

    def __init__(self, category_id: Any | None = None):
        super().__init__(resource_type="Category", resource_id=category_id)


class CommentNotFoundError(ResourceNotFoundError):
    """Raised when a comment is not found"""

    def __init__(self, comment_id: Any | None = None):
        super().__init__(resource_type="Comment", resource_id=comment_id)


class ContactNotFoundError(ResourceNotFoundError):
    """Raised when a contact submission is not found"""

    def __init__(self, contact_id: Any | None = None):
        super().__init__(resource_type="Contact", resource_id=contact_id)


# ============================================================================
# Validation & Business Logic Exceptions
# ============================================================================


class ValidationError(BlogException):
    """Raised when input validation fails"""

    error_code = ErrorCode.VALIDATION_FAILED

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(message=message, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, details=error_details)


class DuplicateResourceError(BlogException):
    """Raised when attempting to create a duplicate resource"""

    error_code = ErrorCode.VALIDATION_DUPLICATE_RESOURCE

    def __init__(self, resource_type: str, field: str, value: Any):
        super().__init__(
            message=f"{resource_type} with {field} '{value}' already exists",
            status_code=status.HTTP_409_CONFLICT,
            details={"resource_type": resource_type, "field": field, "value": value},
        )


class InvalidOperationError(BlogException):
    """Raised when an operation is invalid in the current context"""

    error_code = ErrorCode.INVALID_OPERATION

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=details or {})


class MarkdownRenderError(BlogException):
    """Raised when Markdown cannot be rendered for preview"""

    error_code = ErrorCode.PREVIEW_FAILED

    def __init__(self, message: str = "Preview generation failed"):
        super().__init__(message=message, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


# ============================================================================
# External Service Exceptions
# ============================================================================


class AnalyticsProvisioningError(BlogException):
    """Raised when the analytics provider rejects a provisioning step"""

    error_code = ErrorCode.SERVICE_UNAVAILABLE

    def __init__(self, step: str, status_code: int | None = None):
        super().__init__(
            message=f"Analytics provisioning failed at step '{step}'",
            status_code=status.HTTP_502_BAD_GATEWAY,
            details={"step": step, "upstream_status": status_code},
        )
