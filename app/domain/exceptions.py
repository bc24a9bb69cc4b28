"""Errors raised by the onboarding engine.

Every error carries a machine-readable error_code; the HTTP layer maps
codes to status codes in app.core.exception_handlers.
"""

from typing import Any


class OnboardingException(Exception):
    """Root of all onboarding engine errors.

    Attributes:
        message: Text shown to the caller.
        error_code: Stable code for clients; the class name when not given.
        details: Extra context such as the offending field or record id.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Body of the JSON error response."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(OnboardingException):
    """Bad input: empty business profile id, unknown section, document or agreement type."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else {})


class AuthenticationException(OnboardingException):
    """Missing, invalid or expired bearer token."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(OnboardingException):
    """The acting user does not own the business profile."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details = {
            key: value
            for key, value in (("resource", resource), ("action", action))
            if value
        }
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(OnboardingException):
    """A business profile, section record or document does not exist."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class BusinessProfileAlreadyExistsException(OnboardingException):
    """The user already owns a business profile; only one is allowed."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            "A business profile already exists for this user",
            "BUSINESS_PROFILE_ALREADY_EXISTS",
            {"user_id": user_id},
        )


class SqlNotConfiguredException(OnboardingException):
    """DATABASE_URL is empty but the operation needs the record store."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
