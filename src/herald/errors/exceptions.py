"""Custom exception classes for the Herald API."""


class HeraldError(Exception):
    """Base exception for Herald."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ValidationError(HeraldError):
    """Request or field validation failure."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class NotFoundError(HeraldError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
            status_code=404,
        )


class AuthenticationError(HeraldError):
    """Bad credentials, or a missing, invalid or expired token."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__("AUTHENTICATION_ERROR", message, status_code=401)


class ConflictError(HeraldError):
    """Unique constraint violated by the store."""

    def __init__(self, message: str):
        super().__init__("CONFLICT", message, status_code=409)


class DependencyError(HeraldError):
    """The database is unreachable or a query failed."""

    def __init__(self, message: str = "Notification dependency error occurred, contact support."):
        super().__init__("DEPENDENCY_ERROR", message, status_code=503)
