"""Creator context exceptions."""

from enum import Enum


class FailureReason(str, Enum):
    """Why a context builder fell back instead of returning a real profile."""

    UNAUTHENTICATED = "unauthenticated"
    TARGET_NOT_FOUND = "target_not_found"
    FORBIDDEN = "forbidden"
    STORE_READ_FAILURE = "store_read_failure"
    NO_ROW = "no_row"
    FORMATTING_ANOMALY = "formatting_anomaly"
    UNEXPECTED = "unexpected_error"


class CreatorContextError(Exception):
    """Base creator context error."""

    reason: FailureReason = FailureReason.UNEXPECTED


class ConfigurationError(CreatorContextError):
    """Invalid or incomplete configuration."""


class AccessError(CreatorContextError):
    """Caller may not read the requested profile."""


class UnauthenticatedError(AccessError):
    """No session, or the session carries no user id."""

    reason = FailureReason.UNAUTHENTICATED


class TargetNotFoundError(AccessError):
    """Explicit target id has no owner record."""

    reason = FailureReason.TARGET_NOT_FOUND

    def __init__(self, message: str, target_id: str | None = None):
        super().__init__(message)
        self.target_id = target_id


class ForbiddenError(AccessError):
    """Target exists but belongs to another user."""

    reason = FailureReason.FORBIDDEN

    def __init__(self, message: str, target_id: str | None = None):
        super().__init__(message)
        self.target_id = target_id


class StoreReadError(CreatorContextError):
    """Profile store read failed (connectivity, malformed row, etc.)."""

    reason = FailureReason.STORE_READ_FAILURE

    def __init__(self, message: str, table: str | None = None, code: str | None = None):
        super().__init__(message)
        self.table = table
        self.code = code


class FormattingError(CreatorContextError):
    """Unexpected failure while rendering a profile."""

    reason = FailureReason.FORMATTING_ANOMALY
