"""
Domain-specific exceptions for travel logs app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class TravelLogsServiceError(Exception):
    """Base exception for all travel log service errors."""
    pass


class TravelLogNotFoundError(TravelLogsServiceError):
    """Raised when a travel log does not exist."""
    pass


class NotLogOwnerError(TravelLogsServiceError):
    """Raised when a non-owner tries an owner-only action."""
    pass


class LogAccessDeniedError(TravelLogsServiceError):
    """Raised when a private log is requested by someone outside it."""
    pass


class AlreadyLikedError(TravelLogsServiceError):
    pass


class NotLikedError(TravelLogsServiceError):
    pass


class AlreadyBookmarkedError(TravelLogsServiceError):
    pass


class NotBookmarkedError(TravelLogsServiceError):
    pass


class LogMemberNotFoundError(TravelLogsServiceError):
    """Raised when the email of a new member matches no user."""
    pass


class AlreadyLogMemberError(TravelLogsServiceError):
    """Raised when the user is already a member of the log."""
    pass
