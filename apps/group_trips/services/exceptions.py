"""
Domain-specific exceptions for group trips app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class GroupTripsServiceError(Exception):
    """Base exception for all group trip service errors."""
    pass


class GroupTripNotFoundError(GroupTripsServiceError):
    """Raised when a group trip does not exist."""
    pass


class MemberNotFoundError(GroupTripsServiceError):
    """Raised when a username/email does not match any user."""
    pass


class NotTripMemberError(GroupTripsServiceError):
    """Raised when a user tries to perform an action requiring membership."""
    pass


class NotTripCreatorError(GroupTripsServiceError):
    """Raised when a non-creator tries a creator-only action."""
    pass


class CannotRemoveCreatorError(GroupTripsServiceError):
    """Raised when attempting to remove the trip creator from the members."""
    pass


class InvalidTripDatesError(GroupTripsServiceError):
    """Raised when the end date precedes the start date."""
    pass


class DocumentTooLargeError(GroupTripsServiceError):
    """Raised when an uploaded document exceeds the size limit."""
    pass
