"""
Travel logs app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    TravelLogsServiceError,
    TravelLogNotFoundError,
    NotLogOwnerError,
    LogAccessDeniedError,
    AlreadyLikedError,
    NotLikedError,
    AlreadyBookmarkedError,
    NotBookmarkedError,
    LogMemberNotFoundError,
    AlreadyLogMemberError,
)

from .log_management import (
    get_log,
    create_travel_log,
    list_user_logs,
    list_public_logs,
    get_log_for_viewer,
    update_travel_log,
    delete_travel_log,
)

from .social import (
    like_log,
    unlike_log,
    bookmark_log,
    unbookmark_log,
)

from .membership import add_log_member

from .stats import get_user_stats


__all__ = [
    # Exceptions
    'TravelLogsServiceError',
    'TravelLogNotFoundError',
    'NotLogOwnerError',
    'LogAccessDeniedError',
    'AlreadyLikedError',
    'NotLikedError',
    'AlreadyBookmarkedError',
    'NotBookmarkedError',
    'LogMemberNotFoundError',
    'AlreadyLogMemberError',

    # Log Management
    'get_log',
    'create_travel_log',
    'list_user_logs',
    'list_public_logs',
    'get_log_for_viewer',
    'update_travel_log',
    'delete_travel_log',

    # Social
    'like_log',
    'unlike_log',
    'bookmark_log',
    'unbookmark_log',

    # Membership
    'add_log_member',

    # Stats
    'get_user_stats',
]
