"""
Group trips app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    GroupTripsServiceError,
    GroupTripNotFoundError,
    MemberNotFoundError,
    NotTripMemberError,
    NotTripCreatorError,
    CannotRemoveCreatorError,
    InvalidTripDatesError,
    DocumentTooLargeError,
)

from .trip_management import (
    create_group_trip,
    list_user_trips,
    get_trip_for_member,
    get_trip_if_member,
    update_group_trip,
    delete_group_trip,
    resolve_members,
    resolve_trip_link,
)

from .membership_management import (
    add_members,
    remove_member,
)

from .planning import (
    add_itinerary_item,
    add_trip_expense,
    upload_document,
)

from .expense_split import (
    calculate_splits,
    get_expense_summary,
)


__all__ = [
    # Exceptions
    'GroupTripsServiceError',
    'GroupTripNotFoundError',
    'MemberNotFoundError',
    'NotTripMemberError',
    'NotTripCreatorError',
    'CannotRemoveCreatorError',
    'InvalidTripDatesError',
    'DocumentTooLargeError',

    # Trip Management
    'create_group_trip',
    'list_user_trips',
    'get_trip_for_member',
    'get_trip_if_member',
    'update_group_trip',
    'delete_group_trip',
    'resolve_members',
    'resolve_trip_link',

    # Membership Management
    'add_members',
    'remove_member',

    # Planning
    'add_itinerary_item',
    'add_trip_expense',
    'upload_document',

    # Expense Split
    'calculate_splits',
    'get_expense_summary',
]
