"""
Group trip management service.

Handles group trip CRUD operations with proper transaction safety.
"""

import logging
from datetime import date
from typing import Iterable, Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import Prefetch, QuerySet

from apps.accounts.models import User
from apps.group_trips.models import GroupTrip, TripExpense
from apps.notifications import send_trip_invite

from .exceptions import (
    GroupTripNotFoundError,
    MemberNotFoundError,
    NotTripMemberError,
    NotTripCreatorError,
    InvalidTripDatesError,
)

logger = logging.getLogger(__name__)


def resolve_members(identifiers: Iterable[str]) -> list[User]:
    """
    Turn a list of usernames/emails into users.

    Duplicates are collapsed, order of first appearance is kept.

    Raises:
        MemberNotFoundError: If any identifier matches no active user
    """
    users = []
    seen = set()
    for identifier in identifiers:
        user = User.objects.find_by_identifier(identifier)
        if user is None:
            raise MemberNotFoundError(f"User {identifier} not found")
        if user.id not in seen:
            seen.add(user.id)
            users.append(user)
    return users


def _check_dates(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and end_date < start_date:
        raise InvalidTripDatesError("End date cannot be before start date")


def _lock_trip(trip_id: UUID) -> GroupTrip:
    try:
        return GroupTrip.objects.select_for_update().get(id=trip_id)
    except (GroupTrip.DoesNotExist, DjangoValidationError):
        raise GroupTripNotFoundError("Group trip not found")


@transaction.atomic
def create_group_trip(
    *,
    name: str,
    creator: User,
    description: str = '',
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    members: Iterable[str] = ()
) -> GroupTrip:
    """
    Create a new group trip. The creator is always a member.

    Args:
        name: Trip name
        creator: User creating the trip
        description: Optional description
        start_date: Optional first day
        end_date: Optional last day
        members: Usernames or emails of the people to invite

    Returns:
        Created GroupTrip instance

    Raises:
        MemberNotFoundError: If an invitee cannot be found
        InvalidTripDatesError: If end_date precedes start_date
    """
    _check_dates(start_date, end_date)
    invitees = [user for user in resolve_members(members) if user.id != creator.id]

    trip = GroupTrip.objects.create(
        name=name,
        description=description,
        creator=creator,
        start_date=start_date,
        end_date=end_date,
    )
    trip.members.add(creator, *invitees)

    if invitees:
        send_trip_invite(trip, invitees, invited_by=creator)

    logger.info("Group trip %s created by %s with %d member(s)", trip.id, creator.id, len(invitees) + 1)
    return trip


def list_user_trips(*, user: User) -> QuerySet[GroupTrip]:
    """Trips the user is a member of, newest first."""
    return (
        GroupTrip.objects
        .filter(members=user)
        .select_related('creator')
        .prefetch_related('members')
        .order_by('-created_at')
        .distinct()
    )


def get_trip_for_member(*, trip_id: UUID, user: User) -> GroupTrip:
    """
    Load a trip with all related collections for one of its members.

    Raises:
        GroupTripNotFoundError: If trip doesn't exist
        NotTripMemberError: If user is not a member
    """
    from apps.expenses.models import Expense
    from apps.travel_logs.models import TravelLog

    try:
        trip = (
            GroupTrip.objects
            .select_related('creator')
            .prefetch_related(
                'members',
                'itinerary',
                Prefetch('expenses', queryset=TripExpense.objects.select_related('added_by')),
                'documents',
                Prefetch('shared_expenses', queryset=Expense.objects.select_related('user')),
                Prefetch('shared_travel_logs', queryset=TravelLog.objects.select_related('user')),
            )
            .get(id=trip_id)
        )
    except (GroupTrip.DoesNotExist, DjangoValidationError):
        raise GroupTripNotFoundError("Group trip not found")

    if not any(member.id == user.id for member in trip.members.all()):
        logger.warning("User %s denied access to group trip %s", user.id, trip_id)
        raise NotTripMemberError("User not authorized")

    return trip


def get_trip_if_member(*, trip_id: UUID, user: User) -> GroupTrip:
    """
    Light-weight membership check used before child mutations.

    Raises:
        GroupTripNotFoundError: If trip doesn't exist
        NotTripMemberError: If user is not a member
    """
    try:
        trip = GroupTrip.objects.get(id=trip_id)
    except (GroupTrip.DoesNotExist, DjangoValidationError):
        raise GroupTripNotFoundError("Group trip not found")

    if not trip.has_member(user):
        raise NotTripMemberError("User not authorized")

    return trip


@transaction.atomic
def update_group_trip(
    *,
    trip_id: UUID,
    user: User,
    name: Optional[str] = None,
    description: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None
) -> GroupTrip:
    """
    Update trip details (creator only).

    Uses select_for_update to prevent concurrent modifications.

    Raises:
        GroupTripNotFoundError: If trip doesn't exist
        NotTripCreatorError: If user is not the creator
        InvalidTripDatesError: If resulting dates are inverted
    """
    trip = _lock_trip(trip_id)

    if not trip.is_creator(user):
        logger.warning("User %s tried to update group trip %s", user.id, trip_id)
        raise NotTripCreatorError("User not authorized")

    update_fields = []

    if name is not None:
        trip.name = name
        update_fields.append('name')

    if description is not None:
        trip.description = description
        update_fields.append('description')

    if start_date is not None:
        trip.start_date = start_date
        update_fields.append('start_date')

    if end_date is not None:
        trip.end_date = end_date
        update_fields.append('end_date')

    _check_dates(trip.start_date, trip.end_date)

    if update_fields:
        trip.save(update_fields=update_fields)

    return trip


@transaction.atomic
def delete_group_trip(*, trip_id: UUID, user: User) -> None:
    """
    Delete a group trip (creator only).

    Cascading deletes remove itinerary items, trip expenses and documents.
    Shared expenses and travel logs are unlinked, not deleted.

    Raises:
        GroupTripNotFoundError: If trip doesn't exist
        NotTripCreatorError: If user is not the creator
    """
    trip = _lock_trip(trip_id)

    if not trip.is_creator(user):
        logger.warning("User %s tried to delete group trip %s", user.id, trip_id)
        raise NotTripCreatorError("User not authorized")

    for document in trip.documents.all():
        document.file.delete(save=False)

    trip.delete()
    logger.info("Group trip %s deleted by %s", trip_id, user.id)


def resolve_trip_link(*, trip_id, user: User) -> Optional[GroupTrip]:
    """
    Resolve the group trip a log or expense should be attached to.

    An empty value means "no trip".

    Raises:
        GroupTripNotFoundError: If trip doesn't exist
        NotTripMemberError: If user is not a member
    """
    if trip_id in (None, ''):
        return None
    return get_trip_if_member(trip_id=trip_id, user=user)
