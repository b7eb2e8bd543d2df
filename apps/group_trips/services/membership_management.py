"""
Membership management service.

Handles group trip membership operations with concurrency protection.
"""

import logging
from typing import Iterable
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.group_trips.models import GroupTrip
from apps.notifications import send_trip_invite

from .exceptions import (
    MemberNotFoundError,
    NotTripMemberError,
    NotTripCreatorError,
    CannotRemoveCreatorError,
)
from .trip_management import _lock_trip, resolve_members

logger = logging.getLogger(__name__)


@transaction.atomic
def add_members(
    *,
    trip_id: UUID,
    identifiers: Iterable[str],
    added_by: User
) -> GroupTrip:
    """
    Add members to a trip by username or email.

    Any member may invite. Users who already belong to the trip are
    skipped silently. The trip row is locked so concurrent invites see
    each other's additions.

    Returns:
        The updated GroupTrip

    Raises:
        GroupTripNotFoundError: If trip doesn't exist
        NotTripMemberError: If added_by is not a member
        MemberNotFoundError: If an identifier matches no user
    """
    trip = _lock_trip(trip_id)

    if not trip.has_member(added_by):
        logger.warning("Non-member %s tried to add members to trip %s", added_by.id, trip_id)
        raise NotTripMemberError("User not authorized")

    candidates = resolve_members(identifiers)
    existing_ids = set(trip.members.values_list('id', flat=True))
    new_members = [user for user in candidates if user.id not in existing_ids]

    if new_members:
        trip.members.add(*new_members)
        send_trip_invite(trip, new_members, invited_by=added_by)
        logger.info("Added %d member(s) to trip %s", len(new_members), trip_id)

    return trip


@transaction.atomic
def remove_member(
    *,
    trip_id: UUID,
    member_id: UUID,
    removed_by: User
) -> GroupTrip:
    """
    Remove a member from a trip.

    The creator may remove anyone else; a member may remove themselves.
    The creator cannot be removed.

    Raises:
        GroupTripNotFoundError: If trip doesn't exist
        NotTripCreatorError: If removed_by is neither creator nor the member
        CannotRemoveCreatorError: If member_id is the creator
        MemberNotFoundError: If member_id is not a member of the trip
    """
    trip = _lock_trip(trip_id)

    removing_self = str(removed_by.id) == str(member_id)
    if not trip.is_creator(removed_by) and not removing_self:
        logger.warning("User %s tried to remove %s from trip %s", removed_by.id, member_id, trip_id)
        raise NotTripCreatorError("User not authorized")

    if str(trip.creator_id) == str(member_id):
        raise CannotRemoveCreatorError("The trip creator cannot be removed")

    try:
        member = trip.members.get(id=UUID(str(member_id)))
    except (ValueError, User.DoesNotExist):
        raise MemberNotFoundError("Member not found")

    trip.members.remove(member)
    logger.info("Removed member %s from trip %s", member.id, trip_id)
    return trip
