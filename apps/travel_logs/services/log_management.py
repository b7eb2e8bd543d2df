"""
Travel log management service.

Handles travel log CRUD operations with proper transaction safety.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import Count, QuerySet

from apps.accounts.models import User
from apps.group_trips.services import resolve_trip_link
from apps.travel_logs.models import TravelLog, TravelLogStatus

from .exceptions import (
    TravelLogNotFoundError,
    NotLogOwnerError,
    LogAccessDeniedError,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'title',
    'destination',
    'description',
    'status',
    'is_public',
    'latitude',
    'longitude',
    'date',
)


def _base_queryset() -> QuerySet[TravelLog]:
    return (
        TravelLog.objects
        .select_related('user', 'group_trip')
        .prefetch_related('likes', 'bookmarks', 'memberships__user')
    )


def get_log(log_id: UUID, *, for_update: bool = False) -> TravelLog:
    """
    Fetch a travel log by id.

    Raises:
        TravelLogNotFoundError: If log doesn't exist
    """
    queryset = TravelLog.objects.select_for_update() if for_update else _base_queryset()
    try:
        return queryset.get(id=log_id)
    except (TravelLog.DoesNotExist, DjangoValidationError):
        raise TravelLogNotFoundError("Travel log not found")


def _get_owned_log(log_id: UUID, user: User) -> TravelLog:
    log = get_log(log_id, for_update=True)
    if not log.is_owner(user):
        logger.warning("User %s denied owner action on travel log %s", user.id, log_id)
        raise NotLogOwnerError("User not authorized")
    return log


@transaction.atomic
def create_travel_log(
    *,
    user: User,
    title: str,
    destination: str,
    description: str = '',
    status: str = TravelLogStatus.PRIVATE,
    is_public: bool = False,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    date: Optional[datetime] = None,
    group_trip: Optional[str] = None
) -> TravelLog:
    """
    Create a travel log owned by the user.

    Raises:
        GroupTripNotFoundError: If the linked trip doesn't exist
        NotTripMemberError: If user is not a member of the linked trip
    """
    trip = resolve_trip_link(trip_id=group_trip, user=user)

    log = TravelLog(
        user=user,
        title=title,
        destination=destination,
        description=description,
        status=status,
        is_public=is_public,
        latitude=latitude,
        longitude=longitude,
        group_trip=trip,
    )
    if date is not None:
        log.date = date
    log.save()

    logger.info("Travel log %s created by %s", log.id, user.id)
    return get_log(log.id)


def list_user_logs(*, user: User, status: Optional[str] = None) -> QuerySet[TravelLog]:
    """The user's own logs, newest first, optionally filtered by status."""
    queryset = _base_queryset().filter(user=user)
    if status:
        queryset = queryset.filter(status=status)
    return queryset.order_by('-date')


def list_public_logs() -> QuerySet[TravelLog]:
    """Community feed of public logs with like/bookmark counts."""
    return (
        _base_queryset()
        .public()
        .annotate(
            like_count=Count('likes', distinct=True),
            bookmark_count=Count('bookmarks', distinct=True),
        )
        .order_by('-date')
    )


def get_log_for_viewer(*, log_id: UUID, user: Optional[User]) -> TravelLog:
    """
    Load a log if the user may see it.

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        LogAccessDeniedError: If the log is private and user is outside it
    """
    log = get_log(log_id)
    if not log.can_view(user):
        raise LogAccessDeniedError("User not authorized")
    return log


@transaction.atomic
def update_travel_log(*, log_id: UUID, user: User, **changes) -> TravelLog:
    """
    Update the given fields of a log (owner only).

    A ``group_trip`` of ``''`` or ``None`` unlinks the trip.

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        NotLogOwnerError: If user is not the owner
        GroupTripNotFoundError: If the linked trip doesn't exist
        NotTripMemberError: If user is not a member of the linked trip
    """
    log = _get_owned_log(log_id, user)

    update_fields = []
    for field in EDITABLE_FIELDS:
        if field in changes:
            setattr(log, field, changes[field])
            update_fields.append(field)

    if 'group_trip' in changes:
        log.group_trip = resolve_trip_link(trip_id=changes['group_trip'], user=user)
        update_fields.append('group_trip')

    if update_fields:
        log.save(update_fields=update_fields)

    return get_log(log.id)


@transaction.atomic
def delete_travel_log(*, log_id: UUID, user: User) -> None:
    """
    Delete a log (owner only).

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        NotLogOwnerError: If user is not the owner
    """
    log = _get_owned_log(log_id, user)
    log.delete()
    logger.info("Travel log %s deleted by %s", log_id, user.id)
