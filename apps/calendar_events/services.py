"""
Calendar event service.

Small enough to live in a single module.
"""

import logging
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.calendar_events.models import CalendarEvent

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('title', 'start', 'end', 'description', 'location')


class CalendarServiceError(Exception):
    """Base exception for all calendar service errors."""
    pass


class EventNotFoundError(CalendarServiceError):
    pass


class NotEventOwnerError(CalendarServiceError):
    pass


class InvalidEventRangeError(CalendarServiceError):
    """Raised when an event ends before it starts."""
    pass


def _check_range(start: datetime, end: datetime) -> None:
    if end < start:
        raise InvalidEventRangeError("End must not be before start")


def _get_owned_event(event_id: UUID, user: User) -> CalendarEvent:
    try:
        event = CalendarEvent.objects.select_for_update().get(id=event_id)
    except (CalendarEvent.DoesNotExist, DjangoValidationError):
        raise EventNotFoundError("Event not found")

    if event.user_id != user.id:
        logger.warning("User %s denied access to event %s", user.id, event_id)
        raise NotEventOwnerError("User not authorized")
    return event


def list_events(
    *,
    user: User,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None
) -> QuerySet[CalendarEvent]:
    """
    The user's events in start order.

    ``date_from`` keeps events that have not ended before that day,
    ``date_to`` keeps events starting on or before that day.
    """
    events = CalendarEvent.objects.filter(user=user)
    if date_from:
        events = events.filter(end__date__gte=date_from)
    if date_to:
        events = events.filter(start__date__lte=date_to)
    return events.order_by('start')


@transaction.atomic
def create_event(
    *,
    user: User,
    title: str,
    start: datetime,
    end: datetime,
    description: str = '',
    location: str = ''
) -> CalendarEvent:
    """
    Raises:
        InvalidEventRangeError: If end precedes start
    """
    _check_range(start, end)
    event = CalendarEvent.objects.create(
        user=user,
        title=title,
        start=start,
        end=end,
        description=description,
        location=location,
    )
    logger.info("Calendar event %s created by %s", event.id, user.id)
    return event


@transaction.atomic
def update_event(*, event_id: UUID, user: User, **changes) -> CalendarEvent:
    """
    Update the given fields of an event (owner only).

    Raises:
        EventNotFoundError: If event doesn't exist
        NotEventOwnerError: If user is not the owner
        InvalidEventRangeError: If the resulting end precedes start
    """
    event = _get_owned_event(event_id, user)

    update_fields = [field for field in EDITABLE_FIELDS if field in changes]
    for field in update_fields:
        setattr(event, field, changes[field])

    _check_range(event.start, event.end)

    if update_fields:
        event.save(update_fields=update_fields)
    return event


@transaction.atomic
def delete_event(*, event_id: UUID, user: User) -> None:
    """
    Raises:
        EventNotFoundError: If event doesn't exist
        NotEventOwnerError: If user is not the owner
    """
    event = _get_owned_event(event_id, user)
    event.delete()
    logger.info("Calendar event %s deleted by %s", event_id, user.id)
