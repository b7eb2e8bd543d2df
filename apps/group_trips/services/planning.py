"""
Trip planning service.

Itinerary items, group expenses and shared documents. Every mutation
requires the acting user to be a member of the trip.
"""

import logging
from datetime import date
from decimal import Decimal
from uuid import UUID

from django.conf import settings
from django.core.files.uploadedfile import UploadedFile
from django.db import transaction

from apps.accounts.models import User
from apps.group_trips.models import ItineraryItem, TripExpense, TripDocument

from .exceptions import DocumentTooLargeError
from .trip_management import get_trip_if_member

logger = logging.getLogger(__name__)


@transaction.atomic
def add_itinerary_item(
    *,
    trip_id: UUID,
    user: User,
    name: str,
    date: date,
    location: str = '',
    description: str = ''
) -> ItineraryItem:
    """Add a place to visit to the trip itinerary."""
    trip = get_trip_if_member(trip_id=trip_id, user=user)

    return ItineraryItem.objects.create(
        group_trip=trip,
        name=name,
        date=date,
        location=location,
        description=description,
        added_by=user,
    )


@transaction.atomic
def add_trip_expense(
    *,
    trip_id: UUID,
    user: User,
    description: str,
    amount: Decimal,
    category: str = ''
) -> TripExpense:
    """Record an expense the user paid for the group."""
    trip = get_trip_if_member(trip_id=trip_id, user=user)

    expense = TripExpense.objects.create(
        group_trip=trip,
        description=description,
        amount=amount,
        category=category,
        added_by=user,
    )
    logger.info("Expense %s (%s) added to trip %s", expense.id, amount, trip_id)
    return expense


@transaction.atomic
def upload_document(
    *,
    trip_id: UUID,
    user: User,
    name: str,
    uploaded_file: UploadedFile
) -> TripDocument:
    """
    Store a document for the trip on the default storage.

    Raises:
        DocumentTooLargeError: If the file exceeds MAX_DOCUMENT_SIZE_MB
    """
    trip = get_trip_if_member(trip_id=trip_id, user=user)

    max_bytes = settings.MAX_DOCUMENT_SIZE_MB * 1024 * 1024
    if uploaded_file.size > max_bytes:
        raise DocumentTooLargeError(
            f"Document exceeds the {settings.MAX_DOCUMENT_SIZE_MB} MB limit"
        )

    document = TripDocument(
        group_trip=trip,
        name=name or uploaded_file.name,
        file_type=TripDocument.detect_type(uploaded_file.name),
        uploaded_by=user,
    )
    document.file.save(uploaded_file.name, uploaded_file, save=False)
    document.save()

    logger.info("Document %s uploaded to trip %s", document.id, trip_id)
    return document
