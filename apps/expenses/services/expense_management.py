"""
Expense management service.

Handles personal expense CRUD and the per-category summary.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import Count, QuerySet, Sum

from apps.accounts.models import User
from apps.expenses.models import Expense
from apps.group_trips.services import resolve_trip_link
from apps.travel_logs.models import TravelLog
from apps.travel_logs.services import get_log

from .exceptions import (
    ExpenseNotFoundError,
    NotExpenseOwnerError,
    LinkedLogNotOwnedError,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('description', 'amount', 'category', 'date')


def _resolve_log_link(log_id, user: User) -> Optional[TravelLog]:
    """
    Empty value means "no log".

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        LinkedLogNotOwnedError: If the log belongs to someone else
    """
    if log_id in (None, ''):
        return None
    log = get_log(log_id)
    if not log.is_owner(user):
        raise LinkedLogNotOwnedError("User not authorized")
    return log


def _get_owned_expense(expense_id: UUID, user: User, *, for_update: bool = False) -> Expense:
    queryset = Expense.objects.select_for_update() if for_update else Expense.objects.select_related('travel_log')
    try:
        expense = queryset.get(id=expense_id)
    except (Expense.DoesNotExist, DjangoValidationError):
        raise ExpenseNotFoundError("Expense not found")

    if not expense.is_owner(user):
        logger.warning("User %s denied access to expense %s", user.id, expense_id)
        raise NotExpenseOwnerError("User not authorized")
    return expense


@transaction.atomic
def create_expense(
    *,
    user: User,
    description: str,
    amount: Decimal,
    category: str,
    date: Optional[datetime] = None,
    travel_log: Optional[str] = None,
    group_trip: Optional[str] = None
) -> Expense:
    """
    Record an expense for the user.

    Raises:
        TravelLogNotFoundError / GroupTripNotFoundError: If a link target is missing
        LinkedLogNotOwnedError: If the travel log is not the user's
        NotTripMemberError: If the user is not in the group trip
    """
    expense = Expense(
        user=user,
        description=description,
        amount=amount,
        category=category,
        travel_log=_resolve_log_link(travel_log, user),
        group_trip=resolve_trip_link(trip_id=group_trip, user=user),
    )
    if date is not None:
        expense.date = date
    expense.save()

    logger.info("Expense %s (%s) created by %s", expense.id, amount, user.id)
    return expense


def list_user_expenses(*, user: User) -> QuerySet[Expense]:
    """The user's expenses, newest first."""
    return Expense.objects.filter(user=user).select_related('travel_log').order_by('-date')


def get_expense(*, expense_id: UUID, user: User) -> Expense:
    """
    Raises:
        ExpenseNotFoundError: If expense doesn't exist
        NotExpenseOwnerError: If user is not the owner
    """
    return _get_owned_expense(expense_id, user)


@transaction.atomic
def update_expense(*, expense_id: UUID, user: User, **changes) -> Expense:
    """
    Update the given fields of an expense (owner only).

    ``travel_log`` or ``group_trip`` set to ``''``/``None`` unlinks them.
    """
    expense = _get_owned_expense(expense_id, user, for_update=True)

    update_fields = []
    for field in EDITABLE_FIELDS:
        if field in changes:
            setattr(expense, field, changes[field])
            update_fields.append(field)

    if 'travel_log' in changes:
        expense.travel_log = _resolve_log_link(changes['travel_log'], user)
        update_fields.append('travel_log')

    if 'group_trip' in changes:
        expense.group_trip = resolve_trip_link(trip_id=changes['group_trip'], user=user)
        update_fields.append('group_trip')

    if update_fields:
        expense.save(update_fields=update_fields)

    return _get_owned_expense(expense.id, user)


@transaction.atomic
def delete_expense(*, expense_id: UUID, user: User) -> None:
    """
    Raises:
        ExpenseNotFoundError: If expense doesn't exist
        NotExpenseOwnerError: If user is not the owner
    """
    expense = _get_owned_expense(expense_id, user, for_update=True)
    expense.delete()
    logger.info("Expense %s deleted by %s", expense_id, user.id)


def get_expense_summary(*, user: User) -> dict:
    """Total spent, per-category totals and the number of expenses."""
    expenses = Expense.objects.filter(user=user)

    by_category = {
        row['category']: row['total'].quantize(Decimal('0.01'))
        for row in expenses.values('category').annotate(total=Sum('amount')).order_by('category')
    }
    totals = expenses.aggregate(total=Sum('amount'), count=Count('id'))

    return {
        'total': (totals['total'] or Decimal('0.00')).quantize(Decimal('0.01')),
        'by_category': by_category,
        'count': totals['count'],
    }
