"""
Expense split service.

Splits the group expenses of a trip evenly across its members with
cent precision, and reports how much each member has paid versus owes.
"""

from decimal import Decimal
from uuid import UUID

from django.db.models import Sum

from apps.accounts.models import User

from .trip_management import get_trip_if_member


def calculate_splits(total, participants):
    """
    Split an amount evenly with cent precision (no rounding errors).

    Algorithm:
        1. Convert to cents: ``total_cents = int(total * 100)``
        2. Base share: ``base = total_cents // N``
        3. Remainder: ``remainder = total_cents % N``
        4. First 'remainder' participants get ``(base + 1)`` cents
        5. Rest get 'base' cents

    Args:
        total (Decimal): Amount to split.
        participants (list): Participants, in the order that decides who
            receives the extra cents.

    Returns:
        list[tuple]: ``(participant, Decimal)`` pairs summing to ``total``.

    Raises:
        ValueError: If participants list is empty.

    Example:
        >>> calculate_splits(Decimal('100.00'), ['a', 'b', 'c'])
        [('a', Decimal('33.34')), ('b', Decimal('33.33')), ('c', Decimal('33.33'))]
    """
    if not participants:
        raise ValueError("At least one participant required")

    total_cents = int(total * 100)
    base_cents, remainder_cents = divmod(total_cents, len(participants))

    shares = []
    for i, participant in enumerate(participants):
        cents = base_cents + 1 if i < remainder_cents else base_cents
        shares.append((participant, Decimal(cents) / Decimal(100)))

    total_check = sum((amount for _, amount in shares), Decimal('0.00'))
    if total_check != total:
        raise ValueError(f"Split calculation error: {total_check} != {total}")

    return shares


def get_expense_summary(*, trip_id: UUID, user: User) -> dict:
    """
    Summarise who paid what on a trip and who owes whom.

    Members are ordered by username so the extra cents always land on the
    same people for a given trip.

    Raises:
        GroupTripNotFoundError: If trip doesn't exist
        NotTripMemberError: If user is not a member
    """
    trip = get_trip_if_member(trip_id=trip_id, user=user)

    members = list(trip.members.order_by('username'))
    total = trip.expenses.aggregate(total=Sum('amount'))['total'] or Decimal('0.00')
    total = total.quantize(Decimal('0.01'))

    paid_by = {
        row['added_by']: row['paid']
        for row in trip.expenses.values('added_by').annotate(paid=Sum('amount'))
    }

    balances = []
    splits = calculate_splits(total, members) if members else []
    for member, share in splits:
        paid = (paid_by.get(member.id) or Decimal('0.00')).quantize(Decimal('0.01'))
        balances.append({
            'user_id': member.id,
            'username': member.username,
            'share': share,
            'paid': paid,
            'balance': paid - share,
        })

    return {
        'trip_id': trip.id,
        'total': total,
        'member_count': len(members),
        'per_member': balances,
    }
