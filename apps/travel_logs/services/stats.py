"""
Per-user dashboard statistics.
"""

from decimal import Decimal

from django.db.models import Count, Sum

from apps.accounts.models import User
from apps.travel_logs.models import TravelLog, TravelLogStatus


def get_user_stats(*, user: User) -> dict:
    """Counts over the user's logs plus the total they have spent."""
    from apps.expenses.models import Expense

    logs = TravelLog.objects.filter(user=user)

    by_status = {choice: 0 for choice in TravelLogStatus.values}
    for row in logs.values('status').annotate(count=Count('id')):
        by_status[row['status']] = row['count']

    total_expenses = Expense.objects.filter(user=user).aggregate(total=Sum('amount'))['total']

    return {
        'total_logs': logs.count(),
        'by_status': by_status,
        'destinations': logs.values('destination').distinct().count(),
        'likes_received': TravelLog.likes.through.objects.filter(travellog__user=user).count(),
        'bookmarks_received': TravelLog.bookmarks.through.objects.filter(travellog__user=user).count(),
        'total_expenses': (total_expenses or Decimal('0.00')).quantize(Decimal('0.01')),
    }
