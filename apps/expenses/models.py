# ==========================================
# apps/expenses/models.py
# ==========================================

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Expense(models.Model):
    """Personal expense, optionally tied to a travel log or group trip."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    category = models.CharField(max_length=100, db_index=True)
    date = models.DateTimeField(default=timezone.now)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='expenses')
    travel_log = models.ForeignKey(
        'travel_logs.TravelLog',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )
    group_trip = models.ForeignKey(
        'group_trips.GroupTrip',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shared_expenses'
    )

    class Meta:
        db_table = 'expenses'
        ordering = ['-date']
        indexes = [
            models.Index(fields=['user', '-date'], name='expense_user_date_idx'),
        ]

    def __str__(self):
        return f"{self.description} - {self.amount}"

    def is_owner(self, user):
        return self.user_id == user.id
