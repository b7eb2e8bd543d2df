# ==========================================
# apps/calendar_events/models.py
# ==========================================

import uuid

from django.db import models


class CalendarEvent(models.Model):
    """Something on the user's travel calendar."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    start = models.DateTimeField()
    end = models.DateTimeField()
    description = models.TextField(blank=True)
    location = models.CharField(max_length=200, blank=True)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='calendar_events')
    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'calendar_events'
        ordering = ['start']
        indexes = [
            models.Index(fields=['user', 'start'], name='calendar_event_user_start_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.start:%Y-%m-%d})"
