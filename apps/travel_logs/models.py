# ==========================================
# apps/travel_logs/models.py
# ==========================================

import uuid

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone


class TravelLogStatus(models.TextChoices):
    PUBLIC = 'public', 'Public'
    PRIVATE = 'private', 'Private'
    VISITED = 'visited', 'Visited'
    WISHLIST = 'wishlist', 'Wishlist'
    ONGOING = 'ongoing', 'Ongoing'
    DREAM = 'dream', 'Dream'


class TravelLogQuerySet(models.QuerySet):

    def public(self):
        """Logs shown in the community feed."""
        return self.filter(Q(is_public=True) | Q(status=TravelLogStatus.PUBLIC))


class TravelLog(models.Model):
    """A diary entry about one destination."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    destination = models.CharField(max_length=200, db_index=True)
    description = models.TextField(blank=True)
    status = models.CharField(
        max_length=20,
        choices=TravelLogStatus.choices,
        default=TravelLogStatus.PRIVATE,
        db_index=True
    )
    is_public = models.BooleanField(default=False)
    latitude = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(-90), MaxValueValidator(90)]
    )
    longitude = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(-180), MaxValueValidator(180)]
    )
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='travel_logs')
    group_trip = models.ForeignKey(
        'group_trips.GroupTrip',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shared_travel_logs'
    )
    date = models.DateTimeField(default=timezone.now)

    likes = models.ManyToManyField('accounts.User', related_name='liked_travel_logs', blank=True)
    bookmarks = models.ManyToManyField('accounts.User', related_name='bookmarked_travel_logs', blank=True)
    members = models.ManyToManyField(
        'accounts.User',
        through='TravelLogMembership',
        related_name='shared_travel_logs',
        blank=True
    )

    objects = TravelLogQuerySet.as_manager()

    class Meta:
        db_table = 'travel_logs'
        ordering = ['-date']
        indexes = [
            models.Index(fields=['user', '-date'], name='travel_log_user_date_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.destination})"

    @property
    def is_publicly_visible(self):
        return self.is_public or self.status == TravelLogStatus.PUBLIC

    def is_owner(self, user):
        return self.user_id == user.id

    def can_view(self, user):
        """Public logs are open to everyone, the rest to the owner and members."""
        if self.is_publicly_visible:
            return True
        if user is None or not user.is_authenticated:
            return False
        return self.is_owner(user) or self.memberships.filter(user=user).exists()


class TravelLogMembership(models.Model):
    """A traveller the owner shared the log with."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    travel_log = models.ForeignKey(TravelLog, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='travel_log_memberships')
    note = models.TextField(blank=True)
    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'travel_log_members'
        ordering = ['added_at']
        constraints = [
            models.UniqueConstraint(fields=['travel_log', 'user'], name='unique_travel_log_member'),
        ]

    def __str__(self):
        return f"{self.user} on {self.travel_log}"
