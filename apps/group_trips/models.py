# ==========================================
# apps/group_trips/models.py
# ==========================================

import os
import uuid

from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal


class DocumentType(models.TextChoices):
    IMAGE = 'image', 'Image'
    PDF = 'pdf', 'PDF'
    OTHER = 'other', 'Other'


IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.gif', '.webp', '.heic'}


class GroupTrip(models.Model):
    """Shared trip planned by several travellers."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    creator = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='created_group_trips')
    members = models.ManyToManyField('accounts.User', related_name='group_trips', blank=True)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'group_trips'
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def has_member(self, user):
        return self.members.filter(id=user.id).exists()

    def is_creator(self, user):
        return self.creator_id == user.id


class ItineraryItem(models.Model):
    """Place to visit on a given day of a group trip."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group_trip = models.ForeignKey(GroupTrip, on_delete=models.CASCADE, related_name='itinerary')
    name = models.CharField(max_length=200)
    date = models.DateField()
    location = models.CharField(max_length=200, blank=True)
    description = models.TextField(blank=True)
    added_by = models.ForeignKey('accounts.User', on_delete=models.SET_NULL, null=True, related_name='+')

    class Meta:
        db_table = 'group_trip_itinerary_items'
        ordering = ['date', 'name']

    def __str__(self):
        return f"{self.name} ({self.date})"


class TripExpense(models.Model):
    """Expense paid by one member on behalf of the group."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group_trip = models.ForeignKey(GroupTrip, on_delete=models.CASCADE, related_name='expenses')
    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    category = models.CharField(max_length=100, blank=True)
    added_by = models.ForeignKey('accounts.User', on_delete=models.SET_NULL, null=True, related_name='group_trip_expenses')
    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'group_trip_expenses'
        ordering = ['-date']

    def __str__(self):
        return f"{self.description} - {self.amount}"


def trip_document_path(instance, filename):
    return f"trip_documents/{instance.group_trip_id}/{filename}"


class TripDocument(models.Model):
    """Ticket, booking or other file shared with the trip members."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group_trip = models.ForeignKey(GroupTrip, on_delete=models.CASCADE, related_name='documents')
    name = models.CharField(max_length=200)
    file = models.FileField(upload_to=trip_document_path)
    file_type = models.CharField(max_length=10, choices=DocumentType.choices, default=DocumentType.OTHER)
    uploaded_by = models.ForeignKey('accounts.User', on_delete=models.SET_NULL, null=True, related_name='uploaded_trip_documents')
    upload_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'group_trip_documents'
        ordering = ['-upload_date']

    def __str__(self):
        return self.name

    @staticmethod
    def detect_type(filename):
        extension = os.path.splitext(filename or '')[1].lower()
        if extension in IMAGE_EXTENSIONS:
            return DocumentType.IMAGE
        if extension == '.pdf':
            return DocumentType.PDF
        return DocumentType.OTHER
