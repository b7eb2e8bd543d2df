# ==========================================
# apps/group_trips/admin.py
# ==========================================

from django.contrib import admin
from apps.group_trips.models import GroupTrip, ItineraryItem, TripExpense, TripDocument


class ItineraryItemInline(admin.TabularInline):
    """Inline admin for itinerary items."""
    model = ItineraryItem
    extra = 0
    fields = ['name', 'date', 'location', 'added_by']


class TripExpenseInline(admin.TabularInline):
    """Inline admin for group expenses."""
    model = TripExpense
    extra = 0
    fields = ['description', 'amount', 'category', 'added_by', 'date']
    readonly_fields = ['date']


class TripDocumentInline(admin.TabularInline):
    model = TripDocument
    extra = 0
    fields = ['name', 'file', 'file_type', 'uploaded_by', 'upload_date']
    readonly_fields = ['upload_date']


@admin.register(GroupTrip)
class GroupTripAdmin(admin.ModelAdmin):
    """Admin interface for group trips."""

    list_display = [
        'name',
        'creator',
        'member_count',
        'start_date',
        'end_date',
        'created_at'
    ]
    list_filter = ['start_date', 'created_at']
    search_fields = ['name', 'description', 'creator__email', 'creator__username']
    readonly_fields = ['created_at']
    filter_horizontal = ['members']
    inlines = [ItineraryItemInline, TripExpenseInline, TripDocumentInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'creator', 'members')
        }),
        ('Dates', {
            'fields': ('start_date', 'end_date')
        }),
        ('Metadata', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )

    def member_count(self, obj):
        """Show number of members."""
        return obj.members.count()
    member_count.short_description = 'Members'


@admin.register(TripDocument)
class TripDocumentAdmin(admin.ModelAdmin):
    list_display = ['name', 'group_trip', 'file_type', 'uploaded_by', 'upload_date']
    list_filter = ['file_type', 'upload_date']
    search_fields = ['name', 'group_trip__name']
