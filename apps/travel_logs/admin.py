# ==========================================
# apps/travel_logs/admin.py
# ==========================================

from django.contrib import admin
from apps.travel_logs.models import TravelLog, TravelLogMembership


class TravelLogMembershipInline(admin.TabularInline):
    """Inline admin for log members."""
    model = TravelLogMembership
    extra = 0
    fields = ['user', 'note', 'added_at']
    readonly_fields = ['added_at']


@admin.register(TravelLog)
class TravelLogAdmin(admin.ModelAdmin):
    """Admin interface for travel logs."""

    list_display = [
        'title',
        'destination',
        'user',
        'status',
        'is_public',
        'like_count',
        'date',
    ]
    list_filter = ['status', 'is_public', 'date']
    search_fields = ['title', 'destination', 'user__email', 'user__username']
    raw_id_fields = ['user', 'group_trip']
    filter_horizontal = ['likes', 'bookmarks']
    inlines = [TravelLogMembershipInline]
    date_hierarchy = 'date'
    ordering = ['-date']

    fieldsets = (
        ('Basic Information', {
            'fields': ('title', 'destination', 'description', 'user', 'group_trip')
        }),
        ('Visibility', {
            'fields': ('status', 'is_public')
        }),
        ('Location', {
            'fields': ('latitude', 'longitude', 'date'),
        }),
        ('Social', {
            'fields': ('likes', 'bookmarks'),
            'classes': ('collapse',)
        }),
    )

    def like_count(self, obj):
        return obj.likes.count()
    like_count.short_description = 'Likes'
