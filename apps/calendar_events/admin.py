# ==========================================
# apps/calendar_events/admin.py
# ==========================================

from django.contrib import admin
from apps.calendar_events.models import CalendarEvent


@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ['title', 'user', 'start', 'end', 'location']
    list_filter = ['start']
    search_fields = ['title', 'location', 'user__email']
    raw_id_fields = ['user']
    date_hierarchy = 'start'
    ordering = ['start']
