# ==========================================
# apps/expenses/admin.py
# ==========================================

from django.contrib import admin
from apps.expenses.models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """Admin interface for expenses."""

    list_display = ['description', 'amount', 'category', 'user', 'travel_log', 'group_trip', 'date']
    list_filter = ['category', 'date']
    search_fields = ['description', 'category', 'user__email', 'user__username']
    raw_id_fields = ['user', 'travel_log', 'group_trip']
    date_hierarchy = 'date'
    ordering = ['-date']
