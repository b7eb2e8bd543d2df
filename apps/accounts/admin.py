# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserCreationForm
from .models import User


class TravellerCreationForm(UserCreationForm):
    """Admin add form bound to the custom user model."""

    class Meta(UserCreationForm.Meta):
        model = User
        fields = ('email', 'username')


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for travellers."""

    list_display = [
        'email',
        'username',
        'is_active',
        'is_staff',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'is_superuser',
        'created_at',
    ]

    search_fields = [
        'email',
        'username',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    # Remove username-as-login references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'username', 'password')
        }),
        ('Profile', {
            'fields': ('bio', 'travel_tags', 'profile_picture_url'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Important Dates', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',)
        }),
    )

    add_form = TravellerCreationForm
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['created_at', 'last_login']
