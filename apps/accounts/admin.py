# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import Admin, Employee


@admin.register(Employee)
class EmployeeAdmin(BaseUserAdmin):
    """
    Admin interface for Employee accounts.

    The stable employee_id is shown read-only; it is the key entries use.
    """

    list_display = [
        'email',
        'name',
        'employee_id',
        'is_active_badge',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
    ]

    search_fields = [
        'email',
        'name',
        'employee_id',
    ]

    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'name', 'employee_id', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create Employee', {
            'classes': ('wide',),
            'fields': ('email', 'name', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'employee_id',
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        if obj.is_active:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">{}</span>',
                'Active'
            )
        return format_html(
            '<span style="background: #B85C5C; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            'Inactive'
        )
    is_active_badge.short_description = 'Status'
    is_active_badge.admin_order_field = 'is_active'


@admin.register(Admin)
class AdminAccountAdmin(admin.ModelAdmin):
    """Admin interface for link-creating administrators."""

    list_display = ['email', 'name', 'admin_id', 'created_at']
    search_fields = ['email', 'name', 'admin_id']
    readonly_fields = ['admin_id', 'password', 'created_at']
    ordering = ['-created_at']
