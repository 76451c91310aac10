from django.contrib import admin
from .models import Entry


@admin.register(Entry)
class EntryAdmin(admin.ModelAdmin):
    """
    Admin interface for entries.

    Entries are immutable once submitted, so the admin is read-only; new
    entries only arrive through the submission endpoint.
    """

    list_display = ['name', 'upi_id', 'amount', 'link', 'employee_id', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name', 'upi_id', 'employee__email']
    readonly_fields = ['id', 'link', 'employee', 'name', 'upi_id', 'amount', 'created_at']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
