from django.contrib import admin
from .models import Link


@admin.register(Link)
class LinkAdmin(admin.ModelAdmin):
    """Admin interface for links."""

    list_display = ['title', 'id', 'created_by', 'created_at']
    search_fields = ['title', 'id']
    readonly_fields = ['id', 'created_at']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'
