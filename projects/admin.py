from django.contrib import admin
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin interface for Project."""

    list_display = ['title', 'creator', 'status', 'team_size', 'duration_weeks', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['title', 'description', 'tech_stack', 'creator__username']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('creator', 'title', 'description', 'tech_stack')
        }),
        ('Team', {
            'fields': ('team_size', 'current_team_size', 'duration_weeks', 'status')
        }),
        ('Content', {
            'fields': ('content',),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at')
        }),
    )
