from django.contrib import admin
from .models import AnalysisResult


@admin.register(AnalysisResult)
class AnalysisResultAdmin(admin.ModelAdmin):
    """Admin interface for AnalysisResult. Results are append-only."""

    list_display = ['id', 'application', 'compatibility_score', 'created_at']
    search_fields = ['application__user__username', 'application__project__title']
    readonly_fields = ['application', 'compatibility_score', 'compatibility_reason', 'created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
