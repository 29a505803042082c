from django.contrib import admin
from .models import Application, SkillScore


class SkillScoreInline(admin.TabularInline):
    model = SkillScore
    extra = 0


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    """Admin interface for Application."""

    list_display = ['id', 'user', 'project', 'status', 'applied_at']
    list_filter = ['status', 'applied_at']
    search_fields = ['user__username', 'user__name', 'project__title']
    readonly_fields = ['applied_at']
    inlines = [SkillScoreInline]
