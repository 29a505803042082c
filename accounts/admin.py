from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from projects.models import Project

from .models import User


class CreatedProjectInline(admin.TabularInline):
    model = Project
    fk_name = 'creator'
    fields = ('title', 'status', 'team_size', 'current_team_size')
    readonly_fields = fields
    extra = 0
    can_delete = False
    show_change_link = True
    verbose_name_plural = 'Created projects'


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin for DevMatch members: roles, display names and their projects."""

    list_display = ['username', 'display_name', 'email', 'role', 'application_count']
    list_filter = ['role', 'is_active']
    search_fields = ['username', 'name', 'email']
    inlines = [CreatedProjectInline]

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Membership', {'fields': ('name', 'role')}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Membership', {'fields': ('name', 'role')}),
    )

    @admin.display(description='Applications')
    def application_count(self, obj):
        return obj.applications.count()
