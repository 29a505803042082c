"""
Accounts app permissions

Object-level permissions for users, projects and applications. Admins
pass every check.
"""
from rest_framework import permissions


class IsAdminOrSelf(permissions.BasePermission):
    """
    Users may only access their own account.
    """

    def has_object_permission(self, request, view, obj):
        return request.user.is_admin or obj == request.user


class IsProjectCreatorOrAdmin(permissions.BasePermission):
    """
    Only the creator of a project may change it or review its applications.

    Works on a Project or on any object with a ``project`` attribute.
    """

    message = 'Only the project creator can perform this action.'

    def has_object_permission(self, request, view, obj):
        if request.user.is_admin:
            return True
        project = getattr(obj, 'project', obj)
        return project.creator_id == request.user.id


class IsApplicantOrAdmin(permissions.BasePermission):
    """
    Only the applicant may withdraw (delete) their application.
    """

    message = 'Only the applicant can perform this action.'

    def has_object_permission(self, request, view, obj):
        return request.user.is_admin or obj.user_id == request.user.id
