"""
Accounts app models

Custom User model extending AbstractUser with a display name and role.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom user model for project creators and applicants.

    Extends Django's AbstractUser to add:
    - name: Display name shown to teammates and used in team prompts
    - role: Distinguish between admins and regular members
    """

    ADMIN = 'ADMIN'
    MEMBER = 'MEMBER'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (MEMBER, 'Member'),
    ]

    name = models.CharField(max_length=150, blank=True)
    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=MEMBER,
    )

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def display_name(self) -> str:
        """
        Name used wherever the user is presented to other people.
        """
        return self.name or self.get_full_name() or self.username

    @property
    def is_admin(self) -> bool:
        return self.role == self.ADMIN

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
