"""
Projects app models

Project model describing a team a creator is recruiting for.
"""
from django.conf import settings
from django.core.validators import MinValueValidator, RegexValidator
from django.db import models


TECH_STACK_PATTERN = r"^([\w.+#-]+)(, [\w.+#-]+)*$"

tech_stack_validator = RegexValidator(
    regex=TECH_STACK_PATTERN,
    message='Tech stack must be a list of technologies separated by ", ".',
)


class SameStatusError(ValueError):
    """
    Raised when a project is moved to the status it already has.
    """


class Project(models.Model):
    """
    A project recruiting a fixed-size team.

    ``team_size`` is the number of approved applicants the project needs
    before roles can be assigned.
    """

    class Status(models.TextChoices):
        RECRUITING = 'RECRUITING', 'Recruiting'
        IN_PROGRESS = 'IN_PROGRESS', 'In progress'
        COMPLETED = 'COMPLETED', 'Completed'

    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='projects',
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    tech_stack = models.CharField(max_length=255, validators=[tech_stack_validator])
    team_size = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    # Number of approved applications, kept in step by refresh_team_size()
    current_team_size = models.PositiveIntegerField(default=0)
    duration_weeks = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    content = models.TextField(blank=True)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.RECRUITING,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} ({self.status})"

    @property
    def tech_stack_list(self):
        return [item for item in self.tech_stack.split(", ") if item]

    def change_status(self, new_status: str) -> None:
        """
        Move the project to ``new_status`` and persist it.

        Raises:
            ValueError: If ``new_status`` is not a known status.
            SameStatusError: If the project already has ``new_status``.
        """
        if new_status not in self.Status.values:
            valid = ", ".join(self.Status.values)
            raise ValueError(
                f"{new_status} is not a valid status. Valid statuses are: {valid}"
            )
        if new_status == self.status:
            raise SameStatusError(
                f"Cannot change status from {self.status} to the same status {new_status}."
            )
        self.status = new_status
        self.save(update_fields=['status', 'updated_at'])

    def refresh_team_size(self) -> None:
        """
        Recount ``current_team_size`` from the approved applications.
        """
        self.current_team_size = self.applications.filter(status='APPROVED').count()
        self.save(update_fields=['current_team_size', 'updated_at'])

    def change_content(self, content: str) -> None:
        self.content = content
        self.save(update_fields=['content', 'updated_at'])

    class Meta:
        verbose_name = 'Project'
        verbose_name_plural = 'Projects'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['creator'], name='idx_project_creator'),
        ]
