"""
Applications app models

Application and SkillScore models: a user's submission to a project
together with their self-assessed technology scores.
"""
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models, transaction
from django.db.models import Q


SKILL_SCORE_MIN = 0
SKILL_SCORE_MAX = 10


class ApplicationQuerySet(models.QuerySet):

    def for_project(self, project_id):
        return self.filter(project_id=project_id)

    def for_user(self, user_id):
        return self.filter(user_id=user_id)

    def visible_to(self, user):
        """
        Applications a user may see: admins see all, everyone else sees
        their own and those submitted to projects they created.
        """
        if user.is_admin:
            return self
        return self.filter(Q(user=user) | Q(project__creator=user))

    def approved_for_project(self, project_id):
        """
        Approved roster of a project in submission order, with the data
        needed to render it (owner and skill scores) loaded up front.
        """
        return (
            self.for_project(project_id)
            .filter(status=Application.Status.APPROVED)
            .select_related('user')
            .prefetch_related('skill_scores')
            .order_by('id')
        )


class ApplicationManager(models.Manager.from_queryset(ApplicationQuerySet)):

    def create_with_skills(self, *, user, project, tech_stacks, tech_scores):
        """
        Create an application and its skill scores in one transaction.

        ``tech_stacks`` and ``tech_scores`` are parallel sequences; entries
        are stored in the given order, duplicates included.
        """
        if len(tech_stacks) != len(tech_scores):
            raise ValueError(
                "tech_stacks and tech_scores must have the same length "
                f"({len(tech_stacks)} != {len(tech_scores)})."
            )
        with transaction.atomic():
            application = self.create(user=user, project=project)
            SkillScore.objects.bulk_create(
                [
                    SkillScore(application=application, tech_name=name, score=score)
                    for name, score in zip(tech_stacks, tech_scores)
                ]
            )
        return application


class Application(models.Model):
    """
    A user's application to a project.

    Deleting an application removes its skill scores and its analysis
    result through ``on_delete=CASCADE`` on the owning foreign keys.
    """

    class Status(models.TextChoices):
        PENDING = 'PENDING', 'Pending'
        APPROVED = 'APPROVED', 'Approved'
        REJECTED = 'REJECTED', 'Rejected'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='applications',
    )
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.CASCADE,
        related_name='applications',
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    applied_at = models.DateTimeField(auto_now_add=True)

    objects = ApplicationManager()

    def __str__(self):
        return f"Application #{self.pk} by {self.user.username} to {self.project.title}"

    def change_status(self, new_status: str) -> None:
        if new_status not in self.Status.values:
            valid = ", ".join(self.Status.values)
            raise ValueError(
                f"{new_status} is not a valid status. Valid statuses are: {valid}"
            )
        self.status = new_status
        self.save(update_fields=['status'])
        self.project.refresh_team_size()

    class Meta:
        verbose_name = 'Application'
        verbose_name_plural = 'Applications'
        ordering = ['-applied_at', '-id']
        indexes = [
            models.Index(fields=['project', 'status'], name='idx_application_project_st'),
        ]


class SkillScore(models.Model):
    """
    Self-assessed score for one technology on a 0-10 scale.
    """

    application = models.ForeignKey(
        Application,
        on_delete=models.CASCADE,
        related_name='skill_scores',
    )
    tech_name = models.CharField(max_length=100)
    score = models.PositiveSmallIntegerField(
        validators=[
            MinValueValidator(SKILL_SCORE_MIN),
            MaxValueValidator(SKILL_SCORE_MAX),
        ],
    )

    def __str__(self):
        return f"{self.tech_name}: {self.score}/{SKILL_SCORE_MAX}"

    class Meta:
        verbose_name = 'Skill Score'
        verbose_name_plural = 'Skill Scores'
        ordering = ['id']
