"""
Analysis app models

AnalysisResult stores the outcome of one compatibility evaluation.
"""
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


SCORE_MIN = Decimal("0.00")
SCORE_MAX = Decimal("100.00")


class AnalysisResult(models.Model):
    """
    Compatibility score and reason for one application.

    The one-to-one link enforces at most one result per application at the
    database level. Rows are written once by the analyzer and never updated.
    """

    application = models.OneToOneField(
        'applications.Application',
        on_delete=models.CASCADE,
        related_name='analysis_result',
    )
    compatibility_score = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(SCORE_MIN), MaxValueValidator(SCORE_MAX)],
    )
    compatibility_reason = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Analysis for application #{self.application_id}: {self.compatibility_score}"

    class Meta:
        verbose_name = 'Analysis Result'
        verbose_name_plural = 'Analysis Results'
        ordering = ['-created_at']
