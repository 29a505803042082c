"""
Background tasks for the analysis app using Django-Q.
"""
import logging

from django_q.tasks import async_task

from .exceptions import AnalysisError
from .services import CompatibilityAnalyzer

logger = logging.getLogger(__name__)


def analyze_application(application_id: int) -> int:
    """
    Background task that runs the compatibility analysis for one application.

    Safe to run more than once: an application that already has a result is
    returned unchanged. Returns the id of the stored AnalysisResult.
    """
    try:
        result, created = CompatibilityAnalyzer().analyze_with_status(application_id)
    except AnalysisError as exc:
        logger.error("Analysis task for application %s failed: %s", application_id, exc)
        # Re-raise to let Django-Q record the failure
        raise

    if created:
        logger.info("Analysis task stored result %s for application %s.", result.pk, application_id)
    else:
        logger.info("Analysis task found existing result for application %s.", application_id)
    return result.pk


def queue_analysis(application_id: int) -> str:
    """
    Enqueue ``analyze_application`` and return the Django-Q task id.
    """
    task_id = async_task(
        "analysis.tasks.analyze_application",
        application_id,
        task_name=f"analyze-application-{application_id}",
    )
    logger.info("Queued analysis for application %s (task %s).", application_id, task_id)
    return task_id
