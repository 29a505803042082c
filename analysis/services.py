"""
Analysis app services

Entry points of the analysis engine:
- CompatibilityAnalyzer: score an application once and return the stored
  result on every later request
- TeamRoleAssigner: ask the model to assign roles once a project's approved
  roster matches its team size

Neither service retries or masks failures; every error raised here is
terminal for the call.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from django.db import IntegrityError, transaction

from applications.models import Application
from projects.models import Project

from .exceptions import (
    AnalysisError,
    AnalysisFailedError,
    AnalysisNotFoundError,
    ApplicationNotFoundError,
    ProjectNotFoundError,
    TeamNotCompleteError,
)
from .llm import ChatModel, get_chat_model
from .models import AnalysisResult
from .parsers import parse_compatibility_response
from .prompts import build_compatibility_prompt, build_role_assignment_prompt

logger = logging.getLogger(__name__)


def _call_model(chat_model: ChatModel, prompt: str) -> str:
    try:
        return chat_model.complete(prompt)
    except AnalysisError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise AnalysisFailedError(f"Model call failed: {exc}") from exc


class _ModelBackedService:
    """
    Holds an optional model capability, building the configured one on
    first use so that paths which never call the model need no credentials.
    """

    def __init__(self, chat_model: Optional[ChatModel] = None):
        self._chat_model = chat_model

    @property
    def chat_model(self) -> ChatModel:
        if self._chat_model is None:
            self._chat_model = get_chat_model()
        return self._chat_model


class CompatibilityAnalyzer(_ModelBackedService):
    """
    Idempotent compatibility analysis for applications.

    An application moves from unanalyzed to analyzed exactly once. The
    existence check and the insert are not locked; the one-to-one
    constraint on AnalysisResult rejects a concurrent second insert and the
    losing caller returns the stored winner.
    """

    def get_result(self, application_id) -> AnalysisResult:
        try:
            return AnalysisResult.objects.get(application_id=application_id)
        except AnalysisResult.DoesNotExist:
            raise AnalysisNotFoundError(application_id) from None

    def analyze(self, application_id) -> AnalysisResult:
        result, _ = self.analyze_with_status(application_id)
        return result

    def analyze_with_status(self, application_id) -> Tuple[AnalysisResult, bool]:
        """
        Analyze an application unless it already has a result.

        Returns:
            ``(result, created)`` where ``created`` is False when a stored
            result was returned.
        """
        try:
            application = Application.objects.select_related("project").get(pk=application_id)
        except Application.DoesNotExist:
            raise ApplicationNotFoundError(application_id) from None

        existing = AnalysisResult.objects.filter(application=application).first()
        if existing is not None:
            logger.info("Application %s already analyzed; returning stored result.", application.pk)
            return existing, False

        skills = list(application.skill_scores.all())
        prompt = build_compatibility_prompt(application, application.project, skills)

        logger.info("Requesting compatibility analysis for application %s.", application.pk)
        raw_response = _call_model(self.chat_model, prompt)
        verdict = parse_compatibility_response(raw_response)

        try:
            with transaction.atomic():
                result = AnalysisResult.objects.create(
                    application=application,
                    compatibility_score=verdict.score,
                    compatibility_reason=verdict.reason,
                )
        except IntegrityError:
            logger.warning(
                "Concurrent analysis stored first for application %s; using stored result.",
                application.pk,
            )
            return AnalysisResult.objects.get(application=application), False

        logger.info(
            "Stored analysis for application %s with score %s.",
            application.pk,
            result.compatibility_score,
        )
        return result, True


class TeamRoleAssigner(_ModelBackedService):
    """
    Role assignment for a project whose approved roster is complete.

    The model's answer is returned verbatim and not stored, so every call
    asks the model again.
    """

    def assign(self, project_id) -> str:
        try:
            project = Project.objects.get(pk=project_id)
        except Project.DoesNotExist:
            raise ProjectNotFoundError(project_id) from None

        approved = list(Application.objects.approved_for_project(project.pk))
        if len(approved) != project.team_size:
            logger.info(
                "Project %s roster incomplete: %s approved of %s required.",
                project.pk,
                len(approved),
                project.team_size,
            )
            raise TeamNotCompleteError(required=project.team_size, actual=len(approved))

        roster = [
            (application.user.display_name, list(application.skill_scores.all()))
            for application in approved
        ]
        prompt = build_role_assignment_prompt(project, roster)

        logger.info("Requesting role assignment for project %s (%s members).", project.pk, len(roster))
        return _call_model(self.chat_model, prompt)
