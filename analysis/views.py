"""
Analysis app views

- GET  /api/analysis/application/{id}/                  stored result
- POST /api/analysis/application/{id}/                  analyze (idempotent)
- POST /api/analysis/project/{id}/role-assignment/      assign team roles
"""
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsProjectCreatorOrAdmin
from applications.models import Application
from projects.models import Project

from .exceptions import (
    AnalysisError,
    ApplicationNotFoundError,
    ModelResponseError,
    NotFoundError,
    ProjectNotFoundError,
    TeamNotCompleteError,
)
from .parsers import parse_role_assignment
from .serializers import AnalysisResultSerializer
from .services import CompatibilityAnalyzer, TeamRoleAssigner


def _error_response(exc: AnalysisError) -> Response:
    """
    Translate an analysis engine error into an HTTP response.
    """
    body = {'error': str(exc)}
    if isinstance(exc, NotFoundError):
        return Response(body, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, TeamNotCompleteError):
        body.update({'required': exc.required, 'actual': exc.actual})
        return Response(body, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, ModelResponseError):
        body['raw_response'] = exc.raw_response
    # Model contract violations and provider failures are upstream errors
    return Response(body, status=status.HTTP_502_BAD_GATEWAY)


class ApplicationAnalysisView(APIView):
    """
    Compatibility analysis of one application.

    POST returns 201 when a new result was stored and 200 when the stored
    result was returned unchanged.

    Applications the user may not see answer 404, as in the applications API.
    """

    permission_classes = [IsAuthenticated]

    def check_application_access(self, request, application_id):
        visible = Application.objects.visible_to(request.user).filter(pk=application_id)
        if not visible.exists():
            raise ApplicationNotFoundError(application_id)

    def get(self, request, application_id):
        try:
            self.check_application_access(request, application_id)
            result = CompatibilityAnalyzer().get_result(application_id)
        except AnalysisError as exc:
            return _error_response(exc)

        return Response(
            {
                'msg': 'Analysis result retrieved.',
                'data': AnalysisResultSerializer(result).data,
            }
        )

    def post(self, request, application_id):
        try:
            self.check_application_access(request, application_id)
            result, created = CompatibilityAnalyzer().analyze_with_status(application_id)
        except AnalysisError as exc:
            return _error_response(exc)

        return Response(
            {
                'msg': 'Analysis result created.' if created else 'Analysis result already exists.',
                'data': AnalysisResultSerializer(result).data,
            },
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class TeamRoleAssignmentView(APIView):
    """
    Assign roles to a project's complete approved roster.

    Pass ``?parsed=true`` to also receive the assignment as
    ``[{"name": ..., "role": ...}]`` validated against the role vocabulary.
    Only the project creator or an admin may request an assignment.
    """

    permission_classes = [IsAuthenticated, IsProjectCreatorOrAdmin]

    def post(self, request, project_id):
        want_parsed = request.query_params.get('parsed', '').lower() in {'1', 'true', 'yes'}

        try:
            project = Project.objects.filter(pk=project_id).first()
            if project is None:
                raise ProjectNotFoundError(project_id)
            self.check_object_permissions(request, project)
            assignment = TeamRoleAssigner().assign(project_id)
            roles = parse_role_assignment(assignment) if want_parsed else None
        except AnalysisError as exc:
            return _error_response(exc)

        payload = {
            'msg': 'Team roles assigned.',
            'data': assignment,
        }
        if roles is not None:
            payload['roles'] = [{'name': name, 'role': role} for name, role in roles]
        return Response(payload, status=status.HTTP_201_CREATED)
