"""
Applications app views

ViewSet for reading, withdrawing and reviewing applications.
"""
from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsApplicantOrAdmin, IsProjectCreatorOrAdmin

from .models import Application
from .serializers import ApplicationSerializer, ApplicationStatusUpdateSerializer


class ApplicationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for Application.

    - GET: List applications visible to the user (own applications and
      applications to projects they created); filter with ?user= or ?project=
    - GET {id}: Retrieve application with skill scores
    - DELETE {id}: Withdraw application (applicant or admin), cascading to
      skill scores and analysis result
    - PATCH {id}/status/: Approve or reject (project creator or admin)
    """

    serializer_class = ApplicationSerializer

    def get_permissions(self):
        if self.action == 'destroy':
            permission_classes = [IsAuthenticated, IsApplicantOrAdmin]
        elif self.action == 'update_status':
            permission_classes = [IsAuthenticated, IsProjectCreatorOrAdmin]
        else:
            permission_classes = [IsAuthenticated]
        return [permission() for permission in permission_classes]

    def get_queryset(self):
        """
        Admins see all applications; other users see their own and those
        submitted to their projects.
        """
        queryset = (
            Application.objects.select_related('user', 'project', 'analysis_result')
            .prefetch_related('skill_scores')
        )
        queryset = queryset.visible_to(self.request.user)

        user_id = self.request.query_params.get('user')
        if user_id:
            queryset = queryset.for_user(user_id)
        project_id = self.request.query_params.get('project')
        if project_id:
            queryset = queryset.for_project(project_id)
        return queryset

    def perform_destroy(self, instance):
        project = instance.project
        instance.delete()
        project.refresh_team_size()

    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        """
        Update application status.

        PATCH /api/applications/{id}/status/
        """
        application = self.get_object()

        serializer = ApplicationStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        application.change_status(serializer.validated_data['status'])

        return Response(self.get_serializer(application).data)
