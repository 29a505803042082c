"""
Projects app views

ViewSet for Project management and applying to projects.
"""
from django.conf import settings
from django.db import transaction
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsProjectCreatorOrAdmin
from analysis.tasks import queue_analysis
from applications.models import Application
from applications.serializers import ApplicationCreateSerializer, ApplicationSerializer

from .models import Project
from .serializers import (
    ProjectContentUpdateSerializer,
    ProjectSerializer,
    ProjectStatusUpdateSerializer,
)


class ProjectViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for Project.

    - POST: Create project (creator is the current user)
    - GET: List all projects, or ?mine=true for the user's own
    - GET {id}: Retrieve project
    - PATCH {id}/status/: Change status (creator or admin)
    - PATCH {id}/content/: Change content (creator or admin)
    - GET {id}/applications/: List applications to the project
    - POST {id}/applications/: Apply with tech stacks and self-assessed scores
    """

    serializer_class = ProjectSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = Project.objects.select_related('creator')
        if self.request.query_params.get('mine', '').lower() in {'1', 'true', 'yes'}:
            queryset = queryset.filter(creator=self.request.user)
        return queryset

    def perform_create(self, serializer):
        """Automatically set creator from request."""
        serializer.save(creator=self.request.user)

    @action(
        detail=True,
        methods=['patch'],
        url_path='status',
        permission_classes=[IsAuthenticated, IsProjectCreatorOrAdmin],
    )
    def update_status(self, request, pk=None):
        """
        PATCH /api/projects/{id}/status/
        """
        project = self.get_object()

        serializer = ProjectStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            project.change_status(serializer.validated_data['status'])
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(self.get_serializer(project).data)

    @action(
        detail=True,
        methods=['patch'],
        url_path='content',
        permission_classes=[IsAuthenticated, IsProjectCreatorOrAdmin],
    )
    def update_content(self, request, pk=None):
        """
        PATCH /api/projects/{id}/content/
        """
        project = self.get_object()

        serializer = ProjectContentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        project.change_content(serializer.validated_data['content'])

        return Response(self.get_serializer(project).data)

    @action(detail=True, methods=['get', 'post'])
    def applications(self, request, pk=None):
        """
        GET  /api/projects/{id}/applications/
        POST /api/projects/{id}/applications/
        """
        project = self.get_object()

        if request.method == 'GET':
            queryset = (
                Application.objects.for_project(project.pk)
                .select_related('user', 'project', 'analysis_result')
                .prefetch_related('skill_scores')
            )
            return Response(ApplicationSerializer(queryset, many=True).data)

        create_serializer = ApplicationCreateSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        application = Application.objects.create_with_skills(
            user=request.user,
            project=project,
            tech_stacks=create_serializer.validated_data['tech_stacks'],
            tech_scores=create_serializer.validated_data['tech_scores'],
        )

        if getattr(settings, 'DEVMATCH_PREANALYZE', False):
            transaction.on_commit(lambda: queue_analysis(application.pk))

        return Response(
            ApplicationSerializer(application).data,
            status=status.HTTP_201_CREATED,
        )
