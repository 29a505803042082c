from django.urls import path

from .views import ApplicationAnalysisView, TeamRoleAssignmentView

urlpatterns = [
    path(
        'application/<int:application_id>/',
        ApplicationAnalysisView.as_view(),
        name='application_analysis',
    ),
    path(
        'project/<int:project_id>/role-assignment/',
        TeamRoleAssignmentView.as_view(),
        name='team_role_assignment',
    ),
]
