"""
Accounts app views

ViewSet and endpoints for user management.
"""
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.response import Response

from .models import User
from .permissions import IsAdminOrSelf
from .serializers import UserSerializer


class UserViewSet(viewsets.ModelViewSet):
    """
    ViewSet for User management.

    - Create: open, used for sign-up
    - List: Staff/admin only
    - Retrieve/update/delete: Admin or self only
    - Special 'me' endpoint for current user
    """

    queryset = User.objects.all().order_by('id')
    serializer_class = UserSerializer

    def get_permissions(self):
        """
        Instantiate and return the list of permissions that this view requires.
        """
        if self.action == 'create':
            permission_classes = [AllowAny]
        elif self.action == 'list':
            permission_classes = [IsAdminUser]
        elif self.action == 'me':
            permission_classes = [IsAuthenticated]
        else:
            permission_classes = [IsAuthenticated, IsAdminOrSelf]
        return [permission() for permission in permission_classes]

    @action(detail=False, methods=['get'])
    def me(self, request):
        """
        Return the current authenticated user's data.

        GET /api/users/me/
        """
        serializer = self.get_serializer(request.user)
        return Response(serializer.data)
