# apps/api/viewsets/user.py
"""
ViewSet pour les utilisateurs du cabinet : fiches, rôles, taux horaires, statistiques
"""

import logging

from django.contrib.auth import get_user_model
from rest_framework import filters, mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.cabinet import reports
from apps.core.access import reset_access
from apps.core.decorators import gate_required, self_or_gate_required
from apps.users.constants import PERM_USERS_EDIT, PERM_USERS_RATE_SET
from apps.users.serializers import (
    UserCreationSerializer,
    UserRateSerializer,
    UserRolesSerializer,
    UserSerializer,
    UserUpdateSerializer
)

from .mixins import AccessMixin

logger = logging.getLogger(__name__)

User = get_user_model()


class UserViewSet(AccessMixin,
                  mixins.ListModelMixin,
                  mixins.RetrieveModelMixin,
                  viewsets.GenericViewSet):
    """
    ViewSet pour les utilisateurs

    Endpoints:
    - GET /api/users/ - Liste des utilisateurs
    - POST /api/users/ - Créer un utilisateur (users.edit)
    - GET /api/users/{id}/ - Fiche d'un utilisateur
    - PUT/PATCH /api/users/{id}/ - Modifier (soi-même ou users.edit)

    Actions supplémentaires:
    - POST /api/users/{id}/rate/ - Définir un taux horaire (users.rate.set)
    - GET /api/users/{id}/stats/ - Minutes du mois et de l'année (soi-même ou rapports)
    - PUT /api/users/{id}/roles/ - Remplacer les rôles (users.edit)

    Le taux horaire n'est visible qu'avec users.rate.set ou l'accès aux rapports.
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'email', 'first_name', 'last_name', 'internal_id']
    ordering_fields = ['name', 'email']
    ordering = ['name']

    def get_queryset(self):
        return super().get_queryset().prefetch_related('roles')

    @gate_required(PERM_USERS_EDIT)
    def create(self, request):
        serializer = UserCreationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response(
            self.get_serializer(user).data,
            status=status.HTTP_201_CREATED
        )

    @self_or_gate_required(PERM_USERS_EDIT)
    def update(self, request, pk=None, partial=False):
        user = self.get_object()
        serializer = UserUpdateSerializer(user, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(self.get_serializer(user).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    @action(detail=True, methods=['post'])
    @gate_required(PERM_USERS_RATE_SET)
    def rate(self, request, pk=None):
        user = self.get_object()
        serializer = UserRateSerializer(data=request.data, context={'user': user})
        serializer.is_valid(raise_exception=True)
        rate = serializer.save()
        return Response(UserRateSerializer(rate).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['get'])
    @self_or_gate_required('view_reports')
    def stats(self, request, pk=None):
        user = self.get_object()
        return Response(reports.user_minutes(user))

    @action(detail=True, methods=['put'])
    @gate_required(PERM_USERS_EDIT)
    def roles(self, request, pk=None):
        user = self.get_object()
        serializer = UserRolesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user.sync_roles(serializer.validated_data['roles'])
        logger.info("Rôles de %s remplacés : %s", user.email, serializer.validated_data['roles'])

        if user.pk == request.user.pk:
            reset_access(request)
        return Response(self.get_serializer(user).data)
