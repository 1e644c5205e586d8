# apps/api/viewsets/role.py
"""
Matrice rôles / permissions
"""

import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.core.access import reset_access
from apps.core.decorators import gate_required
from apps.users.constants import PERM_USERS_EDIT
from apps.users.models import Permission, Role
from apps.users.serializers import (
    PermissionSerializer,
    RolePermissionsSerializer,
    RoleSerializer
)

logger = logging.getLogger(__name__)


class RolePermissionMatrixViewSet(viewsets.ViewSet):
    """
    - GET /api/roles-permissions/ - Rôles, permissions et matrice (users.edit)
    """

    permission_classes = [IsAuthenticated]

    @gate_required(PERM_USERS_EDIT)
    def list(self, request):
        roles = Role.objects.prefetch_related('permissions').order_by('name')
        permissions = Permission.objects.order_by('name')
        matrix = {
            role.name: sorted(permission.name for permission in role.permissions.all())
            for role in roles
        }
        return Response({
            'roles': [{'id': role.pk, 'name': role.name} for role in roles],
            'permissions': PermissionSerializer(permissions, many=True).data,
            'matrix': matrix,
        })


class RoleViewSet(viewsets.ReadOnlyModelViewSet):
    """
    - GET /api/roles/ - Rôles et leurs permissions
    - PUT /api/roles/{id}/permissions/ - Remplacer les permissions d'un rôle (users.edit)
    """

    queryset = Role.objects.prefetch_related('permissions').order_by('name')
    serializer_class = RoleSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    @action(detail=True, methods=['put'])
    @gate_required(PERM_USERS_EDIT)
    def permissions(self, request, pk=None):
        role = self.get_object()
        serializer = RolePermissionsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        role.sync_permissions(serializer.validated_data['permissions'])
        logger.info(
            "Permissions du rôle %s remplacées : %s",
            role.name, serializer.validated_data['permissions']
        )

        # Les habilitations en cache pour cette requête ne sont plus à jour
        reset_access(request)
        role = self.get_queryset().get(pk=role.pk)
        return Response({'message': 'updated', 'role': RoleSerializer(role).data})
