# apps/api/viewsets/profile.py
"""
Profil de l'utilisateur connecté
"""

import logging

from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.users.serializers import (
    PasswordChangeSerializer,
    ProfileSerializer,
    ProfileUpdateSerializer
)

logger = logging.getLogger(__name__)


class ProfileViewSet(viewsets.ViewSet):
    """
    - GET /api/me/ - Utilisateur connecté, rôles et permissions effectives
    - PUT /api/me/ - Modifier son profil
    - POST /api/me/password/ - Changer son mot de passe
    """

    permission_classes = [IsAuthenticated]

    def me(self, request):
        return Response(ProfileSerializer(request.user).data)

    def update_me(self, request):
        serializer = ProfileUpdateSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response(ProfileSerializer(user).data)

    def password(self, request):
        serializer = PasswordChangeSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Mot de passe modifié pour %s", request.user.email)
        return Response({'message': 'Mot de passe modifié'})
