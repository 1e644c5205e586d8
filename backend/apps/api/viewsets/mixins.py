# apps/api/viewsets/mixins.py
"""
Comportements partagés par les viewsets du cabinet
"""

import logging

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.cabinet.serializers import CollaboratorAttachSerializer
from apps.core.access import access_for
from apps.core.policies import authorize
from apps.users.serializers import UserMinimalSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


class AccessMixin:
    """Accès au moteur d'autorisation depuis un viewset"""

    @property
    def access(self):
        return access_for(self.request)

    def authorize(self, ability, target=None):
        authorize(self.access, ability, target)


class CollaboratorsMixin:
    """
    Équipe d'un portefeuille ou d'un client

    - GET    {id}/collaborators/            (capacité view)
    - POST   {id}/collaborators/ {user_id}  (capacité update, sans retirer les autres)
    - DELETE {id}/collaborators/{user_id}/  (capacité update)
    """

    @action(detail=True, methods=['get', 'post'])
    def collaborators(self, request, pk=None):
        instance = self.get_object()

        if request.method == 'GET':
            collaborators = instance.collaborators.order_by('name')
            return Response(UserMinimalSerializer(collaborators, many=True).data)

        serializer = CollaboratorAttachSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user_id']
        instance.collaborators.add(user)
        logger.info(
            "Collaborateur %s ajouté à %s #%s", user.pk, type(instance).__name__, instance.pk
        )
        return Response({'message': 'attached'}, status=status.HTTP_200_OK)

    @action(
        detail=True,
        methods=['delete'],
        url_path=r'collaborators/(?P<user_id>\d+)'
    )
    def detach_collaborator(self, request, pk=None, user_id=None):
        instance = self.get_object()
        user = get_object_or_404(User, pk=user_id)
        instance.collaborators.remove(user)
        logger.info(
            "Collaborateur %s retiré de %s #%s", user.pk, type(instance).__name__, instance.pk
        )
        return Response({'message': 'detached'})
