# apps/api/viewsets/client.py
"""
ViewSet pour les clients du cabinet et leurs documents
"""

import logging

from django.db.models import Q
from django.http import FileResponse
from django.shortcuts import get_object_or_404
from django_filters import CharFilter, FilterSet, NumberFilter
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.cabinet.models import Client
from apps.cabinet.serializers import (
    ClientDocumentSerializer,
    ClientDocumentUploadSerializer,
    ClientSerializer
)
from apps.core.permissions import PolicyPermission
from apps.core.redaction import can_view_confidential, visible_documents

from .mixins import AccessMixin, CollaboratorsMixin

logger = logging.getLogger(__name__)


class ClientFilter(FilterSet):
    """Filtre pour les clients"""

    raison_sociale = CharFilter(field_name='raison_sociale', lookup_expr='icontains')
    portfolio = NumberFilter(field_name='portfolio_id')
    type_mission = CharFilter(field_name='type_mission', lookup_expr='icontains')
    collaborator = NumberFilter(method='filter_collaborator')

    def filter_collaborator(self, queryset, name, value):
        """Clients suivis par un collaborateur, directement ou via le portefeuille"""
        return queryset.filter(
            Q(collaborators__id=value) | Q(portfolio__collaborators__id=value)
        ).distinct()

    class Meta:
        model = Client
        fields = ['raison_sociale', 'portfolio', 'type_mission', 'collaborator']


class ClientViewSet(AccessMixin, CollaboratorsMixin, viewsets.ModelViewSet):
    """
    ViewSet pour les clients

    Endpoints:
    - GET /api/clients/ - Liste des clients
    - POST /api/clients/ - Créer un client
    - GET /api/clients/{id}/ - Détail d'un client
    - PUT /api/clients/{id}/ - Modifier un client
    - DELETE /api/clients/{id}/ - Supprimer un client

    Actions supplémentaires:
    - GET/POST /api/clients/{id}/collaborators/
    - DELETE /api/clients/{id}/collaborators/{user_id}/
    - GET/POST /api/clients/{id}/documents/
    - GET /api/clients/{id}/documents/{document_id}/download/
    - DELETE /api/clients/{id}/documents/{document_id}/

    Le montant du contrat n'est renvoyé qu'aux ADMIN et CHEF_EQUIPE.
    """

    queryset = Client.objects.all()
    serializer_class = ClientSerializer
    permission_classes = [IsAuthenticated, PolicyPermission]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = ClientFilter
    search_fields = ['raison_sociale', 'rc', 'identifiant_fiscal', 'ice', 'email']
    ordering_fields = ['raison_sociale', 'created_at']
    ordering = ['-created_at']
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_queryset(self):
        return super().get_queryset().select_related('portfolio')

    def perform_create(self, serializer):
        client = serializer.save()
        logger.info("Client créé : %s (portefeuille %s)", client.pk, client.portfolio_id)

    def perform_destroy(self, instance):
        logger.info("Client supprimé : %s", instance.pk)
        instance.delete()

    @action(detail=True, methods=['get', 'post'])
    def documents(self, request, pk=None):
        """
        GET : documents du client (les confidentiels sont masqués hors ADMIN / CHEF_EQUIPE)
        POST : dépôt d'un document (multipart : file, category, title, is_confidential)
        """
        client = self.get_object()

        if request.method == 'GET':
            documents = visible_documents(
                client.documents.select_related('uploaded_by'), self.access
            )
            return Response(ClientDocumentSerializer(documents, many=True).data)

        serializer = ClientDocumentUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        document = serializer.save(client=client, uploaded_by=request.user)
        return Response(
            ClientDocumentSerializer(document).data,
            status=status.HTTP_201_CREATED
        )

    @action(
        detail=True,
        methods=['get'],
        url_path=r'documents/(?P<document_id>\d+)/download'
    )
    def download_document(self, request, pk=None, document_id=None):
        client = self.get_object()
        # Un document d'un autre client est introuvable, pas interdit
        document = get_object_or_404(client.documents, pk=document_id)
        if document.is_confidential and not can_view_confidential(self.access):
            raise PermissionDenied("Document confidentiel")
        return FileResponse(
            document.file.open('rb'),
            as_attachment=True,
            filename=document.title,
            content_type=document.mime or None
        )

    @action(
        detail=True,
        methods=['delete'],
        url_path=r'documents/(?P<document_id>\d+)'
    )
    def delete_document(self, request, pk=None, document_id=None):
        client = self.get_object()
        document = get_object_or_404(client.documents, pk=document_id)
        document.file.delete(save=False)
        document.delete()
        logger.info("Document %s du client %s supprimé", document_id, client.pk)
        return Response({'message': 'deleted'})
