# apps/api/viewsets/request.py
"""
ViewSet pour les demandes clients : pièces jointes, messages, relances, indicateurs
"""

import logging

from django.shortcuts import get_object_or_404
from django_filters import ChoiceFilter, FilterSet, NumberFilter
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.cabinet import reports
from apps.cabinet.models import ClientRequest, RequestMessage
from apps.cabinet.serializers import (
    ClientRequestDetailSerializer,
    ClientRequestSerializer,
    DateRangeSerializer,
    RemindSerializer,
    RequestFileSerializer,
    RequestFileUploadSerializer,
    RequestMessageSerializer
)
from apps.core.permissions import PolicyPermission

from .mixins import AccessMixin

logger = logging.getLogger(__name__)


class ClientRequestFilter(FilterSet):
    status = ChoiceFilter(field_name='status', choices=ClientRequest.STATUTS)
    client = NumberFilter(field_name='client_id')
    created_by = NumberFilter(field_name='created_by_id')

    class Meta:
        model = ClientRequest
        fields = ['status', 'client', 'created_by']


class ClientRequestViewSet(AccessMixin, viewsets.ModelViewSet):
    """
    ViewSet pour les demandes clients

    Endpoints:
    - GET /api/requests/ - Liste des demandes
    - POST /api/requests/ - Créer une demande
    - GET /api/requests/{id}/ - Détail (pièces jointes et messages)
    - PUT/PATCH /api/requests/{id}/ - Modifier
    - DELETE /api/requests/{id}/ - Supprimer

    Actions supplémentaires:
    - POST /api/requests/{id}/files/ - Ajouter une pièce jointe (25 Mo max)
    - DELETE /api/requests/{id}/files/{file_id}/ - Retirer une pièce jointe
    - POST /api/requests/{id}/messages/ - Ajouter un message
    - POST /api/requests/{id}/remind/ - Relancer le client
    - GET /api/requests/metrics/?from=&to= - Indicateurs
    """

    queryset = ClientRequest.objects.all()
    serializer_class = ClientRequestSerializer
    permission_classes = [IsAuthenticated, PolicyPermission]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = ClientRequestFilter
    search_fields = ['title', 'client__raison_sociale']
    ordering_fields = ['created_at', 'due_date', 'status']
    ordering = ['-created_at']
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ClientRequestDetailSerializer
        return super().get_serializer_class()

    def get_queryset(self):
        queryset = super().get_queryset().select_related('client', 'created_by')
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('files', 'messages__user')
        return queryset

    def perform_create(self, serializer):
        client_request = serializer.save(created_by=self.request.user)
        logger.info(
            "Demande créée : %s (client %s)", client_request.pk, client_request.client_id
        )

    @action(detail=True, methods=['post'], parser_classes=[MultiPartParser, FormParser])
    def files(self, request, pk=None):
        client_request = self.get_object()
        serializer = RequestFileUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        request_file = serializer.save(request=client_request)
        return Response(
            RequestFileSerializer(request_file, context={'request': request}).data,
            status=status.HTTP_201_CREATED
        )

    @action(detail=True, methods=['delete'], url_path=r'files/(?P<file_id>\d+)')
    def delete_file(self, request, pk=None, file_id=None):
        client_request = self.get_object()
        # Une pièce d'une autre demande est introuvable
        request_file = get_object_or_404(client_request.files, pk=file_id)
        request_file.file.delete(save=False)
        request_file.delete()
        logger.info("Pièce jointe %s de la demande %s supprimée", file_id, client_request.pk)
        return Response({'message': 'deleted'})

    @action(detail=True, methods=['post'])
    def messages(self, request, pk=None):
        client_request = self.get_object()
        serializer = RequestMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = serializer.save(request=client_request, user=request.user)
        message = RequestMessage.objects.select_related('user').get(pk=message.pk)
        return Response(RequestMessageSerializer(message).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'])
    def remind(self, request, pk=None):
        client_request = self.get_object()
        serializer = RemindSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        client_request.remind(request.user, serializer.validated_data.get('note') or None)
        logger.info(
            "Relance n°%s de la demande %s", client_request.reminders_count, client_request.pk
        )
        return Response({'message': 'reminded', 'reminders': client_request.reminders})

    @action(detail=False, methods=['get'])
    def metrics(self, request):
        serializer = DateRangeSerializer.from_query_params(request.query_params, required=False)
        serializer.is_valid(raise_exception=True)
        return Response(reports.request_metrics(
            serializer.validated_data.get('date_from'),
            serializer.validated_data.get('date_to')
        ))
