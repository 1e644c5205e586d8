# apps/api/viewsets/time_entry.py
"""
ViewSet pour les temps passés
"""

import logging

from django_filters import DateFilter, FilterSet, NumberFilter
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.cabinet.models import TimeEntry
from apps.cabinet.serializers import TimeEntrySerializer, TimerStopSerializer
from apps.core.permissions import PolicyPermission

from .mixins import AccessMixin

logger = logging.getLogger(__name__)


class TimeEntryFilter(FilterSet):
    user = NumberFilter(field_name='user_id')
    task = NumberFilter(field_name='task_id')
    client = NumberFilter(field_name='task__client_id')
    date_from = DateFilter(field_name='start_at', lookup_expr='date__gte')
    date_to = DateFilter(field_name='start_at', lookup_expr='date__lte')

    class Meta:
        model = TimeEntry
        fields = ['user', 'task', 'client', 'date_from', 'date_to']


class TimeEntryViewSet(AccessMixin, viewsets.ModelViewSet):
    """
    ViewSet pour les temps passés

    Endpoints:
    - GET /api/time-entries/ - Liste des temps
    - POST /api/time-entries/ - Saisir un temps (sur une tâche où l'on peut pointer)
    - GET /api/time-entries/{id}/ - Détail
    - PUT/PATCH /api/time-entries/{id}/ - Modifier
    - DELETE /api/time-entries/{id}/ - Supprimer

    Actions supplémentaires:
    - POST /api/time-entries/{id}/stop/ - Arrêter le chronomètre
    """

    queryset = TimeEntry.objects.all()
    serializer_class = TimeEntrySerializer
    permission_classes = [IsAuthenticated, PolicyPermission]
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_class = TimeEntryFilter
    ordering_fields = ['start_at', 'created_at']
    ordering = ['-start_at']

    policy_actions = {
        'stop': 'update',
    }

    def get_queryset(self):
        return super().get_queryset().select_related('user', 'task')

    def perform_create(self, serializer):
        # Pointer sur une tâche suppose d'y avoir accès
        self.authorize('log_time', serializer.validated_data['task'])
        entry = serializer.save(user=self.request.user)
        logger.info("Temps saisi : entrée %s sur la tâche %s", entry.pk, entry.task_id)

    def perform_update(self, serializer):
        task = serializer.validated_data.get('task')
        if task is not None and task.pk != serializer.instance.task_id:
            self.authorize('log_time', task)
        serializer.save()

    @action(detail=True, methods=['post'])
    def stop(self, request, pk=None):
        entry = self.get_object()
        serializer = TimerStopSerializer(data=request.data, context={'entry': entry})
        serializer.is_valid(raise_exception=True)
        entry.end_at = serializer.validated_data['end_at']
        entry.save(update_fields=['end_at', 'updated_at'])
        logger.info("Chrono arrêté : entrée %s (%s min)", entry.pk, entry.minutes)
        return Response(self.get_serializer(entry).data)
