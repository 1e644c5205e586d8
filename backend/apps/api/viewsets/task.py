# apps/api/viewsets/task.py
"""
ViewSet pour les tâches : affectation, temps passés et chronomètre
"""

import logging

from django.utils import timezone
from django_filters import BooleanFilter, ChoiceFilter, FilterSet, NumberFilter
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.cabinet.models import Task, TimeEntry
from apps.cabinet.serializers import (
    TaskAssignSerializer,
    TaskSerializer,
    TimeEntrySerializer,
    TimerStartSerializer
)
from apps.core.permissions import PolicyPermission

from .mixins import AccessMixin

logger = logging.getLogger(__name__)


class TaskFilter(FilterSet):
    """Filtre pour les tâches"""

    status = ChoiceFilter(field_name='status', choices=Task.STATUTS)
    category = ChoiceFilter(field_name='category', choices=Task.CATEGORIES)
    nature = ChoiceFilter(field_name='nature', choices=Task.NATURES)
    client = NumberFilter(field_name='client_id')
    owner = NumberFilter(field_name='owner_id')
    assignee = NumberFilter(field_name='assignees__id')
    overdue = BooleanFilter(method='filter_overdue')

    def filter_overdue(self, queryset, name, value):
        """Tâches ouvertes dont l'échéance est dépassée"""
        overdue = {
            'status__in': Task.STATUTS_OUVERTS,
            'due_at__lt': timezone.now(),
        }
        if value:
            return queryset.filter(**overdue)
        return queryset.exclude(**overdue)

    class Meta:
        model = Task
        fields = ['status', 'category', 'nature', 'client', 'owner', 'assignee', 'overdue']


class TaskViewSet(AccessMixin, viewsets.ModelViewSet):
    """
    ViewSet pour les tâches

    Endpoints:
    - GET /api/tasks/ - Liste des tâches
    - POST /api/tasks/ - Créer une tâche
    - GET /api/tasks/{id}/ - Détail d'une tâche
    - PUT/PATCH /api/tasks/{id}/ - Modifier (statut, avancement, ...)
    - DELETE /api/tasks/{id}/ - Supprimer une tâche

    Actions supplémentaires:
    - POST /api/tasks/{id}/assign/ - Affecter un collaborateur
    - GET /api/tasks/{id}/time-entries/ - Temps passés sur la tâche
    - POST /api/tasks/{id}/time/start/ - Démarrer le chronomètre
    """

    queryset = Task.objects.all()
    serializer_class = TaskSerializer
    permission_classes = [IsAuthenticated, PolicyPermission]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = TaskFilter
    search_fields = ['notes', 'client__raison_sociale']
    ordering_fields = ['created_at', 'due_at', 'priority', 'status']
    ordering = ['-created_at']

    policy_actions = {
        'assign': 'assign',
        'time_entries': 'view',
        'start_timer': 'log_time',
    }

    def get_queryset(self):
        return super().get_queryset().select_related('client', 'owner').prefetch_related('assignees')

    def perform_create(self, serializer):
        task = serializer.save()
        logger.info("Tâche créée : %s (client %s)", task.pk, task.client_id)

    @action(detail=True, methods=['post'])
    def assign(self, request, pk=None):
        """Ajoute un collaborateur aux affectés (les autres sont conservés)"""
        task = self.get_object()
        serializer = TaskAssignSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user_id']
        task.assignees.add(user)
        logger.info("Tâche %s affectée à l'utilisateur %s", task.pk, user.pk)

        task = self.get_queryset().get(pk=task.pk)
        return Response(self.get_serializer(task).data)

    @action(detail=True, methods=['get'], url_path='time-entries')
    def time_entries(self, request, pk=None):
        task = self.get_object()
        entries = TimeEntry.objects.filter(task=task).select_related('user', 'task')
        page = self.paginate_queryset(entries)
        if page is not None:
            serializer = TimeEntrySerializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        return Response(TimeEntrySerializer(entries, many=True).data)

    @action(detail=True, methods=['post'], url_path='time/start')
    def start_timer(self, request, pk=None):
        task = self.get_object()
        serializer = TimerStartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = TimeEntry.objects.create(
            user=request.user,
            task=task,
            start_at=serializer.validated_data.get('start_at') or timezone.now()
        )
        logger.info("Chrono démarré : entrée %s sur la tâche %s", entry.pk, task.pk)
        return Response(TimeEntrySerializer(entry).data, status=status.HTTP_201_CREATED)
