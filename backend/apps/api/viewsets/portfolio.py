# apps/api/viewsets/portfolio.py
"""
ViewSet pour les portefeuilles de clients
"""

from django.db.models import Count
from rest_framework import filters, viewsets
from rest_framework.permissions import IsAuthenticated

from apps.cabinet.models import Portfolio
from apps.cabinet.serializers import PortfolioDetailSerializer, PortfolioSerializer
from apps.core.permissions import PolicyPermission

from .mixins import AccessMixin, CollaboratorsMixin


class PortfolioViewSet(AccessMixin, CollaboratorsMixin, viewsets.ModelViewSet):
    """
    ViewSet pour les portefeuilles

    Endpoints:
    - GET /api/portfolios/ - Liste des portefeuilles
    - POST /api/portfolios/ - Créer un portefeuille
    - GET /api/portfolios/{id}/ - Détail (clients et collaborateurs)
    - PUT /api/portfolios/{id}/ - Modifier un portefeuille
    - DELETE /api/portfolios/{id}/ - Supprimer un portefeuille (ADMIN)

    Actions supplémentaires:
    - GET/POST /api/portfolios/{id}/collaborators/
    - DELETE /api/portfolios/{id}/collaborators/{user_id}/
    """

    queryset = Portfolio.objects.all()
    serializer_class = PortfolioSerializer
    permission_classes = [IsAuthenticated, PolicyPermission]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['-created_at']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return PortfolioDetailSerializer
        return super().get_serializer_class()

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            queryset = queryset.annotate(nb_clients=Count('clients'))
        elif self.action == 'retrieve':
            queryset = queryset.prefetch_related('clients', 'collaborators')
        return queryset
