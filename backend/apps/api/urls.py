# apps/api/urls.py
"""
Configuration des URLs pour l'API REST
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
    TokenVerifyView
)

from .viewsets.portfolio import PortfolioViewSet
from .viewsets.client import ClientViewSet
from .viewsets.task import TaskViewSet
from .viewsets.time_entry import TimeEntryViewSet
from .viewsets.request import ClientRequestViewSet
from .viewsets.user import UserViewSet
from .viewsets.role import RolePermissionMatrixViewSet, RoleViewSet
from .viewsets.profile import ProfileViewSet
from .viewsets.report import ExportViewSet, OverviewViewSet, ReportViewSet

# Configuration du router
router = DefaultRouter()

# Enregistrement des ViewSets
router.register('portfolios', PortfolioViewSet, basename='portfolio')
router.register('clients', ClientViewSet, basename='client')
router.register('tasks', TaskViewSet, basename='task')
router.register(r'time-entries', TimeEntryViewSet, basename='time-entry')
router.register('requests', ClientRequestViewSet, basename='request')
router.register('users', UserViewSet, basename='user')
router.register('roles', RoleViewSet, basename='role')
router.register(r'roles-permissions', RolePermissionMatrixViewSet, basename='roles-permissions')
router.register('reports', ReportViewSet, basename='report')
router.register('exports', ExportViewSet, basename='export')
router.register('overview', OverviewViewSet, basename='overview')

profile = ProfileViewSet.as_view({'get': 'me', 'put': 'update_me', 'patch': 'update_me'})
profile_password = ProfileViewSet.as_view({'post': 'password'})

# URLs de l'API
urlpatterns = [
    # JWT Authentication
    path('token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('token/verify/', TokenVerifyView.as_view(), name='token_verify'),

    # Profil de l'utilisateur connecté
    path('me/', profile, name='me'),
    path('me/password/', profile_password, name='me-password'),

    # API ViewSets
    path('', include(router.urls)),
]
