# apps/users/serializers/__init__.py
"""
Serializers pour les utilisateurs, rôles et taux horaires
"""

from .user import (
    UserMinimalSerializer,
    UserSerializer,
    UserCreationSerializer,
    UserUpdateSerializer,
    UserRolesSerializer,
    UserRateSerializer,
    ProfileSerializer,
    ProfileUpdateSerializer,
    PasswordChangeSerializer
)

from .role import (
    PermissionSerializer,
    RoleSerializer,
    RolePermissionsSerializer
)

__all__ = [
    # Utilisateurs
    'UserMinimalSerializer',
    'UserSerializer',
    'UserCreationSerializer',
    'UserUpdateSerializer',
    'UserRolesSerializer',
    'UserRateSerializer',

    # Profil
    'ProfileSerializer',
    'ProfileUpdateSerializer',
    'PasswordChangeSerializer',

    # Rôles et permissions
    'PermissionSerializer',
    'RoleSerializer',
    'RolePermissionsSerializer'
]
