"""
Résolution des rôles et permissions d'un utilisateur

Un AccessContext est créé pour une requête et jeté avec elle : les rôles et
permissions sont lus une seule fois puis réutilisés par toutes les décisions
prises pendant la requête. Après une écriture sur les rôles ou permissions,
appeler reset_access() pour repartir d'un contexte neuf.
"""

from django.utils.functional import cached_property

from apps.users.constants import ROLE_ADMIN


class AccessContext:
    """Rôles et permissions effectifs d'un utilisateur, mis en cache"""

    def __init__(self, user):
        if user is not None and not user.is_authenticated:
            user = None
        self.user = user

    def __repr__(self):
        return f"<AccessContext user={self.user_id}>"

    @property
    def user_id(self):
        return self.user.pk if self.user is not None else None

    @property
    def is_authenticated(self):
        return self.user is not None

    @cached_property
    def roles(self) -> frozenset:
        if self.user is None:
            return frozenset()
        return frozenset(self.user.role_names())

    @cached_property
    def permissions(self) -> frozenset:
        if self.user is None:
            return frozenset()
        return frozenset(self.user.permission_names())

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles

    def has_role(self, name) -> bool:
        return name in self.roles

    def has_any_role(self, names) -> bool:
        return any(name in self.roles for name in names)

    def can(self, permission) -> bool:
        """
        Vérifie une permission nommée.
        Un ADMIN passe toujours, quelle que soit la matrice de son rôle.
        """
        if self.user is None:
            return False
        if self.is_admin:
            return True
        return permission in self.permissions


def access_for(request):
    """Contexte d'accès attaché à la requête (créé à la première demande)"""
    user = getattr(request, 'user', None)
    access = getattr(request, '_access_context', None)
    if access is None or access.user is not user:
        access = AccessContext(user)
        request._access_context = access
    return access


def reset_access(request):
    """Oublie le contexte mis en cache (après modification des habilitations)"""
    request._access_context = None


def access_from_context(context):
    """Contexte d'accès d'un serializer (anonyme sans requête)"""
    request = context.get('request')
    if request is None:
        return AccessContext(None)
    return access_for(request)
