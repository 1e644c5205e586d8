"""
Permission DRF branchée sur les politiques d'accès
"""

import logging

from rest_framework.permissions import SAFE_METHODS, BasePermission

from .access import access_for
from .policies import allows, policy_for

logger = logging.getLogger(__name__)


class PolicyPermission(BasePermission):
    """
    Associe chaque action d'un viewset à une capacité de la politique du modèle.

    - list / create : capacité de modèle (view_any / create)
    - retrieve / update / destroy : capacité sur l'objet
    - actions personnalisées : `policy_actions` du viewset, sinon
      'view' pour une lecture et 'update' pour une écriture
    """

    message = "Vous n'avez pas l'autorisation d'effectuer cette action."

    default_abilities = {
        'list': 'view_any',
        'create': 'create',
        'retrieve': 'view',
        'update': 'update',
        'partial_update': 'update',
        'destroy': 'delete',
    }

    def get_ability(self, request, view):
        custom = getattr(view, 'policy_actions', {})
        if view.action in custom:
            return custom[view.action]
        if view.action in self.default_abilities:
            return self.default_abilities[view.action]
        if not getattr(view, 'detail', False):
            return 'view_any'
        return 'view' if request.method in SAFE_METHODS else 'update'

    def is_model_ability(self, view, ability):
        if not getattr(view, 'detail', False):
            return True
        return ability in policy_for(view.get_queryset().model).model_abilities

    def has_permission(self, request, view):
        ability = self.get_ability(request, view)
        if not self.is_model_ability(view, ability):
            return True
        model = view.get_queryset().model
        return self._check(request, ability, model)

    def has_object_permission(self, request, view, obj):
        ability = self.get_ability(request, view)
        if self.is_model_ability(view, ability):
            return True
        return self._check(request, ability, obj)

    def _check(self, request, ability, target):
        if not request.user or not request.user.is_authenticated:
            return False
        granted = allows(access_for(request), ability, target)
        if not granted:
            logger.info(
                "Accès refusé : user=%s ability=%s target=%s",
                request.user.pk, ability, getattr(target, 'pk', getattr(target, '__name__', target))
            )
        return granted
