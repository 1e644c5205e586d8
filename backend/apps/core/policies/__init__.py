"""
Moteur d'autorisation

    allows(access, 'view', client)      -> bool
    authorize(access, 'update', task)   -> lève PermissionDenied si refusé
    allows(access, 'view_reports')      -> capacité hors ressource
    allows(access, 'users.edit')        -> permission nommée

Un ADMIN est autorisé avant toute autre vérification. Un utilisateur
anonyme est toujours refusé.
"""

import logging

from django.core.exceptions import ImproperlyConfigured, PermissionDenied

from apps.cabinet.models import Client, ClientRequest, Portfolio, Task, TimeEntry

from .base import Policy
from .client import ClientPolicy
from .gates import GATES
from .portfolio import PortfolioPolicy
from .request import ClientRequestPolicy
from .task import TaskPolicy
from .time_entry import TimeEntryPolicy

logger = logging.getLogger(__name__)

POLICIES = {
    Client: ClientPolicy(),
    Portfolio: PortfolioPolicy(),
    Task: TaskPolicy(),
    TimeEntry: TimeEntryPolicy(),
    ClientRequest: ClientRequestPolicy(),
}


def policy_for(target):
    model = target if isinstance(target, type) else type(target)
    try:
        return POLICIES[model]
    except KeyError:
        raise ImproperlyConfigured(f"Aucune politique d'accès pour {model.__name__}")


def allows(access, ability, target=None):
    """
    Décide si l'acteur peut exercer la capacité.
    target : une instance, une classe de modèle, ou None pour une capacité globale.
    """
    if not access.is_authenticated:
        return False
    if access.is_admin:
        return True

    if target is None:
        gate = GATES.get(ability)
        if gate is not None:
            return bool(gate(access))
        return access.can(ability)

    policy = policy_for(target)
    check = getattr(policy, ability, None)
    if check is None:
        raise ImproperlyConfigured(
            f"{type(policy).__name__} ne définit pas la capacité '{ability}'"
        )
    if isinstance(target, type):
        return bool(check(access))
    return bool(check(access, target))


def authorize(access, ability, target=None):
    if allows(access, ability, target):
        return
    logger.info(
        "Accès refusé : user=%s ability=%s target=%s",
        access.user_id, ability, _describe(target)
    )
    raise PermissionDenied("Vous n'avez pas l'autorisation d'effectuer cette action.")


def _describe(target):
    if target is None:
        return '-'
    if isinstance(target, type):
        return target.__name__
    return f"{type(target).__name__}#{target.pk}"


__all__ = [
    'Policy',
    'POLICIES',
    'GATES',
    'policy_for',
    'allows',
    'authorize',
]
