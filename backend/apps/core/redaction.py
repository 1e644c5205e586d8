"""
Masquage des données sensibles à la sérialisation

- montant du contrat d'un client : ADMIN ou CHEF_EQUIPE uniquement
- taux horaire d'un utilisateur : users.rate.set ou accès aux rapports
- documents confidentiels : retirés des listes pour les autres rôles
"""

from apps.users.constants import ROLE_ADMIN, ROLE_CHEF_EQUIPE

from .policies import allows

CLIENT_SENSITIVE_FIELDS = ('montant_contrat',)


def can_view_contract(access):
    return access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])


def can_view_confidential(access):
    return access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])


def can_view_rates(access):
    return allows(access, 'view_rates')


def redact_client(data, access):
    """Les champs restent présents mais valent None"""
    if not can_view_contract(access):
        for field in CLIENT_SENSITIVE_FIELDS:
            data[field] = None
    return data


def visible_documents(queryset, access):
    """Filtre les lignes confidentielles plutôt que de masquer des champs"""
    if can_view_confidential(access):
        return queryset
    return queryset.filter(is_confidential=False)
