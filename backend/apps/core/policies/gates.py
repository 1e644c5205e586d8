"""
Capacités non rattachées à une ressource (rapports, exports, coûts)
"""

from apps.users.constants import (
    PERM_EXPORTS_VIEW, PERM_USERS_RATE_SET, ROLE_ADMIN, ROLE_CHEF_EQUIPE
)


def view_reports(access):
    return access.can(PERM_EXPORTS_VIEW) or access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])


def export_time(access):
    return access.can(PERM_EXPORTS_VIEW) or access.has_any_role([ROLE_ADMIN])


def view_client_costs(access):
    """Coûts valorisés : taux horaires visibles par users.rate.set ou admin/chef"""
    return access.can(PERM_USERS_RATE_SET) or access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])


def view_rates(access):
    return access.can(PERM_USERS_RATE_SET) or view_reports(access)


GATES = {
    'view_reports': view_reports,
    'export_time': export_time,
    'view_client_costs': view_client_costs,
    'view_rates': view_rates,
}
