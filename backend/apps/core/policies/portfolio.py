from apps.core.collaboration import is_collaborator_for_portfolio
from apps.users.constants import (
    PERM_PORTFOLIOS_EDIT, PERM_PORTFOLIOS_VIEW, ROLES, ROLE_ADMIN, ROLE_CHEF_EQUIPE
)

from .base import Policy


class PortfolioPolicy(Policy):
    """
    La collaboration donne la lecture d'un portefeuille, jamais sa modification
    """

    def view_any(self, access):
        return access.has_any_role(ROLES) or access.can(PERM_PORTFOLIOS_VIEW)

    def view(self, access, portfolio):
        return (
            access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])
            or access.can(PERM_PORTFOLIOS_VIEW)
            or is_collaborator_for_portfolio(access, portfolio)
        )

    def create(self, access):
        return access.has_role(ROLE_ADMIN) or access.can(PERM_PORTFOLIOS_EDIT)

    def update(self, access, portfolio):
        return access.has_role(ROLE_ADMIN) or access.can(PERM_PORTFOLIOS_EDIT)

    def delete(self, access, portfolio):
        return access.has_role(ROLE_ADMIN)
