from apps.core.collaboration import is_collaborator_for_client
from apps.users.constants import (
    PERM_CLIENTS_EDIT, PERM_CLIENTS_VIEW, ROLE_ADMIN, ROLE_CHEF_EQUIPE
)

from .base import Policy


class ClientPolicy(Policy):

    def view_any(self, access):
        return access.can(PERM_CLIENTS_VIEW)

    def view(self, access, client):
        return (
            access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])
            or access.can(PERM_CLIENTS_VIEW)
            or is_collaborator_for_client(access, client)
        )

    def create(self, access):
        return access.has_role(ROLE_ADMIN) or access.can(PERM_CLIENTS_EDIT)

    def update(self, access, client):
        if access.has_role(ROLE_ADMIN) or access.can(PERM_CLIENTS_EDIT):
            return True
        # Un chef d'équipe peut modifier les clients de son équipe
        return (
            access.has_role(ROLE_CHEF_EQUIPE)
            and is_collaborator_for_client(access, client)
        )

    def delete(self, access, client):
        return access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])
