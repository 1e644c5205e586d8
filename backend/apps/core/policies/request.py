from apps.users.constants import (
    PERM_REQUESTS_MANAGE, PERM_REQUESTS_VIEW, ROLE_ADMIN, ROLE_ASSISTANT,
    ROLE_CHEF_EQUIPE
)

from .base import Policy


class ClientRequestPolicy(Policy):
    """Demandes clients : gérées par requests.manage ou par leur auteur"""

    def view_any(self, access):
        return (
            access.can(PERM_REQUESTS_VIEW)
            or access.can(PERM_REQUESTS_MANAGE)
            or access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE, ROLE_ASSISTANT])
        )

    def view(self, access, client_request):
        return self._manages(access, client_request)

    def create(self, access):
        return (
            access.can(PERM_REQUESTS_MANAGE)
            or access.has_any_role([ROLE_ADMIN, ROLE_ASSISTANT, ROLE_CHEF_EQUIPE])
        )

    def update(self, access, client_request):
        return self._manages(access, client_request)

    def delete(self, access, client_request):
        return self._manages(access, client_request)

    def _manages(self, access, client_request):
        return (
            access.can(PERM_REQUESTS_MANAGE)
            or (access.user_id is not None and client_request.created_by_id == access.user_id)
        )
