from apps.users.constants import (
    PERM_TASKS_MANAGE, PERM_TIME_APPROVE, ROLE_ADMIN, ROLE_ASSISTANT,
    ROLE_CHEF_EQUIPE, ROLE_COLLABORATEUR
)

from .base import Policy


class TimeEntryPolicy(Policy):

    def view_any(self, access):
        return (
            access.can(PERM_TASKS_MANAGE)
            or access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])
        )

    def view(self, access, entry):
        return entry.user_id == access.user_id or access.can(PERM_TASKS_MANAGE)

    def create(self, access):
        return (
            access.can(PERM_TASKS_MANAGE)
            or access.has_role(ROLE_COLLABORATEUR)
            or access.has_role(ROLE_ASSISTANT)
        )

    def update(self, access, entry):
        return entry.user_id == access.user_id or access.can(PERM_TASKS_MANAGE)

    def delete(self, access, entry):
        return (
            access.can(PERM_TIME_APPROVE)
            or access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])
        )
