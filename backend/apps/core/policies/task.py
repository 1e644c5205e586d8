from apps.users.constants import (
    PERM_TASKS_MANAGE, ROLE_ADMIN, ROLE_CHEF_EQUIPE, ROLE_COLLABORATEUR
)

from .base import Policy


def is_owner(access, task):
    return access.user_id is not None and task.owner_id == access.user_id


def is_assignee(access, task):
    if access.user_id is None:
        return False
    prefetched = getattr(task, '_prefetched_objects_cache', {})
    if 'assignees' in prefetched:
        return any(user.pk == access.user_id for user in prefetched['assignees'])
    return task.assignees.filter(pk=access.user_id).exists()


class TaskPolicy(Policy):

    def view_any(self, access):
        return (
            access.can(PERM_TASKS_MANAGE)
            or access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE, ROLE_COLLABORATEUR])
        )

    def view(self, access, task):
        return (
            access.can(PERM_TASKS_MANAGE)
            or is_owner(access, task)
            or is_assignee(access, task)
        )

    def create(self, access):
        return (
            access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])
            or access.can(PERM_TASKS_MANAGE)
        )

    def update(self, access, task):
        return (
            access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])
            or access.can(PERM_TASKS_MANAGE)
            or is_owner(access, task)
        )

    def delete(self, access, task):
        return access.has_any_role([ROLE_ADMIN, ROLE_CHEF_EQUIPE])

    def assign(self, access, task):
        return access.can(PERM_TASKS_MANAGE) or is_owner(access, task)

    def log_time(self, access, task):
        return self.view(access, task)
