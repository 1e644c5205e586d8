from django.core.exceptions import ImproperlyConfigured, PermissionDenied
from django.test import TestCase

from apps.cabinet.models import Client, ClientRequest, Portfolio, Task, TimeEntry
from apps.core.access import AccessContext
from apps.core.policies import allows, authorize
from apps.users.constants import (
    PERM_CLIENTS_VIEW, PERM_EXPORTS_VIEW, PERM_TASKS_MANAGE, PERM_USERS_RATE_SET,
    ROLE_ADMIN, ROLE_ASSISTANT, ROLE_CHEF_EQUIPE, ROLE_COLLABORATEUR
)

from .helpers import (
    make_client, make_portfolio, make_task, make_user, seed_roles, set_role_permissions
)


class AdminBeforeGateTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        set_role_permissions(ROLE_ADMIN, [])
        cls.admin = make_user('admin@example.com', ROLE_ADMIN)
        cls.client_alpha = make_client()
        cls.task = make_task(cls.client_alpha)

    def test_admin_is_allowed_everything(self):
        access = AccessContext(self.admin)

        for ability in ('view', 'update', 'delete'):
            self.assertTrue(allows(access, ability, self.client_alpha))
            self.assertTrue(allows(access, ability, self.client_alpha.portfolio))
            self.assertTrue(allows(access, ability, self.task))
        self.assertTrue(allows(access, 'assign', self.task))
        self.assertTrue(allows(access, 'create', Portfolio))
        self.assertTrue(allows(access, 'view_reports'))
        self.assertTrue(allows(access, 'view_client_costs'))
        self.assertTrue(allows(access, PERM_USERS_RATE_SET))


class AnonymousTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.task = make_task()

    def test_anonymous_is_denied_everything(self):
        access = AccessContext(None)

        self.assertFalse(allows(access, 'view', self.task))
        self.assertFalse(allows(access, 'view_any', Client))
        self.assertFalse(allows(access, 'view_reports'))
        with self.assertRaises(PermissionDenied):
            authorize(access, 'view', self.task)


class ClientPolicyTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        # Rôle sans permission nommée : seule la collaboration compte
        set_role_permissions(ROLE_COLLABORATEUR, [])
        cls.chef = make_user('chef@example.com', ROLE_CHEF_EQUIPE)
        cls.collab = make_user('collab@example.com', ROLE_COLLABORATEUR)
        cls.outsider = make_user('externe@example.com', ROLE_COLLABORATEUR)
        cls.viewer = make_user('lecteur@example.com', permissions=[PERM_CLIENTS_VIEW])
        cls.client_alpha = make_client()
        cls.client_alpha.collaborators.add(cls.collab)

    def test_view(self):
        self.assertTrue(allows(AccessContext(self.chef), 'view', self.client_alpha))
        self.assertTrue(allows(AccessContext(self.collab), 'view', self.client_alpha))
        self.assertTrue(allows(AccessContext(self.viewer), 'view', self.client_alpha))
        self.assertFalse(allows(AccessContext(self.outsider), 'view', self.client_alpha))

    def test_view_any_requires_permission(self):
        self.assertTrue(allows(AccessContext(self.viewer), 'view_any', Client))
        self.assertFalse(allows(AccessContext(self.collab), 'view_any', Client))

    def test_chef_updates_only_team_clients(self):
        set_role_permissions(ROLE_CHEF_EQUIPE, [])
        other = make_client('Société Beta')
        self.client_alpha.portfolio.collaborators.add(self.chef)

        access = AccessContext(self.chef)
        self.assertTrue(allows(access, 'update', self.client_alpha))
        self.assertFalse(allows(access, 'update', other))
        self.assertTrue(allows(access, 'delete', other))

    def test_collaborator_cannot_update(self):
        self.assertFalse(allows(AccessContext(self.collab), 'update', self.client_alpha))
        self.assertFalse(allows(AccessContext(self.collab), 'delete', self.client_alpha))


class PortfolioPolicyTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        cls.collab = make_user('collab@example.com', ROLE_COLLABORATEUR)
        cls.outsider = make_user('externe@example.com')
        cls.portfolio = make_portfolio()
        cls.portfolio.collaborators.add(cls.collab)

    def test_collaboration_grants_view_not_update(self):
        access = AccessContext(self.collab)

        self.assertTrue(allows(access, 'view', self.portfolio))
        self.assertFalse(allows(access, 'update', self.portfolio))
        self.assertFalse(allows(access, 'delete', self.portfolio))

    def test_user_without_role_cannot_list(self):
        self.assertTrue(allows(AccessContext(self.collab), 'view_any', Portfolio))
        self.assertFalse(allows(AccessContext(self.outsider), 'view_any', Portfolio))
        self.assertFalse(allows(AccessContext(self.outsider), 'view', self.portfolio))


class TaskPolicyTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        set_role_permissions(ROLE_COLLABORATEUR, [PERM_CLIENTS_VIEW])
        cls.owner = make_user('owner@example.com', ROLE_COLLABORATEUR)
        cls.assignee = make_user('assignee@example.com', ROLE_COLLABORATEUR)
        cls.other = make_user('autre@example.com', ROLE_COLLABORATEUR)
        cls.manager = make_user('manager@example.com', permissions=[PERM_TASKS_MANAGE])
        cls.task = make_task(owner=cls.owner)
        cls.task.assignees.add(cls.assignee)

    def test_assignee_can_view_and_log_time_only(self):
        access = AccessContext(self.assignee)

        self.assertTrue(allows(access, 'view', self.task))
        self.assertTrue(allows(access, 'log_time', self.task))
        self.assertFalse(allows(access, 'update', self.task))
        self.assertFalse(allows(access, 'assign', self.task))

    def test_unrelated_collaborator_is_denied(self):
        access = AccessContext(self.other)

        self.assertTrue(allows(access, 'view_any', Task))
        self.assertFalse(allows(access, 'view', self.task))
        self.assertFalse(allows(access, 'log_time', self.task))

    def test_assign_is_owner_or_manager(self):
        self.assertTrue(allows(AccessContext(self.owner), 'assign', self.task))
        self.assertTrue(allows(AccessContext(self.manager), 'assign', self.task))
        self.assertFalse(allows(AccessContext(self.assignee), 'assign', self.task))

    def test_owner_updates_but_does_not_delete(self):
        access = AccessContext(self.owner)

        self.assertTrue(allows(access, 'update', self.task))
        self.assertFalse(allows(access, 'delete', self.task))

    def test_prefetched_assignees(self):
        task = Task.objects.prefetch_related('assignees').get(pk=self.task.pk)
        access = AccessContext(self.assignee)
        access.can(PERM_CLIENTS_VIEW)

        with self.assertNumQueries(0):
            self.assertTrue(allows(access, 'view', task))


class TimeEntryPolicyTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        set_role_permissions(ROLE_COLLABORATEUR, [])
        cls.author = make_user('auteur@example.com', ROLE_COLLABORATEUR)
        cls.other = make_user('autre@example.com', ROLE_COLLABORATEUR)
        cls.chef = make_user('chef@example.com', ROLE_CHEF_EQUIPE)
        task = make_task()
        cls.entry = TimeEntry(user=cls.author, task=task)

    def test_author_views_and_updates(self):
        access = AccessContext(self.author)

        self.assertTrue(allows(access, 'view', self.entry))
        self.assertTrue(allows(access, 'update', self.entry))
        self.assertFalse(allows(access, 'delete', self.entry))
        self.assertTrue(allows(access, 'create', TimeEntry))

    def test_other_collaborator(self):
        access = AccessContext(self.other)

        self.assertFalse(allows(access, 'view', self.entry))
        self.assertFalse(allows(access, 'view_any', TimeEntry))

    def test_chef_deletes(self):
        self.assertTrue(allows(AccessContext(self.chef), 'delete', self.entry))


class ClientRequestPolicyTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        set_role_permissions(ROLE_ASSISTANT, [])
        cls.author = make_user('auteur@example.com', ROLE_ASSISTANT)
        cls.other = make_user('autre@example.com', ROLE_ASSISTANT)
        cls.chef = make_user('chef@example.com', ROLE_CHEF_EQUIPE)
        cls.client_request = ClientRequest.objects.create(
            client=make_client(), created_by=cls.author, title='Relevés bancaires'
        )

    def test_author_manages_own_request(self):
        access = AccessContext(self.author)

        self.assertTrue(allows(access, 'view', self.client_request))
        self.assertTrue(allows(access, 'update', self.client_request))
        self.assertTrue(allows(access, 'create', ClientRequest))

    def test_other_assistant_lists_but_cannot_open(self):
        access = AccessContext(self.other)

        self.assertTrue(allows(access, 'view_any', ClientRequest))
        self.assertFalse(allows(access, 'view', self.client_request))

    def test_requests_manage_opens_any(self):
        self.assertTrue(allows(AccessContext(self.chef), 'delete', self.client_request))


class GatesTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        cls.chef = make_user('chef@example.com', ROLE_CHEF_EQUIPE)
        cls.collab = make_user('collab@example.com', ROLE_COLLABORATEUR)
        cls.exporter = make_user('export@example.com', permissions=[PERM_EXPORTS_VIEW])
        cls.rate_setter = make_user('taux@example.com', permissions=[PERM_USERS_RATE_SET])

    def test_reports(self):
        self.assertTrue(allows(AccessContext(self.chef), 'view_reports'))
        self.assertTrue(allows(AccessContext(self.exporter), 'view_reports'))
        self.assertFalse(allows(AccessContext(self.collab), 'view_reports'))

    def test_client_costs(self):
        self.assertTrue(allows(AccessContext(self.chef), 'view_client_costs'))
        self.assertTrue(allows(AccessContext(self.rate_setter), 'view_client_costs'))
        self.assertFalse(allows(AccessContext(self.exporter), 'view_client_costs'))

    def test_rates(self):
        self.assertTrue(allows(AccessContext(self.rate_setter), 'view_rates'))
        self.assertTrue(allows(AccessContext(self.exporter), 'view_rates'))
        self.assertFalse(allows(AccessContext(self.collab), 'view_rates'))

    def test_unknown_ability_falls_back_to_named_permission(self):
        self.assertTrue(allows(AccessContext(self.collab), PERM_CLIENTS_VIEW))
        self.assertFalse(allows(AccessContext(self.collab), PERM_USERS_RATE_SET))


class EngineTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        cls.collab = make_user('collab@example.com', ROLE_COLLABORATEUR)
        cls.task = make_task()

    def test_decisions_are_idempotent(self):
        access = AccessContext(self.collab)
        first = [allows(access, ability, self.task) for ability in ('view', 'update', 'delete')]
        second = [allows(access, ability, self.task) for ability in ('view', 'update', 'delete')]

        self.assertEqual(first, second)

    def test_undefined_ability_is_a_configuration_error(self):
        with self.assertRaises(ImproperlyConfigured):
            allows(AccessContext(self.collab), 'archive', self.task)

    def test_unknown_model_is_a_configuration_error(self):
        with self.assertRaises(ImproperlyConfigured):
            allows(AccessContext(self.collab), 'view', self.collab)

    def test_authorize_logs_denial(self):
        access = AccessContext(self.collab)

        with self.assertLogs('apps.core.policies', level='INFO') as logs:
            with self.assertRaises(PermissionDenied):
                authorize(access, 'delete', self.task)
        self.assertIn(f'Task#{self.task.pk}', logs.output[0])
