from datetime import date
from decimal import Decimal
from io import StringIO

from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.test import TestCase

from apps.users.constants import (
    DEFAULT_ROLE_PERMISSIONS, PERMISSIONS, PERM_CLIENTS_EDIT, PERM_CLIENTS_VIEW,
    PERM_TASKS_MANAGE, ROLE_ASSISTANT, ROLE_COLLABORATEUR, ROLES
)
from apps.users.models import Permission, Role, User, UserRate


class SeedRolesTestCase(TestCase):

    def test_seed_is_idempotent(self):
        call_command('seed_roles', stdout=StringIO())
        call_command('seed_roles', stdout=StringIO())

        self.assertEqual(Permission.objects.count(), len(PERMISSIONS))
        self.assertEqual(set(Role.objects.values_list('name', flat=True)), set(ROLES))
        collab = Role.objects.get(name=ROLE_COLLABORATEUR)
        self.assertEqual(
            set(collab.permission_names()), set(DEFAULT_ROLE_PERMISSIONS[ROLE_COLLABORATEUR])
        )

    def test_keep_matrix_preserves_edited_roles(self):
        call_command('seed_roles', stdout=StringIO())
        Role.objects.get(name=ROLE_ASSISTANT).sync_permissions([PERM_TASKS_MANAGE])

        call_command('seed_roles', keep_matrix=True, stdout=StringIO())

        self.assertEqual(
            Role.objects.get(name=ROLE_ASSISTANT).permission_names(), [PERM_TASKS_MANAGE]
        )

    def test_seed_users_creates_one_account_per_role(self):
        call_command('seed_users', stdout=StringIO())

        self.assertEqual(User.objects.count(), len(ROLES))
        admin = User.objects.get(email='admin@example.com')
        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.check_password('password'))


class UserTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        call_command('seed_roles', stdout=StringIO())

    def test_display_name_derived(self):
        named = User.objects.create_user(
            email='karim@example.com', password='x', first_name='Karim', last_name='Alaoui'
        )
        bare = User.objects.create_user(email='sara@example.com', password='x')

        self.assertEqual(named.name, 'Karim Alaoui')
        self.assertEqual(bare.name, 'sara')
        self.assertEqual(bare.username, 'sara@example.com')

    def test_permissions_union_of_roles_and_direct(self):
        user = User.objects.create_user(email='a@example.com', password='x')
        user.sync_roles([ROLE_ASSISTANT])
        user.sync_direct_permissions([PERM_CLIENTS_EDIT])

        self.assertEqual(user.role_names(), {ROLE_ASSISTANT})
        self.assertIn(PERM_CLIENTS_VIEW, user.permission_names())
        self.assertIn(PERM_CLIENTS_EDIT, user.permission_names())

    def test_sync_replaces_and_is_idempotent(self):
        user = User.objects.create_user(email='a@example.com', password='x')
        user.sync_roles([ROLE_ASSISTANT, ROLE_COLLABORATEUR])
        user.sync_roles([ROLE_COLLABORATEUR])
        user.sync_roles([ROLE_COLLABORATEUR])

        self.assertEqual(user.role_names(), {ROLE_COLLABORATEUR})

    def test_sync_rejects_unknown_names(self):
        user = User.objects.create_user(email='a@example.com', password='x')
        user.sync_roles([ROLE_ASSISTANT])

        with self.assertRaises(ValidationError):
            user.sync_roles([ROLE_COLLABORATEUR, 'STAGIAIRE'])
        self.assertEqual(user.role_names(), {ROLE_ASSISTANT})


class UserRateTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(email='collab@example.com', password='x')
        UserRate.objects.create(
            user=cls.user, hourly_rate_mad=Decimal('100.00'), effective_from=date(2024, 1, 1)
        )
        UserRate.objects.create(
            user=cls.user, hourly_rate_mad=Decimal('150.00'), effective_from=date(2024, 7, 1)
        )
        UserRate.objects.create(
            user=cls.user, hourly_rate_mad=Decimal('200.00'), effective_from=date(2099, 1, 1)
        )

    def test_current_for_takes_latest_even_in_future(self):
        self.assertEqual(UserRate.current_for(self.user).hourly_rate_mad, Decimal('200.00'))

    def test_effective_on(self):
        self.assertEqual(
            UserRate.effective_on(self.user.pk, date(2024, 3, 15)).hourly_rate_mad,
            Decimal('100.00')
        )
        self.assertEqual(
            UserRate.effective_on(self.user.pk, date(2024, 7, 1)).hourly_rate_mad,
            Decimal('150.00')
        )
        self.assertIsNone(UserRate.effective_on(self.user.pk, date(2023, 12, 31)))

    def test_no_rate(self):
        other = User.objects.create_user(email='autre@example.com', password='x')
        self.assertIsNone(UserRate.current_for(other))
