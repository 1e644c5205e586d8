"""
Tâches : affectation, modification rapide et chronomètre
"""

from datetime import timedelta

from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.cabinet.models import TimeEntry
from apps.core.tests.helpers import (
    make_client, make_task, make_user, seed_roles, set_role_permissions
)
from apps.users.constants import (
    PERM_CLIENTS_VIEW, PERM_TASKS_MANAGE, ROLE_CHEF_EQUIPE, ROLE_COLLABORATEUR
)


class TaskAPITestCase(APITestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        # Sans tasks.manage, un collaborateur n'accède qu'à ses propres tâches
        set_role_permissions(ROLE_COLLABORATEUR, [PERM_CLIENTS_VIEW])
        cls.chef = make_user('chef@example.com', ROLE_CHEF_EQUIPE)
        cls.owner = make_user('owner@example.com', ROLE_COLLABORATEUR)
        cls.assignee = make_user('assignee@example.com', ROLE_COLLABORATEUR)
        cls.other = make_user('autre@example.com', ROLE_COLLABORATEUR)
        cls.manager = make_user('manager@example.com', permissions=[PERM_TASKS_MANAGE])
        cls.client_alpha = make_client()

    def setUp(self):
        self.task = make_task(self.client_alpha, owner=self.owner)
        self.task.assignees.add(self.assignee)

    def test_create(self):
        self.client.force_authenticate(user=self.chef)

        response = self.client.post('/api/tasks/', {
            'client_id': self.client_alpha.id,
            'owner_id': self.owner.id,
            'category': 'FISCALE',
            'nature': 'PONCTUELLE',
            'priority': 3
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'EN_ATTENTE')
        self.assertEqual(response.data['owner']['id'], self.owner.id)

    def test_create_rejects_unknown_category(self):
        self.client.force_authenticate(user=self.chef)

        response = self.client.post('/api/tasks/', {
            'client_id': self.client_alpha.id,
            'category': 'MARKETING',
            'nature': 'CONTINUE'
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('category', response.data)

    def test_due_date_before_start_rejected(self):
        self.client.force_authenticate(user=self.chef)
        now = timezone.now()

        response = self.client.patch(f'/api/tasks/{self.task.id}/', {
            'starts_at': now.isoformat(),
            'due_at': (now - timedelta(days=1)).isoformat()
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('due_at', response.data)

    def test_owner_quick_edit(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.patch(
            f'/api/tasks/{self.task.id}/', {'status': 'EN_COURS', 'progress': 40}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.task.refresh_from_db()
        self.assertEqual(self.task.status, 'EN_COURS')
        self.assertEqual(self.task.progress, 40)

    def test_assignee_views_but_cannot_edit(self):
        self.client.force_authenticate(user=self.assignee)
        url = f'/api/tasks/{self.task.id}/'

        self.assertEqual(self.client.get(url).status_code, status.HTTP_200_OK)
        self.assertEqual(
            self.client.patch(url, {'progress': 90}).status_code, status.HTTP_403_FORBIDDEN
        )

    def test_unrelated_collaborator_is_forbidden(self):
        self.client.force_authenticate(user=self.other)

        response = self.client.get(f'/api/tasks/{self.task.id}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_assign_by_owner_keeps_existing_assignees(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.post(f'/api/tasks/{self.task.id}/assign/', {'user_id': self.other.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            sorted(user['id'] for user in response.data['assignees']),
            sorted([self.assignee.id, self.other.id])
        )

    def test_assign_by_manager(self):
        self.client.force_authenticate(user=self.manager)

        response = self.client.post(f'/api/tasks/{self.task.id}/assign/', {'user_id': self.other.id})
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_assign_by_assignee_is_forbidden(self):
        self.client.force_authenticate(user=self.assignee)

        response = self.client.post(f'/api/tasks/{self.task.id}/assign/', {'user_id': self.other.id})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.task.assignees.count(), 1)

    def test_overdue_filter(self):
        make_task(self.client_alpha, owner=self.owner, due_at=timezone.now() - timedelta(days=2))
        self.client.force_authenticate(user=self.chef)

        response = self.client.get('/api/tasks/', {'overdue': 'true'})

        self.assertEqual(response.data['count'], 1)
        self.assertTrue(response.data['results'][0]['is_overdue'])


class TimerAPITestCase(APITestCase):

    @classmethod
    def setUpTestData(cls):
        seed_roles()
        set_role_permissions(ROLE_COLLABORATEUR, [PERM_CLIENTS_VIEW])
        cls.assignee = make_user('assignee@example.com', ROLE_COLLABORATEUR)
        cls.other = make_user('autre@example.com', ROLE_COLLABORATEUR)
        cls.task = make_task()
        cls.task.assignees.add(cls.assignee)

    def test_start_and_stop(self):
        self.client.force_authenticate(user=self.assignee)

        start_at = timezone.now() - timedelta(minutes=45)
        response = self.client.post(
            f'/api/tasks/{self.task.id}/time/start/', {'start_at': start_at.isoformat()}
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['is_running'])
        self.assertIsNone(response.data['minutes'])

        entry_id = response.data['id']
        response = self.client.post(f'/api/time-entries/{entry_id}/stop/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['is_running'])
        self.assertIn(response.data['minutes'], (45, 46))

    def test_stop_before_start_rejected(self):
        entry = TimeEntry.objects.create(
            user=self.assignee, task=self.task, start_at=timezone.now()
        )
        self.client.force_authenticate(user=self.assignee)

        response = self.client.post(f'/api/time-entries/{entry.id}/stop/', {
            'end_at': (entry.start_at - timedelta(hours=1)).isoformat()
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unrelated_user_cannot_start(self):
        self.client.force_authenticate(user=self.other)

        response = self.client.post(f'/api/tasks/{self.task.id}/time/start/')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(TimeEntry.objects.exists())

    def test_manual_entry(self):
        self.client.force_authenticate(user=self.assignee)

        response = self.client.post('/api/time-entries/', {
            'task_id': self.task.id,
            'duration_min': 30,
            'comment': 'Saisie des factures'
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['minutes'], 30)
        self.assertEqual(response.data['user']['id'], self.assignee.id)
        self.assertEqual(response.data['client_id'], self.task.client_id)
        self.assertIsNotNone(response.data['start_at'])

    def test_manual_entry_on_foreign_task_forbidden(self):
        self.client.force_authenticate(user=self.other)

        response = self.client.post('/api/time-entries/', {
            'task_id': self.task.id,
            'duration_min': 30
        })
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_others_cannot_edit_entry(self):
        entry = TimeEntry.objects.create(
            user=self.assignee, task=self.task, start_at=timezone.now(), duration_min=10
        )
        self.client.force_authenticate(user=self.other)

        response = self.client.patch(f'/api/time-entries/{entry.id}/', {'duration_min': 600})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_task_time_entries(self):
        TimeEntry.objects.create(
            user=self.assignee, task=self.task, start_at=timezone.now(), duration_min=10
        )
        self.client.force_authenticate(user=self.assignee)

        response = self.client.get(f'/api/tasks/{self.task.id}/time-entries/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 1)
