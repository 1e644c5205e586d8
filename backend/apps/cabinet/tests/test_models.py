from datetime import timedelta

from django.core.exceptions import ValidationError
from django.test import TestCase
from django.utils import timezone

from apps.cabinet.models import ClientRequest, TimeEntry
from apps.core.tests.helpers import make_client, make_task, make_user


class TimeEntryTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = make_user('collab@example.com')
        cls.task = make_task()
        cls.start = timezone.now() - timedelta(hours=2)

    def test_explicit_duration_wins(self):
        entry = TimeEntry(
            user=self.user, task=self.task, start_at=self.start,
            end_at=self.start + timedelta(minutes=90), duration_min=45
        )
        self.assertEqual(entry.minutes, 45)
        self.assertFalse(entry.is_running)

    def test_duration_from_interval_is_rounded(self):
        entry = TimeEntry(
            user=self.user, task=self.task, start_at=self.start,
            end_at=self.start + timedelta(minutes=89, seconds=40)
        )
        self.assertEqual(entry.minutes, 90)

    def test_running_timer(self):
        entry = TimeEntry(user=self.user, task=self.task, start_at=self.start)
        self.assertIsNone(entry.minutes)
        self.assertTrue(entry.is_running)

    def test_end_before_start_is_invalid(self):
        entry = TimeEntry(
            user=self.user, task=self.task, start_at=self.start,
            end_at=self.start - timedelta(minutes=1)
        )
        with self.assertRaises(ValidationError):
            entry.clean()


class TaskTestCase(TestCase):

    def test_overdue_only_when_open(self):
        past = timezone.now() - timedelta(days=1)
        open_task = make_task(due_at=past)
        done = make_task(open_task.client, due_at=past, status='TERMINEE')
        undated = make_task(open_task.client)

        self.assertTrue(open_task.is_overdue)
        self.assertFalse(done.is_overdue)
        self.assertFalse(undated.is_overdue)


class ClientRequestTestCase(TestCase):

    def test_remind_records_history(self):
        user = make_user('assistant@example.com')
        client_request = ClientRequest.objects.create(
            client=make_client(), created_by=user, title='Relevés bancaires'
        )

        client_request.remind(user, note='Premier rappel')
        first_sent = client_request.first_sent_at
        client_request.remind(user)
        client_request.refresh_from_db()

        self.assertEqual(client_request.status, 'EN_RELANCE')
        self.assertEqual(client_request.reminders_count, 2)
        self.assertEqual(client_request.first_sent_at, first_sent)
        self.assertEqual(client_request.reminders[0]['note'], 'Premier rappel')
        self.assertEqual(client_request.reminders[0]['by'], user.pk)
        self.assertIsNone(client_request.reminders[1]['note'])
