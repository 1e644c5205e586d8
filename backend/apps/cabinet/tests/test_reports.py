from datetime import date, datetime, timedelta
from decimal import Decimal

from django.test import TestCase
from django.utils import timezone

from apps.cabinet import reports
from apps.cabinet.models import ClientRequest, TimeEntry
from apps.core.tests.helpers import make_client, make_task, make_user
from apps.users.models import UserRate


def at(day, hour=9):
    return timezone.make_aware(datetime(day.year, day.month, day.day, hour))


class ReportsTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.alice = make_user('alice@example.com')
        cls.bob = make_user('bob@example.com')
        cls.alpha = make_client('Société Alpha')
        cls.beta = make_client('Société Beta')
        task_alpha = make_task(cls.alpha)
        task_beta = make_task(cls.beta)
        cls.day = date(2024, 3, 10)

        TimeEntry.objects.create(
            user=cls.alice, task=task_alpha, start_at=at(cls.day), duration_min=90
        )
        TimeEntry.objects.create(
            user=cls.bob, task=task_alpha, start_at=at(cls.day, 10),
            end_at=at(cls.day, 11)
        )
        TimeEntry.objects.create(
            user=cls.alice, task=task_beta, start_at=at(cls.day, 14), duration_min=30,
            comment='Rapprochement'
        )
        # Chrono en cours : 0 minute
        TimeEntry.objects.create(user=cls.bob, task=task_beta, start_at=at(cls.day, 16))
        # Hors période
        TimeEntry.objects.create(
            user=cls.alice, task=task_beta, start_at=at(cls.day + timedelta(days=5)),
            duration_min=600
        )

        UserRate.objects.create(
            user=cls.alice, hourly_rate_mad=Decimal('200.00'), effective_from=date(2024, 1, 1)
        )
        UserRate.objects.create(
            user=cls.alice, hourly_rate_mad=Decimal('400.00'), effective_from=date(2024, 6, 1)
        )

    def test_productivity(self):
        data = reports.productivity(self.day, self.day)

        self.assertEqual(data['per_client'], [
            {'client_id': self.alpha.pk, 'minutes': 150},
            {'client_id': self.beta.pk, 'minutes': 30},
        ])
        self.assertEqual(data['per_user'], [
            {'user_id': self.alice.pk, 'minutes': 120},
            {'user_id': self.bob.pk, 'minutes': 60},
        ])

    def test_period_includes_last_day(self):
        data = reports.productivity(self.day - timedelta(days=1), self.day + timedelta(days=5))
        total = sum(row['minutes'] for row in data['per_user'])
        self.assertEqual(total, 780)

    def test_timesheet_filtered_by_user(self):
        rows = reports.timesheet(self.day, self.day, user=self.alice)

        self.assertEqual([row['minutes'] for row in rows], [90, 30])
        self.assertEqual(rows[0]['user']['email'], 'alice@example.com')
        self.assertEqual(rows[1]['comment'], 'Rapprochement')

    def test_client_costs_use_rate_at_period_end(self):
        costs = {row['client_id']: row for row in reports.client_costs(self.day, self.day)}

        # Alice 90 min à 200 MAD/h ; Bob n'a pas de taux
        self.assertEqual(costs[self.alpha.pk]['minutes'], 150)
        self.assertEqual(costs[self.alpha.pk]['hours'], 2.5)
        self.assertEqual(costs[self.alpha.pk]['cost_mad'], '300.00')
        self.assertEqual(costs[self.beta.pk]['cost_mad'], '100.00')

    def test_time_csv_rows(self):
        rows = list(reports.time_csv_rows())

        self.assertEqual(rows[0], reports.CSV_HEADER)
        self.assertEqual(len(rows), 6)
        running = [row for row in rows[1:] if row[5] == '']
        self.assertEqual(len(running), 1)
        self.assertEqual(running[0][4], '')

    def test_user_minutes(self):
        data = reports.user_minutes(self.alice, today=date(2024, 3, 31))

        self.assertEqual(data, {'minutes_month': 720, 'minutes_year': 720})

    def test_user_minutes_excludes_previous_months(self):
        data = reports.user_minutes(self.alice, today=date(2024, 4, 2))

        self.assertEqual(data, {'minutes_month': 0, 'minutes_year': 720})


class RequestMetricsTestCase(TestCase):

    def test_metrics(self):
        user = make_user('assistant@example.com')
        client = make_client()
        sent = timezone.now() - timedelta(hours=3)

        ClientRequest.objects.create(
            client=client, created_by=user, title='A', status='VALIDE',
            first_sent_at=sent, responded_at=sent + timedelta(minutes=60)
        )
        ClientRequest.objects.create(
            client=client, created_by=user, title='B', status='RECU',
            first_sent_at=sent, responded_at=sent + timedelta(minutes=120)
        )
        ClientRequest.objects.create(client=client, created_by=user, title='C')

        data = reports.request_metrics()

        self.assertEqual(data['total'], 3)
        self.assertEqual(data['by_status'], {'VALIDE': 1, 'RECU': 1, 'EN_ATTENTE': 1})
        self.assertEqual(data['responded'], 2)
        self.assertEqual(data['avg_response_minutes'], 90)
        self.assertEqual(data['completeness_ratio'], 0.333)

    def test_empty(self):
        data = reports.request_metrics()

        self.assertEqual(data['total'], 0)
        self.assertIsNone(data['avg_response_minutes'])
        self.assertEqual(data['completeness_ratio'], 0)
