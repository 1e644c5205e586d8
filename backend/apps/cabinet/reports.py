# apps/cabinet/reports.py
"""
Agrégations pour les rapports : productivité, feuille de temps,
coûts par client, export CSV, indicateurs des demandes et tableau de bord

Les minutes d'un temps passé sont la durée explicite, à défaut l'écart
début/fin arrondi, et 0 tant que le chrono tourne.
"""

from collections import defaultdict
from datetime import datetime, time
from decimal import ROUND_HALF_UP, Decimal

from dateutil.relativedelta import relativedelta
from django.db.models import Count
from django.utils import timezone

from apps.cabinet.models import Client, ClientDocument, ClientRequest, Portfolio, Task, TimeEntry
from apps.core.redaction import visible_documents
from apps.users.models import UserRate

CSV_HEADER = ['User ID', 'Task ID', 'Client ID', 'Start', 'End', 'Minutes', 'Comment']

CENTIMES = Decimal('0.01')


def entry_minutes(entry):
    return entry.minutes or 0


def period_bounds(date_from, date_to):
    """Bornes [début, fin[ couvrant les jours from..to inclus"""
    tz = timezone.get_current_timezone()
    start = timezone.make_aware(datetime.combine(date_from, time.min), tz)
    end = timezone.make_aware(datetime.combine(date_to + relativedelta(days=1), time.min), tz)
    return start, end


def entries_between(date_from, date_to):
    start, end = period_bounds(date_from, date_to)
    return TimeEntry.objects.filter(start_at__gte=start, start_at__lt=end)


def productivity(date_from, date_to):
    """Minutes par client et par collaborateur sur la période"""
    per_client = defaultdict(int)
    per_user = defaultdict(int)

    entries = entries_between(date_from, date_to).select_related('task')
    for entry in entries:
        minutes = entry_minutes(entry)
        per_client[entry.task.client_id] += minutes
        per_user[entry.user_id] += minutes

    return {
        'per_client': [
            {'client_id': client_id, 'minutes': minutes}
            for client_id, minutes in sorted(per_client.items())
        ],
        'per_user': [
            {'user_id': user_id, 'minutes': minutes}
            for user_id, minutes in sorted(per_user.items())
        ],
    }


def timesheet(date_from, date_to, user=None):
    entries = entries_between(date_from, date_to).select_related('task', 'user').order_by('start_at')
    if user is not None:
        entries = entries.filter(user=user)

    return [
        {
            'id': entry.pk,
            'start_at': entry.start_at.isoformat(),
            'end_at': entry.end_at.isoformat() if entry.end_at else None,
            'minutes': entry_minutes(entry),
            'task_id': entry.task_id,
            'client_id': entry.task.client_id,
            'user': {
                'id': entry.user.pk,
                'name': entry.user.name,
                'email': entry.user.email,
            },
            'comment': entry.comment,
        }
        for entry in entries
    ]


def client_costs(date_from, date_to):
    """
    Coût valorisé par client : minutes de chaque collaborateur multipliées
    par son taux horaire en vigueur à la fin de la période
    """
    minutes_by_pair = defaultdict(int)
    for entry in entries_between(date_from, date_to).select_related('task'):
        minutes_by_pair[(entry.task.client_id, entry.user_id)] += entry_minutes(entry)

    rates = {}
    per_client = {}
    for (client_id, user_id), minutes in sorted(minutes_by_pair.items()):
        if user_id not in rates:
            rate = UserRate.effective_on(user_id, date_to)
            rates[user_id] = rate.hourly_rate_mad if rate else Decimal('0')

        cost = (Decimal(minutes) / 60 * rates[user_id]).quantize(CENTIMES, rounding=ROUND_HALF_UP)
        totals = per_client.setdefault(client_id, {'minutes': 0, 'cost': Decimal('0')})
        totals['minutes'] += minutes
        totals['cost'] += cost

    return [
        {
            'client_id': client_id,
            'minutes': totals['minutes'],
            'hours': round(totals['minutes'] / 60, 2),
            'cost_mad': str(totals['cost'].quantize(CENTIMES)),
        }
        for client_id, totals in per_client.items()
    ]


def time_csv_rows():
    """Lignes de l'export CSV, en-tête compris, par lots de 1000"""
    yield CSV_HEADER
    entries = TimeEntry.objects.select_related('task').order_by('start_at', 'pk')
    for entry in entries.iterator(chunk_size=1000):
        yield [
            entry.user_id,
            entry.task_id,
            entry.task.client_id,
            timezone.localtime(entry.start_at).strftime('%Y-%m-%d %H:%M:%S'),
            timezone.localtime(entry.end_at).strftime('%Y-%m-%d %H:%M:%S') if entry.end_at else '',
            entry.minutes if entry.minutes is not None else '',
            entry.comment,
        ]


def request_metrics(date_from=None, date_to=None):
    """Indicateurs des demandes clients, filtrés sur la date de création"""
    queryset = ClientRequest.objects.all()
    if date_from:
        queryset = queryset.filter(created_at__date__gte=date_from)
    if date_to:
        queryset = queryset.filter(created_at__date__lte=date_to)

    total = queryset.count()
    by_status = {
        row['status']: row['total']
        for row in queryset.order_by().values('status').annotate(total=Count('id'))
    }
    responded = queryset.filter(responded_at__isnull=False)

    delays = list(
        responded.filter(first_sent_at__isnull=False).values_list('first_sent_at', 'responded_at')
    )
    avg_minutes = None
    if delays:
        total_seconds = sum((answered - sent).total_seconds() for sent, answered in delays)
        avg_minutes = int(round(total_seconds / len(delays) / 60))

    return {
        'total': total,
        'by_status': by_status,
        'responded': responded.count(),
        'avg_response_minutes': avg_minutes,
        'completeness_ratio': round(by_status.get('VALIDE', 0) / max(total, 1), 3),
    }


def user_minutes(user, today=None):
    """Minutes saisies par l'utilisateur depuis le début du mois et de l'année"""
    today = today or timezone.localdate()
    month_start = today + relativedelta(day=1)
    year_start = today + relativedelta(month=1, day=1)

    minutes_month = 0
    minutes_year = 0
    for entry in entries_between(year_start, today).filter(user=user):
        minutes = entry_minutes(entry)
        minutes_year += minutes
        if timezone.localtime(entry.start_at).date() >= month_start:
            minutes_month += minutes

    return {
        'minutes_month': minutes_month,
        'minutes_year': minutes_year,
    }


def overview(access):
    """
    Chiffres du tableau de bord

    Les documents confidentiels ne sont ni listés ni comptés pour un acteur
    qui ne peut pas les voir.
    """
    documents = visible_documents(ClientDocument.objects.order_by('-created_at'), access)
    status_counts = dict(
        Task.objects.order_by().values_list('status').annotate(total=Count('id'))
    )
    overdue = Task.objects.filter(
        status__in=Task.STATUTS_OUVERTS,
        due_at__isnull=False,
        due_at__lt=timezone.now()
    ).count()

    return {
        'counts': {
            'clients': Client.objects.count(),
            'portfolios': Portfolio.objects.count(),
            'docs': documents.count(),
        },
        'recent_docs': list(
            documents.values('id', 'client_id', 'title', 'category', 'created_at')[:10]
        ),
        'recent_clients': list(
            Client.objects.order_by('-created_at').values('id', 'raison_sociale', 'created_at')[:10]
        ),
        'tasks_status': {code: status_counts.get(code, 0) for code, _ in Task.STATUTS},
        'overdue': overdue,
    }
