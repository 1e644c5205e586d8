from datetime import timedelta

from django.core.files.base import ContentFile
from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.cabinet.models import (
    Client, ClientRequest, Portfolio, RequestFile, RequestMessage, Task, TimeEntry
)
from apps.users.models import User

DEMO_CLIENTS = [
    ('Portefeuille A', 'Société Alpha'),
    ('Portefeuille A', 'Société Beta'),
    ('Portefeuille A', 'Société Gamma'),
    ('Portefeuille B', 'Société Delta'),
    ('Portefeuille B', 'Société Epsilon'),
    ('Portefeuille B', 'Société Zeta'),
]


class Command(BaseCommand):
    help = 'Crée un jeu de démonstration : portefeuilles, clients, tâches, temps et demandes'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Supprimer les portefeuilles existants (et leurs données) avant la création'
        )

    def handle(self, *args, **options):
        call_command('seed_users', stdout=self.stdout)

        with transaction.atomic():
            if options['clear']:
                Portfolio.objects.all().delete()
                self.stdout.write(self.style.WARNING('Portefeuilles existants supprimés'))

            clients = self.create_clients()
            tasks = self.create_tasks(clients)
            self.create_requests(clients[0], tasks[0])

        self.stdout.write(
            self.style.SUCCESS(
                f'Démonstration prête : {len(clients)} client(s), {len(tasks)} tâche(s)'
            )
        )

    def create_clients(self):
        collab = User.objects.get(email='collab@example.com')
        clients = []
        for portfolio_name, raison_sociale in DEMO_CLIENTS:
            portfolio, _ = Portfolio.objects.get_or_create(
                name=portfolio_name,
                defaults={'description': f'Groupe {portfolio_name[-1]}'}
            )
            client, _ = Client.objects.get_or_create(
                portfolio=portfolio,
                raison_sociale=raison_sociale,
                defaults={'type_mission': 'Comptable', 'montant_contrat': 10000}
            )
            clients.append(client)

        # Le collaborateur de démonstration suit le portefeuille A
        Portfolio.objects.get(name='Portefeuille A').collaborators.add(collab)
        return clients

    def create_tasks(self, clients):
        owner = User.objects.get(email='chef@example.com')
        assignee = User.objects.get(email='collab@example.com')
        categories = [code for code, _ in Task.CATEGORIES]
        statuses = [code for code, _ in Task.STATUTS]
        now = timezone.now()

        tasks = []
        for i in range(1, 11):
            task = Task.objects.create(
                client=clients[i % len(clients)],
                owner=owner,
                category=categories[i % len(categories)],
                nature='CONTINUE' if i % 2 == 0 else 'PONCTUELLE',
                status=statuses[i % len(statuses)],
                priority=i % 5,
                progress=(i * 10) % 100,
                starts_at=now - timedelta(days=i),
                due_at=now + timedelta(days=i * 3),
                notes=f'Tâche de démonstration n°{i}'
            )
            task.assignees.add(assignee)
            tasks.append(task)

        for task in tasks[:3]:
            TimeEntry.objects.create(
                user=assignee,
                task=task,
                start_at=now - timedelta(hours=3),
                end_at=now - timedelta(hours=1),
                duration_min=120,
                comment='Travaux initiaux'
            )
        return tasks

    def create_requests(self, client, task):
        creator = User.objects.get(email='assistant@example.com')
        for i in range(1, 4):
            client_request = ClientRequest.objects.create(
                client=client,
                task=task,
                created_by=creator,
                title=f'Pièces comptables {i}',
                due_date=timezone.localdate() + timedelta(days=i * 3)
            )
            RequestMessage.objects.create(
                request=client_request,
                user=creator,
                message_html='<p>Merci de fournir les pièces demandées.</p>'
            )
            content = f'Fichier de démonstration pour la demande #{client_request.pk}'.encode()
            request_file = RequestFile(
                request=client_request,
                original_name='LISEZMOI.txt',
                size_bytes=len(content),
                mime_type='text/plain'
            )
            request_file.file.save('LISEZMOI.txt', ContentFile(content), save=True)
