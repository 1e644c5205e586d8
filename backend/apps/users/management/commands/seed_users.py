from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.users.constants import (
    ROLE_ADMIN, ROLE_ASSISTANT, ROLE_CHEF_EQUIPE, ROLE_COLLABORATEUR
)
from apps.users.models import User

DEMO_USERS = [
    ('Admin', 'admin@example.com', ROLE_ADMIN),
    ('Chef Equipe', 'chef@example.com', ROLE_CHEF_EQUIPE),
    ('Collaborateur', 'collab@example.com', ROLE_COLLABORATEUR),
    ('Assistant', 'assistant@example.com', ROLE_ASSISTANT),
]


class Command(BaseCommand):
    help = 'Crée les comptes de démonstration (un par rôle)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--password',
            type=str,
            default='password',
            help='Mot de passe des comptes de démonstration'
        )

    def handle(self, *args, **options):
        call_command('seed_roles', keep_matrix=True, stdout=self.stdout)

        with transaction.atomic():
            for name, email, role in DEMO_USERS:
                user, created = User.objects.get_or_create(
                    email=email,
                    defaults={'username': email, 'name': name}
                )
                user.name = name
                user.set_password(options['password'])
                user.is_staff = role == ROLE_ADMIN
                user.save()
                user.sync_roles([role])

                self.stdout.write(
                    f"{'Créé' if created else 'Mis à jour'} : {email} ({role})"
                )

        self.stdout.write(self.style.SUCCESS('Comptes de démonstration prêts'))
