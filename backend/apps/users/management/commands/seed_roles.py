from django.core.management.base import BaseCommand
from django.db import transaction

from apps.users.constants import DEFAULT_ROLE_PERMISSIONS, PERMISSIONS
from apps.users.models import Permission, Role


class Command(BaseCommand):
    help = 'Crée le catalogue des permissions et la matrice des rôles par défaut'

    def add_arguments(self, parser):
        parser.add_argument(
            '--keep-matrix',
            action='store_true',
            help='Ne pas réinitialiser les permissions des rôles existants'
        )

    def handle(self, *args, **options):
        with transaction.atomic():
            created_perms = 0
            for name, description in PERMISSIONS:
                _, created = Permission.objects.update_or_create(
                    name=name,
                    defaults={'description': description}
                )
                if created:
                    created_perms += 1

            created_roles = 0
            for role_name, permission_names in DEFAULT_ROLE_PERMISSIONS.items():
                role, created = Role.objects.get_or_create(name=role_name)
                if created:
                    created_roles += 1
                if created or not options['keep_matrix']:
                    role.sync_permissions(permission_names)

        self.stdout.write(
            self.style.SUCCESS(
                f'Habilitations prêtes : {created_perms} permission(s) et '
                f'{created_roles} rôle(s) créés'
            )
        )
