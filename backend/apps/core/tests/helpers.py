"""
Données de test partagées : habilitations, utilisateurs, clients, tâches
"""

from decimal import Decimal
from io import StringIO

from django.core.management import call_command

from apps.cabinet.models import Client, Portfolio, Task
from apps.users.models import Role, User

PASSWORD = 'Motdepasse-Solide-2024'


def seed_roles():
    call_command('seed_roles', stdout=StringIO())


def set_role_permissions(role_name, permissions):
    Role.objects.get(name=role_name).sync_permissions(permissions)


def make_user(email, *roles, permissions=()):
    user = User.objects.create_user(email=email, password=PASSWORD)
    if roles:
        user.sync_roles(list(roles))
    if permissions:
        user.sync_direct_permissions(list(permissions))
    return user


def make_portfolio(name='Portefeuille A'):
    return Portfolio.objects.create(name=name, description=f'Groupe {name}')


def make_client(raison_sociale='Société Alpha', portfolio=None, **extra):
    if portfolio is None:
        portfolio = make_portfolio(f'Portefeuille {raison_sociale}')
    extra.setdefault('montant_contrat', Decimal('10000.00'))
    return Client.objects.create(portfolio=portfolio, raison_sociale=raison_sociale, **extra)


def make_task(client=None, owner=None, **extra):
    extra.setdefault('category', 'COMPTABLE')
    extra.setdefault('nature', 'CONTINUE')
    return Task.objects.create(client=client or make_client(), owner=owner, **extra)
