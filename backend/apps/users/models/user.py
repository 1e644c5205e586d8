from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager
from django.db import models, transaction

from .role import Permission, Role, resolve_named


class UserManager(DjangoUserManager):
    """L'email sert d'identifiant de connexion ; le username en est dérivé par défaut"""

    def create_user(self, email, password=None, **extra_fields):
        username = extra_fields.pop('username', None) or email
        return super().create_user(username, email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        username = extra_fields.pop('username', None) or email
        return super().create_superuser(username, email, password, **extra_fields)


class User(AbstractUser):
    """
    Modèle utilisateur personnalisé pour Espace Compta
    """
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255, blank=True, help_text="Nom affiché")
    phone = models.CharField(max_length=30, blank=True)
    internal_id = models.CharField(max_length=255, unique=True, null=True, blank=True)
    job_title = models.CharField(max_length=255, blank=True)

    # Objectifs d'heures facturables
    monthly_hours_target = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    yearly_hours_target = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)

    # Habilitations
    roles = models.ManyToManyField(Role, blank=True, related_name='users')
    direct_permissions = models.ManyToManyField(
        Permission,
        blank=True,
        related_name='users',
        help_text="Permissions accordées en plus de celles des rôles"
    )

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    objects = UserManager()

    class Meta:
        verbose_name = "Utilisateur"
        verbose_name_plural = "Utilisateurs"
        ordering = ['name', 'email']

    def __str__(self):
        return self.name or self.email

    def save(self, *args, **kwargs):
        if not self.name:
            self.name = self._derive_display_name()
        super().save(*args, **kwargs)

    def _derive_display_name(self):
        full = f"{self.first_name} {self.last_name}".strip()
        if full:
            return full
        return (self.email or '').split('@')[0]

    def role_names(self):
        return set(self.roles.values_list('name', flat=True))

    def permission_names(self):
        """Union des permissions des rôles détenus et des permissions directes"""
        via_roles = Permission.objects.filter(roles__users=self).values_list('name', flat=True)
        direct = self.direct_permissions.values_list('name', flat=True)
        return set(via_roles) | set(direct)

    def sync_roles(self, roles):
        with transaction.atomic():
            self.roles.set(resolve_named(Role, roles))

    def sync_direct_permissions(self, permissions):
        with transaction.atomic():
            self.direct_permissions.set(resolve_named(Permission, permissions))
