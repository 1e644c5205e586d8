from django.core.exceptions import ValidationError
from django.db import models, transaction


class Permission(models.Model):
    """
    Capacité atomique nommée (ex: clients.view, users.rate.set)
    Les permissions n'ont pas de hiérarchie : chacune s'accorde indépendamment.
    """

    name = models.CharField(max_length=100, unique=True)
    description = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Permission"
        verbose_name_plural = "Permissions"
        ordering = ['name']

    def __str__(self):
        return self.name


class Role(models.Model):
    """
    Ensemble nommé de permissions (ADMIN, CHEF_EQUIPE, COLLABORATEUR, ASSISTANT)
    """

    name = models.CharField(max_length=50, unique=True)
    description = models.CharField(max_length=255, blank=True)
    permissions = models.ManyToManyField(
        Permission,
        blank=True,
        related_name='roles'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Rôle"
        verbose_name_plural = "Rôles"
        ordering = ['name']

    def __str__(self):
        return self.name

    def permission_names(self):
        return list(self.permissions.values_list('name', flat=True))

    def sync_permissions(self, permissions):
        """Remplace l'ensemble des permissions du rôle"""
        with transaction.atomic():
            self.permissions.set(resolve_named(Permission, permissions))


def resolve_named(model, items):
    """
    Convertit une liste de noms (ou d'instances) en instances du modèle.
    Lève une ValidationError si un nom est inconnu.
    """
    instances = [item for item in items if isinstance(item, model)]
    names = {item for item in items if not isinstance(item, model)}
    if not names:
        return instances

    found = list(model.objects.filter(name__in=names))
    missing = names - {obj.name for obj in found}
    if missing:
        raise ValidationError(
            f"{model._meta.verbose_name} inconnu(e)(s) : {', '.join(sorted(missing))}"
        )
    return instances + found
