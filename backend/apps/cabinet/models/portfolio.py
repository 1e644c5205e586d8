from django.conf import settings
from django.db import models


class Portfolio(models.Model):
    """
    Portefeuille : regroupement de clients suivi par une équipe de collaborateurs
    """

    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True)

    collaborators = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name='portfolios',
        help_text="Collaborateurs ayant accès au portefeuille et à ses clients"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Portefeuille"
        verbose_name_plural = "Portefeuilles"
        ordering = ['-created_at']

    def __str__(self):
        return self.name
