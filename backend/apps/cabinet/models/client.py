from django.conf import settings
from django.db import models


class Client(models.Model):
    """
    Client du cabinet, rattaché à un seul portefeuille
    """

    portfolio = models.ForeignKey(
        'Portfolio',
        on_delete=models.CASCADE,
        related_name='clients'
    )

    # Identification
    raison_sociale = models.CharField(max_length=255)
    rc = models.CharField(max_length=255, blank=True, help_text="Registre du commerce")
    identifiant_fiscal = models.CharField(max_length=255, blank=True, help_text="Identifiant fiscal (IF)")
    ice = models.CharField(max_length=255, blank=True, help_text="Identifiant commun de l'entreprise")
    adresse = models.CharField(max_length=500, blank=True)

    # Informations juridiques
    forme_juridique = models.CharField(max_length=255, blank=True)
    statut_juridique = models.CharField(max_length=255, blank=True)
    date_creation = models.DateField(null=True, blank=True)
    capital_social = models.DecimalField(max_digits=15, decimal_places=2, null=True, blank=True)
    associes = models.JSONField(default=list, blank=True)
    regime_fiscal = models.CharField(max_length=255, blank=True)

    # Mission
    date_debut_collaboration = models.DateField(null=True, blank=True)
    responsable_client = models.CharField(max_length=255, blank=True)
    telephone = models.CharField(max_length=30, blank=True)
    email = models.EmailField(blank=True)
    type_mission = models.CharField(max_length=255, blank=True)
    montant_contrat = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Montant du contrat (réservé aux administrateurs et chefs d'équipe)"
    )

    collaborators = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name='collaborating_clients',
        help_text="Collaborateurs affectés directement au client"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Client"
        verbose_name_plural = "Clients"
        ordering = ['-created_at']

    def __str__(self):
        return self.raison_sociale
