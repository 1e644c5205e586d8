from django.conf import settings
from django.core.validators import MaxValueValidator
from django.db import models
from django.utils import timezone


class Task(models.Model):
    """
    Tâche facturable sur un client (tenue comptable, déclaration, etc.)
    - un responsable unique (owner) et des collaborateurs affectés
    - statut : EN_ATTENTE -> EN_COURS -> EN_VALIDATION -> TERMINEE
    """

    CATEGORIES = [
        ('COMPTABLE', 'Comptable'),
        ('FISCALE', 'Fiscale'),
        ('SOCIALE', 'Sociale'),
        ('JURIDIQUE', 'Juridique'),
        ('AUTRE', 'Autre'),
    ]

    NATURES = [
        ('CONTINUE', 'Continue'),
        ('PONCTUELLE', 'Ponctuelle'),
    ]

    STATUTS = [
        ('EN_ATTENTE', 'En attente'),
        ('EN_COURS', 'En cours'),
        ('EN_VALIDATION', 'En validation'),
        ('TERMINEE', 'Terminée'),
    ]

    STATUTS_OUVERTS = ['EN_ATTENTE', 'EN_COURS', 'EN_VALIDATION']

    client = models.ForeignKey(
        'Client',
        on_delete=models.CASCADE,
        related_name='tasks'
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='owned_tasks'
    )
    assignees = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name='assigned_tasks'
    )

    category = models.CharField(max_length=20, choices=CATEGORIES)
    nature = models.CharField(max_length=20, choices=NATURES)
    status = models.CharField(max_length=20, choices=STATUTS, default='EN_ATTENTE')
    priority = models.PositiveSmallIntegerField(default=0, validators=[MaxValueValidator(255)])
    progress = models.PositiveSmallIntegerField(
        default=0,
        validators=[MaxValueValidator(100)],
        help_text="Avancement en pourcentage (0-100)"
    )

    starts_at = models.DateTimeField(null=True, blank=True)
    due_at = models.DateTimeField(null=True, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Tâche"
        verbose_name_plural = "Tâches"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='task_status_idx'),
        ]

    def __str__(self):
        return f"{self.get_category_display()} - {self.client}"

    @property
    def is_overdue(self):
        return (
            self.status in self.STATUTS_OUVERTS
            and self.due_at is not None
            and self.due_at < timezone.now()
        )
