from django.conf import settings
from django.db import models
from django.utils import timezone


class ClientRequest(models.Model):
    """
    Demande client : pièces ou informations attendues du client,
    avec fil de discussion, pièces jointes et relances
    """

    STATUTS = [
        ('EN_ATTENTE', 'En attente'),
        ('EN_RELANCE', 'En relance'),
        ('RECU', 'Reçu'),
        ('INCOMPLET', 'Incomplet'),
        ('VALIDE', 'Validé'),
    ]

    client = models.ForeignKey(
        'Client',
        on_delete=models.CASCADE,
        related_name='requests'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='created_requests'
    )
    task = models.ForeignKey(
        'Task',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='requests'
    )

    title = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=STATUTS, default='EN_ATTENTE')
    due_date = models.DateField(null=True, blank=True)
    period_from = models.DateField(null=True, blank=True)
    period_to = models.DateField(null=True, blank=True)

    # Suivi des relances
    reminders_count = models.PositiveIntegerField(default=0)
    first_sent_at = models.DateTimeField(null=True, blank=True)
    responded_at = models.DateTimeField(null=True, blank=True)
    reminders = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'requests'
        verbose_name = "Demande client"
        verbose_name_plural = "Demandes clients"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='request_status_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.get_status_display()})"

    def remind(self, by, note=None):
        """Enregistre une relance et passe la demande EN_RELANCE"""
        now = timezone.now()
        self.reminders = list(self.reminders or []) + [{
            'at': now.isoformat(),
            'by': by.pk,
            'note': note,
        }]
        self.reminders_count = (self.reminders_count or 0) + 1
        self.status = 'EN_RELANCE'
        if not self.first_sent_at:
            self.first_sent_at = now
        self.save(update_fields=[
            'reminders', 'reminders_count', 'status', 'first_sent_at', 'updated_at'
        ])


def request_file_path(instance, filename):
    return f"requests/{instance.request_id}/{filename}"


class RequestFile(models.Model):
    request = models.ForeignKey(
        ClientRequest,
        on_delete=models.CASCADE,
        related_name='files'
    )
    file = models.FileField(upload_to=request_file_path, max_length=500)
    original_name = models.CharField(max_length=255)
    size_bytes = models.PositiveBigIntegerField(default=0)
    mime_type = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Pièce jointe"
        verbose_name_plural = "Pièces jointes"
        ordering = ['created_at']

    def __str__(self):
        return self.original_name


class RequestMessage(models.Model):
    request = models.ForeignKey(
        ClientRequest,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='request_messages'
    )
    message_html = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Message"
        verbose_name_plural = "Messages"
        ordering = ['created_at']

    def __str__(self):
        return f"Message #{self.pk} sur {self.request_id}"
