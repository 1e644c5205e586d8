from django.conf import settings
from django.db import models


def client_document_path(instance, filename):
    return f"clients/{instance.client_id}/{filename}"


class ClientDocument(models.Model):
    """
    Document du dossier client ; les documents confidentiels sont réservés
    aux administrateurs et chefs d'équipe
    """

    client = models.ForeignKey(
        'Client',
        on_delete=models.CASCADE,
        related_name='documents'
    )
    category = models.CharField(max_length=100, blank=True)
    title = models.CharField(max_length=255)
    file = models.FileField(upload_to=client_document_path, max_length=500)
    mime = models.CharField(max_length=255, blank=True)
    size = models.PositiveBigIntegerField(default=0)
    is_confidential = models.BooleanField(default=False)

    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='uploaded_documents'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Document client"
        verbose_name_plural = "Documents clients"
        ordering = ['-created_at']

    def __str__(self):
        return self.title
