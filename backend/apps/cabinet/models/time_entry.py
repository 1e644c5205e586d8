from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models


class TimeEntry(models.Model):
    """
    Temps passé par un collaborateur sur une tâche

    La durée explicite (duration_min) prime ; à défaut elle est dérivée
    de l'intervalle start_at / end_at.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='time_entries'
    )
    task = models.ForeignKey(
        'Task',
        on_delete=models.CASCADE,
        related_name='time_entries'
    )

    start_at = models.DateTimeField()
    end_at = models.DateTimeField(null=True, blank=True)
    duration_min = models.PositiveIntegerField(null=True, blank=True)
    comment = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Temps passé"
        verbose_name_plural = "Temps passés"
        ordering = ['-start_at']
        indexes = [
            models.Index(fields=['start_at'], name='time_entry_start_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.task_id} ({self.start_at:%Y-%m-%d %H:%M})"

    def clean(self):
        if self.start_at and self.end_at and self.end_at < self.start_at:
            raise ValidationError("La fin doit être postérieure au début")

    @property
    def is_running(self):
        return self.end_at is None and self.duration_min is None

    @property
    def minutes(self):
        """Durée en minutes, ou None tant que le chrono tourne"""
        if self.duration_min is not None:
            return int(self.duration_min)
        if self.start_at and self.end_at:
            return round((self.end_at - self.start_at).total_seconds() / 60)
        return None
