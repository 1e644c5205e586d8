from django.conf import settings
from django.db import models


class UserRate(models.Model):
    """
    Taux horaire (MAD) d'un collaborateur, historisé par date d'effet
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='rates'
    )
    hourly_rate_mad = models.DecimalField(max_digits=10, decimal_places=2)
    effective_from = models.DateField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Taux horaire"
        verbose_name_plural = "Taux horaires"
        ordering = ['user', '-effective_from']
        constraints = [
            models.UniqueConstraint(fields=['user', 'effective_from'], name='unique_user_rate_per_day'),
        ]

    def __str__(self):
        return f"{self.user} - {self.hourly_rate_mad} MAD ({self.effective_from})"

    @classmethod
    def current_for(cls, user):
        """
        Taux "courant" : le plus récent par date d'effet, sans filtrer les dates futures
        """
        return cls.objects.filter(user=user).order_by('-effective_from').first()

    @classmethod
    def effective_on(cls, user_id, day):
        """Taux applicable à une date donnée"""
        return cls.objects.filter(
            user_id=user_id,
            effective_from__lte=day
        ).order_by('-effective_from').first()
