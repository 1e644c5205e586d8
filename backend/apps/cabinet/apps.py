from django.apps import AppConfig


class CabinetConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.cabinet'
    verbose_name = 'Cabinet'
