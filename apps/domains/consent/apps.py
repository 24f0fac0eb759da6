from django.apps import AppConfig


class ConsentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.consent"
    label = "consent"
    verbose_name = "Consent (동의 단계 / 동의 현황)"
