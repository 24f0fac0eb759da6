from django.apps import AppConfig


class AlimtalkConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.support.alimtalk"
    label = "alimtalk"
    verbose_name = "Alimtalk (템플릿 / 발송 로그 / 단가)"
