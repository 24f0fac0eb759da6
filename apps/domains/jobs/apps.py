from django.apps import AppConfig


class JobsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.jobs"
    label = "jobs"
    verbose_name = "Sync jobs (비동기 작업 추적)"
