from django.apps import AppConfig


class PropertiesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.properties"
    label = "properties"
    verbose_name = "Properties (토지/건물/소유자)"
