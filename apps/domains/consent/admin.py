from django.contrib import admin

from apps.domains.consent.models import ConsentStage, OwnerConsent, UserConsent


@admin.register(ConsentStage)
class ConsentStageAdmin(admin.ModelAdmin):
    list_display = ("id", "business_type", "sort_order", "stage_code", "stage_name", "required_rate")
    list_filter = ("business_type",)


@admin.register(UserConsent)
class UserConsentAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "stage", "status", "consent_date", "updated_at")
    list_filter = ("status", "stage")


@admin.register(OwnerConsent)
class OwnerConsentAdmin(admin.ModelAdmin):
    list_display = ("id", "owner", "stage", "status", "consent_date", "updated_at")
    list_filter = ("status", "stage")
