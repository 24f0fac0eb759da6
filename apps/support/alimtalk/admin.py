from django.contrib import admin

from apps.support.alimtalk.models import AlimtalkLog, AlimtalkPricing, AlimtalkTemplate


@admin.register(AlimtalkTemplate)
class AlimtalkTemplateAdmin(admin.ModelAdmin):
    list_display = ("template_code", "template_name", "status", "insp_status", "lms_failover", "synced_at")
    list_filter = ("status", "lms_failover")
    search_fields = ("template_code", "template_name")


@admin.register(AlimtalkLog)
class AlimtalkLogAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "union",
        "title",
        "template_code",
        "sender_channel_name",
        "recipient_count",
        "kakao_success_count",
        "sms_success_count",
        "fail_count",
        "estimated_cost",
        "sent_at",
    )
    list_filter = ("sender_channel_name",)


@admin.register(AlimtalkPricing)
class AlimtalkPricingAdmin(admin.ModelAdmin):
    list_display = ("message_type", "unit_price", "effective_from", "created_at")
    list_filter = ("message_type",)
