# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from apps.core.models import MemberInvite, Union, User, UserPropertyUnit


@admin.register(Union)
class UnionAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "slug", "business_type", "kakao_channel_id", "is_active")
    list_filter = ("is_active", "business_type")
    search_fields = ("name", "slug")


class UserPropertyUnitInline(admin.TabularInline):
    model = UserPropertyUnit
    extra = 0


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("id", "username", "name", "union", "role", "user_status", "is_active")
    list_filter = ("role", "user_status", "union")
    search_fields = ("username", "name", "phone")
    inlines = [UserPropertyUnitInline]
    fieldsets = BaseUserAdmin.fieldsets + (
        (
            "조합",
            {
                "fields": (
                    "union",
                    "role",
                    "user_status",
                    "name",
                    "phone",
                    "property_address",
                    "property_address_jibun",
                    "property_dong",
                    "property_ho",
                )
            },
        ),
    )


@admin.register(MemberInvite)
class MemberInviteAdmin(admin.ModelAdmin):
    list_display = ("id", "union", "name", "phone", "expires_at", "used_at")
    list_filter = ("union",)
