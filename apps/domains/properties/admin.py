from django.contrib import admin

from apps.domains.properties.models import BuildingUnit, LandLot, Owner


@admin.register(LandLot)
class LandLotAdmin(admin.ModelAdmin):
    list_display = ("id", "union", "pnu", "address")
    list_filter = ("union",)
    search_fields = ("pnu", "address")


@admin.register(BuildingUnit)
class BuildingUnitAdmin(admin.ModelAdmin):
    list_display = ("id", "land_lot", "building_name", "dong", "ho")
    search_fields = ("building_name", "land_lot__address")


@admin.register(Owner)
class OwnerAdmin(admin.ModelAdmin):
    list_display = ("id", "union", "name", "phone", "building_unit", "user")
    list_filter = ("union",)
    search_fields = ("name", "phone")
