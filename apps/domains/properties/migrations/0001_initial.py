# PATH: apps/domains/properties/migrations/0001_initial.py
from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="LandLot",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("pnu", models.CharField(help_text="필지고유번호 (19자리)", max_length=19)),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                ("area", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                (
                    "union",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="land_lots",
                        to="core.union",
                    ),
                ),
            ],
            options={
                "db_table": "land_lots",
                "ordering": ["pnu"],
            },
        ),
        migrations.CreateModel(
            name="BuildingUnit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("building_name", models.CharField(blank=True, default="", max_length=100)),
                ("dong", models.CharField(blank=True, default="", max_length=20)),
                ("ho", models.CharField(blank=True, default="", max_length=20)),
                (
                    "land_lot",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="building_units",
                        to="properties.landlot",
                    ),
                ),
            ],
            options={
                "db_table": "building_units",
                "ordering": ["land_lot_id", "dong", "ho"],
            },
        ),
        migrations.CreateModel(
            name="Owner",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=50)),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("share_ratio", models.DecimalField(decimal_places=4, default=Decimal("1"), max_digits=7)),
                (
                    "building_unit",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="owners",
                        to="properties.buildingunit",
                    ),
                ),
                (
                    "union",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="owners",
                        to="core.union",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="owner_records",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "owners",
                "ordering": ["id"],
            },
        ),
        migrations.AddConstraint(
            model_name="landlot",
            constraint=models.UniqueConstraint(
                fields=("union", "pnu"),
                name="properties_landlot_union_pnu_unique",
            ),
        ),
    ]
