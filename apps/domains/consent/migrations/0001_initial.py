# PATH: apps/domains/consent/migrations/0001_initial.py
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

BUSINESS_TYPE_CHOICES = [
    ("REDEVELOPMENT", "재개발"),
    ("RECONSTRUCTION", "재건축"),
    ("HOUSING_ASSOCIATION", "지역주택조합"),
    ("STREET_HOUSING", "가로주택정비"),
    ("SMALL_RECONSTRUCTION", "소규모재건축"),
]

CONSENT_STATUS_CHOICES = [
    ("AGREED", "동의"),
    ("DISAGREED", "비동의"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("properties", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ConsentStage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("business_type", models.CharField(choices=BUSINESS_TYPE_CHOICES, db_index=True, max_length=30)),
                ("stage_code", models.CharField(max_length=50)),
                ("stage_name", models.CharField(max_length=100)),
                ("required_rate", models.PositiveSmallIntegerField(default=75)),
                ("sort_order", models.IntegerField(default=0)),
            ],
            options={
                "db_table": "consent_stages",
                "ordering": ["business_type", "sort_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="UserConsent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=CONSENT_STATUS_CHOICES, max_length=20)),
                ("consent_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "stage",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="user_consents",
                        to="consent.consentstage",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="consents",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "user_consents",
                "ordering": ["-updated_at"],
            },
        ),
        migrations.CreateModel(
            name="OwnerConsent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=CONSENT_STATUS_CHOICES, max_length=20)),
                ("consent_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="consents",
                        to="properties.owner",
                    ),
                ),
                (
                    "stage",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="owner_consents",
                        to="consent.consentstage",
                    ),
                ),
            ],
            options={
                "db_table": "owner_consents",
                "ordering": ["-updated_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="consentstage",
            constraint=models.UniqueConstraint(
                fields=("business_type", "stage_code"),
                name="consent_stage_business_type_code_unique",
            ),
        ),
        migrations.AddConstraint(
            model_name="userconsent",
            constraint=models.UniqueConstraint(
                fields=("user", "stage"),
                name="consent_userconsent_user_stage_unique",
            ),
        ),
        migrations.AddConstraint(
            model_name="ownerconsent",
            constraint=models.UniqueConstraint(
                fields=("owner", "stage"),
                name="consent_ownerconsent_owner_stage_unique",
            ),
        ),
    ]
