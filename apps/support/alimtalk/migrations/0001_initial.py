# PATH: apps/support/alimtalk/migrations/0001_initial.py
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
            name="AlimtalkTemplate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("template_code", models.CharField(max_length=50, unique=True)),
                ("template_name", models.CharField(max_length=255)),
                ("template_content", models.TextField(blank=True, default="")),
                ("status", models.CharField(blank=True, default="", max_length=20)),
                ("insp_status", models.CharField(blank=True, default="", help_text="검수 상태", max_length=20)),
                ("buttons", models.JSONField(blank=True, default=list)),
                (
                    "lms_failover",
                    models.BooleanField(default=False, help_text="알림톡 실패 시 SMS/LMS 대체 발송"),
                ),
                ("synced_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "alimtalk_templates",
                "ordering": ["template_code"],
            },
        ),
        migrations.CreateModel(
            name="AlimtalkLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("notice_id", models.BigIntegerField(blank=True, null=True)),
                ("title", models.CharField(blank=True, default="", max_length=255)),
                ("content", models.TextField(blank=True, default="")),
                ("template_code", models.CharField(blank=True, db_index=True, default="", max_length=50)),
                ("template_name", models.CharField(blank=True, default="", max_length=255)),
                ("sender_channel_name", models.CharField(blank=True, default="조합온", max_length=100)),
                ("recipient_count", models.PositiveIntegerField(default=0)),
                ("success_count", models.PositiveIntegerField(default=0)),
                ("kakao_success_count", models.PositiveIntegerField(default=0)),
                ("sms_success_count", models.PositiveIntegerField(default=0)),
                ("fail_count", models.PositiveIntegerField(default=0)),
                ("cost_per_msg", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=10)),
                ("estimated_cost", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=12)),
                ("recipient_details", models.JSONField(blank=True, default=list)),
                ("provider_response", models.JSONField(blank=True, null=True)),
                ("sent_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "sender",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="alimtalk_logs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "union",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="alimtalk_logs",
                        to="core.union",
                    ),
                ),
            ],
            options={
                "db_table": "alimtalk_logs",
                "ordering": ["-sent_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="AlimtalkPricing",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "message_type",
                    models.CharField(
                        choices=[("KAKAO", "알림톡"), ("SMS", "SMS"), ("LMS", "LMS")],
                        db_index=True,
                        max_length=10,
                    ),
                ),
                ("unit_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("effective_from", models.DateTimeField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "alimtalk_pricing",
                "ordering": ["message_type", "-effective_from"],
            },
        ),
    ]
