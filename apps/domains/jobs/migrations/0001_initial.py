# PATH: apps/domains/jobs/migrations/0001_initial.py
import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="SyncJob",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("job_type", models.CharField(db_index=True, max_length=50)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PENDING", "대기"),
                            ("PROCESSING", "처리 중"),
                            ("COMPLETED", "완료"),
                            ("FAILED", "실패"),
                        ],
                        db_index=True,
                        default="PENDING",
                        max_length=20,
                    ),
                ),
                ("progress", models.PositiveSmallIntegerField(default=0)),
                ("preview_data", models.JSONField(blank=True, default=dict)),
                ("error_log", models.TextField(blank=True, default="")),
                (
                    "union",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sync_jobs",
                        to="core.union",
                    ),
                ),
            ],
            options={
                "db_table": "sync_jobs",
                "ordering": ["-created_at"],
            },
        ),
    ]
