# PATH: apps/core/migrations/0001_initial.py
import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="Union",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=100, unique=True)),
                ("phone", models.CharField(blank=True, default="", max_length=50)),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                ("business_hours", models.CharField(blank=True, default="", max_length=255)),
                (
                    "business_type",
                    models.CharField(
                        choices=[
                            ("REDEVELOPMENT", "재개발"),
                            ("RECONSTRUCTION", "재건축"),
                            ("HOUSING_ASSOCIATION", "지역주택조합"),
                            ("STREET_HOUSING", "가로주택정비"),
                            ("SMALL_RECONSTRUCTION", "소규모재건축"),
                        ],
                        default="REDEVELOPMENT",
                        max_length=30,
                    ),
                ),
                ("kakao_channel_id", models.CharField(blank=True, default="", max_length=100)),
                ("alimtalk_sender_key", models.CharField(blank=True, default="", max_length=100)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "unions",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "username",
                    models.CharField(
                        error_messages={"unique": "A user with that username already exists."},
                        help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.",
                        max_length=150,
                        unique=True,
                        validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                        verbose_name="username",
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Designates whether the user can log into this admin site.",
                        verbose_name="staff status",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.",
                        verbose_name="active",
                    ),
                ),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("SYSTEM_ADMIN", "시스템 관리자"),
                            ("ADMIN", "조합 관리자"),
                            ("USER", "조합원"),
                        ],
                        default="USER",
                        max_length=20,
                    ),
                ),
                (
                    "user_status",
                    models.CharField(
                        choices=[
                            ("PENDING_APPROVAL", "승인 대기"),
                            ("APPROVED", "승인"),
                            ("REJECTED", "반려"),
                            ("PRE_REGISTERED", "사전 등록"),
                            ("BLOCKED", "차단"),
                        ],
                        db_index=True,
                        default="PENDING_APPROVAL",
                        max_length=20,
                    ),
                ),
                ("name", models.CharField(blank=True, default="", max_length=50)),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("property_address", models.CharField(blank=True, default="", max_length=255)),
                ("property_address_jibun", models.CharField(blank=True, default="", max_length=255)),
                ("property_dong", models.CharField(blank=True, default="", max_length=20)),
                ("property_ho", models.CharField(blank=True, default="", max_length=20)),
                (
                    "union",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="members",
                        to="core.union",
                    ),
                ),
                ("groups", models.ManyToManyField(blank=True, related_name="core_users", to="auth.group")),
                ("user_permissions", models.ManyToManyField(blank=True, related_name="core_users", to="auth.permission")),
            ],
            options={
                "db_table": "users",
                "ordering": ["-id"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="UserPropertyUnit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("pnu", models.CharField(blank=True, db_index=True, default="", max_length=19)),
                ("property_address_jibun", models.CharField(blank=True, default="", max_length=255)),
                ("dong", models.CharField(blank=True, default="", max_length=20)),
                ("ho", models.CharField(blank=True, default="", max_length=20)),
                ("is_primary", models.BooleanField(default=False)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="property_units",
                        to="core.user",
                    ),
                ),
            ],
            options={
                "db_table": "user_property_units",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="MemberInvite",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=50)),
                ("phone", models.CharField(max_length=20)),
                ("property_address", models.CharField(blank=True, default="", max_length=255)),
                ("token", models.CharField(max_length=64, unique=True)),
                ("expires_at", models.DateTimeField()),
                ("used_at", models.DateTimeField(blank=True, null=True)),
                (
                    "union",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="member_invites",
                        to="core.union",
                    ),
                ),
            ],
            options={
                "db_table": "member_invites",
                "ordering": ["-created_at"],
            },
        ),
    ]
