# PATH: apps/core/migrations/0002_property_links.py
# properties 앱과의 순환 참조 때문에 물건 관련 FK 는 분리해서 추가
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("core", "0001_initial"),
        ("properties", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="userpropertyunit",
            name="building_unit",
            field=models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="member_units",
                to="properties.buildingunit",
            ),
        ),
        migrations.AddField(
            model_name="memberinvite",
            name="owner",
            field=models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.CASCADE,
                related_name="invites",
                to="properties.owner",
            ),
        ),
    ]
