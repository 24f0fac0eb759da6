# apps/core/serializers.py
from rest_framework import serializers

from apps.core.models import Union, User


class UnionSerializer(serializers.ModelSerializer):
    has_own_channel = serializers.BooleanField(read_only=True)

    class Meta:
        model = Union
        fields = [
            "id",
            "name",
            "slug",
            "phone",
            "address",
            "business_hours",
            "business_type",
            "kakao_channel_id",
            "alimtalk_sender_key",
            "has_own_channel",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "has_own_channel", "created_at", "updated_at"]
        extra_kwargs = {"alimtalk_sender_key": {"write_only": True}}


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "phone",
            "union",
            "role",
            "user_status",
            "property_address",
            "property_dong",
            "property_ho",
        ]
        read_only_fields = fields
