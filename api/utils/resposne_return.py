from rest_framework import serializers


class APIResponseSerializer(serializers.Serializer):
    """Schema-only serializer describing the {success, message, data} envelope."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    data = serializers.JSONField(default=dict)
