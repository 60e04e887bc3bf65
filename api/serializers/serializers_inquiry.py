"""Serializers for inquiries and follow-ups.

Input serializers are the explicit schema for each operation; output
serializers are the projections sent to clients. Field names on the wire are
camelCase (``referenceCode``, ``serviceType``, ``nextFollowUpDate``...).
"""

from datetime import datetime, time

from django.utils import timezone
from django.utils.dateparse import parse_date
from rest_framework import serializers

from api.models.models_inquiry import FollowUp, Inquiry


class FlexibleDateTimeField(serializers.DateTimeField):
    """DateTimeField that also accepts a bare ``YYYY-MM-DD`` date (midnight)."""

    def to_internal_value(self, value):
        try:
            return super().to_internal_value(value)
        except serializers.ValidationError:
            parsed = parse_date(value) if isinstance(value, str) else None
            if parsed is None:
                raise
            moment = datetime.combine(parsed, time.min)
            return timezone.make_aware(moment) if timezone.is_naive(moment) else moment


# -----------------------------
# Input schemas
# -----------------------------


class InquirySubmitSerializer(serializers.Serializer):
    """Public submission form."""

    name = serializers.CharField(
        max_length=150,
        error_messages={"required": "Name is required", "blank": "Name is required"},
    )
    phone = serializers.CharField(
        max_length=30,
        error_messages={"required": "Phone number is required", "blank": "Phone number is required"},
    )
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    serviceType = serializers.ChoiceField(
        choices=Inquiry.ServiceType.choices,
        source="service_type",
        error_messages={
            "required": "Service type is required",
            "invalid_choice": "Service type must be one of: " + ", ".join(Inquiry.ServiceType.values),
        },
    )
    message = serializers.CharField(
        error_messages={"required": "Message is required", "blank": "Message is required"},
    )

    def validate_email(self, value):
        return (value or "").strip().lower()


class InquiryStatusSerializer(serializers.Serializer):
    """Admin status change."""

    status = serializers.ChoiceField(
        choices=Inquiry.Status.choices,
        error_messages={
            "required": "Status is required",
            "null": "Status is required",
            "invalid_choice": "Invalid status. Must be one of: " + ", ".join(Inquiry.Status.values),
        },
    )


class FollowUpCreateSerializer(serializers.Serializer):
    """Admin follow-up note."""

    note = serializers.CharField(
        error_messages={
            "required": "Follow-up note is required",
            "blank": "Follow-up note is required",
            "null": "Follow-up note is required",
        },
    )
    nextFollowUpDate = FlexibleDateTimeField(
        source="next_follow_up_date",
        error_messages={
            "required": "Next follow-up date is required",
            "null": "Next follow-up date is required",
            "invalid": "Next follow-up date must be a valid date or datetime.",
        },
    )


# -----------------------------
# Output projections
# -----------------------------


class InquirySerializer(serializers.ModelSerializer):
    """Full inquiry record for staff."""

    referenceCode = serializers.CharField(source="reference_code", read_only=True)
    serviceType = serializers.CharField(source="service_type", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Inquiry
        fields = [
            "id",
            "referenceCode",
            "name",
            "phone",
            "email",
            "serviceType",
            "message",
            "status",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class FollowUpSerializer(serializers.ModelSerializer):
    """Full follow-up record for staff."""

    inquiryId = serializers.IntegerField(source="inquiry_id", read_only=True)
    nextFollowUpDate = serializers.DateTimeField(source="next_follow_up_date", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = FollowUp
        fields = ["id", "inquiryId", "note", "nextFollowUpDate", "createdAt", "updatedAt"]
        read_only_fields = fields


class TrackedInquirySerializer(serializers.ModelSerializer):
    """Public tracking view: no contact details, message or internal id."""

    referenceCode = serializers.CharField(source="reference_code", read_only=True)
    serviceType = serializers.CharField(source="service_type", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Inquiry
        fields = ["referenceCode", "name", "serviceType", "status", "createdAt", "updatedAt"]
        read_only_fields = fields


class TrackedFollowUpSerializer(serializers.ModelSerializer):
    """Public tracking view of a follow-up: just the note and when it was written."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = FollowUp
        fields = ["note", "createdAt"]
        read_only_fields = fields
