"""Serializers for staff authentication and account management."""

import logging

from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers
from rest_framework.validators import UniqueValidator
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from ..models.models_auth import CustomUser

logger = logging.getLogger(__name__)


class LoginSerializer(serializers.Serializer):
    """
    Serializer for staff login. Validates credentials and allowed roles.
    """

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})
    allowed_roles = CustomUser.STAFF_ROLES

    def validate(self, attrs):
        """
        Authenticate user and check if active and allowed role.
        """
        email = attrs.get("email", "").strip().lower()
        password = attrs.get("password")
        user = authenticate(username=email, password=password)

        if not user:
            logger.warning(f"Failed login attempt for {email}")
            raise serializers.ValidationError({"detail": "Invalid email or password."})
        # Block login if the account was deactivated or explicitly disabled by an admin
        if not user.is_active or not getattr(user, "is_enabled", True):
            raise serializers.ValidationError({"detail": "User account is disabled."})

        if self.allowed_roles is not None and getattr(user, "role", None) not in self.allowed_roles:
            raise serializers.ValidationError({"detail": "User does not have permission to login here."})

        attrs["user"] = user
        return attrs


class LogoutSerializer(serializers.Serializer):
    """Serializer for logout requests (expects refresh token)."""

    refresh = serializers.CharField(help_text="The refresh token to blacklist", write_only=True)


class StaffRegistrationSerializer(serializers.ModelSerializer):
    """Admin-only creation of dashboard accounts."""

    password = serializers.CharField(write_only=True, required=True, style={"input_type": "password"}, min_length=8)
    email = serializers.EmailField(
        validators=[
            UniqueValidator(
                queryset=CustomUser.objects.all(),
                message="This email is already registered.",
                lookup="iexact",
            )
        ]
    )
    role = serializers.ChoiceField(
        choices=[CustomUser.Role.STAFF, CustomUser.Role.ADMIN],
        default=CustomUser.Role.STAFF,
    )

    class Meta:
        model = CustomUser
        fields = ["id", "email", "password", "first_name", "last_name", "role"]
        read_only_fields = ["id"]

    def validate_first_name(self, value):
        cleaned = value.strip()
        if not cleaned:
            raise serializers.ValidationError("First name is required.")
        return cleaned

    def validate_password(self, value):
        validate_password(value)
        return value

    def create(self, validated_data):
        password = validated_data.pop("password")
        return CustomUser.objects.create_user(password=password, is_active=True, **validated_data)


class UserProfileSerializer(serializers.ModelSerializer):
    """Read-only view of the logged-in user."""

    full_name = serializers.CharField(source="get_full_name", read_only=True)

    class Meta:
        model = CustomUser
        fields = ["id", "email", "first_name", "last_name", "full_name", "role", "date_joined"]
        read_only_fields = fields


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Custom Token serializer referenced by SIMPLE_JWT setting.

    Adds a `role` claim to the token payload.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = getattr(user, "role", None)
        return token
