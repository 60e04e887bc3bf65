"""Authentication and account API views.

Provides view classes for:
- staff login, token refresh and logout,
- admin-only creation of dashboard accounts,
- the current user's profile.
"""

import logging

from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework import generics, permissions, status
from rest_framework.generics import CreateAPIView
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView

from api.permissions import IsAdmin
from api.serializers.serializers_auth import (
    LoginSerializer,
    LogoutSerializer,
    StaffRegistrationSerializer,
    UserProfileSerializer,
)
from api.utils.response_utils import api_response
from api.utils.resposne_return import APIResponseSerializer
from api.utils.utility_auth import SecureLoginView

logger = logging.getLogger(__name__)

# =============================================
# AUTHENTICATION
# =============================================


@extend_schema(
    tags=["Authentication"],
    summary="Login a staff member",
    description="Logs in a staff, admin or superadmin user and returns JWT tokens.",
    request=LoginSerializer,
    responses=APIResponseSerializer,
    examples=[
        OpenApiExample(
            "Successful login",
            value={
                "success": True,
                "message": "Login successful",
                "data": {
                    "user": {
                        "id": "5d1f6c1e-0a4c-4b8e-9d1e-2f6f3c0b9a11",
                        "email": "admin@example.com",
                        "name": "Admin User",
                        "role": "admin",
                    },
                    "tokens": {
                        "access": "eIjM4In0.QXaECbo",
                        "refresh": "eIjM4In0.QXaECbo",
                    },
                },
            },
            response_only=True,
            status_codes=["200"],
        ),
        OpenApiExample(
            "Invalid credentials",
            value={"success": False, "message": "Invalid email or password.", "data": {}},
            response_only=True,
            status_codes=["401"],
        ),
    ],
)
class StaffLoginView(SecureLoginView):
    """Login view for dashboard users (staff, admin, superadmin)."""


@extend_schema(
    tags=["Authentication"],
    summary="Refresh an access token",
    responses=APIResponseSerializer,
)
class RefreshTokenView(TokenRefreshView):
    """SimpleJWT refresh wrapped in the standard response envelope."""

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        return api_response(True, "Token refreshed successfully.", response.data, response.status_code)


@extend_schema(
    tags=["Authentication"],
    summary="Logout",
    description="Blacklists the given refresh token.",
    request=LogoutSerializer,
    responses=APIResponseSerializer,
)
class LogoutView(APIView):
    """Logout user by blacklisting refresh token."""

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = LogoutSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            token = RefreshToken(serializer.validated_data["refresh"])
            token.blacklist()
        except TokenError:
            return api_response(False, "Token is invalid or expired.", {}, status.HTTP_400_BAD_REQUEST)
        logger.info(f"User {request.user.email} logged out")
        return api_response(True, "Logout successful.", {}, status.HTTP_200_OK)


# =============================================
# ACCOUNTS
# =============================================


@extend_schema(
    tags=["Authentication"],
    summary="Create a dashboard account",
    description="Admin only. Creates a staff or admin user.",
    request=StaffRegistrationSerializer,
    responses=APIResponseSerializer,
)
class StaffRegisterView(CreateAPIView):
    """Create a staff or admin account."""

    permission_classes = [IsAdmin]
    serializer_class = StaffRegistrationSerializer

    def create(self, request, *args, **kwargs):
        response = super().create(request, *args, **kwargs)
        logger.info(f"User {request.user.email} created account {response.data.get('email')}")
        return api_response(True, "User registered successfully.", response.data, response.status_code)


@extend_schema(
    tags=["Authentication"],
    summary="Get current user's profile",
    responses=APIResponseSerializer,
)
class CurrentUserProfileView(generics.RetrieveAPIView):
    """Retrieve the authenticated user's profile."""

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = UserProfileSerializer

    def get_object(self):
        return self.request.user

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return api_response(True, "Profile retrieved successfully.", serializer.data)
