"""Secure login view.

``SecureLoginView`` wraps login serializer validation and returns the
project's api_response envelope on success/failure.
"""

import logging

from rest_framework import permissions, status
from rest_framework.exceptions import ValidationError
from rest_framework.views import APIView

from ..utils.response_utils import api_response
from ..utils.throttles import LoginRateThrottle

logger = logging.getLogger(__name__)


class SecureLoginView(APIView):
    """Email + password login that returns an access/refresh token pair."""

    throttle_classes = [LoginRateThrottle]
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        from api.serializers.serializers_auth import CustomTokenObtainPairSerializer, LoginSerializer

        serializer = LoginSerializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except ValidationError as e:
            detail = e.detail
            if isinstance(detail, dict):
                detail = next(iter(detail.values()))
            if isinstance(detail, list):
                detail = detail[0]
            return api_response(False, str(detail), {}, status.HTTP_401_UNAUTHORIZED)

        user = serializer.validated_data["user"]

        refresh = CustomTokenObtainPairSerializer.get_token(user)
        token = {
            "access": str(refresh.access_token),
            "refresh": str(refresh),
        }

        response_data = {
            "user": {
                "id": str(user.id),
                "email": user.email,
                "name": user.get_full_name,
                "role": user.role,
            },
            "tokens": token,
        }
        logger.info(f"User {user.email} logged in")
        return api_response(True, "Login successful", response_data, status.HTTP_200_OK)
