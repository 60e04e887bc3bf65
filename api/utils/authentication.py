"""Bearer JWT authentication for staff routes.

``StaffJWTAuthentication`` tells the client *why* a token was rejected
(malformed, expired, or pointing to a removed user) while every case still
maps to a 401.

DRF loads this class while ``rest_framework.views`` is still being imported,
so this module must not import views (directly or through other api utils).
"""

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import ExpiredTokenError, TokenError
from rest_framework_simplejwt.settings import api_settings

from api.utils.exceptions import AuthError

INVALID_TOKEN_MESSAGE = "Invalid token. Please log in again!"
EXPIRED_TOKEN_MESSAGE = "Your token has expired! Please log in again."
USER_GONE_MESSAGE = "The user belonging to this token does no longer exist."


class StaffJWTAuthentication(JWTAuthentication):
    """JWTAuthentication with distinct messages for malformed, expired and orphaned tokens."""

    def get_raw_token(self, header):
        try:
            return super().get_raw_token(header)
        except AuthenticationFailed:
            raise AuthError(INVALID_TOKEN_MESSAGE, code="token_not_valid")

    def get_validated_token(self, raw_token):
        expired = False
        for AuthToken in api_settings.AUTH_TOKEN_CLASSES:
            try:
                return AuthToken(raw_token)
            except ExpiredTokenError:
                expired = True
            except TokenError:
                continue

        if expired:
            raise AuthError(EXPIRED_TOKEN_MESSAGE, code="token_expired")
        raise AuthError(INVALID_TOKEN_MESSAGE, code="token_not_valid")

    def get_user(self, validated_token):
        try:
            return super().get_user(validated_token)
        except AuthenticationFailed as exc:
            if "user_not_found" in str(exc.get_codes()):
                raise AuthError(USER_GONE_MESSAGE, code="user_not_found")
            if "user_inactive" in str(exc.get_codes()):
                raise AuthError("User account is disabled.", code="user_inactive")
            raise AuthError(INVALID_TOKEN_MESSAGE, code="token_not_valid")
