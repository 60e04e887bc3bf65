"""Domain exceptions raised by the inquiry services and auth layer.

Every class is a DRF ``APIException`` so ``custom_exception_handler`` can
render it into the standard ``{success, message, data}`` envelope.
"""

from rest_framework import status
from rest_framework.exceptions import APIException, AuthenticationFailed, NotFound
from rest_framework.exceptions import ValidationError as DRFValidationError


class ValidationError(DRFValidationError):
    """Missing or invalid client input. ``detail`` carries field-level messages."""

    default_detail = "Invalid input."


class NotFoundError(NotFound):
    default_detail = "Inquiry not found"
    default_code = "not_found"


class ConflictError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "A record with this value already exists."
    default_code = "conflict"


class AuthError(AuthenticationFailed):
    """
    Authentication failure for admin routes.

    The code tells the client why (``not_authenticated``, ``token_not_valid``,
    ``token_expired``, ``user_not_found``) while the HTTP status stays 401.
    """

    default_detail = "You are not logged in! Please log in to get access."
    default_code = "not_authenticated"


class InternalError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Something went wrong. Please try again later."
    default_code = "internal_error"
