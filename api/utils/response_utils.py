"""Response utilities and DRF exception handler helpers.

This module provides a canonical API response envelope and a DRF
exception handler that normalizes errors into the same {success, message,
data} structure used across the API.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.response import Response
from rest_framework.serializers import ValidationError
from rest_framework.views import exception_handler

from api.utils.exceptions import AuthError, InternalError

logger = logging.getLogger(__name__)


def api_response(success: bool, message: str, data=None, status_code=status.HTTP_200_OK):
    """
    Reusable API response wrapper for consistent frontend consumption.
    Args:
        success (bool): Indicates if the request was successful.
        message (str): Human-readable message for the frontend.
        data (dict or list, optional): The data payload. Defaults to empty dict.
        status_code (int, optional): HTTP status code. Defaults to 200.
    Returns:
        Response: DRF Response object with standardized structure.
    """
    if data is None:
        data = {}
    return Response({"success": success, "message": message, "data": data}, status=status_code)


def extract_clean_message(error_data):
    """Recursively extract the first human readable message from nested errors."""
    if isinstance(error_data, list) and error_data:
        return extract_clean_message(error_data[0])
    elif isinstance(error_data, dict) and error_data:
        # DRF puts the top-level message under "detail" when there is one.
        if "detail" in error_data:
            return extract_clean_message(error_data["detail"])
        first_value = next(iter(error_data.values()))
        return extract_clean_message(first_value)
    return str(error_data)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that formats all errors to match api_response format.
    """
    if isinstance(exc, NotAuthenticated):
        auth_header = getattr(exc, "auth_header", None)
        exc = AuthError()
        if auth_header:
            exc.auth_header = auth_header

    response = exception_handler(exc, context)

    if response is not None:
        if hasattr(exc, "detail"):
            message = extract_clean_message(exc.detail)
        else:
            message = extract_clean_message(response.data)

        data = response.data if isinstance(exc, ValidationError) else {}
        if isinstance(exc, AuthError):
            data = {"code": exc.get_codes()}

        envelope = api_response(False, message, data, response.status_code)
        # Keep WWW-Authenticate / Retry-After headers set by DRF.
        for header in ("WWW-Authenticate", "Retry-After"):
            if header in response:
                envelope[header] = response[header]
        return envelope

    view = context.get("view")
    logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}")
    return api_response(
        False,
        InternalError.default_detail,
        {},
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
