"""Service-level endpoints: health check and the JSON 404 handler."""

from django.http import JsonResponse
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import permissions
from rest_framework.decorators import api_view, authentication_classes, permission_classes

from api.utils.response_utils import api_response
from api.utils.resposne_return import APIResponseSerializer


@extend_schema(tags=["Health"], summary="Health check", responses=APIResponseSerializer)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([permissions.AllowAny])
def health_check(request):
    data = {"status": "ok", "timestamp": timezone.now().isoformat()}
    return api_response(True, "Mini CRM API is running!", data)


def api_not_found(request, exception=None):
    """handler404: unknown routes get the JSON envelope instead of an HTML page."""
    return JsonResponse(
        {"success": False, "message": f"Can't find {request.path} on this server!", "data": {}},
        status=404,
    )
