"""Inquiry API views.

Provides:
- public inquiry submission and tracking by reference code,
- the staff-only admin viewset (list, detail, status update, follow-ups).

Views stay thin: validation and persistence live in ``InquiryService``.
"""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.views import APIView

from api.permissions import IsStaff
from api.serializers.serializers_inquiry import (
    FollowUpCreateSerializer,
    FollowUpSerializer,
    InquirySerializer,
    InquiryStatusSerializer,
    InquirySubmitSerializer,
)
from api.services.inquiry_service import InquiryService
from api.utils.exceptions import ValidationError
from api.utils.response_utils import api_response
from api.utils.resposne_return import APIResponseSerializer
from api.utils.throttles import InquirySubmitThrottle


def request_body(request):
    """Return the parsed body, rejecting anything that is not a JSON object."""
    if not isinstance(request.data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return request.data


# =============================================
# PUBLIC ENDPOINTS
# =============================================


@extend_schema(
    tags=["Inquiries"],
    summary="Submit an inquiry",
    description="Public form submission. Returns the issued reference code used for tracking.",
    request=InquirySubmitSerializer,
    responses={201: APIResponseSerializer, 400: APIResponseSerializer},
    examples=[
        OpenApiExample(
            "Submission",
            value={"name": "Ann", "phone": "555", "serviceType": "Consulting", "message": "help"},
            request_only=True,
        ),
        OpenApiExample(
            "Created",
            value={
                "success": True,
                "message": "Inquiry submitted successfully!",
                "data": {"referenceCode": "INQ17000000000001234", "inquiry": {"status": "New"}},
            },
            response_only=True,
            status_codes=["201"],
        ),
    ],
)
class InquirySubmitView(APIView):
    """Create an inquiry from the public form."""

    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    throttle_classes = [InquirySubmitThrottle]

    def post(self, request, *args, **kwargs):
        inquiry = InquiryService().create_inquiry(request.data)
        data = {
            "referenceCode": inquiry.reference_code,
            "inquiry": InquirySerializer(inquiry).data,
        }
        return api_response(True, "Inquiry submitted successfully!", data, status.HTTP_201_CREATED)


@extend_schema(
    tags=["Inquiries"],
    summary="Track an inquiry",
    description="Public status lookup by reference code. Contact details and the message are never returned.",
    responses={200: APIResponseSerializer, 404: APIResponseSerializer},
)
class InquiryTrackView(APIView):
    """Look up an inquiry's progress by its reference code."""

    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def get(self, request, reference_code=None, *args, **kwargs):
        data = InquiryService().track_by_reference_code(reference_code)
        return api_response(True, "Inquiry retrieved successfully", data)


# =============================================
# ADMIN ENDPOINTS
# =============================================


class AdminInquiryViewSet(viewsets.ViewSet):
    """
    Staff-only inquiry management.

    The pk in the URL is the inquiry's integer id; anything that is not a
    known id (including malformed values) is reported as 404.
    """

    permission_classes = [IsStaff]
    service_class = InquiryService

    def get_service(self):
        return self.service_class()

    @extend_schema(
        tags=["Inquiries (Admin)"],
        summary="List inquiries",
        description="Newest first, filtered and paginated with page/limit.",
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("limit", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("status", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("phone", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("referenceCode", OpenApiTypes.STR, OpenApiParameter.QUERY),
        ],
        responses=APIResponseSerializer,
    )
    def list(self, request):
        params = request.query_params
        inquiries, pagination = self.get_service().list_inquiries(
            filters=params,
            page=params.get("page"),
            limit=params.get("limit"),
        )
        data = {
            "inquiries": InquirySerializer(inquiries, many=True).data,
            "pagination": pagination,
        }
        return api_response(True, "Inquiries retrieved successfully", data)

    @extend_schema(
        tags=["Inquiries (Admin)"],
        summary="Inquiry detail",
        description="Full inquiry with all follow-ups, newest first.",
        responses=APIResponseSerializer,
    )
    def retrieve(self, request, pk=None):
        inquiry, follow_ups = self.get_service().get_inquiry_with_follow_ups(pk)
        data = {
            "inquiry": InquirySerializer(inquiry).data,
            "followUps": FollowUpSerializer(follow_ups, many=True).data,
        }
        return api_response(True, "Inquiry retrieved successfully", data)

    @extend_schema(
        tags=["Inquiries (Admin)"],
        summary="Update inquiry status",
        request=InquiryStatusSerializer,
        responses=APIResponseSerializer,
    )
    def update(self, request, pk=None):
        inquiry = self.get_service().update_status(pk, request_body(request).get("status"))
        return api_response(True, "Inquiry status updated successfully", {"inquiry": InquirySerializer(inquiry).data})

    @extend_schema(
        tags=["Inquiries (Admin)"],
        summary="Update inquiry status",
        request=InquiryStatusSerializer,
        responses=APIResponseSerializer,
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(
        tags=["Inquiries (Admin)"],
        summary="Add a follow-up",
        description="Append a note and next follow-up date. The inquiry status is not changed.",
        request=FollowUpCreateSerializer,
        responses={201: APIResponseSerializer},
    )
    @action(detail=True, methods=["post"], url_path="followups")
    def followups(self, request, pk=None):
        body = request_body(request)
        follow_up = self.get_service().add_follow_up(
            pk,
            body.get("note"),
            body.get("nextFollowUpDate"),
        )
        return api_response(
            True,
            "Follow-up added successfully",
            {"followUp": FollowUpSerializer(follow_up).data},
            status.HTTP_201_CREATED,
        )
