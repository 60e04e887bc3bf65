"""Inquiry lifecycle, query and tracking operations.

Views stay thin and call into ``InquiryService``; the service owns validation,
reference code issuance, status changes, follow-ups, filtered listing and the
public tracking projection. The database alias is injected so callers (and
tests) choose which store the service talks to.
"""

import logging

from django.db import DEFAULT_DB_ALIAS

from api.models.models_inquiry import FollowUp, Inquiry, ReferenceCodeConflict
from api.serializers.serializers_inquiry import (
    FollowUpCreateSerializer,
    InquiryStatusSerializer,
    InquirySubmitSerializer,
    TrackedFollowUpSerializer,
    TrackedInquirySerializer,
)
from api.utils.exceptions import ConflictError, NotFoundError, ValidationError
from api.utils.filters_utils import InquiryFilter
from api.utils.pagination import PageLimitPagination

logger = logging.getLogger(__name__)


def _validated(serializer_class, data):
    serializer = serializer_class(data=data if data is not None else {})
    if not serializer.is_valid():
        raise ValidationError(serializer.errors)
    return serializer.validated_data


class InquiryService:
    """Operations over the Inquiry and FollowUp stores."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def inquiries(self):
        return Inquiry.objects.db_manager(self.using)

    @property
    def follow_ups(self):
        return FollowUp.objects.db_manager(self.using)

    def _get_inquiry(self, inquiry_id):
        try:
            return self.inquiries.get(pk=inquiry_id)
        except (Inquiry.DoesNotExist, ValueError, TypeError):
            raise NotFoundError("Inquiry not found")

    # ----------------------------
    # Creation
    # ----------------------------

    def create_inquiry(self, data, reference_code=None):
        """
        Validate a submission and store it with a freshly issued reference code.

        ``reference_code`` is only for internal callers such as the seed
        command; a code that already exists raises ``ConflictError``.
        """
        fields = _validated(InquirySubmitSerializer, data)
        try:
            inquiry = self.inquiries.create_inquiry(reference_code=reference_code, **fields)
        except ReferenceCodeConflict as exc:
            logger.error(f"Could not issue a unique reference code after {exc.attempts} attempt(s): {exc}")
            raise ConflictError({"referenceCode": f"Reference code {exc.reference_code} already exists."})

        logger.info(f"Inquiry {inquiry.reference_code} created for service '{inquiry.service_type}'")
        return inquiry

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def update_status(self, inquiry_id, new_status):
        """Set the status of an inquiry. Any member of the enumeration may follow any other."""
        status_value = _validated(InquiryStatusSerializer, {"status": new_status})["status"]
        inquiry = self._get_inquiry(inquiry_id)

        previous = inquiry.status
        inquiry.status = status_value
        inquiry.save(using=self.using, update_fields=["status", "updated_at"])
        logger.info(f"Inquiry {inquiry.reference_code} status changed: {previous} -> {status_value}")
        return inquiry

    def add_follow_up(self, inquiry_id, note, next_follow_up_date):
        """Append a follow-up note to an inquiry. The inquiry's status is left as is."""
        fields = _validated(
            FollowUpCreateSerializer,
            {"note": note, "nextFollowUpDate": next_follow_up_date},
        )
        inquiry = self._get_inquiry(inquiry_id)

        follow_up = self.follow_ups.create(inquiry=inquiry, **fields)
        logger.info(f"Follow-up {follow_up.pk} added to inquiry {inquiry.reference_code}")
        return follow_up

    # ----------------------------
    # Queries
    # ----------------------------

    def list_inquiries(self, filters=None, page=None, limit=None):
        """
        Filtered, newest-first, page/limit paginated listing.

        Returns ``(inquiries, pagination)`` where ``pagination`` holds
        ``currentPage``, ``limit``, ``totalPages``, ``totalInquiries``,
        ``hasNextPage`` and ``hasPrevPage``.
        """
        queryset = self.inquiries.all().order_by("-created_at", "-id")
        filterset = InquiryFilter(data=filters or {}, queryset=queryset)
        paginator = PageLimitPagination(page=page, limit=limit)
        inquiries = paginator.paginate_queryset(filterset.qs)
        return inquiries, paginator.get_pagination_data()

    def get_inquiry_with_follow_ups(self, inquiry_id):
        """Full inquiry plus all of its follow-ups, newest first."""
        inquiry = self._get_inquiry(inquiry_id)
        follow_ups = list(inquiry.follow_ups.using(self.using).order_by("-created_at", "-id"))
        return inquiry, follow_ups

    def track_by_reference_code(self, reference_code):
        """
        Public lookup by reference code.

        Returns a dict with the restricted ``inquiry`` projection and its
        ``followUps`` reduced to note and creation time.
        """
        code = (reference_code or "").strip().upper()
        if not code:
            raise ValidationError({"referenceCode": ["Reference code is required"]})

        try:
            inquiry = self.inquiries.get(reference_code=code)
        except Inquiry.DoesNotExist:
            raise NotFoundError("No inquiry found with this reference code")

        follow_ups = inquiry.follow_ups.using(self.using).order_by("-created_at", "-id")
        return {
            "inquiry": TrackedInquirySerializer(inquiry).data,
            "followUps": TrackedFollowUpSerializer(follow_ups, many=True).data,
        }
