"""URL configuration for the API app.

Registers the admin inquiry viewset with a router and exposes the public
inquiry, auth and health endpoints.
"""

from django.urls import path
from rest_framework.routers import DefaultRouter

from api.views.views_auth import (
    CurrentUserProfileView,
    LogoutView,
    RefreshTokenView,
    StaffLoginView,
    StaffRegisterView,
)
from api.views.views_base import health_check
from api.views.views_inquiry import AdminInquiryViewSet, InquirySubmitView, InquiryTrackView

router = DefaultRouter(trailing_slash=True)
router.include_root_view = False

router.register(r"inquiries/admin", AdminInquiryViewSet, basename="admin-inquiry")


urlpatterns = [
    # =============================================
    # PUBLIC INQUIRY ENDPOINTS
    # =============================================
    path("inquiries/", InquirySubmitView.as_view(), name="inquiry-submit"),
    path("inquiries/track/<str:reference_code>/", InquiryTrackView.as_view(), name="inquiry-track"),
    # =============================================
    # AUTHENTICATION
    # =============================================
    path("auth/login/", StaffLoginView.as_view(), name="staff-login"),
    path("auth/register/", StaffRegisterView.as_view(), name="staff-register"),
    path("auth/token/refresh/", RefreshTokenView.as_view(), name="token-refresh"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("auth/me/", CurrentUserProfileView.as_view(), name="my-profile"),
    # =============================================
    # HEALTH
    # =============================================
    path("health/", health_check, name="health-check"),
] + router.urls
