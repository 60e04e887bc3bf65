"""Serializer package exports for convenient imports in views and tests."""

from .serializers_auth import LoginSerializer, StaffRegistrationSerializer, UserProfileSerializer
from .serializers_inquiry import (FollowUpSerializer, InquirySerializer,
                                  TrackedFollowUpSerializer, TrackedInquirySerializer)
